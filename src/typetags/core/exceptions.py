"""Custom exceptions for typetags."""


class TypeTagsError(Exception):
    """Base exception for all typetags errors."""

    pass


class InvalidHierarchyError(TypeTagsError):
    """An edge would corrupt the type hierarchy."""

    def __init__(self, child: object, parent: object, reason: str):
        """Initialize exception with the offending edge.

        Args:
            child: Child tag of the rejected edge.
            parent: Parent tag of the rejected edge.
            reason: Why the edge was rejected.
        """
        self.child = child
        self.parent = parent
        self.reason = reason
        super().__init__(f"Invalid edge {child!r} -> {parent!r}: {reason}")


class PersistenceUnavailableError(TypeTagsError):
    """The settings store cannot be reached or is not initialized."""

    pass


class DatabaseError(TypeTagsError):
    """Database operation failed."""

    pass


class SettingValueError(TypeTagsError):
    """A persisted setting holds a value of the wrong shape."""

    pass
