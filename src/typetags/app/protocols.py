"""Protocol definitions for typetags.

Services depend on these interfaces rather than on concrete store classes,
so tests can pass in-memory fakes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SettingProtocol(Protocol):
    """A single persisted string -> string mapping.

    Both methods may raise PersistenceUnavailableError when the backing
    store is unreachable or not yet initialized.
    """

    def get(self) -> dict[str, str]:
        """Get the stored mapping ({} if never set)."""
        ...

    def set(self, value: dict[str, str]) -> None:
        """Replace the stored mapping."""
        ...
