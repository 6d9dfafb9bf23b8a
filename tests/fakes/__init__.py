"""Test fakes for testing without a real settings database.

Example:
    from tests.fakes import InMemorySetting

    registry = CustomTypeRegistry(create_default_graph(), InMemorySetting())
"""

from .settings import InMemorySetting, RawSetting, UnavailableSetting

__all__ = [
    "InMemorySetting",
    "RawSetting",
    "UnavailableSetting",
]
