"""Application composition root.

This module provides:
- Protocol definitions for injectable dependencies (protocols.py)
- The TypeSystem class for lifecycle management
- create_type_system for building a configured TypeSystem
"""

from .application import TypeSystem
from .factory import create_type_system
from .protocols import SettingProtocol

__all__ = [
    "TypeSystem",
    "create_type_system",
    "SettingProtocol",
]
