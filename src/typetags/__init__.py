"""Hierarchical type tags with runtime-registered custom types."""

__version__ = "1.0.0"
