# textsplit/config/__init__.py
"""
Configuration module for splitter settings.
Provides a default SplitterSettings instance.
"""

from .base import SplitterSettings

# Instantiate settings once and export
settings = SplitterSettings()

__all__ = ["SplitterSettings", "settings"]
