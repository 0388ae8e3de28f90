"""Centralized package information for typso.

This module provides a single source of truth for the typso package name
and version.
"""

from importlib.metadata import PackageNotFoundError, version

__all__ = ["PACKAGE_NAME", "PACKAGE_VERSION"]

# Package name constant
PACKAGE_NAME = "typso"

try:
    PACKAGE_VERSION = version(PACKAGE_NAME)
except PackageNotFoundError:
    # Running from a source checkout
    PACKAGE_VERSION = "unknown"
