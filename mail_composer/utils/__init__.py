"""Utility functions"""

from .path_utils import ensure_directory_exists, resolve_path

__all__ = ["ensure_directory_exists", "resolve_path"]
