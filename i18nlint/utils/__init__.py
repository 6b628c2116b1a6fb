"""Utility helpers for the linter."""

from .fileio import read_yaml_file, read_text_file
from .code import iter_template_files

__all__ = [
    "read_yaml_file",
    "read_text_file",
    "iter_template_files",
]
