"""
Persistence Package

Design payloads and debounced auto-save.
"""

from .autosave import AutoSaver
from .payload import (
    apply_design_payload,
    build_design_payload,
    read_design_file,
    write_design_file,
)

__all__ = [
    "AutoSaver",
    "apply_design_payload",
    "build_design_payload",
    "read_design_file",
    "write_design_file",
]
