"""
Editor Package

Live editing state for one document: the element store and its history,
the selection and its transforms, and the document-level facade.
"""

from .config import PAGE_SIZES, EditorConfig, load_editor_config
from .document import DocumentEditor, SaveStatus
from .history import HistoryManager
from .selection import SelectionSet
from .store import ElementStore
from .transform import AlignMode, Axis

__all__ = [
    "PAGE_SIZES",
    "EditorConfig",
    "load_editor_config",
    "DocumentEditor",
    "SaveStatus",
    "HistoryManager",
    "SelectionSet",
    "ElementStore",
    "AlignMode",
    "Axis",
]
