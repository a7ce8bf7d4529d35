"""Copy and serialization helpers for core models."""

from .cloning import clone_element, clone_elements
from .serialization import (
    deserialize_element,
    deserialize_elements,
    serialize_element,
    serialize_elements,
)

__all__ = [
    "clone_element",
    "clone_elements",
    "deserialize_element",
    "deserialize_elements",
    "serialize_element",
    "serialize_elements",
]
