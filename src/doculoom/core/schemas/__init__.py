"""
Schemas Package

JSON schema definitions and validation utilities for design payloads.
"""

from .validator import (
    validate_design,
    validate_elements,
    ValidationError,
    DESIGN_SCHEMA_VERSION,
)

__all__ = [
    "validate_design",
    "validate_elements",
    "ValidationError",
    "DESIGN_SCHEMA_VERSION",
]
