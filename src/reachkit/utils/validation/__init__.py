"""
Validation package for the reachability toolkit.

This package provides validation results and JSON schema checks for graph
documents.
"""

from .base import ValidationResult
from .schema import DOCUMENT_SCHEMAS, SchemaValidator

__all__ = [
    "DOCUMENT_SCHEMAS",
    "SchemaValidator",
    "ValidationResult",
]
