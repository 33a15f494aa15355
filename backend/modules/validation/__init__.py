"""
modules/validation package — data quality guards before any store/DB write.
"""
from modules.validation.ingestion_validator import (
    ValidationResult,
    validate_attraction,
    filter_valid,
    unique_by_id,
)

__all__ = [
    "ValidationResult",
    "validate_attraction",
    "filter_valid",
    "unique_by_id",
]
