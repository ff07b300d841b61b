"""Rule evaluation and result aggregation for structured data.

This package intentionally contains only domain logic:
- Rules are predicates plus messages; field runners bind them to a key.
- Every run returns a ValidationStatus; nothing raises out of a rule or field.
"""

from .config import EngineConfig, ValidatorConfigBase
from .field import FieldValidations
from .models import (
    Severity,
    ValidationReport,
    ValidationStatus,
    ValidatorResult,
)
from .registry import ValidatorRegistry, register_validator, registry
from .rule import Rule
from .runner import ValidatorRunner
from .validator import BaseValidator

__all__ = [
    "BaseValidator",
    "EngineConfig",
    "FieldValidations",
    "Rule",
    "Severity",
    "ValidationReport",
    "ValidationStatus",
    "ValidatorConfigBase",
    "ValidatorRegistry",
    "ValidatorResult",
    "ValidatorRunner",
    "register_validator",
    "registry",
]
