"""Validation result value objects"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ValidationCode(str, Enum):
    """Reason a single field was rejected"""

    REQUIRED = "required"
    FORMAT_INVALID = "format_invalid"
    TOO_SHORT = "too_short"
    MISSING_UPPERCASE = "missing_uppercase"
    MISSING_LOWERCASE = "missing_lowercase"
    MISSING_DIGIT = "missing_digit"
    MISMATCH = "mismatch"


@dataclass(frozen=True)
class FieldError:
    """Error attributed to one form field"""

    field: str
    code: ValidationCode
    message: str

    def to_dict(self) -> dict[str, str]:
        """Wire representation (code is internal)"""
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a whole form"""

    errors: tuple[FieldError, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Valid iff no field failed"""
        return not self.errors

    def error_for(self, field_name: str) -> Optional[FieldError]:
        """First error reported for a field, if any"""
        for error in self.errors:
            if error.field == field_name:
                return error
        return None
