"""
Declarative field validation for inbound records.

Rules are plain data: a field name, a rule type and its parameters. A
SchemaValidator evaluates a rule table against a record in one pass and
reports every violation it finds, so a client can fix all problems at once.
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from functools import lru_cache
from typing import Any, Callable, List, Mapping, Optional, Pattern, Sequence, Union

from pydantic import EmailStr, HttpUrl, TypeAdapter, ValidationError

from src.utils.errors import ValidationFailedError, Violation


class RuleType(str, Enum):
    """Types of validation rules."""

    REQUIRED = "required"
    LENGTH = "length"
    RANGE = "range"
    SCALE = "scale"
    PATTERN = "pattern"
    EMAIL = "email"
    URL = "url"


@lru_cache(maxsize=None)
def email_adapter() -> TypeAdapter:
    return TypeAdapter(EmailStr)


@lru_cache(maxsize=None)
def http_url_adapter() -> TypeAdapter:
    return TypeAdapter(HttpUrl)


def _conforms(adapter: TypeAdapter, value: Any) -> bool:
    """Check a value against a pydantic type without coercing non-strings."""
    if not isinstance(value, str):
        return False
    try:
        adapter.validate_python(value)
    except ValidationError:
        return False
    return True


@lru_cache(maxsize=None)
def postal_code_pattern() -> Pattern[str]:
    """Postal code pattern (``123-4567`` or ``1234567``), compiled on first use."""
    return re.compile(r"^\d{3}-?\d{4}")


PatternSource = Union[Pattern[str], Callable[[], Pattern[str]]]


def _as_decimal(value: Any) -> Optional[Decimal]:
    """Convert a numeric value to an exact Decimal, or None if not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        # str() keeps the shortest repr, so 0.1 stays 0.1 and not 0.1000000000000000055...
        return Decimal(str(value))
    if isinstance(value, str):
        try:
            return Decimal(value)
        except InvalidOperation:
            return None
    return None


@dataclass(frozen=True)
class FieldRule:
    """A single validation rule bound to one field."""

    field_name: str
    rule_type: RuleType
    parameters: Mapping[str, Any] = field(default_factory=dict)
    message: Optional[str] = None

    def check(self, value: Any) -> Optional[str]:
        """Return a violation message, or None if the value passes."""
        if self.rule_type is RuleType.REQUIRED:
            return None if value is not None else self._message("is required.")

        # Absent optional values are not checked further
        if value is None:
            return None

        checker = getattr(self, f"_check_{self.rule_type.value}")
        return checker(value)

    def _message(self, default: str) -> str:
        return self.message or default

    def _check_length(self, value: Any) -> Optional[str]:
        min_length = self.parameters.get("min")
        max_length = self.parameters.get("max")
        size = len(str(value))
        if (min_length is not None and size < min_length) or (
            max_length is not None and size > max_length
        ):
            return self._message(f"must be {min_length} to {max_length} characters.")
        return None

    def _check_range(self, value: Any) -> Optional[str]:
        minimum = self.parameters.get("min")
        maximum = self.parameters.get("max")
        default = f"must be in the range {minimum} to {maximum}."

        number = _as_decimal(value)
        if number is None or not number.is_finite():
            return self._message(default)
        if minimum is not None and number < Decimal(str(minimum)):
            return self._message(default)
        if maximum is not None and number > Decimal(str(maximum)):
            return self._message(default)
        return None

    def _check_scale(self, value: Any) -> Optional[str]:
        places = self.parameters["places"]
        number = _as_decimal(value)
        if number is None or not number.is_finite():
            return self._message(f"must be a number with at most {places} decimal places.")
        if number.as_tuple().exponent < -places:
            return self._message(f"must have at most {places} decimal places.")
        return None

    def _check_pattern(self, value: Any) -> Optional[str]:
        source: PatternSource = self.parameters["pattern"]
        compiled = source() if callable(source) else source
        if not isinstance(value, str) or compiled.match(value) is None:
            return self._message("format is invalid.")
        return None

    def _check_email(self, value: Any) -> Optional[str]:
        if not _conforms(email_adapter(), value):
            return self._message("is not a valid email address.")
        return None

    def _check_url(self, value: Any) -> Optional[str]:
        if not _conforms(http_url_adapter(), value):
            return self._message("is not a valid URL.")
        return None


# =============================================================================
# Rule Builders
# =============================================================================

def required(field_name: str, message: Optional[str] = None) -> FieldRule:
    return FieldRule(field_name, RuleType.REQUIRED, message=message)


def length(
    field_name: str,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    message: Optional[str] = None,
) -> FieldRule:
    return FieldRule(
        field_name, RuleType.LENGTH, {"min": min_length, "max": max_length}, message
    )


def value_range(
    field_name: str,
    minimum: Union[int, str, Decimal, None] = None,
    maximum: Union[int, str, Decimal, None] = None,
    message: Optional[str] = None,
) -> FieldRule:
    return FieldRule(
        field_name, RuleType.RANGE, {"min": minimum, "max": maximum}, message
    )


def scale(field_name: str, places: int, message: Optional[str] = None) -> FieldRule:
    return FieldRule(field_name, RuleType.SCALE, {"places": places}, message)


def pattern(field_name: str, source: PatternSource, message: Optional[str] = None) -> FieldRule:
    return FieldRule(field_name, RuleType.PATTERN, {"pattern": source}, message)


def email(field_name: str, message: Optional[str] = None) -> FieldRule:
    return FieldRule(field_name, RuleType.EMAIL, message=message)


def url(field_name: str, message: Optional[str] = None) -> FieldRule:
    return FieldRule(field_name, RuleType.URL, message=message)


# =============================================================================
# Validator
# =============================================================================

class SchemaValidator:
    """Evaluates a rule table against records. Stateless and store-free."""

    def __init__(self, rules: Sequence[FieldRule]):
        self.rules = tuple(rules)

    def validate(self, record: Mapping[str, Any]) -> List[Violation]:
        """Collect every violation, in rule table order."""
        violations: List[Violation] = []

        for rule in self.rules:
            message = rule.check(record.get(rule.field_name))
            if message is None:
                continue

            violations.append(Violation(
                field=rule.field_name,
                rule=rule.rule_type.value,
                message=message,
            ))

        return violations

    def ensure_valid(self, record: Mapping[str, Any]) -> None:
        """Raise ValidationFailedError listing every violation, if any."""
        violations = self.validate(record)
        if violations:
            raise ValidationFailedError(violations)
