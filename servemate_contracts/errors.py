"""
Structured validation failures.

Every failed parse raises exactly one ContractViolation carrying ALL
violated fields (never first-error-only). Nothing else in the hosting
application raises this type, so callers can catch it to build a 4xx
response:

    try:
        order = OrderCreate.parse(request_body)
    except ContractViolation as e:
        return validation_error_response(e)

Violation kinds:
- type_mismatch:          runtime type incompatible, no coercion applies
- constraint_violation:   right type, violates a bound/format
- enum_membership:        not a member of the field's closed set
- cross_field:            object-level refinement failed (after field checks)
- unparseable_composite:  date or delimited string could not be decomposed
- required_field_missing: required field absent
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Sequence, Tuple, Union

from pydantic import ValidationError
from pydantic_core import PydanticCustomError


class ViolationKind(str, Enum):
    TYPE_MISMATCH = 'type_mismatch'
    CONSTRAINT = 'constraint_violation'
    ENUM_MEMBERSHIP = 'enum_membership'
    CROSS_FIELD = 'cross_field'
    UNPARSEABLE = 'unparseable_composite'
    MISSING = 'required_field_missing'


# pydantic-core error types -> violation kind (anything unlisted is a type mismatch)
_KIND_BY_ERROR_TYPE: Dict[str, ViolationKind] = {
    'missing': ViolationKind.MISSING,
    'enum': ViolationKind.ENUM_MEMBERSHIP,
    'literal_error': ViolationKind.ENUM_MEMBERSHIP,
    'greater_than': ViolationKind.CONSTRAINT,
    'greater_than_equal': ViolationKind.CONSTRAINT,
    'less_than': ViolationKind.CONSTRAINT,
    'less_than_equal': ViolationKind.CONSTRAINT,
    'multiple_of': ViolationKind.CONSTRAINT,
    'finite_number': ViolationKind.CONSTRAINT,
    'string_too_short': ViolationKind.CONSTRAINT,
    'string_too_long': ViolationKind.CONSTRAINT,
    'string_pattern_mismatch': ViolationKind.CONSTRAINT,
    'too_short': ViolationKind.CONSTRAINT,
    'too_long': ViolationKind.CONSTRAINT,
    'value_error': ViolationKind.CONSTRAINT,  # e.g. invalid email address
}

_PRIMITIVES = (str, int, float, bool)


def cross_field_error(message: str) -> PydanticCustomError:
    """Error for object-level refinements (raised from after-validators)."""
    return PydanticCustomError(ViolationKind.CROSS_FIELD.value, message)


def unparseable_error(message: str, **ctx: Any) -> PydanticCustomError:
    """Error for date/delimited strings that cannot be decomposed."""
    return PydanticCustomError(ViolationKind.UNPARSEABLE.value, message, ctx or None)


def classify(error_type: str) -> ViolationKind:
    """Map a pydantic-core error type onto a violation kind."""
    try:
        return ViolationKind(error_type)
    except ValueError:
        return _KIND_BY_ERROR_TYPE.get(error_type, ViolationKind.TYPE_MISMATCH)


def format_path(loc: Sequence[Union[str, int]]) -> str:
    """('foodItems', 0, 'price') -> 'foodItems.0.price'. Object-level -> ''."""
    return '.'.join(str(part) for part in loc)


@dataclass
class Violation:
    """A single violated rule at one location of the input."""
    path: str
    kind: ViolationKind
    message: str
    received: Any = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'path': self.path,
            'error': self.kind.value,
            'message': self.message,
        }
        if isinstance(self.received, _PRIMITIVES):
            data['received'] = self.received
        return data


@dataclass
class ContractViolation(Exception):
    """Raised when a payload does not satisfy a schema."""
    message: str
    schema: str
    violations: List[Violation] = field(default_factory=list)

    def __str__(self):
        return self.message

    @classmethod
    def from_pydantic(cls, exc: ValidationError, schema: str) -> 'ContractViolation':
        violations = []
        for err in exc.errors(include_url=False):
            kind = classify(err['type'])
            received = None if kind in (ViolationKind.MISSING, ViolationKind.CROSS_FIELD) else err.get('input')
            violations.append(Violation(
                path=format_path(err['loc']),
                kind=kind,
                message=err['msg'],
                received=received,
            ))
        return cls(
            message=f"{len(violations)} validation error(s) for {schema}",
            schema=schema,
            violations=violations,
        )

    @property
    def details(self) -> Dict[str, Any]:
        return {"violations": [v.to_dict() for v in self.violations]}

    def paths(self) -> List[str]:
        return [v.path for v in self.violations]

    def kinds(self) -> List[ViolationKind]:
        return [v.kind for v in self.violations]

    def for_path(self, path: str) -> List[Violation]:
        return [v for v in self.violations if v.path == path]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict for JSON serialization."""
        return {
            "message": self.message,
            "schema": self.schema,
            "details": self.details,
        }


def validation_error_response(error: ContractViolation, status_code: int = 400) -> Tuple[Dict[str, Any], int]:
    """
    Convert ContractViolation to a structured 4xx response tuple.

    Returns:
        Tuple of (dict, status_code) suitable for any JSON framework
    """
    body: Dict[str, Any] = {
        "error": str(error),
        "type": "validation_error",
        "schema": error.schema,
        "fields": {},
    }
    for violation in error.violations:
        body["fields"].setdefault(violation.path, []).append(violation.message)
    return body, status_code
