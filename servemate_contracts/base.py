"""
Base Pydantic model for all contract schemas.

Key features:
- frozen=True: Immutable after normalization (prevents downstream mutation)
- str_strip_whitespace=True: Strip whitespace from strings
- populate_by_name=True: Accept both camelCase wire names and snake_case
- extra='ignore': Undeclared keys are dropped (a create payload carrying
  `id` or `createdAt` never reaches the normalized value)

Entry points:
    order = OrderSchema.parse(raw)            # raises ContractViolation
    result = OrderSchema.safe_parse(raw)      # never raises for bad data
    body = order.to_payload()                 # camelCase, JSON-ready
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from .config import Config
from .errors import ContractViolation, cross_field_error


logger = logging.getLogger('servemate_contracts.parse')

M = TypeVar('M', bound='ContractModel')


@dataclass(frozen=True)
class ParseResult(Generic[M]):
    """Outcome of safe_parse: exactly one of data / error is set."""
    success: bool
    data: Optional[M] = None
    error: Optional[ContractViolation] = None


class ContractModel(BaseModel):
    """
    Base model for all schemas.

    All schemas inherit from this to ensure consistent behavior:
    - Frozen after creation (immutable)
    - Whitespace stripped from strings
    - camelCase alias generated for every field
    - Unknown fields ignored
    """
    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra='ignore',
    )

    @classmethod
    def parse(cls: Type[M], value: Any) -> M:
        """
        Validate and normalize `value`.

        Collects every violated field, not just the first. A model instance is
        re-validated from its own dump so parse(parse(v)) == parse(v).

        Raises:
            ContractViolation: If any field or refinement fails
        """
        if isinstance(value, BaseModel):
            value = _redump(value)
        try:
            return cls.model_validate(value)
        except ValidationError as e:
            violation = ContractViolation.from_pydantic(e, cls.__name__)
            if Config.LOG_VIOLATIONS:
                logger.debug(
                    f"contract_violation: {cls.__name__} count={len(violation.violations)} "
                    f"paths={violation.paths()}"
                )
            raise violation from None

    @classmethod
    def safe_parse(cls: Type[M], value: Any) -> ParseResult[M]:
        """Like parse(), but returns a ParseResult instead of raising."""
        try:
            return ParseResult(success=True, data=cls.parse(value))
        except ContractViolation as e:
            return ParseResult(success=False, error=e)

    def to_payload(self, exclude_unset: bool = False) -> Dict[str, Any]:
        """
        Serialize to the camelCase wire shape (JSON-compatible values).

        Output always uses the canonical alias. Legacy input keys accepted
        through AliasChoices (DrinkItem `tempriture`) are read only and are
        emitted under the canonical name (`temperature`).
        """
        return self.model_dump(mode='json', by_alias=True, exclude_unset=exclude_unset)


def _redump(instance: BaseModel) -> Dict[str, Any]:
    # Explicit fields plus factory defaults (timestamps), so nothing is re-defaulted
    fields = type(instance).model_fields
    keep = set(instance.model_fields_set)
    keep.update(name for name, info in fields.items() if info.default_factory is not None)
    return instance.model_dump(by_alias=True, include=keep)


class RequireAnyField(ContractModel):
    """
    Mixin for update payloads: at least one field must be provided.

    Runs after per-field validation, so an invalid single field is reported
    as that field's error, and an empty payload as a cross_field error.
    """

    @model_validator(mode='after')
    def require_any_field(self):
        if not self.model_fields_set:
            raise cross_field_error('At least one field must be provided')
        return self


def check_range(model: BaseModel, low: str, high: str) -> None:
    """Cross-field rule: `low` must not exceed `high` when both are set."""
    lower = getattr(model, low)
    upper = getattr(model, high)
    if lower is not None and upper is not None and lower > upper:
        raise cross_field_error(f"{to_camel(low)} must not be greater than {to_camel(high)}")
