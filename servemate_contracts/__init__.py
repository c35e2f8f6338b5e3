"""
ServeMate contracts package.

Shared data contracts for the restaurant platform: entity schemas, their
derived create/update/search/list variants, and the parse entry points.
"""

from .base import ContractModel, ParseResult, RequireAnyField
from .errors import ContractViolation, Violation, ViolationKind, validation_error_response
from .registry import SCHEMAS, get_schema, list_schemas, parse_as, register_schema
from . import schemas

__all__ = [
    'ContractModel',
    'ParseResult',
    'RequireAnyField',
    'ContractViolation',
    'Violation',
    'ViolationKind',
    'validation_error_response',
    'SCHEMAS',
    'get_schema',
    'list_schemas',
    'parse_as',
    'register_schema',
    'schemas',
]
