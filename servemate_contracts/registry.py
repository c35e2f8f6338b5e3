"""
Schema Registry - Single source of truth for contract schemas.

Every public schema registers itself under its class name on import, so
generic callers (error formatters, gateways, tests) can resolve a schema
by name:

    from servemate_contracts.registry import parse_as
    update = parse_as("UpdateUser", request_body)
"""

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel


logger = logging.getLogger('servemate_contracts.registry')

S = TypeVar('S', bound=Type[BaseModel])

# Global registry instance
SCHEMAS: Dict[str, Type[BaseModel]] = {}


def register_schema(schema: S, name: Optional[str] = None) -> S:
    """
    Register a schema under `name` (defaults to the class name).

    Usable as a decorator. Re-registration replaces the previous entry
    (for testing/hot-reload).
    """
    key = name or schema.__name__
    if key in SCHEMAS and SCHEMAS[key] is not schema:
        logger.debug(f"schema_reregistered: {key}")
    SCHEMAS[key] = schema
    return schema


def get_schema(name: str) -> Optional[Type[BaseModel]]:
    """
    Get schema by registered name.

    Returns:
        Schema class if found, None otherwise
    """
    return SCHEMAS.get(name)


def list_schemas() -> List[str]:
    """Get list of registered schema names."""
    return list(SCHEMAS.keys())


def parse_as(name: str, value: Any) -> BaseModel:
    """
    Parse `value` with the schema registered as `name`.

    Raises:
        KeyError: If no schema is registered under `name`
        ContractViolation: If `value` does not satisfy the schema
    """
    schema = get_schema(name)
    if schema is None:
        raise KeyError(f"No schema registered as {name!r}")
    return schema.parse(value)
