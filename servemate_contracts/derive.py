"""
Structural schema derivation.

An entity schema is treated as an ordered list of (field name, rule) pairs
taken from `model_fields`. Derived schemas are set operations over that
list, rebuilt into a fresh model with `pydantic.create_model`:

- omit_fields:  remove by name        (Create = Entity minus id/audit fields)
- pick_fields:  subset by name        (Search filters, guest-info updates)
- make_partial: mark all optional     (Update payloads)
- merge_fields: union with a fragment (later definitions win)

Coercions and bounds live in each field's `Annotated` metadata, so they travel
with the field and derived schemas never restate a rule.

Usage:
    CreateUser = derive(User, 'CreateUser', omit=['id', 'created_at'])
    UpdateUser = derive(User, 'UpdateUser', omit=[...], partial=True, require_any=True)

    class UserSearch(derive(User, 'UserSearchBase', pick=['name'], partial=True,
                            base=SearchCriteria)):
        sort_by: UserSortColumn = UserSortColumn.ID
"""

import logging
from typing import Annotated, Any, Dict, Iterable, Optional, Sequence, Tuple, Type, Union

from pydantic import BaseModel, Field, create_model
from pydantic.fields import FieldInfo

from .base import ContractModel, RequireAnyField


logger = logging.getLogger('servemate_contracts.derive')

FieldDefinition = Tuple[Any, FieldInfo]
FieldRules = Dict[str, FieldDefinition]


def _alias_kwargs(info: FieldInfo) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {}
    if info.alias is not None:
        kwargs['alias'] = info.alias
    if info.validation_alias is not None:
        kwargs['validation_alias'] = info.validation_alias
    if info.serialization_alias is not None:
        kwargs['serialization_alias'] = info.serialization_alias
    if info.description:
        kwargs['description'] = info.description
    return kwargs


def _annotation(info: FieldInfo) -> Any:
    # Re-attach coercion/constraint metadata that pydantic split off the type
    if info.metadata:
        return Annotated[(info.annotation, *info.metadata)]
    return info.annotation


def field_rules(model: Type[BaseModel]) -> FieldRules:
    """Ordered (annotation, FieldInfo) definitions for every field of `model`."""
    rules: FieldRules = {}
    for name, info in model.model_fields.items():
        kwargs = _alias_kwargs(info)
        if info.default_factory is not None:
            kwargs['default_factory'] = info.default_factory
        else:
            kwargs['default'] = info.default
        rules[name] = (_annotation(info), Field(**kwargs))
    return rules


def _check_names(rules: FieldRules, names: Iterable[str], op: str) -> None:
    unknown = [name for name in names if name not in rules]
    if unknown:
        raise ValueError(f"{op}: unknown field(s) {unknown}; available: {list(rules)}")


def omit_fields(rules: FieldRules, names: Sequence[str]) -> FieldRules:
    _check_names(rules, names, 'omit')
    return {name: rule for name, rule in rules.items() if name not in names}


def pick_fields(rules: FieldRules, names: Sequence[str]) -> FieldRules:
    """Subset of `rules`, in the original field order."""
    _check_names(rules, names, 'pick')
    return {name: rule for name, rule in rules.items() if name in names}


def make_partial(rules: FieldRules) -> FieldRules:
    """
    Every field becomes optional with no default.

    An absent field stays unset (`model_fields_set`), so an update payload
    never gains values the caller did not send. A field that IS sent is
    validated by its original rule (an explicit null is still rejected for a
    non-nullable field).
    """
    partial: FieldRules = {}
    for name, (annotation, info) in rules.items():
        partial[name] = (annotation, Field(default=None, **_alias_kwargs(info)))
    return partial


def merge_fields(rules: FieldRules, *fragments: Union[Type[BaseModel], FieldRules]) -> FieldRules:
    """Union of `rules` with each fragment; later definitions win."""
    merged = dict(rules)
    for fragment in fragments:
        merged.update(fragment if isinstance(fragment, dict) else field_rules(fragment))
    return merged


def derive(
    model: Type[BaseModel],
    name: Optional[str] = None,
    *,
    omit: Sequence[str] = (),
    pick: Sequence[str] = (),
    partial: bool = False,
    extend: Sequence[Union[Type[BaseModel], FieldRules]] = (),
    require_any: bool = False,
    base: Type[ContractModel] = ContractModel,
    doc: Optional[str] = None,
) -> Type[ContractModel]:
    """
    Build a new schema from `model` by structural transformation.

    Order of operations: pick -> omit -> partial -> extend. Extensions are
    not made partial (search fragments keep their own defaults).

    Args:
        model: Source schema
        name: Class name of the derived schema (used in error payloads)
        omit: Field names to remove
        pick: Field names to keep (all when empty)
        partial: Make every remaining field optional
        extend: Models or rule dicts merged in after partial
        require_any: Attach the "at least one field" refinement
        base: Base class for the new model (carries shared validators)
        doc: Docstring for the new model

    Raises:
        ValueError: If omit/pick name a field `model` does not have
    """
    name = name or f"{model.__name__}Derived"
    rules = field_rules(model)
    if pick:
        rules = pick_fields(rules, pick)
    if omit:
        rules = omit_fields(rules, omit)
    if partial:
        rules = make_partial(rules)
    if extend:
        rules = merge_fields(rules, *extend)

    bases: Union[Type[ContractModel], Tuple[Type[ContractModel], ...]] = base
    if require_any:
        bases = RequireAnyField if base is ContractModel else (RequireAnyField, base)

    logger.debug(f"derived_schema: {name} <- {model.__name__} fields={list(rules)}")
    return create_model(
        name,
        __base__=bases,
        __module__=model.__module__,
        __doc__=doc or model.__doc__,
        **rules,
    )


def omit(model: Type[BaseModel], *names: str, name: Optional[str] = None) -> Type[ContractModel]:
    """`model` without the named fields."""
    return derive(model, name or f"{model.__name__}Omit", omit=names)


def pick(model: Type[BaseModel], *names: str, name: Optional[str] = None) -> Type[ContractModel]:
    """`model` reduced to the named fields."""
    return derive(model, name or f"{model.__name__}Pick", pick=names)


def partial(model: Type[BaseModel], name: Optional[str] = None) -> Type[ContractModel]:
    """`model` with every field optional."""
    return derive(model, name or f"{model.__name__}Partial", partial=True)


def extend(
    model: Type[BaseModel],
    *fragments: Union[Type[BaseModel], FieldRules],
    name: Optional[str] = None,
) -> Type[ContractModel]:
    """`model` merged with each fragment's fields (later fields win)."""
    return derive(model, name or f"{model.__name__}Extended", extend=fragments)
