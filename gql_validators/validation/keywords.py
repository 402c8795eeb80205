"""
Custom jsonschema keywords for compiled GraphQL entities.

Draft7Validator already checks types, object properties and array items. The
GraphQL mapping needs a few more rules, which are added as keywords on an
extended validator class:

    required        (override) missing or null fields -> "<field> is a required field"
    requiredItems   null list elements -> "<field>[i] is a required field"
    date            date objects or parseable date strings
    entity          lazy reference; looked up in the registry at validation time,
                    "No entity '<name>'" when the name was never compiled
    oneOfEntities   union membership, "Was not one of <T1>, <T2>"
    enumOf          enum membership, "Enum <Name> must be one of the following values: ..."

The `entity` keyword needs the registry of the compiler that produced the
schema, so each compiler builds its own validator class with
build_validator_class().
"""

import datetime
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Sequence

from jsonschema import Draft7Validator, validators
from jsonschema.exceptions import ValidationError as SchemaError

from gql_validators.exceptions import UnknownEntityError
from gql_validators.schema.types import (
    DATE_KEYWORD,
    ENTITY_KEYWORD,
    ENUM_KEYWORD,
    REQUIRED_ITEMS_KEYWORD,
    UNION_KEYWORD,
)
from gql_validators.validation.dates import DEFAULT_DATE_FORMATS, parse_date

if TYPE_CHECKING:
    from gql_validators.registry import Registry

logger = logging.getLogger(__name__)

REQUIRED_FIELD_MESSAGE = "is a required field"
INVALID_DATE_MESSAGE = "Invalid date format"


@dataclass
class MemberProbe:
    """
    Outcome of validating a value against one union member.

    Attributes:
        member: Member entity name
        errors: Errors the member reported (empty if it accepted the value)
    """

    member: str
    errors: List[SchemaError] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return not self.errors


def probe_member(validator: Any, instance: Any, member: str, schema: Dict[str, Any]) -> MemberProbe:
    """Validate instance against one member schema, capturing every failure."""
    errors = list(validator.descend(instance, schema))
    return MemberProbe(member=member, errors=errors)


def required(validator, required, instance, schema):
    if not validator.is_type(instance, "object"):
        return

    for prop in required:
        if instance.get(prop) is None:
            yield SchemaError(f"{prop} {REQUIRED_FIELD_MESSAGE}", path=(prop,))


def required_items(validator, enabled, instance, schema):
    if not enabled or not validator.is_type(instance, "array"):
        return

    for index, item in enumerate(instance):
        if item is None:
            yield SchemaError(f"[{index}] {REQUIRED_FIELD_MESSAGE}", path=(index,))


def enum_of(validator, enum, instance, schema):
    values = enum["values"]
    if instance not in values:
        yield SchemaError(
            f"Enum {enum['name']} must be one of the following values: {', '.join(values)}"
        )


def one_of_entities(validator, members, instance, schema):
    names = ", ".join(members)

    if instance is None:
        yield SchemaError(f"Was not one of {names}")
        return

    probes = [probe_member(validator, instance, name, member) for name, member in members.items()]
    if any(probe.accepted for probe in probes):
        return

    context = [error for probe in probes for error in probe.errors]
    yield SchemaError(f"Was not one of {names}", context=context)


def build_validator_class(registry: "Registry", date_formats: Sequence[str] = DEFAULT_DATE_FORMATS):
    """
    Create a Draft7Validator subclass bound to one registry.

    Args:
        registry: Registry the `entity` keyword resolves names against
        date_formats: Formats accepted by the `date` keyword

    Returns:
        A jsonschema validator class

    Example:
        ```python
        registry = Registry()
        Validator = build_validator_class(registry)

        Validator({"date": True}).is_valid("2020-08-01")  # True
        ```
    """
    formats = tuple(date_formats)

    def date(validator, enabled, instance, schema):
        if not enabled or instance is None:
            return
        # datetime.datetime is a subclass of datetime.date
        if isinstance(instance, datetime.date):
            return
        if isinstance(instance, str) and parse_date(instance, formats) is not None:
            return
        yield SchemaError(INVALID_DATE_MESSAGE)

    def entity(validator, name, instance, schema) -> Iterator[SchemaError]:
        if instance is None:
            return
        try:
            target = registry.get(name)
        except UnknownEntityError as e:
            logger.debug(f"Unresolved entity reference {name!r}")
            yield SchemaError(str(e))
            return
        yield from validator.descend(instance, target.schema)

    keywords = {
        "required": required,
        REQUIRED_ITEMS_KEYWORD: required_items,
        DATE_KEYWORD: date,
        ENTITY_KEYWORD: entity,
        UNION_KEYWORD: one_of_entities,
        ENUM_KEYWORD: enum_of,
    }

    logger.debug(f"Building validator class with date formats {formats}")
    return validators.extend(Draft7Validator, keywords)
