"""
Validation layer module.

This module turns validator nodes into working jsonschema validators and
reports failures in a readable form.

Components:
    - keywords: Custom jsonschema keywords and the per-compiler validator class
    - dates: Date string parsing for Date/DateTime fields
    - validator: Entity (a compiled type), FieldError and error summaries
    - error_formatter: Paths and messages for raw jsonschema errors

Validation Flow:
    1. Entity.validate() runs the bound Draft 7 validator over the value
    2. Lazy entity references are looked up in the registry as they are reached
    3. Every raw error is converted to a FieldError with a formatted message
    4. The first message becomes the ValidationError message
"""

from gql_validators.validation.dates import DEFAULT_DATE_FORMATS, parse_date
from gql_validators.validation.error_formatter import format_error_message, format_path
from gql_validators.validation.keywords import build_validator_class
from gql_validators.validation.validator import Entity, EntityKind, FieldError, format_validation_errors

__all__ = [
    "DEFAULT_DATE_FORMATS",
    "parse_date",
    "format_error_message",
    "format_path",
    "build_validator_class",
    "Entity",
    "EntityKind",
    "FieldError",
    "format_validation_errors",
]
