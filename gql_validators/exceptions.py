"""
Exception hierarchy for gql-validators.

    GQLValidatorsError
    ├── UnknownEntityError: lookup of an entity the compiler never defined
    └── ValidationError: a candidate value was rejected by an entity

Schema parsing errors are not wrapped: graphql-core's GraphQLError (and OSError
for unreadable schema files) propagate unchanged.
"""

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from gql_validators.validation.validator import FieldError


class GQLValidatorsError(Exception):
    """Base class for all errors raised by gql-validators."""


class UnknownEntityError(GQLValidatorsError, LookupError):
    """
    Raised when an entity name is not present in a compiler's registry.

    Attributes:
        name: The entity name that was requested
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No entity '{name}'")


class ValidationError(GQLValidatorsError):
    """
    Raised by Entity.validate() when a value does not conform.

    The exception message is the message of the first error found, which is
    what callers building on top usually display. All errors are kept on
    `errors` for reporting.

    Attributes:
        message: Human-readable message of the first error
        errors: Every error found, in discovery order
    """

    def __init__(self, message: str, errors: Optional[List["FieldError"]] = None):
        self.message = message
        self.errors = errors or []
        super().__init__(message)

    @property
    def path(self) -> str:
        """Path of the first error, e.g. 'items[0].name' ('' for the root)."""
        return self.errors[0].path if self.errors else ""
