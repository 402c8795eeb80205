"""
Error formatter - turn raw jsonschema errors into user-facing messages.

jsonschema reports errors with a path deque and its own wording. Callers of
gql-validators see field paths in dotted/indexed form and messages worded the
way form libraries word them:

    name is a required field
    items[1].price must be a `number` type, but the final value was: `'free'`
"""

from typing import Any, Iterable, Union

from jsonschema.exceptions import ValidationError as SchemaError

from gql_validators.validation.keywords import REQUIRED_FIELD_MESSAGE

# Label used for errors on the validated value itself
ROOT_LABEL = "this"

_REQUIRED_KEYWORDS = {"required", "requiredItems"}


def format_path(path: Iterable[Union[str, int]]) -> str:
    """
    Format a jsonschema error path.

    Args:
        path: Path elements, property names and list indices

    Returns:
        str: e.g. 'orders[0].lines[2].sku' ('' for the root)
    """
    formatted = ""
    for element in path:
        if isinstance(element, int):
            formatted += f"[{element}]"
        elif formatted:
            formatted += f".{element}"
        else:
            formatted = str(element)
    return formatted


def _expected_type(validator_value: Any) -> str:
    if isinstance(validator_value, list):
        non_null = [t for t in validator_value if t != "null"]
        return " | ".join(non_null) or "null"
    return str(validator_value)


def format_error_message(error: SchemaError) -> str:
    """
    Build the message shown for a single jsonschema error.

    Args:
        error: Error yielded by a compiled entity's validator

    Returns:
        str: Message naming the failing path where the wording needs one
    """
    label = format_path(error.absolute_path) or ROOT_LABEL

    if error.validator in _REQUIRED_KEYWORDS:
        return f"{label} {REQUIRED_FIELD_MESSAGE}"

    elif error.validator == "type":
        expected = _expected_type(error.validator_value)
        return f"{label} must be a `{expected}` type, but the final value was: `{error.instance!r}`"

    else:
        return error.message
