"""Field adapters for response values whose JSON type is not stable or may be null."""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BeforeValidator


def parse_parameter_count(value: Any) -> str | None:
    """Normalize a model's parameter count to a string.

    The service reports this field as a magnitude string ("70B"), as a plain
    JSON number (8000000000), or leaves it out entirely.

    Args:
        value: The raw JSON value of the field

    Returns:
        The string form of the value, or None when the field is null

    Raises:
        ValueError: If the value is neither a string, a number nor null
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    # bool is an int subclass but never a parameter count
    if isinstance(value, bool):
        raise ValueError(f"parameters_number must be a string or number, got {value!r}")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    raise ValueError(
        f"parameters_number must be a string or number, got {type(value).__name__}"
    )


ParameterCount = Annotated[str | None, BeforeValidator(parse_parameter_count)]


def null_as(default: Any) -> BeforeValidator:
    """Decode a JSON null as ``default`` instead of failing validation."""
    return BeforeValidator(lambda value: default if value is None else value)


# Response scalars the service may send as null
NullableStr = Annotated[str, null_as("")]
NullableInt = Annotated[int, null_as(0)]
NullableFloat = Annotated[float, null_as(0.0)]
NullableBool = Annotated[bool, null_as(False)]
