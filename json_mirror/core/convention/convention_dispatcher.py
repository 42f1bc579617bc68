from .base_convention import BaseConvention
from ..context import CONVENTIONS
from ..enumeration import Convention
from ..errors import EmptyResult, InvalidInput
from ..schema import Culture


def get_convention(convention: Convention | str) -> BaseConvention:
    """Build the convertor registered for `convention`.

    Plain strings are accepted and validated against the Convention enum, so
    an unknown name raises ValueError.
    """
    return CONVENTIONS.lookup(Convention(convention))()


def convert(value: str, convention: Convention | str, culture: Culture | None = None, strict: bool = False) -> str:
    """Return a copy of `value` in the requested capitalization convention.

    Args:
        value: The text to convert.
        convention: Target convention.
        culture: Casing rules, defaults to `Culture.current()`.
        strict: Raise instead of returning an empty result.

    Returns:
        The converted text.

    Raises:
        InvalidInput: If `value` is None.
        EmptyResult: In strict mode, if nothing convertible is left.

    Examples:
        >>> convert("NullableDateValueId", Convention.SNAKE)
        'nullable_date_value_id'
    """
    if value is None:
        raise InvalidInput("value to convert is None")

    result = get_convention(convention).convert(value, culture)
    if strict and not result:
        raise EmptyResult(f"could not convert {value!r} to {Convention(convention).value} case")
    return result


def to_camel(value: str, culture: Culture | None = None) -> str:
    return convert(value, Convention.CAMEL, culture)


def to_lower(value: str, culture: Culture | None = None) -> str:
    return convert(value, Convention.LOWER, culture)


def to_pascal(value: str, culture: Culture | None = None) -> str:
    return convert(value, Convention.PASCAL, culture)


def to_snake(value: str, culture: Culture | None = None) -> str:
    return convert(value, Convention.SNAKE, culture)


def to_title(value: str, culture: Culture | None = None) -> str:
    return convert(value, Convention.TITLE, culture)


def to_upper(value: str, culture: Culture | None = None) -> str:
    return convert(value, Convention.UPPER, culture)
