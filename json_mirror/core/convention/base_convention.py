from abc import ABC, abstractmethod

from ..errors import InvalidInput
from ..schema import Culture
from ..utils import strip_text


class BaseConvention(ABC):
    """A stateless text casing rule.

    Subclasses implement `_convert`, which only ever sees non-empty text and a
    resolved culture. Instances hold no state, so one may be shared freely or
    built per call.
    """

    def convert(self, value: str, culture: Culture | None = None) -> str:
        """Return a copy of `value` in this convention.

        Args:
            value: The text to convert. The empty string converts to itself.
            culture: Casing rules to apply, defaults to `Culture.current()`.

        Returns:
            The converted text, possibly empty.

        Raises:
            InvalidInput: If `value` is None.
        """
        if value is None:
            raise InvalidInput(f"{self.__class__.__name__} cannot convert None")
        if value == "":
            return ""
        if culture is None:
            culture = Culture.current()
        return self._convert(value, culture)

    @abstractmethod
    def _convert(self, value: str, culture: Culture) -> str:
        """Convert non-empty text."""


class StrippedConvention(BaseConvention, ABC):
    """A convention that first removes punctuation and other non `[A-Za-z0-9_ ]` characters."""

    def _convert(self, value: str, culture: Culture) -> str:
        value = strip_text(value)
        if not value:
            return value
        if len(value) == 1:
            return self._convert_single(value, culture)
        return self._convert_stripped(value, culture)

    def _convert_single(self, char: str, culture: Culture) -> str:
        return culture.lower(char)

    @abstractmethod
    def _convert_stripped(self, value: str, culture: Culture) -> str:
        """Convert stripped text of at least two characters."""
