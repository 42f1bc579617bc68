import locale
import re

from pydantic import BaseModel, ConfigDict, Field

# Languages whose casing maps dotted and dotless i separately.
_TURKIC_LANGUAGES = frozenset({"tr", "az"})
_WORD_PATTERN = re.compile(r"\S+")


class Culture(BaseModel):
    """Culture-aware casing rules.

    Python's str casing is the invariant Unicode mapping; the only culture
    specific rule applied on top of it is the Turkic dotted/dotless i.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="culture name such as en-US, empty for invariant")

    @property
    def language(self) -> str:
        return self.name.replace("_", "-").split("-", 1)[0].lower()

    @property
    def is_turkic(self) -> bool:
        return self.language in _TURKIC_LANGUAGES

    def lower(self, text: str) -> str:
        if self.is_turkic:
            text = text.replace("I", "ı").replace("İ", "i")
        return text.lower()

    def upper(self, text: str) -> str:
        if self.is_turkic:
            text = text.replace("i", "İ")
        return text.upper()

    def title(self, text: str) -> str:
        """Capitalize the first letter of each whitespace-delimited word, lowercase the rest.

        Leading digits or other non-letters stay in place, so `2nd` becomes `2Nd`.
        """
        return _WORD_PATTERN.sub(lambda m: self._title_word(m.group(0)), text)

    def _title_word(self, word: str) -> str:
        for index, char in enumerate(word):
            if char.isalpha():
                return self.lower(word[:index]) + self.upper(char) + self.lower(word[index + 1:])
        return self.lower(word)

    @classmethod
    def invariant(cls) -> "Culture":
        return cls()

    @classmethod
    def current(cls) -> "Culture":
        try:
            language_code, _ = locale.getlocale(locale.LC_CTYPE)
        except ValueError:
            return cls.invariant()
        if not language_code or language_code in ("C", "POSIX"):
            return cls.invariant()
        return cls(name=language_code.replace("_", "-"))
