from abc import ABC, abstractmethod
from typing import List

from .base_convention import StrippedConvention
from ..enumeration import CharClass
from ..schema import Culture
from ..utils import classify_char, split_words


class WordConvention(StrippedConvention, ABC):
    """Re-cases stripped text word by word with a character-class state machine.

    The text is split on underscores and whitespace. Inside a word a boundary
    flag tracks whether the previous letter opened a run: it is set by an
    uppercase letter that starts a run, or by a lowercase letter opening the
    word, and cleared by the next lowercase letter or a digit. Uppercase
    letters arriving while the flag is set continue the run (an acronym).

    Subclasses choose the separator placed between words and how the first
    letter of a run and the rest of a run are cased.
    """

    separator: str = ""

    def _convert_stripped(self, value: str, culture: Culture) -> str:
        words: List[str] = []
        for word in split_words(value):
            chars = self._convert_word(word, culture, value_started=bool(words))
            # words without output must not leave a dangling separator
            if chars:
                words.append("".join(chars))
        return self.separator.join(words)

    def _convert_word(self, word: str, culture: Culture, value_started: bool) -> List[str]:
        chars: List[str] = []
        boundary = False
        for char in word:
            char_class = classify_char(char)

            if char_class is CharClass.UPPER:
                if boundary:
                    chars.append(self._continue_run(char, culture))
                    continue
                boundary = True
                chars.append(self._start_run(char, culture, value_started=value_started, word_started=bool(chars)))

            elif char_class is CharClass.LOWER:
                if boundary:
                    boundary = False
                elif not chars:
                    boundary = True
                chars.append(char)

            elif char_class is CharClass.DIGIT:
                boundary = False
                chars.append(char)

            elif chars:
                boundary = False

        return chars

    @abstractmethod
    def _start_run(self, char: str, culture: Culture, value_started: bool, word_started: bool) -> str:
        """Render an uppercase letter that opens a new run."""

    @abstractmethod
    def _continue_run(self, char: str, culture: Culture) -> str:
        """Render an uppercase letter inside a run."""
