"""Word list membership oracle."""

import logging
from pathlib import Path
from typing import BinaryIO, FrozenSet, Iterable, Iterator, TextIO, Union

log = logging.getLogger(__name__)


class WordListError(OSError):
    """The word list could not be opened or decoded."""


def _decoded(lines: Iterable[Union[str, bytes]]) -> Iterator[str]:
    """Lines as text; bytes from a binary stream are read as UTF-8."""
    for line in lines:
        yield line.decode("utf-8") if isinstance(line, bytes) else line


class Dictionary:
    """
    Immutable set of valid words.

    Words are normalized to uppercase on load and on lookup, so membership
    is case-insensitive. Safe to share between readers once built.
    """

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()):
        self._words: FrozenSet[str] = frozenset(
            w.strip().upper() for w in words if w.strip()
        )

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Dictionary":
        return cls(words)

    @classmethod
    def load(cls, source: Union[str, Path, TextIO, BinaryIO]) -> "Dictionary":
        """
        Read one word per line from a path or an open stream.

        Binary streams are decoded as UTF-8.

        Duplicates collapse and blank lines are skipped.

        Raises:
            WordListError: If the source cannot be opened or a line cannot be decoded
        """
        try:
            if isinstance(source, (str, Path)):
                with open(source, "r", encoding="utf-8") as f:
                    dictionary = cls(f)
                name = str(source)
            else:
                dictionary = cls(_decoded(source))
                name = getattr(source, "name", "<stream>")
        except UnicodeDecodeError as e:
            raise WordListError(f"Could not decode word list {source}: {e}") from e
        except OSError as e:
            raise WordListError(f"Could not read word list {source}: {e}") from e

        log.info("Loaded %s words from %s", f"{len(dictionary):,}", name)
        return dictionary

    def contains(self, word: str) -> bool:
        return word.upper() in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(sorted(self._words))
