"""
Dictionary-based spelling correction.

Words are the fragments of a literal single-space split. Any word the
dictionary does not recognise is replaced by its first suggestion; words
without suggestions are left as they are.

The default dictionary is a Hunspell .aff/.dic pair read with spylls.
"""

import codecs
import re
from contextlib import contextmanager
from itertools import islice
from pathlib import Path
from typing import Iterator, List, Optional, Protocol, Sequence

from spylls.hunspell import Dictionary

from sentiprep.core.logger import get_logger
from sentiprep.core.review import Review

logger = get_logger(__name__)


class DictionaryLoadError(Exception):
    """The spell-checking dictionary could not be loaded"""


# Hunspell's default when the affix file has no SET line
DEFAULT_ENCODING = "ISO8859-1"

SET_PATTERN = re.compile(rb"^\s*SET\s+(\S+)", re.MULTILINE)
COUNT_PATTERN = re.compile(r"^\s*(\d+)")


def _python_codec(hunspell_encoding: str) -> str:
    name = hunspell_encoding.lower()
    if name.startswith("microsoft-"):
        name = name[len("microsoft-"):]
    return codecs.lookup(name).name


def _check_affix_file(path: Path) -> str:
    """
    Check the affix file decodes under its declared encoding.

    Returns:
        Python codec name to read the word file with
    """
    raw = path.read_bytes()
    match = SET_PATTERN.search(raw)
    declared = match.group(1).decode("ascii", errors="replace") if match else DEFAULT_ENCODING

    try:
        codec = _python_codec(declared)
        text = raw.decode(codec)
    except (LookupError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(f"Malformed affix file {path}: {e}") from e

    if "\x00" in text:
        raise DictionaryLoadError(f"Malformed affix file {path}: binary content")

    return codec


def _check_word_file(path: Path, codec: str) -> int:
    """
    Check the word file starts with a word count, as Hunspell requires.

    Returns:
        Declared word count
    """
    try:
        text = path.read_bytes().decode(codec)
    except UnicodeDecodeError as e:
        raise DictionaryLoadError(f"Malformed word file {path}: {e}") from e

    header = next((line for line in text.splitlines() if line.strip()), "")
    match = COUNT_PATTERN.match(header)
    if not match:
        raise DictionaryLoadError(f"Malformed word file {path}: first line {header[:40]!r} is not a word count")

    return int(match.group(1))


class SpellChecker(Protocol):
    """Read-only word lookup capability"""

    def is_correct(self, word: str) -> bool:
        ...

    def suggest(self, word: str) -> List[str]:
        ...


class HunspellSpellChecker:
    """
    SpellChecker backed by a Hunspell dictionary.

    Args:
        dictionary_path: Path of the .aff/.dic pair without extension
        max_suggestions: Upper bound of suggestions computed per word
    """

    def __init__(self, dictionary_path: str, max_suggestions: int = 5):
        self.dictionary_path = dictionary_path
        self.max_suggestions = max_suggestions
        self._dictionary = self._load(dictionary_path)

    @staticmethod
    def _load(dictionary_path: str) -> Dictionary:
        for suffix in (".aff", ".dic"):
            dictionary_file = Path(dictionary_path + suffix)
            if not dictionary_file.is_file():
                raise DictionaryLoadError(f"Dictionary file not found: {dictionary_file}")

        encoding = _check_affix_file(Path(dictionary_path + ".aff"))
        declared_count = _check_word_file(Path(dictionary_path + ".dic"), encoding)

        try:
            dictionary = Dictionary.from_files(dictionary_path)
        except Exception as e:
            raise DictionaryLoadError(f"Failed to load dictionary {dictionary_path}: {e}") from e

        if not dictionary.dic.words:
            raise DictionaryLoadError(f"Dictionary {dictionary_path} contains no words "
                                      f"(header declares {declared_count})")

        logger.info(f"Loaded Hunspell dictionary: {dictionary_path} "
                    f"({len(dictionary.dic.words)} words, {encoding})")
        return dictionary

    @property
    def is_open(self) -> bool:
        return self._dictionary is not None

    def is_correct(self, word: str) -> bool:
        return self._require_open().lookup(word)

    def suggest(self, word: str) -> List[str]:
        return list(islice(self._require_open().suggest(word), self.max_suggestions))

    def close(self):
        """Release the dictionary"""
        if self._dictionary is not None:
            self._dictionary = None
            logger.info(f"Released Hunspell dictionary: {self.dictionary_path}")

    def _require_open(self) -> Dictionary:
        if self._dictionary is None:
            raise RuntimeError("Spell checker is closed")
        return self._dictionary


@contextmanager
def open_spell_checker(dictionary_path: str, max_suggestions: int = 5) -> Iterator[HunspellSpellChecker]:
    """
    Load a Hunspell dictionary for the duration of a ``with`` block.

    Raises:
        DictionaryLoadError: if the .aff/.dic pair is missing or malformed
    """
    checker = HunspellSpellChecker(dictionary_path, max_suggestions)
    try:
        yield checker
    finally:
        checker.close()


class SpellingCorrector:
    """Replaces unrecognised words with the dictionary's top suggestion."""

    def __init__(self, dictionary: SpellChecker, progress_every: int = 100):
        self.dictionary = dictionary
        self.progress_every = progress_every

    def correct_word(self, word: str) -> str:
        # Empty fragments come from consecutive spaces
        if not word or self.dictionary.is_correct(word):
            return word

        suggestions = self.dictionary.suggest(word)
        if suggestions:
            logger.debug(f"Corrected '{word}' -> '{suggestions[0]}'")
            return suggestions[0]
        return word

    def correct_text(self, text: str) -> str:
        return " ".join(self.correct_word(word) for word in text.split(" "))

    def correct(self, records: Sequence[Review]) -> List[Review]:
        """
        Correct spelling in every record.

        Args:
            records: Records to correct

        Returns:
            New records with corrected text; rating and sentiment unchanged
        """
        total = len(records)
        logger.info(f"Correcting spelling in {total} records")

        corrected = []
        for i, review in enumerate(records, 1):
            corrected.append(review.with_text(self.correct_text(review.text)))
            if self.progress_every and (i % self.progress_every == 0 or i == total):
                logger.info(f"Correcting spelling: {i}/{total}")

        changed = sum(1 for old, new in zip(records, corrected) if old.text != new.text)
        logger.info(f"Spelling correction complete: {changed} records changed")

        return corrected


def correct(records: Sequence[Review],
            dictionary: SpellChecker,
            progress_every: Optional[int] = 100) -> List[Review]:
    """Correct spelling of every record's text against ``dictionary``."""
    return SpellingCorrector(dictionary, progress_every or 0).correct(records)
