"""Line-oriented parsing and keyword validation for Elmer solver input files."""

from elmerlint.parser.dictionary import (
    DictionaryLoadError,
    KeywordDictionary,
    load_default_dictionary,
    load_dictionary,
)
from elmerlint.parser.keywords import KeywordChecker
from elmerlint.parser.sections import SectionTracker
from elmerlint.parser.validator import SifValidator

__all__ = [
    "DictionaryLoadError",
    "KeywordChecker",
    "KeywordDictionary",
    "SectionTracker",
    "SifValidator",
    "load_default_dictionary",
    "load_dictionary",
]
