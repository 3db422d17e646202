"""Reference keyword dictionary: section -> recognized keywords."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")

DEFAULT_DICTIONARY_RESOURCE = "keywords.json"


class DictionaryLoadError(Exception):
    """Raised when the reference dictionary is missing or malformed.

    Distinct from per-document findings: without a dictionary no section
    can be validated at all.
    """


def normalize_keyword(keyword: str) -> str:
    """Lower-case, collapse whitespace runs to one space, and trim."""
    return _WHITESPACE_RE.sub(" ", keyword.lower()).strip()


@dataclass(frozen=True)
class KeywordDictionary:
    """Immutable mapping of section identifier -> set of normalized keywords.

    Safe to share between concurrent validation passes.
    """

    _sections: Mapping[str, frozenset[str]] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> KeywordDictionary:
        return cls({})

    @classmethod
    def from_mapping(cls, data: Any) -> KeywordDictionary:
        """Build a dictionary from parsed JSON/YAML data.

        Each section maps either to ``{keyword: marker}`` (truthy marker means
        recognized) or to a plain list of keywords.
        """
        if not isinstance(data, Mapping):
            raise DictionaryLoadError(
                f"Keyword dictionary must be a mapping of sections, got {type(data).__name__}"
            )
        sections: dict[str, frozenset[str]] = {}
        for section, entry in data.items():
            if not isinstance(section, str):
                raise DictionaryLoadError(f"Section identifier must be a string, got {section!r}")
            sections[section.lower()] = frozenset(_normalized_entry(section, entry))
        return cls(sections)

    # -- queries -------------------------------------------------------------

    @property
    def sections(self) -> list[str]:
        return sorted(self._sections)

    def has_section(self, section: str) -> bool:
        return section in self._sections

    def keywords(self, section: str) -> frozenset[str]:
        return self._sections.get(section, frozenset())

    def contains(self, section: str, keyword: str) -> bool:
        return keyword in self._sections.get(section, ())

    def contains_any(self, keyword: str) -> bool:
        """Return True if *keyword* is recognized in any section."""
        return any(keyword in keywords for keywords in self._sections.values())

    def __len__(self) -> int:
        return len(self._sections)


def _normalized_entry(section: str, entry: Any) -> Iterable[str]:
    if isinstance(entry, Mapping):
        candidates = [key for key, marker in entry.items() if marker]
    elif isinstance(entry, list):
        candidates = entry
    else:
        raise DictionaryLoadError(
            f"Section '{section}' must map to keywords, got {type(entry).__name__}"
        )
    for keyword in candidates:
        if not isinstance(keyword, str):
            raise DictionaryLoadError(
                f"Section '{section}' contains a non-string keyword: {keyword!r}"
            )
        yield normalize_keyword(keyword)


def _parse(content: str, suffix: str) -> Any:
    if suffix in (".yaml", ".yml"):
        return YAML(typ="safe").load(content)
    return json.loads(content)


def load_dictionary(path: Path) -> KeywordDictionary:
    """Load a reference dictionary from a ``.json`` or ``.yaml`` file."""
    try:
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
    except OSError as exc:
        raise DictionaryLoadError(f"Cannot read keyword dictionary '{path}': {exc}") from exc
    try:
        data = _parse(content, path.suffix.lower())
    except (json.JSONDecodeError, YAMLError) as exc:
        raise DictionaryLoadError(f"Cannot parse keyword dictionary '{path}': {exc}") from exc
    dictionary = KeywordDictionary.from_mapping(data)
    logger.debug("Loaded keyword dictionary from %s (%d sections)", path, len(dictionary))
    return dictionary


def load_default_dictionary() -> KeywordDictionary:
    """Load the dictionary bundled with the package."""
    resource = resources.files("elmerlint.data").joinpath(DEFAULT_DICTIONARY_RESOURCE)
    try:
        content = resource.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, json.JSONDecodeError) as exc:
        raise DictionaryLoadError(f"Cannot load bundled keyword dictionary: {exc}") from exc
    return KeywordDictionary.from_mapping(data)
