"""Translation models for the i18n system.

Defines the data structures shared by the resolver, the loaders and the
session controller.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

# A parsed payload for one language: nested mappings ending in string leaves.
# Parsers may also produce numbers, booleans, lists or nulls; those are kept
# as-is and rendered as JSON text when looked up.
TranslationTree = Mapping[str, Any]

LanguageCode = str


class PayloadFormat(str, Enum):
    """Structured-data formats accepted for raw translation payloads."""

    JSON = "json"
    YAML = "yaml"

    @classmethod
    def from_string(cls, format_str: str) -> "PayloadFormat":
        """Convert string to PayloadFormat enum.

        Args:
            format_str: Format name (e.g., "json", "YAML").

        Returns:
            Matching PayloadFormat value.

        Raises:
            ValueError: If the format is not supported.
        """
        try:
            return cls(format_str.lower())
        except ValueError as e:
            raise ValueError(f"Unsupported payload format: {format_str}") from e

    @property
    def extensions(self) -> Tuple[str, ...]:
        """File extensions used for this format."""
        if self is PayloadFormat.YAML:
            return (".yml", ".yaml")
        return (".json",)


class StorageType(str, Enum):
    """Where the selected language is persisted.

    LOCAL survives across sessions, SESSION lasts as long as the process.
    """

    LOCAL = "local"
    SESSION = "session"


@dataclass(frozen=True)
class TranslationKey:
    """A dot-separated path into a translation tree.

    Frozen to ensure immutability and hashability.

    Attributes:
        segments: Ordered path segments (e.g., ("form", "name")).
    """

    segments: Tuple[str, ...]

    def __str__(self) -> str:
        """Return the full dot-separated key path."""
        return ".".join(self.segments)

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from a dot-separated string.

        Every dot starts a new segment, so "a..b" has an empty middle segment
        and "" is a single empty segment.

        Args:
            key_string: Dot-separated key (e.g., "menu.file.open").

        Returns:
            TranslationKey instance.
        """
        return cls(segments=tuple(key_string.split(".")))

    def lookup(self, tree: Any) -> Tuple[bool, Any]:
        """Walk the tree along this key.

        Each step requires the current node to be a mapping containing the
        next segment. Lists and leaves cannot be walked into.

        Args:
            tree: Root node to start from.

        Returns:
            (found, value) where value is only meaningful when found is True.
        """
        node = tree
        for segment in self.segments:
            if not isinstance(node, Mapping) or segment not in node:
                return False, None
            node = node[segment]
        return True, node


def render_value(value: Any) -> str:
    """Render a looked-up value as display text.

    String leaves are returned verbatim. Anything else is rendered as compact
    JSON with sorted keys so the output is stable across runs.

    Args:
        value: Value found at the end of a key path.

    Returns:
        Display string.
    """
    if isinstance(value, str):
        return value
    try:
        return json.dumps(
            value,
            ensure_ascii=False,
            sort_keys=True,
            separators=(",", ":"),
            default=str,
        )
    except (TypeError, ValueError):
        # Mixed-type keys (possible in YAML payloads) cannot be sorted.
        return str(value)


def missing_key_message(key: str, language: Optional[LanguageCode]) -> str:
    """Placeholder shown when a key exists in neither tree."""
    return f"Key '{key}' not found for language '{language}'"
