"""Resolver core: loaded translation trees, the active language and lookup.

Pure and synchronous. A resolver never performs I/O; persistence and
document side effects belong to the session controller.
"""

from typing import Any, Dict, List, Mapping, Optional

from i18n_provider.core.logging import get_module_logger
from i18n_provider.translation.direction import TextDirection, direction_for
from i18n_provider.translation.exceptions import (
    EmptyLanguageSetError,
    UnsupportedLanguageError,
)
from i18n_provider.translation.loader import parse_payloads
from i18n_provider.translation.models import (
    LanguageCode,
    PayloadFormat,
    TranslationKey,
    TranslationTree,
    missing_key_message,
    render_value,
)

logger = get_module_logger()


class Resolver:
    """Translation lookup over nested per-language trees with fallback.

    The language set is fixed at construction. The fallback language is the
    first language of the input mapping, so the input must preserve insertion
    order (any dict does).

    Attributes:
        fallback_language: First language of the input mapping.
    """

    def __init__(self, trees: Mapping[LanguageCode, TranslationTree]):
        """Build a resolver from already-parsed trees.

        Args:
            trees: Translation tree by language code, fallback language first.

        Raises:
            EmptyLanguageSetError: If no language is given.
        """
        if not trees:
            raise EmptyLanguageSetError()

        self._trees: Dict[LanguageCode, TranslationTree] = dict(trees)
        self.fallback_language: LanguageCode = next(iter(self._trees))
        self._current_language: LanguageCode = self.fallback_language

    @classmethod
    def from_raw(
        cls,
        raw_translations: Mapping[LanguageCode, str],
        payload_format: PayloadFormat = PayloadFormat.JSON,
    ) -> "Resolver":
        """Parse raw payloads and build a resolver.

        Args:
            raw_translations: Raw structured-data text by language code.
            payload_format: Parser to use for every payload.

        Returns:
            Resolver with the fallback language selected.

        Raises:
            EmptyLanguageSetError: If no language is given.
            InvalidPayloadError: If any payload fails to parse. No resolver
                is produced for the remaining valid payloads.
        """
        return cls(parse_payloads(raw_translations, payload_format))

    @property
    def current_language(self) -> LanguageCode:
        return self._current_language

    @property
    def available_languages(self) -> List[LanguageCode]:
        """Loaded language codes in construction order."""
        return list(self._trees)

    @property
    def direction(self) -> TextDirection:
        """Text direction of the current language."""
        return direction_for(self._current_language)

    def supports(self, language: LanguageCode) -> bool:
        return language in self._trees

    def set_language(self, language: LanguageCode) -> None:
        """Select the active language.

        Args:
            language: Language code to activate.

        Raises:
            UnsupportedLanguageError: If the language was never loaded. The
                current language is left unchanged.
        """
        if language not in self._trees:
            raise UnsupportedLanguageError(language)
        self._current_language = language

    def translate(self, key: str) -> str:
        """Resolve a dot-separated key for the current language.

        Looks the key up in the current language, then in the fallback
        language. Never raises: a key found nowhere yields a placeholder
        naming the key and the current language.

        Args:
            key: Dot-separated path (e.g., "menu.file.open").

        Returns:
            The string leaf, a JSON rendering for non-string nodes, or the
            placeholder.
        """
        path = TranslationKey.from_string(key)

        found, value = path.lookup(self._trees.get(self._current_language))
        if not found:
            found, value = path.lookup(self._trees.get(self.fallback_language))
            if found and self._current_language != self.fallback_language:
                logger.debug(
                    "used_fallback_translation",
                    key=key,
                    language=self._current_language,
                    fallback_language=self.fallback_language,
                )

        if not found:
            logger.warning(
                "translation_key_missing",
                key=key,
                language=self._current_language,
                fallback_language=self.fallback_language,
            )
            return missing_key_message(key, self._current_language)

        return render_value(value)

    t = translate

    def has_key(self, key: str, language: Optional[LanguageCode] = None) -> bool:
        """Check if a key exists in one language, without fallback.

        Args:
            key: Dot-separated path.
            language: Language to check (default: current language).

        Returns:
            True if the full path exists in that language's tree.
        """
        tree = self._trees.get(
            language if language is not None else self._current_language
        )
        found, _ = TranslationKey.from_string(key).lookup(tree)
        return found

    def copy(self) -> "Resolver":
        """Return an independent snapshot sharing the read-only trees."""
        clone = Resolver.__new__(Resolver)
        clone._trees = self._trees
        clone.fallback_language = self.fallback_language
        clone._current_language = self._current_language
        return clone

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Resolver):
            return NotImplemented
        return (
            self._current_language == other._current_language
            and self._trees == other._trees
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Resolver(current_language={self._current_language!r}, "
            f"languages={self.available_languages!r})"
        )
