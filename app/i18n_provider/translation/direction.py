"""Text direction policy and the document side-effect hook."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, FrozenSet, Optional

from i18n_provider.core.logging import get_module_logger
from i18n_provider.translation.models import LanguageCode

logger = get_module_logger()

RTL_LANGUAGES: FrozenSet[str] = frozenset({"ar", "he", "fa", "ur", "ps", "ku", "sd"})


class TextDirection(str, Enum):
    """Document text direction values."""

    LTR = "ltr"
    RTL = "rtl"


def is_rtl_language(language: LanguageCode) -> bool:
    """Return True if the language code is written right-to-left.

    Matching is exact and case-sensitive: "ar" is RTL, "ar-EG" and "AR" are not.
    """
    return language in RTL_LANGUAGES


def direction_for(language: LanguageCode) -> TextDirection:
    return TextDirection.RTL if is_rtl_language(language) else TextDirection.LTR


class TextDirectionHook(ABC):
    """Side effect applied whenever a language is selected or requested."""

    @abstractmethod
    def apply(self, language: LanguageCode) -> None:
        """Apply the text direction of a language to the host environment.

        Implementations must not raise.

        Args:
            language: Language code being applied.
        """
        pass


class NullTextDirectionHook(TextDirectionHook):
    """No-op hook for hosts without a document."""

    def apply(self, language: LanguageCode) -> None:
        return None


class DocumentTextDirectionHook(TextDirectionHook):
    """Sets the `dir` attribute on a document's root element.

    The document is any object exposing `document_element`, which in turn
    exposes `set_attribute(name, value)`. A missing document or root element
    turns the hook into a no-op.

    Attributes:
        document: Document-like object, or None.
        last_direction: Direction written by the most recent apply().
    """

    def __init__(self, document: Optional[Any] = None):
        self.document = document
        self.last_direction: Optional[TextDirection] = None

    def apply(self, language: LanguageCode) -> None:
        if self.document is None:
            return
        element = getattr(self.document, "document_element", None)
        if element is None:
            return

        direction = direction_for(language)
        try:
            element.set_attribute("dir", direction.value)
        except Exception as e:  # noqa: BLE001 - host attribute writes are best-effort
            logger.warning(
                "text_direction_update_failed",
                language=language,
                direction=direction.value,
                error=str(e),
            )
            return

        self.last_direction = direction
        logger.debug(
            "text_direction_applied", language=language, direction=direction.value
        )
