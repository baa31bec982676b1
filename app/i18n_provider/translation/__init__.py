"""Translation system - lookup, language switching and persistence.

Main components:
- models: TranslationKey, PayloadFormat, StorageType
- loader: payload parsing and DirectoryTranslationLoader
- resolver: Resolver, lookup with fallback language
- direction: RTL policy and text-direction hooks
- storage: LanguageStorage backends
- observable: ObservableCell
- session: SessionController, SessionConfig, I18nContext
"""

from i18n_provider.translation.direction import (
    DocumentTextDirectionHook,
    NullTextDirectionHook,
    RTL_LANGUAGES,
    TextDirection,
    TextDirectionHook,
    direction_for,
    is_rtl_language,
)
from i18n_provider.translation.exceptions import (
    EmptyLanguageSetError,
    I18nError,
    I18nInitializationError,
    InvalidPayloadError,
    StorageError,
    UnsupportedLanguageError,
)
from i18n_provider.translation.loader import (
    DirectoryTranslationLoader,
    TranslationLoader,
    parse_payload,
    parse_payloads,
)
from i18n_provider.translation.models import PayloadFormat, StorageType, TranslationKey
from i18n_provider.translation.observable import ObservableCell
from i18n_provider.translation.resolver import Resolver
from i18n_provider.translation.session import (
    I18nContext,
    SessionConfig,
    SessionController,
    SessionState,
    use_translation,
)
from i18n_provider.translation.storage import (
    FileLanguageStorage,
    InMemoryLanguageStorage,
    LanguageStorage,
    NullLanguageStorage,
    create_storage,
)

__all__ = [
    "DirectoryTranslationLoader",
    "DocumentTextDirectionHook",
    "EmptyLanguageSetError",
    "FileLanguageStorage",
    "I18nContext",
    "I18nError",
    "I18nInitializationError",
    "InMemoryLanguageStorage",
    "InvalidPayloadError",
    "LanguageStorage",
    "NullLanguageStorage",
    "NullTextDirectionHook",
    "ObservableCell",
    "PayloadFormat",
    "RTL_LANGUAGES",
    "Resolver",
    "SessionConfig",
    "SessionController",
    "SessionState",
    "StorageError",
    "StorageType",
    "TextDirection",
    "TextDirectionHook",
    "TranslationKey",
    "TranslationLoader",
    "UnsupportedLanguageError",
    "create_storage",
    "direction_for",
    "is_rtl_language",
    "parse_payload",
    "parse_payloads",
    "use_translation",
]
