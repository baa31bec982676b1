"""i18n provider - translation lookup and language switching for UI trees.

Usage:
    from i18n_provider import SessionConfig, SessionController

    config = SessionConfig(
        translations={"en": '{"greeting": "Hello"}', "fr": '{"greeting": "Bonjour"}'},
    )
    with SessionController(config) as controller:
        resolver, set_language = use_translation(controller.context())
        set_language("fr")
"""

from i18n_provider.translation import (
    I18nContext,
    I18nError,
    I18nInitializationError,
    InMemoryLanguageStorage,
    Resolver,
    SessionConfig,
    SessionController,
    StorageType,
    use_translation,
)
from i18n_provider.translation.factory import create_session

__all__ = [
    "I18nContext",
    "I18nError",
    "I18nInitializationError",
    "InMemoryLanguageStorage",
    "Resolver",
    "SessionConfig",
    "SessionController",
    "StorageType",
    "create_session",
    "use_translation",
]
