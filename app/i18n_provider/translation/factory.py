"""Factory functions for creating i18n sessions.

Provides convenience functions wiring storage, payload loading and callbacks
from the application settings.
"""

from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from i18n_provider.core.config import Settings, get_settings
from i18n_provider.core.logging import get_module_logger
from i18n_provider.translation.direction import (
    DocumentTextDirectionHook,
    NullTextDirectionHook,
)
from i18n_provider.translation.loader import DirectoryTranslationLoader
from i18n_provider.translation.models import LanguageCode, PayloadFormat, StorageType
from i18n_provider.translation.session import SessionConfig, SessionController
from i18n_provider.translation.storage import LanguageStorage, create_storage

logger = get_module_logger()


def create_session(
    translations: Optional[Mapping[LanguageCode, str]] = None,
    settings: Optional[Settings] = None,
    storage: Optional[LanguageStorage] = None,
    document: Optional[Any] = None,
    on_change: Optional[Callable[[LanguageCode], None]] = None,
    on_error: Optional[Callable[[str], None]] = None,
    initialize: bool = True,
) -> SessionController:
    """Create and configure a SessionController.

    If no translations are provided, they are loaded from the configured
    translations directory.

    Args:
        translations: Raw payload text by language code (default: load from
            settings.i18n.translations_dir)
        settings: Settings to read defaults from (default: process settings)
        storage: Storage backend (default: selected by settings.i18n.storage_type)
        document: Document-like object for the text-direction side effect
            (default: none, the side effect is a no-op)
        on_change: Callback for successful language changes
        on_error: Callback for initialization errors
        initialize: Whether to initialize the session immediately (default: True)

    Returns:
        SessionController: Configured controller

    Raises:
        ValueError: If no translations are given and no directory is configured
        I18nInitializationError: If initialize is True and loading fails

    Usage:
        # Translations from I18N_TRANSLATIONS_DIR, storage from I18N_STORAGE_TYPE
        controller = create_session()

        # Explicit translations with a document for RTL handling
        controller = create_session(
            translations={"en": '{"greeting": "Hello"}', "ar": '{"greeting": "مرحبا"}'},
            document=document,
        )
    """
    settings = settings or get_settings()
    i18n_settings = settings.i18n
    payload_format = PayloadFormat.from_string(i18n_settings.payload_format)

    if translations is None:
        if not i18n_settings.translations_dir:
            raise ValueError(
                "No translations given and I18N_TRANSLATIONS_DIR is not configured"
            )
        loader = DirectoryTranslationLoader(
            translations_dir=Path(i18n_settings.translations_dir),
            payload_format=payload_format,
        )
        translations = loader.load()

    if storage is None:
        storage = create_storage(
            StorageType(i18n_settings.storage_type),
            path=i18n_settings.storage_path,
        )

    text_direction = (
        DocumentTextDirectionHook(document)
        if document is not None
        else NullTextDirectionHook()
    )

    config = SessionConfig(
        translations=translations,
        storage=storage,
        storage_key=i18n_settings.storage_key,
        default_language=i18n_settings.default_language,
        text_direction=text_direction,
        payload_format=payload_format,
    )
    if on_change is not None:
        config.on_change = on_change
    if on_error is not None:
        config.on_error = on_error

    controller = SessionController(config)

    if initialize:
        controller.initialize()
        logger.info(
            "session_created",
            storage_type=i18n_settings.storage_type,
            language=controller.current_language(),
        )
    else:
        logger.info("session_created_uninitialized")

    return controller
