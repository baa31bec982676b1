"""Session controller: the language-switch protocol around a resolver.

A controller owns one observable cell holding the current resolver snapshot.
Snapshots are never mutated once published; a switch works on a copy and
publishes it, so subscribers see a new object on every change.

Initialization:
    1. read the persisted language (default language when absent/unreadable)
    2. build the resolver (failure is terminal: on_error, then raise)
    3. select the initial language (failure: on_error, keep the fallback)
    4. apply the text direction of the initial language
    5. publish the snapshot

Language change:
    1. take the current snapshot
    2. apply the text direction of the requested language
    3. select it on a copy (unsupported: silently rejected, nothing else runs)
    4. publish the copy
    5. call on_change
    6. persist the language, best-effort
"""

import asyncio
import inspect
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Mapping, Optional, Set, Tuple

from i18n_provider.core.logging import get_module_logger
from i18n_provider.translation.direction import (
    NullTextDirectionHook,
    TextDirectionHook,
)
from i18n_provider.translation.exceptions import (
    EmptyLanguageSetError,
    I18nError,
    I18nInitializationError,
    InvalidPayloadError,
    StorageError,
    UnsupportedLanguageError,
)
from i18n_provider.translation.models import LanguageCode, PayloadFormat
from i18n_provider.translation.observable import ObservableCell
from i18n_provider.translation.resolver import Resolver
from i18n_provider.translation.storage import LanguageStorage, NullLanguageStorage

logger = get_module_logger()

DEFAULT_STORAGE_KEY = "i18nrs"
DEFAULT_LANGUAGE = "en"


def _noop(_: str) -> None:
    return None


class SessionState(str, Enum):
    """Lifecycle of a session controller."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    FAILED = "failed"
    CLOSED = "closed"


@dataclass
class SessionConfig:
    """Configuration of one provider mount.

    Attributes:
        translations: Raw payload text by language code, fallback first.
        storage: Where the selected language is persisted.
        storage_key: Key the selected language is stored under.
        default_language: Language used when nothing is persisted.
        text_direction: Side effect applied for each selected language.
        payload_format: Format of the raw payloads.
        on_change: Called with the new language after a successful switch.
        on_error: Called with a message for initialization errors.
    """

    translations: Mapping[LanguageCode, str] = field(default_factory=dict)
    storage: LanguageStorage = field(default_factory=NullLanguageStorage)
    storage_key: str = DEFAULT_STORAGE_KEY
    default_language: LanguageCode = DEFAULT_LANGUAGE
    text_direction: TextDirectionHook = field(default_factory=NullTextDirectionHook)
    payload_format: PayloadFormat = PayloadFormat.JSON
    on_change: Callable[[LanguageCode], None] = _noop
    on_error: Callable[[str], None] = _noop


@dataclass(frozen=True)
class I18nContext:
    """Read-only view handed down to consumers.

    Attributes:
        get_resolver: Returns the current resolver snapshot.
        set_language: Requests a language change; True if accepted.
    """

    get_resolver: Callable[[], Resolver]
    set_language: Callable[[LanguageCode], bool]

    @property
    def resolver(self) -> Resolver:
        return self.get_resolver()

    @property
    def current_language(self) -> LanguageCode:
        return self.get_resolver().current_language

    def translate(self, key: str) -> str:
        return self.get_resolver().translate(key)

    t = translate


def use_translation(
    context: Optional[I18nContext],
) -> Tuple[Resolver, Callable[[LanguageCode], bool]]:
    """Return the current resolver and the switch function of a context.

    Args:
        context: Context received from the provider.

    Returns:
        (resolver snapshot, set_language)

    Raises:
        I18nError: If no context was provided.
    """
    if context is None:
        raise I18nError("No I18n context provided")
    return context.resolver, context.set_language


class SessionController:
    """Orchestrates language switching, persistence and side effects.

    Not designed for overlapping switch requests: callers serialize them,
    as a UI event loop does.

    Usage:
        config = SessionConfig(
            translations={"en": '{"greeting": "Hello"}', "fr": '{"greeting": "Bonjour"}'},
            storage=InMemoryLanguageStorage(),
            on_change=lambda language: print(language),
        )
        with SessionController(config) as controller:
            controller.translate("greeting")
            controller.request_language_change("fr")
    """

    def __init__(self, config: SessionConfig):
        self.config = config
        self.state = SessionState.UNINITIALIZED
        self._cell: Optional[ObservableCell[Resolver]] = None
        self._pending_writes: Set["asyncio.Future[Any]"] = set()
        self.log = logger.bind(storage_key=config.storage_key)

    def initialize(self) -> Resolver:
        """Build the resolver and publish the first snapshot.

        Returns:
            The published resolver snapshot.

        Raises:
            I18nInitializationError: If the translations cannot be loaded.
                on_error has already been called with the detail.
            I18nError: If the controller is not uninitialized.
        """
        if self.state is not SessionState.UNINITIALIZED:
            raise I18nError(
                f"Session cannot be initialized from state {self.state.value}"
            )

        initial_language = self._read_persisted_language()

        try:
            resolver = Resolver.from_raw(
                self.config.translations, self.config.payload_format
            )
        except (EmptyLanguageSetError, InvalidPayloadError) as e:
            self.state = SessionState.FAILED
            self.log.error("i18n_initialization_failed", error=str(e))
            self._emit_error(str(e))
            raise I18nInitializationError(f"Failed to initialize I18n: {e}") from e

        try:
            resolver.set_language(initial_language)
        except UnsupportedLanguageError as e:
            self.log.warning(
                "initial_language_unsupported",
                language=initial_language,
                fallback_language=resolver.fallback_language,
            )
            self._emit_error(str(e))

        self._apply_direction(initial_language)

        self._cell = ObservableCell(resolver)
        self.state = SessionState.READY
        self.log.info(
            "i18n_session_ready",
            language=resolver.current_language,
            languages=resolver.available_languages,
        )
        return resolver

    def request_language_change(self, language: LanguageCode) -> bool:
        """Switch the active language.

        The text direction is applied before the language is validated.
        An unsupported language is rejected without calling on_error and
        without persisting or publishing anything.

        Args:
            language: Requested language code.

        Returns:
            True if the language was switched, False if rejected.
        """
        cell = self._require_ready()
        snapshot = cell.get()

        self._apply_direction(language)

        working = snapshot.copy()
        try:
            working.set_language(language)
        except UnsupportedLanguageError:
            self.log.info(
                "language_change_rejected",
                language=language,
                current_language=snapshot.current_language,
            )
            return False

        cell.set(working)
        self._emit_change(language)
        self._persist(language)

        self.log.info(
            "language_changed",
            language=language,
            previous_language=snapshot.current_language,
        )
        return True

    set_language = request_language_change

    @property
    def snapshot(self) -> Resolver:
        return self._require_ready().get()

    def current_language(self) -> LanguageCode:
        return self.snapshot.current_language

    def translate(self, key: str) -> str:
        return self.snapshot.translate(key)

    t = translate

    def subscribe(self, callback: Callable[[Resolver], None]) -> Callable[[], None]:
        """Be notified with each newly published resolver snapshot.

        Returns:
            Function that removes the subscription.
        """
        return self._require_ready().subscribe(callback)

    def context(self) -> I18nContext:
        """Build the read-only context handed to consumers."""
        self._require_ready()
        return I18nContext(
            get_resolver=lambda: self.snapshot,
            set_language=self.request_language_change,
        )

    def close(self) -> None:
        """Release the observable cell. Pending async writes are left running."""
        if self._cell is not None:
            self._cell.clear()
            self._cell = None
        if self.state is SessionState.READY:
            self.state = SessionState.CLOSED
        self.log.debug("i18n_session_closed")

    def __enter__(self) -> "SessionController":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _require_ready(self) -> ObservableCell[Resolver]:
        if self.state is not SessionState.READY or self._cell is None:
            raise I18nError(f"Session is not ready (state: {self.state.value})")
        return self._cell

    def _read_persisted_language(self) -> LanguageCode:
        try:
            stored = self.config.storage.get(self.config.storage_key)
        except (StorageError, OSError, ValueError) as e:
            self.log.warning("persisted_language_unreadable", error=str(e))
            return self.config.default_language

        if inspect.isawaitable(stored):
            # Initialization is synchronous; asynchronous reads cannot be waited on.
            self.log.warning(
                "persisted_language_unreadable", error="asynchronous storage read"
            )
            if inspect.iscoroutine(stored):
                stored.close()
            return self.config.default_language

        if stored is None:
            return self.config.default_language
        return stored

    def _apply_direction(self, language: LanguageCode) -> None:
        try:
            self.config.text_direction.apply(language)
        except Exception as e:
            self.log.warning(
                "text_direction_hook_failed", language=language, error=str(e)
            )

    def _emit_change(self, language: LanguageCode) -> None:
        try:
            self.config.on_change(language)
        except Exception as e:
            self.log.error("on_change_callback_failed", language=language, error=str(e))

    def _emit_error(self, message: str) -> None:
        try:
            self.config.on_error(message)
        except Exception as e:
            self.log.error("on_error_callback_failed", message=message, error=str(e))

    def _persist(self, language: LanguageCode) -> None:
        try:
            result = self.config.storage.set(self.config.storage_key, language)
        except Exception as e:
            self.log.warning("persist_language_failed", language=language, error=str(e))
            return

        if inspect.isawaitable(result):
            self._schedule_write(result, language)
        elif result is False:
            self.log.warning("persist_language_failed", language=language)

    def _schedule_write(self, write: Awaitable[bool], language: LanguageCode) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.log.warning(
                "persist_language_dropped",
                language=language,
                reason="no running event loop",
            )
            if inspect.iscoroutine(write):
                write.close()
            return

        future = asyncio.ensure_future(write, loop=loop)
        self._pending_writes.add(future)

        def _done(fut: "asyncio.Future[Any]") -> None:
            self._pending_writes.discard(fut)
            if fut.cancelled():
                return
            error = fut.exception()
            if error is not None:
                self.log.warning(
                    "persist_language_failed", language=language, error=str(error)
                )
            elif fut.result() is False:
                self.log.warning("persist_language_failed", language=language)

        future.add_done_callback(_done)
