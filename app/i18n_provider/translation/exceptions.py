"""Exceptions for the translation system.

Construction errors are fatal for the resolver being built, language switch
errors are recoverable, and a missing translation key is never an error.
"""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            resolver = Resolver.from_raw(raw)
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class EmptyLanguageSetError(I18nError):
    """Raised when a resolver is built without any language.

    Example:
        >>> Resolver.from_raw({})
        Traceback (most recent call last):
        ...
        EmptyLanguageSetError: You must add at least one supported language
    """

    def __init__(self, message: str = "You must add at least one supported language"):
        super().__init__(message)


class InvalidPayloadError(I18nError):
    """Raised when one language payload cannot be parsed into a tree.

    Attributes:
        language: Language code of the offending payload.
        detail: Message reported by the parser.
    """

    def __init__(self, language: str, detail: str, format_name: str = "JSON"):
        self.language = language
        self.detail = detail
        super().__init__(f"Invalid {format_name} for language {language}: {detail}")


class UnsupportedLanguageError(I18nError):
    """Raised when switching to a language that was never loaded.

    Attributes:
        language: The rejected language code.
    """

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Language '{language}' is not supported")


class StorageError(I18nError):
    """Raised by a storage backend that cannot be read."""

    pass


class I18nInitializationError(I18nError):
    """Raised when a session cannot be initialized.

    The dependent UI subtree must not be rendered; hosts are expected to catch
    this in their error boundary.
    """

    pass
