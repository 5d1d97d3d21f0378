"""Error types raised by translation lookups."""

from enum import Enum, auto
from typing import Optional


class ErrorKind(Enum):
    """Kinds of localization failures."""
    LOCALE_NOT_FOUND = auto()
    TRANSLATION_KEY_NOT_FOUND = auto()
    INVALID_ARGUMENT = auto()
    # Logged as a warning, never raised
    MISSING_TRANSLATION_SOURCE = auto()


class LocalizationError(Exception):
    """Base class for every error raised by tolk."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class LocaleNotFound(LocalizationError, KeyError):
    """The requested locale is absent from the translation table."""

    kind = ErrorKind.LOCALE_NOT_FOUND

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Locale [{locale}] does not exist.")


class TranslationKeyNotFound(LocalizationError, KeyError):
    """The key could not be resolved in the active nor the fallback locale."""

    kind = ErrorKind.TRANSLATION_KEY_NOT_FOUND

    def __init__(self, key: str, segment: str, locale: Optional[str] = None):
        self.key = key
        self.segment = segment
        self.locale = locale
        super().__init__(
            f'Translation key not found : "{key}" -> Exactly "{segment}" not found'
        )


class InvalidArgument(LocalizationError, ValueError):
    """A caller passed arguments that break the translation contract."""

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, argument: str, message: str):
        self.argument = argument
        super().__init__(message)
