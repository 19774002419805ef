"""
Custom Exception Classes for the site configuration layer

Configuration errors are fatal and surface when the locale context is built.
Lookup errors carry an HTTP status so the read-only API can render them with
the shared error envelope.
"""

import enum
from typing import Any

from fastapi import status


class ErrorCode(str, enum.Enum):
    """Machine-readable error codes returned in error responses."""

    CONFIG_INVALID = "CONFIG_INVALID"
    LOCALE_UNKNOWN = "LOCALE_UNKNOWN"
    KEY_UNKNOWN = "KEY_UNKNOWN"
    COLLECTION_UNKNOWN = "COLLECTION_UNKNOWN"
    TRANSLATION_INCOMPLETE = "TRANSLATION_INCOMPLETE"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class SiteConfigError(Exception):
    """Base exception class for all site configuration errors"""

    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(SiteConfigError):
    """Raised when the static tables are malformed"""

    error_code = ErrorCode.CONFIG_INVALID

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message=message, details=details)


class IncompleteTranslationError(ConfigurationError):
    """Raised in strict mode when a locale is missing reference keys"""

    error_code = ErrorCode.TRANSLATION_INCOMPLETE

    def __init__(self, gaps: list[dict[str, str]]):
        super().__init__(
            message=f"{len(gaps)} translation(s) missing from non-reference locales",
            details={"gaps": gaps},
        )


# ============================================================================
# Lookup Exceptions
# ============================================================================


class UnknownLocaleError(SiteConfigError):
    """Raised when a locale outside the supported set is requested"""

    error_code = ErrorCode.LOCALE_UNKNOWN

    def __init__(self, locale: str, supported: tuple[str, ...] | list[str] = ()):
        self.locale = locale
        super().__init__(
            message=f"Locale '{locale}' is not supported",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"locale": locale, "supported": list(supported)},
        )


class UnknownKeyError(SiteConfigError):
    """Raised when a key is absent even from the reference locale"""

    error_code = ErrorCode.KEY_UNKNOWN

    def __init__(self, table: str, key: str, locale: str | None = None):
        self.table = table
        self.key = key
        self.locale = locale
        message = f"Unknown {table} key '{key}'"
        if locale is not None:
            message = f"{message} for locale '{locale}'"
        details = {"table": table, "key": key}
        if locale is not None:
            details["locale"] = locale
        super().__init__(message=message, status_code=status.HTTP_404_NOT_FOUND, details=details)


class UnknownCollectionError(UnknownKeyError):
    """Raised when a collection is neither localized nor declared locale-invariant"""

    error_code = ErrorCode.COLLECTION_UNKNOWN

    def __init__(self, collection: str):
        super().__init__(table="collection", key=collection)
        self.message = (
            f"Collection '{collection}' is not registered as localized or locale-invariant"
        )
        self.args = (self.message,)


# ============================================================================
# Warnings
# ============================================================================


class PartialTranslationWarning(UserWarning):
    """A non-reference locale fell back to the reference value for a key"""

    def __init__(self, table: str, key: str, locale: str, reference_locale: str):
        self.table = table
        self.key = key
        self.locale = locale
        self.reference_locale = reference_locale
        super().__init__(
            f"{table} key '{key}' is missing for locale '{locale}', "
            f"using '{reference_locale}' value"
        )
