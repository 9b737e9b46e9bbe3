"""Domain exceptions for the tag cloud service.

Defines exceptions for misconfiguration, store failures and bad rendering
options. A category without a tag taxonomy is not an exception: builders
and stores return the NO_TAXONOMY sentinel instead. Presentation layer
maps these to HTTP responses in exception handlers.
"""

from typing import Any


class TagCloudException(Exception):
    """Base exception for all tag cloud errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. category, taxonomy).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TagCloudException):
    """Raised when input validation fails (e.g. invalid limit or category)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ConfigurationException(TagCloudException):
    """Raised when the content catalog or settings cannot be used."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "CONFIGURATION_ERROR", details)


class AggregationFailedException(TagCloudException):
    """Raised when the content store cannot aggregate tag usage.

    Not cached and not retried; callers decide whether to try again.
    """

    def __init__(self, category: str, taxonomy: str, reason: str) -> None:
        """Initialize with the aggregation that failed.

        Args:
            category: Content category being aggregated.
            taxonomy: Tag taxonomy being aggregated.
            reason: Underlying store error message.
        """
        super().__init__(
            f"Tag aggregation failed for {category}/{taxonomy}",
            "AGGREGATION_FAILED",
            {"category": category, "taxonomy": taxonomy, "reason": reason},
        )


class UnsupportedViewModeException(TagCloudException):
    """Raised when a cloud is rendered with an unknown view mode."""

    def __init__(self, view: str) -> None:
        """Initialize with the rejected view mode.

        Args:
            view: The view mode that was requested.
        """
        self.view = view
        super().__init__(
            f"Unknown view mode '{view}'",
            "UNSUPPORTED_VIEW_MODE",
            {"view": view},
        )
