"""
Shared types and exceptions for catalog providers.
"""

from typing import Any, Dict, Optional


# A parsed catalog document. Its shape is only trusted after normalization.
Catalog = Dict[str, Any]


class TravelRecommendationError(Exception):
    """Base exception for travel recommendation errors."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        """Initialize the error.

        Args:
            message: Error message
            details: Additional error details
        """
        super().__init__(message)
        self.details = details or {}


class LoadError(TravelRecommendationError):
    """Raised when the catalog cannot be fetched or parsed.

    ``status`` and ``reason`` hold the HTTP status line when the server
    answered; both are ``None`` for transport failures.
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status: Optional[int] = None,
        reason: Optional[str] = None,
        details: Optional[Dict] = None,
    ):
        super().__init__(message, details)
        self.url = url
        self.status = status
        self.reason = reason

    @classmethod
    def from_status(cls, url: str, status: int, reason: Optional[str]) -> "LoadError":
        status_line = f"{status} {reason}" if reason else str(status)
        return cls(
            f"Failed to fetch JSON ({status_line})",
            url=url,
            status=status,
            reason=reason,
        )
