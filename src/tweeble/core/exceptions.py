"""Domain error types raised by the service layer.

Services raise these instead of ``HTTPException`` so they stay usable outside a
request. The handlers registered in ``tweeble.main`` translate them:

    TweebleError
    ├── ValidationError   → 400 Bad Request (field-level messages in ``errors``)
    ├── Unauthenticated   → 401 Unauthorized
    └── NotFound          → 404 Not Found
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence


class TweebleError(Exception):
    """Base class for application errors.

    Attributes:
        message: Human-readable description, safe to return to clients.
        errors: Optional mapping of field name to messages for form re-display.
    """

    default_message = "An unexpected error occurred"

    def __init__(
        self,
        message: str | None = None,
        errors: Mapping[str, Sequence[str]] | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.errors: dict[str, list[str]] = {
            field: list(messages) for field, messages in (errors or {}).items()
        }
        super().__init__(self.message)


class ValidationError(TweebleError):
    """Input was well-formed but broke a business rule."""

    default_message = "Invalid input"

    @classmethod
    def for_field(cls, field: str, message: str) -> ValidationError:
        """Build an error carrying a single field-level message."""
        return cls(message, errors={field: [message]})


class Unauthenticated(TweebleError):
    """The operation needs a viewer identity and none was supplied."""

    default_message = "Authentication required"


class NotFound(TweebleError):
    """A tag, user or post requested by name or id does not exist."""

    default_message = "Not found"
