from typing import Any


class BacklogAssistantError(Exception):
    """Base exception for Backlog Assistant errors."""

    pass


class NotConfiguredError(BacklogAssistantError):
    """Raised when the Backlog API client is used before it is configured."""

    def __init__(self, message: str = "Backlog API is not configured") -> None:
        super().__init__(message)


class UpstreamError(BacklogAssistantError):
    """Raised when the Backlog API answers with a non-2xx status or the transport fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class InvalidParameterError(BacklogAssistantError):
    """Raised when a command parameter cannot be coerced to the expected type."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(f"{field} must be a number (got '{value}')")
        self.field = field
        self.value = value


class GatewayBothFailedError(BacklogAssistantError):
    """Raised when every upstream mirror failed to answer a forwarded request."""

    def __init__(self, attempts: list[Any]) -> None:
        hosts = ", ".join(attempt.url for attempt in attempts) or "no upstream"
        super().__init__(f"All upstream mirrors failed: {hosts}")
        self.attempts = attempts

    @property
    def last_status(self) -> int | None:
        """Status code of the last failed attempt, if it got a response."""
        if not self.attempts:
            return None
        return self.attempts[-1].status_code

    @property
    def last_body(self) -> Any:
        """Parsed body of the last failed attempt, if any."""
        if not self.attempts:
            return None
        return self.attempts[-1].body
