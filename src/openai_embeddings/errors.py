from typing import Any


class ParseError(ValueError):
    """The response body does not match the expected schema."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class APIStatusError(RuntimeError):
    """The remote service answered with a 4xx/5xx status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Remote service returned HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body
