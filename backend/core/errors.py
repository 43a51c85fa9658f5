"""
Validation errors raised before scoring. Each knows its own 400 response body.
"""
from typing import Any


class InputValidationError(Exception):
    """Request cannot be scored as submitted; never retried."""

    error = "Invalid request"

    def to_response(self) -> dict[str, Any]:
        return {"error": self.error}


class MissingFields(InputValidationError):
    error = "Missing required fields"

    def __init__(self, fields: list[str], message: str | None = None):
        self.fields = list(fields)
        self.message = message
        super().__init__(f"{self.error}: {', '.join(self.fields)}")

    def to_response(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.error, "missingFields": self.fields}
        if self.message:
            body["message"] = self.message
        return body


class InvalidField(InputValidationError):
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        self.error = f"Invalid {field} value"
        super().__init__(f"{self.error}: {message}")

    def to_response(self) -> dict[str, Any]:
        return {"error": self.error, "message": self.message}
