"""Structured error body returned by the API."""

from pydantic import BaseModel, ConfigDict, model_validator


class ApiErrorBody(BaseModel):
    """``{"error": ..., "error_description": ...}`` payload.

    At least one of the two fields must be present, otherwise any JSON object
    would pass as an error body.
    """

    error: str | None = None
    error_description: str | None = None

    @model_validator(mode="after")
    def require_some_field(self) -> "ApiErrorBody":
        if self.error is None and self.error_description is None:
            raise ValueError("error body needs error or error_description")
        return self

    model_config = ConfigDict(frozen=True)
