"""Uniform response envelope returned by every villa endpoint that has a body."""

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class APIResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status_code: int = status.HTTP_200_OK
    is_success: bool = True
    error_messages: list[str] = Field(default_factory=list)
    result: Any = None

    @classmethod
    def ok(cls, result: Any, status_code: int = status.HTTP_200_OK) -> "APIResponse":
        return cls(status_code=status_code, result=result)

    @classmethod
    def failure(cls, status_code: int, messages: list[str]) -> "APIResponse":
        return cls(status_code=status_code, is_success=False, error_messages=messages)

    def to_response(self, headers: dict[str, str] | None = None) -> JSONResponse:
        """Render with camelCase keys; the HTTP status mirrors ``status_code``."""
        return JSONResponse(
            status_code=self.status_code,
            content=self.model_dump(by_alias=True, mode="json"),
            headers=headers,
        )
