"""Request/response models for the voice endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

_REQUEST_FIELDS = ("text", "language", "mode")


class SynthesisRequest(BaseModel):
    """JSON body accepted by ``POST /api/voice``.

    Fields are untyped: any falsy ``text`` is reported as a 400 by the
    handler, and a non-string ``mode`` simply never equals ``"cloned"``.
    Defaults apply only to absent keys; an explicit ``null`` stays ``None``.
    """

    text: Any = None
    language: Any = Field(default="en")
    mode: Any = Field(default="cloned")

    @classmethod
    def from_json(cls, body: Any) -> SynthesisRequest:
        """Build from any parsed JSON value.

        Non-object values (arrays, numbers, strings) carry no fields.

        Raises:
            TypeError: if ``body`` is JSON ``null``.
        """
        if body is None:
            raise TypeError("Cannot read request fields from JSON null")
        fields = body if isinstance(body, dict) else {}
        return cls.model_validate(
            {key: fields[key] for key in _REQUEST_FIELDS if key in fields}
        )


class ErrorBody(BaseModel):
    """Error payload shared by every failure branch."""

    error: str
    details: str | None = None

    def as_content(self) -> dict:
        return self.model_dump(exclude_none=True)
