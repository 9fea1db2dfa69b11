"""Pydantic models for form API responses."""

from typing import Literal

from pydantic import BaseModel


class FormRedirectResponse(BaseModel):
    """Instructs the caller to open an externally rendered form."""

    success: bool = True
    type: Literal["dynamic"] = "dynamic"
    formUrl: str  # noqa: N815
    message: str


class FormSubmitResponse(BaseModel):
    """Result of a static form submission."""

    success: bool = True
    submission_id: str


class FormErrorResponse(BaseModel):
    """Error payload for rejected submissions."""

    error: bool = True
    message: str
