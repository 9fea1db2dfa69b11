"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, Response

from form_service.api.models import (
    FormErrorResponse,
    FormRedirectResponse,
    FormSubmitResponse,
)
from form_service.app_logging import configure_logging
from form_service.containers import AppContainer
from form_service.domain.errors import FormError, FormValidationError
from form_service.domain.forms import FormRequestContext, RedirectInstruction
from form_service.domain.submissions import SubmissionFailed


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    async def render_form(
        request: Request,
        domain: str | None,
        form_url: str,
        context: FormRequestContext,
    ) -> Response:
        state_container: AppContainer = request.app.state.container
        descriptor = state_container.form_resolver.resolve(domain, form_url)
        if descriptor is None:
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"error": "Form not found"},
            )
        instruction = state_container.render_decision.decide(descriptor, context)
        if isinstance(instruction, RedirectInstruction):
            body = FormRedirectResponse(
                formUrl=instruction.form_url, message=instruction.message
            )
            return JSONResponse(content=body.model_dump())
        return HTMLResponse(instruction.html)

    async def submit_form(
        request: Request,
        domain: str | None,
        form_url: str,
        context: FormRequestContext,
    ) -> Response:
        state_container: AppContainer = request.app.state.container
        try:
            payload = await _read_payload(request)
        except ValueError:
            logger.warning("Rejected submission with malformed body")
            return _error_response(FormValidationError([]), "Invalid submission body")

        outcome = await state_container.submission_processor.submit(
            domain, form_url, payload, context
        )
        if isinstance(outcome, SubmissionFailed):
            return _error_response(outcome.error)
        if outcome.html is not None:
            return HTMLResponse(outcome.html)
        body = FormSubmitResponse(submission_id=outcome.submission_id)
        return JSONResponse(content=body.model_dump())

    @app.get("/forms/{domain}/{form_url}", response_model=None)
    async def get_domain_form(  # noqa: PLR0913
        domain: str,
        form_url: str,
        request: Request,
        session_id: str | None = None,
        flow_id: str | None = None,
        transaction_id: str | None = None,
        direct: str | None = None,
    ) -> Response:
        """Render or redirect to a domain-scoped form."""
        context = _request_context(session_id, flow_id, transaction_id, direct)
        return await render_form(request, domain, form_url, context)

    @app.get("/forms/{form_url}", response_model=None)
    async def get_form(  # noqa: PLR0913
        form_url: str,
        request: Request,
        session_id: str | None = None,
        flow_id: str | None = None,
        transaction_id: str | None = None,
        direct: str | None = None,
    ) -> Response:
        """Render or redirect to a form."""
        context = _request_context(session_id, flow_id, transaction_id, direct)
        return await render_form(request, None, form_url, context)

    @app.post("/forms/{domain}/{form_url}/submit", response_model=None)
    async def submit_domain_form(  # noqa: PLR0913
        domain: str,
        form_url: str,
        request: Request,
        session_id: str | None = None,
        flow_id: str | None = None,
        transaction_id: str | None = None,
    ) -> Response:
        """Accept a submission for a domain-scoped form."""
        context = _request_context(session_id, flow_id, transaction_id, None)
        return await submit_form(request, domain, form_url, context)

    @app.post("/forms/{form_url}/submit", response_model=None)
    async def submit_plain_form(
        form_url: str,
        request: Request,
        session_id: str | None = None,
        flow_id: str | None = None,
        transaction_id: str | None = None,
    ) -> Response:
        """Accept a submission for a form."""
        context = _request_context(session_id, flow_id, transaction_id, None)
        return await submit_form(request, None, form_url, context)

    return app


def _request_context(
    session_id: str | None,
    flow_id: str | None,
    transaction_id: str | None,
    direct: str | None,
) -> FormRequestContext:
    """Build the request context; `direct` counts when given a non-empty value."""
    return FormRequestContext(
        session_id=session_id,
        flow_id=flow_id,
        transaction_id=transaction_id,
        direct=bool(direct),
    )


_FORM_MEDIA_TYPES = {"application/x-www-form-urlencoded", "multipart/form-data"}


async def _read_payload(request: Request) -> dict[str, object]:
    """Read submitted fields from a JSON or form-encoded body."""
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";")[0].strip().lower()
    if media_type == "application/json" or media_type.endswith("+json"):
        body = await request.json()
        if not isinstance(body, dict):
            raise ValueError("JSON body must be an object")
        return body
    if not media_type:
        return {}
    if media_type not in _FORM_MEDIA_TYPES:
        raise ValueError(f"Unsupported content type: {media_type}")
    form = await request.form()
    payload: dict[str, object] = {}
    for key in form:
        values = [
            value if isinstance(value, str) else value.filename
            for value in form.getlist(key)
        ]
        payload[key] = values if len(values) > 1 else values[0]
    return payload


def _error_response(error: FormError, message: str | None = None) -> JSONResponse:
    """Map a form error to its JSON response."""
    if isinstance(error, FormValidationError):
        body = FormErrorResponse(message=message or error.message)
        return JSONResponse(status_code=error.status_code, content=body.model_dump())
    return JSONResponse(
        status_code=error.status_code, content={"error": message or error.message}
    )
