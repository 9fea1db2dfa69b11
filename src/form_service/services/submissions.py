"""Form submission processing."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4

from form_service.adapters.mock_service_client import MockServiceClient
from form_service.domain.errors import (
    FormNotFoundError,
    FormValidationError,
    SubmissionProcessingError,
)
from form_service.domain.forms import FormDescriptor, FormKind, FormRequestContext
from form_service.domain.submissions import (
    SubmissionFailed,
    SubmissionOutcome,
    SubmissionRecord,
    SubmissionSucceeded,
)
from form_service.services.forms import FormResolver, compose_form_identifier
from form_service.services.rendering import TemplateRenderer, render_success_page

logger = logging.getLogger(__name__)


class SessionStore(Protocol):
    """Persistence interface for transaction sessions."""

    def update_session(
        self, form_url: str, payload: dict[str, object], key: str
    ) -> None:
        """Upsert form data for a form under a session or transaction key."""

    def update_main_session_with_form_submission(
        self,
        session_id: str,
        transaction_id: str,
        submission_id: str,
        form_path: str,
    ) -> None:
        """Mark a form as submitted on the main session record."""


def new_submission_id() -> str:
    """Return a fresh unique submission id."""
    return str(uuid4())


@dataclass
class SubmissionProcessor:
    """Validate, persist and complete form submissions."""

    resolver: FormResolver
    session_store: SessionStore
    mock_service_client: MockServiceClient
    renderer: TemplateRenderer
    id_factory: Callable[[], str] = new_submission_id

    async def submit(
        self,
        domain: str | None,
        form_path: str,
        payload: Mapping[str, object],
        context: FormRequestContext,
    ) -> SubmissionOutcome:
        """Process a submission and report the outcome.

        Validation and lookup failures return before anything is written.
        Any error raised while persisting or completing the submission is
        reported as a single processing failure, without rollback.
        """
        missing = context.missing_correlation()
        if missing:
            logger.warning(
                "Submission rejected: missing correlation ids",
                extra={"missing": missing},
            )
            return SubmissionFailed(FormValidationError(missing))

        descriptor = self.resolver.resolve(domain, form_path)
        if descriptor is None:
            return SubmissionFailed(
                FormNotFoundError(compose_form_identifier(domain, form_path))
            )

        try:
            return await self._complete(domain, form_path, descriptor, payload, context)
        except Exception:
            logger.exception(
                "Form submission error",
                extra={
                    "form_identifier": descriptor.identifier,
                    "transaction_id": context.transaction_id,
                },
            )
            return SubmissionFailed(SubmissionProcessingError())

    async def _complete(  # noqa: PLR0913
        self,
        domain: str | None,
        form_path: str,
        descriptor: FormDescriptor,
        payload: Mapping[str, object],
        context: FormRequestContext,
    ) -> SubmissionSucceeded:
        session_id = str(context.session_id)
        transaction_id = str(context.transaction_id)
        record = SubmissionRecord(
            form_submission_id=self.id_factory(), payload=dict(payload)
        )
        submission_id = record.form_submission_id
        tagged = record.tagged_payload()

        self.session_store.update_session(descriptor.url, tagged, transaction_id)
        self.session_store.update_session(descriptor.url, tagged, session_id)
        logger.info(
            "Session updated with form data",
            extra={"form_url": descriptor.url, "submission_id": submission_id},
        )

        correlation = {
            "session_id": session_id,
            "flow_id": str(context.flow_id),
            "transaction_id": transaction_id,
        }
        if descriptor.kind is FormKind.DYNAMIC:
            # The flow stays paused until the front end proceeds; it polls the
            # main session for this marker.
            self.session_store.update_main_session_with_form_submission(
                session_id, transaction_id, submission_id, form_path
            )
            logger.info(
                "Main session marked with form submission",
                extra={"session_id": session_id, "form_path": form_path},
            )
            await self.mock_service_client.call_mock_service(
                domain, correlation, submission_id
            )
            return SubmissionSucceeded(
                submission_id=submission_id,
                kind=FormKind.DYNAMIC,
                html=render_success_page(self.renderer, submission_id),
            )

        await self.mock_service_client.call_mock_service(
            domain, correlation, submission_id
        )
        return SubmissionSucceeded(submission_id=submission_id, kind=FormKind.STATIC)
