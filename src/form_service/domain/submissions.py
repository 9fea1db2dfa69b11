"""Domain models for form submissions."""

from dataclasses import dataclass, field

from form_service.domain.errors import FormError
from form_service.domain.forms import FormKind


@dataclass(frozen=True)
class SubmissionRecord:
    """A submitted payload tagged with its generated submission id."""

    form_submission_id: str
    payload: dict[str, object] = field(default_factory=dict)

    def tagged_payload(self) -> dict[str, object]:
        """Return a copy of the payload carrying the submission id."""
        return {**self.payload, "form_submission_id": self.form_submission_id}


@dataclass(frozen=True)
class SubmissionSucceeded:
    """Submission was recorded and the downstream service was notified."""

    submission_id: str
    kind: FormKind
    html: str | None = None


@dataclass(frozen=True)
class SubmissionFailed:
    """Submission was rejected or could not be completed."""

    error: FormError


SubmissionOutcome = SubmissionSucceeded | SubmissionFailed
