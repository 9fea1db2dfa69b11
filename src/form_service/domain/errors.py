"""Error taxonomy for form requests."""


class FormError(Exception):
    """Base error for failures surfaced to form callers."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FormNotFoundError(FormError):
    """The form identifier does not resolve to a configured form."""

    status_code = 404

    def __init__(self, identifier: str) -> None:
        super().__init__("Form not found")
        self.identifier = identifier


class FormValidationError(FormError):
    """Required correlation identifiers are missing from a submission."""

    status_code = 400

    def __init__(self, missing: list[str]) -> None:
        super().__init__(
            "session_id or flow_id or transaction_id not found in submission url"
        )
        self.missing = missing


class SubmissionProcessingError(FormError):
    """Persisting or completing a submission failed."""

    def __init__(self) -> None:
        super().__init__("Failed to process form submission")
