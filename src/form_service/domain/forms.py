"""Domain models for form descriptors and render requests."""

from dataclasses import dataclass
from enum import StrEnum


class FormKind(StrEnum):
    """How a form is presented to the user."""

    STATIC = "static"
    DYNAMIC = "dynamic"

    @classmethod
    def from_raw(cls, raw: object) -> "FormKind":
        """Parse a stored form type, falling back to static rendering."""
        if isinstance(raw, str) and raw.strip().lower() == cls.DYNAMIC.value:
            return cls.DYNAMIC
        return cls.STATIC


@dataclass(frozen=True)
class FormDescriptor:
    """Represents a configured form."""

    identifier: str
    url: str
    kind: FormKind
    content: str = ""


@dataclass(frozen=True)
class FormRequestContext:
    """Correlation identifiers and flags carried by a form request."""

    session_id: str | None = None
    flow_id: str | None = None
    transaction_id: str | None = None
    direct: bool = False

    def correlation(self) -> dict[str, str | None]:
        """Return the correlation triple in the order forms expect it."""
        return {
            "session_id": self.session_id,
            "transaction_id": self.transaction_id,
            "flow_id": self.flow_id,
        }

    def missing_correlation(self) -> list[str]:
        """Return names of correlation fields that are absent or empty."""
        return [name for name, value in self.correlation().items() if not value]


@dataclass(frozen=True)
class RedirectInstruction:
    """Tells the caller to open the externally rendered form."""

    form_url: str
    message: str = "Please open this URL to fill the form"


@dataclass(frozen=True)
class RenderInstruction:
    """Rendered HTML for a form."""

    html: str
