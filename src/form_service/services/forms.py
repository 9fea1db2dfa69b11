"""Form lookup and render mode selection."""

import json
import logging
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote, urlencode

from form_service.domain.forms import (
    FormDescriptor,
    FormKind,
    FormRequestContext,
    RedirectInstruction,
    RenderInstruction,
)
from form_service.services.rendering import TemplateRenderer

logger = logging.getLogger(__name__)


class FormConfigRepository(Protocol):
    """Lookup interface for configured forms."""

    def get_form_config(self, identifier: str) -> FormDescriptor | None:
        """Return the form configured under an identifier, if present."""


def compose_form_identifier(domain: str | None, form_path: str) -> str:
    """Return the lookup key for a form, qualified by domain when given."""
    if domain:
        return f"{domain}/{form_path}"
    return form_path


def build_form_url(
    base_url: str,
    identifier: str,
    context: FormRequestContext,
    *,
    suffix: str = "",
    direct: bool = False,
) -> str:
    """Build a form service URL carrying the correlation query parameters."""
    params = {
        "flow_id": context.flow_id or "",
        "session_id": context.session_id or "",
        "transaction_id": context.transaction_id or "",
    }
    if direct:
        params["direct"] = "true"
    path = quote(identifier, safe="/")
    return f"{base_url}/forms/{path}{suffix}?{urlencode(params)}"


@dataclass
class FormResolver:
    """Resolve form paths to configured descriptors."""

    repository: FormConfigRepository

    def resolve(self, domain: str | None, form_path: str) -> FormDescriptor | None:
        """Return the descriptor for a form, or None when it isn't configured."""
        identifier = compose_form_identifier(domain, form_path)
        descriptor = self.repository.get_form_config(identifier)
        if descriptor is None:
            logger.warning("Form not found", extra={"form_identifier": identifier})
        return descriptor


@dataclass
class RenderDecision:
    """Choose between redirecting to the external renderer and rendering HTML."""

    renderer: TemplateRenderer
    base_url: str

    def decide(
        self, descriptor: FormDescriptor, context: FormRequestContext
    ) -> RedirectInstruction | RenderInstruction:
        """Return the instruction for presenting a resolved form.

        Dynamic forms redirect unless the request is already direct; the
        redirect URL sets ``direct=true`` so the follow-up request renders.
        """
        if descriptor.kind is FormKind.DYNAMIC and not context.direct:
            return RedirectInstruction(
                form_url=build_form_url(
                    self.base_url, descriptor.identifier, context, direct=True
                )
            )

        action_url = build_form_url(
            self.base_url, descriptor.identifier, context, suffix="/submit"
        )
        html = self.renderer.render(
            descriptor.content,
            {
                "actionUrl": action_url,
                "submissionData": json.dumps(context.correlation()),
                "transactionId": context.transaction_id or "",
            },
        )
        return RenderInstruction(html=html)
