"""Jinja2-backed template renderer."""

from dataclasses import dataclass, field

from jinja2 import BaseLoader, Environment


def _default_environment() -> Environment:
    # Form templates embed URLs and JSON into markup and scripts verbatim;
    # templates escape with the `e` filter where they need it.
    return Environment(loader=BaseLoader(), autoescape=False)


@dataclass
class Jinja2TemplateRenderer:
    """Render template strings with Jinja2."""

    environment: Environment = field(default_factory=_default_environment)

    def render(self, template_body: str, bindings: dict[str, object]) -> str:
        """Render a template body with the given bindings."""
        template = self.environment.from_string(template_body)
        return template.render(**bindings)
