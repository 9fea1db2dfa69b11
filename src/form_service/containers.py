"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from form_service.adapters.jinja_template_renderer import Jinja2TemplateRenderer
from form_service.adapters.mock_service_client import HttpxMockServiceClient
from form_service.adapters.supabase_form_config_repository import (
    SupabaseFormConfigRepository,
)
from form_service.adapters.supabase_session_store import SupabaseSessionStore
from form_service.config import Settings, normalize_base_url
from form_service.services.cache import InMemoryCache
from form_service.services.forms import FormResolver, RenderDecision
from form_service.services.submissions import SubmissionProcessor


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    form_resolver: FormResolver
    render_decision: RenderDecision
    submission_processor: SubmissionProcessor
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    form_config_repository = SupabaseFormConfigRepository(
        client=supabase_client,
        cache=InMemoryCache(),
        table=resolved_settings.form_config_table,
        cache_ttl_seconds=resolved_settings.form_config_cache_ttl_seconds,
    )
    session_store = SupabaseSessionStore(
        client=supabase_client, table=resolved_settings.session_table
    )
    mock_service_client = HttpxMockServiceClient.create(
        base_url=normalize_base_url(resolved_settings.mock_service_base_url),
        timeout=resolved_settings.mock_service_timeout_seconds,
    )
    renderer = Jinja2TemplateRenderer()
    form_resolver = FormResolver(form_config_repository)
    render_decision = RenderDecision(
        renderer=renderer,
        base_url=normalize_base_url(resolved_settings.form_service_base_url),
    )
    submission_processor = SubmissionProcessor(
        resolver=form_resolver,
        session_store=session_store,
        mock_service_client=mock_service_client,
        renderer=renderer,
    )

    async def close_resources() -> None:
        await mock_service_client.close()

    return AppContainer(
        settings=resolved_settings,
        form_resolver=form_resolver,
        render_decision=render_decision,
        submission_processor=submission_processor,
        close_resources=close_resources,
    )
