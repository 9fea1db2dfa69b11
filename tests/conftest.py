"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from form_service.adapters.jinja_template_renderer import Jinja2TemplateRenderer
from form_service.adapters.mock_service_client import MockServiceClient
from form_service.config import Settings
from form_service.containers import AppContainer
from form_service.domain.forms import FormDescriptor, FormKind
from form_service.services.forms import (
    FormConfigRepository,
    FormResolver,
    RenderDecision,
)
from form_service.services.submissions import SessionStore, SubmissionProcessor

BASE_URL = "https://forms.example.com"

STATIC_FORM_TEMPLATE = """<html>
  <body>
    <form action="{{ actionUrl }}" method="post">
      <input type="hidden" name="transaction_id" value="{{ transactionId }}" />
      <script>window.submissionData = {{ submissionData }};</script>
    </form>
  </body>
</html>
"""


@dataclass
class InMemoryFormConfigRepository(FormConfigRepository):
    """In-memory form configuration for tests."""

    forms: dict[str, FormDescriptor] = field(default_factory=dict)
    lookups: list[str] = field(default_factory=list)

    def add(
        self,
        identifier: str,
        kind: FormKind,
        content: str = STATIC_FORM_TEMPLATE,
        url: str | None = None,
    ) -> FormDescriptor:
        descriptor = FormDescriptor(
            identifier=identifier,
            url=url or identifier,
            kind=kind,
            content=content,
        )
        self.forms[identifier] = descriptor
        return descriptor

    def get_form_config(self, identifier: str) -> FormDescriptor | None:
        self.lookups.append(identifier)
        return self.forms.get(identifier)


@dataclass
class InMemorySessionStore(SessionStore):
    """In-memory session store that records every write."""

    writes: list[tuple[str, dict[str, object], str]] = field(default_factory=list)
    main_session_updates: list[tuple[str, str, str, str]] = field(
        default_factory=list
    )
    fail_on_key: str | None = None
    fail_main_session: bool = False
    events: list[str] = field(default_factory=list)

    def update_session(
        self, form_url: str, payload: dict[str, object], key: str
    ) -> None:
        if key == self.fail_on_key:
            raise RuntimeError("session store unavailable")
        self.writes.append((form_url, payload, key))
        self.events.append(f"write:{key}")

    def update_main_session_with_form_submission(
        self,
        session_id: str,
        transaction_id: str,
        submission_id: str,
        form_path: str,
    ) -> None:
        if self.fail_main_session:
            raise RuntimeError("main session unavailable")
        self.main_session_updates.append(
            (session_id, transaction_id, submission_id, form_path)
        )
        self.events.append("main")


@dataclass
class FakeMockServiceClient(MockServiceClient):
    """Fake mock service client that records notifications."""

    calls: list[tuple[str | None, dict[str, str], str]] = field(default_factory=list)
    error: Exception | None = None
    events: list[str] = field(default_factory=list)

    async def call_mock_service(
        self,
        domain: str | None,
        correlation: dict[str, str],
        submission_id: str,
    ) -> None:
        if self.error is not None:
            raise self.error
        self.calls.append((domain, correlation, submission_id))
        self.events.append("notify")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        form_service_base_url=BASE_URL,
        mock_service_base_url="https://mock.example.com",
    )


@pytest.fixture
def form_repository() -> InMemoryFormConfigRepository:
    return InMemoryFormConfigRepository()


@pytest.fixture
def events() -> list[str]:
    return []


@pytest.fixture
def session_store(events: list[str]) -> InMemorySessionStore:
    return InMemorySessionStore(events=events)


@pytest.fixture
def mock_service_client(events: list[str]) -> FakeMockServiceClient:
    return FakeMockServiceClient(events=events)


@pytest.fixture
def submission_processor(
    form_repository: InMemoryFormConfigRepository,
    session_store: InMemorySessionStore,
    mock_service_client: FakeMockServiceClient,
) -> SubmissionProcessor:
    return SubmissionProcessor(
        resolver=FormResolver(form_repository),
        session_store=session_store,
        mock_service_client=mock_service_client,
        renderer=Jinja2TemplateRenderer(),
        id_factory=lambda: "sub-123",
    )


@pytest.fixture
def container(
    settings: Settings,
    form_repository: InMemoryFormConfigRepository,
    submission_processor: SubmissionProcessor,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        form_resolver=submission_processor.resolver,
        render_decision=RenderDecision(
            renderer=Jinja2TemplateRenderer(), base_url=BASE_URL
        ),
        submission_processor=submission_processor,
        close_resources=close_resources,
    )
