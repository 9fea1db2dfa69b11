"""ASGI entrypoint for the form service API."""

from form_service.api.app import create_app
from form_service.containers import build_container

app = create_app(build_container())
