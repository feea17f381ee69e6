"""ASGI entrypoint for the supplement tracker API."""

from supplement_tracker.api.app import create_app
from supplement_tracker.containers import build_container

app = create_app(build_container())
