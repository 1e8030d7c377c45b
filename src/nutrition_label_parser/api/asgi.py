"""ASGI entrypoint for the nutrition label parser API."""

from nutrition_label_parser.api.app import create_app
from nutrition_label_parser.containers import build_container

app = create_app(build_container())
