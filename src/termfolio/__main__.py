"""Allow running as ``python -m termfolio``."""

from .cli import app

app()
