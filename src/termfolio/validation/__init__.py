"""Input validation for the command line."""

from .models import SourceInput, ViewInput

__all__ = ["SourceInput", "ViewInput"]
