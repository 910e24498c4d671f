"""Input validation models using Pydantic.

These models validate command line inputs before they reach the viewer,
providing user-friendly error messages.
"""

from pydantic import BaseModel, Field, field_validator

MIN_WIDTH = 20
MAX_WIDTH = 500


class SourceInput(BaseModel):
    """Validated portfolio document source."""

    source: str = Field(min_length=1, description="URL or path of the YAML document")

    @field_validator("source")
    @classmethod
    def validate_source(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank sources."""
        v = v.strip()
        if not v:
            raise ValueError("Source must not be blank")
        return v


class ViewInput(SourceInput):
    """Validated input for the viewer."""

    width: int | None = Field(
        default=None,
        ge=MIN_WIDTH,
        le=MAX_WIDTH,
        description="Wrap width in columns",
    )
