"""Parse YAML portfolio documents into RawPortfolio."""

import yaml
from pydantic import ValidationError

from ..exceptions import SchemaMismatchError, YAMLSyntaxError
from ..utils.logging import get_logger
from .models import RawPortfolio

logger = get_logger(__name__)


def _describe(error: ValidationError) -> str:
    """Summarize the first validation error as 'path: message'."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "document"
    return f"{location}: {first['msg']}"


def parse(text: str) -> RawPortfolio:
    """Parse a portfolio document.

    Args:
        text: YAML text

    Returns:
        RawPortfolio with every absent field left as None

    Raises:
        YAMLSyntaxError: If the text is not well-formed YAML
        SchemaMismatchError: If a field has an unsupported shape
    """
    try:
        data = yaml.safe_load(text)
    except yaml.MarkedYAMLError as e:
        mark = e.problem_mark or e.context_mark
        problem = e.problem or e.context or "malformed YAML"
        if mark is None:
            raise YAMLSyntaxError(problem) from e
        raise YAMLSyntaxError(problem, line=mark.line + 1, column=mark.column + 1) from e
    except yaml.YAMLError as e:
        raise YAMLSyntaxError(str(e)) from e

    if data is None:
        logger.debug("Empty document, using an empty portfolio")
        return RawPortfolio()
    if not isinstance(data, dict):
        raise SchemaMismatchError(
            f"document root must be a mapping, got {type(data).__name__}"
        )

    try:
        portfolio = RawPortfolio.model_validate(data)
    except ValidationError as e:
        raise SchemaMismatchError(_describe(e)) from e

    logger.debug(
        "Parsed portfolio %r with %d content sections",
        portfolio.name,
        len(portfolio.content or []),
    )
    return portfolio
