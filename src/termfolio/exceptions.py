"""Exception hierarchy for termfolio.

Parsing and fetching are the only fallible stages. Projection and
navigation are total and never raise.
"""


class TermfolioError(Exception):
    """Base exception for termfolio errors."""

    pass


class ParseError(TermfolioError):
    """Raised when a portfolio document cannot be turned into a RawPortfolio."""

    pass


class YAMLSyntaxError(ParseError):
    """Raised when the document is not well-formed YAML.

    Attributes:
        line: 1-based line of the problem, if the YAML library reported one
        column: 1-based column of the problem, if reported
    """

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        self.line = line
        self.column = column
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class SchemaMismatchError(ParseError):
    """Raised when a field has a shape the portfolio schema does not accept."""

    pass


class FetchError(TermfolioError):
    """Raised when the portfolio document cannot be retrieved."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Could not fetch {source}: {reason}")
