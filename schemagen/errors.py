"""Error types raised outside the (total) inference core."""

from __future__ import annotations


class SchemaGenError(ValueError):
    """Base class for rejected input."""


class ExampleParseError(SchemaGenError):
    """Raw example text that is not valid JSON."""

    def __init__(
        self,
        *,
        raw: str,
        position: int,
        line: int,
        column: int,
        reason: str,
        source: str | None = None,
    ) -> None:
        self.raw = raw
        self.position = position
        self.line = line
        self.column = column
        self.reason = reason
        self.source = source
        super().__init__(self.__str__())

    def __str__(self) -> str:
        where = f" in {self.source}" if self.source else ""
        return (
            f"Error parsing JSON{where} at position {self.position} "
            f"(line {self.line}, column {self.column}): {self.reason}"
        )

    def pointer(self, width: int = 40) -> str:
        """Return a one-line excerpt of the raw text and a caret under the offset."""

        start = max(0, self.position - width // 2)
        excerpt = self.raw[start : start + width].replace("\r", " ").replace("\n", " ")
        return f"{excerpt}\n{' ' * (self.position - start)}^"


class UnknownFormatError(SchemaGenError):
    """Requested output format names that are not registered."""

    def __init__(self, invalid: list[str], available: list[str]) -> None:
        self.invalid = list(invalid)
        self.available = list(available)
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if not self.invalid:
            return "No formats selected"
        return f"Invalid formats: {', '.join(self.invalid)}"


class NoExamplesError(SchemaGenError):
    """Generation was requested without any JSON example."""

    def __init__(self) -> None:
        super().__init__("At least one JSON example is required.")


class InvalidTypeNameError(SchemaGenError):
    """Type name that cannot be used as an output file name prefix."""

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"Invalid type name for output files: {type_name!r}")
