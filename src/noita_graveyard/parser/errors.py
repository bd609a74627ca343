"""Errors raised while loading bones files and translation tables.

They subclass the builtin errors the parsers have always raised, so callers
catching ``ValueError`` or ``FileNotFoundError`` keep working.
"""

from pathlib import Path


class MalformedRecordError(ValueError):
    """A required element or attribute is missing from a bones record."""

    def __init__(self, path: str, detail: str = "") -> None:
        self.path = path
        message = f"Malformed record: missing {path}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class InvalidNumericFieldError(ValueError):
    """A numeric attribute could not be parsed."""

    def __init__(self, attribute: str, raw: str, expected: str) -> None:
        self.attribute = attribute
        self.raw = raw
        self.expected = expected
        super().__init__(f"Attribute {attribute!r} is not a valid {expected}: {raw!r}")


class MissingTranslationTableError(FileNotFoundError):
    """The translation CSV could not be found."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"{self.path.name} missing")
