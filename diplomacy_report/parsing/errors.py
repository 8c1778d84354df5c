"""
Exceptions raised while parsing an adjudication report.
"""

from typing import Optional

EXCERPT_LENGTH = 60


class ParseError(Exception):
    """Raised when no recognizer matches the text at a position."""

    def __init__(self, text: str, position: int, expected: Optional[str] = None):
        self.text = text
        self.position = position
        self.expected = expected
        super().__init__(self._describe())

    @property
    def remainder(self) -> str:
        """The unconsumed input from the failing position onwards."""
        return self.text[self.position:]

    def excerpt(self, length: int = EXCERPT_LENGTH) -> str:
        snippet = self.remainder[:length]
        if len(self.remainder) > length:
            snippet += "..."
        return snippet

    def line_number(self) -> int:
        return self.text.count("\n", 0, self.position) + 1

    def _describe(self) -> str:
        what = f"expected {self.expected}" if self.expected else "no match"
        return f"{what} at line {self.line_number()} (offset {self.position}): {self.excerpt()!r}"


class GrammarMismatchError(ParseError):
    """Nothing at the start of the input could be parsed as a report."""
    pass


class TrailingContentError(ParseError):
    """A report was parsed but unparsed text follows it."""

    def __init__(self, text: str, position: int, game, cause: Optional[ParseError] = None):
        self.game = game
        self.cause = cause
        super().__init__(text, position, "end of input")

    def _describe(self) -> str:
        message = (
            f"unparsed content after {len(self.game.rounds)} round(s) at line "
            f"{self.line_number()} (offset {self.position}): {self.excerpt()!r}"
        )
        if self.cause is not None and self.cause.position > self.position:
            message += f"; furthest failure: {self.cause}"
        return message
