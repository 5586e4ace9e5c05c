"""
ParseContext: position tracking for a single parse.

The context owns the line iterator, the current physical line number and
the most recently extracted token. It is created per parse and threaded
explicitly through the parser functions, so every format error can name
the exact line and token that triggered it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator
import re

from pymatcalc.core.exceptions import MatrixFormatError, MatrixIOError
from pymatcalc.core.limits import ParseLimits, DEFAULT_LIMITS

_SEPARATORS = re.compile(r'[ \t\r\n]+')
COMMENT_PREFIX = '#'


@dataclass
class ParseContext:
    """
    Mutable cursor over the lines of one matrix source.

    Attributes:
        source_name: File name or stream label used in diagnostics
        lines: Iterator over raw lines of the source
        limits: Parsing limits (maximum line length)
        line_number: Physical line number of the current line (1-based).
            Once input is exhausted this is one past the last line.
        token: Most recently extracted token, or None when the last
            request found nothing
    """
    source_name: str
    lines: Iterator[str]
    limits: ParseLimits = DEFAULT_LIMITS
    line_number: int = 0
    token: str | None = None
    _tokens: list[str] = field(default_factory=list)
    _position: int = 0

    def next_line(self) -> str | None:
        """
        Advance to the next significant line and return its first token.

        Blank lines and lines whose first token starts with '#' are skipped
        (but still counted). Returns None when the input is exhausted.

        Raises:
            MatrixIOError: If a line exceeds limits.max_line_length
        """
        while True:
            self.line_number += 1
            raw = next(self.lines, None)
            if raw is None:
                self._tokens = []
                self._position = 0
                self.token = None
                return None

            text = raw.rstrip('\r\n')
            if len(text) > self.limits.max_line_length:
                raise MatrixIOError(
                    f"Line {self.line_number} of {self.source_name} is longer than "
                    f"the maximum of {self.limits.max_line_length} characters.",
                    source_name=self.source_name,
                    line_number=self.line_number,
                )

            tokens = [t for t in _SEPARATORS.split(text) if t]
            if tokens and not tokens[0].startswith(COMMENT_PREFIX):
                self._tokens = tokens
                self._position = 1
                self.token = tokens[0]
                return self.token

    def next_token(self) -> str | None:
        """
        Return the next token of the current line.

        Returns None at the end of the line or when the next token starts a
        comment. In the comment case the comment token stays available as
        self.token for diagnostics.
        """
        if self._position >= len(self._tokens):
            self.token = None
            return None

        self.token = self._tokens[self._position]
        self._position += 1
        if self.token.startswith(COMMENT_PREFIX):
            # Comment runs to the end of the line
            self._position = len(self._tokens)
            return None
        return self.token

    def error(self, reason: str) -> MatrixFormatError:
        """Build a format error located at the current line and token."""
        return MatrixFormatError(
            source_name=self.source_name,
            line_number=self.line_number,
            token=self.token,
            reason=reason,
        )
