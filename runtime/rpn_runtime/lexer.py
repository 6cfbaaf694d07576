"""
RPN Lexer - Pull-Based Token Stream

Scans a single line of postfix source one token at a time. Tokens never
copy text; they carry a half-open [start, end) span into the source.

Token kinds:
- NUMBER: separator-delimited run whose first character is a decimal digit
- SYMBOL: any other separator-delimited run (operators, words, "-5")
- STRING: double-quoted literal, both quotes included in the span
- ERROR:  unterminated string, spanning the opening quote to end-of-input
- END:    terminal token spanning [len, len + 1)

Separators are space, tab and NUL. A stream yields exactly one terminal
token (END or ERROR) and nothing after it.

Usage:
    stream = TokenStream('12 + 3')
    while stream.advance():
        print(stream.current, stream.text())
"""

from typing import List, Optional
from dataclasses import dataclass
import logging

from .errors import RPNError, E_STREAM_EXHAUSTED

LOG = logging.getLogger(__name__)

SEPARATORS = ' \t\0'
QUOTE = '"'


# ============================================================================
# Token Types
# ============================================================================

class TokenKind:
    """Token kind constants"""
    NUMBER = "NUMBER"
    STRING = "STRING"
    SYMBOL = "SYMBOL"
    ERROR = "ERROR"
    END = "END"


TERMINAL_KINDS = (TokenKind.END, TokenKind.ERROR)


@dataclass(frozen=True)
class Token:
    """Span of one lexical unit in the source"""
    kind: str
    start: int
    end: int

    def text(self, source: str) -> str:
        """Slice this token's text out of the source it was scanned from"""
        return source[self.start:self.end]

    @property
    def is_terminal(self) -> bool:
        return self.kind in TERMINAL_KINDS


# ============================================================================
# Token Stream
# ============================================================================

class TokenStream:
    """Forward-only, single-shot token scanner over one source string"""

    def __init__(self, source: str):
        self.init(source)

    def init(self, source: str):
        """Reset the cursor to the start of the given source"""
        self.source = source
        self.pos = 0
        self.current: Optional[Token] = None
        self._finished = False

    def has_next(self) -> bool:
        """True until the terminal token has been emitted"""
        return not self._finished

    def advance(self) -> bool:
        """
        Scan the next token into self.current

        Returns:
            True if a token was emitted, False once the terminal token
            has already been produced
        """
        if self._finished:
            return False

        src = self.source
        n = len(src)
        in_tok = False
        in_str = False
        in_num = False
        last_start = self.pos

        # Index n stands for the implicit NUL terminator
        for i in range(self.pos, n + 1):
            ch = src[i] if i < n else '\0'

            if ch == QUOTE:
                in_str = not in_str
                in_tok = in_str
                if in_str:
                    last_start = i
                    continue
                return self._emit(TokenKind.STRING, last_start, i + 1)

            is_sep = not in_str and ch in SEPARATORS
            if is_sep and in_tok:
                kind = TokenKind.NUMBER if in_num else TokenKind.SYMBOL
                return self._emit(kind, last_start, i)
            if not is_sep and not in_tok:
                last_start = i
                in_num = '0' <= ch <= '9'
            in_tok = not is_sep

        if in_str:
            return self._emit(TokenKind.ERROR, last_start, n)
        return self._emit(TokenKind.END, n, n + 1)

    def next_token(self) -> Token:
        """Advance and return the new token, raising once exhausted"""
        if not self.advance():
            raise RPNError(E_STREAM_EXHAUSTED, "No tokens left after terminal token")
        return self.current

    def text(self, token: Optional[Token] = None) -> str:
        """Text of the given token, or of the current one"""
        token = token if token is not None else self.current
        if token is None:
            return ''
        return token.text(self.source)

    def _emit(self, kind: str, start: int, end: int) -> bool:
        self.current = Token(kind=kind, start=start, end=end)
        self.pos = end
        if self.current.is_terminal:
            self._finished = True
        LOG.debug("token %s [%d, %d) %r", kind, start, end, self.text())
        return True

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        if not self.advance():
            raise StopIteration
        return self.current


# ============================================================================
# Convenience Function
# ============================================================================

def tokenize(source: str) -> List[Token]:
    """
    Scan the whole source into a token list

    Example:
        >>> [t.kind for t in tokenize('12 + 3')]
        ['NUMBER', 'SYMBOL', 'NUMBER', 'END']
    """
    return list(TokenStream(source))


__all__ = [
    'TokenKind',
    'Token',
    'TokenStream',
    'tokenize',
    'SEPARATORS',
    'TERMINAL_KINDS',
]
