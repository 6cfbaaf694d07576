"""
RPN Evaluator - Token-Driven Execution

Pulls tokens from a TokenStream and drives a fresh StackMachine with them,
one pass, no backtracking:

- END     stop, success
- NUMBER  push Number (strtod-style prefix parse)
- STRING  push String holding the text between the quotes
- SYMBOL  dispatch the matching operator (unknown text is a no-op)
- ERROR   push Error(E_UNTERMINATED_STRING) and stop

The loop also stops as soon as an operator leaves an Error cell on top of
the stack; that error kind becomes the result.

Example:
    >>> evaluate('2 3 +').top
    Number(value=5.0)
"""

from typing import List, Optional
from dataclasses import dataclass, field
import logging
import re

from .cells import StackCell, Number, String, Error
from .errors import E_NONE, E_UNTERMINATED_STRING, error_message
from .lexer import TokenKind, TokenStream
from .machine import MachineConfig, StackMachine
from .symbols import classify_symbol, is_known_symbol

LOG = logging.getLogger(__name__)

# Longest numeric prefix strtod would accept from a digit-led token
_NUMBER_PREFIX = re.compile(
    r'0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?'
    r'|[0-9]+(?:\.[0-9]*)?(?:[eE][+-]?[0-9]+)?'
)


def parse_number(text: str) -> float:
    """
    Parse the leading number of a token, ignoring trailing characters

    Example:
        >>> parse_number('12abc')
        12.0
        >>> parse_number('0x1F')
        31.0
        >>> parse_number('0x1.8p1')
        3.0
    """
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return 0.0
    literal = match.group(0)
    if literal[:2] in ('0x', '0X'):
        return float.fromhex(literal)
    return float(literal)


# ============================================================================
# Result
# ============================================================================

@dataclass
class EvalResult:
    """Terminal machine state handed back to the caller"""
    error: str
    sp: int
    stack: List[StackCell] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error == E_NONE

    @property
    def top(self) -> Optional[StackCell]:
        """Top cell, or None when the stack is empty"""
        return self.stack[-1] if self.stack else None

    @property
    def message(self) -> str:
        return error_message(self.error)


# ============================================================================
# Evaluator
# ============================================================================

class RPNEvaluator:
    """Evaluate one line of postfix source per call"""

    def __init__(self, config: Optional[MachineConfig] = None):
        self.config = config or MachineConfig()
        self.machine: Optional[StackMachine] = None

    def evaluate(self, source: str) -> EvalResult:
        """Run source on a fresh machine and report its final state"""
        self.machine = StackMachine(self.config)
        error = self._run(TokenStream(source))
        machine = self.machine
        if error != E_NONE:
            LOG.debug("evaluation stopped: %s", error)
        return EvalResult(error=error, sp=len(machine), stack=machine.contents())

    def _run(self, stream: TokenStream) -> str:
        machine = self.machine
        error = E_NONE
        while error == E_NONE and stream.advance():
            token = stream.current
            kind = token.kind

            if kind == TokenKind.END:
                return E_NONE

            text = stream.text(token)
            if kind == TokenKind.NUMBER:
                error = machine.push(Number(parse_number(text)))
            elif kind == TokenKind.SYMBOL:
                if not is_known_symbol(text):
                    LOG.debug("unknown symbol %r at %d, no-op", text, token.start)
                error = machine.exec_symbol(classify_symbol(text))
            elif kind == TokenKind.STRING:
                error = machine.push(String(text[1:-1]))
            elif kind == TokenKind.ERROR:
                error = machine.push(Error(E_UNTERMINATED_STRING))
                if error == E_NONE:
                    error = E_UNTERMINATED_STRING
        return error


# ============================================================================
# Convenience Function
# ============================================================================

def evaluate(source: str, config: Optional[MachineConfig] = None) -> EvalResult:
    """
    Evaluate postfix source on a fresh machine

    Args:
        source: one line of postfix source
        config: optional stack sizing

    Returns:
        EvalResult with the final error kind, stack pointer and the stack
        contents (bottom first, sentinel excluded)
    """
    return RPNEvaluator(config).evaluate(source)


__all__ = [
    'EvalResult',
    'RPNEvaluator',
    'evaluate',
    'parse_number',
]
