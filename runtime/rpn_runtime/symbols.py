"""
RPN Operator Catalogue

Maps symbol text to the operators the stack machine knows. Matching is exact
and case-sensitive; anything not listed is NOP.
"""

from typing import Dict


class Symbol:
    """Operator constants"""
    NOP = "NOP"
    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    DIV = "DIV"
    POP = "POP"
    DUP = "DUP"
    SWAP = "SWAP"
    ROT = "ROT"
    INC = "INC"
    DEC = "DEC"
    TRUE = "TRUE"
    FALSE = "FALSE"
    EQ = "EQ"
    NOT = "NOT"
    AND = "AND"
    OR = "OR"


KNOWN_SYMBOLS: Dict[str, str] = {
    # Arithmetic
    '+': Symbol.ADD,
    '-': Symbol.SUB,
    '*': Symbol.MUL,
    '/': Symbol.DIV,
    'inc': Symbol.INC,
    'dec': Symbol.DEC,

    # Stack shuffling
    '.': Symbol.POP,
    'dup': Symbol.DUP,
    'swap': Symbol.SWAP,
    'rot': Symbol.ROT,

    # Logic
    'true': Symbol.TRUE,
    'false': Symbol.FALSE,
    '=': Symbol.EQ,
    'not': Symbol.NOT,
    'and': Symbol.AND,
    'or': Symbol.OR,
}

# Operand groups used by the dispatcher
NUMERIC_BINARY = (Symbol.ADD, Symbol.SUB, Symbol.MUL, Symbol.DIV)
BOOLEAN_BINARY = (Symbol.AND, Symbol.OR)
NUMERIC_UNARY = (Symbol.INC, Symbol.DEC)


def classify_symbol(text: str) -> str:
    """Operator for symbol text, NOP if unknown"""
    return KNOWN_SYMBOLS.get(text, Symbol.NOP)


def is_known_symbol(text: str) -> bool:
    return text in KNOWN_SYMBOLS


__all__ = [
    'Symbol', 'KNOWN_SYMBOLS',
    'NUMERIC_BINARY', 'BOOLEAN_BINARY', 'NUMERIC_UNARY',
    'classify_symbol', 'is_known_symbol',
]
