"""
RPN Runtime - Postfix Expression Stack Machine

Evaluates one line of postfix (reverse-Polish) source:

**Lexer:**
- TokenStream: pull-based scanner producing NUMBER / STRING / SYMBOL /
  ERROR / END spans over the source

**Stack Machine:**
- StackCell variants: Number, String, Bool, Error
- StackMachine: doubling stack with a permanent underflow sentinel and the
  operator dispatcher (+ - * / . dup swap rot inc dec true false = not and or)

**Evaluator:**
- evaluate(): drive a fresh machine with a token stream and return the
  final error kind, stack pointer and stack contents

Errors are values: failures are Error cells on the stack, never exceptions.

Version: 1.0.0
"""

__version__ = '1.0.0'

# ============================================================================
# Errors
# ============================================================================

from .errors import (
    E_NONE, E_UNDERFLOW, E_OVERFLOW, E_TYPE_MISMATCH, E_UNTERMINATED_STRING,
    E_INVALID_CONFIG, E_MACHINE_RELEASED, E_STREAM_EXHAUSTED,
    RPNError, error_message,
)

# ============================================================================
# Lexer
# ============================================================================

from .lexer import TokenKind, Token, TokenStream, tokenize

# ============================================================================
# Stack Machine
# ============================================================================

from .cells import (
    StackCell, Number, String, Bool, Error,
    cells_equal, format_cell, type_name,
)
from .symbols import Symbol, KNOWN_SYMBOLS, classify_symbol, is_known_symbol
from .machine import MachineConfig, StackMachine, DEFAULT_CAPACITY

# ============================================================================
# Evaluator
# ============================================================================

from .evaluator import EvalResult, RPNEvaluator, evaluate, parse_number

# ============================================================================
# Exports
# ============================================================================

__all__ = [
    # Version
    '__version__',

    # Errors
    'E_NONE', 'E_UNDERFLOW', 'E_OVERFLOW', 'E_TYPE_MISMATCH',
    'E_UNTERMINATED_STRING', 'E_INVALID_CONFIG', 'E_MACHINE_RELEASED',
    'E_STREAM_EXHAUSTED',
    'RPNError', 'error_message',

    # Lexer
    'TokenKind', 'Token', 'TokenStream', 'tokenize',

    # Cells
    'StackCell', 'Number', 'String', 'Bool', 'Error',
    'cells_equal', 'format_cell', 'type_name',

    # Symbols
    'Symbol', 'KNOWN_SYMBOLS', 'classify_symbol', 'is_known_symbol',

    # Machine
    'MachineConfig', 'StackMachine', 'DEFAULT_CAPACITY',

    # Evaluator
    'EvalResult', 'RPNEvaluator', 'evaluate', 'parse_number',
]
