"""
RPN Stack Cells

A stack cell is one of four variants:

- Number(value: float)  IEEE double
- String(value: str)    text between the quotes of a string literal
- Bool(value: bool)
- Error(kind: str)      an E_* error kind from errors.py

Error is an ordinary value: it can be pushed, duplicated and compared, and
an Error on top of the stack is how the machine reports failure.
"""

from dataclasses import dataclass


# ============================================================================
# Cell Variants
# ============================================================================

@dataclass(frozen=True)
class StackCell:
    """Base stack cell"""
    pass


@dataclass(frozen=True)
class Number(StackCell):
    """Double-precision number"""
    value: float


@dataclass(frozen=True)
class String(StackCell):
    """String literal contents"""
    value: str


@dataclass(frozen=True)
class Bool(StackCell):
    """Boolean"""
    value: bool


@dataclass(frozen=True)
class Error(StackCell):
    """Failure carried as a value"""
    kind: str


def is_error(cell: StackCell) -> bool:
    return isinstance(cell, Error)


def cells_equal(a: StackCell, b: StackCell) -> bool:
    """
    Compare two cells the way the '=' operator does

    Variants must match. Numbers compare by IEEE equality (NaN is never
    equal to itself), booleans logically, strings by exact content. Error
    cells are never equal to anything, including another Error.
    """
    if type(a) is not type(b):
        return False
    if isinstance(a, Number):
        return a.value == b.value
    if isinstance(a, Bool):
        return a.value == b.value
    if isinstance(a, String):
        return a.value == b.value
    return False


def type_name(cell: StackCell) -> str:
    """Short variant name used in listings"""
    if isinstance(cell, Number):
        return 'num'
    if isinstance(cell, String):
        return 'str'
    if isinstance(cell, Bool):
        return 'bool'
    if isinstance(cell, Error):
        return 'err'
    raise TypeError(f"Not a stack cell: {type(cell).__name__}")


def format_cell(cell: StackCell) -> str:
    """
    Render a cell's value for display

    Numbers use six decimals like C's %f, booleans print as true/false,
    strings are quoted and errors show their kind.
    """
    if isinstance(cell, Number):
        return f"{cell.value:f}"
    if isinstance(cell, Bool):
        return 'true' if cell.value else 'false'
    if isinstance(cell, String):
        return f'"{cell.value}"'
    if isinstance(cell, Error):
        return cell.kind
    raise TypeError(f"Not a stack cell: {type(cell).__name__}")


__all__ = [
    'StackCell', 'Number', 'String', 'Bool', 'Error',
    'is_error', 'cells_equal', 'type_name', 'format_cell',
]
