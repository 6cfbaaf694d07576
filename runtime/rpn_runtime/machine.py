"""
RPN Stack Machine

A growable stack of tagged cells plus the operator dispatcher.

Layout:
- cells[0] is a permanent Error(E_UNDERFLOW) sentinel
- sp indexes the top cell; sp == 0 means the stack is empty
- backing storage doubles when a push would reach capacity

Popping an empty stack returns the sentinel and leaves sp at 0, so operators
never fault on a short stack: they see an Error operand instead.

Propagation rule for operators that type-check their operands: on a type
mismatch an Error(E_TYPE_MISMATCH) is pushed, unless the right-hand (most
recently pushed) operand was itself an Error. In that case nothing is
pushed and the older error surfaces on top.
"""

from typing import List, Optional
from dataclasses import dataclass
import logging

import numpy as np

from .cells import StackCell, Number, Bool, Error, is_error, cells_equal
from .errors import (
    RPNError, E_NONE, E_UNDERFLOW, E_OVERFLOW, E_TYPE_MISMATCH,
    E_INVALID_CONFIG, E_MACHINE_RELEASED,
)
from .symbols import Symbol, NUMERIC_BINARY, BOOLEAN_BINARY, NUMERIC_UNARY

LOG = logging.getLogger(__name__)

DEFAULT_CAPACITY = 64

_NUMERIC_UFUNCS = {
    Symbol.ADD: np.add,
    Symbol.SUB: np.subtract,
    Symbol.MUL: np.multiply,
    Symbol.DIV: np.divide,
}


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class MachineConfig:
    """Stack sizing"""
    initial_capacity: int = DEFAULT_CAPACITY
    # Growth past this many cells counts as an allocation failure
    max_capacity: Optional[int] = None

    def validate(self):
        if self.initial_capacity < 2:
            raise RPNError(
                E_INVALID_CONFIG,
                f"initial_capacity must be at least 2, got {self.initial_capacity}"
            )
        if self.max_capacity is not None and self.max_capacity < self.initial_capacity:
            raise RPNError(
                E_INVALID_CONFIG,
                f"max_capacity ({self.max_capacity}) is below initial_capacity "
                f"({self.initial_capacity})"
            )


def apply_numeric(sym: str, a: float, b: float) -> float:
    """
    IEEE double arithmetic for + - * /

    Division by zero gives inf or nan rather than raising.
    """
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        result = _NUMERIC_UFUNCS[sym](np.float64(a), np.float64(b))
    return float(result)


# ============================================================================
# Stack Machine
# ============================================================================

class StackMachine:
    """Tagged-cell stack with a permanent underflow sentinel"""

    def __init__(self, config: Optional[MachineConfig] = None):
        self.config = config or MachineConfig()
        self.config.validate()
        self.capacity = self.config.initial_capacity
        self.cells: List[Optional[StackCell]] = [None] * self.capacity
        self.sentinel = Error(E_UNDERFLOW)
        self.cells[0] = self.sentinel
        self.sp = 0
        self.released = False

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def push(self, cell: StackCell) -> str:
        """
        Push a cell on top

        Returns:
            E_NONE, or E_OVERFLOW if the stack could not grow. After an
            overflow the machine is released and must not be used again.
        """
        self._check_live()
        if self.sp >= self.capacity - 1 and not self._grow():
            return E_OVERFLOW
        self.sp += 1
        self.cells[self.sp] = cell
        return E_NONE

    def pop(self) -> StackCell:
        """Remove and return the top cell; the sentinel when empty"""
        self._check_live()
        top = self.cells[self.sp]
        if self.sp > 0:
            self.cells[self.sp] = None
            self.sp -= 1
        return top

    def peek(self) -> StackCell:
        self._check_live()
        return self.cells[self.sp]

    def top_error(self) -> str:
        """Error kind of the top cell, E_NONE if it is not an Error"""
        top = self.peek()
        return top.kind if is_error(top) else E_NONE

    def release(self):
        """Drop the backing storage; the machine is unusable afterwards"""
        self.cells = []
        self.capacity = 0
        self.released = True

    def contents(self) -> List[StackCell]:
        """Cells above the sentinel, bottom first"""
        if self.released:
            return []
        return list(self.cells[1:self.sp + 1])

    def __len__(self) -> int:
        return 0 if self.released else self.sp

    def _grow(self) -> bool:
        new_capacity = self.capacity * 2
        limit = self.config.max_capacity
        if limit is not None and new_capacity > limit:
            LOG.warning("stack overflow: growth to %d exceeds max_capacity %d",
                        new_capacity, limit)
            self.release()
            return False
        try:
            self.cells.extend([None] * (new_capacity - self.capacity))
        except MemoryError:
            LOG.warning("stack overflow: could not grow to %d cells", new_capacity)
            self.release()
            return False
        LOG.debug("stack grown %d -> %d", self.capacity, new_capacity)
        self.capacity = new_capacity
        return True

    def _check_live(self):
        if self.released:
            raise RPNError(E_MACHINE_RELEASED, "Stack machine used after overflow release")

    # ------------------------------------------------------------------
    # Operator dispatch
    # ------------------------------------------------------------------

    def exec_symbol(self, sym: str) -> str:
        """
        Execute one operator against the stack

        Returns:
            The error kind of the new top cell (E_NONE if it is not an
            Error), or E_OVERFLOW if a push failed.
        """
        LOG.debug("exec %s (sp=%d)", sym, self.sp)
        status = self._dispatch(sym)
        if status != E_NONE:
            return status
        return self.top_error()

    def _dispatch(self, sym: str) -> str:
        if sym in NUMERIC_BINARY:
            b = self.pop()
            a = self.pop()
            if isinstance(a, Number) and isinstance(b, Number):
                return self.push(Number(apply_numeric(sym, a.value, b.value)))
            return self._mismatch(b)

        if sym in BOOLEAN_BINARY:
            b = self.pop()
            a = self.pop()
            if isinstance(a, Bool) and isinstance(b, Bool):
                if sym == Symbol.AND:
                    return self.push(Bool(a.value and b.value))
                return self.push(Bool(a.value or b.value))
            return self._mismatch(b)

        if sym in NUMERIC_UNARY:
            a = self.pop()
            if isinstance(a, Number):
                step = 1.0 if sym == Symbol.INC else -1.0
                return self.push(Number(a.value + step))
            return self._mismatch(a)

        if sym == Symbol.NOT:
            a = self.pop()
            if isinstance(a, Bool):
                return self.push(Bool(not a.value))
            return self._mismatch(a)

        if sym == Symbol.EQ:
            b = self.pop()
            a = self.pop()
            if not is_error(a) and not is_error(b):
                return self.push(Bool(cells_equal(a, b)))
            return E_NONE

        if sym == Symbol.POP:
            self.pop()
            return E_NONE

        if sym == Symbol.DUP:
            return self.push(self.peek())

        if sym == Symbol.SWAP:
            b = self.pop()
            a = self.pop()
            return self._push_all(b, a)

        if sym == Symbol.ROT:
            c = self.pop()
            b = self.pop()
            a = self.pop()
            return self._push_all(b, c, a)

        if sym == Symbol.TRUE:
            return self.push(Bool(True))

        if sym == Symbol.FALSE:
            return self.push(Bool(False))

        # NOP and anything unrecognised
        return E_NONE

    def _mismatch(self, right: StackCell) -> str:
        # An Error operand already describes the failure
        if is_error(right):
            return E_NONE
        return self.push(Error(E_TYPE_MISMATCH))

    def _push_all(self, *cells: StackCell) -> str:
        for cell in cells:
            status = self.push(cell)
            if status != E_NONE:
                return status
        return E_NONE


__all__ = [
    'MachineConfig',
    'StackMachine',
    'apply_numeric',
    'DEFAULT_CAPACITY',
]
