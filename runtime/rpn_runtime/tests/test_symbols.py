"""
Test suite for the operator catalogue and error codes
"""

import pytest

from rpn_runtime.errors import (
    RPNError, E_NONE, E_UNDERFLOW, E_OVERFLOW, E_TYPE_MISMATCH,
    E_UNTERMINATED_STRING, E_INVALID_CONFIG, E_UNKNOWN_CODE,
    error_message,
)
from rpn_runtime.symbols import Symbol, KNOWN_SYMBOLS, classify_symbol, is_known_symbol


class TestClassifySymbol:
    """Test symbol text lookup"""

    @pytest.mark.parametrize("text,sym", [
        ('+', Symbol.ADD),
        ('-', Symbol.SUB),
        ('*', Symbol.MUL),
        ('/', Symbol.DIV),
        ('.', Symbol.POP),
        ('dup', Symbol.DUP),
        ('inc', Symbol.INC),
        ('dec', Symbol.DEC),
        ('true', Symbol.TRUE),
        ('false', Symbol.FALSE),
        ('=', Symbol.EQ),
        ('not', Symbol.NOT),
        ('and', Symbol.AND),
        ('or', Symbol.OR),
    ])
    def test_catalogue(self, text, sym):
        assert classify_symbol(text) == sym
        assert is_known_symbol(text)

    def test_unknown_is_nop(self):
        assert classify_symbol('frob') == Symbol.NOP
        assert not is_known_symbol('frob')

    def test_exact_match_only(self):
        assert classify_symbol('Dup') == Symbol.NOP
        assert classify_symbol('dupe') == Symbol.NOP
        assert classify_symbol('++') == Symbol.NOP

    def test_catalogue_is_one_to_one(self):
        assert len(set(KNOWN_SYMBOLS.values())) == len(KNOWN_SYMBOLS)


class TestErrorCodes:
    """Test error messages and classification"""

    def test_machine_messages(self):
        assert error_message(E_NONE) == 'ok'
        assert error_message(E_UNDERFLOW) == 'stack underflow'
        assert error_message(E_OVERFLOW) == 'stack overflow'
        assert error_message(E_TYPE_MISMATCH) == 'type error'
        assert error_message(E_UNTERMINATED_STRING) == 'unterminated string'

    def test_unknown_code(self):
        with pytest.raises(RPNError) as exc:
            error_message('E_BOGUS')
        assert exc.value.code == E_UNKNOWN_CODE

    def test_rpn_error_str(self):
        err = RPNError(E_INVALID_CONFIG, 'bad')
        assert str(err) == '[E_INVALID_CONFIG] bad'
