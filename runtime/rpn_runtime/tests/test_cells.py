"""
Test suite for stack cells
Verifies cell equality and display formatting
"""

import pytest

from rpn_runtime.cells import (
    Number, String, Bool, Error, cells_equal, format_cell, type_name, is_error,
)
from rpn_runtime.errors import E_UNDERFLOW, E_TYPE_MISMATCH


class TestCellsEqual:
    """Test the '=' comparison rules"""

    def test_numbers(self):
        assert cells_equal(Number(2.0), Number(2.0))
        assert not cells_equal(Number(2.0), Number(3.0))

    def test_nan_is_not_equal(self):
        nan = float('nan')
        assert not cells_equal(Number(nan), Number(nan))

    def test_booleans(self):
        assert cells_equal(Bool(True), Bool(True))
        assert not cells_equal(Bool(True), Bool(False))

    def test_strings(self):
        assert cells_equal(String('abc'), String('abc'))
        assert not cells_equal(String('abc'), String('abd'))

    def test_cross_type(self):
        assert not cells_equal(Number(1.0), Bool(True))
        assert not cells_equal(String('1'), Number(1.0))

    def test_errors_never_equal(self):
        assert not cells_equal(Error(E_UNDERFLOW), Error(E_UNDERFLOW))
        assert not cells_equal(Error(E_TYPE_MISMATCH), Number(0.0))


class TestFormatting:
    """Test display helpers"""

    def test_format_number(self):
        assert format_cell(Number(5.0)) == '5.000000'
        assert format_cell(Number(-1.5)) == '-1.500000'

    def test_format_infinity(self):
        assert format_cell(Number(float('inf'))) == 'inf'

    def test_format_bool(self):
        assert format_cell(Bool(True)) == 'true'
        assert format_cell(Bool(False)) == 'false'

    def test_format_string(self):
        assert format_cell(String('hi')) == '"hi"'

    def test_format_error(self):
        assert format_cell(Error(E_UNDERFLOW)) == E_UNDERFLOW

    def test_type_names(self):
        assert [type_name(c) for c in (Number(1.0), String(''), Bool(False), Error(E_UNDERFLOW))] == [
            'num', 'str', 'bool', 'err'
        ]

    def test_not_a_cell(self):
        with pytest.raises(TypeError):
            format_cell(42)

    def test_is_error(self):
        assert is_error(Error(E_UNDERFLOW))
        assert not is_error(Bool(False))
