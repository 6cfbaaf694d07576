"""
Pytest configuration and fixtures for rpn_runtime tests.
"""

import os
import sys

import pytest

# Add grandparent directory to path for imports (to find rpn_runtime package)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from rpn_runtime.machine import MachineConfig, StackMachine


@pytest.fixture
def machine():
    """Fresh machine with default sizing."""
    return StackMachine()


@pytest.fixture
def small_machine():
    """
    Machine that starts at 4 cells and may double once.

    Capacity 4 holds 3 cells above the sentinel; capacity 8 holds 7, so the
    8th push overflows.
    """
    return StackMachine(MachineConfig(initial_capacity=4, max_capacity=8))
