import pytest

from simulator.transition_table import Transition

@pytest.fixture
def unary_rules():
    return {
        "0": {
            "0": Transition("1", "1", "L"),
            "1": Transition("0", "1", "R"),
        }
    }


@pytest.fixture
def cycle_rules():
    # Two states bouncing forever between cells 0 and 1.
    return {
        "0": {"0": Transition("1", "0", "R")},
        "1": {"0": Transition("0", "0", "L")},
    }


@pytest.fixture
def unary_text():
    # Reads 1s moving right, writes one more 1 on the first blank and accepts.
    return "2\n1\n1,1,L\n0,1,R\n111\n"


@pytest.fixture
def busy_beaver_text():
    # Two-state busy beaver: halts after 6 steps with four 1s.
    return "3\n1\n1,1,R\n1,1,L\n0,1,L\n2,1,R\n"
