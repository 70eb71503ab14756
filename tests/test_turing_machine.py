from simulator.transition_table import Transition, TransitionTable
from simulator.turing_machine import REJECT_STATE, TuringMachine


def run_to_halt(machine, limit=10_000):
    steps = 0
    while steps < limit and machine.step():
        steps += 1
    return steps


def test_unary_increment(unary_rules):
    machine = TuringMachine(unary_rules, "0", {"1"}, set(), "111", "0")
    steps = run_to_halt(machine)

    assert steps == 4
    assert machine.current_state == "1"
    assert machine.outcome() == "accept"
    assert machine.is_halted()
    assert machine.output_length() == 4
    assert machine.tape_sum() == 4
    # head moved back onto the last 1 written at position 3
    assert machine.head_position() == 2
    assert machine.tape_snapshot() == "0" * 8 + "1111" + "0" * 9
    assert machine.tape.contents() == "1111"


def test_immediate_reject_on_empty_table():
    machine = TuringMachine({}, "0", {"1"}, set(), "10110", "0")
    assert machine.step() is False
    assert machine.current_state == REJECT_STATE
    assert machine.outcome() == "reject"
    assert machine.output_length() == 5
    assert machine.tape_sum() == 3


def test_undefined_transition_rejects_midway():
    rules = {"0": {"1": Transition("0", "1", "R")}}
    machine = TuringMachine(rules, "0", {"9"}, set(), "11", "0")
    assert machine.step() is True
    assert machine.step() is True
    assert machine.step() is False
    assert machine.current_state == REJECT_STATE


def test_empty_input_start_in_accept():
    machine = TuringMachine({"0": {"0": Transition("0", "1", "R")}}, "0", {"0"}, set(), "", "0")
    assert machine.step() is False
    assert machine.current_state == "0"
    assert machine.outcome() == "accept"
    assert machine.output_length() == 0
    assert machine.tape_sum() == 0
    assert machine.tape_snapshot(10) == "0" * 21


def test_reject_state_halts():
    rules = {"0": {"0": Transition("r", "0", "R")}, "r": {"0": Transition("0", "0", "L")}}
    machine = TuringMachine(rules, "0", set(), {"r"}, "", "0")
    assert machine.step() is True
    assert machine.step() is False
    assert machine.current_state == "r"
    assert machine.outcome() == "reject"


def test_sticky_halting():
    machine = TuringMachine({}, "0", set(), set(), "123", "0")
    assert machine.step() is False
    tape_before = dict(machine.tape.cells)
    for _ in range(5):
        assert machine.step() is False
        assert machine.current_state == REJECT_STATE
        assert machine.head_position() == 0
        assert machine.tape.cells == tape_before


def test_sticky_even_if_reject_label_has_transitions():
    rules = {REJECT_STATE: {"5": Transition("0", "9", "R")}}
    machine = TuringMachine(rules, "0", set(), set(), "5", "0")
    assert machine.step() is False
    assert machine.step() is False
    assert machine.tape.read() == "5"
    assert machine.current_state == REJECT_STATE


def test_write_blank_counts_as_output():
    # writes the blank over a blank cell, then rejects on the next cell
    rules = {"0": {"0": Transition("1", "0", "R")}}
    machine = TuringMachine(rules, "0", set(), set(), "", "0")
    assert machine.output_length() == 0
    assert machine.step() is True
    assert machine.output_length() == 1
    assert machine.tape_snapshot(0) == "0"
    assert machine.step() is False


def test_digit_sum_with_non_digit_symbols():
    rules = {"0": {"0": Transition("0", "x", "R")}}
    machine = TuringMachine(rules, "0", set(), set(), "7a2", "0")
    machine.tape.head = 3
    assert machine.step() is True
    assert machine.tape_sum() == 9
    assert machine.output_length() == 4


def test_never_self_limits(cycle_rules):
    machine = TuringMachine(cycle_rules, "0", {"2"}, set(), "", "0")
    assert all(machine.step() for _ in range(10_000))
    assert not machine.is_halted()
    assert machine.outcome() == "running"


def test_determinism_and_reset(unary_rules):
    table = TransitionTable(unary_rules)

    def trace(machine):
        history = [(machine.current_state, machine.tape_snapshot())]
        while machine.step():
            history.append((machine.current_state, machine.tape_snapshot()))
        return history, machine.output_length(), machine.tape_sum()

    first = TuringMachine(table, "0", {"1"}, set(), "1111", "0")
    second = TuringMachine(table, "0", {"1"}, set(), "1111", "0")
    run_a = trace(first)
    assert run_a == trace(second)

    first.reset()
    assert first.current_state == "0"
    assert first.output_length() == 4
    assert trace(first) == run_a


def test_integer_state_labels():
    rules = {0: {"0": (1, "1", "R")}, 1: {"0": (2, "1", "R")}}
    machine = TuringMachine(rules, 0, {2}, set(), "", "0")
    assert machine.step() and machine.step()
    assert machine.step() is False
    assert machine.current_state == 2
    assert machine.outcome() == "accept"
