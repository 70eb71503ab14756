# tools/machine_loader.py

from pathlib import Path

from simulator.transition_table import DIRECTIONS, Transition, TransitionTable
from simulator.turing_machine import TuringMachine

MAX_SYMBOLS = 9  # symbol index i is written as chr(ord('0') + i)


def symbol_for(index):
    return chr(ord('0') + index)


def _parse_count(lines, idx, name):
    if idx >= len(lines) or not lines[idx].strip():
        raise ValueError(f"Missing {name} on line {idx + 1}")
    try:
        return int(lines[idx].strip())
    except ValueError:
        raise ValueError(f"Invalid {name} on line {idx + 1}: {lines[idx].strip()!r}") from None


def parse_transition(line, line_no, num_states, num_symbols):
    """Parse 'next,write,dir' into a Transition, validating every field."""
    parts = [p.strip() for p in line.split(",")]
    if len(parts) != 3:
        raise ValueError(f"Invalid transition format on line {line_no}: expected 'next,write,dir', got {line!r}")
    next_state, write_symbol, direction = parts

    if not next_state.isdecimal() or int(next_state) >= num_states:
        raise ValueError(f"Invalid next state on line {line_no}: {next_state!r} (expected 0..{num_states - 1})")
    alphabet = [symbol_for(i) for i in range(num_symbols + 1)]
    if write_symbol not in alphabet:
        raise ValueError(f"Invalid write symbol on line {line_no}: {write_symbol!r} (expected one of {''.join(alphabet)})")
    if direction not in DIRECTIONS:
        raise ValueError(f"Invalid direction on line {line_no}: {direction!r} (expected L or R)")

    return Transition(str(int(next_state)), write_symbol, direction)


def parse_machine(text):
    """
    Parse a machine description:
      line 1: number of states S
      line 2: number of symbols K
      (S-1)*(K+1) transition lines, row-major by state then symbol
      optional final line: initial tape contents
    State S-1 is the accept state. An empty transition line leaves that entry undefined.
    """
    lines = text.splitlines()
    num_states = _parse_count(lines, 0, "state count")
    num_symbols = _parse_count(lines, 1, "symbol count")
    if num_states < 1:
        raise ValueError(f"State count must be at least 1, got {num_states}")
    if not 0 <= num_symbols <= MAX_SYMBOLS:
        raise ValueError(f"Symbol count must be between 0 and {MAX_SYMBOLS}, got {num_symbols}")

    total = (num_states - 1) * (num_symbols + 1)
    transition_lines = lines[2:2 + total]
    if len(transition_lines) < total:
        raise ValueError(f"Not enough transition lines: expected {total}, got {len(transition_lines)}")

    rules = {}
    for idx, line in enumerate(transition_lines):
        line = line.strip()
        if not line:
            continue
        state, symbol = divmod(idx, num_symbols + 1)
        transition = parse_transition(line, idx + 3, num_states, num_symbols)
        rules.setdefault(str(state), {})[symbol_for(symbol)] = transition

    tape_line = lines[2 + total] if len(lines) > 2 + total else ""

    return {
        "states": num_states,
        "symbols": num_symbols,
        "rules": TransitionTable(rules),
        "start_state": "0",
        "accept_states": {str(num_states - 1)},
        "reject_states": set(),
        "input": tape_line.strip(),
    }


def load_machine(path):
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Machine file not found at: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return parse_machine(f.read())


def build_machine(definition, blank="0"):
    return TuringMachine(
        definition["rules"],
        definition["start_state"],
        definition["accept_states"],
        definition["reject_states"],
        definition["input"],
        blank,
    )
