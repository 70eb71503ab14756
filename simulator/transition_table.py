from typing import NamedTuple

import numpy as np

DIRECTIONS = ('L', 'R')


class Transition(NamedTuple):
    next_state: str
    write_symbol: str
    direction: str  # 'L' or 'R'


class TransitionTable:
    """
    Immutable (state, symbol) -> Transition mapping.
    A lookup miss is a normal outcome: the machine treats it as rejection.
    """

    def __init__(self, rules=None):
        self._transitions = {}
        for state, row in (rules or {}).items():
            for symbol, transition in row.items():
                self._transitions[(state, symbol)] = Transition(*transition)

    def lookup(self, state, symbol):
        return self._transitions.get((state, symbol))

    def __len__(self):
        return len(self._transitions)

    def __contains__(self, key):
        return key in self._transitions

    def states(self):
        """States that have at least one outgoing transition."""
        return {state for state, _ in self._transitions}

    def to_array(self, num_states, num_symbols):
        """
        Dense int32 layout of shape (num_states, num_symbols, 3), rows are
        (write_index, dir_bit, next_state), (-1, 0, -1) where undefined.
        Only meaningful for tables labelled with integer states and digit symbols.
        """
        arr = np.full((num_states, num_symbols, 3), -1, dtype=np.int32)
        arr[:, :, 1] = 0
        for state in range(num_states):
            for symbol in range(num_symbols):
                transition = self.lookup(str(state), chr(ord('0') + symbol))
                if transition is None:
                    continue
                dir_bit = 0 if transition.direction == 'L' else 1
                arr[state, symbol] = (ord(transition.write_symbol) - ord('0'), dir_bit, int(transition.next_state))
        return arr
