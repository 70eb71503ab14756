from simulator.tape import Tape
from simulator.transition_table import TransitionTable

REJECT_STATE = "REJECT"


class TuringMachine:
    def __init__(self, rules, start_state, accept_states, reject_states=(), initial_tape="", blank="0"):
        self.transitions = rules if isinstance(rules, TransitionTable) else TransitionTable(rules)
        self.start_state = start_state
        self.accept_states = frozenset(accept_states)
        self.reject_states = frozenset(reject_states)
        self.initial_tape = initial_tape
        self.blank = blank
        self.tape = Tape(initial_tape, blank)
        self._state = start_state
        self._halted = False

    @property
    def current_state(self):
        return self._state

    def is_halted(self):
        return self._halted or self._state in self.accept_states or self._state in self.reject_states

    def step(self):
        """
        Apply one transition. Returns True if a transition was applied and
        False once the machine has halted; halting is sticky.
        """
        if self.is_halted():
            return False

        symbol = self.tape.read()
        transition = self.transitions.lookup(self._state, symbol)
        if transition is None:
            self._state = REJECT_STATE
            self._halted = True
            return False

        self.tape.write(transition.write_symbol)
        self.tape.move(transition.direction)
        self._state = transition.next_state
        return True

    def outcome(self):
        if self._state in self.accept_states:
            return "accept"
        if self._halted or self._state in self.reject_states:
            return "reject"
        return "running"

    def reset(self):
        self.tape = Tape(self.initial_tape, self.blank)
        self._state = self.start_state
        self._halted = False

    def head_position(self):
        return self.tape.head_position()

    def tape_snapshot(self, radius=10):
        return "".join(self.tape.window(radius))

    def output_length(self):
        return self.tape.stored_cell_count()

    def tape_sum(self):
        return self.tape.sum_of_digit_symbols()
