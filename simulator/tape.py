class Tape:
    """Sparse tape, unbounded in both directions. Unwritten cells read as blank."""

    def __init__(self, initial="", blank="0"):
        self.blank = blank
        self.cells = {}
        self.head = 0
        for pos, symbol in enumerate(initial):
            self.cells[pos] = symbol

    def read(self):
        return self.cells.get(self.head, self.blank)

    def write(self, symbol):
        # Blank writes are stored too; they count towards stored_cell_count().
        self.cells[self.head] = symbol

    def move_left(self):
        self.head -= 1

    def move_right(self):
        self.head += 1

    def move(self, direction):
        if direction == 'L':
            self.move_left()
        else:
            self.move_right()

    def head_position(self):
        return self.head

    def window(self, radius=10):
        """Return the 2*radius+1 symbols centered on the head, left to right."""
        if radius < 0:
            raise ValueError(f"Window radius must be non-negative, got {radius}")
        return [self.cells.get(pos, self.blank) for pos in range(self.head - radius, self.head + radius + 1)]

    def sum_of_digit_symbols(self):
        """Sum the numeric value of every stored digit symbol ('0'..'9')."""
        return sum(ord(symbol) - ord('0') for symbol in self.cells.values() if '0' <= symbol <= '9')

    def stored_cell_count(self):
        return len(self.cells)

    def bounds(self):
        if not self.cells:
            return None
        return min(self.cells), max(self.cells)

    def contents(self):
        """Render the stored span of the tape, filling gaps with blank."""
        span = self.bounds()
        if span is None:
            return ""
        lo, hi = span
        return "".join(self.cells.get(pos, self.blank) for pos in range(lo, hi + 1))
