"""Giant squid bingo: find the first and last boards to win."""

SIZE = 5


class Board:
    """A 5x5 bingo board that tracks which numbers have been called."""

    def __init__(self, values):
        rows = [tuple(int(value) for value in row) for row in values]
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError(f"a board must be {SIZE}x{SIZE}")
        self.values = rows
        self.marked = [[False] * SIZE for _ in range(SIZE)]

    def mark(self, number):
        """Mark every cell holding the called number."""
        for row_values, row_marks in zip(self.values, self.marked):
            for col, value in enumerate(row_values):
                if value == number:
                    row_marks[col] = True

    def has_won(self):
        """True when a full row or a full column is marked."""
        return any(all(row) for row in self.marked) or any(
            all(col) for col in zip(*self.marked)
        )

    def score(self, number):
        """Sum of the unmarked numbers times the number just called."""
        unmarked = sum(
            value
            for row_values, row_marks in zip(self.values, self.marked)
            for value, marked in zip(row_values, row_marks)
            if not marked
        )
        return unmarked * number


def parse(text):
    """Read the called numbers and the boards, returned as (moves, boards)."""
    lines = text.strip().splitlines()
    if not lines:
        raise ValueError("no bingo input")
    moves = [int(item) for item in lines[0].split(",") if item.strip()]
    tokens = [int(token) for line in lines[1:] for token in line.split()]
    cells = SIZE * SIZE
    if len(tokens) % cells:
        raise ValueError("incomplete board")
    boards = []
    for start in range(0, len(tokens), cells):
        chunk = tokens[start:start + cells]
        boards.append(Board(chunk[row:row + SIZE] for row in range(0, cells, SIZE)))
    return moves, boards


def part_one(text):
    """Score of the first board to win."""
    moves, boards = parse(text)
    for number in moves:
        for board in boards:
            board.mark(number)
            if board.has_won():
                return board.score(number)
    raise ValueError("no board wins")


def part_two(text):
    """Score of the last board to win."""
    moves, remaining = parse(text)
    for number in moves:
        left = len(remaining)
        kept = []
        for board in remaining:
            board.mark(number)
            if board.has_won():
                if left == 1:
                    return board.score(number)
                left -= 1
            else:
                kept.append(board)
        remaining = kept
    raise ValueError("no last winning board")