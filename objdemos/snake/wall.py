"""The playing field: a square grid of character cells with a border."""

from __future__ import annotations

BORDER = "*"
EMPTY = " "
BODY = "="
HEAD = "@"
FOOD = "#"


class Wall:
    """A ROWS x COLS grid whose outer ring is the border."""

    ROWS = 26
    COLS = 26

    _LEGEND = {
        6: "a : left",
        7: "d : right",
        8: "w : up",
        9: "s : down",
    }

    def __init__(self) -> None:
        self._cells: list[list[str]] = []
        self.reset()

    def reset(self) -> None:
        """Draw the border and empty the inside."""
        last_row, last_col = self.ROWS - 1, self.COLS - 1
        self._cells = [
            [
                BORDER if row in (0, last_row) or col in (0, last_col) else EMPTY
                for col in range(self.COLS)
            ]
            for row in range(self.ROWS)
        ]

    def render(self) -> str:
        """Return the grid as text, one line per row, with the key legend."""
        lines = (
            "".join(f"{cell} " for cell in row) + self._LEGEND.get(index, "")
            for index, row in enumerate(self._cells)
        )
        return "".join(f"{line}\n" for line in lines)

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.ROWS and 0 <= y < self.COLS):
            raise IndexError(f"cell ({x}, {y}) is outside the wall")

    def get(self, x: int, y: int) -> str:
        self._check(x, y)
        return self._cells[x][y]

    def set(self, x: int, y: int, cell: str) -> None:
        self._check(x, y)
        self._cells[x][y] = cell