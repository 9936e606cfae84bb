# stacker_layout.py
from dataclasses import dataclass
from stacker_config import CONFIG


@dataclass
class Dims:
    cell: int
    margin: int
    prize_h: int
    panel_w: int
    cols: int
    rows: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int

    def cell_xy(self, row: int, col: int):
        """Screen top-left of a grid cell; row 0 is the bottom of the board."""
        return (self.board_x + col * self.cell,
                self.board_y + (self.rows - 1 - row) * self.cell)


def compute_dims(cols: int, rows: int) -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    prize_h = 24
    panel_w = 160

    board_w = cols * cell
    board_h = rows * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + prize_h + board_h + prize_h + margin

    board_x = margin
    board_y = margin + prize_h
    panel_x = board_x + board_w + margin
    panel_y = board_y

    return Dims(
        cell=cell, margin=margin, prize_h=prize_h, panel_w=panel_w,
        cols=cols, rows=rows,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y
    )
