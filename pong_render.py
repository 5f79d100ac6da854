"""
Turns a game snapshot into drawing calls.

Nothing here knows about Qt; the host hands in any object that implements
``Surface``.
"""

from typing import Protocol

BOARD_COLOR = "black"
BALL_COLOR = "red"
PADDLE_COLOR = "white"
LINE_COLOR = "green"
SCORE_COLOR = "orange"

SCORE_OFFSET = 40


class Surface(Protocol):
    def fill_rect(self, color, x, y, width, height):
        """Filled rectangle centred on x, y."""

    def fill_circle(self, color, x, y, radius):
        """Filled circle centred on x, y."""

    def draw_text(self, color, text, x, y):
        """Text horizontally centred on x with its baseline at y."""

    def stroke_rect(self, color, x, y, width, height, line_width, dashed=False):
        """Outline of a rectangle with its top-left corner at x, y."""


def draw_game(surface, snapshot):
    w = snapshot["width"]
    h = snapshot["height"]

    surface.fill_rect(BOARD_COLOR, w / 2, h / 2, w, h)

    ball = snapshot["ball"]
    surface.fill_circle(BALL_COLOR, ball["x"], ball["y"], ball["radius"])

    for p in snapshot["paddles"]:
        surface.fill_rect(PADDLE_COLOR, p["x"], p["y"], p["width"], p["height"])

    # walls, centre line
    surface.stroke_rect(LINE_COLOR, -4, 2, w + 8, h - 4, 5)
    surface.stroke_rect(LINE_COLOR, w / 2, 0, w / 2, h, 1, dashed=True)

    left, right = snapshot["scores"]
    surface.draw_text(SCORE_COLOR, str(left), w / 2 - SCORE_OFFSET, h - 10)
    surface.draw_text(SCORE_COLOR, str(right), w / 2 + SCORE_OFFSET, h - 10)
