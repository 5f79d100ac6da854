import math
import random

from pong_geometry import past_bottom, past_left, past_right, past_top, rectangles_overlap
from pong_input import apply_input

FIELD_WIDTH = 800
FIELD_HEIGHT = 400

PADDLE_WIDTH = 5
PADDLE_HEIGHT = 40
PADDLE_OFFSET = 10
PADDLE_STEP = 4
PADDLE_MARGIN = 5
PADDLE_TOP_LIMIT = PADDLE_HEIGHT / 2 + PADDLE_MARGIN
PADDLE_BOTTOM_LIMIT = FIELD_HEIGHT - PADDLE_HEIGHT / 2 - PADDLE_MARGIN

BALL_RADIUS = 5
BALL_SPEED = 4.0
BALL_SPEEDUP = 0.5

SUBSTEPS = 20
WALL_MARGIN = 8
OUT_MARGIN = 30

TICK_MS = 16


def limit(v, a, b):
    return max(a, min(b, v))


class Paddle:
    def __init__(self, x, y=FIELD_HEIGHT / 2):
        self.x = x
        self.y = y
        self.width = PADDLE_WIDTH
        self.height = PADDLE_HEIGHT
        self.score = 0

    def move(self, dy):
        self.y = limit(self.y + dy, PADDLE_TOP_LIMIT, PADDLE_BOTTOM_LIMIT)

    def move_up(self):
        self.move(-PADDLE_STEP)

    def move_down(self):
        self.move(PADDLE_STEP)

    def center(self):
        self.y = FIELD_HEIGHT / 2


class Ball:
    def __init__(self):
        self.x = FIELD_WIDTH / 2
        self.y = FIELD_HEIGHT / 2
        self.radius = BALL_RADIUS
        # square bounding box used for collisions
        self.width = BALL_RADIUS * 2
        self.height = BALL_RADIUS * 2
        self.vx = 0.0
        self.vy = 0.0

    @property
    def speed(self):
        return math.hypot(self.vx, self.vy)


class GameState:
    """Everything one game of pong needs between ticks.

    The random source only has to provide ``random()``; the ``random`` module
    is used when none is given.
    """

    def __init__(self, rng=None):
        self.width = FIELD_WIDTH
        self.height = FIELD_HEIGHT
        self.rng = rng if rng is not None else random

        self.paddles = [
            Paddle(PADDLE_OFFSET),
            Paddle(self.width - PADDLE_OFFSET),
        ]
        self.ball = Ball()
        self.reset_ball()

    @property
    def scores(self):
        return [p.score for p in self.paddles]

    def reset_ball(self):
        angle = self.rng.random() * math.pi * 2
        self.ball.x = self.width / 2
        self.ball.y = self.height / 2
        self.ball.vx = BALL_SPEED * math.cos(angle)
        self.ball.vy = BALL_SPEED * math.sin(angle)

    def restart(self):
        for p in self.paddles:
            p.score = 0
            p.center()
        self.reset_ball()

    def tick(self, inputs):
        apply_input(self, inputs)
        return self.step()

    def step(self):
        """Advance the ball by one tick. Returns the index of the scorer or None."""
        ball = self.ball
        left, right = self.paddles

        # sub-stepped x
        increment = ball.vx / SUBSTEPS
        for _ in range(SUBSTEPS):
            ball.x += increment

            if rectangles_overlap(left, ball) and ball.vx < 0:
                ball.vx = -ball.vx + BALL_SPEEDUP
                increment = ball.vx / SUBSTEPS

            if rectangles_overlap(right, ball) and ball.vx > 0:
                ball.vx = -ball.vx - BALL_SPEEDUP
                increment = ball.vx / SUBSTEPS

        scorer = None
        if past_right(ball, self.width, OUT_MARGIN):
            scorer = 0
        elif past_left(ball, OUT_MARGIN):
            scorer = 1
        if scorer is not None:
            self.paddles[scorer].score += 1
            self.reset_ball()

        ball.y += ball.vy
        if past_top(ball, WALL_MARGIN) or past_bottom(ball, self.height, WALL_MARGIN):
            ball.vy = -ball.vy

        return scorer

    def to_dict(self):
        return {
            'width': self.width,
            'height': self.height,
            'paddles': [
                {'x': p.x, 'y': p.y, 'width': p.width, 'height': p.height}
                for p in self.paddles
            ],
            'ball': {'x': self.ball.x, 'y': self.ball.y, 'radius': self.ball.radius},
            'scores': self.scores,
        }
