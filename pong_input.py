from enum import Enum


class Action(Enum):
    PLAYER1_UP = "player1_up"
    PLAYER1_DOWN = "player1_down"
    PLAYER2_UP = "player2_up"
    PLAYER2_DOWN = "player2_down"


# (up, down) per player index
PLAYER_ACTIONS = [
    (Action.PLAYER1_UP, Action.PLAYER1_DOWN),
    (Action.PLAYER2_UP, Action.PLAYER2_DOWN),
]


class InputState:
    """Which actions are held right now. Key events write here, ticks read."""

    def __init__(self):
        self.held = {a: False for a in Action}

    def press(self, action):
        self.held[action] = True

    def release(self, action):
        self.held[action] = False

    def is_held(self, action):
        return self.held[action]

    def clear(self):
        for a in self.held:
            self.held[a] = False


def apply_input(state, inputs):
    for i, (up, down) in enumerate(PLAYER_ACTIONS):
        paddle = state.paddles[i]
        # down first
        if inputs.is_held(down):
            paddle.move_down()
        elif inputs.is_held(up):
            paddle.move_up()
