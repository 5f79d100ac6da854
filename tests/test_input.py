import random

from pong_input import PLAYER_ACTIONS, Action, InputState, apply_input
from pong_logic import PADDLE_BOTTOM_LIMIT, PADDLE_TOP_LIMIT, GameState


def test_nothing_held_at_start():
    inputs = InputState()
    assert not any(inputs.is_held(a) for a in Action)


def test_press_release_clear():
    inputs = InputState()
    inputs.press(Action.PLAYER2_DOWN)
    assert inputs.is_held(Action.PLAYER2_DOWN)
    inputs.release(Action.PLAYER2_DOWN)
    assert not inputs.is_held(Action.PLAYER2_DOWN)

    inputs.press(Action.PLAYER1_UP)
    inputs.press(Action.PLAYER2_UP)
    inputs.clear()
    assert not any(inputs.is_held(a) for a in Action)


def test_player_actions():
    assert PLAYER_ACTIONS[0] == (Action.PLAYER1_UP, Action.PLAYER1_DOWN)
    assert PLAYER_ACTIONS[1] == (Action.PLAYER2_UP, Action.PLAYER2_DOWN)


def test_nothing_held_does_not_move():
    state = GameState()
    apply_input(state, InputState())
    assert [p.y for p in state.paddles] == [200, 200]


def test_players_move_independently():
    state = GameState()
    inputs = InputState()
    inputs.press(Action.PLAYER1_UP)
    apply_input(state, inputs)
    assert state.paddles[0].y == 196
    assert state.paddles[1].y == 200


def test_down_wins_when_both_held():
    state = GameState()
    inputs = InputState()
    for a in Action:
        inputs.press(a)
    apply_input(state, inputs)
    assert state.paddles[0].y == 204
    assert state.paddles[1].y == 204


def test_held_down_moves_until_clamped():
    state = GameState()
    inputs = InputState()
    inputs.press(Action.PLAYER2_DOWN)

    ys = []
    for _ in range(60):
        apply_input(state, inputs)
        ys.append(state.paddles[1].y)

    first_stop = ys.index(PADDLE_BOTTOM_LIMIT)
    moving = ys[:first_stop + 1]
    assert all(b > a for a, b in zip(moving, moving[1:]))
    assert set(ys[first_stop:]) == {PADDLE_BOTTOM_LIMIT}


def test_held_up_stops_at_top():
    state = GameState()
    inputs = InputState()
    inputs.press(Action.PLAYER1_UP)
    for _ in range(60):
        apply_input(state, inputs)
    assert state.paddles[0].y == PADDLE_TOP_LIMIT


def test_paddles_stay_in_limits():
    rng = random.Random(3)
    state = GameState(rng=rng)
    inputs = InputState()
    for _ in range(1000):
        for a in Action:
            if rng.random() < 0.5:
                inputs.press(a)
            else:
                inputs.release(a)
        state.tick(inputs)
        for p in state.paddles:
            assert PADDLE_TOP_LIMIT <= p.y <= PADDLE_BOTTOM_LIMIT
