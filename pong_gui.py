import sys

from PyQt6 import QtCore, QtGui, QtWidgets

from pong_input import Action, InputState
from pong_logic import FIELD_HEIGHT, FIELD_WIDTH, TICK_MS, GameState
from pong_render import draw_game

KEY_BINDINGS = {
    QtCore.Qt.Key.Key_W: Action.PLAYER1_UP,
    QtCore.Qt.Key.Key_S: Action.PLAYER1_DOWN,
    QtCore.Qt.Key.Key_Up: Action.PLAYER2_UP,
    QtCore.Qt.Key.Key_Down: Action.PLAYER2_DOWN,
}

# QKeyEvent.key() hands back a plain int
_BINDINGS_BY_CODE = {k.value: a for k, a in KEY_BINDINGS.items()}


def translate_key(key):
    return _BINDINGS_BY_CODE.get(getattr(key, "value", key))


class PainterSurface:
    """Draws in board units on a QPainter, scaled to the widget."""

    def __init__(self, qp, sx=1.0, sy=1.0):
        self.qp = qp
        self.sx = sx
        self.sy = sy

    def _rect(self, x, y, width, height):
        return QtCore.QRectF(x * self.sx, y * self.sy, width * self.sx, height * self.sy)

    def fill_rect(self, color, x, y, width, height):
        self.qp.fillRect(self._rect(x - width / 2, y - height / 2, width, height), QtGui.QColor(color))

    def fill_circle(self, color, x, y, radius):
        self.qp.setPen(QtCore.Qt.PenStyle.NoPen)
        self.qp.setBrush(QtGui.QColor(color))
        self.qp.drawEllipse(QtCore.QPointF(x * self.sx, y * self.sy), radius * self.sx, radius * self.sy)

    def draw_text(self, color, text, x, y):
        self.qp.setPen(QtGui.QColor(color))
        self.qp.setFont(QtGui.QFont("Arial", 20))
        advance = self.qp.fontMetrics().horizontalAdvance(text)
        self.qp.drawText(QtCore.QPointF(x * self.sx - advance / 2, y * self.sy), text)

    def stroke_rect(self, color, x, y, width, height, line_width, dashed=False):
        pen = QtGui.QPen(QtGui.QColor(color))
        pen.setWidthF(line_width)
        if dashed:
            pen.setDashPattern([15, 10])
        self.qp.setPen(pen)
        self.qp.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        self.qp.drawRect(self._rect(x, y, width, height))


class GameWidget(QtWidgets.QWidget):
    def __init__(self, state=None):
        super().__init__()
        self.state = state if state is not None else GameState()
        self.inputs = InputState()
        self.setMinimumSize(FIELD_WIDTH, FIELD_HEIGHT)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)
        self.setWindowTitle("Paddle Battle")

        self.timer = QtCore.QTimer(self)
        self.timer.setInterval(TICK_MS)
        self.timer.timeout.connect(self.tick)

    def start(self):
        self.state.restart()
        self.timer.start()
        print("[pong] game start")

    def tick(self):
        scorer = self.state.tick(self.inputs)
        if scorer is not None:
            left, right = self.state.scores
            print(f"[pong] point for player {scorer + 1} # {left}:{right}")
        self.update()

    def paintEvent(self, event):
        qp = QtGui.QPainter(self)
        qp.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing)
        qp.fillRect(self.rect(), QtGui.QColor(25, 25, 25))

        sx = self.width() / self.state.width
        sy = self.height() / self.state.height
        draw_game(PainterSurface(qp, sx, sy), self.state.to_dict())
        qp.end()

    def keyPressEvent(self, e):
        action = translate_key(e.key())
        if action is None:
            super().keyPressEvent(e)
            return
        if not e.isAutoRepeat():
            self.inputs.press(action)

    def keyReleaseEvent(self, e):
        action = translate_key(e.key())
        if action is None:
            super().keyReleaseEvent(e)
            return
        if not e.isAutoRepeat():
            self.inputs.release(action)

    def focusOutEvent(self, e):
        self.inputs.clear()
        super().focusOutEvent(e)

    def closeEvent(self, e):
        self.timer.stop()
        left, right = self.state.scores
        print(f"[pong] game over # {left}:{right}")
        e.accept()


def main():
    app = QtWidgets.QApplication(sys.argv)
    w = GameWidget()
    w.resize(FIELD_WIDTH, FIELD_HEIGHT)
    w.show()
    w.start()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
