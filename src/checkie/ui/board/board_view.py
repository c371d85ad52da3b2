"""BoardView — QGraphicsView bound to a game controller.

The view owns the link between a :class:`GameController` and the board
scene. It listens to the controller's events so the scene follows the
game no matter who drives it: a drag on the board, a menu action, or a
plain ``commit_move`` call.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPainter, QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from checkie.core.types import Position
from checkie.game.controller import GameController
from checkie.game.interfaces import GamePhase
from checkie.game.state import GameState, MoveRecord
from checkie.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Displays the board scene of one game and scales it to the widget.

    Signals:
        move_committed(object): Bubbled up from BoardScene for moves made
            on the board itself.
    """

    move_committed = pyqtSignal(object)

    def __init__(
        self,
        controller: GameController | None = None,
        parent: QWidget | None = None,
    ) -> None:
        self._scene = BoardScene()
        super().__init__(self._scene, parent)
        self._controller: GameController | None = None

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)

        self._scene.move_committed.connect(self.move_committed.emit)

        if controller is not None:
            self.attach(controller)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    @property
    def controller(self) -> GameController | None:
        return self._controller

    def attach(self, controller: GameController) -> None:
        """Follow *controller*'s game, dropping any previous one."""
        if controller is self._controller:
            return
        self.detach()
        self._controller = controller
        events = controller.events
        events.on_move.append(self._on_move)
        events.on_phase_changed.append(self._on_phase_changed)
        events.on_selection_changed.append(self._on_selection_changed)

        self._scene.set_controller(controller)
        self._scene.set_interactive(not controller.state.is_game_over)
        self.fit_board()

    def detach(self) -> None:
        if self._controller is None:
            return
        events = self._controller.events
        events.on_move.remove(self._on_move)
        events.on_phase_changed.remove(self._on_phase_changed)
        events.on_selection_changed.remove(self._on_selection_changed)
        self._controller = None

    def fit_board(self) -> None:
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self.fit_board()

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_move(self, record: MoveRecord, _state: GameState) -> None:
        self._scene.show_move(record)

    def _on_phase_changed(self, phase: GamePhase) -> None:
        self._scene.set_interactive(phase == GamePhase.AWAITING_MOVE)
        if self._controller is not None and self._controller.state.ply_count == 0:
            # Nothing played yet: a new game, possibly on another board size.
            self._scene.refresh()
            self._scene.highlight_last_move(None)
            self.fit_board()

    def _on_selection_changed(self, position: Position | None) -> None:
        self._scene.show_selection(position)
