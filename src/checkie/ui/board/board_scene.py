"""BoardScene — QGraphicsScene that draws the board and stones.

The scene is the drag-and-drop collaborator of the engine: it asks the
controller for drop zones when a stone is picked up and hands a tagged
payload to ``handle_drop`` on release. Pixel geometry stays here.
"""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
)

from checkie.core.board import Board
from checkie.core.types import Position, is_playable
from checkie.game.controller import GameController
from checkie.game.payload import StonePayload, parse_drop_payload
from checkie.game.state import MoveRecord
from checkie.ui.board.stone_item import StoneItem
from checkie.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, highlights and stone items.

    Signals:
        move_committed(object): The controller accepted a drop; carries
            the new :class:`MoveRecord`.
    """

    move_committed = pyqtSignal(object)

    TILE = 72  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._controller: GameController | None = None
        self._size = 8
        self._flipped = False

        # Interaction state
        self._selected: Position | None = None
        self._drag_payload: bytes | None = None
        self._dragging_item: StoneItem | None = None
        self._shown_record: MoveRecord | None = None
        self._interactive = True
        self._show_drop_zones = True

        # Visual layers
        self._square_items: dict[Position, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._drop_zone_items: list[QGraphicsRectItem] = []
        self._stone_items: dict[Position, StoneItem] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_controller(self, controller: GameController) -> None:
        self._controller = controller
        self.refresh()

    def refresh(self) -> None:
        """Redraw everything from the controller's current board."""
        self._shown_record = None
        self._clear_selection()
        board = self._board()
        if board is not None and board.size != self._size:
            self._size = board.size
            self._draw_board()
        self._sync_stones()

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._draw_board()
        self._sync_stones()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_stones()

    def set_show_drop_zones(self, visible: bool) -> None:
        """Show or hide drop-zone highlights."""
        self._show_drop_zones = visible
        if not visible:
            self._clear_items(self._drop_zone_items)

    def show_move(self, record: MoveRecord | None) -> None:
        """Bring the stones in line with the board after *record* was played."""
        if record is not None and record is self._shown_record:
            return
        self._shown_record = record
        self._clear_selection()
        self._sync_stones()
        self.highlight_last_move(record)

    def show_selection(self, pos: Position | None) -> None:
        """Highlight *pos* and its drop zones, or clear with ``None``."""
        if pos is None:
            self._selected = None
            self._clear_highlights()
        elif pos != self._selected:
            self._select_square(pos)

    def highlight_last_move(self, record: MoveRecord | None) -> None:
        self._clear_items(self._last_move_highlights)
        if record is None:
            return
        for pos in (record.origin, record.destination):
            rect = self._make_highlight(pos, self._theme.last_move)
            rect.setZValue(0.5)
            self._last_move_highlights.append(rect)

    @property
    def board_size(self) -> int:
        return self._size

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._highlight_items)
        self._clear_items(self._drop_zone_items)
        self._clear_items(self._last_move_highlights)

        t = self.TILE
        for row in range(self._size):
            for col in range(self._size):
                vc, vr = self._visual_coords(row, col)
                color = (
                    self._theme.dark_square
                    if is_playable((row, col))
                    else self._theme.light_square
                )
                rect = QGraphicsRectItem(vc * t, vr * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[Position(row, col)] = rect

        self.setSceneRect(0, 0, self._size * t, self._size * t)

    # ── Stone synchronisation ────────────────────────────────────────────

    def _sync_stones(self) -> None:
        """Re-create all stone items from the current board."""
        for item in self._stone_items.values():
            self.removeItem(item)
        self._stone_items.clear()

        board = self._board()
        if board is None:
            return

        t = self.TILE
        for pos, stone in board.items():
            item = StoneItem(stone, pos, t, self._theme)
            vc, vr = self._visual_coords(pos.row, pos.col)
            item.setPos(vc * t + item.margin, vr * t + item.margin)
            self.addItem(item)
            self._stone_items[pos] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or self._controller is None or event is None:
            return super().mousePressEvent(event)

        pos = self._pos_to_square(event.scenePos())
        if pos is None:
            self._clear_selection()
            return super().mousePressEvent(event)

        # Clicking a drop zone of the selected stone commits the move
        if self._selected is not None and pos in self._controller.drop_zones_for(
            self._selected
        ):
            self._commit(StonePayload(self._selected).encode(), pos)
            return

        if self._controller.select(pos):
            self.show_selection(pos)
            item = self._stone_items.get(pos)
            if item is not None:
                item.enable_drag(True)
                item.start_drag()
                self._dragging_item = item
                self._drag_payload = StonePayload(pos).encode()
        else:
            self._clear_selection()

        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._dragging_item is not None and event is not None:
            item = self._dragging_item
            payload = self._drag_payload
            drop_pos = self._pos_to_square(event.scenePos())
            self._dragging_item = None
            self._drag_payload = None

            if drop_pos is not None and payload and self._accepts_drop(item, drop_pos):
                if self._commit(payload, drop_pos):
                    return

            # Invalid drop: snap back
            item.cancel_drag()
            item.enable_drag(False)

        super().mouseReleaseEvent(event)

    def _commit(self, raw_payload: bytes, destination: Position) -> bool:
        if self._controller is None:
            return False
        payload = parse_drop_payload(raw_payload)
        if payload is None:
            return False
        if not self._controller.handle_drop(payload, destination):
            return False

        history = self._controller.state.move_history
        record = history[-1] if history else None
        self.show_move(record)
        self.move_committed.emit(record)
        return True

    def _accepts_drop(self, item: StoneItem, drop_pos: Position) -> bool:
        # Dropping on the origin is a move only when a capture chain ends there.
        if drop_pos != item.position:
            return True
        return self._controller is not None and drop_pos in self._controller.drop_zones_for(
            item.position
        )

    # ── Selection / highlights ───────────────────────────────────────────

    def _select_square(self, pos: Position) -> None:
        self._clear_highlights()
        self._selected = pos

        rect = self._make_highlight(pos, self._theme.highlight_from)
        self._highlight_items.append(rect)

        if self._controller is not None and self._show_drop_zones:
            for target in self._controller.drop_zones_for(pos):
                dot = self._make_highlight(target, self._theme.highlight_to)
                self._drop_zone_items.append(dot)

    def _clear_selection(self) -> None:
        self._selected = None
        if self._controller is not None:
            self._controller.deselect()
        self._clear_highlights()

    def _clear_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._drop_zone_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _board(self) -> Board | None:
        if self._controller is None:
            return None
        return self._controller.board

    def _visual_coords(self, row: int, col: int) -> tuple[int, int]:
        """Board row/col → visual column/row."""
        last = self._size - 1
        if self._flipped:
            return last - col, last - row
        return col, row

    def _pos_to_square(self, pos: QPointF) -> Position | None:
        """Scene position → board square."""
        t = self.TILE
        vc = int(pos.x() // t)
        vr = int(pos.y() // t)
        if not (0 <= vc < self._size and 0 <= vr < self._size):
            return None
        last = self._size - 1
        if self._flipped:
            return Position(last - vr, last - vc)
        return Position(vr, vc)

    def _make_highlight(self, pos: Position, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vc, vr = self._visual_coords(pos.row, pos.col)
        rect = QGraphicsRectItem(vc * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
