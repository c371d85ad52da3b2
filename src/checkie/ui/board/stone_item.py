"""StoneItem — draggable stone on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QCursor, QPen
from PyQt6.QtWidgets import QGraphicsEllipseItem, QGraphicsItem

from checkie.core.enums import Player
from checkie.core.stone import Stone
from checkie.core.types import Position
from checkie.ui.styles.theme import BoardTheme


class StoneItem(QGraphicsEllipseItem):
    """A single stone on the board.

    Stores its logical *position* and supports drag & drop. Kings carry an
    inner ring.
    """

    _MARGIN_RATIO = 0.1

    def __init__(
        self,
        stone: Stone,
        position: Position,
        tile_size: int,
        theme: BoardTheme,
    ) -> None:
        super().__init__()
        self.stone = stone
        self.position = position
        self._theme = theme
        self._drag_origin: QPointF | None = None
        self._crown: QGraphicsEllipseItem | None = None

        fill = theme.stone_a if stone.owner is Player.PLAYER_A else theme.stone_b
        self.setBrush(QBrush(fill))
        self.setPen(QPen(theme.stone_outline, 2))
        self._update_size(tile_size)

        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, False)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)

    @property
    def margin(self) -> float:
        return self._margin

    @property
    def is_king(self) -> bool:
        return self._crown is not None

    def enable_drag(self, enabled: bool) -> None:
        """Allow / disallow dragging."""
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, enabled)
        if enabled:
            self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        else:
            self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))

    def start_drag(self) -> None:
        """Called at the beginning of a drag gesture."""
        self._drag_origin = self.pos()
        self.setZValue(10)  # bring to front
        self.setCursor(QCursor(Qt.CursorShape.ClosedHandCursor))
        self.setOpacity(0.85)

    def cancel_drag(self) -> None:
        """Snap back to original position."""
        if self._drag_origin is not None:
            self.setPos(self._drag_origin)
        self._finish_drag()

    def _finish_drag(self) -> None:
        self._drag_origin = None
        self.setZValue(1)
        self.setCursor(QCursor(Qt.CursorShape.OpenHandCursor))
        self.setOpacity(1.0)

    def _update_size(self, size: int) -> None:
        self._margin = float(size) * self._MARGIN_RATIO
        diameter = max(float(size) - 2.0 * self._margin, 1.0)
        self.setRect(QRectF(0.0, 0.0, diameter, diameter))

        if self._crown is None and self.stone.is_king:
            inset = diameter * 0.25
            crown = QGraphicsEllipseItem(
                QRectF(inset, inset, diameter - 2 * inset, diameter - 2 * inset), self
            )
            crown.setPen(QPen(self._theme.king_mark, max(2.0, diameter * 0.08)))
            crown.setBrush(QBrush(Qt.BrushStyle.NoBrush))
            self._crown = crown
