"""BoardScene — QGraphicsScene that draws the 9x9 board, pieces and obstacles."""

from __future__ import annotations

from collections.abc import Iterable

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from blockade.core.board import BoardSnapshot
from blockade.core.enums import Cell
from blockade.core.types import BOARD_SIZE, Coord, all_coords, coord_to_label
from blockade.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders squares, coordinates, highlights and cell contents.

    The scene is a passive view: it reports clicks and draws whatever
    snapshot and selection it is handed.

    Signals:
        square_clicked(int, int): Row and column of a clicked square.
    """

    square_clicked = pyqtSignal(int, int)

    TILE = 64  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._snapshot: BoardSnapshot | None = None
        self._interactive = True
        self._show_coordinates = True
        self._show_valid_moves = True

        # Visual layers
        self._square_items: dict[Coord, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._content_items: dict[Coord, QGraphicsItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._valid_items: list[QGraphicsRectItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, snapshot: BoardSnapshot) -> None:
        """Display *snapshot* (full redraw of cell contents)."""
        self._snapshot = snapshot
        self.clear_selection()
        self._sync_cells()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable click reporting."""
        self._interactive = interactive

    def is_interactive(self) -> bool:
        return self._interactive

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_cells()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide row letters and column digits."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_valid_moves(self, visible: bool) -> None:
        """Show or hide valid-destination highlights."""
        self._show_valid_moves = visible
        if not visible:
            self._clear_items(self._valid_items)

    def show_selection(self, selected: Coord | None, targets: Iterable[Coord] = ()) -> None:
        """Highlight the armed square and its valid destinations."""
        self.clear_selection()
        if selected is None:
            return
        self._highlight_items.append(
            self._make_highlight(selected, self._theme.highlight_selected)
        )
        if self._show_valid_moves:
            for sq in targets:
                self._valid_items.append(
                    self._make_highlight(sq, self._theme.highlight_valid)
                )

    def clear_selection(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._valid_items)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 81 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Sans Serif", max(7, t // 9))

        for row, col in all_coords():
            is_light = (row + col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(col * t, row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(QColor(0, 0, 0, 60)))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[(row, col)] = rect

            label = coord_to_label((row, col))
            # Row letters (left edge)
            if col == 0:
                self._add_coord_text(label[0], font, col * t + 3, row * t + 2)
            # Column digits (bottom edge)
            if row == BOARD_SIZE - 1:
                self._add_coord_text(label[1], font, col * t + t - 12, row * t + t - 16)

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord_text(self, text: str, font: QFont, x: float, y: float) -> None:
        txt = QGraphicsSimpleTextItem(text)
        txt.setFont(font)
        txt.setBrush(QBrush(self._theme.coord_text))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Cell synchronisation ─────────────────────────────────────────────

    def _sync_cells(self) -> None:
        """Re-create all piece/obstacle items from the current snapshot."""
        for item in self._content_items.values():
            self.removeItem(item)
        self._content_items.clear()

        if self._snapshot is None:
            return

        for row, col in all_coords():
            cell = self._snapshot[row][col]
            if cell == Cell.EMPTY:
                continue
            item = self._make_content_item(cell, row, col)
            self.addItem(item)
            self._content_items[(row, col)] = item

    def _make_content_item(self, cell: Cell, row: int, col: int) -> QGraphicsItem:
        t = self.TILE
        if cell == Cell.OBSTACLE:
            inset = t // 10
            block = QGraphicsRectItem(
                col * t + inset, row * t + inset, t - 2 * inset, t - 2 * inset
            )
            block.setBrush(QBrush(self._theme.obstacle))
            block.setPen(QPen(Qt.PenStyle.NoPen))
            block.setZValue(1)
            return block

        color = self._theme.player_x if cell == Cell.PLAYER_X else self._theme.player_o
        glyph = QGraphicsSimpleTextItem(str(cell))
        glyph.setFont(QFont("Sans Serif", t // 2, QFont.Weight.Bold))
        glyph.setBrush(QBrush(color))
        bounds = glyph.boundingRect()
        glyph.setPos(
            col * t + (t - bounds.width()) / 2, row * t + (t - bounds.height()) / 2
        )
        glyph.setZValue(1)
        return glyph

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.square_clicked.emit(*sq)
        super().mousePressEvent(event)

    # ── Helpers ──────────────────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> Coord | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return row, col

    def _make_highlight(self, sq: Coord, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        row, col = sq
        rect = QGraphicsRectItem(col * t, row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()
