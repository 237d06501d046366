"""Visual theme constants and QSS styles for Tapboard."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard and its decorations."""

    light_square: QColor
    dark_square: QColor
    selected: QColor  # selected piece origin
    legal_target: QColor  # dots / capture rings
    last_move: QColor  # last move origin and destination
    check: QColor  # ring around a king in check
    checkmate: QColor  # ring around a mated king
    illegal: QColor  # transient illegal-click flash
    piece_ink: QColor
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    def square_color(self, shade: int) -> QColor:
        """Base colour for shade 0 (dark) or 1 (light)."""
        return self.light_square if shade else self.dark_square

    def coord_color(self, shade: int) -> QColor:
        return self.coord_dark if shade else self.coord_light

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            selected=QColor(255, 255, 0, 100),  # yellow transparent
            legal_target=QColor(0, 0, 0, 60),
            last_move=QColor(155, 199, 0, 105),  # green
            check=QColor(255, 0, 0, 170),
            checkmate=QColor(150, 0, 0, 230),
            illegal=QColor(255, 40, 40, 110),
            piece_ink=QColor(20, 20, 20),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            selected=QColor(255, 255, 0, 100),
            legal_target=QColor(0, 0, 0, 60),
            last_move=QColor(155, 199, 0, 105),
            check=QColor(255, 0, 0, 170),
            checkmate=QColor(150, 0, 0, 230),
            illegal=QColor(255, 40, 40, 110),
            piece_ink=QColor(20, 20, 20),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            selected=QColor(255, 255, 0, 100),
            legal_target=QColor(0, 0, 0, 60),
            last_move=QColor(155, 199, 0, 105),
            check=QColor(255, 0, 0, 170),
            checkmate=QColor(150, 0, 0, 230),
            illegal=QColor(255, 40, 40, 110),
            piece_ink=QColor(20, 20, 20),
            coord_light=QColor(112, 149, 120),
            coord_dark=QColor(236, 238, 220),
        )


def theme_named(name: str) -> BoardTheme:
    """Look up a theme by its settings name, falling back to Classic."""
    themes = {
        "Classic": BoardTheme.default,
        "Blue": BoardTheme.blue,
        "Green": BoardTheme.green,
    }
    return themes.get(name, BoardTheme.default)()


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-size: 13px;
}

QGraphicsView {
    background: #2b2b2b;
    border: none;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
