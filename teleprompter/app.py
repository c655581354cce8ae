"""
TelePrompter entry point.

    teleprompter [SCRIPT]

SCRIPT (optional) is a .txt (or .pdf with PyMuPDF installed) preloaded into
the editor.  Set TELEPROMPTER_DEBUG=1 for debug logging.
"""

# ── Standard library ──────────────────────────────────────────────────────────
import logging, os, sys

# ── PyQt5 ─────────────────────────────────────────────────────────────────────
from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore    import Qt, QPoint
from PyQt5.QtGui     import (
    QPainter, QColor, QPalette, QPixmap, QIcon, QPolygon,
)

from teleprompter.config  import Rect
from teleprompter.panel   import ConfigPanel
from teleprompter.session import SessionManager
from teleprompter.window  import PrompterWindow

log = logging.getLogger(__name__)

_FALLBACK_AREA = Rect(0, 0, 1280, 800)


def _make_icon() -> QIcon:
    """Slate tile, three script lines with the middle one lit, sky-blue play mark."""
    sz = 128
    px = QPixmap(sz, sz); px.fill(Qt.transparent)
    p  = QPainter(px)
    p.setRenderHint(QPainter.Antialiasing)
    p.setPen(Qt.NoPen)
    p.setBrush(QColor(15, 23, 42))
    p.drawRoundedRect(2, 2, sz - 4, sz - 4, 18, 18)
    for i, (y, w) in enumerate([(34, 0.7), (58, 1.0), (82, 0.5)]):
        p.setBrush(QColor(241, 245, 249, 230 if i == 1 else 90))
        p.drawRoundedRect(18, y, int((sz - 36) * w), 10, 4, 4)
    p.setBrush(QColor(14, 165, 233))
    p.drawPolygon(QPolygon([QPoint(92, 92), QPoint(92, 116), QPoint(114, 104)]))
    p.end()
    return QIcon(px)


def _dark_palette() -> QPalette:
    pal = QPalette(); C = QColor
    pal.setColor(QPalette.Window,          C(30, 41, 59))
    pal.setColor(QPalette.WindowText,      C(226, 232, 240))
    pal.setColor(QPalette.Base,            C(15, 23, 42))
    pal.setColor(QPalette.AlternateBase,   C(30, 41, 59))
    pal.setColor(QPalette.Text,            C(226, 232, 240))
    pal.setColor(QPalette.Button,          C(51, 65, 85))
    pal.setColor(QPalette.ButtonText,      C(226, 232, 240))
    pal.setColor(QPalette.Highlight,       C(2, 132, 199))
    pal.setColor(QPalette.HighlightedText, C(255, 255, 255))
    return pal


def _work_area() -> Rect:
    screen = QApplication.primaryScreen()
    if screen is None:
        return _FALLBACK_AREA
    g = screen.availableGeometry()   # respects taskbar / dock
    return Rect(g.x(), g.y(), g.width(), g.height())


def main():
    logging.basicConfig(
        level=logging.DEBUG if os.environ.get("TELEPROMPTER_DEBUG") else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    app.setPalette(_dark_palette())
    icon = _make_icon()
    app.setWindowIcon(icon)

    panel   = ConfigPanel()
    session = SessionManager(panel, PrompterWindow, _work_area)
    panel.session = session

    args = app.arguments()[1:]
    if args:
        log.info("Preloading %s", args[0])
        panel.load_path(args[0])

    panel.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
