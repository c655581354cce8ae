"""Teleprompter display window: lays out segments, paints them, runs the frame clock."""

from __future__ import annotations

import logging

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QCheckBox,
    QProgressBar,
)
from PyQt5.QtCore  import Qt, QTimer, QElapsedTimer
from PyQt5.QtGui   import QPainter, QFont, QFontMetrics, QColor, QBrush, QLinearGradient

from teleprompter.config    import Rect, SessionConfig
from teleprompter.intents   import Intent
from teleprompter.keymap    import intent_for_key
from teleprompter.scroll    import NEXT, PREV, ScrollController, build_geometry
from teleprompter.segmenter import Segment, segment
from teleprompter.session   import DISPLAY, SessionManager

log = logging.getLogger(__name__)

# ── Constants ─────────────────────────────────────────────────────────────────
_FRAME_MS    = 16          # target ~60 fps
_MARGIN      = 24          # left / right text margin
_PAD_TOP     = 8
_PAD_BOTTOM  = 16
_FADE_H      = 32          # top / bottom gradient fade height

_BG          = QColor(15, 23, 42)
_TEXT        = QColor(241, 245, 249)
_TEXT_DIM    = QColor(241, 245, 249, 150)
_HINT        = QColor(203, 213, 225)

_ALIGN = {"left": Qt.AlignLeft, "center": Qt.AlignHCenter, "right": Qt.AlignRight}


def _line_x(line_w: int, align: int, win_w: int, margin: int = _MARGIN) -> int:
    """Left x for a line of *line_w* px under the given alignment."""
    if   align == Qt.AlignHCenter: return max(0, (win_w - line_w) >> 1)
    elif align == Qt.AlignRight:   return max(0, win_w - margin - line_w)
    return margin


def _wrap_words(text: str, fm: QFontMetrics, max_w: int) -> list[str]:
    """Pixel word-wrap of one text line; blank input keeps one empty line."""
    sp_w   = fm.horizontalAdvance(' ')
    lines  : list[str] = []
    cur_ws : list[str] = []
    cur_w  = 0
    for word in text.split():
        ww     = fm.horizontalAdvance(word)
        needed = ww if not cur_ws else sp_w + ww
        if cur_w + needed <= max_w:
            cur_ws.append(word); cur_w += needed
        else:
            if cur_ws:
                lines.append(' '.join(cur_ws))
            cur_ws, cur_w = [word], ww
    if cur_ws:
        lines.append(' '.join(cur_ws))
    return lines or ['']


# ══════════════════════════════════════════════════════════════════════════════
#  Teleprompter Display Window
# ══════════════════════════════════════════════════════════════════════════════
class PrompterWindow(QWidget):

    def __init__(self, session: SessionManager | None = None):
        super().__init__()
        self.session = session
        self.setWindowTitle("TelePrompter")
        self.setWindowFlags(Qt.Window | Qt.FramelessWindowHint)
        self.setFocusPolicy(Qt.StrongFocus)

        # ── Script + scroll state ─────────────────────────────────────────────
        self.config     : SessionConfig | None = None
        self.segments   : list[Segment]        = []
        self.controller = ScrollController()
        self.controller.on_play_state = self._on_play_state
        self.controller.on_change     = self._on_change
        self.always_on_top : bool = False

        # ── Visual settings ───────────────────────────────────────────────────
        self.font_family         : str   = "Arial"
        self.font_px             : int   = 20
        self.line_spacing_factor : float = 1.6
        self.text_align          : int   = Qt.AlignHCenter

        # ── Frame clock ───────────────────────────────────────────────────────
        self._clock = QElapsedTimer()
        self._clock.start()
        self._scroll_timer = QTimer(self)
        self._scroll_timer.setInterval(_FRAME_MS)
        self._scroll_timer.timeout.connect(self._frame)

        # ── Caches ────────────────────────────────────────────────────────────
        self._font_key   : tuple               = ()
        self._f_font     : QFont | None        = None
        self._f_fm       : QFontMetrics | None = None
        self._f_asc      : int                 = 0
        self._f_line_h   : int                 = 1

        self._layout_key : tuple               = ()
        self._l_blocks   : list[list[str]]     = []
        self._l_content  : float               = 0.0
        self._l_extents  : list                = []

        self._drag_pos = None

        self._build_bar()
        self.setMinimumSize(480, 220)

    # ── Control bar ───────────────────────────────────────────────────────────
    def _build_bar(self):
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0); root.setSpacing(0)
        root.addStretch(1)

        self._bar = QWidget(self)
        self._bar.setStyleSheet(
            "QWidget{background:#1e293b;color:#e2e8f0;}"
            "QPushButton{background:#475569;border-radius:6px;padding:6px 10px;}"
            "QPushButton:hover{background:#64748b;}")
        bl = QVBoxLayout(self._bar)
        bl.setContentsMargins(12, 8, 12, 8); bl.setSpacing(6)

        pr = QHBoxLayout()
        pr.addWidget(QLabel("Progress"))
        self._prog = QProgressBar()
        self._prog.setRange(0, 100); self._prog.setTextVisible(False)
        self._prog.setFixedHeight(8)
        self._prog_lbl = QLabel("0%"); self._prog_lbl.setFixedWidth(40)
        pr.addWidget(self._prog, 1); pr.addWidget(self._prog_lbl)
        bl.addLayout(pr)

        def btn(lbl, fn, tip=""):
            b = QPushButton(lbl); b.setToolTip(tip)
            b.setFocusPolicy(Qt.NoFocus)
            b.clicked.connect(fn); return b

        ctl = self.controller
        br  = QHBoxLayout()
        self._play_btn = btn("Start (Space)", ctl.toggle_play)
        br.addWidget(self._play_btn, 1)
        br.addWidget(btn("Reset (0)", ctl.reset, "Scroll back to top"))
        br.addWidget(btn("Prev (↑)", lambda: ctl.go_to_segment(
            ctl.current_segment_index() - 1, PREV), "Previous segment"))
        br.addWidget(btn("Next (↓)", lambda: ctl.go_to_segment(
            ctl.current_segment_index() + 1, NEXT), "Next segment"))
        br.addWidget(QLabel("Speed"))
        br.addWidget(btn("−", ctl.speed_down, "Left arrow"))
        self._speed_lbl = QLabel(str(ctl.speed))
        self._speed_lbl.setFixedWidth(22); self._speed_lbl.setAlignment(Qt.AlignCenter)
        br.addWidget(self._speed_lbl)
        br.addWidget(btn("+", ctl.speed_up, "Right arrow"))
        bl.addLayout(br)

        lr = QHBoxLayout()
        self._top_ck = QCheckBox("Always on top (T)")
        self._top_ck.setFocusPolicy(Qt.NoFocus)
        self._top_ck.toggled.connect(self._on_top_toggled)
        lr.addWidget(self._top_ck); lr.addStretch(1)
        close = btn("Close (Esc)", self.request_close)
        close.setStyleSheet("QPushButton{background:#7f1d1d;color:#fecaca;}")
        lr.addWidget(close)
        bl.addLayout(lr)

        root.addWidget(self._bar)

    def _sync_bar(self) -> None:
        ctl = self.controller
        self._play_btn.setText(("Pause" if ctl.playing else "Start") + " (Space)")
        self._speed_lbl.setText(str(ctl.speed))
        pct = ctl.progress
        self._prog.setValue(pct); self._prog_lbl.setText(f"{pct}%")

    # ── Session surface API ───────────────────────────────────────────────────
    def apply_config(self, config: SessionConfig) -> None:
        self.config     = config
        self.text_align = _ALIGN[config.horizontal]
        self.segments   = segment(config.text)
        self.controller.load(self.segments, config.speed)
        self._set_top_ck(config.always_on_top)
        self._layout_key = ()
        self._relayout()
        log.info("Display configured: %d segments, speed %d, %s",
                 len(self.segments), config.speed, config.alignment)

    def set_bounds(self, bounds: Rect) -> None:
        self.setGeometry(*bounds)

    def set_always_on_top(self, value: bool) -> None:
        self.always_on_top = value
        visible = self.isVisible()
        self.setWindowFlag(Qt.WindowStaysOnTopHint, value)
        if visible:
            self.show()             # flag change hides the window
        self._set_top_ck(value)

    def focus(self) -> None:
        self.raise_(); self.activateWindow()

    def request_close(self) -> None:
        if self.session is not None:
            self.session.close_session()
        else:
            self.close()

    def _set_top_ck(self, value: bool) -> None:
        self._top_ck.blockSignals(True)
        self._top_ck.setChecked(value)
        self._top_ck.blockSignals(False)

    def _on_top_toggled(self, value: bool) -> None:
        if self.session is not None:
            self.session.set_always_on_top(DISPLAY, value)
        else:
            self.set_always_on_top(value)

    # ── Controller callbacks ──────────────────────────────────────────────────
    def _on_play_state(self, playing: bool) -> None:
        if playing:
            self._scroll_timer.start()
        else:
            self._scroll_timer.stop()

    def _on_change(self) -> None:
        self._sync_bar()
        self.update()

    def _frame(self) -> None:
        if not self.controller.tick(self._clock.elapsed() / 1000.0):
            self._scroll_timer.stop()

    # ── Font + metric cache ───────────────────────────────────────────────────
    def _ensure_font(self) -> None:
        key = (self.font_family, self.font_px, self.line_spacing_factor)
        if key == self._font_key:
            return
        f = QFont(self.font_family)
        f.setPixelSize(self.font_px)
        fm = QFontMetrics(f)
        self._f_font   = f
        self._f_fm     = fm
        self._f_asc    = fm.ascent()
        self._f_line_h = max(1, int(fm.height() * self.line_spacing_factor))
        self._font_key = key
        self._layout_key = ()

    # ── Layout cache ──────────────────────────────────────────────────────────
    def _viewport_height(self) -> int:
        return max(0, self.height() - self._bar.height())

    def _ensure_layout(self) -> None:
        self._ensure_font()
        W   = self.width()
        key = (id(self.segments), W, self._font_key, self.text_align)
        if key == self._layout_key:
            return

        fm       = self._f_fm
        lh       = self._f_line_h
        spacer_h = max(8, lh // 3)
        mw       = max(1, W - 2 * _MARGIN)

        blocks : list[list[str]] = []
        heights: list[int]       = []
        for seg in self.segments:
            if seg.is_spacer:
                blocks.append([]); heights.append(spacer_h)
                continue
            lines: list[str] = []
            for raw in seg.text.split('\n'):
                lines.extend(_wrap_words(raw, fm, mw))
            blocks.append(lines); heights.append(len(lines) * lh)

        extents, bottom  = build_geometry(heights, _PAD_TOP)
        self._l_blocks   = blocks
        self._l_extents  = extents
        self._l_content  = bottom + _PAD_BOTTOM
        self._layout_key = key

    def _relayout(self) -> None:
        if self.config is None:
            return
        self._ensure_layout()
        self.controller.recompute_geometry(
            self._l_content, self._viewport_height(), self._l_extents)

    # ── Paint ─────────────────────────────────────────────────────────────────
    def paintEvent(self, _):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.TextAntialiasing)
        W, H = self.width(), self._viewport_height()
        painter.fillRect(0, 0, W, H, _BG)

        if self.config is None:
            painter.setPen(_HINT)
            painter.setFont(QFont("Arial", 14))
            painter.drawText(0, 0, W, H, Qt.AlignCenter, "Waiting for config…")
            return

        self._ensure_layout()
        painter.setClipRect(0, 0, W, H)
        painter.setFont(self._f_font)
        fm, lh, asc = self._f_fm, self._f_line_h, self._f_asc
        start_y     = -int(self.controller.offset)
        current     = self.controller.current_segment_index()

        for i, (lines, ext) in enumerate(zip(self._l_blocks, self._l_extents)):
            top = start_y + int(ext.top)
            if top > H:
                break
            if top + ext.height < 0 or not lines:
                continue
            painter.setPen(_TEXT if i == current else _TEXT_DIM)
            for k, line in enumerate(lines):
                x = _line_x(fm.horizontalAdvance(line), self.text_align, W)
                painter.drawText(x, top + k * lh + asc, line)

        # Edge fades
        for y0, y1 in ((0, _FADE_H), (H, H - _FADE_H)):
            g = QLinearGradient(0, y0, 0, y1)
            g.setColorAt(0.0, _BG)
            g.setColorAt(1.0, QColor(_BG.red(), _BG.green(), _BG.blue(), 0))
            painter.fillRect(0, min(y0, y1), W, _FADE_H, QBrush(g))

    # ── Keyboard / mouse ──────────────────────────────────────────────────────
    def keyPressEvent(self, e):
        intent = intent_for_key(e.key())
        if intent is None:
            super().keyPressEvent(e); return
        if self.controller.dispatch(intent):
            return
        if intent is Intent.TOGGLE_ALWAYS_ON_TOP:
            self._on_top_toggled(not self.always_on_top)
        elif intent is Intent.CLOSE:
            self.request_close()

    def wheelEvent(self, e):
        self.controller.step_line(-1 if e.angleDelta().y() > 0 else 1)

    def mousePressEvent(self, e):
        if e.button() == Qt.LeftButton:
            self._drag_pos = e.globalPos() - self.pos()
    def mouseMoveEvent(self, e):
        if self._drag_pos and e.buttons() == Qt.LeftButton:
            self.move(e.globalPos() - self._drag_pos)
    def mouseReleaseEvent(self, _): self._drag_pos = None

    def resizeEvent(self, _):
        self._layout_key = ()       # width changed → re-wrap (font cache kept)
        self._relayout()
        self.update()

    def showEvent(self, _):
        self._relayout()
        self.setFocus()

    def closeEvent(self, event):
        self._scroll_timer.stop()
        self.controller.pause()
        if self.session is not None:
            self.session.display_closed()
        event.accept()
