"""Configuration panel: script editor, file load, speed, window size and placement."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QTextEdit,
    QPushButton, QSlider, QCheckBox, QGroupBox, QFileDialog, QMessageBox,
    QButtonGroup,
)
from PyQt5.QtCore  import Qt, QTimer
from PyQt5.QtGui   import QFont

from teleprompter.config    import ALIGNMENT_GRID, HEIGHT_CLASSES, SessionConfig
from teleprompter.files     import file_filter, read_text_file
from teleprompter.intents   import CONTROLS_HELP
from teleprompter.scroll    import DEFAULT_SPEED, SPEED_MAX, SPEED_MIN
from teleprompter.segmenter import segment, text_segments
from teleprompter.session   import SessionManager

log = logging.getLogger(__name__)

# Arrow glyph shown on each alignment button
_ALIGN_GLYPHS = {
    "top-left": "↖", "top": "↑", "top-right": "↗",
    "left": "←", "middle": "•", "right": "→",
    "bottom-left": "↙", "bottom": "↓", "bottom-right": "↘",
}


# ══════════════════════════════════════════════════════════════════════════════
#  Configuration Panel
# ══════════════════════════════════════════════════════════════════════════════
class ConfigPanel(QWidget):

    def __init__(self):
        super().__init__()
        self.session : SessionManager | None = None
        self.loaded_file : str | None = None

        self.setWindowTitle("TelePrompter — Setup")
        self.setMinimumWidth(520)

        # Debounce timer: wait 280 ms after last keystroke before re-counting
        self._debounce = QTimer(self)
        self._debounce.setSingleShot(True)
        self._debounce.setInterval(280)
        self._debounce.timeout.connect(self._refresh_summary)

        self._build_ui()
        self._refresh_summary()

    # ── UI ────────────────────────────────────────────────────────────────────
    def _build_ui(self):
        root = QVBoxLayout(self)
        root.setSpacing(8); root.setContentsMargins(14, 14, 14, 14)

        title = QLabel("TelePrompter")
        title.setFont(QFont("Arial", 16, QFont.Bold))
        title.setAlignment(Qt.AlignCenter); root.addWidget(title)

        # Script
        sg = QGroupBox("Script"); sl = QVBoxLayout(sg)
        self._editor = QTextEdit()
        self._editor.setPlaceholderText("Type your script or load from file...")
        self._editor.setAcceptRichText(False)
        self._editor.setMinimumHeight(160)
        self._editor.textChanged.connect(self._debounce.start)
        sl.addWidget(self._editor)

        fr = QHBoxLayout()
        load = QPushButton("📂  Load .txt"); load.clicked.connect(self._load_file)
        fr.addWidget(load)
        self._file_lbl = QLabel("")
        self._file_lbl.setStyleSheet("color:#888;font-size:11px;")
        fr.addWidget(self._file_lbl, 1)
        self._count_lbl = QLabel("")
        self._count_lbl.setStyleSheet("color:#888;font-size:11px;")
        fr.addWidget(self._count_lbl)
        sl.addLayout(fr)
        root.addWidget(sg)

        # Speed
        pg = QGroupBox("Playback"); pl = QGridLayout(pg); pl.setColumnStretch(1, 1)
        pl.addWidget(QLabel("Speed:"), 0, 0)
        self._speed_sl = QSlider(Qt.Horizontal)
        self._speed_sl.setRange(SPEED_MIN, SPEED_MAX)
        self._speed_sl.setValue(DEFAULT_SPEED)
        self._speed_lbl = QLabel(str(DEFAULT_SPEED)); self._speed_lbl.setFixedWidth(24)
        self._speed_sl.valueChanged.connect(lambda v: self._speed_lbl.setText(str(v)))
        pl.addWidget(self._speed_sl, 0, 1); pl.addWidget(self._speed_lbl, 0, 2)
        root.addWidget(pg)

        # Window
        wg = QGroupBox("Teleprompter Window"); wl = QHBoxLayout(wg)

        hv = QVBoxLayout(); hv.addWidget(QLabel("Height:"))
        self._height_grp = QButtonGroup(self)
        for name in HEIGHT_CLASSES:
            b = QPushButton(name.capitalize()); b.setCheckable(True)
            b.setProperty("value", name)
            b.setChecked(name == "medium")
            self._height_grp.addButton(b); hv.addWidget(b)
        hv.addStretch(1); wl.addLayout(hv)

        av = QVBoxLayout(); av.addWidget(QLabel("Position:"))
        grid = QGridLayout(); grid.setSpacing(4)
        self._align_grp = QButtonGroup(self)
        for r, row in enumerate(ALIGNMENT_GRID):
            for c, name in enumerate(row):
                b = QPushButton(_ALIGN_GLYPHS[name]); b.setCheckable(True)
                b.setFixedSize(36, 30); b.setToolTip(name.replace("-", " "))
                b.setProperty("value", name)
                b.setChecked(name == "top")
                self._align_grp.addButton(b); grid.addWidget(b, r, c)
        av.addLayout(grid); av.addStretch(1); wl.addLayout(av)

        self._top_ck = QCheckBox("Show teleprompter window always on top")
        ov = QVBoxLayout(); ov.addWidget(self._top_ck); ov.addStretch(1)
        wl.addLayout(ov, 1)
        root.addWidget(wg)

        # Controls help
        hg = QGroupBox("Controls"); hl = QVBoxLayout(hg)
        help_lbl = QLabel(CONTROLS_HELP)
        help_lbl.setStyleSheet("color:#aaa;font-size:11px;")
        hl.addWidget(help_lbl); root.addWidget(hg)

        self._start_btn = QPushButton("▶  Start Teleprompter")
        self._start_btn.setMinimumHeight(44)
        self._start_btn.setStyleSheet(
            "QPushButton{background:#0284c7;color:white;border-radius:6px;"
            "font-size:14px;font-weight:bold;}"
            "QPushButton:disabled{background:#334155;color:#64748b;}")
        self._start_btn.clicked.connect(self.start)
        root.addWidget(self._start_btn)

    # ── Script helpers ────────────────────────────────────────────────────────
    @property
    def text(self) -> str:
        return self._editor.toPlainText()

    def set_text(self, text: str, file_name: str | None = None) -> None:
        self._editor.setPlainText(text)
        self.loaded_file = file_name
        self._file_lbl.setText(f"Loaded: {file_name}" if file_name else "")
        self._refresh_summary()

    def load_path(self, path: str) -> bool:
        text, err = read_text_file(path)
        if err:
            QMessageBox.warning(self, "Load Error", err)
            return False
        self.set_text(text, Path(path).name)
        return True

    def _load_file(self):
        path, _ = QFileDialog.getOpenFileName(self, "Load Script", "", file_filter())
        if not path:
            return                  # cancelled: keep current text
        self.load_path(path)

    def _refresh_summary(self):
        text = self.text.strip()
        self._start_btn.setEnabled(bool(text))
        if not text:
            self._count_lbl.setText(""); return
        n = len(text_segments(segment(text)))
        self._count_lbl.setText(f"{n} segment{'s' if n != 1 else ''}")

    # ── Session ───────────────────────────────────────────────────────────────
    def config(self) -> SessionConfig:
        return SessionConfig.from_payload({
            "text":          self.text.strip(),
            "speed":         self._speed_sl.value(),
            "alignment":     self._align_grp.checkedButton().property("value"),
            "window_height": self._height_grp.checkedButton().property("value"),
            "always_on_top": self._top_ck.isChecked(),
        })

    def start(self):
        if self.session is None:
            return
        self._debounce.stop()
        if not self.session.open_session(self.config()):
            self._refresh_summary()

    # ── Session surface API ───────────────────────────────────────────────────
    def set_always_on_top(self, value: bool) -> None:
        visible = self.isVisible()
        self.setWindowFlag(Qt.WindowStaysOnTopHint, value)
        if visible:
            self.show()

    def keyPressEvent(self, e):
        if e.key() in (Qt.Key_Return, Qt.Key_Enter) and e.modifiers() & Qt.ControlModifier:
            self.start(); return
        super().keyPressEvent(e)

    def closeEvent(self, event):
        self._debounce.stop()
        if self.session is not None and self.session.is_open:
            self.session.close_session()
        log.debug("Panel closed")
        event.accept()
