"""Trainer main window: palette, 16-slot grid, notation row and transport."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QEasingCurve, QPoint, QPropertyAnimation, Qt
from PySide6.QtGui import QKeyEvent, QMouseEvent, QPixmap
from PySide6.QtWidgets import (
    QComboBox,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSlider,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from rhythm_trainer.audio.notes import pitch_choices
from rhythm_trainer.notation.glyphs import GLYPH_IMAGES, Glyph
from rhythm_trainer.playback.scheduler import PlaybackScheduler
from rhythm_trainer.timeline.models import BEAT_LABELS, DEFAULT_PALETTE, Color, PaletteEntry
from rhythm_trainer.trainer.input import InputAdapter
from rhythm_trainer.trainer.session import TrainerSession
from rhythm_trainer.trainer.settings import MAX_BPM, MIN_BPM, TrainerSettings
from rhythm_trainer.ui.qt_backends import QtClock, create_audio_output


GLYPH_SYMBOLS: dict[Glyph, str] = {
    Glyph.WHOLE: "♩",
    Glyph.QUARTER: "♪",
    Glyph.EIGHTH: "♬",
    Glyph.GROUP_REST: "\U0001d13d",
    Glyph.PAIR_REST: "\U0001d13e",
    Glyph.SINGLE_REST: "\U0001d13f",
    Glyph.BLANK: "",
}

_STYLE_COLORS: dict[str, str] = {
    "green-primary": "#43a047",
    "green-secondary": "#a5d6a7",
    "orange-primary": "#fb8c00",
    "orange-secondary": "#ffcc80",
    "purple": "#8e24aa",
}

_PALETTE_LABELS: dict[Color, str] = {
    Color.GREEN: "Green (4)",
    Color.ORANGE: "Orange (2)",
    Color.PURPLE: "Purple (1)",
}


class TrainerWindow(QMainWindow):
    def __init__(self, settings: TrainerSettings | None = None, image_dir: str | Path | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Rhythm Trainer")
        self.resize(1100, 360)

        self._image_dir = Path(image_dir) if image_dir else None
        self._session = TrainerSession(settings=settings)
        self._adapter = InputAdapter(self._session, self)
        self._audio = create_audio_output(parent=self)
        self._audio.set_master_volume(self._session.settings.master_volume)
        self._scheduler = PlaybackScheduler(
            store=self._session.store,
            audio=self._audio,
            surface=self,
            clock=QtClock(self),
            settings=self._session.settings,
        )

        total = self._session.store.total_steps
        self._slot_styles: list[str | None] = [None] * total
        self._slot_lit: list[bool] = [False] * total
        self._palette_buttons: dict[PaletteEntry, QPushButton] = {}
        self._slot_buttons: list[QPushButton] = []
        self._glyph_labels: list[QLabel] = []

        self._build_ui()
        self._adapter.refresh()

    # -- RenderSurface -------------------------------------------------

    def set_highlight(self, slot: int, on: bool) -> None:
        self._slot_lit[slot] = on
        self._restyle_slot(slot)

    def set_glyph(self, slot: int, glyph: Glyph) -> None:
        label = self._glyph_labels[slot]
        pixmap = self._glyph_pixmap(glyph)
        if pixmap is not None:
            label.setPixmap(pixmap)
        else:
            label.setText(GLYPH_SYMBOLS[glyph])

    def set_slot_style(self, slot: int, style: str | None) -> None:
        self._slot_styles[slot] = style
        self._restyle_slot(slot)

    def set_palette_selection(self, entry: PaletteEntry | None) -> None:
        for candidate, button in self._palette_buttons.items():
            button.setChecked(candidate == entry)

    def trigger_rejection_shake(self) -> None:
        origin = self._grid.pos()
        animation = QPropertyAnimation(self._grid, b"pos", self)
        animation.setDuration(300)
        animation.setEasingCurve(QEasingCurve.Type.Linear)
        for key, dx in ((0.0, 0), (0.2, -8), (0.4, 8), (0.6, -8), (0.8, 8), (1.0, 0)):
            animation.setKeyValueAt(key, origin + QPoint(dx, 0))
        animation.start(QPropertyAnimation.DeletionPolicy.DeleteWhenStopped)

    # -- layout --------------------------------------------------------

    def _build_ui(self) -> None:
        root = QWidget(self)
        layout = QVBoxLayout(root)

        palette_row = QHBoxLayout()
        for entry in DEFAULT_PALETTE:
            button = QPushButton(_PALETTE_LABELS[entry.color])
            button.setCheckable(True)
            button.setStyleSheet(f"QPushButton:checked {{ border: 3px solid #212121; }} QPushButton {{ background: {_STYLE_COLORS[_primary_style(entry.color)]}; color: white; padding: 6px; }}")
            button.clicked.connect(lambda _checked=False, e=entry: self._on_palette_clicked(e))
            self._palette_buttons[entry] = button
            palette_row.addWidget(button)
        palette_row.addStretch(1)
        layout.addLayout(palette_row)

        self._grid = QWidget(root)
        grid_layout = QGridLayout(self._grid)
        grid_layout.setHorizontalSpacing(2)
        for slot in range(self._session.store.total_steps):
            glyph_label = QLabel("", self._grid)
            glyph_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            glyph_label.setMinimumHeight(48)
            glyph_label.setStyleSheet("font-size: 28px;")
            self._glyph_labels.append(glyph_label)
            grid_layout.addWidget(glyph_label, 0, slot)

            button = QPushButton(BEAT_LABELS.get(slot, ""), self._grid)
            button.setMinimumSize(48, 48)
            button.clicked.connect(lambda _checked=False, s=slot: self._adapter.click_slot(s))
            self._slot_buttons.append(button)
            grid_layout.addWidget(button, 1, slot)
        layout.addWidget(self._grid)

        controls = QHBoxLayout()
        self.play_button = QPushButton("Play")
        self.play_button.clicked.connect(self._on_toggle_play)
        controls.addWidget(self.play_button)

        clear_button = QPushButton("Clear")
        clear_button.clicked.connect(self._on_clear)
        controls.addWidget(clear_button)

        controls.addWidget(QLabel("Tempo"))
        self.tempo_spin = QSpinBox()
        self.tempo_spin.setRange(MIN_BPM, MAX_BPM)
        self.tempo_spin.setValue(self._session.settings.bpm)
        self.tempo_spin.valueChanged.connect(self._on_tempo_changed)
        controls.addWidget(self.tempo_spin)

        controls.addWidget(QLabel("Sound"))
        self.sound_mode_combo = QComboBox()
        self.sound_mode_combo.addItem("Drum", "drum")
        self.sound_mode_combo.addItem("Pitch", "pitch")
        self.sound_mode_combo.setCurrentIndex(0 if self._session.settings.sound_mode == "drum" else 1)
        self.sound_mode_combo.currentIndexChanged.connect(self._on_sound_mode_changed)
        controls.addWidget(self.sound_mode_combo)

        self.pitch_combo = QComboBox()
        for note in pitch_choices():
            self.pitch_combo.addItem(note, note)
        pitch_index = self.pitch_combo.findData(self._session.settings.pitch_note)
        self.pitch_combo.setCurrentIndex(max(pitch_index, 0))
        self.pitch_combo.currentIndexChanged.connect(self._on_pitch_changed)
        self.pitch_combo.setVisible(self._session.settings.sound_mode == "pitch")
        controls.addWidget(self.pitch_combo)

        controls.addWidget(QLabel("Volume"))
        self.volume_slider = QSlider(Qt.Orientation.Horizontal)
        self.volume_slider.setRange(0, 100)
        self.volume_slider.setValue(int(round(self._session.settings.master_volume * 100)))
        self.volume_slider.valueChanged.connect(self._on_volume_changed)
        controls.addWidget(self.volume_slider)
        controls.addStretch(1)
        layout.addLayout(controls)

        self.setCentralWidget(root)

    def _restyle_slot(self, slot: int) -> None:
        style = self._slot_styles[slot]
        background = _STYLE_COLORS.get(style, "#eceff1") if style else "#eceff1"
        border = "3px solid #ffd54f" if self._slot_lit[slot] else "1px solid #90a4ae"
        self._slot_buttons[slot].setStyleSheet(f"QPushButton {{ background: {background}; border: {border}; }}")
        glyph_background = "#fff59d" if self._slot_lit[slot] else "transparent"
        self._glyph_labels[slot].setStyleSheet(f"font-size: 28px; background: {glyph_background};")

    def _glyph_pixmap(self, glyph: Glyph) -> QPixmap | None:
        if self._image_dir is None:
            return None
        path = self._image_dir / GLYPH_IMAGES[glyph]
        if not path.exists():
            return None
        return QPixmap(str(path)).scaledToHeight(48, Qt.TransformationMode.SmoothTransformation)

    # -- handlers ------------------------------------------------------

    def _on_palette_clicked(self, entry: PaletteEntry) -> None:
        self._adapter.select_palette_entry(entry)

    def _on_toggle_play(self) -> None:
        playing = self._scheduler.toggle()
        self.play_button.setText("Stop" if playing else "Play")

    def _on_clear(self) -> None:
        self._adapter.clear()

    def _on_tempo_changed(self, value: int) -> None:
        self._scheduler.retune(value)

    def _on_sound_mode_changed(self, _index: int | None = None) -> None:
        mode = str(self.sound_mode_combo.currentData())
        self._scheduler.set_sound_mode(mode)
        self.pitch_combo.setVisible(mode == "pitch")

    def _on_pitch_changed(self, _index: int | None = None) -> None:
        self._scheduler.set_pitch_note(str(self.pitch_combo.currentData()))

    def _on_volume_changed(self, value: int) -> None:
        self._session.update_settings(master_volume=value / 100.0)
        self._audio.set_master_volume(self._session.settings.master_volume)

    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        inside = self._grid.geometry().contains(self._grid.parentWidget().mapFrom(self, event.position().toPoint()))
        if not inside:
            self._adapter.click_outside()
        super().mousePressEvent(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:  # type: ignore[override]
        if event.key() == Qt.Key.Key_Escape:
            self._adapter.deselect()
            return
        super().keyPressEvent(event)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._scheduler.stop()
        super().closeEvent(event)


def _primary_style(color: Color) -> str:
    return "purple" if color is Color.PURPLE else f"{color.value}-primary"
