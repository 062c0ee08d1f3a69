"""
Counter View.

Widgets only: every label and button state comes from a binding to the
CounterPresenter, and every click is forwarded to one of its commands.
"""
from typing import Callable, List, Optional
from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout, QLabel, QMainWindow, QPushButton, QVBoxLayout, QWidget
)
from loguru import logger

from counter_mvvm.core.config import WindowSettings
from counter_mvvm.ui.mvvm.binding import bind, bind_command
from counter_mvvm.ui.viewmodels.counter_presenter import CounterPresenter


class CounterView(QWidget):
    """
    Counter screen bound to a CounterPresenter.
    """

    def __init__(self, presenter: CounterPresenter, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.presenter = presenter
        self._disposers: List[Callable[[], None]] = []

        self._setup_ui()
        self._setup_bindings()

    def _setup_ui(self):
        """Build the UI."""
        layout = QVBoxLayout(self)

        self.title_label = QLabel("Counter")
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)

        self.value_label = QLabel()
        self.value_label.setAlignment(Qt.AlignCenter)
        self.value_label.setStyleSheet("font-size: 48px; font-weight: bold; padding: 10px;")
        layout.addWidget(self.value_label)

        self.range_label = QLabel()
        self.range_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.range_label)

        buttons = QHBoxLayout()
        self.decrement_button = QPushButton("- Decrement")
        self.reset_button = QPushButton("Reset")
        self.increment_button = QPushButton("+ Increment")
        buttons.addWidget(self.decrement_button)
        buttons.addWidget(self.reset_button)
        buttons.addWidget(self.increment_button)
        layout.addLayout(buttons)

        self.status_label = QLabel()
        self.status_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.status_label)

        layout.addStretch()

    def _setup_bindings(self):
        """Set up data bindings between VM and View."""
        vm = self.presenter

        # Bounds never change after construction
        self.range_label.setText(f"Range: {vm.min_value} to {vm.max_value}")

        self._disposers += [
            bind(vm.display_value, self.value_label, "text", converter=str),
            bind(vm.status_message, self.status_label, "text"),
            bind(vm.can_increment, self.increment_button, "enabled"),
            bind(vm.can_decrement, self.decrement_button, "enabled"),
            bind_command(vm, "increment", self.increment_button),
            bind_command(vm, "decrement", self.decrement_button),
            bind_command(vm, "reset", self.reset_button),
        ]

    def dispose(self) -> None:
        """Detach all bindings. Safe to call more than once."""
        disposers, self._disposers = self._disposers, []
        for dispose in disposers:
            dispose()
        if disposers:
            logger.debug(f"CounterView disposed {len(disposers)} bindings")


class CounterWindow(QMainWindow):
    """
    Top-level window hosting a CounterView.
    """

    def __init__(self, presenter: CounterPresenter, settings: Optional[WindowSettings] = None):
        super().__init__()
        settings = settings or WindowSettings()

        self.setWindowTitle(settings.title)
        if settings.resizable:
            self.resize(settings.width, settings.height)
        else:
            self.setFixedSize(settings.width, settings.height)

        self.view = CounterView(presenter)
        self.setCentralWidget(self.view)

    def closeEvent(self, event):
        self.view.dispose()
        super().closeEvent(event)
