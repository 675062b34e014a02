"""Qt desktop interface: a Cleanup menu over the open deck, with an OK dialog per result."""

# region imports
from __future__ import annotations

import logging
import sys
from pathlib import Path

from PySide6.QtCore import QObject, QSettings, Signal
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QApplication,
    QFileDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QVBoxLayout,
    QWidget,
)

from deckscrub.commands import CleanupSummary, build_command_table, run_command
from deckscrub.document import PptxDocumentSource
from deckscrub.internals.config.define_config import CommandId
from deckscrub.internals.run_context import start_cleanup_run
from deckscrub.processing.comments import PptxCommentStore

# endregion

log = logging.getLogger("deckscrub")

# Remembers the last folder used in the open/save dialogs between sessions.
APP_SETTINGS = QSettings("deckscrub", "deckscrub")


# region MainWindow
class MainWindow(QMainWindow):
    """Main Qt Application Window."""

    def __init__(self) -> None:
        super().__init__()

        self.setWindowTitle("deckscrub")

        self.source = PptxDocumentSource()
        self.presenter = CleanupPresenter(self, self.source)

        self._create_widgets()
        self._create_layout()
        self._create_menus()
        self.set_document_open(False)

    # region _create_widgets
    def _create_widgets(self) -> None:
        self.document_label = QLabel("No presentation open. Use File > Open.")
        self.log_viewer = LogViewer()

    # endregion

    # region _create_layout
    def _create_layout(self) -> None:
        layout = QVBoxLayout()
        layout.addWidget(self.document_label)
        layout.addWidget(self.log_viewer)

        central = QWidget()
        central.setLayout(layout)
        self.setCentralWidget(central)

    # endregion

    # region _create_menus
    def _create_menus(self) -> None:
        """File menu for open/save; Cleanup menu with one action per command."""
        file_menu = self.menuBar().addMenu("&File")

        self.open_action = QAction("&Open...", self)
        self.open_action.triggered.connect(self.presenter.on_open_click)
        file_menu.addAction(self.open_action)

        self.save_action = QAction("&Save", self)
        self.save_action.triggered.connect(self.presenter.on_save_click)
        file_menu.addAction(self.save_action)

        self.save_as_action = QAction("Save &As...", self)
        self.save_as_action.triggered.connect(self.presenter.on_save_as_click)
        file_menu.addAction(self.save_as_action)

        self.cleanup_menu = self.menuBar().addMenu("&Cleanup")
        self.cleanup_actions: dict[CommandId, QAction] = {}
        for command in self.presenter.table.values():
            action = QAction(command.label, self)
            # Bind command_id now; a bare lambda would capture the loop variable.
            action.triggered.connect(
                lambda _checked=False, cid=command.command_id: self.presenter.on_command(
                    cid
                )
            )
            self.cleanup_menu.addAction(action)
            self.cleanup_actions[command.command_id] = action

    # endregion

    # region set_document_open
    def set_document_open(self, is_open: bool, name: str = "") -> None:
        """The Cleanup menu and Save actions only make sense with a deck open."""
        self.cleanup_menu.setEnabled(is_open)
        for action in self.cleanup_actions.values():
            action.setEnabled(is_open)
        self.save_action.setEnabled(is_open)
        self.save_as_action.setEnabled(is_open)
        if is_open:
            self.document_label.setText(f"Open: {name}")

    # endregion


# endregion


# region CleanupPresenter
class CleanupPresenter(QObject):
    """Handles menu clicks: open/save the deck and run cleanup commands against it."""

    def __init__(self, view: MainWindow, source: PptxDocumentSource) -> None:
        super().__init__()
        self.view = view
        self.source = source
        self.table = build_command_table(PptxCommentStore(source))

    # region open_document
    def open_document(self, path: Path | str) -> bool:
        """Open a deck as the active document. Returns False (after telling the user) on failure."""
        try:
            document = self.source.open(path)
        except (OSError, ValueError) as e:
            log.error(f"Could not open {path}: {e}")
            QMessageBox.critical(self.view, "Could not open presentation", str(e))
            return False

        self.view.set_document_open(True, document.path.name)
        return True

    # endregion

    # region on_open_click
    def on_open_click(self) -> None:
        start_dir = str(APP_SETTINGS.value("last_open_dir", ""))
        path, _ = QFileDialog.getOpenFileName(
            self.view, "Open presentation", start_dir, "PowerPoint (*.pptx)"
        )
        if not path:
            return  # User cancelled

        APP_SETTINGS.setValue("last_open_dir", str(Path(path).parent))
        self.open_document(path)

    # endregion

    # region on_save_click / on_save_as_click
    def on_save_click(self) -> None:
        self._save(None)

    def on_save_as_click(self) -> None:
        document = self.source.get_active_document()
        path, _ = QFileDialog.getSaveFileName(
            self.view, "Save presentation as", str(document.path), "PowerPoint (*.pptx)"
        )
        if not path:
            return
        self._save(Path(path))

    def _save(self, path: Path | None) -> None:
        document = self.source.get_active_document()
        try:
            saved_to = self.source.save(document, path)
        except OSError as e:
            QMessageBox.critical(self.view, "Save failed", str(e))
            return
        log.info(f"Saved {saved_to}")

    # endregion

    # region on_command
    def on_command(self, command_id: CommandId) -> CleanupSummary | None:
        """Run one cleanup command and show its summary in an OK dialog."""
        command = self.table[command_id]
        start_cleanup_run()

        try:
            document = self.source.get_active_document()
            summary = run_command(self.table, command_id, document)
        except Exception as e:
            log.error(f"{command.label} failed: {e}")
            error_msg = str(e)
            if len(error_msg) > 300:
                error_msg = error_msg[:300] + "...\n\n(See log for full details)"
            QMessageBox.critical(self.view, command.label, error_msg)
            return None

        QMessageBox.information(self.view, command.label, summary.message)
        return summary

    # endregion


# endregion


# region LogViewer
class LogViewer(QWidget):
    """Read-only text pane mirroring the deckscrub log."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.text_widget = QPlainTextEdit()
        self.text_widget.setReadOnly(True)

        layout = QVBoxLayout()
        layout.addWidget(self.text_widget)
        self.setLayout(layout)

        self._setup_log_handler()

    def _setup_log_handler(self) -> None:
        """Connect the text widget to the logging system via our custom handler."""
        handler = QTextEditHandler(self.text_widget)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
            )
        )
        handler.setLevel(logging.INFO)
        logging.getLogger("deckscrub").addHandler(handler)


# endregion


# region LogSignaller / QTextEditHandler
class LogSignaller(QObject):
    """Emits log lines as a signal so they reach the widget on the GUI thread."""

    log_message = Signal(str)


class QTextEditHandler(logging.Handler):
    """Logging handler that writes to a QPlainTextEdit widget."""

    def __init__(self, text_widget: QPlainTextEdit) -> None:
        super().__init__()
        self.text_widget = text_widget
        self.signaller = LogSignaller()
        self.signaller.log_message.connect(self.text_widget.appendPlainText)

    def emit(self, record: logging.LogRecord) -> None:
        self.signaller.log_message.emit(self.format(record))


# endregion


# region run
def run() -> None:
    """Run GUI interface. Assumes startup.initialize_application() already called."""
    log.info("Initializing Qt UI")

    app = QApplication.instance() or QApplication(sys.argv)

    window = MainWindow()
    window.show()

    # Open a deck passed on the command line, e.g. `deckscrub talk.pptx`
    pptx_args = [a for a in sys.argv[1:] if a.lower().endswith(".pptx")]
    if pptx_args:
        window.presenter.open_document(pptx_args[0])

    sys.exit(app.exec())


# endregion
