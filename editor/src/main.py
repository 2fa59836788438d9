import sys
import os
import argparse
from dataclasses import replace

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5.QtWidgets import QMainWindow, QApplication, QActionGroup, QLabel

# Component imports
from components.story_canvas import StoryCanvas

# Model imports
from models.filters import FILTERS
from models.workout import WorkoutStats

# Service imports
from services.editor_session import EditorSession

# Utility imports
from utils.cli import add_workout_arguments, workout_stats_from_args
from utils.config import load_config, save_config
from utils.logger import configure_logging, set_main_window

# Action imports
from actions.file_actions import FileActions

from version import get_version


class RunSnapWindow(QMainWindow):
    """Story editor window: the canvas plus menus and a pace readout.

    Stats come from the command line; this window only places the photo,
    picks the filter and icon style, and exports.
    """

    def __init__(self, config, stats=None, output_path=None):
        super().__init__()
        self.setWindowTitle(f"RunSnap {get_version()}")
        self.resize(480, 900)

        self.config = config
        self.output_path = output_path
        self.jpeg_quality = config.get('jpeg_quality')

        self.session = EditorSession.from_config(config, stats=stats or WorkoutStats())
        self.session.add_listener(self._on_frame)

        # Initialize global logger with main window reference
        set_main_window(self)

        # Initialize action handlers (composition pattern)
        self.file_actions = FileActions(self)

        self.setup_ui()
        self.update_actions()

    # ============= UI Setup =============

    def setup_ui(self):
        self.canvas = StoryCanvas(self.session, self)
        self.setCentralWidget(self.canvas)

        self._create_menu_bar()

        self.status_left = QLabel("Open a photo to start")
        self.status_pace = QLabel()
        self.statusBar().addWidget(self.status_left, 1)
        self.statusBar().addPermanentWidget(self.status_pace)
        self._update_pace()

    def _create_menu_bar(self):
        menubar = self.menuBar()

        # File Menu
        file_menu = menubar.addMenu("&File")

        open_action = file_menu.addAction("&Open Photo...")
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self.file_actions.open_photo)

        self.export_action = file_menu.addAction("&Export Story...")
        self.export_action.setShortcut("Ctrl+S")
        self.export_action.triggered.connect(self.file_actions.export_story)

        file_menu.addSeparator()

        defaults_action = file_menu.addAction("Remember Filter and Icons as &Defaults")
        defaults_action.triggered.connect(self.save_defaults)

        file_menu.addSeparator()

        exit_action = file_menu.addAction("E&xit")
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)

        # View Menu
        view_menu = menubar.addMenu("&View")

        self.reset_action = view_menu.addAction("&Reset Position")
        self.reset_action.setShortcut("Ctrl+R")
        self.reset_action.triggered.connect(self.reset_position)

        self.icons_action = view_menu.addAction("Show &Icons")
        self.icons_action.setCheckable(True)
        self.icons_action.setChecked(self.session.stats.show_emojis)
        self.icons_action.toggled.connect(self.set_show_emojis)

        # Filter Menu
        filter_menu = menubar.addMenu("F&ilter")
        self.filter_action_group = QActionGroup(self)
        self.filter_actions = {}
        for spec in FILTERS:
            action = filter_menu.addAction(spec.name)
            action.setCheckable(True)
            action.setChecked(spec.id == self.session.stats.filter_id)
            action.triggered.connect(lambda checked, f=spec.id: self.set_filter(f))
            self.filter_action_group.addAction(action)
            self.filter_actions[spec.id] = action

    # ============= Actions =============

    def update_actions(self):
        has_photo = self.session.has_photo
        self.export_action.setEnabled(has_photo)
        self.reset_action.setEnabled(has_photo)

    def set_status(self, text):
        self.status_left.setText(text)

    def reset_position(self):
        self.session.reset_position()

    def set_filter(self, filter_id):
        self.session.set_stats(replace(self.session.stats, filter_id=filter_id))

    def set_show_emojis(self, show):
        self.session.set_stats(replace(self.session.stats, show_emojis=show))

    def save_defaults(self):
        self.config['default_filter'] = self.session.stats.filter_id
        self.config['show_emojis'] = self.session.stats.show_emojis
        path = save_config(self.config)
        self.set_status(f"Defaults saved to {path}")

    # ============= Session events =============

    def _on_frame(self, frame):
        self._update_pace()

    def _update_pace(self):
        self.status_pace.setText(f"Pace: {self.session.pace_text()}")


def main(argv=None):
    config = load_config()

    parser = argparse.ArgumentParser(description='RunSnap story editor.')
    parser.add_argument('photo', nargs='?', help='Photo to open on start.')
    parser.add_argument('-o', '--output', help='Export path used by File > Export.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging.')
    add_workout_arguments(parser, config)
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    app = QApplication(sys.argv[:1])
    window = RunSnapWindow(config, workout_stats_from_args(args), output_path=args.output)
    if args.photo:
        window.file_actions.open_photo_path(args.photo)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
