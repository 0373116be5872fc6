# twashell/launcher_window.py
from PySide6.QtWidgets import QMainWindow

from .browser.backend import BrowserBackend
from .delegation import DelegationService
from .models.launch_uri import LaunchUri
from .orientation import to_screen_orientation, window_size


class LauncherWindow(QMainWindow):
    def __init__(self, settings: dict, launch_uri: LaunchUri, backend: BrowserBackend,
                 delegation: DelegationService | None = None, parent=None):
        super().__init__(parent)
        self.settings = settings
        self.backend = backend
        self.setWindowTitle(settings["name"])

        orientation = settings["orientation"]
        self.screen_orientation = to_screen_orientation(orientation)
        self.resize(*window_size(orientation))

        # Browser view fills the whole window, no toolbar
        self.view = backend.create_view(self, delegation)
        self.setCentralWidget(self.view)
        self.backend.load_url(self.view, str(launch_uri))

    def showEvent(self, event):
        super().showEvent(event)
        # The native window only exists once shown
        handle = self.windowHandle()
        if handle is not None:
            handle.reportContentOrientationChange(self.screen_orientation)
