# twashell/orientation.py
from typing import Tuple

from PySide6.QtCore import Qt

DEFAULT_SIZE = (1024, 768)
PORTRAIT_SIZE = (540, 960)
LANDSCAPE_SIZE = (960, 540)

# Web manifest orientation -> screen orientation the window should prefer.
# default/any/natural are left to the screen.
_SCREEN_ORIENTATIONS = {
    "portrait": Qt.ScreenOrientation.PortraitOrientation,
    "portrait-primary": Qt.ScreenOrientation.PortraitOrientation,
    "portrait-secondary": Qt.ScreenOrientation.InvertedPortraitOrientation,
    "landscape": Qt.ScreenOrientation.LandscapeOrientation,
    "landscape-primary": Qt.ScreenOrientation.LandscapeOrientation,
    "landscape-secondary": Qt.ScreenOrientation.InvertedLandscapeOrientation,
}


def to_screen_orientation(orientation: str) -> Qt.ScreenOrientation:
    return _SCREEN_ORIENTATIONS.get(orientation, Qt.ScreenOrientation.PrimaryOrientation)


def window_size(orientation: str) -> Tuple[int, int]:
    if orientation.startswith("portrait"):
        return PORTRAIT_SIZE
    if orientation.startswith("landscape"):
        return LANDSCAPE_SIZE
    return DEFAULT_SIZE
