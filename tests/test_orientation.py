"""Unit tests for orientation.py."""
import unittest

from PySide6.QtCore import Qt

from twashell.orientation import (
    DEFAULT_SIZE, LANDSCAPE_SIZE, PORTRAIT_SIZE, to_screen_orientation, window_size)
from twashell.settings import ORIENTATIONS, as_orientation


class ScreenOrientationTest(unittest.TestCase):

  def test_mapping(self):
    expected = {
        "default": Qt.ScreenOrientation.PrimaryOrientation,
        "any": Qt.ScreenOrientation.PrimaryOrientation,
        "natural": Qt.ScreenOrientation.PrimaryOrientation,
        "portrait": Qt.ScreenOrientation.PortraitOrientation,
        "portrait-primary": Qt.ScreenOrientation.PortraitOrientation,
        "portrait-secondary": Qt.ScreenOrientation.InvertedPortraitOrientation,
        "landscape": Qt.ScreenOrientation.LandscapeOrientation,
        "landscape-primary": Qt.ScreenOrientation.LandscapeOrientation,
        "landscape-secondary": Qt.ScreenOrientation.InvertedLandscapeOrientation,
    }
    self.assertEqual(set(expected), set(ORIENTATIONS))
    for name, orientation in expected.items():
      self.assertEqual(to_screen_orientation(name), orientation, name)

  def test_window_size(self):
    self.assertEqual(window_size("portrait-secondary"), PORTRAIT_SIZE)
    self.assertEqual(window_size("landscape"), LANDSCAPE_SIZE)
    self.assertEqual(window_size("natural"), DEFAULT_SIZE)

  def test_as_orientation(self):
    self.assertEqual(as_orientation("portrait"), "portrait")
    self.assertIsNone(as_orientation("sideways"))
    self.assertIsNone(as_orientation(None))


if __name__ == "__main__":
  unittest.main()
