"""Unit tests for browser/qt_backend.py and browser/factory.py."""
import io
import os
import unittest
from contextlib import redirect_stdout

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QUrl
from PySide6.QtWebEngineCore import QWebEnginePage

from twashell.browser.factory import get_browser_backend
from twashell.browser.qt_backend import QTBackend
from twashell.delegation import create_delegation_service

GRANTED = QWebEnginePage.PermissionPolicy.PermissionGrantedByUser
DENIED = QWebEnginePage.PermissionPolicy.PermissionDeniedByUser


class FakePage:
  """Records what the backend answers to a permission request."""

  def __init__(self):
    self.answers = []

  def setFeaturePermission(self, url, feature, policy):
    self.answers.append((url.toString(), feature, policy))


class PermissionRequestTest(unittest.TestCase):

  def setUp(self):
    self.backend = QTBackend()
    self.page = FakePage()
    self._stdout = redirect_stdout(io.StringIO())
    self._stdout.__enter__()

  def tearDown(self):
    self._stdout.__exit__(None, None, None)

  def _request(self, delegation, url, feature):
    self.backend._on_permission_requested(self.page, delegation, QUrl(url), feature)
    return self.page.answers[-1][2]

  def _service(self, enable_location):
    return create_delegation_service(
        {"launchUrl": "https://example.com/app/", "enableLocation": enable_location})

  def test_geolocation_granted_for_app_origin(self):
    policy = self._request(self._service(True), "https://example.com/map",
                           QWebEnginePage.Feature.Geolocation)
    self.assertEqual(policy, GRANTED)
    self.assertEqual(self.page.answers[-1][0], "https://example.com/map")

  def test_geolocation_denied_for_other_origin(self):
    policy = self._request(self._service(True), "https://elsewhere.test/map",
                           QWebEnginePage.Feature.Geolocation)
    self.assertEqual(policy, DENIED)

  def test_geolocation_denied_when_location_disabled(self):
    policy = self._request(self._service(False), "https://example.com/map",
                           QWebEnginePage.Feature.Geolocation)
    self.assertEqual(policy, DENIED)

  def test_geolocation_denied_without_delegation(self):
    policy = self._request(None, "https://example.com/map", QWebEnginePage.Feature.Geolocation)
    self.assertEqual(policy, DENIED)

  def test_other_features_denied(self):
    for feature in (QWebEnginePage.Feature.Notifications,
                    QWebEnginePage.Feature.MediaAudioCapture):
      policy = self._request(self._service(True), "https://example.com/", feature)
      self.assertEqual(policy, DENIED, feature)


class FactoryTest(unittest.TestCase):

  def test_default_engine_is_qt(self):
    self.assertIsInstance(get_browser_backend(), QTBackend)
    self.assertIsInstance(get_browser_backend("QT"), QTBackend)

  def test_unknown_engine(self):
    with self.assertRaises(ValueError):
      get_browser_backend("cef")


if __name__ == "__main__":
  unittest.main()
