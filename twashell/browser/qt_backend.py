# twashell/browser/qt_backend.py
from PySide6.QtCore import QUrl
from PySide6.QtWidgets import QWidget, QVBoxLayout
from PySide6.QtWebEngineCore import QWebEnginePage
from PySide6.QtWebEngineWidgets import QWebEngineView
from .backend import BrowserBackend
from ..delegation import DelegationService

# Page features routed through the delegation service. Anything else the
# page asks for is denied.
DELEGATED_FEATURES = {
    QWebEnginePage.Feature.Geolocation: "geolocation",
}


class QTBackend(BrowserBackend):
    def create_view(self, parent: QWidget | None = None,
                    delegation: DelegationService | None = None) -> QWidget:
        container = QWidget(parent)
        layout = QVBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        view = QWebEngineView(container)
        layout.addWidget(view)
        container.setLayout(layout)
        container._view = view

        page = view.page()
        page.featurePermissionRequested.connect(
            lambda url, feature: self._on_permission_requested(page, delegation, url, feature))
        return container

    def load_url(self, view: QWidget, url: str) -> None:
        view._view.setUrl(QUrl(url))

    def _on_permission_requested(self, page, delegation, url, feature):
        command = DELEGATED_FEATURES.get(feature)
        granted = bool(command and delegation and delegation.handle_command(command, url.toString()))
        policy = (QWebEnginePage.PermissionPolicy.PermissionGrantedByUser if granted
                  else QWebEnginePage.PermissionPolicy.PermissionDeniedByUser)
        page.setFeaturePermission(url, feature, policy)
