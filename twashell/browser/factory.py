# twashell/browser/factory.py
from .backend import BrowserBackend

DEFAULT_ENGINE = "qt"

def get_browser_backend(engine: str | None = None) -> BrowserBackend:
    if engine is None:
        engine = DEFAULT_ENGINE
    engine = engine.lower()
    # QtWebEngine is the only engine the shell hosts
    if engine == "qt":
        from .qt_backend import QTBackend
        return QTBackend()
    raise ValueError(f"Unknown browser engine: {engine}")
