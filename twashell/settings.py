# twashell/settings.py
import copy
import json
import re
import urllib.parse
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULTS = {
    "packageId": "com.example.twa",
    "name": "TWA Shell",
    "launchUrl": "https://example.com/",
    "scopeUrl": None,  # None => directory of launchUrl
    "orientation": "default",
    "display": "standalone",
    "protocolHandlers": [],
    "enableLocation": False,
    "browser": {"engine": None},  # None => default_engine
}

ORIENTATIONS = [
    "default", "any", "natural", "landscape", "portrait",
    "portrait-primary", "portrait-secondary", "landscape-primary", "landscape-secondary",
]
DISPLAY_MODES = ("standalone", "fullscreen")

VALID_PACKAGE_ID_SEGMENT = re.compile(r"^[a-zA-Z][A-Za-z0-9_]*$")
JAVA_KEYWORDS = {
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char", "class", "const",
    "continue", "default", "do", "double", "else", "enum", "extends", "final", "finally", "float",
    "for", "goto", "if", "implements", "import", "instanceof", "int", "interface", "long", "native",
    "new", "package", "private", "protected", "public", "return", "short", "static", "strictfp",
    "super", "switch", "synchronized", "this", "throw", "throws", "transient", "try", "void",
    "volatile", "while", "true", "false", "null", "_",
}


class SettingsError(ValueError):
    pass


def _config_path() -> Path:
    base = Path.home() / ".config" / "twashell"
    base.mkdir(parents=True, exist_ok=True)
    return base / "twa-manifest.json"


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the manifest, filling in defaults for missing keys.

    Without an explicit path the per-user file is used and created on first
    run. An explicit path has to exist.
    """
    settings = copy.deepcopy(DEFAULTS)
    if path is None:
        p = _config_path()
        if not p.exists():
            p.write_text(json.dumps(DEFAULTS, indent=2))
            return settings
    else:
        p = Path(path)
        if not p.exists():
            raise SettingsError(f"manifest not found: {p}")
    try:
        data = json.loads(p.read_text())
    except json.JSONDecodeError as e:
        raise SettingsError(f"{p} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise SettingsError(f"{p} must contain a JSON object")
    settings.update(data)
    return settings


def save_settings(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    p = Path(path) if path is not None else _config_path()
    p.write_text(json.dumps(data, indent=2))


def as_orientation(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    return value if value in ORIENTATIONS else None


def validate_package_id(value: str) -> Optional[str]:
    """Return an error message for an unusable package id, or None."""
    if not value:
        return "packageId cannot be empty"
    parts = value.split(".")
    if len(parts) < 2:
        return 'packageId must have at least 2 sections separated by "."'
    for part in parts:
        if part in JAVA_KEYWORDS:
            return (f'Invalid packageId section: "{part}". {part} is a Java keyword and '
                    'cannot be used as a package section. Consider adding an "_" before it.')
        if not VALID_PACKAGE_ID_SEGMENT.match(part):
            return (f'Invalid packageId section: "{part}". Only alphanumeric characters and '
                    'underscore [a-zA-Z0-9_] are allowed in packageId sections. Each section '
                    'must start with a letter [a-zA-Z]')
    return None


def scope_url(settings: Dict[str, Any]) -> str:
    if settings.get("scopeUrl"):
        return settings["scopeUrl"]
    return urllib.parse.urljoin(settings["launchUrl"], ".")


def _require_str(data: Dict[str, Any], key: str, allow_none: bool = False) -> None:
    value = data.get(key)
    if value is None and allow_none:
        return
    if not isinstance(value, str):
        raise SettingsError(f"{key} must be a string: {value!r}")


def validate_settings(data: Dict[str, Any]) -> None:
    for key in ("packageId", "name", "launchUrl"):
        _require_str(data, key)
    _require_str(data, "scopeUrl", allow_none=True)

    error = validate_package_id(data["packageId"])
    if error:
        raise SettingsError(error)

    launch_url = data["launchUrl"]
    parts = urllib.parse.urlsplit(launch_url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise SettingsError(f"launchUrl must be an absolute http(s) url: {launch_url!r}")

    if not isinstance(data.get("orientation"), str) or as_orientation(data["orientation"]) is None:
        raise SettingsError(
            f"orientation must be one of {', '.join(ORIENTATIONS)}: {data.get('orientation')!r}")

    if not isinstance(data.get("display"), str) or data["display"] not in DISPLAY_MODES:
        raise SettingsError(
            f"display must be one of {', '.join(DISPLAY_MODES)}: {data.get('display')!r}")

    browser = data.get("browser")
    if browser is not None:
        if not isinstance(browser, dict):
            raise SettingsError(f"browser must be an object: {browser!r}")
        _require_str(browser, "engine", allow_none=True)

    handlers = data.get("protocolHandlers")
    if not isinstance(handlers, list) or not all(isinstance(h, dict) for h in handlers):
        raise SettingsError("protocolHandlers must be a list of {protocol, url} objects")
    for handler in handlers:
        for key in ("protocol", "url"):
            value = handler.get(key)
            if value is not None and not isinstance(value, str):
                raise SettingsError(f"protocolHandlers {key} must be a string: {value!r}")
