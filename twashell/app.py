# twashell/app.py
import argparse
import sys
from pathlib import Path

from .models.launch_uri import LaunchUri
from .settings import load_settings, validate_settings
from .url_resolver import LaunchUrlResolver, default_launch_uri


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="twashell",
        description="Open a web app in a full-window browser shell.",
    )
    parser.add_argument("uri", nargs="?", help="launch uri, e.g. web+coffee://latte")
    parser.add_argument("--manifest", type=Path, help="path to twa-manifest.json")
    parser.add_argument("--check", action="store_true",
                        help="print protocol handlers and the resolved uri, then exit")
    return parser.parse_args(argv)


def print_check(resolver: LaunchUrlResolver, launch_uri: LaunchUri) -> None:
    print(f"launchUrl: {resolver.base_url}")
    if not resolver.handlers:
        print("protocol handlers: none")
    for scheme, fmt in resolver.handlers.items():
        print(f"  {scheme}:// -> {resolver.base_url}{fmt}")
    print(f"resolved: {launch_uri}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        settings = load_settings(args.manifest)
        validate_settings(settings)
        resolver = LaunchUrlResolver.from_settings(settings)
        launch_uri = resolver.launching_url(default_launch_uri(args.uri, settings["launchUrl"]))
    except ValueError as e:
        print(f"[TwaShell] {e}", file=sys.stderr)
        return 2

    if args.check:
        print_check(resolver, launch_uri)
        return 0

    from PySide6.QtWidgets import QApplication
    from .browser.factory import get_browser_backend
    from .delegation import create_delegation_service
    from .launcher_window import LauncherWindow

    print(f"[TwaShell] launching {launch_uri}")
    app = QApplication([sys.argv[0]])
    app.setApplicationName(settings["name"])
    app.setOrganizationDomain(settings["packageId"])
    backend = get_browser_backend((settings.get("browser") or {}).get("engine"))
    win = LauncherWindow(settings, launch_uri, backend, create_delegation_service(settings))
    if settings["display"] == "fullscreen":
        win.showFullScreen()
    else:
        win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
