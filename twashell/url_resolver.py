# twashell/url_resolver.py
import sys
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .models.launch_uri import LaunchUri
from .models.protocol_handler import ProtocolHandler
from .protocol_handlers import build_handler_map, expand_format, process_protocol_handlers
from .settings import scope_url


def resolve(uri: LaunchUri, handlers: Mapping[str, str], base_url: str) -> LaunchUri:
    """Rewrite a custom-scheme deep link into the web app's URL space.

    URIs whose scheme has no handler come back unchanged. For a mapped
    scheme, ``<scheme>://`` is stripped off the front and the rest is
    substituted into the handler's format, which is appended to ``base_url``.

    Precondition: a mapped URI starts with ``<scheme>://``. Ones that don't
    (``mailto:someone``) are passed through with a warning instead of being
    turned into a broken URL.
    """
    scheme = uri.scheme
    if not scheme or scheme not in handlers:
        return uri

    text = str(uri)
    prefix = f"{scheme}://"
    if not text.startswith(prefix):
        print(f"[LaunchUrlResolver] {text!r} does not start with {prefix!r}, "
              "loading it unchanged", file=sys.stderr)
        return uri

    target = text[len(prefix):]
    expanded = expand_format(handlers[scheme], target)
    return LaunchUri.parse(base_url + expanded)


def default_launch_uri(data: Optional[str], launch_url: str) -> LaunchUri:
    """The URI the shell would open before any rewriting."""
    if data and data.strip():
        return LaunchUri.parse(data)
    return LaunchUri.parse(launch_url)


class LaunchUrlProvider(ABC):
    @abstractmethod
    def launching_url(self, default_uri: LaunchUri) -> LaunchUri:
        raise NotImplementedError


class LaunchUrlResolver(LaunchUrlProvider):
    def __init__(self, handlers: Mapping[str, str], base_url: str):
        self.handlers = MappingProxyType(dict(handlers))
        self.base_url = base_url

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> "LaunchUrlResolver":
        base_url = settings["launchUrl"]
        handlers = [ProtocolHandler.from_dict(h) for h in settings.get("protocolHandlers") or []]
        processed = process_protocol_handlers(handlers, base_url, scope_url(settings))
        return cls(build_handler_map(processed), base_url)

    def launching_url(self, default_uri: LaunchUri) -> LaunchUri:
        return resolve(default_uri, self.handlers, self.base_url)
