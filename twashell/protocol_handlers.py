# twashell/protocol_handlers.py
import re
import sys
import urllib.parse
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from .models.protocol_handler import ProtocolHandler

PLACEHOLDER = "%s"

# Schemes a web app may claim without the 'web+' prefix.
# 'mms', 'sms', 'smsto' and 'tel' are not supported.
ALLOWED_SCHEMES = {
    "bitcoin", "ftp", "ftps", "geo", "im", "irc", "ircs",
    "magnet", "mailto", "matrix", "news", "nntp", "openpgp4fpr",
    "sftp", "sip", "ssh", "urn", "webcal", "wtai", "xmpp",
}
EXTRA_SCHEME = re.compile(r"^web\+[a-z]+$")


class ProtocolHandlerConfigError(ValueError):
    pass


def _warn(message: str) -> None:
    print(f"[ProtocolHandlers] {message}", file=sys.stderr)


def normalize_protocol(protocol: str) -> Optional[str]:
    normalized = protocol.lower()
    if normalized in ALLOWED_SCHEMES:
        return normalized
    if EXTRA_SCHEME.match(normalized):
        return normalized
    _warn(f"Ignoring invalid protocol: {protocol}")
    return None


def normalize_url(url: str, base_url: str, scope_url: str) -> Optional[str]:
    """Return the format relative to ``base_url``, or None if it can't be used.

    Relative formats are kept as written since the resolver appends them to
    the launch URL. Absolute formats have to be https, inside the scope and
    under the launch URL, and are cut down to the part after it.
    """
    if url.count(PLACEHOLDER) != 1:
        _warn(f"Ignoring url without exactly one {PLACEHOLDER}: {url}")
        return None

    parts = urllib.parse.urlsplit(url)
    if not parts.scheme:
        return url

    if parts.scheme != "https":
        _warn(f"Ignoring absolute url with illegal scheme: {url}")
        return None

    scope = urllib.parse.urlsplit(scope_url)
    if (parts.scheme, parts.netloc) != (scope.scheme, scope.netloc):
        _warn(f"Ignoring absolute url with invalid origin: {url}")
        return None

    if not parts.path.startswith(scope.path):
        _warn(f"Ignoring absolute url not within manifest scope: {url}")
        return None

    # Formats are appended to the launch url, so an in-scope url elsewhere can't be expressed
    if not url.startswith(base_url):
        _warn(f"Ignoring absolute url not under launch url {base_url}: {url}")
        return None

    return url[len(base_url):]


def process_protocol_handlers(
    handlers: Iterable[ProtocolHandler],
    base_url: str,
    scope_url: str,
) -> List[ProtocolHandler]:
    processed: List[ProtocolHandler] = []
    for handler in handlers:
        if not handler.protocol or not handler.url:
            continue
        protocol = normalize_protocol(handler.protocol)
        url = normalize_url(handler.url, base_url, scope_url)
        if protocol is None or url is None:
            continue
        processed.append(ProtocolHandler(protocol=protocol, url=url))
    return processed


def _check_entry(protocol: str, fmt: str) -> None:
    if not protocol:
        raise ProtocolHandlerConfigError("protocol handler with an empty scheme")
    if ":" in protocol or "/" in protocol:
        raise ProtocolHandlerConfigError(
            f"protocol handler scheme must not include a delimiter: {protocol!r}")
    if protocol != protocol.lower():
        raise ProtocolHandlerConfigError(
            f"protocol handler scheme must be lowercase: {protocol!r}")
    count = fmt.count(PLACEHOLDER)
    if count != 1:
        raise ProtocolHandlerConfigError(
            f"format for {protocol!r} must contain exactly one {PLACEHOLDER}, "
            f"found {count}: {fmt!r}")


def build_handler_map(handlers: Iterable[ProtocolHandler]) -> Mapping[str, str]:
    """Build the read-only scheme -> format map. Later duplicates win."""
    registry = {}
    for handler in handlers:
        _check_entry(handler.protocol, handler.url)
        registry[handler.protocol] = handler.url
    return MappingProxyType(registry)


def expand_format(fmt: str, target: str) -> str:
    count = fmt.count(PLACEHOLDER)
    if count != 1:
        raise ProtocolHandlerConfigError(
            f"format must contain exactly one {PLACEHOLDER}, found {count}: {fmt!r}")
    return fmt.replace(PLACEHOLDER, target, 1)
