# twashell/delegation.py
import urllib.parse
from abc import ABC, abstractmethod
from typing import Any, Dict


def origin_of(url: str) -> str:
    parts = urllib.parse.urlsplit(url)
    if not parts.scheme or not parts.netloc:
        return ""
    return f"{parts.scheme.lower()}://{parts.netloc.lower()}"


class ExtraCommandHandler(ABC):
    command: str = ""

    @abstractmethod
    def handle(self, origin: str) -> bool:
        raise NotImplementedError


class LocationDelegationHandler(ExtraCommandHandler):
    """Grants geolocation to pages of the web app itself."""

    command = "geolocation"

    def __init__(self, trusted_origin: str):
        self.trusted_origin = trusted_origin

    def handle(self, origin: str) -> bool:
        return bool(origin) and origin == self.trusted_origin


class DelegationService:
    """Answers permission requests coming from the hosted web app.

    Commands nobody registered a handler for are refused.
    """

    def __init__(self):
        self._handlers: Dict[str, ExtraCommandHandler] = {}

    def register_extra_command_handler(self, handler: ExtraCommandHandler) -> None:
        self._handlers[handler.command] = handler

    def has_handler(self, command: str) -> bool:
        return command in self._handlers

    def handle_command(self, command: str, url: str) -> bool:
        handler = self._handlers.get(command)
        if handler is None:
            return False
        granted = handler.handle(origin_of(url))
        print(f"[DelegationService] {command} for {url}: {'granted' if granted else 'denied'}")
        return granted


def create_delegation_service(settings: Dict[str, Any]) -> DelegationService:
    trusted = origin_of(settings["launchUrl"])
    service = DelegationService()
    if settings.get("enableLocation"):
        service.register_extra_command_handler(LocationDelegationHandler(trusted))
    return service
