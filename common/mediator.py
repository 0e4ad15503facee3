"""Minimal command mediator: one handler per command type."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Any]


class Mediator:
    """Route a command object to the handler registered for its exact type."""

    def __init__(self) -> None:
        self._handlers: Dict[type, Handler] = {}

    def register(self, command_type: type, handler: Handler) -> None:
        if command_type in self._handlers:
            raise ValueError(f"Handler already registered for {command_type.__name__}")
        self._handlers[command_type] = handler

    def send(self, command: Any) -> Any:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise LookupError(f"No handler registered for {type(command).__name__}")
        logger.debug("Dispatching %s", type(command).__name__)
        return handler(command)
