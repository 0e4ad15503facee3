from __future__ import annotations

from dataclasses import dataclass

import pytest

from common.mediator import Mediator


@dataclass(frozen=True)
class Ping:
    value: int


@dataclass(frozen=True)
class Pong:
    value: int


def test_send_dispatches_to_registered_handler():
    mediator = Mediator()
    mediator.register(Ping, lambda command: command.value + 1)

    assert mediator.send(Ping(41)) == 42


def test_unregistered_command_raises_lookup_error():
    mediator = Mediator()
    mediator.register(Ping, lambda command: None)

    with pytest.raises(LookupError):
        mediator.send(Pong(1))


def test_duplicate_registration_is_rejected():
    mediator = Mediator()
    mediator.register(Ping, lambda command: None)

    with pytest.raises(ValueError):
        mediator.register(Ping, lambda command: None)
