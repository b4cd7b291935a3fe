"""Pytest fixtures and scripted doubles for the gateway tests."""

from __future__ import annotations

from typing import Sequence

import pytest

from core.domain.models import NONE_SELECTED, BackendCommand, CandidateKind, Selected, SelectionOutcome
from core.services.gateway import Gateway, GatewayHooks


class FakeLister:
    """Returns canned candidates per kind and records every call."""

    def __init__(self, listings: dict[CandidateKind, list[str]] | None = None, error: Exception | None = None):
        self.listings = listings or {}
        self.error = error
        self.calls: list[CandidateKind] = []

    def list(self, kind: CandidateKind) -> list[str]:
        self.calls.append(kind)
        if self.error is not None:
            raise self.error
        return list(self.listings.get(kind, []))


class ScriptedSelector:
    """Behaves like fzf with `--select-1 --exit-0`; `choice` plays the user."""

    def __init__(self, choice: str | None = None, error: Exception | None = None):
        self.choice = choice
        self.error = error
        self.calls: list[tuple[list[str], str]] = []

    def select(self, candidates: Sequence[str], prompt_label: str) -> SelectionOutcome:
        self.calls.append((list(candidates), prompt_label))
        if self.error is not None:
            raise self.error
        if not candidates:
            return NONE_SELECTED
        if len(candidates) == 1:
            return Selected(value=candidates[0])
        if self.choice is None:
            return NONE_SELECTED
        return Selected(value=self.choice)


class RecordingRunner:
    """Records dispatched argv instead of running anything."""

    def __init__(self, exit_code: int = 0, error: Exception | None = None):
        self.exit_code = exit_code
        self.error = error
        self.commands: list[tuple[str, ...]] = []

    def run(self, command: BackendCommand) -> int:
        if self.error is not None:
            raise self.error
        self.commands.append(command.argv)
        return self.exit_code


@pytest.fixture
def lister() -> FakeLister:
    return FakeLister()


@pytest.fixture
def selector() -> ScriptedSelector:
    return ScriptedSelector()


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def events() -> dict[str, list]:
    return {"announce": [], "warning": []}


@pytest.fixture
def gateway(lister, selector, runner, events) -> Gateway:
    hooks = GatewayHooks(
        announce=lambda command, note: events["announce"].append((command.argv, note)),
        warning=lambda message: events["warning"].append(message),
    )
    return Gateway(lister=lister, selector=selector, runner=runner, backend_bin="juju", hooks=hooks)
