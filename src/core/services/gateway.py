"""Gateway orchestration: one invocation from classification to exit code.

This module runs the whole state machine

    resolve subcommand -> (passthrough: dispatch)
                       -> (enhanced: resolve target -> dispatch | fail)

and keeps side-effects (printing, colours) out of the core by reporting
through optional hooks, the same way the CLI layer plugs Rich output into
every other service. Resolution-phase errors are recovered here into a
`GatewayResult`; no exception crosses the dispatch boundary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence

from core.domain.models import BackendCommand, SubcommandKind
from core.domain.subcommands import descriptor_for
from core.errors import (
    EXIT_BACKEND_NOT_FOUND,
    BackendUnavailable,
    GatewayError,
    Interrupted,
    NoTargetSelected,
)
from core.interfaces.lister import CandidateLister
from core.interfaces.runner import CommandRunner
from core.interfaces.selector import InteractiveSelector
from core.services.dispatcher import dispatch
from core.services.resolution import resolve_subcommand, resolve_target

logger = logging.getLogger(__name__)


@dataclass
class GatewayHooks:
    """Optional callbacks for UI layers (announcements, warnings)."""

    announce: Callable[[BackendCommand, str | None], None] | None = None
    warning: Callable[[str], None] | None = None


@dataclass
class GatewayResult:
    """Output of one gateway invocation."""

    kind: SubcommandKind
    exit_code: int
    command: BackendCommand | None = None
    error: GatewayError | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def dispatched(self) -> bool:
        return self.command is not None and self.error is None


class Gateway:
    """Interactive command dispatcher in front of the backend CLI."""

    def __init__(
        self,
        *,
        lister: CandidateLister,
        selector: InteractiveSelector,
        runner: CommandRunner,
        backend_bin: str = "juju",
        hooks: GatewayHooks | None = None,
    ) -> None:
        self._lister = lister
        self._selector = selector
        self._runner = runner
        self._backend_bin = backend_bin
        self._hooks = hooks or GatewayHooks()

    def _warn(self, result: GatewayResult, message: str) -> None:
        result.warnings.append(message)
        if self._hooks.warning:
            self._hooks.warning(message)

    def run(self, invocation: Sequence[str]) -> GatewayResult:
        resolved = resolve_subcommand(invocation)
        logger.debug("classified %r as %s", list(resolved.invocation), resolved.kind.value)

        if resolved.is_passthrough:
            return self._dispatch(resolved.kind, None, resolved.invocation, note=None, announce=False)

        descriptor = descriptor_for(resolved.kind)
        result = GatewayResult(kind=resolved.kind, exit_code=0)
        try:
            resolution = resolve_target(
                resolved.kind,
                resolved.trailing_args,
                self._lister,
                self._selector,
            )
        except KeyboardInterrupt:
            exc = Interrupted()
            result.error = exc
            result.exit_code = exc.exit_code
            self._warn(result, str(exc))
            return result
        except GatewayError as exc:
            result.error = exc
            result.exit_code = exc.exit_code
            self._warn(result, str(exc))
            return result

        if resolution.target is None and descriptor.target_required:
            exc = NoTargetSelected(descriptor.noun)
            result.error = exc
            result.exit_code = exc.exit_code
            self._warn(result, str(exc))
            return result

        note = f"(no {descriptor.noun} selected)" if resolution.target is None else None
        return self._dispatch(
            resolved.kind,
            resolution.target,
            resolution.remaining_args,
            note=note,
            announce=True,
        )

    def _dispatch(
        self,
        kind: SubcommandKind,
        target: str | None,
        args: Sequence[str],
        *,
        note: str | None,
        announce: bool,
    ) -> GatewayResult:
        result = GatewayResult(kind=kind, exit_code=0)

        def _record(command: BackendCommand) -> None:
            result.command = command
            if announce and self._hooks.announce:
                self._hooks.announce(command, note)

        try:
            result.exit_code = dispatch(
                self._runner,
                self._backend_bin,
                kind,
                target,
                args,
                announce=_record,
            )
        except BackendUnavailable as exc:
            result.error = exc
            result.exit_code = EXIT_BACKEND_NOT_FOUND
            self._warn(result, str(exc))
        return result
