"""Backend command construction and execution.

`build_backend_command` interprets a subcommand descriptor: backend
subcommand, optional target flag, target, fixed flags, then the forwarded
arguments exactly as received. Passthrough invocations are forwarded
verbatim behind the backend binary.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from core.domain.models import BackendCommand, SubcommandKind
from core.domain.subcommands import descriptor_for
from core.errors import NoTargetSelected
from core.interfaces.runner import CommandRunner

logger = logging.getLogger(__name__)


def build_passthrough_command(backend_bin: str, invocation: Sequence[str]) -> BackendCommand:
    return BackendCommand(argv=(backend_bin, *invocation))


def build_backend_command(
    backend_bin: str,
    kind: SubcommandKind,
    target: str | None,
    remaining_args: Sequence[str],
) -> BackendCommand:
    """Build the argv for an enhanced subcommand.

    Raises `NoTargetSelected` when the subcommand requires a target and none
    was resolved; in that case nothing must be executed.
    """

    descriptor = descriptor_for(kind)
    argv: list[str] = [backend_bin, descriptor.backend_subcommand]

    if target is not None:
        if descriptor.target_flag:
            argv.append(descriptor.target_flag)
        argv.append(target)
        argv.extend(descriptor.fixed_flags)
    elif descriptor.target_required:
        raise NoTargetSelected(descriptor.noun)

    if descriptor.forwards_args:
        argv.extend(remaining_args)
    elif remaining_args:
        logger.debug("%s ignores extra arguments: %r", kind.value, list(remaining_args))

    return BackendCommand(argv=tuple(argv))


def dispatch(
    runner: CommandRunner,
    backend_bin: str,
    kind: SubcommandKind,
    target: str | None,
    remaining_args: Sequence[str],
    *,
    announce: Callable[[BackendCommand], None] | None = None,
) -> int:
    """Execute the backend invocation for `kind` and return its exit status.

    For `PASSTHROUGH`, `remaining_args` is the whole original invocation.
    """

    if kind is SubcommandKind.PASSTHROUGH:
        command = build_passthrough_command(backend_bin, remaining_args)
    else:
        command = build_backend_command(backend_bin, kind, target, remaining_args)

    if announce:
        announce(command)
    exit_code = runner.run(command)
    logger.debug("backend exited with %d: %s", exit_code, command.display())
    return exit_code
