"""Subcommand classification and target resolution.

Two pure steps sit in front of every dispatch:

1. `resolve_subcommand` classifies the first argument by exact match against
   the enhanced subcommand table. Anything else, including an empty
   invocation, is a passthrough that keeps the whole original argument list.
2. `resolve_target` decides whether the next argument is an explicit target
   or whether candidates must be listed and handed to the selector.

Neither step inspects the arguments that end up being forwarded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from core.domain.models import Selected, SubcommandKind
from core.domain.subcommands import ENHANCED_TOKENS, descriptor_for
from core.interfaces.lister import CandidateLister
from core.interfaces.selector import InteractiveSelector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedSubcommand:
    """Classification of an invocation."""

    kind: SubcommandKind
    trailing_args: tuple[str, ...]
    invocation: tuple[str, ...]

    @property
    def is_passthrough(self) -> bool:
        return self.kind is SubcommandKind.PASSTHROUGH


@dataclass(frozen=True)
class TargetResolution:
    """Outcome of the target policy for one enhanced subcommand."""

    target: str | None
    remaining_args: tuple[str, ...]
    explicit: bool = False


def resolve_subcommand(invocation: Sequence[str]) -> ResolvedSubcommand:
    args = tuple(invocation)
    kind = ENHANCED_TOKENS.get(args[0]) if args else None
    if kind is None:
        return ResolvedSubcommand(
            kind=SubcommandKind.PASSTHROUGH,
            trailing_args=(),
            invocation=args,
        )
    return ResolvedSubcommand(kind=kind, trailing_args=args[1:], invocation=args)


def resolve_target(
    kind: SubcommandKind,
    trailing_args: Sequence[str],
    lister: CandidateLister,
    selector: InteractiveSelector,
) -> TargetResolution:
    """Supply the target explicitly or defer to lister + selector.

    The first trailing argument is always taken as the explicit target, even
    when it looks like a flag. Lister errors propagate to the caller.
    """

    if kind is SubcommandKind.PASSTHROUGH:
        raise ValueError("passthrough invocations have no target")

    args = tuple(trailing_args)
    if args:
        logger.debug("explicit target for %s: %r", kind.value, args[0])
        return TargetResolution(target=args[0], remaining_args=args[1:], explicit=True)

    descriptor = descriptor_for(kind)
    candidates = lister.list(descriptor.listing)
    logger.debug("%d %s candidate(s) for %s", len(candidates), descriptor.listing.value, kind.value)

    outcome = selector.select(candidates, descriptor.prompt_label)
    if isinstance(outcome, Selected):
        return TargetResolution(target=outcome.value, remaining_args=args)
    return TargetResolution(target=None, remaining_args=args)
