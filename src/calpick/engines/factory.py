"""
calpick.engines.factory
-----------------------
Transforms pure constraint data into live, executable engine objects.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from calpick.core.types import ConstraintOptions
from calpick.engines.constraints import ConstraintEngine
from calpick.engines.messages import resolve_messages
from calpick.engines.rules import compile_rules

logger = logging.getLogger(__name__)


def make_engine(
    options: Optional[ConstraintOptions] = None,
    messages: Optional[Mapping[str, str]] = None,
) -> ConstraintEngine:
    """The universal entry point."""
    options = options if options is not None else ConstraintOptions()
    # 1. Lay each rule's overrides over the globals once, up front
    rules = compile_rules(options)
    # 2. Defaults with per-kind message overrides
    msgs = resolve_messages(messages)
    logger.debug(
        "compiled constraint engine: base fields=%s, %d rule(s)",
        options.base.defined(), len(rules),
    )
    return ConstraintEngine(base=options.base, rules=rules, messages=msgs)
