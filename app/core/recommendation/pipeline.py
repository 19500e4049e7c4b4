"""
Fallback chain as a state machine.

The transition function is pure so the stage ordering can be checked
without any I/O.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from app.core.recommendation.models import Provenance


class Stage(str, Enum):
    TRY_PRIMARY = "try-primary"
    TRY_SECONDARY = "try-secondary"
    TRY_KEYWORD = "try-keyword"
    DONE = "done"


class StageOutcome(str, Enum):
    PRODUCED = "produced"
    EMPTY = "empty"
    FAILED = "failed"


INITIAL_STAGE = Stage.TRY_PRIMARY

STAGE_PROVENANCE: Mapping[Stage, Provenance] = MappingProxyType({
    Stage.TRY_PRIMARY: Provenance.PRIMARY_GENERATIVE,
    Stage.TRY_SECONDARY: Provenance.SECONDARY_GENERATIVE,
    Stage.TRY_KEYWORD: Provenance.KEYWORD,
})

_NEXT_ON_MISS: Mapping[Stage, Stage] = MappingProxyType({
    Stage.TRY_PRIMARY: Stage.TRY_SECONDARY,
    Stage.TRY_SECONDARY: Stage.TRY_KEYWORD,
    Stage.TRY_KEYWORD: Stage.DONE,
})


def next_stage(stage: Stage, outcome: StageOutcome) -> Stage:
    """
    Stage to run after `stage` finished with `outcome`.

    A stage that produced results ends the chain. An empty or failed stage
    hands over to the next one; the keyword stage is the last.
    """
    if stage is Stage.DONE:
        return Stage.DONE
    if outcome is StageOutcome.PRODUCED:
        return Stage.DONE
    return _NEXT_ON_MISS[stage]


def fallback_label(stage: Stage) -> Optional[str]:
    """Fallback source reported for results of `stage`; None for the primary stage."""
    if stage is Stage.TRY_PRIMARY:
        return None
    provenance = STAGE_PROVENANCE.get(stage)
    return provenance.value if provenance else None
