"""
Unit tests for the fallback state machine.
"""

import pytest

from app.core.recommendation import Provenance
from app.core.recommendation.pipeline import (
    INITIAL_STAGE,
    STAGE_PROVENANCE,
    Stage,
    StageOutcome,
    fallback_label,
    next_stage,
)


class TestNextStage:
    """Tests for the transition function."""

    def test_starts_with_primary(self):
        assert INITIAL_STAGE is Stage.TRY_PRIMARY

    @pytest.mark.parametrize("outcome", [StageOutcome.EMPTY, StageOutcome.FAILED])
    def test_miss_walks_the_chain_in_order(self, outcome):
        stage = INITIAL_STAGE
        visited = [stage]
        while stage is not Stage.DONE:
            stage = next_stage(stage, outcome)
            visited.append(stage)
        assert visited == [Stage.TRY_PRIMARY, Stage.TRY_SECONDARY, Stage.TRY_KEYWORD, Stage.DONE]

    @pytest.mark.parametrize("stage", [Stage.TRY_PRIMARY, Stage.TRY_SECONDARY, Stage.TRY_KEYWORD])
    def test_produced_ends_the_chain(self, stage):
        assert next_stage(stage, StageOutcome.PRODUCED) is Stage.DONE

    @pytest.mark.parametrize("outcome", list(StageOutcome))
    def test_done_is_absorbing(self, outcome):
        assert next_stage(Stage.DONE, outcome) is Stage.DONE


class TestLabels:
    """Tests for stage provenance and fallback labels."""

    def test_stage_provenance(self):
        assert STAGE_PROVENANCE[Stage.TRY_PRIMARY] is Provenance.PRIMARY_GENERATIVE
        assert STAGE_PROVENANCE[Stage.TRY_SECONDARY] is Provenance.SECONDARY_GENERATIVE
        assert STAGE_PROVENANCE[Stage.TRY_KEYWORD] is Provenance.KEYWORD

    def test_fallback_labels(self):
        assert fallback_label(Stage.TRY_PRIMARY) is None
        assert fallback_label(Stage.TRY_SECONDARY) == "secondary-generative"
        assert fallback_label(Stage.TRY_KEYWORD) == "keyword"
        assert fallback_label(Stage.DONE) is None

    def test_only_substitute_paths_are_fallbacks(self):
        assert not Provenance.PRIMARY_GENERATIVE.is_fallback
        assert Provenance.SECONDARY_GENERATIVE.is_fallback
        assert Provenance.KEYWORD.is_fallback
        assert not Provenance.SIMILAR.is_fallback
        assert not Provenance.TRENDING.is_fallback
