"""Fluent builder for pipelines, and the standard meet pipeline."""

from ..core.models import EventCategory, SortDirection, events_in
from .core import (
    Filter, FilterStep, Pipeline, Ranker, RankStep, Transformer, TransformStep,
)
from .filters import NoNameFilter, NonFinishFilter
from .transformers import TeamNameTransformer, UnattachedTeamTransformer


# Lower score wins: elapsed times, and seconds off a predicted time
LOWER_IS_BETTER = events_in(
    EventCategory.TRACK, EventCategory.HURDLES, EventCategory.RELAY,
    EventCategory.HANDICAP_MILE,
)
# Higher score wins: distances and heights
HIGHER_IS_BETTER = events_in(
    EventCategory.JUMP, EventCategory.THROW, EventCategory.POLE_VAULT,
)


class PipelineBuilder:
    def __init__(self):
        self.steps = []

    def filter(self, f: Filter) -> 'PipelineBuilder':
        self.steps.append(FilterStep(f))
        return self

    def transform(self, t: Transformer) -> 'PipelineBuilder':
        self.steps.append(TransformStep(t))
        return self

    def rank(self, r: Ranker, direction: SortDirection) -> 'PipelineBuilder':
        self.steps.append(RankStep(r, direction))
        return self

    def build(self) -> Pipeline:
        return Pipeline(self.steps)


def default_pipeline() -> Pipeline:
    """Drop unnamed and non-finishing entries, tidy teams, rank every event."""
    return (PipelineBuilder()
            .filter(NoNameFilter())
            .filter(NonFinishFilter())
            .transform(UnattachedTeamTransformer())
            .transform(TeamNameTransformer())
            .rank(Ranker(LOWER_IS_BETTER), SortDirection.ASCENDING)
            .rank(Ranker(HIGHER_IS_BETTER), SortDirection.DESCENDING)
            .build())
