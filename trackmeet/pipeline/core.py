"""Pipeline engine: ordered filter, transform and rank steps over results.

Each step takes the full list of results and returns a new list, which the
next step receives. Order of steps matters and is preserved.
"""

from abc import ABC, abstractmethod
from functools import cmp_to_key

from ..core.models import SortDirection


class Filter(ABC):
    @abstractmethod
    def belongs(self, result) -> bool:
        """True to keep the result."""


class Transformer(ABC):
    @abstractmethod
    def transform(self, result):
        """Return the transformed result (may be the same, mutated instance)."""


def _score_comparator(direction: SortDirection):
    """Compare by score; results without a score sort last either way."""
    ascending = direction == SortDirection.ASCENDING

    def compare(r1, r2) -> int:
        s1, s2 = r1.score(), r2.score()
        if s1 is None and s2 is None:
            return 0
        if s1 is None:
            return 1
        if s2 is None:
            return -1
        diff = s1 - s2 if ascending else s2 - s1
        return (diff > 0) - (diff < 0)

    return compare


class Ranker:
    """Ranks results for a set of events within (event, gender, division) groups.

    Results for other events pass through unranked, after the ranked groups.
    """

    def __init__(self, events):
        self.events = frozenset(events)

    def rank(self, results: list, direction: SortDirection) -> list:
        groups: dict[tuple, list] = {}
        others = []
        for result in results:
            if result.event not in self.events:
                others.append(result)
                continue
            key = (result.event, result.gender, result.division)
            groups.setdefault(key, []).append(result)

        ranked = []
        compare = cmp_to_key(_score_comparator(direction))
        for group in groups.values():
            ordered = sorted(group, key=compare)
            for place, result in enumerate(ordered, start=1):
                result.set_rank(place)
            ranked.extend(ordered)

        return ranked + others


class PipelineStep(ABC):
    @abstractmethod
    def run(self, results: list) -> list:
        pass


class FilterStep(PipelineStep):
    def __init__(self, filter: Filter):
        self.filter = filter

    def run(self, results):
        return [r for r in results if self.filter.belongs(r)]


class TransformStep(PipelineStep):
    def __init__(self, transformer: Transformer):
        self.transformer = transformer

    def run(self, results):
        return [self.transformer.transform(r) for r in results]


class RankStep(PipelineStep):
    def __init__(self, ranker: Ranker, direction: SortDirection):
        self.ranker = ranker
        self.direction = direction

    def run(self, results):
        return self.ranker.rank(list(results), self.direction)


class Pipeline:
    def __init__(self, steps=()):
        self.steps = tuple(steps)

    def run(self, results: list) -> list:
        out = list(results)
        for step in self.steps:
            out = step.run(out)
        return out
