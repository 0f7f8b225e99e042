"""Abstract base adapter for parsing meet results from various sources."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class ParseOutput:
    """What a parse produced.

    A non-None error means nothing usable came out; log lines describe
    rows that were skipped and are meant for people, not machines.
    """
    results: list = field(default_factory=list)
    error: str | None = None
    log: list = field(default_factory=list)


class BaseAdapter(ABC):
    @abstractmethod
    def parse(self, data) -> ParseOutput:
        """Parse meet data and return a ParseOutput of Result records."""
        pass
