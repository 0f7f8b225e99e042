"""Built-in pipeline filters."""

from ..core.models import EventCategory
from .core import Filter


NON_FINISH_MARKS = {'DNF', 'DNS', 'NH', 'NM'}


class NoNameFilter(Filter):
    """Drops results whose first or last name is empty or "No name".

    Relay rows never carry athlete names (the parser fills "No name"), so
    they're judged by team instead and kept as long as it's filled in.
    """

    def belongs(self, result) -> bool:
        if result.category == EventCategory.RELAY:
            return bool(result.team.strip())
        names = (result.first_name.strip(), result.last_name.strip())
        return all(n and n.lower() != 'no name' for n in names)


class NonFinishFilter(Filter):
    """Drops DNF, DNS, NH and NM marks."""

    def belongs(self, result) -> bool:
        return result.mark.strip().upper() not in NON_FINISH_MARKS
