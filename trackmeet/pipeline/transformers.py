"""Built-in pipeline transformers. Both mutate the team via Result.set_team."""

from ..core.team_normalizer import UNATTACHED, is_unattached, title_case_team
from .core import Transformer


class UnattachedTeamTransformer(Transformer):
    """Blank, "n/a" and "... unattached ..." teams become "Unattached"."""

    def transform(self, result):
        if is_unattached(result.team):
            result.set_team(UNATTACHED)
        return result


class TeamNameTransformer(Transformer):
    """Collapse whitespace and title-case team names ("north  HIGH" -> "North High")."""

    def transform(self, result):
        if result.team and result.team != UNATTACHED:
            result.set_team(title_case_team(result.team))
        return result
