"""Read-only tabular view of a Result for display and export.

Column names and order are fixed; spreadsheet and third-party exports
depend on them.
"""

from .models import EventCategory, ResultField


MAX_LEGS = 8

COMPILED_COLUMNS = (
    ('Place', 'Team', 'Result', 'Gender', 'Division')
    + tuple(f'Athlete {i}' for i in range(1, MAX_LEGS + 1))
    + ('Wind', 'Seed', 'Round', 'Heat')
)


class CompiledResult:
    """Wraps a Result; every column is a string, missing values are ''."""

    def __init__(self, result):
        self.result = result

    @property
    def event(self) -> str:
        return self.result.event.value

    def athletes(self) -> list[str]:
        """Athlete slots, padded to MAX_LEGS."""
        result = self.result
        if result.category == EventCategory.RELAY:
            names = list(result.legs[:MAX_LEGS])
        else:
            names = [f'{result.first_name} {result.last_name}'.strip()]
        return names + [''] * (MAX_LEGS - len(names))

    def row(self) -> dict:
        result = self.result
        fields = result.fields
        row = {
            'Place': '' if result.rank is None else str(result.rank),
            'Team': result.team,
            'Result': result.formatted_mark(),
            'Gender': result.gender.label if result.gender else '',
            'Division': result.division,
        }
        for i, name in enumerate(self.athletes(), start=1):
            row[f'Athlete {i}'] = name
        row['Wind'] = result.wind or ''
        row['Seed'] = fields.get(ResultField.SEED, '')
        row['Round'] = fields.get(ResultField.ROUND, '')
        row['Heat'] = fields.get(ResultField.HEAT, '')
        return row

    def values(self) -> list[str]:
        row = self.row()
        return [row[c] for c in COMPILED_COLUMNS]


def compile_results(results: list) -> list[CompiledResult]:
    return [CompiledResult(r) for r in results]
