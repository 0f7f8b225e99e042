"""Output generator for ranked meet results.

Generates two output types from pipeline output:
  - Results CSV (one row per result, fixed CompiledResult columns)
  - Results report text (grouped by event, gender and division)
"""

import csv

from .compiled import COMPILED_COLUMNS, MAX_LEGS, compile_results


def generate_results_csv(results: list, output_path: str):
    """Write results in pipeline order with an Event column first."""
    with open(output_path, 'w', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=['Event', *COMPILED_COLUMNS])
        writer.writeheader()
        for compiled in compile_results(results):
            writer.writerow({'Event': compiled.event, **compiled.row()})


def generate_results_report(results: list, output_path: str):
    """Generate a plain-text report, one section per ranked group.

    Groups appear in pipeline order; within a group results keep their
    ranked order.
    """
    sections: dict[tuple, list] = {}
    for compiled in compile_results(results):
        row = compiled.row()
        key = (compiled.event, row['Gender'], row['Division'])
        sections.setdefault(key, []).append(row)

    lines = []
    for (event, gender, division), rows in sections.items():
        title = ' - '.join(p for p in (event, gender, division) if p)
        lines.append('')
        lines.append('=' * 60)
        lines.append(f'  {title}')
        lines.append('=' * 60)
        for row in rows:
            names = ', '.join(n for n in (row[f'Athlete {i}'] for i in range(1, MAX_LEGS + 1)) if n)
            place = row['Place'] or '-'
            wind = f" ({row['Wind']})" if row['Wind'] else ''
            lines.append(f"  {place:>3}. {names or row['Team']:<30} "
                         f"{row['Team']:<25} {row['Result']}{wind}")

    with open(output_path, 'w') as f:
        f.write('\n'.join(lines))
