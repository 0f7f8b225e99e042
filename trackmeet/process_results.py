#!/usr/bin/env python3
"""CLI entry point for processing a track meet results workbook.

Usage:
    python process_results.py --data meet_workbook.json --output ./output/ \\
        --sheet-config sheets.json --skip-sheet "Coaches Notes"
"""

import argparse
import os
import sys

# Add parent directory to path for imports (skip when frozen by PyInstaller)
if not getattr(sys, 'frozen', False):
    sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from trackmeet.adapters.workbook_adapter import WorkbookAdapter
from trackmeet.core.output_generator import generate_results_csv, generate_results_report
from trackmeet.core.sheet_config import load_sheet_configs
from trackmeet.core.team_normalizer import print_team_report, team_report
from trackmeet.core.workbook import NON_DATA_SHEETS, exclude_sheets, load_workbook_json
from trackmeet.pipeline.builder import default_pipeline


def main(argv=None):
    parser = argparse.ArgumentParser(description='Parse and rank a track meet results workbook')
    parser.add_argument('--data', required=True, help='Workbook JSON file')
    parser.add_argument('--output', required=True, help='Output directory for generated files')
    parser.add_argument('--sheet-config', default=None,
                        help='JSON file with sheet configuration overrides')
    parser.add_argument('--skip-sheet', action='append', default=[],
                        help='Extra non-results sheet to ignore (repeatable)')
    parser.add_argument('--csv-name', default='results.csv',
                        help='File name for the results CSV (default: results.csv)')
    parser.add_argument('--report-name', default='results_report.txt',
                        help='File name for the text report (default: results_report.txt)')

    args = parser.parse_args(argv)

    try:
        sheet_configs = load_sheet_configs(args.sheet_config)
        print(f"Loading {args.data}...")
        workbook = load_workbook_json(args.data)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    workbook = exclude_sheets(workbook, [*NON_DATA_SHEETS, *args.skip_sheet])
    print(f"Sheets: {', '.join(workbook.sheet_names)}")

    out = WorkbookAdapter(sheet_configs).parse(workbook)
    if out.log:
        print(f"Skipped {len(out.log)} rows:")
        for line in out.log:
            print(f"  {line}")
    if out.error:
        print(f"Error: {out.error}")
        sys.exit(1)
    print(f"Parsed {len(out.results)} results")

    results = default_pipeline().run(out.results)
    print(f"Ranked {len(results)} results "
          f"({len(out.results) - len(results)} removed by filters)")
    print_team_report(team_report(results))

    os.makedirs(args.output, exist_ok=True)
    csv_path = os.path.join(args.output, args.csv_name)
    generate_results_csv(results, csv_path)
    print(f"Generated {csv_path}")

    report_path = os.path.join(args.output, args.report_name)
    generate_results_report(results, report_path)
    print(f"Generated {report_path}")

    print("\nDone!")


if __name__ == '__main__':
    main()
