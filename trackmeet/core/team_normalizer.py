"""Team name normalizer for track meet results.

Two parts:
  Title-casing: collapse whitespace, capitalize words, keep acronyms ("NYAC")
  Duplicate report: near-identical team names after casing (informational,
                    never auto-merged)
"""

import re
from difflib import SequenceMatcher


UNATTACHED = 'Unattached'

SIMILARITY_THRESHOLD = 0.80


def _title_case_word(word: str) -> str:
    """Title-case a single word, handling hyphens and preserving acronyms."""
    if '-' in word:
        return '-'.join(_title_case_word(p) for p in word.split('-'))
    if '/' in word:
        return '/'.join(_title_case_word(p) for p in word.split('/'))
    # Preserve all-caps words that look like acronyms (2-4 uppercase letters)
    if word.isupper() and 2 <= len(word) <= 4:
        return word
    return word.capitalize()


def title_case_team(name: str) -> str:
    """Title-case a team name, preserving acronyms and hyphenation."""
    name = re.sub(r'\s+', ' ', (name or '').strip())
    if not name:
        return name
    return ' '.join(_title_case_word(w) for w in name.split(' '))


def is_unattached(team: str) -> bool:
    """Blank, placeholder, or any spelling that mentions 'unattached'."""
    norm = (team or '').strip().lower()
    return norm in ('', 'no team', 'n/a', 'na', 'none', '-') or 'unattached' in norm


def team_report(results: list) -> dict:
    """Summarize team names across results.

    Returns:
        Dict with:
          unique_teams: sorted team names
          unattached: number of results with no team
          potential_duplicates: [(team1, team2, ratio)] over the threshold
    """
    teams = sorted({r.team for r in results if r.team and r.team != UNATTACHED})
    unattached = sum(1 for r in results if not r.team or r.team == UNATTACHED)

    potential_duplicates = []
    # Compare all pairs (feasible for < 500 teams, typically < 100)
    if len(teams) <= 500:
        for i in range(len(teams)):
            for j in range(i + 1, len(teams)):
                t1, t2 = teams[i], teams[j]
                ratio = SequenceMatcher(None, t1.lower(), t2.lower()).ratio()
                if ratio > SIMILARITY_THRESHOLD:
                    potential_duplicates.append((t1, t2, round(ratio, 2)))

    return {
        'unique_teams': teams,
        'unattached': unattached,
        'potential_duplicates': potential_duplicates,
    }


def print_team_report(report: dict) -> None:
    """Print a human-readable team report to stdout."""
    teams = report['unique_teams']
    dupes = report['potential_duplicates']
    print(f"\nTeams: {len(teams)} unique teams, {report['unattached']} unattached results, "
          f"{len(dupes)} potential duplicates to review")

    if dupes:
        print(f"Potential duplicates (>{int(SIMILARITY_THRESHOLD * 100)}% similar):")
        for t1, t2, ratio in dupes[:15]:
            print(f'  "{t1}" / "{t2}" ({int(ratio*100)}% similar)')
        if len(dupes) > 15:
            print(f"  ... and {len(dupes) - 15} more")
