"""Fuzzy matching of a search pattern against a name."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

_SCORE_MATCH = 16
_GAP_START = -3
_GAP_EXTENSION = -1
_BONUS_BOUNDARY = 8
_BONUS_CAMEL = 7
_BONUS_CONSECUTIVE = 4
_FIRST_CHAR_MULTIPLIER = 2


def _bonus(previous: Optional[str], current: str) -> int:
    if not current.isalnum():
        return 0
    if previous is None or not previous.isalnum():
        return _BONUS_BOUNDARY
    if previous.islower() and current.isupper():
        return _BONUS_CAMEL
    if not previous.isdigit() and current.isdigit():
        return _BONUS_CAMEL
    return 0


def fuzzy_indices(choice: str, pattern: str) -> Optional[Tuple[int, List[int]]]:
    """Match ``pattern`` as a subsequence of ``choice``.

    Returns the score and the positions of the matched characters in
    ``choice``, or None when there is no match. Matching ignores case unless
    the pattern holds an upper-case letter. An empty pattern matches anything.
    """
    if not pattern:
        return 0, []
    case_sensitive = any(char.isupper() for char in pattern)
    text = list(choice) if case_sensitive else [char.lower() for char in choice]
    wanted = list(pattern) if case_sensitive else [char.lower() for char in pattern]
    if len(wanted) > len(text):
        return None

    bonuses = [_bonus(choice[j - 1] if j else None, char) for j, char in enumerate(choice)]

    # rows[i][j] is the best (score, previous position) with pattern[i] at choice[j]
    rows: List[Dict[int, Tuple[int, Optional[int]]]] = []
    for i, wanted_char in enumerate(wanted):
        row: Dict[int, Tuple[int, Optional[int]]] = {}
        for j in range(i, len(text)):
            if text[j] != wanted_char:
                continue
            gain = _SCORE_MATCH + bonuses[j] * (_FIRST_CHAR_MULTIPLIER if i == 0 else 1)
            if i == 0:
                row[j] = (gain, None)
                continue
            best: Optional[Tuple[int, Optional[int]]] = None
            for k, (score, _) in rows[-1].items():
                if k >= j:
                    continue
                gap = j - k - 1
                penalty = _BONUS_CONSECUTIVE if gap == 0 else _GAP_START + _GAP_EXTENSION * (gap - 1)
                candidate = score + gain + penalty
                if best is None or candidate > best[0]:
                    best = (candidate, k)
            if best is not None:
                row[j] = best
        if not row:
            return None
        rows.append(row)

    end, (score, _) = max(rows[-1].items(), key=lambda item: (item[1][0], -item[0]))
    indices = [end]
    position: Optional[int] = end
    for row in reversed(rows[1:]):
        position = row[position][1]
        indices.append(position)
    indices.reverse()
    return score, indices