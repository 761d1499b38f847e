"""
Fuzzy subsequence matching with an optimal-alignment score.

The pattern must appear in the candidate as a case-insensitive subsequence.
Among all alignments the one with the highest score is kept:

- every matched character scores ``SCORE_MATCH``
- characters at a word start (string start, after a separator, camelCase
  hump) earn a boundary bonus, doubled for the first pattern character
- consecutive matches earn at least ``BONUS_CONSECUTIVE``
- gaps cost ``PENALTY_GAP_START`` plus ``PENALTY_GAP_EXTENSION`` per skipped
  character, and unmatched leading characters cost a little too, so earlier
  matches win ties

Scoring is O(len(pattern) * len(candidate)).
"""

from __future__ import annotations

from apekey.models.keymap import MatchScore

SCORE_MATCH = 16
PENALTY_GAP_START = -3
PENALTY_GAP_EXTENSION = -1
PENALTY_LEADING = -1
MAX_LEADING_PENALTY = -6
BONUS_BOUNDARY = SCORE_MATCH // 2
BONUS_CAMEL = BONUS_BOUNDARY + PENALTY_GAP_EXTENSION
BONUS_CONSECUTIVE = -(PENALTY_GAP_START + PENALTY_GAP_EXTENSION)
BONUS_FIRST_CHAR_MULTIPLIER = 2

_NO_MATCH = float("-inf")


def _char_bonus(candidate: str, index: int) -> int:
    """Bonus for matching at ``index``, based on the preceding character."""
    if index == 0:
        return BONUS_BOUNDARY
    prev, char = candidate[index - 1], candidate[index]
    if not prev.isalnum() and char.isalnum():
        return BONUS_BOUNDARY
    if prev.islower() and char.isupper():
        return BONUS_CAMEL
    if prev.isalpha() and char.isdigit():
        return BONUS_CAMEL
    return 0


def _is_subsequence(pattern: list[str], candidate: list[str]) -> bool:
    it = iter(candidate)
    return all(char in it for char in pattern)


def fuzzy_match(pattern: str, candidate: str) -> MatchScore | None:
    """
    Score ``pattern`` against ``candidate``.

    Returns:
        ``MatchScore(rank, positions)`` with the candidate indices of the
        matched characters, or None if ``pattern`` is not a subsequence.
        An empty pattern matches everything with rank 0.
    """
    if not pattern:
        return MatchScore(0, ())

    needle = [c.lower() for c in pattern]
    haystack = [c.lower() for c in candidate]
    if len(needle) > len(haystack) or not _is_subsequence(needle, haystack):
        return None

    n = len(haystack)
    bonuses = [_char_bonus(candidate, j) for j in range(n)]

    # scores[i][j]: best score with needle[i] matched at haystack[j]
    # origins[i][j]: where needle[i - 1] sat in that alignment
    scores: list[list[float]] = []
    origins: list[list[int]] = []

    first_row: list[float] = []
    for j in range(n):
        if haystack[j] == needle[0]:
            leading = max(PENALTY_LEADING * j, MAX_LEADING_PENALTY)
            first_row.append(SCORE_MATCH + bonuses[j] * BONUS_FIRST_CHAR_MULTIPLIER + leading)
        else:
            first_row.append(_NO_MATCH)
    scores.append(first_row)
    origins.append([-1] * n)

    for i in range(1, len(needle)):
        prev = scores[i - 1]
        row = [_NO_MATCH] * n
        origin = [-1] * n
        # Best predecessor separated by a gap of at least one character.
        carry, carry_at = _NO_MATCH, -1
        for j in range(i, n):
            if j >= 2:
                extended = carry + PENALTY_GAP_EXTENSION
                opened = prev[j - 2] + PENALTY_GAP_START
                if opened >= extended:
                    carry, carry_at = opened, j - 2
                else:
                    carry = extended
            if haystack[j] != needle[i]:
                continue
            best, best_at = carry, carry_at
            consecutive = prev[j - 1] + max(BONUS_CONSECUTIVE, bonuses[j])
            if consecutive >= best:
                best, best_at = consecutive, j - 1
            if best == _NO_MATCH:
                continue
            row[j] = best + SCORE_MATCH + bonuses[j]
            origin[j] = best_at
        scores.append(row)
        origins.append(origin)

    last = scores[-1]
    end = max(range(n), key=lambda j: (last[j], -j))
    if last[end] == _NO_MATCH:
        return None

    positions = [end]
    for i in range(len(needle) - 1, 0, -1):
        positions.append(origins[i][positions[-1]])
    positions.reverse()
    return MatchScore(int(last[end]), tuple(positions))


def split_positions(positions: tuple[int, ...], keys: str) -> tuple[list[int], list[int]]:
    """
    Map positions in ``"{keys} {description}"`` back onto the two fields.

    Returns:
        (positions within keys, positions within description)
    """
    offset = len(keys) + 1
    in_keys = [p for p in positions if p < len(keys)]
    in_description = [p - offset for p in positions if p >= offset]
    return in_keys, in_description
