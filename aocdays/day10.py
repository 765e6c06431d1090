"""Syntax scoring: find corrupted and incomplete bracket lines."""

from typing import NamedTuple, Optional

_CLOSERS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_CORRUPT_SCORES = {")": 3, "]": 57, "}": 1197, ">": 25137}
_COMPLETION_SCORES = {")": 1, "]": 2, "}": 3, ">": 4}


class LineCheck(NamedTuple):
    """The first illegal closer of a line, or the closers that would complete it."""

    illegal: Optional[str]
    completion: str


def check_line(line):
    """Scan a line of brackets for its first illegal closer or its completion."""
    expected = []
    for ch in line:
        if ch in _CLOSERS:
            expected.append(_CLOSERS[ch])
            continue
        if ch not in _CORRUPT_SCORES:
            raise ValueError(f"unexpected character {ch!r}")
        if not expected:
            raise ValueError(f"closer {ch!r} with nothing open")
        if ch != expected.pop():
            return LineCheck(ch, "")
    return LineCheck(None, "".join(reversed(expected)))


def _lines(text):
    return [line.strip() for line in text.splitlines() if line.strip()]


def _completion_score(completion):
    score = 0
    for ch in completion:
        score = score * 5 + _COMPLETION_SCORES[ch]
    return score


def part_one(text):
    """Total syntax error score of the corrupted lines."""
    return sum(
        _CORRUPT_SCORES[result.illegal]
        for result in map(check_line, _lines(text))
        if result.illegal is not None
    )


def part_two(text):
    """Median completion score of the lines that are not corrupted."""
    scores = sorted(
        _completion_score(result.completion)
        for result in map(check_line, _lines(text))
        if result.illegal is None
    )
    if not scores:
        raise ValueError("no incomplete lines to score")
    return scores[len(scores) // 2]