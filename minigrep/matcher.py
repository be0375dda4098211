"""Pattern matcher for the minigrep pattern grammar.

The pattern is never compiled. At each step the primitive at the front of the
remaining pattern is decoded by `scan_token` and the matching loop acts on it,
moving the input and pattern offsets forward.
"""

import enum
import logging

logger = logging.getLogger(__name__)


class PatternError(ValueError):
    """Raised by the scanner for a group with no closing bracket."""


class MatchMode(enum.Enum):
    UNANCHORED = "unanchored"
    # set only for the step right after '^'
    ANCHORED = "anchored"


def scan_token(pattern, p):
    """
    Decode the primitive starting at pattern[p].
    Returns (ttype, val, end) where `end` is the offset just past the primitive.
    Tokens are tried in priority order; the first one that applies wins.
    """
    n = len(pattern)
    c = pattern[p]
    nxt = pattern[p + 1] if p + 1 < n else None

    if c == "$" and p + 1 == n:
        return "END", None, p + 1

    if c == "^":
        return "START", None, p + 1

    # quantifiers bind to whatever single character precedes them
    if nxt == "+":
        return "PLUS", c, p + 2
    if nxt == "?":
        return "QUESTION", c, p + 2

    if c == "(":
        close = pattern.find(")", p + 1)
        if close == -1:
            raise PatternError("Unclosed group")
        return "OR", pattern[p + 1:close].split("|"), close + 1

    if c == ".":
        return "DOT", None, p + 1

    if c == "\\" and nxt == "d":
        return "DIGIT", None, p + 2
    if c == "\\" and nxt == "w":
        return "WORD", None, p + 2

    if c == "[" and nxt == "^":
        body_start = p + 2
        if body_start < n and pattern[body_start] == "]":
            return "NEG_CLASS", "", body_start + 1
        close = pattern.find("]", body_start)
        if close == -1:
            raise PatternError("Unclosed character class")
        return "NEG_CLASS", pattern[body_start:close], close + 1

    if c == "[":
        if nxt == "]":
            return "CLASS", "", p + 2
        close = pattern.find("]", p + 1)
        if close == -1:
            raise PatternError("Unclosed character class")
        return "CLASS", pattern[p + 1:close], close + 1

    return "LITERAL", c, p + 1


def find_run(text, pos, ch):
    """Return (start, length) of the first run of `ch` at or after `pos`."""
    start = text.find(ch, pos)
    if start == -1:
        return pos, 0
    end = start
    while end < len(text) and text[end] == ch:
        end += 1
    return start, end - start


def find_first(text, pos, predicate):
    """Index of the first character at or after `pos` satisfying `predicate`, or -1."""
    for i in range(pos, len(text)):
        if predicate(text[i]):
            return i
    return -1


def match_here(text, pattern):
    """
    Run the matching loop over `text` and `pattern`.
    Each iteration advances the pattern offset, the input offset, or both;
    a primitive that matches is never reconsidered.
    """
    n = len(text)
    idx = 0
    p = 0
    mode = MatchMode.UNANCHORED

    while True:
        if p == len(pattern):
            # a bare trailing '^' only matches where no input is left
            return idx == n or mode is MatchMode.UNANCHORED

        ttype, val, end = scan_token(pattern, p)

        # Anchors
        if ttype == "END":
            return idx == n

        if ttype == "START":
            p = end
            mode = MatchMode.ANCHORED
            continue

        # Quantifiers: the run length is taken once, greedily
        if ttype == "PLUS" or ttype == "QUESTION":
            start, length = find_run(text, idx, val)
            if ttype == "PLUS" and length == 0:
                return False
            if ttype == "QUESTION" and length > 1:
                return False
            if length:
                idx = start + length
            p = end
            mode = MatchMode.UNANCHORED
            continue

        # Alternation only checks containment in what is left of the input
        if ttype == "OR":
            rest = text[idx:]
            return any(alt in rest for alt in val)

        if ttype == "DOT":
            if idx >= n:
                return False
            idx += 1
            p = end
            mode = MatchMode.UNANCHORED
            continue

        if ttype == "DIGIT" or ttype == "WORD":
            predicate = str.isnumeric if ttype == "DIGIT" else str.isalnum
            found = find_first(text, idx, predicate)
            if found == -1:
                return False
            idx = found + 1
            p = end
            mode = MatchMode.UNANCHORED
            continue

        if ttype == "NEG_CLASS":
            if not val:
                # zero-width, but counts as the step after '^'
                p = end
                mode = MatchMode.UNANCHORED
                continue
            if idx >= n or text[idx] in val:
                return False
            idx += 1
            p = end
            mode = MatchMode.UNANCHORED
            continue

        if ttype == "CLASS":
            if not val or idx >= n or text[idx] not in val:
                return False
            idx += 1
            p = end
            mode = MatchMode.UNANCHORED
            continue

        # LITERAL
        if idx < n and text[idx] == val:
            idx += 1
            p = end
            mode = MatchMode.UNANCHORED
            continue

        if idx >= n or mode is MatchMode.ANCHORED:
            return False

        # unanchored search: try the same pattern one character later
        idx += 1


def match_pattern(input_line, pattern):
    """Return True if `pattern` matches `input_line`. Never raises."""
    try:
        matched = match_here(input_line, pattern)
    except PatternError as e:
        logger.debug(f"Pattern {pattern!r} rejected: {e}")
        return False
    logger.debug(f"Pattern {pattern!r} {'matched' if matched else 'did not match'} {input_line!r}")
    return matched
