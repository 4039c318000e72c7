"""Glob-with-alternation name filter.

Supported syntax:
- ``?`` matches exactly one character
- ``*`` matches any run of characters, including none
- ``(a|b|...)`` matches exactly one of the ``|``-separated alternatives
- ``\\x`` matches ``x`` literally

Patterns are parsed once into a tree of items. Matching advances the set of
reachable name positions item by item, so its cost is bounded by pattern
length times name length no matter how many ``*`` a pattern contains.
"""

from __future__ import annotations

from dataclasses import dataclass

LITERAL = "literal"
ANY_CHAR = "any"
STAR = "star"
GROUP = "group"

# ("literal", char) | ("any",) | ("star",) | ("group", (sequence, ...))
PatternItem = tuple
PatternSequence = tuple[PatternItem, ...]


class PatternSyntaxError(ValueError):
    """Raised when a filter pattern cannot be compiled."""

    def __init__(self, message: str, pattern: str, position: int | None = None) -> None:
        self.message = message
        self.pattern = pattern
        self.position = position
        if position is None:
            super().__init__(f"{message} in {pattern!r}")
        else:
            super().__init__(f"{message} at position {position} in {pattern!r}")


@dataclass(frozen=True)
class NamePattern:
    """Compiled filter pattern; ``source`` keeps the user's original text."""

    source: str
    items: PatternSequence

    def matches(self, name: str) -> bool:
        return len(name) in _advance(self.items, name, {0})


@dataclass
class _GroupFrame:
    """Parser state for one open ``(`` (or the whole pattern when ``start`` is None)."""

    start: int | None
    alternatives: list[PatternSequence]
    current: list[PatternItem]


def parse_pattern(pattern: str) -> PatternSequence:
    """Parse ``pattern`` into a sequence of match items.

    Raises ``PatternSyntaxError`` for an empty pattern, unbalanced
    parentheses, ``|`` outside a group, or a trailing backslash.
    """
    if not pattern:
        raise PatternSyntaxError("empty pattern", pattern)

    stack = [_GroupFrame(start=None, alternatives=[], current=[])]
    idx = 0
    while idx < len(pattern):
        char = pattern[idx]
        frame = stack[-1]
        if char == "\\":
            if idx + 1 >= len(pattern):
                raise PatternSyntaxError("trailing escape character", pattern, idx)
            frame.current.append((LITERAL, pattern[idx + 1]))
            idx += 2
            continue
        if char == "?":
            frame.current.append((ANY_CHAR,))
        elif char == "*":
            frame.current.append((STAR,))
        elif char == "(":
            stack.append(_GroupFrame(start=idx, alternatives=[], current=[]))
        elif char == ")":
            if len(stack) == 1:
                raise PatternSyntaxError("unbalanced ')'", pattern, idx)
            stack.pop()
            alternatives = (*frame.alternatives, tuple(frame.current))
            stack[-1].current.append((GROUP, alternatives))
        elif char == "|":
            if len(stack) == 1:
                raise PatternSyntaxError("'|' outside of a group", pattern, idx)
            frame.alternatives.append(tuple(frame.current))
            frame.current = []
        else:
            frame.current.append((LITERAL, char))
        idx += 1

    if len(stack) > 1:
        raise PatternSyntaxError("unbalanced '('", pattern, stack[-1].start)
    return tuple(stack[0].current)


def _advance(items: PatternSequence, name: str, positions: set[int]) -> set[int]:
    """Return every name position reachable after matching ``items`` from ``positions``."""
    length = len(name)
    for item in items:
        if not positions:
            break
        kind = item[0]
        if kind == LITERAL:
            positions = {pos + 1 for pos in positions if pos < length and name[pos] == item[1]}
        elif kind == ANY_CHAR:
            positions = {pos + 1 for pos in positions if pos < length}
        elif kind == STAR:
            positions = set(range(min(positions), length + 1))
        else:
            reached: set[int] = set()
            for alternative in item[1]:
                reached |= _advance(alternative, name, positions)
            positions = reached
    return positions


def compile_pattern(pattern: str) -> NamePattern:
    """Validate and compile ``pattern`` for whole-name matching."""
    return NamePattern(source=pattern, items=parse_pattern(pattern))


def matches(name: str, pattern: NamePattern | None) -> bool:
    """Return whether ``name`` passes the filter; no pattern matches everything."""
    if pattern is None:
        return True
    return pattern.matches(name)


__all__ = [
    "PatternSyntaxError",
    "NamePattern",
    "parse_pattern",
    "compile_pattern",
    "matches",
]
