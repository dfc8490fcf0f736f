"""Runtime support for Snowball stemming algorithms.

The environment works on a Python string using character positions. The
stemming rules only ever touch ASCII suffixes, so a character cursor behaves
exactly like a byte cursor over the same word.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

AmongMethod = Callable[["SnowballEnv", Any], bool]


@dataclass(frozen=True)
class Among:
    """One entry of a Snowball ``among`` table.

    ``substring_index`` points at the entry in the same table that is a prefix
    (or, for backward tables, a suffix) of this one, or is -1 if there is none.
    ``result`` is the value returned when this entry matches. ``method``, when
    given, is an extra condition that must hold for the entry to match.
    """

    string: str
    substring_index: int
    result: int
    method: Optional[AmongMethod] = None


def _in_bitmap(chars: Sequence[int], low: int, high: int, ch: int) -> bool:
    if ch < low or ch > high:
        return False
    offset = ch - low
    return bool(chars[offset >> 3] & (1 << (offset & 0x7)))


class SnowballEnv:
    """Mutable state shared by the routines of a Snowball stemmer."""

    def __init__(self, value: str) -> None:
        self.current = value
        self.cursor = 0
        self.limit = len(value)
        self.limit_backward = 0
        self.bra = 0
        self.ket = len(value)

    def __repr__(self) -> str:
        return (
            f"SnowballEnv(current={self.current!r}, cursor={self.cursor}, "
            f"limit={self.limit}, limit_backward={self.limit_backward}, "
            f"bra={self.bra}, ket={self.ket})"
        )

    def _replace_s(self, bra: int, ket: int, s: str) -> int:
        adjustment = len(s) - (ket - bra)
        self.current = self.current[:bra] + s + self.current[ket:]
        self.limit += adjustment
        if self.cursor >= ket:
            self.cursor += adjustment
        elif self.cursor > bra:
            self.cursor = bra
        return adjustment

    def eq_s(self, s: str) -> bool:
        """If ``s`` follows the cursor, move the cursor past it."""
        if self.cursor >= self.limit:
            return False
        if self.current.startswith(s, self.cursor):
            self.cursor += len(s)
            return True
        return False

    def eq_s_b(self, s: str) -> bool:
        """If ``s`` precedes the cursor, move the cursor to its start."""
        if self.cursor - self.limit_backward < len(s):
            return False
        start = self.cursor - len(s)
        if not self.current.startswith(s, start):
            return False
        self.cursor = start
        return True

    def slice_from(self, s: str) -> bool:
        """Replace the text between ``bra`` and ``ket`` with ``s``."""
        self._replace_s(self.bra, self.ket, s)
        return True

    def slice_del(self) -> bool:
        """Remove the text between ``bra`` and ``ket``."""
        return self.slice_from("")

    def next_char(self) -> None:
        self.cursor += 1

    def previous_char(self) -> None:
        self.cursor -= 1

    def hop(self, delta: int) -> bool:
        """Move the cursor ``delta`` characters forward, if the limit allows."""
        steps = max(delta, 0)
        if steps and self.cursor + steps > self.limit:
            return False
        self.cursor += steps
        return True

    def hop_checked(self, delta: int) -> bool:
        return delta >= 0 and self.hop(delta)

    def hop_back(self, delta: int) -> bool:
        """Move the cursor ``delta`` characters back, if the limit allows."""
        steps = max(delta, 0)
        if steps and self.cursor - steps < self.limit_backward:
            return False
        self.cursor -= steps
        return True

    def hop_back_checked(self, delta: int) -> bool:
        return delta >= 0 and self.hop_back(delta)

    def _char_at(self, position: int) -> Optional[int]:
        if 0 <= position < len(self.current):
            return ord(self.current[position])
        return None

    def in_grouping(self, chars: Sequence[int], low: int, high: int) -> bool:
        """Step over the character at the cursor if it is in the grouping."""
        if self.cursor >= self.limit:
            return False
        ch = self._char_at(self.cursor)
        if ch is None or not _in_bitmap(chars, low, high, ch):
            return False
        self.next_char()
        return True

    def in_grouping_b(self, chars: Sequence[int], low: int, high: int) -> bool:
        """Step back over the character before the cursor if it is in the grouping."""
        if self.cursor <= self.limit_backward:
            return False
        ch = self._char_at(self.cursor - 1)
        if ch is None or not _in_bitmap(chars, low, high, ch):
            return False
        self.previous_char()
        return True

    def out_grouping(self, chars: Sequence[int], low: int, high: int) -> bool:
        """Step over the character at the cursor if it is not in the grouping."""
        if self.cursor >= self.limit:
            return False
        ch = self._char_at(self.cursor)
        if ch is None or _in_bitmap(chars, low, high, ch):
            return False
        self.next_char()
        return True

    def out_grouping_b(self, chars: Sequence[int], low: int, high: int) -> bool:
        """Step back over the character before the cursor if it is not in the grouping."""
        if self.cursor <= self.limit_backward:
            return False
        ch = self._char_at(self.cursor - 1)
        if ch is None or _in_bitmap(chars, low, high, ch):
            return False
        self.previous_char()
        return True

    def insert(self, bra: int, ket: int, s: str) -> None:
        """Replace ``[bra, ket)`` with ``s``, keeping ``bra`` and ``ket`` in step."""
        adjustment = self._replace_s(bra, ket, s)
        if bra <= self.bra:
            self.bra += adjustment
        if bra <= self.ket:
            self.ket += adjustment

    def assign_to(self) -> str:
        return self.current[: self.limit]

    def slice_to(self) -> str:
        return self.current[self.bra : self.ket]

    def find_among(self, amongs: Sequence[Among], context: Any) -> int:
        """Find the longest entry of ``amongs`` starting at the cursor.

        The table must be sorted. Returns the entry's result, or 0 when nothing
        matches; on a match the cursor moves past the matched text.
        """
        i, j = 0, len(amongs)
        c, l = self.cursor, self.limit
        common_i = common_j = 0
        first_key_inspected = False

        while True:
            k = i + ((j - i) >> 1)
            diff = 0
            common = min(common_i, common_j)
            w = amongs[k]
            for expected in w.string[common:]:
                if c + common == l:
                    diff = -1
                    break
                diff = ord(self.current[c + common]) - ord(expected)
                if diff:
                    break
                common += 1
            if diff < 0:
                j, common_j = k, common
            else:
                i, common_i = k, common
            if j - i <= 1:
                if i > 0 or j == i or first_key_inspected:
                    break
                first_key_inspected = True

        while True:
            w = amongs[i]
            if common_i >= len(w.string):
                self.cursor = c + len(w.string)
                if w.method is None:
                    return w.result
                matched = w.method(self, context)
                self.cursor = c + len(w.string)
                if matched:
                    return w.result
            i = w.substring_index
            if i < 0:
                return 0

    def find_among_b(self, amongs: Sequence[Among], context: Any) -> int:
        """Find the longest entry of ``amongs`` ending at the cursor.

        The table must be sorted by reversed strings. Returns the entry's
        result, or 0 when nothing matches; on a match the cursor moves to the
        start of the matched text.
        """
        i, j = 0, len(amongs)
        c, lb = self.cursor, self.limit_backward
        common_i = common_j = 0
        first_key_inspected = False

        while True:
            k = i + ((j - i) >> 1)
            diff = 0
            common = min(common_i, common_j)
            w = amongs[k]
            remaining = w.string[: max(len(w.string) - common, 0)]
            for expected in reversed(remaining):
                if c - common == lb:
                    diff = -1
                    break
                diff = ord(self.current[c - common - 1]) - ord(expected)
                if diff:
                    break
                common += 1
            if diff < 0:
                j, common_j = k, common
            else:
                i, common_i = k, common
            if j - i <= 1:
                if i > 0 or j == i or first_key_inspected:
                    break
                first_key_inspected = True

        while True:
            w = amongs[i]
            if common_i >= len(w.string):
                self.cursor = c - len(w.string)
                if w.method is None:
                    return w.result
                matched = w.method(self, context)
                self.cursor = c - len(w.string)
                if matched:
                    return w.result
            i = w.substring_index
            if i < 0:
                return 0