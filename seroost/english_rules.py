"""Early routines of the English (Porter2) Snowball stemmer.

These cover the preparation of a word (``prelude`` and ``mark_regions``),
the region and short-syllable tests, and steps 1a to 1c of the algorithm.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from seroost.snowball import Among, SnowballEnv

# Groupings are bitmaps over a code point range; see ``SnowballEnv.in_grouping``.
G_V = (17, 65, 16, 1)
G_V_WXY = (1, 17, 65, 208, 1)
G_VALID_LI = (55, 141, 2)

V_MIN, V_MAX = 97, 121
V_WXY_MIN, V_WXY_MAX = 89, 121
VALID_LI_MIN, VALID_LI_MAX = 99, 116

_REGION_EXCEPTIONS = (
    Among("arsen", -1, -1),
    Among("commun", -1, -1),
    Among("gener", -1, -1),
)

_APOSTROPHE_SUFFIXES = (
    Among("'", -1, 1),
    Among("'s'", 0, 1),
    Among("'s", -1, 1),
)

_STEP_1A_SUFFIXES = (
    Among("ied", -1, 2),
    Among("s", -1, 3),
    Among("ies", 1, 2),
    Among("sses", 1, 1),
    Among("ss", 1, -1),
    Among("us", 1, -1),
)

_STEP_1B_ENDINGS = (
    Among("", -1, 3),
    Among("bb", 0, 2),
    Among("dd", 0, 2),
    Among("ff", 0, 2),
    Among("gg", 0, 2),
    Among("bl", 0, 1),
    Among("mm", 0, 2),
    Among("nn", 0, 2),
    Among("pp", 0, 2),
    Among("rr", 0, 2),
    Among("at", 0, 1),
    Among("tt", 0, 2),
    Among("iz", 0, 1),
)

_STEP_1B_SUFFIXES = (
    Among("ed", -1, 2),
    Among("eed", 0, 1),
    Among("ing", -1, 2),
    Among("edly", -1, 2),
    Among("eedly", 3, 1),
    Among("ingly", -1, 2),
)


@dataclass
class StemContext:
    """Per-word state of the English stemmer."""

    y_found: bool = False
    p2: int = 0
    p1: int = 0


def _is_vowel(env: SnowballEnv) -> bool:
    return env.in_grouping(G_V, V_MIN, V_MAX)


def _is_consonant(env: SnowballEnv) -> bool:
    return env.out_grouping(G_V, V_MIN, V_MAX)


def _go_past(env: SnowballEnv, step: Callable[[SnowballEnv], bool]) -> bool:
    """Advance until ``step`` succeeds; fail if the limit is reached first."""
    while not step(env):
        if env.cursor >= env.limit:
            return False
        env.next_char()
    return True


def _go_past_vowel_backward(env: SnowballEnv) -> bool:
    """Move back until a vowel has been stepped over; fail at the backward limit."""
    while not env.in_grouping_b(G_V, V_MIN, V_MAX):
        if env.cursor <= env.limit_backward:
            return False
        env.previous_char()
    return True


def _find_vowel_then_y(env: SnowballEnv) -> bool:
    """Mark the next ``y`` that follows a vowel, leaving the cursor at the vowel."""
    while True:
        start = env.cursor
        if _is_vowel(env):
            env.bra = env.cursor
            if env.eq_s("y"):
                env.ket = env.cursor
                env.cursor = start
                return True
        env.cursor = start
        if env.cursor >= env.limit:
            return False
        env.next_char()


def prelude(env: SnowballEnv, context: StemContext) -> bool:
    """Drop a leading apostrophe and mark consonant ``y`` as ``Y``."""
    context.y_found = False

    start = env.cursor
    env.bra = env.cursor
    if env.eq_s("'"):
        env.ket = env.cursor
        env.slice_del()
    env.cursor = start

    start = env.cursor
    env.bra = env.cursor
    if env.eq_s("y"):
        env.ket = env.cursor
        env.slice_from("Y")
        context.y_found = True
    env.cursor = start

    start = env.cursor
    while True:
        position = env.cursor
        if not _find_vowel_then_y(env):
            env.cursor = position
            break
        env.slice_from("Y")
        context.y_found = True
    env.cursor = start
    return True


def _mark_regions(env: SnowballEnv, context: StemContext) -> None:
    start = env.cursor
    if env.find_among(_REGION_EXCEPTIONS, context) == 0:
        env.cursor = start
        if not _go_past(env, _is_vowel):
            return
        if not _go_past(env, _is_consonant):
            return
    context.p1 = env.cursor
    if not _go_past(env, _is_vowel):
        return
    if not _go_past(env, _is_consonant):
        return
    context.p2 = env.cursor


def mark_regions(env: SnowballEnv, context: StemContext) -> bool:
    """Set the starts of regions R1 and R2 in ``context``."""
    context.p1 = env.limit
    context.p2 = env.limit
    start = env.cursor
    _mark_regions(env, context)
    env.cursor = start
    return True


def short_v(env: SnowballEnv, context: StemContext) -> bool:
    """Test whether the text before the cursor ends in a short syllable."""
    saved = env.limit - env.cursor
    if (
        env.out_grouping_b(G_V_WXY, V_WXY_MIN, V_WXY_MAX)
        and env.in_grouping_b(G_V, V_MIN, V_MAX)
        and env.out_grouping_b(G_V, V_MIN, V_MAX)
    ):
        return True
    env.cursor = env.limit - saved
    if not env.out_grouping_b(G_V, V_MIN, V_MAX):
        return False
    if not env.in_grouping_b(G_V, V_MIN, V_MAX):
        return False
    return env.cursor <= env.limit_backward


def in_r1(env: SnowballEnv, context: StemContext) -> bool:
    """Test whether the cursor lies in region R1."""
    return context.p1 <= env.cursor


def in_r2(env: SnowballEnv, context: StemContext) -> bool:
    """Test whether the cursor lies in region R2."""
    return context.p2 <= env.cursor


def step_1a(env: SnowballEnv, context: StemContext) -> bool:
    """Remove apostrophe suffixes and handle plural endings."""
    saved = env.limit - env.cursor
    env.ket = env.cursor
    if env.find_among_b(_APOSTROPHE_SUFFIXES, context) == 0:
        env.cursor = env.limit - saved
    else:
        env.bra = env.cursor
        env.slice_del()

    env.ket = env.cursor
    among_var = env.find_among_b(_STEP_1A_SUFFIXES, context)
    if among_var == 0:
        return False
    env.bra = env.cursor
    if among_var == 1:
        env.slice_from("ss")
    elif among_var == 2:
        saved = env.limit - env.cursor
        if env.hop_back(2):
            env.slice_from("i")
        else:
            env.cursor = env.limit - saved
            env.slice_from("ie")
    elif among_var == 3:
        if env.cursor <= env.limit_backward:
            return False
        env.previous_char()
        if not _go_past_vowel_backward(env):
            return False
        env.slice_del()
    return True


def _insert_e_at_cursor(env: SnowballEnv) -> None:
    position = env.cursor
    env.insert(position, position, "e")
    env.cursor = position


def step_1b(env: SnowballEnv, context: StemContext) -> bool:
    """Handle the ``eed``, ``ed`` and ``ing`` families of suffixes."""
    env.ket = env.cursor
    among_var = env.find_among_b(_STEP_1B_SUFFIXES, context)
    if among_var == 0:
        return False
    env.bra = env.cursor
    if among_var == 1:
        if not in_r1(env, context):
            return False
        env.slice_from("ee")
    elif among_var == 2:
        saved = env.limit - env.cursor
        if not _go_past_vowel_backward(env):
            return False
        env.cursor = env.limit - saved
        env.slice_del()

        saved = env.limit - env.cursor
        among_var = env.find_among_b(_STEP_1B_ENDINGS, context)
        if among_var == 0:
            return False
        env.cursor = env.limit - saved
        if among_var == 1:
            _insert_e_at_cursor(env)
        elif among_var == 2:
            env.ket = env.cursor
            if env.cursor <= env.limit_backward:
                return False
            env.previous_char()
            env.bra = env.cursor
            env.slice_del()
        elif among_var == 3:
            if env.cursor != context.p1:
                return False
            saved = env.limit - env.cursor
            if not short_v(env, context):
                return False
            env.cursor = env.limit - saved
            _insert_e_at_cursor(env)
    return True


def step_1c(env: SnowballEnv, context: StemContext) -> bool:
    """Replace a final ``y`` after a non-initial consonant with ``i``."""
    env.ket = env.cursor
    saved = env.limit - env.cursor
    if not env.eq_s_b("y"):
        env.cursor = env.limit - saved
        if not env.eq_s_b("Y"):
            return False
    env.bra = env.cursor
    if not env.out_grouping_b(G_V, V_MIN, V_MAX):
        return False
    if env.cursor <= env.limit_backward:
        return False
    env.slice_from("i")
    return True