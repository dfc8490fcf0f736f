"""Later routines of the English (Porter2) Snowball stemmer and its entry point.

Steps 2 to 5, the whole-word exception lists and the postlude live here;
the earlier steps come from :mod:`seroost.english_rules`.
"""

from __future__ import annotations

from seroost.english_rules import (
    G_V,
    G_VALID_LI,
    V_MAX,
    V_MIN,
    VALID_LI_MAX,
    VALID_LI_MIN,
    StemContext,
    in_r1,
    in_r2,
    mark_regions,
    prelude,
    short_v,
    step_1a,
    step_1b,
    step_1c,
)
from seroost.snowball import Among, SnowballEnv

_STEP_2_SUFFIXES = (
    Among("anci", -1, 3),
    Among("enci", -1, 2),
    Among("ogi", -1, 13),
    Among("li", -1, 15),
    Among("bli", 3, 12),
    Among("abli", 4, 4),
    Among("alli", 3, 8),
    Among("fulli", 3, 9),
    Among("lessli", 3, 14),
    Among("ousli", 3, 10),
    Among("entli", 3, 5),
    Among("aliti", -1, 8),
    Among("biliti", -1, 12),
    Among("iviti", -1, 11),
    Among("tional", -1, 1),
    Among("ational", 14, 7),
    Among("alism", -1, 8),
    Among("ation", -1, 7),
    Among("ization", 17, 6),
    Among("izer", -1, 6),
    Among("ator", -1, 7),
    Among("iveness", -1, 11),
    Among("fulness", -1, 9),
    Among("ousness", -1, 10),
)

_STEP_2_REPLACEMENTS = {
    1: "tion",
    2: "ence",
    3: "ance",
    4: "able",
    5: "ent",
    6: "ize",
    7: "ate",
    8: "al",
    9: "ful",
    10: "ous",
    11: "ive",
    12: "ble",
    14: "less",
}

_STEP_3_SUFFIXES = (
    Among("icate", -1, 4),
    Among("ative", -1, 6),
    Among("alize", -1, 3),
    Among("iciti", -1, 4),
    Among("ical", -1, 4),
    Among("tional", -1, 1),
    Among("ational", 5, 2),
    Among("ful", -1, 5),
    Among("ness", -1, 5),
)

_STEP_3_REPLACEMENTS = {
    1: "tion",
    2: "ate",
    3: "al",
    4: "ic",
}

_STEP_4_SUFFIXES = (
    Among("ic", -1, 1),
    Among("ance", -1, 1),
    Among("ence", -1, 1),
    Among("able", -1, 1),
    Among("ible", -1, 1),
    Among("ate", -1, 1),
    Among("ive", -1, 1),
    Among("ize", -1, 1),
    Among("iti", -1, 1),
    Among("al", -1, 1),
    Among("ism", -1, 1),
    Among("ion", -1, 2),
    Among("er", -1, 1),
    Among("ous", -1, 1),
    Among("ant", -1, 1),
    Among("ent", -1, 1),
    Among("ment", 15, 1),
    Among("ement", 16, 1),
)

_STEP_5_SUFFIXES = (
    Among("e", -1, 1),
    Among("l", -1, 2),
)

_EXCEPTIONS_AFTER_1A = (
    Among("succeed", -1, -1),
    Among("proceed", -1, -1),
    Among("exceed", -1, -1),
    Among("canning", -1, -1),
    Among("inning", -1, -1),
    Among("earring", -1, -1),
    Among("herring", -1, -1),
    Among("outing", -1, -1),
)

_WHOLE_WORD_EXCEPTIONS = (
    Among("andes", -1, -1),
    Among("atlas", -1, -1),
    Among("bias", -1, -1),
    Among("cosmos", -1, -1),
    Among("dying", -1, 3),
    Among("early", -1, 9),
    Among("gently", -1, 7),
    Among("howe", -1, -1),
    Among("idly", -1, 6),
    Among("lying", -1, 4),
    Among("news", -1, -1),
    Among("only", -1, 10),
    Among("singly", -1, 11),
    Among("skies", -1, 2),
    Among("skis", -1, 1),
    Among("sky", -1, -1),
    Among("tying", -1, 5),
    Among("ugly", -1, 8),
)

_WHOLE_WORD_REPLACEMENTS = {
    1: "ski",
    2: "sky",
    3: "die",
    4: "lie",
    5: "tie",
    6: "idl",
    7: "gentl",
    8: "ugli",
    9: "earli",
    10: "onli",
    11: "singl",
}


def step_2(env: SnowballEnv, context: StemContext) -> bool:
    """Normalise derivational suffixes found in region R1."""
    env.ket = env.cursor
    among_var = env.find_among_b(_STEP_2_SUFFIXES, context)
    if among_var == 0:
        return False
    env.bra = env.cursor
    if not in_r1(env, context):
        return False
    if among_var in _STEP_2_REPLACEMENTS:
        env.slice_from(_STEP_2_REPLACEMENTS[among_var])
    elif among_var == 13:
        if not env.eq_s_b("l"):
            return False
        env.slice_from("og")
    elif among_var == 15:
        if not env.in_grouping_b(G_VALID_LI, VALID_LI_MIN, VALID_LI_MAX):
            return False
        env.slice_del()
    return True


def step_3(env: SnowballEnv, context: StemContext) -> bool:
    """Normalise or remove a further set of suffixes in region R1."""
    env.ket = env.cursor
    among_var = env.find_among_b(_STEP_3_SUFFIXES, context)
    if among_var == 0:
        return False
    env.bra = env.cursor
    if not in_r1(env, context):
        return False
    if among_var in _STEP_3_REPLACEMENTS:
        env.slice_from(_STEP_3_REPLACEMENTS[among_var])
    elif among_var == 5:
        env.slice_del()
    elif among_var == 6:
        if not in_r2(env, context):
            return False
        env.slice_del()
    return True


def step_4(env: SnowballEnv, context: StemContext) -> bool:
    """Remove suffixes found in region R2."""
    env.ket = env.cursor
    among_var = env.find_among_b(_STEP_4_SUFFIXES, context)
    if among_var == 0:
        return False
    env.bra = env.cursor
    if not in_r2(env, context):
        return False
    if among_var == 1:
        env.slice_del()
    elif among_var == 2:
        saved = env.limit - env.cursor
        if not env.eq_s_b("s"):
            env.cursor = env.limit - saved
            if not env.eq_s_b("t"):
                return False
        env.slice_del()
    return True


def step_5(env: SnowballEnv, context: StemContext) -> bool:
    """Remove a final ``e`` or the second ``l`` of a final ``ll``."""
    env.ket = env.cursor
    among_var = env.find_among_b(_STEP_5_SUFFIXES, context)
    if among_var == 0:
        return False
    env.bra = env.cursor
    if among_var == 1:
        saved = env.limit - env.cursor
        if not in_r2(env, context):
            env.cursor = env.limit - saved
            if not in_r1(env, context):
                return False
            before_short = env.limit - env.cursor
            if short_v(env, context):
                return False
            env.cursor = env.limit - before_short
        env.slice_del()
    elif among_var == 2:
        if not in_r2(env, context):
            return False
        if not env.eq_s_b("l"):
            return False
        env.slice_del()
    return True


def exception1(env: SnowballEnv, context: StemContext) -> bool:
    """Handle whole words with irregular stems; fail if the word is not one."""
    env.bra = env.cursor
    among_var = env.find_among(_WHOLE_WORD_EXCEPTIONS, context)
    if among_var == 0:
        return False
    env.ket = env.cursor
    if env.cursor < env.limit:
        return False
    replacement = _WHOLE_WORD_REPLACEMENTS.get(among_var)
    if replacement is not None:
        env.slice_from(replacement)
    return True


def exception2(env: SnowballEnv, context: StemContext) -> bool:
    """Test whether the word left after step 1a must not be stemmed further."""
    env.ket = env.cursor
    if env.find_among_b(_EXCEPTIONS_AFTER_1A, context) == 0:
        return False
    env.bra = env.cursor
    return env.cursor <= env.limit_backward


def _mark_next(env: SnowballEnv, s: str) -> bool:
    """Mark the next occurrence of ``s`` with ``bra``/``ket``, cursor at its start."""
    while True:
        start = env.cursor
        env.bra = env.cursor
        if env.eq_s(s):
            env.ket = env.cursor
            env.cursor = start
            return True
        env.cursor = start
        if env.cursor >= env.limit:
            return False
        env.next_char()


def postlude(env: SnowballEnv, context: StemContext) -> bool:
    """Turn every ``Y`` marked by the prelude back into ``y``."""
    if not context.y_found:
        return False
    while True:
        position = env.cursor
        if not _mark_next(env, "Y"):
            env.cursor = position
            break
        env.slice_from("y")
    return True


def _run_restoring(env: SnowballEnv, context: StemContext, routine) -> None:
    saved = env.limit - env.cursor
    routine(env, context)
    env.cursor = env.limit - saved


def stem(env: SnowballEnv) -> bool:
    """Stem the word held in ``env`` in place."""
    context = StemContext()
    start = env.cursor
    if exception1(env, context):
        return True
    env.cursor = start
    if not env.hop(3):
        env.cursor = start
        return True
    env.cursor = start

    prelude(env, context)
    mark_regions(env, context)
    env.limit_backward = env.cursor
    env.cursor = env.limit

    _run_restoring(env, context, step_1a)

    saved = env.limit - env.cursor
    if not exception2(env, context):
        env.cursor = env.limit - saved
        for routine in (step_1b, step_1c, step_2, step_3, step_4, step_5):
            _run_restoring(env, context, routine)

    env.cursor = env.limit_backward
    position = env.cursor
    postlude(env, context)
    env.cursor = position
    return True


def stem_word(word: str) -> str:
    """Return the English stem of ``word``."""
    env = SnowballEnv(word)
    stem(env)
    return env.current