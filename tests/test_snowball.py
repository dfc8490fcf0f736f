import pytest

from seroost.snowball import Among, SnowballEnv

G_V = [17, 65, 16, 1]
G_VALID_LI = [55, 141, 2]

A_1 = [
    Among("'", -1, 1),
    Among("'s'", 0, 1),
    Among("'s", -1, 1),
]

A_2 = [
    Among("ied", -1, 2),
    Among("s", -1, 3),
    Among("ies", 1, 2),
    Among("sses", 1, 1),
    Among("ss", 1, -1),
    Among("us", 1, -1),
]

A_10 = [
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
]


def at_end(word):
    env = SnowballEnv(word)
    env.cursor = env.limit
    return env


def test_initial_state():
    env = SnowballEnv("word")
    assert (env.current, env.cursor, env.limit) == ("word", 0, 4)
    assert (env.limit_backward, env.bra, env.ket) == (0, 0, 4)


def test_eq_s_moves_cursor_on_match():
    env = SnowballEnv("yellow")
    assert env.eq_s("y")
    assert env.cursor == 1
    assert not env.eq_s("x")
    assert env.cursor == 1


def test_eq_s_fails_at_limit():
    env = SnowballEnv("ab")
    env.cursor = 2
    assert not env.eq_s("")


def test_eq_s_b():
    env = at_end("cats")
    assert env.eq_s_b("ts")
    assert env.cursor == 2
    assert not env.eq_s_b("x")
    assert not env.eq_s_b("longer than text")
    assert env.cursor == 2


def test_slice_from_replaces_and_adjusts_limit():
    env = at_end("flies")
    env.bra, env.ket = 2, 5
    assert env.slice_from("y")
    assert env.current == "fly"
    assert env.limit == 3
    assert env.cursor == 3


def test_slice_from_moves_cursor_inside_slice_to_bra():
    env = SnowballEnv("abcdef")
    env.bra, env.ket, env.cursor = 1, 4, 2
    env.slice_from("XY")
    assert env.current == "aXYef"
    assert env.cursor == 1


def test_slice_del():
    env = SnowballEnv("'quote")
    env.bra, env.ket = 0, 1
    assert env.slice_del()
    assert env.current == "quote"
    assert env.limit == len("quote")


def test_next_and_previous_char():
    env = SnowballEnv("abc")
    env.next_char()
    env.next_char()
    env.previous_char()
    assert env.cursor == 1


def test_hop_respects_limit():
    env = SnowballEnv("abcd")
    assert env.hop(3)
    assert env.cursor == 3
    assert not env.hop(2)
    assert env.cursor == 3
    assert env.hop(1)
    assert env.cursor == env.limit


def test_hop_checked_rejects_negative():
    env = SnowballEnv("abcd")
    assert not env.hop_checked(-1)
    assert env.hop_checked(2)
    assert env.cursor == 2


def test_hop_back():
    env = at_end("abcd")
    assert env.hop_back(2)
    assert env.cursor == 2
    assert not env.hop_back(3)
    assert env.cursor == 2
    assert not env.hop_back_checked(-1)
    assert env.hop_back_checked(2)
    assert env.cursor == 0


@pytest.mark.parametrize("letter", list("aeiouy"))
def test_in_grouping_accepts_vowels(letter):
    env = SnowballEnv(letter + "x")
    assert env.in_grouping(G_V, 97, 121)
    assert env.cursor == 1


@pytest.mark.parametrize("letter", list("bcxzY"))
def test_in_grouping_rejects_others(letter):
    env = SnowballEnv(letter)
    assert not env.in_grouping(G_V, 97, 121)
    assert env.cursor == 0


def test_out_grouping_is_complement():
    for letter in "abcdefghijklmnopqrstuvwxyz":
        inside = SnowballEnv(letter).in_grouping(G_V, 97, 121)
        outside = SnowballEnv(letter).out_grouping(G_V, 97, 121)
        assert inside != outside


def test_backward_groupings():
    env = at_end("ba")
    assert not env.out_grouping_b(G_V, 97, 121)
    assert env.cursor == 2
    assert env.in_grouping_b(G_V, 97, 121)
    assert env.cursor == 1
    assert not env.in_grouping_b(G_V, 97, 121)
    assert env.out_grouping_b(G_V, 97, 121)
    assert env.cursor == 0
    assert not env.out_grouping_b(G_V, 97, 121)


def test_valid_li_grouping():
    for letter in "cdeghkmnrt":
        assert SnowballEnv(letter).in_grouping(G_VALID_LI, 99, 116)
    for letter in "abfijlopqs":
        assert not SnowballEnv(letter).in_grouping(G_VALID_LI, 99, 116)


def test_insert_shifts_bra_and_ket():
    env = SnowballEnv("hop")
    env.bra, env.ket = 3, 3
    env.insert(3, 3, "e")
    assert env.current == "hope"
    assert (env.bra, env.ket) == (4, 4)
    assert env.limit == 4


def test_assign_to_and_slice_to():
    env = SnowballEnv("running")
    env.bra, env.ket = 3, 7
    assert env.slice_to() == "ning"
    env.limit = 3
    assert env.assign_to() == "run"


def test_find_among_exact_entries():
    for entry in A_10:
        env = SnowballEnv(entry.string)
        assert env.find_among(A_10, None) == entry.result
        assert env.cursor == len(entry.string)


def test_find_among_no_match():
    env = SnowballEnv("xyz")
    assert env.find_among(A_10, None) == 0


def test_find_among_b_suffixes():
    env = at_end("flies")
    assert env.find_among_b(A_2, None) == 2
    assert env.cursor == 2

    env = at_end("class")
    assert env.find_among_b(A_2, None) == -1
    assert env.cursor == 3

    env = at_end("cats")
    assert env.find_among_b(A_2, None) == 3
    assert env.cursor == 3


def test_find_among_b_apostrophes():
    env = at_end("cat's")
    assert env.find_among_b(A_1, None) == 1
    assert env.cursor == 3

    env = at_end("cat")
    assert env.find_among_b(A_1, None) == 0


def test_find_among_b_respects_limit_backward():
    env = at_end("flies")
    env.limit_backward = 3
    assert env.find_among_b(A_2, None) == 3
    assert env.cursor == 4


def test_find_among_method_falls_back_to_shorter_entry():
    seen = []

    def reject(env, context):
        seen.append(context)
        return False

    table = [Among("a", -1, 1), Among("ab", 0, 2, reject)]
    env = SnowballEnv("abc")
    assert env.find_among(table, "ctx") == 1
    assert env.cursor == 1
    assert seen == ["ctx"]


def test_find_among_method_accepts():
    table = [Among("a", -1, 1), Among("ab", 0, 2, lambda env, ctx: True)]
    env = SnowballEnv("abc")
    assert env.find_among(table, None) == 2
    assert env.cursor == 2


def test_find_among_b_method_cursor_restored():
    def wander(env, context):
        env.cursor = 0
        return True

    table = [Among("s", -1, 7, wander)]
    env = at_end("dogs")
    assert env.find_among_b(table, None) == 7
    assert env.cursor == 3


def test_among_is_immutable():
    entry = Among("s", -1, 3)
    with pytest.raises(AttributeError):
        entry.result = 4
    assert entry.result == 3
    assert entry.string == "s"