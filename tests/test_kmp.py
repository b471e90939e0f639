import pytest

from rtlab.kmp import build_next, kmp_search


@pytest.mark.parametrize(
    "text, pattern",
    [
        ("hello world", "world"),
        ("hello world", "hello"),
        ("aaaaab", "aab"),
        ("abababca", "abca"),
        ("abcabcabd", "abcabd"),
        ("abc", "abcd"),
        ("mississippi", "issip"),
        ("mississippi", "ppx"),
        ("", "a"),
        ("a", "a"),
    ],
)
def test_matches_str_find(text, pattern):
    assert kmp_search(text, pattern) == text.find(pattern)


def test_not_found_returns_minus_one():
    assert kmp_search("abcdef", "xyz") == -1


def test_empty_pattern_matches_at_start():
    assert kmp_search("abc", "") == 0


def test_works_on_lists():
    text = [1, 2, 3, 1, 2, 3, 4]
    pattern = [3, 4]
    index = kmp_search(text, pattern)
    assert text[index : index + len(pattern)] == pattern


def test_build_next_pinned():
    assert build_next("abab") == [-1, 0, 0, 1]
    assert build_next("aaaa") == [-1, 0, 1, 2]


@pytest.mark.parametrize("pattern", ["a", "abcabd", "aabaaab", "xyzxyzx"])
def test_build_next_invariants(pattern):
    table = build_next(pattern)
    assert len(table) == len(pattern)
    assert table[0] == -1
    assert all(0 <= value < index for index, value in enumerate(table) if index > 0)


def test_build_next_empty():
    assert build_next("") == []