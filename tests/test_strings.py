import pytest

from algopractice.strings import (
    duplicate_counts,
    edit_distance,
    group_anagrams,
    is_isomorphic,
    is_palindrome,
    longest_common_prefix,
)


def test_duplicate_counts_driver_example():
    assert duplicate_counts("test string") == {"s": 2, "t": 3}


def test_duplicate_counts_sorted_and_above_one():
    result = duplicate_counts("mississippi banana")
    assert list(result) == sorted(result)
    assert all(count > 1 for count in result.values())
    for char, count in result.items():
        assert "mississippi banana".count(char) == count


def test_duplicate_counts_unique_text():
    assert duplicate_counts("abc") == {}


def test_edit_distance_known_pair():
    assert edit_distance("horse", "ros") == 3


def test_edit_distance_identity_and_symmetry():
    assert edit_distance("kitten", "kitten") == 0
    assert edit_distance("kitten", "sitting") == edit_distance("sitting", "kitten")


def test_edit_distance_with_empty():
    assert edit_distance("", "abcd") == len("abcd")
    assert edit_distance("abc", "") == len("abc")


@pytest.mark.parametrize(
    "a, b, c",
    [("intention", "execution", "extension"), ("abc", "yabd", "xyz")],
)
def test_edit_distance_triangle(a, b, c):
    assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)
    assert edit_distance(a, b) <= max(len(a), len(b))


def test_group_anagrams_groups_share_letters():
    words = ["eat", "tea", "tan", "ate", "nat", "bat"]
    groups = group_anagrams(words)
    assert sorted(w for group in groups for w in group) == sorted(words)
    for group in groups:
        assert len({"".join(sorted(w)) for w in group}) == 1
    keys = ["".join(sorted(group[0])) for group in groups]
    assert len(keys) == len(set(keys))
    assert groups[0][0] == words[0]


def test_group_anagrams_empty():
    assert group_anagrams([]) == []


def test_isomorphic_pairs():
    assert is_isomorphic("egg", "add") is True
    assert is_isomorphic("foo", "bar") is False


def test_isomorphic_rejects_two_to_one():
    assert is_isomorphic("ab", "aa") is False


def test_isomorphic_lengths_differ():
    assert is_isomorphic("abc", "ab") is False


def test_isomorphic_with_itself():
    assert is_isomorphic("paper", "paper") is True


def test_longest_common_prefix_example():
    assert longest_common_prefix(["flower", "flow", "flight"]) == "fl"


def test_longest_common_prefix_is_prefix_of_all():
    words = ["interspecies", "interstellar", "interstate"]
    prefix = longest_common_prefix(words)
    assert all(word.startswith(prefix) for word in words)
    assert len({word[: len(prefix) + 1] for word in words}) > 1


def test_longest_common_prefix_single_word():
    assert longest_common_prefix(["alone"]) == "alone"


def test_longest_common_prefix_empty_raises():
    with pytest.raises(ValueError):
        longest_common_prefix([])


@pytest.mark.parametrize("text", ["", "a", "abba", "racecar"])
def test_palindromes(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", ["ab", "abca"])
def test_not_palindromes(text):
    assert is_palindrome(text) is False


def test_mirrored_text_is_palindrome():
    text = "xyzzy1"
    assert is_palindrome(text + text[::-1]) is True