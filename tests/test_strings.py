import pytest

from algokit.strings import (
    MOD,
    count_and_say,
    edit_distance,
    find_rotate_steps,
    group_anagrams,
    ladder_length,
    letter_combinations,
    longest_palindrome_from_words,
    longest_palindromic_substring,
    longest_valid_parentheses,
    most_common_word,
    number_of_arrays,
    smallest_equivalent_string,
)


def _decode(term):
    return "".join(char * int(count) for count, char in zip(term[::2], term[1::2]))


def test_count_and_say_first_term():
    assert count_and_say(1) == "1"


@pytest.mark.parametrize("n", range(1, 9))
def test_count_and_say_next_term_describes_previous(n):
    assert _decode(count_and_say(n + 1)) == count_and_say(n)


@pytest.mark.parametrize("n", range(1, 12))
def test_count_and_say_uses_only_small_digits(n):
    assert set(count_and_say(n)) <= set("123")


@pytest.mark.parametrize("n", [0, -3])
def test_count_and_say_rejects_non_positive(n):
    with pytest.raises(ValueError):
        count_and_say(n)


def test_group_anagrams_invariants():
    words = ["listen", "silent", "enlist", "google", "gogole", "abc", "cab", "x"]
    groups = group_anagrams(words)
    assert sorted(word for group in groups for word in group) == sorted(words)
    keys = [sorted(group[0]) for group in groups]
    for group, key in zip(groups, keys):
        assert all(sorted(word) == key for word in group)
        assert group == sorted(group)
    assert keys == sorted(keys)
    assert len({"".join(key) for key in keys}) == len(groups)


def test_group_anagrams_empty():
    assert group_anagrams([]) == []


def test_smallest_equivalent_string_sample():
    assert smallest_equivalent_string("parker", "morris", "parser") == "makkek"


def test_smallest_equivalent_string_invariants():
    s1, s2, base = "hello", "world", "hold"
    result = smallest_equivalent_string(s1, s2, base)
    assert len(result) == len(base)
    assert all(new <= old for new, old in zip(result, base))
    assert smallest_equivalent_string(s1, s2, result) == result
    assert smallest_equivalent_string(s1, s2, s1) == smallest_equivalent_string(s1, s2, s2)


def test_smallest_equivalent_string_without_pairs_is_identity():
    assert smallest_equivalent_string("", "", "leetcode") == "leetcode"


def test_smallest_equivalent_string_length_mismatch():
    with pytest.raises(ValueError):
        smallest_equivalent_string("abc", "ab", "abc")


def test_ladder_length_sample():
    words = ["hot", "dot", "dog", "lot", "log", "cog"]
    assert ladder_length("hit", "cog", words) == 5


def test_ladder_length_missing_end_word():
    assert ladder_length("hit", "cog", ["hot", "dot", "dog", "lot", "log"]) == 0


def test_ladder_length_unreachable():
    assert ladder_length("hit", "cog", ["hot", "cog"]) == 0


def test_ladder_length_is_symmetric():
    words = ["hot", "dot", "dog", "lot", "log", "cog", "hit"]
    forward = ladder_length("hit", "cog", words)
    backward = ladder_length("cog", "hit", words)
    assert forward == backward
    assert forward > 0


def test_letter_combinations_sample():
    result = letter_combinations("23")
    assert len(result) == len("abc") * len("def")
    assert result == sorted(result)
    assert len(set(result)) == len(result)
    assert all(a in "abc" and b in "def" for a, b in result)


def test_letter_combinations_single_digit():
    assert letter_combinations("7") == list("pqrs")


@pytest.mark.parametrize("digits", ["", "1", "21", "0"])
def test_letter_combinations_nothing_to_spell(digits):
    assert letter_combinations(digits) == []


def test_longest_palindrome_from_words_sample():
    assert longest_palindrome_from_words("cacb", "cbba") == 5


def test_longest_palindrome_from_words_whole_palindrome():
    assert longest_palindrome_from_words("ab", "ba") == len("abba")


def test_longest_palindrome_from_words_no_shared_letter():
    assert longest_palindrome_from_words("aa", "bb") == 0


@pytest.mark.parametrize(
    "word1,word2", [("cacb", "cbba"), ("ab", "ab"), ("abcde", "xeca"), ("zz", "qz")]
)
def test_longest_palindrome_from_words_reversal_symmetry(word1, word2):
    result = longest_palindrome_from_words(word1, word2)
    assert result == longest_palindrome_from_words(word2[::-1], word1[::-1])
    assert result <= len(word1) + len(word2)


def test_longest_valid_parentheses_sample():
    assert longest_valid_parentheses(")()())") == 4


@pytest.mark.parametrize("s", ["", "(((", ")))", ")("])
def test_longest_valid_parentheses_none(s):
    assert longest_valid_parentheses(s) == 0


@pytest.mark.parametrize("s", ["()" * 5, "(())", "((()))()"])
def test_longest_valid_parentheses_whole_string(s):
    assert longest_valid_parentheses(s) == len(s)


@pytest.mark.parametrize("s", ["(()", "())((())", "()(()", ")()())()("])
def test_longest_valid_parentheses_even_and_bounded(s):
    result = longest_valid_parentheses(s)
    assert result % 2 == 0
    assert result <= len(s)


def test_longest_palindromic_substring_prefers_leftmost():
    assert longest_palindromic_substring("babad") == "bab"


@pytest.mark.parametrize("s", ["cbbd", "forgeeksskeegfor", "abacdfgdcaba", "a"])
def test_longest_palindromic_substring_is_palindrome_substring(s):
    result = longest_palindromic_substring(s)
    assert result == result[::-1]
    assert result in s
    assert result


@pytest.mark.parametrize("s", ["racecar", "noon", "x"])
def test_longest_palindromic_substring_whole_palindrome(s):
    assert longest_palindromic_substring(s) == s


def test_longest_palindromic_substring_distinct_letters():
    assert longest_palindromic_substring("abcd") == "a"


def test_longest_palindromic_substring_empty():
    assert longest_palindromic_substring("") == ""


def test_find_rotate_steps_sample():
    assert find_rotate_steps("godding", "gd") == 4


def test_find_rotate_steps_no_rotation_needed():
    assert find_rotate_steps("godding", "ggg") == len("ggg")


def test_find_rotate_steps_empty_key():
    assert find_rotate_steps("abc", "") == 0


def test_find_rotate_steps_at_least_one_press_per_letter():
    assert find_rotate_steps("abcde", "eca") >= len("eca")


def test_find_rotate_steps_missing_character():
    with pytest.raises(ValueError):
        find_rotate_steps("abc", "az")


def test_edit_distance_sample():
    assert edit_distance("horse", "ros") == 3


@pytest.mark.parametrize("word", ["", "a", "kitten", "intention"])
def test_edit_distance_identity_and_empty(word):
    assert edit_distance(word, word) == 0
    assert edit_distance(word, "") == len(word)
    assert edit_distance("", word) == len(word)


@pytest.mark.parametrize(
    "a,b,c", [("kitten", "sitting", "mitten"), ("intention", "execution", "attention")]
)
def test_edit_distance_metric_properties(a, b, c):
    assert edit_distance(a, b) == edit_distance(b, a)
    assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)
    assert edit_distance(a, b) <= max(len(a), len(b))


def test_most_common_word_sample():
    paragraph = "Bob hit a ball, the hit BALL flew far after it was hit."
    assert most_common_word(paragraph, ["hit"]) == "ball"


def test_most_common_word_banned_is_case_insensitive():
    paragraph = "Bob hit a ball, the hit BALL flew far after it was hit."
    assert most_common_word(paragraph, ["HIT"]) == "ball"


def test_most_common_word_tie_goes_to_smallest():
    assert most_common_word("b, a! c.", []) == "a"


def test_most_common_word_all_banned():
    assert most_common_word("Dog dog DOG", ["dog"]) == ""


def test_number_of_arrays_sample():
    assert number_of_arrays("1317", 2000) == 8


def test_number_of_arrays_impossible():
    assert number_of_arrays("1000", 10) == 0


@pytest.mark.parametrize("s", ["0123", "0", "01"])
def test_number_of_arrays_leading_zero(s):
    assert number_of_arrays(s, 10**9) == 0


def test_number_of_arrays_empty_string():
    assert number_of_arrays("", 5) == 1


def test_number_of_arrays_monotonic_in_k():
    counts = [number_of_arrays("2020123", k) for k in (1, 9, 20, 202, 2020, 10**9)]
    assert counts == sorted(counts)


def test_number_of_arrays_is_reduced():
    result = number_of_arrays("1" * 200, 10**9)
    assert 0 <= result < MOD