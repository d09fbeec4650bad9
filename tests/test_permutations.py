from collections import Counter
from math import factorial

import pytest

from examkit.permutations import binary_arrangements, main, sorted_permutations


@pytest.mark.parametrize("text", ["abc", "cba", "dcab", "x", "zyxw"])
def test_permutations_are_sorted_and_complete(text):
    results = list(sorted_permutations(text))
    assert len(results) == factorial(len(text))
    assert results == sorted(results)
    assert len(set(results)) == len(results)
    assert all(sorted(result) == sorted(text) for result in results)


def test_input_order_does_not_matter():
    assert list(sorted_permutations("cab")) == list(sorted_permutations("abc"))


def test_binary_arrangements_of_one():
    assert list(binary_arrangements(1)) == ["0", "1"]


@pytest.mark.parametrize("size", [2, 3, 4])
def test_binary_arrangements_structure(size):
    results = list(binary_arrangements(size))
    block = factorial(size)
    assert len(results) == (size + 1) * block
    assert all(len(result) == size and set(result) <= {"0", "1"} for result in results)
    counts = [result.count("1") for result in results]
    assert counts == sorted(counts)
    assert Counter(counts) == {ones: block for ones in range(size + 1)}


def test_binary_arrangements_start_with_zeros():
    results = list(binary_arrangements(3))
    assert results[0] == "000"
    assert results[-1] == "111"


def test_main_prints_sorted_permutations(capsys):
    assert main(["cab"]) == 0
    assert capsys.readouterr().out == "abc\nacb\nbac\nbca\ncab\ncba\n"


def test_main_empty_word_prints_nothing(capsys):
    assert main([""]) == 0
    assert capsys.readouterr().out == ""


def test_main_without_arguments_fails(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == ""