import pytest

from metric_bktree.core.errors import UnknownMetricError
from metric_bktree.distance.hamming import HammingDistance, hamming
from metric_bktree.distance.levenshtein import LevenshteinDistance
from metric_bktree.distance.registry import get_distance


def test_hamming_case_sensitive():
    d = HammingDistance()
    assert d("test", "test") == 0
    assert d("test", "TEST") == 4


def test_hamming_case_insensitive():
    d = HammingDistance(case_sensitive=False)
    assert d("test", "test") == 0
    assert d("test", "TEST") == 0


def test_hamming_length_difference_counts():
    assert hamming("same", "some") == 1
    assert hamming("same", "sam") == 1
    assert hamming("same", "abcd") == 4
    assert hamming("ab", "abcde") == 3
    assert hamming("", "abc") == 3


def test_get_distance():
    assert isinstance(get_distance("Hamming"), HammingDistance)
    d = get_distance("levenshtein", case_sensitive=False)
    assert isinstance(d, LevenshteinDistance)
    assert d("ABC", "abc") == 0


def test_get_distance_unknown():
    with pytest.raises(UnknownMetricError):
        get_distance("jaccard")
    with pytest.raises(KeyError):
        get_distance("jaccard")


def test_case_folding_keeps_lengths():
    ham = HammingDistance(case_sensitive=False)
    lev = LevenshteinDistance(case_sensitive=False)
    # "ß".upper() is "SS"; folding must not add a character
    assert ham("ß", "SS") == 2
    assert lev("ß", "SS") == 2
    assert ham("Straße", "STRASSE") == 3
    assert ham("aß", "Aß") == 0
