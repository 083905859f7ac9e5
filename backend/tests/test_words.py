import random

import pytest

from crossclues.game.errors import WordCatalogTooSmall
from crossclues.game.models import MAX_GRID_SIZE
from crossclues.game.words import WORDS, pick_axis_words, sample_words


def test_catalog_is_distinct_and_large_enough():
    assert len(set(WORDS)) == len(WORDS)
    assert len(WORDS) >= 2 * MAX_GRID_SIZE


def test_axis_words_never_overlap():
    rng = random.Random(3)
    for size in range(3, MAX_GRID_SIZE + 1):
        rows, columns = pick_axis_words(size, rng)
        assert len(rows) == len(columns) == size
        assert not set(rows) & set(columns)
        assert set(rows) | set(columns) <= set(WORDS)


def test_sample_words_rejects_oversized_request():
    with pytest.raises(WordCatalogTooSmall):
        sample_words(len(WORDS) + 1)
    with pytest.raises(WordCatalogTooSmall):
        sample_words(3, words=("A", "B"))
