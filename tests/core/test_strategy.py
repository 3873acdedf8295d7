import pytest

from blockalloc import Block, BlockState, Strategy, best_fit, first_fit

ALLOC = BlockState.ALLOCATED

def make_blocks(*layout):
    '''layout items are (length, is_free), laid out from address 0'''
    blocks = []
    start = 0
    for length, is_free in layout:
        blocks.append(Block(start, length, BlockState.FREE if is_free else ALLOC))
        start += length
    return blocks

def test_first_fit_takes_lowest_address():
    blocks = make_blocks((10, True), (5, False), (20, True))
    assert first_fit(blocks, 3) == 0
    assert first_fit(blocks, 10) == 0
    assert first_fit(blocks, 11) == 2
    assert first_fit(blocks, 21) is None

def test_best_fit_exact_match():
    blocks = make_blocks((20, True), (1, False), (5, True), (1, False), (8, True))
    assert best_fit(blocks, 5) == 2

def test_best_fit_minimal_remainder():
    blocks = make_blocks((20, True), (1, False), (8, True), (1, False))
    assert best_fit(blocks, 5) == 2
    assert best_fit(blocks, 9) == 0
    assert best_fit(blocks, 21) is None

def test_best_fit_tie_goes_to_lower_address():
    blocks = make_blocks((8, True), (1, False), (8, True), (1, False), (12, True))
    assert best_fit(blocks, 6) == 0

def test_allocated_blocks_are_skipped():
    blocks = make_blocks((5, False), (30, False), (6, True))
    assert first_fit(blocks, 5) == 2
    assert best_fit(blocks, 5) == 2

def test_select_does_not_mutate():
    blocks = make_blocks((20, True), (1, False), (8, True))
    before = [(b.start, b.length, b.state) for b in blocks]
    for strategy in Strategy:
        strategy.select(blocks, 4)
    assert [(b.start, b.length, b.state) for b in blocks] == before

def test_select_dispatch():
    blocks = make_blocks((20, True), (1, False), (8, True))
    assert Strategy.FIRST_FIT.select(blocks, 5) == 0
    assert Strategy.BEST_FIT.select(blocks, 5) == 2

@pytest.mark.parametrize("name,expected", [
    ("first", Strategy.FIRST_FIT),
    ("First-Fit", Strategy.FIRST_FIT),
    ("first_fit", Strategy.FIRST_FIT),
    ("best", Strategy.BEST_FIT),
    (" BEST_FIT ", Strategy.BEST_FIT),
    (Strategy.BEST_FIT, Strategy.BEST_FIT),
])
def test_parse(name, expected):
    assert Strategy.parse(name) is expected

def test_parse_unknown():
    with pytest.raises(ValueError):
        Strategy.parse("worst")
