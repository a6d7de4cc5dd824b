from unittest import mock

import pytest

from parallel_range.core.partition import SubRange, end_of, partition, start_of, sub_range

GRID = [(n, p) for n in (0, 1, 2, 3, 7, 10, 31, 100, 1001) for p in (1, 2, 3, 4, 7, 8, 16)]


@pytest.mark.parametrize("n,p", GRID)
def test_blocks_cover_range_exactly(n, p):
    blocks = partition(n, p)

    assert len(blocks) == p
    covered = [i for block in blocks for i in range(block.start, block.end)]
    assert covered == list(range(n))


@pytest.mark.parametrize("n,p", GRID)
def test_block_sizes_differ_by_at_most_one(n, p):
    base, rem = divmod(n, p)
    sizes = [block.size for block in partition(n, p)]

    assert max(sizes) - min(sizes) <= 1
    assert sizes[:rem] == [base + 1] * rem
    assert sizes[rem:] == [base] * (p - rem)


@pytest.mark.parametrize("n,p", GRID)
def test_endpoints_and_contiguity(n, p):
    assert start_of(n, 0, p) == 0
    assert end_of(n, p - 1, p) == n
    for worker_id in range(p - 1):
        assert end_of(n, worker_id, p) == start_of(n, worker_id + 1, p)


def test_ten_items_over_three_workers():
    assert partition(10, 3) == [(0, 4), (4, 7), (7, 10)]
    assert [block.size for block in partition(10, 3)] == [4, 3, 3]


def test_seven_items_over_four_workers():
    assert partition(7, 4) == [(0, 2), (2, 4), (4, 6), (6, 7)]


def test_single_worker_gets_everything():
    assert partition(42, 1) == [SubRange(0, 42)]


def test_zero_items():
    assert partition(0, 5) == [SubRange(0, 0)] * 5


def test_fewer_items_than_workers_leaves_empty_blocks():
    blocks = partition(3, 5)

    assert blocks == [(0, 1), (1, 2), (2, 3), (3, 3), (3, 3)]
    assert [block.size for block in blocks] == [1, 1, 1, 0, 0]


def test_sub_range_matches_start_and_end():
    assert sub_range(10, 1, 3) == SubRange(start_of(10, 1, 3), end_of(10, 1, 3)) == (4, 7)


def test_worker_count_defaults_to_configuration():
    with mock.patch("parallel_range.core.partition.config") as mock_config:
        mock_config.parallel.workers = 3

        assert start_of(10, 2) == 7
        assert end_of(10, 2) == 10
        assert partition(10) == [(0, 4), (4, 7), (7, 10)]
