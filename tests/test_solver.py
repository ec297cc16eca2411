import pytest

from packsolver.solver import (
    PackResult,
    solve_greedy,
    solve_pack_distribution,
    solve_pack_distribution_dfs,
    solve_smart,
)


def _sum(packs):
    return sum(p.size * p.count for p in packs)


def test_exact_match():
    packs, total = solve_pack_distribution(2000, [250, 500, 1000])
    assert total == 2000
    assert len(packs) >= 1
    assert _sum(packs) == 2000


def test_minimal_excess():
    packs, total = solve_pack_distribution(2300, [250, 500, 1000])
    assert total >= 2300
    assert packs
    assert total == 2500


def test_zero_quantity():
    packs, total = solve_pack_distribution(0, [250, 500, 1000])
    assert total == 0
    assert packs == []


def test_no_sizes_available():
    packs, total = solve_pack_distribution(1000, [])
    assert total == 0
    assert packs == []


def test_large_quantity():
    packs, total = solve_pack_distribution(12345, [250, 500, 1000, 2000, 5000])
    assert total >= 12345
    assert packs
    assert total == 12500


def test_solve_pack_distribution_sum_matches_total():
    quantity = 12001
    packs, total = solve_pack_distribution(quantity, [100, 250, 500, 1000])
    assert packs
    assert total >= quantity
    assert _sum(packs) == total
    assert total == 12050


def test_very_large_quantity():
    quantity = 500000
    packs, total = solve_smart(quantity, [23, 31, 53])
    assert packs
    assert total >= quantity
    assert _sum(packs) == total


def test_compare_all_strategies():
    sizes = [23, 31, 53]
    quantity = 500000
    smart_packs, smart_total = solve_smart(quantity, sizes)
    dp_packs, dp_total = solve_pack_distribution(quantity, sizes)
    greedy_packs, greedy_total = solve_greedy(quantity, sizes)
    assert smart_total >= quantity
    assert dp_total >= quantity
    assert greedy_total >= quantity
    assert smart_total <= greedy_total
    assert smart_total == dp_total
    assert _sum(smart_packs) == smart_total
    assert _sum(dp_packs) == dp_total
    assert _sum(greedy_packs) == greedy_total


def test_dp_reports_sizes_in_given_order():
    packs, _ = solve_pack_distribution(750, [250, 500])
    assert [p.size for p in packs] == sorted({p.size for p in packs}, key=[250, 500].index)


def test_dp_rejects_negative_sizes():
    with pytest.raises(ValueError):
        solve_pack_distribution(100, [50, -10])


def test_greedy_uses_largest_first():
    packs, total = solve_greedy(2000, [250, 500, 1000])
    assert packs == [PackResult(size=1000, count=2)]
    assert total == 2000


def test_greedy_tops_up_with_one_pack():
    packs, total = solve_greedy(12001, [100, 250, 500, 1000])
    assert packs == [PackResult(size=1000, count=13)]
    assert total == 13000


def test_greedy_does_not_modify_input():
    sizes = [100, 250, 500, 1000]
    solve_greedy(12001, sizes)
    assert sizes == [100, 250, 500, 1000]


def test_greedy_zero_quantity():
    assert solve_greedy(0, [10, 20]) == ([], 0)


def test_greedy_without_sizes_raises():
    with pytest.raises(ValueError):
        solve_greedy(10, [])


def test_greedy_rejects_zero_size():
    with pytest.raises(ValueError):
        solve_greedy(10, [0, 5])


def test_smart_prefers_dp_when_it_is_smaller():
    packs, total = solve_smart(12001, [100, 250, 500, 1000])
    assert total == 12050
    assert _sum(packs) == total


def test_smart_does_not_modify_input():
    sizes = [23, 31, 53]
    solve_smart(100, sizes)
    assert sizes == [23, 31, 53]


def test_dfs_finds_minimal_total():
    packs, total = solve_pack_distribution_dfs(501, [250, 500, 1000])
    assert total == 750
    assert _sum(packs) == 750


def test_dfs_zero_quantity():
    assert solve_pack_distribution_dfs(0, [250, 500]) == ([], 0)


def test_dfs_no_sizes():
    assert solve_pack_distribution_dfs(10, []) == ([], 0)


def test_dfs_rejects_zero_size():
    with pytest.raises(ValueError):
        solve_pack_distribution_dfs(10, [0, 3])


def test_dfs_exact_single_size():
    packs, total = solve_pack_distribution_dfs(6, [3])
    assert packs == [PackResult(size=3, count=2)]
    assert total == 6


@pytest.mark.parametrize(
    "quantity, sizes",
    [
        (1, [250, 500, 1000]),
        (251, [250, 500, 1000]),
        (1001, [250, 500, 1000]),
        (17, [3, 5, 7]),
        (100, [23, 31, 53]),
        (12, [5, 9]),
    ],
)
def test_dp_and_dfs_agree_on_total(quantity, sizes):
    dp_packs, dp_total = solve_pack_distribution(quantity, sizes)
    dfs_packs, dfs_total = solve_pack_distribution_dfs(quantity, sizes)
    assert dp_total == dfs_total
    assert _sum(dp_packs) == dp_total
    assert _sum(dfs_packs) == dfs_total
    assert dp_total >= quantity