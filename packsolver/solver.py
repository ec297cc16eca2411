"""Strategies for covering an order quantity with packs of fixed sizes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class PackResult:
    """One pack size and how many packs of that size are used."""

    size: int
    count: int


Solution = tuple[list[PackResult], int]


def _require_positive(sizes: Iterable[int]) -> None:
    if any(size <= 0 for size in sizes):
        raise ValueError("pack sizes must be > 0")


def solve_smart(quantity: int, sizes: Iterable[int]) -> Solution:
    """Run the greedy and the DP strategy and keep the one with the smaller total.

    The DP result wins ties.
    """
    ordered = sorted(sizes, reverse=True)
    greedy, greedy_total = solve_greedy(quantity, ordered)
    dp, dp_total = solve_pack_distribution(quantity, ordered)
    if dp_total <= greedy_total:
        return dp, dp_total
    return greedy, greedy_total


def solve_pack_distribution(quantity: int, sizes: Iterable[int]) -> Solution:
    """Find the smallest reachable total that is at least ``quantity``.

    Uses dynamic programming over every total up to ``quantity`` plus the
    largest pack size. Packs are reported in the order of ``sizes``.
    Sizes of zero are ignored.
    """
    sizes = list(sizes)
    if not sizes or quantity <= 0:
        return [], 0
    if any(size < 0 for size in sizes):
        raise ValueError("pack sizes must not be negative")

    limit = quantity + max(sizes)
    usable = [(index, size) for index, size in enumerate(sizes) if size > 0]

    reachable = bytearray(limit + 1)
    reachable[0] = 1
    last_pack = [-1] * (limit + 1)

    for total in range(1, limit + 1):
        for index, size in usable:
            if total >= size and reachable[total - size]:
                reachable[total] = 1
                last_pack[total] = index
                break

    best = next(
        (total for total in range(quantity, limit + 1) if reachable[total]),
        None,
    )
    if best is None:
        return [], 0

    counts = [0] * len(sizes)
    total = best
    while total:
        index = last_pack[total]
        counts[index] += 1
        total -= sizes[index]

    packs = [
        PackResult(size=size, count=count)
        for size, count in zip(sizes, counts)
        if count > 0
    ]
    return packs, best


def solve_greedy(quantity: int, sizes: Iterable[int]) -> Solution:
    """Use the largest packs first, then cover any remainder with one more pack.

    The result lists sizes in descending order.
    """
    ordered = sorted(sizes, reverse=True)
    if quantity <= 0:
        return [], 0
    if not ordered:
        raise ValueError("no pack sizes available")
    _require_positive(ordered)

    remaining = quantity
    pack_counts: dict[int, int] = {}
    for size in ordered:
        count = remaining // size
        pack_counts[size] = count
        remaining -= count * size

    while remaining > 0:
        fitting = next((size for size in ordered if size >= remaining), None)
        if fitting is None:
            break
        pack_counts[fitting] += 1
        remaining -= fitting

    packs: list[PackResult] = []
    total = 0
    for size in ordered:
        count = pack_counts[size]
        if count > 0:
            packs.append(PackResult(size=size, count=count))
            total += size * count
    return packs, total


def solve_pack_distribution_dfs(quantity: int, sizes: Iterable[int]) -> Solution:
    """Search every combination depth first for the smallest covering total.

    Exhaustive and exponential; meant for small inputs. Packs are reported
    in the order of ``sizes``.
    """
    sizes = list(sizes)
    _require_positive(sizes)

    best: list[PackResult] | None = None
    best_total: int | None = None

    def search(index: int, remaining: int, current_total: int,
               path: tuple[PackResult, ...]) -> None:
        nonlocal best, best_total
        if remaining <= 0:
            if best_total is None or current_total < best_total:
                best_total = current_total
                best = list(path)
            return
        if index == len(sizes):
            return
        size = sizes[index]
        max_count = -(-remaining // size)
        for count in range(max_count + 1):
            step = (PackResult(size=size, count=count),) if count else ()
            search(index + 1, remaining - count * size,
                   current_total + count * size, path + step)

    search(0, quantity, 0, ())

    if best is None or best_total is None:
        return [], 0
    return best, best_total