"""Locality-sensitive hashing for approximate nearest-neighbour search.

Keys are vectors compared by cosine distance. Binary hash functions of the
form ``sign(<w, x>)`` with random unit ``w`` are concatenated into integer
codes, and keys are bucketed by code in several hash tables.
"""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from dsbasics.hash_table import HashTable

__all__ = [
    "DATA_DIM",
    "CODE_BITS",
    "LSHFamily",
    "LSHResult",
    "LSHTable",
    "sample_unit_vector",
    "sample_dataset",
    "cosine_distance",
    "sample_lsh_function",
    "sample_amplified_lsh_function",
    "naive_retrieve",
    "benchmark",
    "main",
]

DATA_DIM = 3
CODE_BITS = 32
DATASET_SIZE = 10_000
QUERYSET_SIZE = 1_000
RANDOM_SEED = 0

Vector = Sequence[float]
LSHFunction = Callable[[Vector], int]

_default_rng = random.Random(RANDOM_SEED)


def _rng_or_default(rng: random.Random | None) -> random.Random:
    return _default_rng if rng is None else rng


def sample_unit_vector(
    rng: random.Random | None = None, dim: int = DATA_DIM
) -> tuple[float, ...]:
    """Sample a vector uniformly on the unit hypersphere of ``dim`` dimensions."""
    rng = _rng_or_default(rng)
    vec = [rng.gauss(0.0, 1.0) for _ in range(dim)]
    norm = math.sqrt(sum(x * x for x in vec))
    return tuple(x / norm for x in vec)


def sample_dataset(
    num_data: int, rng: random.Random | None = None, dim: int = DATA_DIM
) -> list[tuple[float, ...]]:
    """Sample ``num_data`` unit vectors."""
    rng = _rng_or_default(rng)
    return [sample_unit_vector(rng, dim) for _ in range(num_data)]


def cosine_distance(vec1: Vector, vec2: Vector) -> float:
    """Cosine distance ``1 - cos(angle)`` between two non-zero vectors."""
    xnorm2 = ynorm2 = dot = 0.0
    for x, y in zip(vec1, vec2, strict=True):
        xnorm2 += x * x
        ynorm2 += y * y
        dot += x * y
    den = math.sqrt(xnorm2 * ynorm2)
    if den == 0:
        raise ValueError("cosine distance is undefined for zero vectors")
    return 1 - dot / den


def sample_lsh_function(
    rng: random.Random | None = None, dim: int = DATA_DIM
) -> LSHFunction:
    """Sample a binary hash ``x -> 1 if <w, x> >= 0 else 0`` with random unit ``w``."""
    weights = sample_unit_vector(rng, dim)

    def lsh(vec: Vector) -> int:
        dot = sum(w * x for w, x in zip(weights, vec))
        return 1 if dot >= 0 else 0

    return lsh


def sample_amplified_lsh_function(
    r: int, rng: random.Random | None = None, dim: int = DATA_DIM
) -> LSHFunction:
    """Sample a hash concatenating ``r`` binary hashes into an ``r``-bit code."""
    if not 1 <= r <= CODE_BITS:
        raise ValueError(f"amplification {r} outside range 1..{CODE_BITS}")
    rng = _rng_or_default(rng)
    functions = [sample_lsh_function(rng, dim) for _ in range(r)]

    def amplified(vec: Vector) -> int:
        code = 0
        for function in functions:
            code = (code << 1) | function(vec)
        return code

    return amplified


@dataclass
class LSHFamily:
    """A family of amplified LSH functions; calling it samples one."""

    amplification: int
    rng: random.Random | None = field(default=None, repr=False)
    dim: int = DATA_DIM

    def __call__(self) -> LSHFunction:
        return sample_amplified_lsh_function(self.amplification, self.rng, self.dim)


@dataclass
class LSHResult:
    """Outcome of a retrieval: best distance, matching key, comparisons made."""

    distance: float = math.inf
    key: Any = None
    num_comparisons: int = 0


def _identity(code: int) -> int:
    return code


class LSHTable:
    """Several hash tables, each bucketing keys by a sampled LSH code."""

    def __init__(
        self,
        num_chains: int,
        num_tables: int,
        lsh_family: Callable[[], LSHFunction],
    ) -> None:
        self._tables = [HashTable(num_chains, _identity) for _ in range(num_tables)]
        self._functions = [lsh_family() for _ in range(num_tables)]

    def insert(self, key: Vector) -> None:
        """Add ``key`` to every table under its code."""
        for table, function in zip(self._tables, self._functions):
            code = function(key)
            bucket = table.get(code)
            if bucket is None:
                table.insert(code, [key])
            else:
                bucket.append(key)

    def get(self, query: Vector, m: int = 1, tau: float = 0.0) -> LSHResult:
        """Search for a key within distance ``tau`` of ``query``.

        At most ``m`` comparisons are made; the closest key seen is returned
        even if it is farther than ``tau``. With no candidate at all, the
        distance is infinite and the key is ``None``.
        """
        result = LSHResult()
        for table, function in zip(self._tables, self._functions):
            bucket = table.get(function(query))
            if bucket is None:
                continue
            for key in bucket:
                distance = cosine_distance(key, query)
                if distance < result.distance:
                    result.distance = distance
                    result.key = key
                result.num_comparisons += 1
                if result.num_comparisons >= m:
                    return result
                if result.distance <= tau:
                    break
        return result


def naive_retrieve(dataset: Iterable[Vector], query: Vector) -> LSHResult:
    """Find the closest key by scanning the whole dataset."""
    result = LSHResult(num_comparisons=1)
    for key in dataset:
        d = cosine_distance(key, query)
        result.num_comparisons += 1
        if d < result.distance:
            result.distance = d
            result.key = key
    return result


def benchmark(
    queries: Iterable[Vector], get: Callable[[Vector], float]
) -> tuple[float, float, float]:
    """Mean and variance of finite distances returned by ``get``, and the success rate."""
    total = total2 = 0.0
    n = nok = 0
    for query in queries:
        distance = get(query)
        if math.isfinite(distance):
            total += distance
            total2 += distance * distance
            nok += 1
        n += 1
    mean = total / nok if nok else math.nan
    variance = total2 / nok - mean * mean if nok else math.nan
    rate = nok / n if n else math.nan
    return mean, variance, rate


def _cell(value: Any, width: int, spec: str, right: bool = False) -> str:
    text = format(value, spec) if isinstance(value, float) else str(value)
    return text.rjust(width) if right else text.ljust(width)


def _row(nt, nc, r, sp, mean, stddev, rate, rel) -> str:
    return (
        "| " + _cell(nt, 7, "")
        + " | " + _cell(nc, 7, "")
        + " | " + _cell(r, 7, "")
        + " | " + _cell(mean, 10, ".3g")
        + " " + _cell(stddev, 10, ".3g")
        + " | " + _cell(sp, 7, ".1g")
        + " | " + _cell(rate, 6, ".1f", right=True)
        + " | " + _cell(rel, 6, ".1f", right=True)
        + "|"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Compare LSH retrieval against a linear scan and print a results table."""
    parser = argparse.ArgumentParser(description="Benchmark LSH retrieval.")
    parser.add_argument("--dataset-size", type=int, default=DATASET_SIZE)
    parser.add_argument("--queryset-size", type=int, default=QUERYSET_SIZE)
    parser.add_argument("--seed", type=int, default=RANDOM_SEED)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    dataset = sample_dataset(args.dataset_size, rng)
    queries = sample_dataset(args.queryset_size, rng)
    sqrt_queries = math.sqrt(args.queryset_size)

    print(_row("#tables", "#comp.", "amplif.", "speedup", "distance", "(stddev)", "succ.", "rel d."))
    print(_row("-", "-", "-", "-", "-", "", "-", "-"))

    mean, variance, rate = benchmark(
        queries, lambda query: naive_retrieve(dataset, query).distance
    )
    print(_row("-", args.dataset_size, "-", 1, mean, variance / sqrt_queries, rate, 1))
    best = mean

    for num_comparisons in (1, 10, 100, 1000):
        for num_tables in (1, 2, 3):
            for amplification in (1, 4, 8, 16, 32):
                num_chains = min(1 << amplification, 256)
                table = LSHTable(num_chains, num_tables, LSHFamily(amplification, rng))
                for key in dataset:
                    table.insert(key)
                mean, variance, rate = benchmark(
                    queries,
                    lambda query: table.get(query, num_comparisons, 0.0).distance,
                )
                print(
                    _row(
                        num_tables,
                        num_comparisons,
                        amplification,
                        args.dataset_size / num_comparisons,
                        mean,
                        variance / sqrt_queries,
                        rate * 100,
                        mean / best,
                    )
                )
    return 0