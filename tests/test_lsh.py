import math
import random
import statistics

import pytest

from dsbasics.lsh import (
    LSHFamily,
    LSHResult,
    LSHTable,
    benchmark,
    cosine_distance,
    main,
    naive_retrieve,
    sample_amplified_lsh_function,
    sample_dataset,
    sample_lsh_function,
    sample_unit_vector,
)


def test_unit_vector_has_unit_norm():
    rng = random.Random(1)
    for dim in (1, 3, 7):
        vec = sample_unit_vector(rng, dim)
        assert len(vec) == dim
        assert math.sqrt(sum(x * x for x in vec)) == pytest.approx(1.0)


def test_dataset_is_reproducible():
    first = sample_dataset(20, random.Random(5))
    second = sample_dataset(20, random.Random(5))
    assert first == second
    assert len(first) == 20


def test_cosine_distance_known_angles():
    assert cosine_distance((1.0, 0.0, 0.0), (2.0, 0.0, 0.0)) == pytest.approx(0.0)
    assert cosine_distance((1.0, 0.0, 0.0), (0.0, 3.0, 0.0)) == pytest.approx(1.0)
    assert cosine_distance((1.0, 1.0, 0.0), (-1.0, -1.0, 0.0)) == pytest.approx(2.0)


def test_cosine_distance_zero_vector_raises():
    with pytest.raises(ValueError):
        cosine_distance((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))


def test_binary_lsh_splits_opposite_vectors():
    rng = random.Random(2)
    function = sample_lsh_function(rng)
    for vec in sample_dataset(30, rng):
        negated = tuple(-x for x in vec)
        assert function(vec) + function(negated) == 1


@pytest.mark.parametrize("r", [1, 4, 16, 32])
def test_amplified_code_fits_and_flips(r):
    rng = random.Random(3)
    function = sample_amplified_lsh_function(r, rng)
    for vec in sample_dataset(20, rng):
        code = function(vec)
        assert 0 <= code < 2**r
        negated = tuple(-x for x in vec)
        assert code ^ function(negated) == 2**r - 1


@pytest.mark.parametrize("r", [0, 33])
def test_amplification_out_of_range(r):
    with pytest.raises(ValueError):
        sample_amplified_lsh_function(r, random.Random(0))


def test_family_samples_functions_of_given_width():
    family = LSHFamily(8, random.Random(4))
    function = family()
    codes = {function(v) for v in sample_dataset(50, random.Random(6))}
    assert all(0 <= code < 2**8 for code in codes)


def test_empty_table_finds_nothing():
    table = LSHTable(16, 2, LSHFamily(4, random.Random(0)))
    result = table.get((1.0, 0.0, 0.0), m=10)
    assert result == LSHResult(math.inf, None, 0)


def test_query_of_stored_key_finds_it():
    rng = random.Random(7)
    dataset = sample_dataset(100, rng)
    table = LSHTable(256, 2, LSHFamily(8, rng))
    for key in dataset:
        table.insert(key)
    query = dataset[42]
    result = table.get(query, m=1000, tau=0.0)
    assert result.key == query
    assert result.distance == pytest.approx(0.0, abs=1e-12)
    assert 1 <= result.num_comparisons <= 1000


def test_comparison_budget_is_respected():
    rng = random.Random(8)
    dataset = sample_dataset(200, rng)
    table = LSHTable(2, 3, LSHFamily(1, rng))
    for key in dataset:
        table.insert(key)
    for query in sample_dataset(10, rng):
        result = table.get(query, m=5, tau=0.0)
        assert result.num_comparisons == 5
        assert result.key in dataset
        assert result.distance == pytest.approx(cosine_distance(result.key, query))


def test_lsh_never_beats_linear_scan():
    rng = random.Random(9)
    dataset = sample_dataset(150, rng)
    table = LSHTable(16, 2, LSHFamily(4, rng))
    for key in dataset:
        table.insert(key)
    for query in sample_dataset(10, rng):
        approx = table.get(query, m=50)
        exact = naive_retrieve(dataset, query)
        assert exact.distance <= approx.distance


def test_naive_retrieve_finds_minimum():
    rng = random.Random(10)
    dataset = sample_dataset(40, rng)
    query = sample_unit_vector(rng)
    result = naive_retrieve(dataset, query)
    distances = [cosine_distance(key, query) for key in dataset]
    assert result.distance == min(distances)
    assert result.key == dataset[distances.index(min(distances))]
    assert result.num_comparisons == len(dataset) + 1


def test_benchmark_statistics():
    values = {(0.0,): 0.5, (1.0,): 1.5, (2.0,): 2.5, (3.0,): math.inf}
    mean, variance, rate = benchmark(list(values), lambda q: values[q])
    finite = [0.5, 1.5, 2.5]
    assert mean == pytest.approx(statistics.mean(finite))
    assert variance == pytest.approx(statistics.pvariance(finite))
    assert rate == pytest.approx(len(finite) / len(values))


def test_benchmark_without_successes_is_nan():
    mean, variance, rate = benchmark([(0.0,)], lambda q: math.inf)
    assert math.isnan(mean)
    assert math.isnan(variance)
    assert rate == 0.0


def test_main_prints_table(capsys):
    args = ["--dataset-size", "40", "--queryset-size", "5", "--seed", "1"]
    assert main(args) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3 + 4 * 3 * 5
    assert lines[0].startswith("| #tables | #comp.  | amplif. | distance")
    assert all(line.startswith("| ") and line.endswith("|") for line in lines)
    assert len({len(line) for line in lines[2:]}) == 1


def test_main_is_reproducible(capsys):
    args = ["--dataset-size", "30", "--queryset-size", "4", "--seed", "2"]
    main(args)
    first = capsys.readouterr().out
    main(args)
    second = capsys.readouterr().out
    assert first == second