import pytest

from dungeoncrawl import randomness
from dungeoncrawl.randomness import probability, randint, random_choice, seed, shuffle


def test_randint_stays_in_range_and_hits_both_ends():
    seed(3)
    values = {randint(2, 5) for _ in range(500)}
    assert values == {2, 3, 4, 5}


@pytest.mark.parametrize("low, high", [(5, 5), (6, 2)])
def test_randint_rejects_empty_range(low, high):
    with pytest.raises(ValueError, match="min must be less than max"):
        randint(low, high)


def test_probability_extremes():
    assert not any(probability(0) for _ in range(200))
    assert all(probability(100) for _ in range(200))


def test_probability_rejects_negative():
    with pytest.raises(ValueError, match="percentage must be positive"):
        probability(-1)


def test_random_choice_empty_raises():
    with pytest.raises(ValueError, match="Container is empty"):
        random_choice([])


def test_random_choice_single_and_members():
    assert random_choice(["only"]) == "only"
    options = ["a", "b", "c"]
    assert all(random_choice(options) in options for _ in range(50))
    members = {10, 20, 30}
    assert all(random_choice(members) in members for _ in range(50))


def test_random_choice_on_mapping_returns_items():
    graph = {1: "one", 2: "two", 3: "three"}
    for _ in range(30):
        key, value = random_choice(graph)
        assert graph[key] == value


def test_shuffle_keeps_elements():
    items = list(range(20))
    shuffle(items)
    assert sorted(items) == list(range(20))


def test_seed_reproduces_sequence():
    seed(42)
    first = [randomness.randint(0, 1000) for _ in range(10)]
    seed(42)
    second = [randomness.randint(0, 1000) for _ in range(10)]
    assert first == second