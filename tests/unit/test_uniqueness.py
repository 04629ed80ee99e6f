"""Unit tests for slug de-duplication strategies."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import random

from better_slug.config import UniquenessOptions
from better_slug.uniqueness import CounterStore, UniquenessGenerator, join_suffix


def _generator(clock_value: float = 1_700_000_000.5) -> UniquenessGenerator:
    """Build a generator with a fixed clock and seeded random source."""

    return UniquenessGenerator(
        CounterStore(),
        clock=lambda: clock_value,
        rng=random.Random(7),
    )


def test_counter_with_mapping_store_emits_base_then_numbered() -> None:
    """A fresh mapping store should yield base, base-2, base-3."""

    store: dict[str, int] = {}
    options = UniquenessOptions(strategy="counter", store=store)
    generator = _generator()

    slugs = [generator.generate("post", options).slug for _ in range(3)]

    assert slugs == ["post", "post-2", "post-3"]
    assert store == {"post": 3}


def test_counter_with_set_store_probes_for_unused_candidate() -> None:
    """A set store should return the first unused base-N candidate."""

    store = {"post", "post-1"}
    result = _generator().generate("post", UniquenessOptions(store=store))

    assert result.slug == "post-2"
    assert result.unique_id == 2
    assert "post-2" in store


def test_counter_with_set_store_returns_unused_base() -> None:
    """An unused base should be returned bare and recorded."""

    store: set[str] = set()
    result = _generator().generate("fresh", UniquenessOptions(store=store))

    assert result.slug == "fresh"
    assert result.unique_id is None
    assert store == {"fresh"}


def test_counter_without_store_uses_counter_table() -> None:
    """Without a caller store the explicit counter table should track emissions."""

    counters = CounterStore()
    generator = UniquenessGenerator(counters)
    options = UniquenessOptions(strategy="counter")

    assert generator.generate("a", options).slug == "a"
    assert generator.generate("a", options).slug == "a-2"
    assert counters.get("a") == 2


def test_counter_table_is_safe_under_threads() -> None:
    """Concurrent increments should never hand out the same count twice."""

    counters = CounterStore()
    with ThreadPoolExecutor(max_workers=8) as executor:
        counts = list(executor.map(lambda _: counters.increment("x"), range(200)))

    assert sorted(counts) == list(range(1, 201))


def test_hash_strategy_uses_configured_length() -> None:
    """The hash suffix should be a hex digest cut to `hash_length`."""

    result = _generator().generate("post", UniquenessOptions(strategy="hash", hash_length=8))

    token = result.slug.split("-")[-1]
    assert len(token) == 8
    assert int(token, 16) >= 0
    assert result.unique_id == token


def test_timestamp_strategy_appends_milliseconds() -> None:
    """The timestamp suffix should be the clock in integer milliseconds."""

    result = _generator(1_700_000_000.5).generate("post", UniquenessOptions(strategy="timestamp"))

    assert result.slug == "post-1700000000500"
    assert result.unique_id == 1700000000500


def test_random_strategy_appends_base36_token() -> None:
    """The random suffix should be six lower-case base-36 characters."""

    result = _generator().generate("post", UniquenessOptions(strategy="random"))

    token = str(result.unique_id)
    assert result.slug == f"post-{token}"
    assert len(token) == 6
    assert token.isalnum() and token == token.lower()


def test_join_suffix_shortens_base_to_fit_max_length() -> None:
    """The base should be shortened so the suffixed slug fits."""

    assert join_suffix("hello-world", "2", "-", 12) == "hello-worl-2"
    assert join_suffix("hello-world", "2", "-", 8) == "hello-2"
    assert join_suffix("", "abc", "-", None) == "abc"


def test_counter_suffix_respects_max_length() -> None:
    """Counter suffixes should never push a slug over the limit."""

    store: dict[str, int] = {}
    options = UniquenessOptions(store=store)
    generator = _generator()

    generator.generate("abcdef", options, max_length=6)
    second = generator.generate("abcdef", options, max_length=6)

    assert second.slug == "abcd-2"


def test_set_store_falls_back_to_hard_cut_when_candidates_collapse() -> None:
    """When every candidate collapses under the limit, a hard-cut slug is returned."""

    store = {"a", *(str(counter) for counter in range(1, 10))}

    result = _generator().generate("a", UniquenessOptions(store=store), max_length=1)

    assert result.slug == "1"
    assert result.unique_id == 11
    assert len(store) == 10


def test_none_strategy_returns_base() -> None:
    """The none strategy should leave the slug untouched."""

    assert _generator().generate("post", UniquenessOptions(strategy="none")).slug == "post"
