"""Slug de-duplication strategies.

Responsibilities:
- Append counter, hash, timestamp or random suffixes to a base slug.
- Track emitted slugs in a caller-owned store or an explicit `CounterStore`.
- Keep suffixed slugs within the configured maximum length.

Store access is serialized with locks, so one generator can be shared by
threads of a single process. Nothing here coordinates separate processes.
"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping, MutableSet
import hashlib
import random
import string
import threading
import time
from typing import TYPE_CHECKING

from .models.datatypes import UniqueSlug

if TYPE_CHECKING:
    from .config import UniquenessOptions

_RANDOM_ALPHABET = string.digits + string.ascii_lowercase
_RANDOM_TOKEN_LENGTH = 6


class CounterStore:
    """Lock-guarded emission counts keyed by base slug."""

    def __init__(self) -> None:
        """Initialize an empty counter table."""

        self._counts: dict[str, int] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        """Return the number of tracked base slugs."""

        with self._lock:
            return len(self._counts)

    def increment(self, key: str) -> int:
        """Record one emission of `key` and return its running count."""

        with self._lock:
            count = self._counts.get(key, 0) + 1
            self._counts[key] = count
            return count

    def get(self, key: str) -> int:
        """Return how many times `key` was emitted."""

        with self._lock:
            return self._counts.get(key, 0)

    def clear(self) -> None:
        """Forget every tracked slug."""

        with self._lock:
            self._counts.clear()


def _strip_trailing(text: str, separator: str) -> str:
    """Drop trailing separators left behind by shortening."""

    if not separator:
        return text
    while text.endswith(separator):
        text = text[: -len(separator)]
    return text


def join_suffix(base: str, suffix: str, separator: str, max_length: int | None) -> str:
    """Append `suffix` to `base`, shortening the base so the result fits `max_length`."""

    if not base:
        return suffix if max_length is None else suffix[:max_length]

    tail = f"{separator}{suffix}"
    if max_length is not None and len(base) + len(tail) > max_length:
        room = max_length - len(tail)
        if room <= 0:
            return suffix[:max_length]
        base = _strip_trailing(base[:room], separator)
        if not base:
            return suffix[:max_length]
    return base + tail


class UniquenessGenerator:
    """Disambiguate slugs according to a `UniquenessOptions` strategy.

    Args:
        counters: Fallback table used by the counter strategy without a store.
        clock: Returns the current time in seconds; injectable for tests.
        rng: Random source for the random strategy.
    """

    def __init__(
        self,
        counters: CounterStore,
        *,
        clock: Callable[[], float] = time.time,
        rng: random.Random | None = None,
    ) -> None:
        self._counters = counters
        self._clock = clock
        self._rng = rng or random.SystemRandom()
        self._store_lock = threading.Lock()

    @property
    def counters(self) -> CounterStore:
        """Return the fallback counter table."""

        return self._counters

    def generate(
        self,
        base: str,
        options: UniquenessOptions,
        *,
        separator: str = "-",
        max_length: int | None = None,
    ) -> UniqueSlug:
        """Return `base` made unique with the configured strategy."""

        strategy = options.strategy
        if strategy == "none":
            return UniqueSlug(slug=base)
        if strategy == "counter":
            return self._generate_counter(base, options, separator, max_length)
        if strategy == "hash":
            digest = hashlib.sha256(f"{base}{self._clock()}".encode("utf-8")).hexdigest()
            token = digest[: options.hash_length]
            return UniqueSlug(
                slug=join_suffix(base, token, separator, max_length),
                unique_id=token,
            )
        if strategy == "timestamp":
            millis = int(self._clock() * 1000)
            return UniqueSlug(
                slug=join_suffix(base, str(millis), separator, max_length),
                unique_id=millis,
            )
        if strategy == "random":
            token = "".join(
                self._rng.choice(_RANDOM_ALPHABET) for _ in range(_RANDOM_TOKEN_LENGTH)
            )
            return UniqueSlug(
                slug=join_suffix(base, token, separator, max_length),
                unique_id=token,
            )
        raise ValueError(f"Unsupported uniqueness strategy `{strategy}`.")

    def _generate_counter(
        self,
        base: str,
        options: UniquenessOptions,
        separator: str,
        max_length: int | None,
    ) -> UniqueSlug:
        """Apply the counter strategy against the configured store."""

        store = options.store
        if isinstance(store, MutableMapping):
            with self._store_lock:
                count = int(store.get(base, 0)) + 1
                store[base] = count
            return self._counted(base, count, separator, max_length)

        if isinstance(store, MutableSet):
            with self._store_lock:
                if base not in store:
                    store.add(base)
                    return UniqueSlug(slug=base)
                # More probes than stored slugs means candidates collapse under max_length.
                probes = len(store) + 1
                for counter in range(1, probes + 1):
                    candidate = join_suffix(base, str(counter), separator, max_length)
                    if candidate not in store:
                        store.add(candidate)
                        return UniqueSlug(slug=candidate, unique_id=counter)
                # Every candidate fitting max_length is taken; reuse the hard-cut one.
                return UniqueSlug(
                    slug=join_suffix(base, str(probes), separator, max_length),
                    unique_id=probes,
                )

        return self._counted(base, self._counters.increment(base), separator, max_length)

    @staticmethod
    def _counted(
        base: str,
        count: int,
        separator: str,
        max_length: int | None,
    ) -> UniqueSlug:
        """Leave the first emission bare and suffix later ones with their count."""

        if count == 1:
            return UniqueSlug(slug=base)
        return UniqueSlug(
            slug=join_suffix(base, str(count), separator, max_length),
            unique_id=count,
        )
