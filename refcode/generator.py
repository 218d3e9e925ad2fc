import logging
from random import Random
from typing import Callable, Iterator

from .charset import Alphabet, resolve
from .config import CodeConfig
from .errors import ExhaustedAlphabetError
from .pattern import Pattern

_LOGGER = logging.getLogger(__name__)

IndexSource = Callable[[int], int]
"""Returns a uniformly distributed integer in `[0, bound)`."""

DEFAULT_MAX_REDRAWS = 10_000


def _bounded_capacity(alphabet_size: int, total_length: int, limit: int) -> int:
    """
    `alphabet_size ** total_length`, but computation stops as soon as `limit`
    is reached so long patterns don't produce enormous integers. The result is
    exact whenever it's below `limit`.
    """
    if alphabet_size == 1:
        return 1

    capacity = 1
    for _ in range(total_length):
        capacity *= alphabet_size
        if capacity >= limit:
            break
    return capacity


def _has_capacity(alphabet_size: int, total_length: int, count: int) -> bool:
    return _bounded_capacity(alphabet_size, total_length, count) >= count


def _iter_distinct_indices(
    capacity: int, count: int, next_index: IndexSource
) -> Iterator[int]:
    # partial Fisher-Yates shuffle of range(capacity), only the touched slots
    # are stored
    swapped: dict[int, int] = {}
    for i in range(count):
        j = i + next_index(capacity - i)
        picked = swapped.get(j, j)
        swapped[j] = swapped.get(i, i)
        yield picked


class _CodeDrawer:
    _alphabet: Alphabet
    _pattern: Pattern
    _prefix: str
    _postfix: str
    _next_index: IndexSource

    def __init__(self, config: CodeConfig, next_index: IndexSource | None) -> None:
        self._alphabet = resolve(config.charset)
        self._pattern = config.pattern
        self._prefix = config.prefix
        self._postfix = config.postfix
        if next_index is None:
            # private rng per call, never share one between threads
            next_index = Random().randrange
        self._next_index = next_index

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def next_index(self) -> IndexSource:
        return self._next_index

    def _finish(self, symbols: list[str]) -> str:
        return self._prefix + self._pattern.render(symbols) + self._postfix

    def draw(self) -> str:
        bound = len(self._alphabet)
        symbols = [
            self._alphabet[self._next_index(bound)]
            for _ in range(self._pattern.total_length())
        ]
        return self._finish(symbols)

    def code_at(self, index: int) -> str:
        """
        The code numbered `index` when all possible codes are counted in
        alphabet order, first position most significant.
        """
        base = len(self._alphabet)
        symbols: list[str] = []
        for _ in range(self._pattern.total_length()):
            index, digit = divmod(index, base)
            symbols.append(self._alphabet[digit])
        symbols.reverse()
        return self._finish(symbols)


def generate_one(config: CodeConfig, *, next_index: IndexSource | None = None) -> str:
    return _CodeDrawer(config, next_index).draw()


def generate(
    config: CodeConfig,
    *,
    next_index: IndexSource | None = None,
    max_redraws: int = DEFAULT_MAX_REDRAWS,
) -> list[str]:
    """
    Generate `config.count` pairwise distinct codes.

    While the batch needs at most half of all possible codes, duplicates are
    rejected and drawn again. Denser batches are sampled without replacement
    from the numbered codes instead, so every feasible batch completes.

    Raises `ExhaustedAlphabetError` if the alphabet and pattern can't represent
    enough distinct codes, or if more than `max_redraws` duplicates are drawn
    in a row. Nothing is returned in that case, not even the codes generated
    so far.
    """
    if max_redraws < 0:
        raise ValueError("max_redraws must not be negative")

    drawer = _CodeDrawer(config, next_index)
    total_length = config.pattern.total_length()
    # exact whenever it's below 2 * count
    capacity = _bounded_capacity(
        len(drawer.alphabet), total_length, 2 * config.count
    )
    if capacity < config.count:
        raise ExhaustedAlphabetError(
            f"{len(drawer.alphabet)} symbols over {total_length} positions "
            f"can't produce {config.count} distinct codes"
        )

    _LOGGER.debug(
        "generating %d codes from %d symbols over %d positions",
        config.count,
        len(drawer.alphabet),
        total_length,
    )

    if capacity < 2 * config.count:
        _LOGGER.debug(
            "batch covers %d of %d possible codes, sampling without replacement",
            config.count,
            capacity,
        )
        return [
            drawer.code_at(index)
            for index in _iter_distinct_indices(
                capacity, config.count, drawer.next_index
            )
        ]

    codes: list[str] = []
    seen: set[str] = set()
    total_redraws = 0
    while len(codes) < config.count:
        code = drawer.draw()
        redraws = 0
        while code in seen:
            redraws += 1
            if redraws > max_redraws:
                raise ExhaustedAlphabetError(
                    f"gave up after {max_redraws} duplicate draws in a row "
                    f"with {len(codes)} of {config.count} codes generated"
                )
            code = drawer.draw()

        total_redraws += redraws
        seen.add(code)
        codes.append(code)

    if total_redraws:
        _LOGGER.debug("redrew %d duplicate codes", total_redraws)
    return codes


def is_feasible(config: CodeConfig) -> bool:
    """Whether `config.count` distinct codes exist for the config's shape."""
    return _has_capacity(
        len(resolve(config.charset)), config.pattern.total_length(), config.count
    )


def is_valid_code(config: CodeConfig, code: str) -> bool:
    """Whether `code` could have been generated from `config`."""
    if not code.startswith(config.prefix):
        return False
    code = code[len(config.prefix) :]
    if config.postfix:
        if not code.endswith(config.postfix):
            return False
        code = code[: -len(config.postfix)]

    symbols = config.pattern.extract_symbols(code)
    if symbols is None:
        return False

    alphabet = set(resolve(config.charset))
    return all(symbol in alphabet for symbol in symbols)


__all__ = [
    "IndexSource",
    "DEFAULT_MAX_REDRAWS",
    generate_one.__name__,
    generate.__name__,
    is_feasible.__name__,
    is_valid_code.__name__,
]
