import secrets

import pytest

from pairenc import ibe
from pairenc.errors import EntropyUnavailable
from pairenc.params import CURVE_ORDER
from pairenc.rand import RandomSource, SeededRandomSource


class CountingSource(RandomSource):
    def __init__(self, block_size=32):
        super().__init__(block_size)
        self.draws = 0

    def _draw(self, n):
        self.draws += 1
        return bytes(range(n))


def test_scalar_range():
    for source in (RandomSource(), SeededRandomSource(b"range")):
        for _ in range(100):
            k = source.random_scalar()
            assert 0 <= k < CURVE_ORDER


def test_scalar_range_small_order():
    source = SeededRandomSource(b"small")
    seen = {source.random_scalar(order=7) for _ in range(300)}
    assert seen == set(range(7))


def test_seeded_source_is_deterministic():
    a = SeededRandomSource(b"seed")
    b = SeededRandomSource("seed")
    c = SeededRandomSource(b"other seed")
    scalars_a = [a.random_scalar() for _ in range(5)]
    assert scalars_a == [b.random_scalar() for _ in range(5)]
    assert scalars_a != [c.random_scalar() for _ in range(5)]


def test_buffer_refills_once_per_block():
    source = CountingSource(block_size=32)
    source.getbytes(32)
    assert source.draws == 1
    source.getbyte()
    assert source.draws == 2
    # a scalar consumes 64 bytes: the 31 left in the block plus two more blocks
    source.random_scalar()
    assert source.draws == 4


def test_bytes_are_served_sequentially():
    source = CountingSource(block_size=8)
    assert source.getbytes(10) == bytes(range(8)) + bytes(range(2))


def test_seed_discards_buffer():
    source = CountingSource(block_size=8)
    assert source.getbytes(3) == bytes([0, 1, 2])
    source.seed()
    assert source.draws == 2
    assert source.getbyte() == 0


def test_invalid_block_size():
    with pytest.raises(ValueError):
        RandomSource(block_size=0)


def test_entropy_failure_is_raised(monkeypatch):
    def broken(n):
        raise OSError("no entropy")
    monkeypatch.setattr(secrets, "token_bytes", broken)

    with pytest.raises(EntropyUnavailable):
        RandomSource().random_scalar()
    with pytest.raises(EntropyUnavailable):
        ibe.setup()


def test_short_entropy_read_is_raised():
    class ShortSource(RandomSource):
        def _draw(self, n):
            return bytes(n - 1)

    with pytest.raises(EntropyUnavailable):
        ShortSource().getbyte()
