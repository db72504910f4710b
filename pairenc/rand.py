"""Sources of randomness for scalar generation.

A `RandomSource` buffers a block of OS entropy and hands it out byte by
byte, refilling whenever the block runs out. Setup and Encrypt build a new
source for every call unless one is passed in, so no buffer is ever shared
between calls.
"""

import hashlib
import logging
import secrets

from pairenc.errors import EntropyUnavailable
from pairenc.params import CURVE_ORDER, RANDOM_BLOCK_BYTES, SCALAR_BYTES

logger = logging.getLogger(__name__)


class RandomSource:
    """Buffered OS entropy.

    Parameters
    ----------
    block_size : int, optional
        number of bytes drawn from the OS per refill

    Raises
    ------
    EntropyUnavailable
        from any method that needs fresh bytes when the OS draw fails
    """

    def __init__(self, block_size=RANDOM_BLOCK_BYTES):
        if block_size <= 0:
            raise ValueError("block_size must be positive")
        self.block_size = block_size
        self._buffer = b""
        self._pos = 0

    def _draw(self, n):
        """Draw `n` fresh bytes from the entropy feed."""
        try:
            return secrets.token_bytes(n)
        except (OSError, NotImplementedError) as e:
            logger.warning("OS entropy draw of %d bytes failed: %s", n, e)
            raise EntropyUnavailable("could not read {} bytes of OS entropy".format(n)) from e

    def seed(self):
        """Discard the current buffer and refill it with fresh entropy."""
        block = self._draw(self.block_size)
        if len(block) != self.block_size:
            raise EntropyUnavailable("entropy feed returned {} of {} bytes".format(len(block), self.block_size))
        self._buffer = block
        self._pos = 0

    def getbyte(self):
        if self._pos >= len(self._buffer):
            self.seed()
        byte = self._buffer[self._pos]
        self._pos += 1
        return byte

    def getbytes(self, n):
        return bytes(self.getbyte() for _ in range(n))

    def random_scalar(self, order=CURVE_ORDER):
        """Uniform scalar in [0, `order`).

        Twice as many bytes as the scalar width are reduced modulo `order`,
        which keeps the bias below 2^-256.
        """
        raw = self.getbytes(2 * SCALAR_BYTES)
        return int.from_bytes(raw, "big") % order


class SeededRandomSource(RandomSource):
    """Deterministic stand-in for `RandomSource`.

    The entropy feed is SHA-256 over the seed and a block counter, so two
    sources built from the same seed produce the same scalars. Only meant
    for tests and benchmarks.

    Parameters
    ----------
    seed : bytes or str
        seed material
    block_size : int, optional
        number of bytes produced per refill
    """

    def __init__(self, seed, block_size=RANDOM_BLOCK_BYTES):
        super().__init__(block_size)
        if isinstance(seed, str):
            seed = seed.encode("utf-8")
        self._seed = bytes(seed)
        self._counter = 0

    def _draw(self, n):
        out = b""
        while len(out) < n:
            out += hashlib.sha256(self._seed + self._counter.to_bytes(8, "big")).digest()
            self._counter += 1
        return out[:n]
