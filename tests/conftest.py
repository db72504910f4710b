import pytest

from pairenc import ibe
from pairenc.rand import SeededRandomSource

ALICE_IDENTITY = "alice@example.com"
BOB_IDENTITY = "bob@example.com"


@pytest.fixture
def rng():
    return SeededRandomSource(b"pairenc tests")


@pytest.fixture(scope="session")
def master():
    """(master_secret, public_params) shared by the whole test run."""
    return ibe.setup(rng=SeededRandomSource(b"master"))
