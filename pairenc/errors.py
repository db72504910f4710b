"""Exceptions raised by pairenc.

Every public operation raises one of these (or lets a subclass of
`PairencError` propagate) instead of failing inside the group arithmetic.
"""


class PairencError(Exception):
    """Base class for all pairenc errors."""


class InvalidLength(PairencError, ValueError):
    """A key, parameter or ciphertext buffer is shorter than required.

    Parameters
    ----------
    what : str
        name of the offending buffer
    expected : int
        required (exact or minimum) size in bytes
    actual : int
        size that was supplied
    """
    def __init__(self, what, expected, actual):
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__("invalid {} length: need {} bytes, got {}".format(what, expected, actual))


class AttributeCountMismatch(PairencError):
    """ABE ciphertext attribute count differs from the key's attribute count."""
    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__("ciphertext was encrypted under {} attributes but the key holds {}".format(expected, actual))


class DecodeError(PairencError, ValueError):
    """Bytes do not decode to a valid group element."""


class EntropyUnavailable(PairencError):
    """The operating system entropy source could not be read."""


class InvalidAttributes(PairencError, ValueError):
    """Attribute list is empty or longer than the wire format can carry."""
