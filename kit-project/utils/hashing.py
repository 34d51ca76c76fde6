# What it does: The content address type, a 20-byte SHA-1 digest with canonical hex encoding
# How it does: Wraps the raw digest bytes in an immutable value object; equality and hashing go through the bytes
# What data structure it uses: Fixed-width byte string (20 bytes), usable as a dictionary key

import hashlib
import string

from .errors import InvalidLength, InvalidHex

DIGEST_SIZE = 20
HEX_SIZE = DIGEST_SIZE * 2

_HEX_DIGITS = frozenset(string.hexdigits)


class HashAddress:
    """The SHA-1 address of a framed object.

    Addresses are plain values: they can be copied, compared, hashed and
    used as dict keys. ``str(address)`` is the lower-case hex form.
    """

    __slots__ = ('_raw',)

    def __init__(self, raw):
        raw = memoryview(raw).tobytes()
        if len(raw) != DIGEST_SIZE:
            raise InvalidLength(len(raw))
        self._raw = raw

    @classmethod
    def from_bytes(cls, raw):
        return cls(raw)

    @classmethod
    def from_hex(cls, text):
        if not isinstance(text, str) or len(text) != HEX_SIZE or not _HEX_DIGITS.issuperset(text):
            raise InvalidHex(text)
        return cls(bytes.fromhex(text))

    @classmethod
    def of(cls, data): # Digest of a full frame
        return cls(hashlib.sha1(data).digest())

    @property
    def raw(self):
        return self._raw

    def hex(self):
        return self._raw.hex()

    def split(self): # Fan-out key: (2-char directory, 38-char file name)
        hex_value = self.hex()
        return hex_value[:2], hex_value[2:]

    def short(self, length=7):
        return self.hex()[:length]

    def __bytes__(self):
        return self._raw

    def __str__(self):
        return self.hex()

    def __repr__(self):
        return f"HashAddress('{self.hex()}')"

    def __eq__(self, other):
        if isinstance(other, HashAddress):
            return self._raw == other._raw
        return NotImplemented

    def __hash__(self):
        return hash(self._raw)

    def __setattr__(self, name, value):
        if hasattr(self, '_raw'):
            raise AttributeError("HashAddress is immutable")
        object.__setattr__(self, name, value)


def as_address(value): # Accepts a HashAddress or its hex string
    if isinstance(value, HashAddress):
        return value
    return HashAddress.from_hex(value)
