# Unit tests for utils/hashing.py

import pytest
import hashlib
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'kit-project'))

from utils.hashing import HashAddress, as_address
from utils.errors import InvalidLength, InvalidHex


HELLO_BLOB = 'ce013625030ba8dba906f756967f9e9ca394464a'


class TestFromBytes:
    # Tests for HashAddress.from_bytes()

    def test_accepts_twenty_bytes(self):
        raw = bytes(range(20))
        address = HashAddress.from_bytes(raw)
        assert address.raw == raw
        assert bytes(address) == raw

    @pytest.mark.parametrize('length', [0, 19, 21, 32])
    def test_rejects_other_lengths(self, length):
        with pytest.raises(InvalidLength):
            HashAddress.from_bytes(b'\x00' * length)

    @pytest.mark.parametrize('value', [20, 0, None, 'a' * 20])
    def test_rejects_non_buffers(self, value):
        # An int must not be read as "a zero-filled buffer of that size"
        with pytest.raises(TypeError):
            HashAddress.from_bytes(value)

    def test_accepts_bytearray_and_memoryview(self):
        raw = bytes(range(20))
        assert HashAddress(bytearray(raw)) == HashAddress(memoryview(raw)) == HashAddress(raw)

    def test_invalid_length_is_a_value_error(self):
        with pytest.raises(ValueError):
            HashAddress.from_bytes(b'short')


class TestHex:
    # Tests for hex encoding and decoding

    def test_hex_is_lower_case_forty_chars(self):
        address = HashAddress(b'\xab' * 20)
        assert address.hex() == 'ab' * 20
        assert str(address) == address.hex()

    def test_round_trip(self):
        address = HashAddress.of(b'some framed bytes')
        assert HashAddress.from_hex(address.hex()) == address

    def test_upper_case_is_accepted(self):
        assert HashAddress.from_hex(HELLO_BLOB.upper()).hex() == HELLO_BLOB

    @pytest.mark.parametrize('text', [
        '',
        HELLO_BLOB[:-1],
        HELLO_BLOB + '0',
        'g' + HELLO_BLOB[1:],
        ' ' + HELLO_BLOB[1:],
    ])
    def test_rejects_malformed_hex(self, text):
        with pytest.raises(InvalidHex):
            HashAddress.from_hex(text)

    def test_rejects_non_string(self):
        with pytest.raises(InvalidHex):
            HashAddress.from_hex(None)


class TestValueSemantics:
    # Addresses behave as immutable values

    def test_equality_by_bytes(self):
        assert HashAddress(b'\x01' * 20) == HashAddress(bytearray(b'\x01' * 20))
        assert HashAddress(b'\x01' * 20) != HashAddress(b'\x02' * 20)

    def test_usable_as_dict_key(self):
        mapping = {HashAddress.from_hex(HELLO_BLOB): 'hello'}
        assert mapping[HashAddress.from_hex(HELLO_BLOB)] == 'hello'

    def test_immutable(self):
        address = HashAddress(b'\x01' * 20)
        with pytest.raises(AttributeError):
            address._raw = b'\x02' * 20

    def test_of_is_sha1(self):
        assert HashAddress.of(b'abc').hex() == hashlib.sha1(b'abc').hexdigest()

    def test_split_is_two_and_thirty_eight(self):
        directory, name = HashAddress.from_hex(HELLO_BLOB).split()
        assert directory == 'ce'
        assert name == HELLO_BLOB[2:]
        assert len(name) == 38

    def test_as_address_accepts_both_forms(self):
        address = HashAddress.from_hex(HELLO_BLOB)
        assert as_address(address) is address
        assert as_address(HELLO_BLOB) == address
