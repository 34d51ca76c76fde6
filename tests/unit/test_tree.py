# Unit tests for utils/tree.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'kit-project'))

from utils.tree import (TreeEntry, encode_tree, decode_tree, sort_entries,
                        FILE_MODE, TREE_MODE, EXECUTABLE_MODE)
from utils.hashing import HashAddress
from utils.errors import CorruptTree


HELLO_BLOB = HashAddress.from_hex('ce013625030ba8dba906f756967f9e9ca394464a')
OTHER = HashAddress(b'\x11' * 20)


def entry(name, mode=FILE_MODE, target=HELLO_BLOB):
    return TreeEntry(mode, name, target)


class TestEncode:
    # Tests for encode_tree()

    def test_single_entry_layout(self):
        payload = encode_tree([entry('test.txt')])
        assert payload == b'100644 test.txt\x00' + HELLO_BLOB.raw

    def test_empty_tree(self):
        assert encode_tree([]) == b''

    def test_sorted_by_name(self):
        payload = encode_tree([entry('b'), entry('a', TREE_MODE, OTHER), entry('c')])
        assert [e.name for e in decode_tree(payload)] == ['a', 'b', 'c']

    def test_input_order_does_not_matter(self):
        first = [entry('alpha'), entry('beta', TREE_MODE, OTHER)]
        assert encode_tree(first) == encode_tree(list(reversed(first)))

    def test_byte_wise_ordering(self):
        # Upper case sorts before lower case, and a shorter prefix sorts first
        names = ['b', 'B', 'a.txt', 'a', 'a-b']
        payload = encode_tree([entry(n) for n in names])
        assert [e.name for e in decode_tree(payload)] == ['B', 'a', 'a-b', 'a.txt', 'b']

    def test_non_ascii_names_sort_by_utf8_bytes(self):
        payload = encode_tree([entry('é'), entry('z')])
        assert [e.name for e in decode_tree(payload)] == ['z', 'é']

    def test_address_is_raw_not_hex(self):
        payload = encode_tree([entry('f')])
        assert HELLO_BLOB.hex().encode() not in payload
        assert len(payload) == len(b'100644 f\x00') + 20

    @pytest.mark.parametrize('name', ['', 'a/b', 'nul\x00name'])
    def test_rejects_invalid_names(self, name):
        with pytest.raises(ValueError):
            encode_tree([entry(name)])

    def test_rejects_duplicate_names(self):
        with pytest.raises(ValueError):
            encode_tree([entry('same'), entry('same', TREE_MODE, OTHER)])


class TestDecode:
    # Tests for decode_tree()

    def test_round_trip_equals_sorted_input(self):
        entries = [
            entry('src', TREE_MODE, OTHER),
            entry('README.md'),
            entry('run.sh', EXECUTABLE_MODE, OTHER),
        ]
        assert decode_tree(encode_tree(entries)) == sort_entries(entries)

    def test_entry_fields(self):
        (decoded,) = decode_tree(b'40000 docs\x00' + OTHER.raw)
        assert decoded.mode == TREE_MODE
        assert decoded.name == 'docs'
        assert decoded.target == OTHER
        assert decoded.is_tree
        assert decoded.obj_type == 'tree'

    def test_address_bytes_may_contain_nul_and_space(self):
        # The 20 bytes after the NUL are consumed unconditionally
        target = HashAddress(b'\x00 \x00 ' * 5)
        payload = encode_tree([entry('a', target=target), entry('b')])
        assert [e.target for e in decode_tree(payload)] == [target, HELLO_BLOB]

    def test_names_with_spaces(self):
        (decoded,) = decode_tree(encode_tree([entry('my file.txt')]))
        assert decoded.name == 'my file.txt'
        assert decoded.mode == FILE_MODE

    def test_truncated_address(self):
        payload = encode_tree([entry('a'), entry('b')])
        with pytest.raises(CorruptTree):
            decode_tree(payload[:-5])

    def test_missing_nul(self):
        with pytest.raises(CorruptTree):
            decode_tree(b'100644 file-without-terminator')

    def test_missing_mode_separator(self):
        with pytest.raises(CorruptTree):
            decode_tree(b'100644file\x00' + HELLO_BLOB.raw)

    def test_unsorted_input_accepted_by_default(self):
        payload = encode_tree([entry('b')]) + encode_tree([entry('a')])
        assert [e.name for e in decode_tree(payload)] == ['b', 'a']

    def test_strict_rejects_unsorted(self):
        payload = encode_tree([entry('b')]) + encode_tree([entry('a')])
        with pytest.raises(CorruptTree):
            decode_tree(payload, strict=True)

    def test_strict_rejects_duplicates(self):
        payload = encode_tree([entry('a')]) * 2
        with pytest.raises(CorruptTree):
            decode_tree(payload, strict=True)

    def test_strict_accepts_canonical(self):
        payload = encode_tree([entry('b'), entry('a')])
        assert len(decode_tree(payload, strict=True)) == 2
