# What it does: Manages the low-level object database, handling the storage and retrieval of all blobs, trees, and commits
# How it does: Content-addressed storage. `put` frames the payload as "<type> <len>\0<payload>", hashes the whole frame with SHA-1, compresses it and writes it under objects/<2 hex>/<38 hex>. `get` reverses that and validates the frame
# What data structure it uses: Hash Table / Dictionary (the object store is a content-addressed dictionary where the SHA-1 address is the key), laid out on disk as a two-level fan-out

import logging
import os
import tempfile

from . import codec
from .errors import CorruptHeader, ObjectNotFound, ObjectTypeMismatch
from .hashing import HashAddress, as_address, HEX_SIZE

logger = logging.getLogger(__name__)

OBJECT_TYPES = ('blob', 'tree', 'commit')


def frame(obj_type, content): # Builds the canonical "<type> <len>\0<payload>" buffer
    if obj_type not in OBJECT_TYPES:
        raise ValueError(f"unknown object type: {obj_type!r}")
    header = f'{obj_type} {len(content)}\0'.encode()
    return header + bytes(content)


def parse_frame(data): # Splits a decompressed frame into (type, payload), checking the declared length
    null_byte_index = data.find(b'\0')
    if null_byte_index == -1:
        raise CorruptHeader("object header is not NUL-terminated")

    try:
        header = data[:null_byte_index].decode('ascii')
    except UnicodeDecodeError:
        raise CorruptHeader("object header is not ASCII") from None
    content = data[null_byte_index + 1:]

    obj_type, sep, size = header.partition(' ')
    if not sep or obj_type not in OBJECT_TYPES:
        raise CorruptHeader(f"malformed object header: {header!r}")
    if not size.isdigit() or (len(size) > 1 and size.startswith('0')):
        raise CorruptHeader(f"malformed object length: {size!r}")
    if int(size) != len(content):
        raise CorruptHeader(f"object length mismatch: header says {size}, payload has {len(content)} bytes")

    return obj_type, content


class ObjectStore:
    """Loose-object store rooted at an explicit directory.

    Objects are write-once: storing identical content again is a no-op that
    returns the same address.
    """

    def __init__(self, objects_dir, compression_level=codec.DEFAULT_LEVEL):
        self.objects_dir = os.fspath(objects_dir)
        self.compression_level = compression_level

    def __repr__(self):
        return f"ObjectStore({self.objects_dir!r})"

    def path_for(self, address):
        directory, name = as_address(address).split()
        return os.path.join(self.objects_dir, directory, name)

    def put(self, obj_type, content, write=True): # Hashes content and optionally writes it as an object of the given type
        data = frame(obj_type, content)
        address = HashAddress.of(data)

        if write:
            object_path = self.path_for(address)
            if os.path.exists(object_path):
                logger.debug("object %s already stored", address)
            else:
                self._write(object_path, codec.compress(data, self.compression_level))
                logger.debug("wrote %s %s (%d bytes)", obj_type, address, len(content))

        return address

    def _write(self, object_path, compressed): # Write-then-rename so a reader never sees a half-written object
        object_dir = os.path.dirname(object_path)
        os.makedirs(object_dir, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(dir=object_dir, prefix='tmp_obj_')
        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(compressed)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, object_path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def get(self, address): # Reads an object by its address and returns its type and content
        address = as_address(address)
        object_path = self.path_for(address)

        try:
            with open(object_path, 'rb') as f:
                compressed_data = f.read()
        except FileNotFoundError:
            raise ObjectNotFound(address) from None

        obj_type, content = parse_frame(codec.decompress(compressed_data))
        logger.debug("read %s %s", obj_type, address)
        return obj_type, content

    def read(self, address, expected=None):
        obj_type, content = self.get(address)
        if expected is not None and obj_type != expected:
            raise ObjectTypeMismatch(as_address(address), expected, obj_type)
        return content

    def exists(self, address):
        try:
            return os.path.isfile(self.path_for(address))
        except ValueError:
            return False

    def iter_addresses(self): # Yields every stored address, in fan-out order
        if not os.path.isdir(self.objects_dir):
            return
        for directory in sorted(os.listdir(self.objects_dir)):
            dir_path = os.path.join(self.objects_dir, directory)
            if len(directory) != 2 or not os.path.isdir(dir_path):
                continue
            for name in sorted(os.listdir(dir_path)):
                if len(directory) + len(name) != HEX_SIZE:
                    continue
                try:
                    yield HashAddress.from_hex(directory + name)
                except ValueError:
                    continue
