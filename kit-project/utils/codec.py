# What it does: Compresses and decompresses the bytes of every stored object
# How it does: zlib (deflate), the same codec used for loose objects; the compression level is a tunable, not part of the format

import zlib

from .errors import CorruptData

DEFAULT_LEVEL = -1


def compress(data, level=DEFAULT_LEVEL):
    return zlib.compress(bytes(data), level)


def decompress(data): # Rejects anything that is not exactly one complete zlib stream
    decompressor = zlib.decompressobj()
    try:
        result = decompressor.decompress(bytes(data))
        result += decompressor.flush()
    except zlib.error as e:
        raise CorruptData(f"invalid compressed data: {e}") from e
    if not decompressor.eof:
        raise CorruptData("invalid compressed data: stream is truncated")
    if decompressor.unused_data:
        raise CorruptData("invalid compressed data: trailing bytes after stream")
    return result
