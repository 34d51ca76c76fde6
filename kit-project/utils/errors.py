# What it does: Defines every error the object store can raise
# How it does: A single hierarchy rooted at KitError so commands can catch one type and report "fatal: ..."
# What data structure it uses: None, class hierarchy only


class KitError(Exception):
    """Base class for all Kit errors."""


class InvalidLength(KitError, ValueError):
    def __init__(self, length):
        super().__init__(f"invalid address length: expected 20 bytes, got {length}")
        self.length = length


class InvalidHex(KitError, ValueError):
    def __init__(self, text):
        super().__init__(f"invalid hex address: {text!r}")
        self.text = text


class CorruptData(KitError):
    pass


class ObjectNotFound(KitError, FileNotFoundError):
    def __init__(self, address):
        super().__init__(f"Object not found: {address}")
        self.address = address


class CorruptHeader(KitError):
    pass


class CorruptTree(KitError):
    pass


class CorruptCommit(KitError):
    pass


class ObjectTypeMismatch(KitError):
    def __init__(self, address, expected, actual):
        super().__init__(f"Object {address} is a {actual}, not a {expected}")
        self.address = address
        self.expected = expected
        self.actual = actual


class UnsupportedEntryKind(KitError):
    def __init__(self, path):
        super().__init__(f"unsupported directory entry (not a regular file or directory): {path}")
        self.path = path


class NotARepository(KitError):
    def __init__(self, path='.'):
        super().__init__(f"not a kit repository (or any of the parent directories): {path}")
        self.path = path
