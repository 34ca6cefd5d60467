"""MD5 digests of byte buffers, as lowercase hexadecimal strings."""

import hashlib


def to_hash(data):
    """Return the MD5 digest of ``data`` as a 32-character lowercase hex string."""
    return hashlib.md5(bytes(data)).hexdigest()