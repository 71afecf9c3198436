# (c) Copyright 2021 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
from io import BytesIO
from binascii import b2a_hex

# show bytes as hex in a string
B2A = lambda x: b2a_hex(x).decode('ascii')

def force_bytes(foo):
    # convert strings to bytes where needed
    # - bytes(5) would be five zeros, so only take text or bytes-like
    if isinstance(foo, str):
        return foo.encode('utf-8')
    if isinstance(foo, (bytes, bytearray, memoryview)):
        return bytes(foo)
    raise TypeError(f"Need text or bytes, not {type(foo).__name__}")

# Serialization/deserialization tools
# - zigzag varints, as used for lengths and counts inside the tag block
def ser_varint(n):
    if n < 0:
        raise ValueError(f"varint must be non-negative: {n}")

    # zigzag: low bit is the sign, always zero here
    n <<= 1

    rv = bytearray()
    while n >= 0x80:
        rv.append((n & 0x7f) | 0x80)
        n >>= 7
    rv.append(n)

    return bytes(rv)

def deser_varint(fd):
    # read one varint from a stream, return the number
    n = 0
    shift = 0
    while 1:
        b = fd.read(1)
        if not b:
            raise ValueError("Truncated varint")
        n |= (b[0] & 0x7f) << shift
        if not (b[0] & 0x80):
            break
        shift += 7

    return n >> 1

def ser_varint_bytes(b):
    # length-prefixed byte string
    b = force_bytes(b)
    return ser_varint(len(b)) + b

def deser_varint_bytes(fd):
    ln = deser_varint(fd)
    rv = fd.read(ln)
    if len(rv) != ln:
        raise ValueError("Truncated string")
    return rv

def normalize_tags(tags):
    # accept list of pairs, or a mapping; keep order, keep duplicates
    # - result is a tuple of tuples, so it cannot be changed later
    if not tags:
        return ()
    if hasattr(tags, 'items'):
        tags = tags.items()

    rv = []
    for pair in tags:
        name, value = pair
        for v in (name, value):
            if not isinstance(v, (str, bytes, bytearray, memoryview)):
                raise TypeError(f"Tag names and values must be text, not {type(v).__name__}")
        rv.append(tuple(v if isinstance(v, str) else bytes(v) for v in (name, value)))

    return tuple(rv)

def ser_tags(tags):
    # Encode tag list as a single block:
    #   varint(count) || (name, value)* || 0x00
    # - empty list is zero bytes, not even a count
    # - terminator comes once, after all of the pairs
    tags = normalize_tags(tags)
    if not tags:
        return b''

    rv = ser_varint(len(tags))
    for name, value in tags:
        rv += ser_varint_bytes(name) + ser_varint_bytes(value)

    return rv + b'\x00'

def deser_tags(raw):
    # reverse of ser_tags; returns list of (name, value) text pairs
    if not raw:
        return []

    fd = BytesIO(raw)
    count = deser_varint(fd)

    rv = []
    for i in range(count):
        name = deser_varint_bytes(fd).decode('utf-8')
        value = deser_varint_bytes(fd).decode('utf-8')
        rv.append((name, value))

    if fd.read(1) != b'\x00':
        raise ValueError("Tag block not terminated")
    if fd.read(1):
        raise ValueError("Extra bytes after tag block")

    return rv

# EOF
