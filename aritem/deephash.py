#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# Deep hash: recursive SHA-384 over a tree of blobs and lists.
#
#   blob b:  H( H("blob" + len(b)) || H(b) )
#   list l:  acc = H("list" + len(l)), then acc = H(acc || deep_hash(item)) per item
#
# Lengths are decimal ascii. Text is hashed as its UTF-8 bytes.
#
from .compat import sha384s

def deep_hash(value):
    if isinstance(value, str):
        value = value.encode('utf-8')

    if isinstance(value, (bytes, bytearray)):
        tag = b'blob' + str(len(value)).encode('ascii')
        return sha384s(sha384s(tag) + sha384s(bytes(value)))

    if isinstance(value, (list, tuple)):
        acc = sha384s(b'list' + str(len(value)).encode('ascii'))
        for item in value:
            acc = sha384s(acc + deep_hash(item))
        return acc

    raise TypeError(f"Cannot deep hash: {type(value).__name__}")

# EOF
