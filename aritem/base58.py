#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# Decode base58 text (wallet addresses) into raw 32 byte public keys.
#
# Works on a big-endian scratch buffer of byte-valued digits: for each input
# character, multiply the whole buffer by 58 and add the character's value,
# carrying from the least significant end. Each leading '1' is a zero byte.
#
from .constants import BASE58_ALPHABET, BASE58_SCRATCH_SIZE, PUBKEY_SIZE
from .exceptions import InvalidChar, WrongLength

B58_LOOKUP = {ch: idx for idx, ch in enumerate(BASE58_ALPHABET)}

def decode_base58(s, scratch_size=BASE58_SCRATCH_SIZE):
    # any length result; leading zeros preserved
    scratch = [0] * scratch_size

    for ch in s:
        try:
            carry = B58_LOOKUP[ch]
        except KeyError:
            raise InvalidChar(ch)

        for pos in range(len(scratch)-1, -1, -1):
            carry += scratch[pos] * 58
            scratch[pos] = carry % 256
            carry //= 256

        while carry:
            # too big for scratch area, widen so the length is still right
            scratch.insert(0, carry % 256)
            carry //= 256

    leading_ones = len(s) - len(s.lstrip('1'))

    start = 0
    while start < len(scratch) and scratch[start] == 0:
        start += 1

    return bytes(leading_ones) + bytes(scratch[start:])

def decode_pubkey(s):
    # base58 text => exactly 32 bytes, or raise
    rv = decode_base58(s)
    if len(rv) != PUBKEY_SIZE:
        raise WrongLength(len(rv), PUBKEY_SIZE)
    return rv

# EOF
