#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
#
# Compatibility wrapper for "PyNaCl" (libsodium underneath).
#
# nice docs: <https://pynacl.readthedocs.io/en/latest/signing/>
#
# - SigningKey takes the 32 byte seed directly
# - sign() returns signature + message glued together, we only want the first part
#
from typing import Tuple

from nacl.signing import SigningKey, VerifyKey
from nacl.exceptions import BadSignatureError, CryptoError

from aritem.constants import SEED_SIZE, PUBKEY_SIZE, SIGNATURE_SIZE
from aritem.exceptions import SigningFailure

def _load_key(seed: bytes) -> SigningKey:
    if len(seed) != SEED_SIZE:
        raise SigningFailure(f"Seed must be {SEED_SIZE} bytes, got {len(seed)}")
    try:
        return SigningKey(bytes(seed))
    except (CryptoError, TypeError, ValueError) as exc:
        raise SigningFailure(f"Key import failed: {exc}") from exc

def CT_pick_keypair() -> Tuple[bytes, bytes]:
    # return (seed[32], pub[32]) .. fresh from OS RNG
    sk = SigningKey.generate()
    return bytes(sk), bytes(sk.verify_key)

def CT_priv_to_pubkey(seed: bytes) -> bytes:
    return bytes(_load_key(seed).verify_key)

def CT_sig_verify(pub: bytes, msg_digest: bytes, sig: bytes) -> bool:
    if len(sig) != SIGNATURE_SIZE or len(pub) != PUBKEY_SIZE:
        return False
    try:
        VerifyKey(bytes(pub)).verify(msg_digest, sig)
        return True
    except (BadSignatureError, CryptoError, ValueError):
        return False

def CT_sign(seed: bytes, msg_digest: bytes) -> bytes:
    sk = _load_key(seed)
    try:
        sig = sk.sign(msg_digest).signature
    except CryptoError as exc:
        raise SigningFailure(f"Signing failed: {exc}") from exc

    assert len(sig) == SIGNATURE_SIZE
    return sig

# EOF
