#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
#
# Compatibility wrapper for "cryptography" (OpenSSL underneath).
#
# nice docs: <https://cryptography.io/en/latest/hazmat/primitives/asymmetric/ed25519/>
#
# - key objects want raw encoding/format spelled out every time
#
from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat, PrivateFormat
from cryptography.hazmat.primitives.serialization import NoEncryption

from aritem.constants import SEED_SIZE, PUBKEY_SIZE, SIGNATURE_SIZE
from aritem.exceptions import SigningFailure

def _load_key(seed):
    if len(seed) != SEED_SIZE:
        raise SigningFailure(f"Seed must be {SEED_SIZE} bytes, got {len(seed)}")
    try:
        return Ed25519PrivateKey.from_private_bytes(bytes(seed))
    except (UnsupportedAlgorithm, ValueError) as exc:
        raise SigningFailure(f"Key import failed: {exc}") from exc

def _pub_bytes(pk):
    return pk.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)

def CT_pick_keypair():
    pk = Ed25519PrivateKey.generate()
    seed = pk.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption())
    return seed, _pub_bytes(pk)

def CT_priv_to_pubkey(seed):
    return _pub_bytes(_load_key(seed))

def CT_sig_verify(pub, msg_digest, sig):
    if len(sig) != SIGNATURE_SIZE or len(pub) != PUBKEY_SIZE:
        return False
    try:
        Ed25519PublicKey.from_public_bytes(bytes(pub)).verify(sig, msg_digest)
        return True
    except (InvalidSignature, ValueError):
        return False

def CT_sign(seed, msg_digest):
    sig = _load_key(seed).sign(msg_digest)
    assert len(sig) == SIGNATURE_SIZE
    return sig

# EOF
