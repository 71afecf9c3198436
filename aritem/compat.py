#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# Wrappers for choice of crypto libraries. AKA API Cleanup
#
# My standards:
# - pubkeys: 32 bytes, raw Ed25519 point
# - private key: 32 byte seed (not the 64 byte "expanded" form)
# - signature: 64 bytes
# - no DER, no PEM, no PKCS#8 outside of the wrappers
# - message digests (for sig/verify) are already digested, by deep_hash
# - verify returns bool, doesn't raise exception
#

__all__ = [ 'sha384s', 'sha256s',
            'CT_sig_verify', 'CT_sign', 'CT_pick_keypair', 'CT_priv_to_pubkey']

def sha384s(msg):
    # single-shot SHA384
    from hashlib import sha384
    return sha384(msg).digest()

def sha256s(msg):
    # single-shot SHA256
    from hashlib import sha256
    return sha256(msg).digest()

# Other codes must be implemented elsewhere...
#

def CT_pick_keypair():
    # return (seed, pub)
    raise NotImplementedError

def CT_priv_to_pubkey(seed):
    # return 32 byte pubkey
    raise NotImplementedError

def CT_sig_verify(pub, msg_digest, sig):
    # returns True or False
    assert len(sig) == 64
    raise NotImplementedError

def CT_sign(seed, msg_digest):
    # returns 64-byte sig
    raise NotImplementedError


try:
    # PyNaCl <https://pynacl.readthedocs.io/en/latest/signing/>
    from aritem.wrap_nacl import CT_pick_keypair, CT_priv_to_pubkey
    from aritem.wrap_nacl import CT_sig_verify, CT_sign

except ImportError:
    try:
        # pyca/cryptography <https://cryptography.io/en/latest/hazmat/primitives/asymmetric/ed25519/>
        from aritem.wrap_cryptography import CT_pick_keypair, CT_priv_to_pubkey
        from aritem.wrap_cryptography import CT_sig_verify, CT_sign

    except ImportError:
        raise RuntimeError("need a crypto library")

# EOF
