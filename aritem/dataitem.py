#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# dataitem.py
#
# Build, sign, serialize (and parse back) the binary envelope we upload.
#
# Layout, in order:
#
#   sig_type     u16 LE
#   signature    64 bytes
#   owner        32 bytes (Ed25519 pubkey)
#   target       1 byte flag, then 32 bytes only if flag == 1
#   anchor       1 byte flag, then 32 bytes only if flag == 1
#   num_tags     u64 LE
#   tags_len     u64 LE
#   tags         tags_len bytes, see utils.ser_tags()
#   data         everything else, to end of envelope
#
# What gets signed is deep_hash() over the pre-signature fields, see
# signature_data(). The digest itself is never transmitted.
#
import struct
from io import BytesIO
from base64 import urlsafe_b64encode

from .constants import *
from .compat import CT_sign, CT_sig_verify, CT_priv_to_pubkey, sha256s
from .deephash import deep_hash
from .exceptions import SigningFailure
from .utils import ser_tags, deser_tags, normalize_tags, force_bytes, B2A

# these cannot change once the signature exists
SIGNED_FIELDS = ('signature_type', 'owner', 'target', 'anchor', 'tags', 'data')

def _check_optional(name, value, size):
    if value is None:
        return None
    value = bytes(value)
    if len(value) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(value)}")
    return value

class DataItem:
    #
    # One signed upload. Build it, sign() it, then serialize().
    #
    def __init__(self, data, tags=None, owner=None, target=None, anchor=None,
                        signature_type=SIG_TYPE_ED25519):
        self.signature = None
        self.signature_type = signature_type
        self.data = force_bytes(data)
        self.tags = normalize_tags(tags)
        self.owner = _check_optional('owner', owner, PUBKEY_SIZE)
        self.target = _check_optional('target', target, TARGET_SIZE)
        self.anchor = _check_optional('anchor', anchor, ANCHOR_SIZE)

    def __setattr__(self, name, value):
        if name in SIGNED_FIELDS and getattr(self, 'signature', None) is not None:
            raise AttributeError(f"Item is signed; cannot change {name}. Build a new one.")
        if name == 'tags':
            value = normalize_tags(value)
        super().__setattr__(name, value)

    def __repr__(self):
        st = ('id=' + self.id) if self.is_signed else 'unsigned'
        return '<%s %s: %d bytes, %d tags>' % (self.__class__.__name__, st,
                                                    len(self.data), len(self.tags))

    @classmethod
    def create(cls, data, tags, seed, target=None, anchor=None):
        # build and sign in one step, owner comes from the seed
        item = cls(data, tags, target=target, anchor=anchor)
        item.sign(seed)
        return item

    @property
    def is_signed(self):
        return self.signature is not None

    @property
    def id(self):
        # the storage network names an item by sha256 of its signature
        assert self.is_signed, 'not signed yet'
        return urlsafe_b64encode(sha256s(self.signature)).rstrip(b'=').decode('ascii')

    def signature_data(self):
        # The digest to be signed, over exactly these 8 values.
        # - absent target/anchor are empty blobs, still in the list
        assert self.owner is not None, 'need owner pubkey'

        return deep_hash([
            DATAITEM_LABEL,
            DATAITEM_FORMAT,
            str(self.signature_type).encode('ascii'),
            self.owner,
            self.target or b'',
            self.anchor or b'',
            ser_tags(self.tags),
            self.data,
        ])

    def sign(self, seed):
        # Sign with private key (seed). Sets owner if we didn't have one yet.
        if self.is_signed:
            raise AttributeError("Already signed")

        pubkey = CT_priv_to_pubkey(seed)
        if self.owner is None:
            self.owner = pubkey
        elif self.owner != pubkey:
            raise SigningFailure("Seed does not match owner pubkey")

        sig = CT_sign(seed, self.signature_data())
        if len(sig) != SIGNATURE_SIZE:
            raise SigningFailure(f"Unexpected signature length: {len(sig)}")

        self.signature = sig

        return sig

    def verify(self):
        # recompute digest and check signature against owner
        if not self.is_signed:
            return False
        return CT_sig_verify(self.owner, self.signature_data(), self.signature)

    def serialize(self):
        if not self.is_signed:
            raise ValueError("Must sign before serializing")

        tag_bytes = ser_tags(self.tags)

        rv = struct.pack('<H', self.signature_type)
        rv += self.signature
        rv += self.owner

        for value in (self.target, self.anchor):
            if value is None:
                rv += b'\x00'
            else:
                rv += b'\x01' + value

        rv += struct.pack('<QQ', len(self.tags), len(tag_bytes))
        rv += tag_bytes
        rv += self.data

        return rv

    @classmethod
    def parse(cls, raw):
        # Reverse of serialize(). Does not verify signature, call verify() for that.
        fd = BytesIO(raw)

        def need(n):
            rv = fd.read(n)
            if len(rv) != n:
                raise ValueError("Truncated data item")
            return rv

        sig_type, = struct.unpack('<H', need(2))
        if sig_type != SIG_TYPE_ED25519:
            raise ValueError(f"Unsupported signature type: {sig_type}")

        signature = need(SIGNATURE_SIZE)
        owner = need(PUBKEY_SIZE)

        opt = []
        for size in (TARGET_SIZE, ANCHOR_SIZE):
            flag = need(1)[0]
            if flag == 0:
                opt.append(None)
            elif flag == 1:
                opt.append(need(size))
            else:
                raise ValueError(f"Bad presence flag: {flag}")

        num_tags, tags_len = struct.unpack('<QQ', need(16))
        tags = deser_tags(need(tags_len))
        if len(tags) != num_tags:
            raise ValueError(f"Tag count mismatch: header says {num_tags}, got {len(tags)}")

        data = fd.read()

        rv = cls(data, tags, owner=owner, target=opt[0], anchor=opt[1],
                                signature_type=sig_type)
        rv.signature = signature

        return rv

    def as_dict(self):
        # for humans
        rv = dict(signature_type=self.signature_type,
                    owner=B2A(self.owner) if self.owner else None,
                    target=B2A(self.target) if self.target else None,
                    anchor=B2A(self.anchor) if self.anchor else None,
                    tags=self.tags, data_len=len(self.data))
        if self.is_signed:
            rv['id'] = self.id
            rv['signature'] = B2A(self.signature)
        return rv

# EOF
