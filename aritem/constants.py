#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# System constants.
#

# signature type code placed in the first two bytes of every data item
# - 2 means Ed25519 (32 byte owner, 64 byte signature)
SIG_TYPE_ED25519 = 2

# sizes (bytes) for the Ed25519 scheme
SEED_SIZE = 32
PUBKEY_SIZE = 32
SIGNATURE_SIZE = 64

# optional target and anchor fields are fixed width when present
TARGET_SIZE = 32
ANCHOR_SIZE = 32

# output of the deep hash (SHA-384)
DIGEST_SIZE = 48

# first two elements of the list that gets deep-hashed for signing
DATAITEM_LABEL = b'dataitem'
DATAITEM_FORMAT = b'1'

# Upload node. Bytes are POSTed here as application/octet-stream and
# we get back JSON with an 'id' field.
DEFAULT_SERVER = 'https://devnet.irys.xyz'
UPLOAD_PATH = '/tx/solana'

# where uploaded items can be fetched, by id
GATEWAY_URL = 'https://gateway.irys.xyz/{id}'

# how much of a rejected response body we keep for error messages
BODY_EXCERPT_LEN = 200

# bitcoin-style base58: no 0, O, I or l
BASE58_ALPHABET = '123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz'

# digit groups in scratch buffer for base58 decode; plenty for 32 byte keys
BASE58_SCRATCH_SIZE = 44

# character art: colour wheel position is index * HUE_STEP degrees
HUE_STEP = 60

# content types we tag our uploads with
CT_PNG = 'image/png'
CT_JSON = 'application/json'

# EOF
