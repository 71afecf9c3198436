#
# (c) Copyright 2021 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#

__version__ = '0.9.0'

__all__ = [ 'dataitem', 'deephash', 'exceptions', 'uploads', 'metadata', 'constants',
            'utils', 'base58', 'fallback', 'render', 'characters' ]

# build and sign envelopes
from aritem.dataitem import DataItem

# send them somewhere
from aritem.uploads import UploadClient, UploadResult

# two step character uploads
from aritem.metadata import MetadataUploader

# wallet addresses => pubkeys
from aritem.base58 import decode_pubkey
