#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# Upload signed data items to the storage node.
#
# - Requires 'httpx' module
# - One POST per upload, body is the binary data item (see dataitem.py)
# - Node answers with JSON containing an 'id'; we turn that into a gateway URL
# - No retries here. No timeout either, unless you pass one.
# - Each call uses a fresh keypair and its own HTTP client, so concurrent
#   uploads share nothing.
#
import sys
from collections import namedtuple

import httpx

from .constants import *
from .compat import CT_pick_keypair
from .dataitem import DataItem
from .exceptions import RemoteRejected, MalformedResponse, NetworkFailure

# Change this to see traffic details
VERBOSE = False

UploadResult = namedtuple('UploadResult', 'id url')

class UploadClient:

    def __init__(self, server=None, gateway=None, transport=None, timeout=None):
        self.server = server or DEFAULT_SERVER
        assert not self.server.endswith('/')
        self.gateway = gateway or GATEWAY_URL
        assert '{id}' in self.gateway

        # tests can provide httpx.MockTransport here
        self.transport = transport
        self.timeout = timeout

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__, self.server)

    def build_item(self, payload, tags):
        # sign with a throw-away key; the seed never leaves this function
        seed, _ = CT_pick_keypair()
        return DataItem.create(payload, tags, seed)

    def url_for(self, ident):
        return self.gateway.format(id=ident)

    async def upload(self, payload, tags=None):
        # Sign and send payload, returns UploadResult or raises UploadError
        item = self.build_item(payload, tags)
        body = item.serialize()

        url = self.server + UPLOAD_PATH
        if VERBOSE:
            print(f">> POST {url} ({len(body):,} bytes, item {item.id}) "
                    + ', '.join(f'{n}={v}' for n,v in item.tags), file=sys.stderr)

        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as ses:
                resp = await ses.post(url, content=body,
                                        headers={'content-type': 'application/octet-stream'})
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise NetworkFailure(f"Upload to {self.server} failed: {exc}") from exc

        excerpt = resp.text[0:BODY_EXCERPT_LEN]

        if VERBOSE:
            print(f"<< {resp.status_code} {excerpt}", file=sys.stderr)

        if not resp.is_success:
            raise RemoteRejected(resp.status_code, excerpt)

        try:
            ans = resp.json()
        except ValueError:
            raise MalformedResponse("Bad json: " + excerpt, excerpt)

        ident = ans.get('id') if isinstance(ans, dict) else None
        if not ident or not isinstance(ident, str):
            raise MalformedResponse("No 'id' in response: " + excerpt, excerpt)

        return UploadResult(ident, self.url_for(ident))

# EOF
