#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# Upload client, against a fake node (httpx.MockTransport).
#
import asyncio
import pytest
import httpx

from aritem.constants import *
from aritem.dataitem import DataItem
from aritem.uploads import UploadClient, UploadResult
from aritem.exceptions import RemoteRejected, MalformedResponse, NetworkFailure, UploadError

TAGS = [('Content-Type', 'text/plain')]

@pytest.mark.asyncio
async def test_upload_ok(fake_node):
    node = fake_node('abc123XYZ')
    cl = UploadClient(transport=node.transport)

    res = await cl.upload(b'hello', TAGS)

    assert isinstance(res, UploadResult)
    assert res.id == 'abc123XYZ'
    assert res.url == 'https://gateway.irys.xyz/abc123XYZ'

    assert len(node.requests) == 1
    req = node.requests[0]
    assert req.method == 'POST'
    assert str(req.url) == DEFAULT_SERVER + UPLOAD_PATH
    assert req.headers['content-type'] == 'application/octet-stream'

    # body is a proper signed data item
    item = DataItem.parse(req.content)
    assert item.verify()
    assert item.data == b'hello'
    assert list(item.tags) == TAGS

@pytest.mark.asyncio
async def test_fresh_keys(fake_node):
    node = fake_node('a', 'b')
    cl = UploadClient(transport=node.transport)

    await cl.upload(b'same', TAGS)
    await cl.upload(b'same', TAGS)

    one, two = [DataItem.parse(r.content) for r in node.requests]
    assert one.owner != two.owner
    assert one.signature != two.signature

@pytest.mark.asyncio
async def test_custom_server(fake_node):
    node = fake_node('zz')
    cl = UploadClient(server='http://localhost:1234', gateway='https://example.com/x/{id}?raw=1',
                            transport=node.transport)
    res = await cl.upload(b'', None)

    assert str(node.requests[0].url) == 'http://localhost:1234' + UPLOAD_PATH
    assert res.url == 'https://example.com/x/zz?raw=1'

    item = DataItem.parse(node.requests[0].content)
    assert item.tags == ()
    assert item.verify()

@pytest.mark.asyncio
@pytest.mark.parametrize('status', [ 400, 402, 404, 500, 503 ])
async def test_rejected(fake_node, status):
    node = fake_node(httpx.Response(status, text='Not enough balance ' + 'x'*500))
    cl = UploadClient(transport=node.transport)

    with pytest.raises(RemoteRejected) as err:
        await cl.upload(b'hello', TAGS)

    assert err.value.status == status
    assert err.value.body_excerpt.startswith('Not enough balance')
    assert len(err.value.body_excerpt) == BODY_EXCERPT_LEN
    assert len(node.requests) == 1            # no retry

@pytest.mark.asyncio
@pytest.mark.parametrize('body', [
    b'not json',
    b'',
    b'[1,2,3]',
    b'{"idx": "abc"}',
    b'{"id": ""}',
    b'{"id": 1234}',
    b'{"id": null}',
])
async def test_malformed(fake_node, body):
    node = fake_node(httpx.Response(200, content=body))
    cl = UploadClient(transport=node.transport)

    with pytest.raises(MalformedResponse):
        await cl.upload(b'hello', TAGS)

@pytest.mark.asyncio
async def test_network_failure(fake_node):
    node = fake_node(httpx.ConnectError('connection refused'))
    cl = UploadClient(transport=node.transport)

    with pytest.raises(NetworkFailure) as err:
        await cl.upload(b'hello', TAGS)

    assert isinstance(err.value, UploadError)
    assert 'connection refused' in str(err.value)
    assert len(node.requests) == 1

@pytest.mark.asyncio
async def test_concurrent(fake_node):
    def handler(request):
        item = DataItem.parse(request.content)
        # echo payload back as the id, so we can match them up
        return httpx.Response(201, json=dict(id=item.data.decode()))

    cl = UploadClient(transport=httpx.MockTransport(handler))

    got = await asyncio.gather(*[cl.upload(b'item%d' % i, TAGS) for i in range(10)])

    assert [r.id for r in got] == ['item%d' % i for i in range(10)]

def test_bad_config():
    with pytest.raises(AssertionError):
        UploadClient(server='https://example.com/')
    with pytest.raises(AssertionError):
        UploadClient(gateway='https://example.com/')

@pytest.mark.asyncio
@pytest.mark.parametrize('server', [ 'http://[::zz]', 'http://example.com:port' ])
async def test_bad_server_url(fake_node, server):
    # unparsable server URL is a network failure, not a crash
    node = fake_node('never-used')
    cl = UploadClient(server=server, transport=node.transport)

    with pytest.raises(NetworkFailure):
        await cl.upload(b'hello', TAGS)

    assert node.requests == []

@pytest.mark.asyncio
async def test_live(live_server):
    # needs "--live URL"; really uploads something
    cl = UploadClient(server=live_server)
    res = await cl.upload(b'hello', TAGS)
    assert res.id
    assert res.id in res.url

# EOF
