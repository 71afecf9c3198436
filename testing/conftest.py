import json
import pytest
import httpx

def pytest_addoption(parser):
    parser.addoption("--live", action="store", type=str, metavar="URL",
                     default=None, help="Upload node to use for network tests")

@pytest.fixture(scope='session')
def live_server(request):
    # some tests require "--live https://devnet.irys.xyz" arg on pytest cmd line
    rv = request.config.getoption("--live")
    if rv is None:
        raise pytest.skip("need --live server for this test")
    return rv.rstrip('/')

@pytest.fixture
def seed():
    # fixed private key, so signatures are repeatable
    return bytes(range(32))

class FakeNode:
    # stands in for the upload node; records what was sent
    def __init__(self, responses):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        rv = self.responses.pop(0)
        if isinstance(rv, Exception):
            raise rv
        return rv

    @property
    def transport(self):
        return httpx.MockTransport(self)

def ok_response(ident):
    return httpx.Response(200, content=json.dumps(dict(id=ident, timestamp=1)).encode())

@pytest.fixture
def fake_node():
    # fake_node(resp1, resp2, ...) => FakeNode; ints are status codes, str are ids
    def doit(*responses):
        rv = []
        for r in responses:
            if isinstance(r, str):
                r = ok_response(r)
            elif isinstance(r, int):
                r = httpx.Response(r, text='nope')
            rv.append(r)
        return FakeNode(rv)
    return doit

# EOF
