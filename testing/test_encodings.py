#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# Test encoding/serializations from utils.py
#
import pytest
from io import BytesIO

from aritem.utils import ser_varint, deser_varint, ser_varint_bytes, deser_varint_bytes
from aritem.utils import ser_tags, deser_tags, normalize_tags, force_bytes

@pytest.mark.parametrize('n', [ 0, 1, 127, 128, 16384, 2**32 - 1 ])
def test_varint(n):
    enc = ser_varint(n)
    assert deser_varint(BytesIO(enc)) == n

    # continuation bit on all but last byte
    assert all(b & 0x80 for b in enc[:-1])
    assert not (enc[-1] & 0x80)

def test_varint_zigzag():
    # value is doubled before encoding
    assert ser_varint(0) == b'\x00'
    assert ser_varint(1) == b'\x02'
    assert ser_varint(63) == b'\x7e'
    assert ser_varint(64) == b'\x80\x01'
    assert ser_varint(127) == b'\xfe\x01'

    with pytest.raises(ValueError):
        ser_varint(-1)
    with pytest.raises(ValueError):
        deser_varint(BytesIO(b'\x80'))

def test_varint_bytes():
    assert ser_varint_bytes(b'abc') == b'\x06abc'
    assert ser_varint_bytes('é') == b'\x04\xc3\xa9'
    assert deser_varint_bytes(BytesIO(b'\x06abcXX')) == b'abc'

    with pytest.raises(ValueError):
        deser_varint_bytes(BytesIO(b'\x06ab'))

def test_tags_empty():
    assert ser_tags([]) == b''
    assert ser_tags(None) == b''
    assert deser_tags(b'') == []

def test_tags_layout():
    tags = [('Content-Type', 'text/plain')]
    raw = ser_tags(tags)

    assert raw == b'\x02' + b'\x18Content-Type' + b'\x14text/plain' + b'\x00'
    assert deser_tags(raw) == tags

def test_tags_order_and_dups():
    tags = [('b', '2'), ('a', '1'), ('b', '3'), ('App-Name', '')]
    raw = ser_tags(tags)

    assert raw.startswith(ser_varint(len(tags)))
    assert raw.endswith(b'\x00')
    # one terminator, not one per tag
    assert raw[:-1].endswith(ser_varint_bytes(''))

    assert deser_tags(raw) == tags

def test_tags_mapping():
    assert normalize_tags({'x': 'y', 'a': 'b'}) == (('x', 'y'), ('a', 'b'))
    assert ser_tags({'x': 'y'}) == ser_tags([('x', 'y')])

def test_tags_bad():
    raw = ser_tags([('a', 'b')])
    with pytest.raises(ValueError):
        deser_tags(raw[:-1])
    with pytest.raises(ValueError):
        deser_tags(raw + b'\x00')

def test_not_text():
    # numbers are not silently turned into zero bytes
    with pytest.raises(TypeError):
        force_bytes(5)
    with pytest.raises(TypeError):
        ser_varint_bytes(3)
    with pytest.raises(TypeError):
        ser_tags([('Version', 5)])
    with pytest.raises(TypeError):
        normalize_tags({'Count': None})

    assert force_bytes(bytearray(b'ab')) == b'ab'
    assert force_bytes(memoryview(b'ab')) == b'ab'
    assert normalize_tags([(b'k', bytearray(b'v'))]) == ((b'k', b'v'),)

# EOF
