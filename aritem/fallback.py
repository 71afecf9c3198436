#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# Offline metadata: data: URIs that need no network at all.
#
# Used when an upload of collection metadata fails and the caller decides
# something is better than nothing, and by "character --offline". Kept tiny
# because these strings end up inside on-chain transactions.
#
import json
from base64 import b64encode

from .constants import HUE_STEP

BACKGROUND = 'rgb(10,10,10)'

def data_uri(content_type, body):
    if isinstance(body, str):
        body = body.encode('utf-8')
    return f'data:{content_type};base64,' + b64encode(body).decode('ascii')

def _tiny_json(obj):
    return json.dumps(obj, separators=(',', ':'), ensure_ascii=False)

def generate_character_svg(index, name):
    # Full size stick figure, for local display. Not for on-chain use.
    c = f'hsl({index * HUE_STEP},80%,60%)'
    stroke = f'stroke="{c}" stroke-width="2"'

    return (f'<svg xmlns="http://www.w3.org/2000/svg" width="120" height="160" viewBox="0 0 120 160">'
            f'<rect width="120" height="160" fill="{BACKGROUND}"/>'
            f'<circle cx="60" cy="35" r="16" fill="none" {stroke}/>'
            f'<line x1="60" y1="51" x2="60" y2="100" {stroke}/>'
            f'<line x1="60" y1="65" x2="35" y2="85" {stroke}/>'
            f'<line x1="60" y1="65" x2="85" y2="85" {stroke}/>'
            f'<line x1="60" y1="100" x2="40" y2="140" {stroke}/>'
            f'<line x1="60" y1="100" x2="80" y2="140" {stroke}/>'
            f'<text x="60" y="155" text-anchor="middle" fill="{c}" font-family="monospace" '
            f'font-size="11">{name}</text>'
            '</svg>')

def build_character_metadata_uri(index, name, description=None):
    # Coloured circle with the initial, ~120 bytes of SVG.
    # - description is not included, to keep it small
    initial = name[0] if name else '?'
    svg = ('<svg xmlns="http://www.w3.org/2000/svg" width="32" height="32">'
           f'<circle cx="16" cy="16" r="15" fill="hsl({index * HUE_STEP},80%,60%)"/>'
           f'<text x="16" y="22" text-anchor="middle" fill="#fff" font-size="18">{initial}</text>'
           '</svg>')

    img = data_uri('image/svg+xml', svg)

    return data_uri('application/json', _tiny_json(dict(name=name, image=img)))

def build_collection_metadata_uri(name):
    return data_uri('application/json', _tiny_json(dict(name=name, image='')))

# EOF
