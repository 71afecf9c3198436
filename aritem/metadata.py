#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# Two step metadata uploads for characters.
#
#   1. render artwork => upload => image URL
#   2. JSON naming that URL => upload => metadata URL
#
# Step 2 needs the URL from step 1, so strictly one after the other. Any
# failure stops right there: no image-less metadata, no half records.
#
# The metadata URL is what ends up in the mint transaction (built elsewhere).
#
import json, inspect
from collections import namedtuple

from .constants import HUE_STEP, CT_PNG, CT_JSON
from .render import render_character
from .uploads import UploadClient

class CharacterMetadata(namedtuple('CharacterMetadata', 'name description image attributes')):

    @classmethod
    def from_stats(cls, name, description, image, hp, atk, defense):
        attrs = [ dict(trait_type='HP', value=hp),
                  dict(trait_type='ATK', value=atk),
                  dict(trait_type='DEF', value=defense) ]
        return cls(name, description, image, attrs)

    def to_json(self):
        return json.dumps(self._asdict())

class MetadataUploader:

    def __init__(self, client=None, renderer=render_character):
        self.client = client or UploadClient()
        # renderer(hue, hp, atk, defense) => (bytes, content_type); may be async
        self.renderer = renderer

    async def render(self, index, hp, atk, defense):
        rv = self.renderer(index * HUE_STEP, hp, atk, defense)
        if inspect.isawaitable(rv):
            rv = await rv
        return rv

    async def upload_character_metadata(self, index, name, description, hp, atk, defense):
        # Returns URL of the JSON metadata. Raises UploadError from either step.
        image, content_type = await self.render(index, hp, atk, defense)

        img = await self.client.upload(image, [('Content-Type', content_type or CT_PNG)])

        meta = CharacterMetadata.from_stats(name, description, img.url, hp, atk, defense)

        res = await self.client.upload(meta.to_json().encode('utf-8'),
                                        [('Content-Type', CT_JSON)])

        return res.url

    async def upload_text(self, content, content_type):
        # Single upload of some text (collection metadata, say). Caller picks
        # the fallback if this fails, see fallback.py
        res = await self.client.upload(content.encode('utf-8'), [('Content-Type', content_type)])
        return res.url

# EOF
