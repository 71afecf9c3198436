#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# The playable characters, and the collection they are minted into.
#
import json
from collections import namedtuple

CharacterTemplate = namedtuple('CharacterTemplate', 'name hp atk defense description')

ROSTER = [
    CharacterTemplate('Freya', 100, 18, 12, 'Norse warrior goddess'),
    CharacterTemplate('Odin', 120, 15, 15, 'Allfather of wisdom'),
    CharacterTemplate('Thor', 110, 22, 8, 'God of thunder'),
    CharacterTemplate('Loki', 80, 25, 5, 'Trickster shapeshifter'),
    CharacterTemplate('Hel', 90, 20, 10, 'Queen of the dead'),
    CharacterTemplate('Tyr', 130, 14, 18, 'God of war and law'),
]

COLLECTION_NAME = 'Mojo Arena Characters'
COLLECTION_DESCRIPTION = 'On-chain characters for the Mojo Arena demo'

def collection_metadata_json(name=COLLECTION_NAME, description=COLLECTION_DESCRIPTION):
    return json.dumps(dict(name=name, description=description, image=''))

# EOF
