#!/usr/bin/env python
#
# (c) Copyright 2021 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# To use this, install with:
#
#   pip install --editable '.[cli]'
#
# That will create the command "aritem" in your path.
#
#
import click, sys, asyncio, mimetypes

from aritem.utils import B2A
from aritem.constants import *
from aritem.exceptions import UploadError, SigningFailure, DecodeError
from aritem.dataitem import DataItem
from aritem.compat import CT_pick_keypair
from aritem.base58 import decode_pubkey
from aritem.characters import ROSTER, COLLECTION_NAME, collection_metadata_json
from aritem.fallback import build_collection_metadata_uri, build_character_metadata_uri
from aritem.fallback import generate_character_svg
from aritem import __version__

# dict of options that apply to all commands
global global_opts
global_opts = dict()

# Cleanup display (supress traceback) for user-feedback exceptions
_sys_excepthook = sys.excepthook
def my_hook(ty, val, tb):
    if issubclass(ty, (UploadError, SigningFailure, DecodeError)):
        print("FATAL: %s" % val, file=sys.stderr)
    else:
        return _sys_excepthook(ty, val, tb)
sys.excepthook=my_hook

def fail(msg):
    # show message and stop
    click.echo(f"FAILURE: {msg}", err=True)
    sys.exit(1)

def get_client():
    # upload client, configured from global options
    from aritem.uploads import UploadClient
    import aritem.uploads as uu

    if global_opts.get('verbose', False):
        uu.VERBOSE = True

    return UploadClient(server=global_opts.get('server'), gateway=global_opts.get('gateway'))

def to_be_index(ui_index):
    # roster counts from 0, humans from 1
    if not (1 <= ui_index <= len(ROSTER)):
        fail(f"Pick a character from 1 to {len(ROSTER)}")
    return ui_index - 1

def parse_tags(content_type, tag_args):
    # --tag Name=Value (repeatable), content type always goes first
    rv = [('Content-Type', content_type)]
    for t in tag_args:
        if '=' not in t:
            fail(f"Tag needs to be Name=Value: {t}")
        name, value = t.split('=', 1)
        rv.append((name, value))
    return rv

def guess_type(fname, content_type):
    if content_type:
        return content_type
    ct, _ = mimetypes.guess_type(fname)
    return ct or 'application/octet-stream'

def dump_dict(d):
    for k,v in d.items():
        if isinstance(v, (bytes, bytearray)):
            v = B2A(v)
        click.echo('%s: %s' % (k, v))

def show_url(url, qr=False, outfile=None):
    click.echo(url)

    if not (qr or outfile):
        return

    import pyqrcode
    q = pyqrcode.create(url, error='L')

    if not outfile:
        print(q.terminal(quiet_zone=2))
    else:
        if outfile.name.lower().endswith('.svg'):
            q.svg(outfile, scale=1)
        else:
            q.png(outfile)

        click.echo(f"Wrote {outfile.tell():,} bytes to: {outfile.name}", err=1)

# Accept any prefix of a command name.
#
# from <https://click.palletsprojects.com/en/8.0.x/advanced/?#command-aliases>
class AliasedGroup(click.Group):
    def get_command(self, ctx, cmd_name):
        rv = click.Group.get_command(self, ctx, cmd_name)
        if rv is not None:
            return rv
        matches = [x for x in self.list_commands(ctx)
                   if x.startswith(cmd_name)]
        if not matches:
            return None
        elif len(matches) == 1:
            return click.Group.get_command(self, ctx, matches[0])
        ctx.fail(f"Abiguous command. Pick one of: {' | '.join(sorted(matches))}")

    def resolve_command(self, ctx, args):
        # always return the full command name
        _, cmd, args = super().resolve_command(ctx, args)
        return cmd.name, cmd, args

# options shared by commands that end with a URL
def url_options(f):
    f = click.option('--outfile', '-o', metavar="filename.png", default=None, type=click.File('wb'),
                        help="Save URL as QR in SVG or PNG (depends on extension)")(f)
    f = click.option('--qr', '-q', is_flag=True, help="Show URL as QR code")(f)
    return f

#
# Options we want for all commands
#
@click.group(cls=AliasedGroup)
@click.option('--server', '-s', default=None, metavar="URL",
                    help=f"Upload node (default: {DEFAULT_SERVER})")
@click.option('--gateway', '-g', default=None, metavar="URL",
                    help="Retrieval URL template, with {id} in it")
@click.option('--verbose', '-v', is_flag=True,
                    help="Show traffic with upload node.")
@click.option('--pdb', is_flag=True,
                    help="Prepare patient for surgery to remove bugs.")
@click.version_option(version=__version__)
def main(**kws):
    '''
    Build, sign and upload data items. Character metadata too.

    You can use "up", or "u" for "upload": any distinct prefix for all commands.

    '''
    # implement PDB option here
    if kws.pop('pdb', False):
        import pdb, sys
        def doit(ex_cls, ex, tb):
            pdb.pm()
        sys.excepthook = doit

    if kws.get('server'):
        kws['server'] = kws['server'].rstrip('/')
    if kws.get('gateway') and '{id}' not in kws['gateway']:
        fail("Gateway template needs {id} in it somewhere")

    # global options, mostly not considered here
    global global_opts
    global_opts.update(kws)

@main.command('version')
def get_version():
    "Show version of this tool"
    click.echo(__version__)

@main.command('list')
def list_characters():
    "List characters that can be uploaded (by number)."

    click.echo('  # | NAME   |  HP | ATK | DEF | DESCRIPTION')
    click.echo('----+--------+-----+-----+-----+------------')
    for n, ch in enumerate(ROSTER, 1):
        click.echo('%3d | %-6s | %3d | %3d | %3d | %s'
                        % (n, ch.name, ch.hp, ch.atk, ch.defense, ch.description))

@main.command('decode')
@click.argument('address', type=str)
def decode_address(address):
    "Decode base58 address into 32-byte pubkey (hex)"
    try:
        pubkey = decode_pubkey(address)
    except DecodeError as err:
        fail(str(err))

    click.echo(B2A(pubkey))

@main.command('build')
@click.argument('infile', type=click.File('rb'))
@click.option('--content-type', '-t', default=None, help="Content type tag (default: guess from name)")
@click.option('--tag', 'tags', multiple=True, metavar="Name=Value", help="Extra tags")
@click.option('--outfile', '-o', type=click.File('wb'), required=True, help="Where to write item")
def build_item(infile, content_type, tags, outfile):
    "Sign a file with a throw-away key and write the data item, but don't upload it"
    payload = infile.read()
    tags = parse_tags(guess_type(infile.name, content_type), tags)

    seed, _ = CT_pick_keypair()
    item = DataItem.create(payload, tags, seed)
    outfile.write(item.serialize())

    click.echo(item.id)
    click.echo(f"Wrote {outfile.tell():,} bytes to: {outfile.name}", err=1)

@main.command('inspect')
@click.argument('infile', type=click.File('rb'))
def inspect_item(infile):
    "Parse a data item file and check its signature"
    try:
        item = DataItem.parse(infile.read())
    except ValueError as err:
        fail(f"Not a data item: {err}")

    dump_dict(item.as_dict())

    if not item.verify():
        fail("Signature does NOT verify")

    click.echo('Signature: OK')

@main.command('upload')
@click.argument('infile', type=click.File('rb'))
@click.option('--content-type', '-t', default=None, help="Content type tag (default: guess from name)")
@click.option('--tag', 'tags', multiple=True, metavar="Name=Value", help="Extra tags")
@url_options
def upload_file(infile, content_type, tags, qr, outfile):
    "Upload a file, show its URL"
    payload = infile.read()
    tags = parse_tags(guess_type(infile.name, content_type), tags)

    res = asyncio.run(get_client().upload(payload, tags))

    show_url(res.url, qr, outfile)

@main.command('render')
@click.argument('index', type=int, metavar="[CHAR#]")
@click.option('--svg', is_flag=True, help="Write the full SVG figure instead of PNG")
@click.option('--outfile', '-o', type=click.File('wb'), required=True, metavar="filename.png")
def render_art(index, svg, outfile):
    "Render a character's art to PNG (what 'character' would upload), or SVG"
    idx = to_be_index(index)
    ch = ROSTER[idx]

    if svg:
        image = generate_character_svg(idx, ch.name).encode('utf-8')
    else:
        from aritem.render import render_character
        image, _ = render_character(idx * HUE_STEP, ch.hp, ch.atk, ch.defense)

    outfile.write(image)

    click.echo(f"Wrote {outfile.tell():,} bytes to: {outfile.name}", err=1)

@main.command('character')
@click.argument('index', type=int, metavar="[CHAR#]")
@click.option('--offline', is_flag=True,
                help="No upload: show a data: URI with tiny metadata instead")
@url_options
def upload_character(index, offline, qr, outfile):
    "Upload art + metadata for one character; shows metadata URL"
    idx = to_be_index(index)
    ch = ROSTER[idx]

    if offline:
        show_url(build_character_metadata_uri(idx, ch.name, ch.description), qr, outfile)
        return

    from aritem.metadata import MetadataUploader

    mu = MetadataUploader(get_client())

    click.echo(f"Uploading image & metadata for {ch.name}...", err=1)
    url = asyncio.run(mu.upload_character_metadata(idx, ch.name, ch.description,
                                                        ch.hp, ch.atk, ch.defense))

    show_url(url, qr, outfile)

@main.command('collection')
@click.argument('name', type=str, default=COLLECTION_NAME, required=False)
@click.option('--no-fallback', '-x', is_flag=True,
                help="Fail if upload fails, instead of making a data: URI")
@url_options
def upload_collection(name, no_fallback, qr, outfile):
    "Upload collection metadata; falls back to an offline data: URI"
    from aritem.metadata import MetadataUploader

    mu = MetadataUploader(get_client())

    try:
        url = asyncio.run(mu.upload_text(collection_metadata_json(name), CT_JSON))
    except UploadError as err:
        if no_fallback:
            raise
        click.echo(f"Upload failed ({err}), using data: URI instead", err=1)
        url = build_collection_metadata_uri(name)

    show_url(url, qr, outfile)

# EOF
