#
# (c) Copyright 2022 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# Character artwork as PNG bytes.
#
# Same stick figure as fallback.generate_character_svg(), drawn with Pillow,
# plus the HP, ATK and DEF numbers along the bottom edge.
#
import colorsys
from io import BytesIO

from PIL import Image, ImageDraw

from .constants import CT_PNG

WIDTH, HEIGHT = 120, 160
BACKGROUND = (10, 10, 10)
STROKE = 2

# (x1, y1, x2, y2) from the SVG version
FIGURE_LINES = [
    (60, 51, 60, 100),      # body
    (60, 65, 35, 85),       # arms
    (60, 65, 85, 85),
    (60, 100, 40, 140),     # legs
    (60, 100, 80, 140),
]
HEAD = (60, 35, 16)

# label prefix and x position, in the order (hp, atk, defense)
STAT_LABELS = [ ('HP', 4), ('ATK', 44), ('DEF', 84) ]
STAT_Y = 146

def hue_to_rgb(hue):
    # hsl(hue, 80%, 60%) as 0..255 ints
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, 0.60, 0.80)
    return tuple(int(round(c * 255)) for c in (r, g, b))

def render_character(hue, hp, atk, defense):
    # returns (png bytes, content type)
    colour = hue_to_rgb(hue)

    img = Image.new('RGB', (WIDTH, HEIGHT), BACKGROUND)
    draw = ImageDraw.Draw(img)

    cx, cy, r = HEAD
    draw.ellipse((cx-r, cy-r, cx+r, cy+r), outline=colour, width=STROKE)
    for xy in FIGURE_LINES:
        draw.line(xy, fill=colour, width=STROKE)

    for (label, x), value in zip(STAT_LABELS, (hp, atk, defense)):
        draw.text((x, STAT_Y), f'{label}{value}', fill=colour)

    fd = BytesIO()
    img.save(fd, 'PNG')

    return fd.getvalue(), CT_PNG

# EOF
