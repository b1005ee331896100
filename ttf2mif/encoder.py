"""
Packs rasterized glyphs into one byte per scanline.

Every character of the range owns GLYPH_SIZE consecutive bytes of the
buffer, top scanline first. Bit x of a scanline byte is column x, so
column 0 is the least significant bit. A pixel is set when its coverage
is nonzero; there are no gray levels.
"""

import logging
from collections import namedtuple

log = logging.getLogger(__name__)

GLYPH_SIZE = 8
SCALE = 8.0
# codes are narrowed to a single byte before lookup, so 300 draws code 44
CODE_MASK = 0xFF

EncodedFont = namedtuple('EncodedFont', 'depth data')


def fill_glyph(data, offset, samples):
    """OR the covered samples into the 8 bytes at `offset`.

    Returns the number of samples dropped for lying outside the cell.
    """
    dropped = 0
    for x, y, coverage in samples:
        if coverage == 0.0:
            continue
        if not (0 <= x < GLYPH_SIZE and 0 <= y < GLYPH_SIZE):
            dropped += 1
            continue
        data[offset + y] |= 1 << x
    return dropped


def encode(rangespec, rasterizer):
    """Rasterize every code of `rangespec` and return the packed buffer."""
    depth = len(rangespec) * GLYPH_SIZE
    data = bytearray(depth)

    for r, code in enumerate(rangespec):
        narrowed = code & CODE_MASK
        if narrowed != code:
            log.debug('code %d aliases to %d', code, narrowed)

        glyph = rasterizer.glyph(narrowed)
        if glyph is None:
            log.debug('code %d (U+%04X): no glyph', code, narrowed)
            continue

        dropped = fill_glyph(data, r * GLYPH_SIZE, rasterizer.rasterize(glyph))
        if dropped:
            log.warning('code %d: %d covered pixels outside the %dx%d cell dropped',
                        code, dropped, GLYPH_SIZE, GLYPH_SIZE)

    return EncodedFont(depth, bytes(data))
