import io

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

UPEM = 1000
ASCENT = 800
DESCENT = -200


class FakeRasterizer:
    """Rasterizer double: `glyphs` maps a code to its (x, y, coverage) samples."""

    def __init__(self, glyphs):
        self.glyphs = glyphs
        self.lookups = []

    def glyph(self, code):
        self.lookups.append(code)
        return code if code in self.glyphs else None

    def rasterize(self, glyph):
        return iter(self.glyphs[glyph])


def build_font(boxes):
    """TrueType font bytes with one rectangle glyph per code.

    `boxes` maps a code to (xmin, ymin, xmax, ymax) in font units, or to
    None for a glyph without contours.
    """
    names = {code: f'uni{code:04X}' for code in boxes}
    glyph_order = ['.notdef'] + list(names.values())

    glyphs = {'.notdef': TTGlyphPen(None).glyph()}
    metrics = {'.notdef': (UPEM, 0)}
    for code, box in boxes.items():
        pen = TTGlyphPen(None)
        if box is not None:
            xmin, ymin, xmax, ymax = box
            pen.moveTo((xmin, ymin))
            pen.lineTo((xmin, ymax))
            pen.lineTo((xmax, ymax))
            pen.lineTo((xmax, ymin))
            pen.closePath()
        glyphs[names[code]] = pen.glyph()
        metrics[names[code]] = (UPEM, box[0] if box else 0)

    fb = FontBuilder(UPEM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({code: name for code, name in names.items()})
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupNameTable({'familyName': 'Block Test', 'styleName': 'Regular'})
    fb.setupOS2(sTypoAscender=ASCENT, sTypoDescender=DESCENT,
                usWinAscent=ASCENT, usWinDescent=-DESCENT)
    fb.setupPost()

    out = io.BytesIO()
    fb.save(out)
    return out.getvalue()


@pytest.fixture
def block_font():
    # 'A' and ',' are squares, ' ' has no contours, 'B' is missing
    return build_font({
        0x20: None,
        0x2C: (100, 0, 600, 500),
        0x41: (100, 0, 600, 500),
    })


@pytest.fixture
def font_file(tmp_path, block_font):
    path = tmp_path / 'block.ttf'
    path.write_bytes(block_font)
    return path
