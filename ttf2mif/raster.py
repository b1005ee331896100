"""
FreeType glyph rasterizer.

Decodes a font from memory and renders single glyphs as coverage samples.
Scalable faces are sized so that the ascender to descender extent is
`scale` pixels high; bitmap-only faces use their nearest strike.
"""

import io
from collections import namedtuple

import freetype

from ttf2mif.errors import FontDecodeError

Glyph = namedtuple('Glyph', 'index width rows pitch pixel_mode buffer')


class FreeTypeRasterizer:

    def __init__(self, font_data, scale=8.0):
        self.scale = scale
        try:
            self.face = freetype.Face(io.BytesIO(font_data))
            self._set_size(scale)
        except freetype.FT_Exception as e:
            raise FontDecodeError(f"cannot decode font: {e}") from e

    def _set_size(self, scale):
        face = self.face
        if not face.is_scalable:
            face.set_pixel_sizes(0, round(scale))
            return
        height = face.ascender - face.descender
        ppem = scale * face.units_per_EM / height if height > 0 else scale
        face.set_char_size(0, round(ppem * 64))

    @property
    def family_name(self):
        name = self.face.family_name
        return name.decode('latin-1') if name else None

    def glyph(self, code):
        """Render the glyph mapped to `code`, or return None if there is nothing to draw."""
        index = self.face.get_char_index(code)
        if index == 0:
            return None
        self.face.load_glyph(index, freetype.FT_LOAD_RENDER | freetype.FT_LOAD_NO_HINTING)
        bitmap = self.face.glyph.bitmap
        if bitmap.width == 0 or bitmap.rows == 0:
            return None
        return Glyph(index, bitmap.width, bitmap.rows, bitmap.pitch,
                     bitmap.pixel_mode, list(bitmap.buffer))

    def rasterize(self, glyph):
        """Yield (x, y, coverage) for every pixel of the glyph bitmap."""
        for y in range(glyph.rows):
            for x in range(glyph.width):
                if glyph.pixel_mode == freetype.FT_PIXEL_MODE_MONO:
                    byte = glyph.buffer[y * glyph.pitch + x // 8]
                    coverage = 1.0 if byte & (0x80 >> (x % 8)) else 0.0
                else:
                    coverage = glyph.buffer[y * glyph.pitch + x] / 255.0
                yield x, y, coverage
