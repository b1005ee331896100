from ttf2mif.encoder import GLYPH_SIZE

ON = '█'
OFF = '·'


def glyph_rows(data, index):
    offset = index * GLYPH_SIZE
    return data[offset:offset + GLYPH_SIZE]


def format_scanlines(data, index):
    """Scanlines of one glyph as binary strings, most significant bit first."""
    return [f"{row:08b}" for row in glyph_rows(data, index)]


def format_glyph(data, index):
    """Glyph as text art, column 0 (bit 0) on the left."""
    return [
        "".join(ON if row & (1 << x) else OFF for x in range(GLYPH_SIZE))
        for row in glyph_rows(data, index)
    ]
