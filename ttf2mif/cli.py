#!/usr/bin/env python3
#-------------------------------------------------------------------------
#
#    ttf2mif: font to Intel Quartus Memory Initialization File converter
#
#    Rasterizes a contiguous range of character codes from a TrueType or
#    OpenType font into 8x8 one bit per pixel glyphs and writes them as a
#    .mif ROM initializer, one scanline byte per memory word.
#
#    Usage:
#        ttf2mif <font_file> [-o font.mif] [-r 0..256] [--show 65,66]
#
#    Arguments:
#        FONT: Path to the font file.
#        -o, --out: Output file (default: ./font.mif).
#        -r, --range: Codes to convert, "N" or "A..B" with B exclusive
#                     (default: 0..256). Codes above 255 wrap to a byte.
#        --show: Print the encoded scanlines of the listed codes.
#
#-------------------------------------------------------------------------

import argparse
import logging
import os
import sys

from ttf2mif import VERSION
from ttf2mif.encoder import SCALE, encode
from ttf2mif.errors import FontDecodeError, RangeSyntaxError
from ttf2mif.mif import write_mif
from ttf2mif.preview import format_glyph, format_scanlines
from ttf2mif.raster import FreeTypeRasterizer
from ttf2mif.rangespec import parse_range

ABOUT = ('Converts TrueType (.ttf) and OpenType (.otf) fonts to '
         'Intel Quartus Memory Initialization Files (.mif)')


def range_arg(text):
    try:
        return parse_range(text)
    except RangeSyntaxError as e:
        raise argparse.ArgumentTypeError(str(e))


def codes_arg(text):
    try:
        return [int(code) for code in text.split(',')]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid code list '{text}'")


def build_parser():
    parser = argparse.ArgumentParser(prog='ttf2mif', description=ABOUT)
    parser.add_argument('font_path', metavar='FONT', help='Sets the font file to use.')
    parser.add_argument('-o', '--out', dest='out_path', metavar='FILE', default='./font.mif',
                        help='Sets the path to the output file.')
    parser.add_argument('-r', '--range', dest='range', metavar='RANGE', type=range_arg, default='0..256',
                        help='Sets the range of glyphs to process, "N" or "A..B" (B exclusive).')
    parser.add_argument('--show', metavar='CODE[,CODE...]', type=codes_arg, default=[],
                        help='Print the encoded scanlines of these codes.')
    parser.add_argument('-q', '--quiet', action='store_true', help='Do not print progress.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log every absent or aliased glyph.')
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {VERSION}')
    return parser


def show_glyphs(codes, rangespec, data):
    for code in codes:
        if not rangespec.start <= code < rangespec.end:
            print(f"Character {code} is not in range {rangespec}")
            continue
        index = code - rangespec.start
        print(f"\nCharacter {code} glyph scanlines (binary):")
        for bits, art in zip(format_scanlines(data, index), format_glyph(data, index)):
            print(f"  {bits}  {art}")
    if codes:
        print()


def convert(args, say):
    say(f"Loading font: {args.font_path}")
    with open(args.font_path, 'rb') as f:
        font_data = f.read()
    rasterizer = FreeTypeRasterizer(font_data, SCALE)
    if rasterizer.family_name:
        say(f"Font family: {rasterizer.family_name}")

    say(f"Rasterizing {len(args.range)} characters ({args.range})...")
    font = encode(args.range, rasterizer)

    write_mif(args.out_path, os.path.basename(args.font_path), font.depth, font.data)
    say(f"{args.out_path} written (DEPTH = {font.depth})")

    show_glyphs(args.show, args.range, font.data)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s: %(message)s')
    say = (lambda *a: None) if args.quiet else print

    try:
        convert(args, say)
    except (OSError, FontDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
