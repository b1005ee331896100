"""
Parser for the compact character range expressions accepted by --range.

    RANGE := DIGITS [ '..' DIGITS ]

"N" selects the single code N, "A..B" the half-open interval [A, B).
The expression is scanned once, left to right, by a small state machine;
the first character that has no transition from the current state is
reported together with its position.
"""

from dataclasses import dataclass

from ttf2mif.errors import RangeSyntaxError

DIGITS = '0123456789'

# one past the last Unicode scalar value
MAX_CODE = 0x110000

TRANSITIONS = {
    ('start', 'digit'): 'start-digits',
    ('start-digits', 'digit'): 'start-digits',
    ('start-digits', 'dot'): 'dot',
    ('dot', 'dot'): 'dots',
    ('dots', 'digit'): 'end-digits',
    ('end-digits', 'digit'): 'end-digits',
}

# reason reported when a state has no transition for the next character,
# or when the input ends in that state
REJECTS = {
    'start': 'first character must be a digit',
    'start-digits': 'invalid character',
    'dot': "expected '.'",
    'dots': "expected a digit after '..'",
    'end-digits': 'invalid character',
}

ACCEPTING = ('start-digits', 'end-digits')


@dataclass(frozen=True)
class RangeSpec:
    """Half-open interval [start, end) of character codes."""

    start: int
    end: int

    def __len__(self):
        return max(0, self.end - self.start)

    def __iter__(self):
        return iter(range(self.start, self.end))

    def __str__(self):
        return f"{self.start}..{self.end}"


def char_class(c):
    if c in DIGITS:
        return 'digit'
    if c == '.':
        return 'dot'
    return 'other'


def literal(text, begin, end):
    digits = text[begin:end].lstrip('0')
    # checked before int() so huge literals never reach the conversion limit
    if len(digits) > len(str(MAX_CODE)):
        raise RangeSyntaxError('value too large', text, begin)
    value = int(digits or '0')
    if value > MAX_CODE:
        raise RangeSyntaxError('value too large', text, begin)
    return value


def parse_range(text):
    """Parse a range expression into a RangeSpec.

    Raises RangeSyntaxError for anything outside the grammar. No ordering
    is required between the bounds: "9..3" is a valid, empty range.
    """
    if not text:
        raise RangeSyntaxError('empty range', text, 0)

    state = 'start'
    split = None
    for pos, c in enumerate(text):
        next_state = TRANSITIONS.get((state, char_class(c)))
        if next_state is None:
            raise RangeSyntaxError(REJECTS[state], text, pos)
        if next_state == 'dot':
            split = pos
        state = next_state

    if state not in ACCEPTING:
        raise RangeSyntaxError(REJECTS[state], text, len(text))

    if split is None:
        start = literal(text, 0, len(text))
        return RangeSpec(start, start + 1)
    return RangeSpec(literal(text, 0, split), literal(text, split + 2, len(text)))

