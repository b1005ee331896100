class Ttf2MifError(Exception):
    """Base class for ttf2mif errors."""


class RangeSyntaxError(Ttf2MifError, ValueError):
    """A range expression does not match the RANGE grammar."""

    def __init__(self, reason, text, position):
        self.reason = reason
        self.text = text
        self.position = position
        super().__init__(f"{reason} at position {position} in '{text}'")


class FontDecodeError(Ttf2MifError):
    """The font bytes could not be decoded by FreeType."""
