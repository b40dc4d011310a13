
class DecodeError(ValueError):
    """The text could not be decoded as base32 of the requested variant."""


class NonAsciiInput(DecodeError):
    """The text contains a character outside the 7-bit ASCII range."""

    def __init__(self, position):
        super().__init__('non-ASCII character at position %d' % position)
        self.position = position


class InvalidCharacter(DecodeError):
    """A character does not map to any quintet, even after case folding and
    alias resolution."""

    def __init__(self, char, position=None):
        if position is None:
            msg = 'invalid base32 character %r' % (char,)
        else:
            msg = 'invalid base32 character %r at position %d' % (char, position)
        super().__init__(msg)
        self.char     = char
        self.position = position


class InvalidLength(DecodeError):
    """No octet count encodes to this many symbols (strict decoding only)."""


class NonZeroPadding(DecodeError):
    """The discarded low bits of the final symbol are not zero (strict
    decoding only)."""
