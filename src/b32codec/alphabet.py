# -*- test-case-name: b32codec.test.test_alphabet -*-

import hashlib

from b32codec.variants import Variant
from b32codec.tokens import InvalidCharacter

# here are the forward tables. The index of a symbol is the quintet it
# encodes, so each alphabet must hold exactly 32 distinct symbols.

RFC4648_ALPHABET   = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ234567'
CROCKFORD_ALPHABET = '0123456789ABCDEFGHJKMNPQRSTVWXYZ'  # no I, L, O or U

PAD = '='

ALPHABETS = {
    Variant.RFC4648_PADDED  : RFC4648_ALPHABET,
    Variant.RFC4648_UNPADDED: RFC4648_ALPHABET,
    Variant.CROCKFORD       : CROCKFORD_ALPHABET,
}

# the inverse tables cover the contiguous range '0'..'Z'. Anything outside
# that range, or on an INVALID slot, is not a base32 character.

FIRST   = ord('0')
LAST    = ord('Z')
INVALID = -1

# characters that decode to the value of another symbol. Crockford folds the
# look-alike letters onto digits. For RFC4648 a stray '=' reads as zero bits,
# which is what lets over-long padding runs through.
RFC4648_ALIASES   = {PAD: 'A'}
CROCKFORD_ALIASES = {'I': '1', 'L': '1', 'O': '0'}


def _build_inverse(alphabet, aliases):
    assert len(alphabet) == 32, alphabet
    assert len(set(alphabet)) == 32, alphabet

    table = [INVALID] * (LAST - FIRST + 1)

    for value, symbol in enumerate(alphabet):
        table[ord(symbol) - FIRST] = value

    for alias, symbol in aliases.items():
        assert table[ord(alias) - FIRST] == INVALID, alias
        table[ord(alias) - FIRST] = table[ord(symbol) - FIRST]

    return tuple(table)


RFC4648_INVERSE   = _build_inverse(RFC4648_ALPHABET, RFC4648_ALIASES)
CROCKFORD_INVERSE = _build_inverse(CROCKFORD_ALPHABET, CROCKFORD_ALIASES)

assert len(RFC4648_INVERSE) == len(CROCKFORD_INVERSE) == 43

INVERSES = {
    Variant.RFC4648_PADDED  : RFC4648_INVERSE,
    Variant.RFC4648_UNPADDED: RFC4648_INVERSE,
    Variant.CROCKFORD       : CROCKFORD_INVERSE,
}


def symbol_for(variant, value):
    if not 0 <= value < 32:
        raise IndexError('quintet out of range: %r' % (value,))
    return ALPHABETS[Variant.lookup(variant)][value]


def value_for(variant, char, position=None):
    """Return the quintet for a single character of C{variant}'s alphabet.

    The character is uppercased first, so lookups are case-insensitive, and
    Crockford's I, L and O resolve to 1, 1 and 0. Raises InvalidCharacter
    for anything else. C{position} is only carried into the error.
    """
    variant = Variant.lookup(variant)

    if not char.isascii():
        raise InvalidCharacter(char, position)

    index = ord(char.upper()) - FIRST

    if index < 0 or index > LAST - FIRST:
        raise InvalidCharacter(char, position)

    value = INVERSES[variant][index]

    if value == INVALID:
        raise InvalidCharacter(char, position)

    return value


# so two ends can check they are using the same symbols, the forward table
# hashes into a short string.

def fingerprint(variant):
    variant = Variant.lookup(variant)
    digest = hashlib.sha1(ALPHABETS[variant].encode('ascii')).hexdigest()
    return digest[:8]
