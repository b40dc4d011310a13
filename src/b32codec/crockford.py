"""
crockford.py: base32 with Douglas Crockford's alphabet

Shorthand for the CROCKFORD variant, for callers that only ever deal with
human-typed identifiers. The symbol set is 10 digits and 22 letters,
excluding I, L, O and U. Encoding emits upper-case symbols and no padding.
Decoding is not case sensitive, and 'i' and 'l' read as '1', 'o' as '0'.
"""

from b32codec import encoder, decoder
from b32codec.alphabet import symbol_for, value_for
from b32codec.variants import Variant

__all__ = ['encode', 'decode', 'normalize']


def encode(data):
    return encoder.encode(Variant.CROCKFORD, data)


def decode(text, strict=False):
    return decoder.decode(Variant.CROCKFORD, text, strict=strict)


def normalize(text):
    """Return the canonical spelling of C{text}: upper case, with I and L
    rewritten as 1 and O as 0.

    Raises DecodeError if C{text} is not valid Crockford base32.
    """
    text = decoder.as_text(text)
    return ''.join(symbol_for(Variant.CROCKFORD, value_for(Variant.CROCKFORD, char, position))
                   for position, char in enumerate(text))
