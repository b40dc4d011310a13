"""
b32codec: the base32 family of binary-to-text encodings

Three variants are supported, selected per call:

  Variant.RFC4648_PADDED    RFC 4648 alphabet, '=' padded to 8-symbol groups
  Variant.RFC4648_UNPADDED  RFC 4648 alphabet, no padding
  Variant.CROCKFORD         Crockford's alphabet, no padding, I/L/O tolerant

encode() takes bytes and returns str. decode() takes str or ASCII bytes and
returns bytes, or raises a DecodeError subclass. Both are pure functions over
read-only tables and may be called from any thread.
"""

from b32codec.variants import Variant
from b32codec.alphabet import symbol_for, value_for, fingerprint
from b32codec.encoder import encode, encoded_length
from b32codec.decoder import decode, decoded_length, is_base32
from b32codec.tokens import DecodeError, NonAsciiInput, InvalidCharacter
from b32codec.tokens import InvalidLength, NonZeroPadding

__version__ = '0.1.0'


__all__ = [
    'Variant', 'encode', 'decode', 'encoded_length', 'decoded_length',
    'is_base32', 'symbol_for', 'value_for', 'fingerprint',
    'DecodeError', 'NonAsciiInput', 'InvalidCharacter', 'InvalidLength',
    'NonZeroPadding',
]
