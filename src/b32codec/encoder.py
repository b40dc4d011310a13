# -*- test-case-name: b32codec.test.test_encoder -*-

from b32codec.variants import Variant
from b32codec.alphabet import ALPHABETS, PAD

# a trailing group of N octets only needs the quintets that carry real bits.
# num_qs = NUM_OS_TO_NUM_QS[num_os], and the padded variant fills the rest of
# the 8-symbol group with '='.
NUM_OS_TO_NUM_QS = (0, 2, 4, 5, 7)


def encoded_length(variant, num_octets):
    variant = Variant.lookup(variant)
    full, rest = divmod(num_octets, 5)

    if variant.padded:
        return (full + (1 if rest else 0)) * 8

    return full * 8 + NUM_OS_TO_NUM_QS[rest]


def _quintets(b0, b1, b2, b3, b4):
    return (
        b0 >> 3,
        ((b0 & 0x07) << 2) | (b1 >> 6),
        (b1 & 0x3E) >> 1,
        ((b1 & 0x01) << 4) | (b2 >> 4),
        ((b2 & 0x0F) << 1) | (b3 >> 7),
        (b3 & 0x7C) >> 2,
        ((b3 & 0x03) << 3) | (b4 >> 5),
        b4 & 0x1F,
    )


def encode(variant, data):
    """Encode C{data} (any bytes-like object) as base32 text.

    Every 5 octets become 8 symbols. A shorter final group is zero-filled
    for slicing and then cut down to the symbols holding real bits, padded
    back to 8 with '=' for the padded RFC4648 variant only.
    """
    variant = Variant.lookup(variant)

    if isinstance(data, str):
        raise TypeError('base32 encodes bytes, not str')
    data = bytes(memoryview(data))

    alphabet = ALPHABETS[variant]
    output = []

    for start in range(0, len(data), 5):
        group = bytes(data[start:start + 5])
        num_qs = 8 if len(group) == 5 else NUM_OS_TO_NUM_QS[len(group)]

        quintets = _quintets(*group.ljust(5, b'\x00'))
        output.extend(alphabet[q] for q in quintets[:num_qs])

        if num_qs < 8 and variant.padded:
            output.append(PAD * (8 - num_qs))

    return ''.join(output)
