# -*- test-case-name: b32codec.test.test_decoder -*-

from twisted.logger import Logger

from b32codec.variants import Variant
from b32codec.alphabet import PAD, value_for
from b32codec.tokens import (DecodeError, NonAsciiInput, InvalidCharacter,
                             InvalidLength, NonZeroPadding)

log = Logger()

# padding never covers more than 6 of the 8 symbols in the last group
MAX_PAD = 6

# for a trailing group of N symbols, NUM_QS_LEGIT[N] says whether any octet
# count encodes to it, and SLACK_BITS[N] how many low bits of the last symbol
# are left over once the whole octets are taken out.
NUM_QS_LEGIT = (1, 0, 1, 0, 1, 1, 0, 1)
SLACK_BITS   = (0, 5, 2, 7, 4, 1, 6, 3)


def as_text(text):
    if isinstance(text, str):
        for position, char in enumerate(text):
            if ord(char) > 0x7F:
                raise NonAsciiInput(position)
        return text

    data = bytes(memoryview(text))
    for position, byte in enumerate(data):
        if byte > 0x7F:
            raise NonAsciiInput(position)
    return data.decode('ascii')


def _unpadded_length(text):
    length = len(text)
    while length > 0 and len(text) - length < MAX_PAD and text[length - 1] == PAD:
        length -= 1
    return length


def decoded_length(variant, text):
    """Return how many octets C{text} decodes to, without decoding it."""
    Variant.lookup(variant)
    return _unpadded_length(as_text(text)) * 5 // 8


def _octets(q0, q1, q2, q3, q4, q5, q6, q7):
    return (
        ((q0 << 3) | (q1 >> 2)) & 0xFF,
        ((q1 << 6) | (q2 << 1) | (q3 >> 4)) & 0xFF,
        ((q3 << 4) | (q4 >> 1)) & 0xFF,
        ((q4 << 7) | (q5 << 2) | (q6 >> 3)) & 0xFF,
        ((q6 << 5) | q7) & 0xFF,
    )


def _check_strict(variant, text, unpadded_length, quintets):
    # '=' only ever appears as the trailing run of the padded variant
    limit = unpadded_length if variant.padded else len(text)
    position = text.find(PAD, 0, limit)
    if position != -1:
        raise InvalidCharacter(PAD, position)

    rest = unpadded_length % 8

    if not NUM_QS_LEGIT[rest]:
        raise InvalidLength('%d base32 symbols cannot encode whole octets'
                            % unpadded_length)

    # with at most 6 '=' and a legit remainder, a whole number of groups
    # means exactly 8 - rest of them
    if variant.padded and len(text) % 8:
        raise InvalidLength('padded base32 must be a multiple of 8 symbols, got %d'
                            % len(text))

    if rest and quintets[unpadded_length - 1] & ((1 << SLACK_BITS[rest]) - 1):
        raise NonZeroPadding('unused bits of symbol %d are not zero'
                             % (unpadded_length - 1))


def _quintets(variant, text, strict):
    text = as_text(text)
    unpadded_length = _unpadded_length(text)

    quintets = [value_for(variant, char, position)
                for position, char in enumerate(text)]

    if strict:
        _check_strict(variant, text, unpadded_length, quintets)

    return quintets, unpadded_length * 5 // 8


def decode(variant, text, strict=False):
    """Decode base32 C{text} (str or ASCII bytes) into bytes.

    Decoding is case-insensitive. Up to 6 trailing '=' are dropped before
    the output length is worked out. The first bad character aborts the whole
    decode with a DecodeError subclass, no partial output is returned.

    By default bits left over in a short final group are silently dropped,
    whatever their value, lengths no encoder could produce are let through,
    and for RFC4648 any '=' reads as zero bits. C{strict=True} accepts only
    what encode() produces: it rejects all of those, and any '=' outside the
    trailing padding run of the padded variant.
    """
    variant = Variant.lookup(variant)

    try:
        quintets, output_length = _quintets(variant, text, strict)
    except DecodeError as exc:
        log.debug('rejected {variant} input: {reason}',
                  variant=variant.value, reason=str(exc))
        raise

    output = bytearray()

    for start in range(0, len(quintets), 8):
        group = quintets[start:start + 8]
        group.extend([0] * (8 - len(group)))
        output.extend(_octets(*group))

    del output[output_length:]
    return bytes(output)


def is_base32(variant, text):
    """Return True if C{text} is something encode() could have produced for
    C{variant}, up to letter case and Crockford's I/L/O aliases.

    This is the strict decoding rule: '=' is allowed only as the trailing
    padding run of the padded RFC4648 variant.
    """
    variant = Variant.lookup(variant)
    try:
        _quintets(variant, text, strict=True)
    except DecodeError:
        return False
    return True
