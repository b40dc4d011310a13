# -*- test-case-name: b32codec.test.test_variants -*-

import enum


class Variant(enum.Enum):
    # the value is the name accepted by lookup(), alongside the member name
    RFC4648_PADDED   = 'rfc4648'
    RFC4648_UNPADDED = 'rfc4648-nopad'
    CROCKFORD        = 'crockford'

    @property
    def padded(self):
        return self is Variant.RFC4648_PADDED

    @property
    def alphabet(self):
        from b32codec.alphabet import ALPHABETS
        return ALPHABETS[self]

    @classmethod
    def lookup(cls, name):
        """Resolve a Variant from a member, its value or its member name.

        Strings are matched case-insensitively, and '_' and '-' are treated
        alike, so 'crockford', 'RFC4648_UNPADDED' and 'rfc4648-nopad' all
        work. Anything else raises ValueError.
        """
        if isinstance(name, cls):
            return name

        if not isinstance(name, str):
            raise ValueError('unknown base32 variant {!r}'.format(name))

        key = name.strip().lower().replace('_', '-')

        for variant in cls:
            if key in (variant.value, variant.name.lower().replace('_', '-')):
                return variant

        raise ValueError('unknown base32 variant {!r}'.format(name))
