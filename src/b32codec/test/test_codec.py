# -*- test-case-name: b32codec.test.test_codec -*-

import random

from twisted.trial import unittest
from twisted.internet import defer, threads

import b32codec
from b32codec import Variant, encode, decode


class Invertible(unittest.TestCase):
    def test_every_length(self):
        rng = random.Random(4648)

        for v in Variant:
            for n in range(0, 67):
                data = bytes(rng.randrange(256) for _ in range(n))
                self.assertEqual(decode(v, encode(v, data)), data, (v, n))

    def test_every_octet(self):
        for v in Variant:
            for i in range(256):
                data = bytes([i]) * 5
                self.assertEqual(decode(v, encode(v, data)), data)
                self.assertEqual(decode(v, encode(v, data[:3])), data[:3])

    def test_strict_accepts_encoder_output(self):
        rng = random.Random(32)

        for v in Variant:
            for n in range(0, 21):
                data = bytes(rng.randrange(256) for _ in range(n))
                self.assertEqual(decode(v, encode(v, data), strict=True), data)

    def test_crockford_lower_case(self):
        rng = random.Random(5)
        alphabet = Variant.CROCKFORD.alphabet

        for n in range(0, 25):
            text = ''.join(rng.choice(alphabet) for _ in range(n))
            self.assertEqual(decode(Variant.CROCKFORD, text),
                             decode(Variant.CROCKFORD, text.lower()))


class IsBase32(unittest.TestCase):
    def test_valid(self):
        self.assertTrue(b32codec.is_base32(Variant.RFC4648_PADDED, '7A7H7AY='))
        self.assertTrue(b32codec.is_base32('rfc4648-nopad', 'mzxw6ytboi'))
        self.assertTrue(b32codec.is_base32(Variant.CROCKFORD, 'hello'))
        self.assertTrue(b32codec.is_base32(Variant.RFC4648_PADDED, b'MZXW6==='))
        self.assertTrue(b32codec.is_base32(Variant.CROCKFORD, ''))

    def test_invalid(self):
        self.assertFalse(b32codec.is_base32(Variant.RFC4648_UNPADDED, '7A7H7AY='))
        self.assertFalse(b32codec.is_base32(Variant.RFC4648_PADDED, '7A=H7AY='))
        self.assertFalse(b32codec.is_base32(Variant.RFC4648_PADDED, '01'))
        self.assertFalse(b32codec.is_base32(Variant.CROCKFORD, 'u'))
        self.assertFalse(b32codec.is_base32(Variant.CROCKFORD, 'ABé'))
        self.assertFalse(b32codec.is_base32(Variant.CROCKFORD, b'AB\xff'))

    def test_follows_strict_decoding(self):
        # padding only as the trailing run of the padded variant
        self.assertFalse(b32codec.is_base32(Variant.RFC4648_PADDED, 'A=AAAAAA'))
        self.assertFalse(b32codec.is_base32(Variant.RFC4648_PADDED, 'MZXW6YTB========'))
        self.assertFalse(b32codec.is_base32(Variant.RFC4648_UNPADDED, 'MY======'))
        self.assertFalse(b32codec.is_base32(Variant.RFC4648_UNPADDED, 'MZ'))
        self.assertFalse(b32codec.is_base32(Variant.RFC4648_PADDED, 'MY'))
        self.assertTrue(b32codec.is_base32(Variant.RFC4648_UNPADDED, 'MY'))

    def test_memoryview(self):
        self.assertTrue(b32codec.is_base32(Variant.RFC4648_PADDED, memoryview(b'MZXW6===')))
        self.assertFalse(b32codec.is_base32(Variant.CROCKFORD, memoryview(b'U')))


class Threads(unittest.TestCase):
    def test_concurrent_calls(self):
        rng = random.Random(8)
        samples = [bytes(rng.randrange(256) for _ in range(n)) for n in range(40)]

        def roundtrip(v, data):
            return decode(v, encode(v, data))

        ds = [threads.deferToThread(roundtrip, v, data)
              for v in Variant for data in samples]
        d = defer.gatherResults(ds)

        def _check(results):
            self.assertEqual(results, samples * len(Variant))

        return d.addCallback(_check)
