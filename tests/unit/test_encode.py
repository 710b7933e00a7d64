from unittest import TestCase
from fundme.db.encoder import encode, decode, encode_kv, tag_big_ints


class TestEncode(TestCase):
    def test_int_passes_through(self):
        self.assertEqual(encode(1), '1')

    def test_bool_is_not_treated_as_int(self):
        self.assertEqual(encode(True), 'true')
        self.assertIs(decode('true'), True)

    def test_big_int_encoded_as_string(self):
        wei = 10000 * 10 ** 18
        self.assertEqual(encode(wei), '{"__big_int__":"10000000000000000000000"}')

    def test_big_int_decodes_to_int(self):
        wei = 10000 * 10 ** 18
        self.assertEqual(decode(encode(wei)), wei)

    def test_negative_big_int(self):
        self.assertEqual(tag_big_ints(-(2 ** 64)), {"__big_int__": str(-(2 ** 64))})
        self.assertEqual(decode(encode(-(2 ** 64))), -(2 ** 64))

    def test_big_ints_nested(self):
        data = {'a': 2 ** 70, 'b': [1, 2 ** 70], 'c': 'x'}
        self.assertDictEqual(decode(encode(data)), data)

    def test_tuple_becomes_list(self):
        self.assertEqual(decode(encode((1, 2))), [1, 2])

    def test_bytes(self):
        self.assertEqual(encode(b'\x01\x02'), '{"__bytes__":"0102"}')
        self.assertEqual(decode(encode(b'\x01\x02')), b'\x01\x02')

    def test_decode_bytes_input(self):
        self.assertEqual(decode(b'"howdy"'), 'howdy')

    def test_decode_invalid_returns_none(self):
        self.assertIsNone(decode('not json'))

    def test_decode_none(self):
        self.assertIsNone(decode(None))

    def test_encode_kv(self):
        k, v = encode_kv('contract.variable', 100)
        self.assertEqual(k, b'contract.variable')
        self.assertEqual(v, b'100')
