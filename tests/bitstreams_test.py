import unittest
from io import BytesIO

from huffcodec.bitstreams import BitOutputStream, BitInputStream

class TestBitOutputStream(unittest.TestCase):
    def test_bit_output_stream(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        bits = [1, 0, 1, 0, 1, 0, 1, 0]
        for bit in bits:
            bos.write(bit)
        bos.finish()
        result = out.getvalue()
        self.assertEqual(result, bytes([0b10101010]))

    def test_bit_output_stream_padding(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        for bit in [1, 0, 1]:
            bos.write(bit)
        bos.finish()
        result = out.getvalue()
        self.assertEqual(result, bytes([0b10100000]))

    def test_write_bits_msb_first(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        bos.write_bits(12, 0xABC)
        bos.finish()
        self.assertEqual(out.getvalue(), bytes([0xAB, 0xC0]))
        self.assertEqual(bos.bits_written, 12)

    def test_write_bits_keeps_low_bits_only(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        bos.write_bits(4, 0xF5)
        bos.finish()
        self.assertEqual(out.getvalue(), bytes([0x50]))

    def test_invalid_bit_write(self):
        out = BytesIO()
        bos = BitOutputStream(out)
        with self.assertRaises(ValueError):
            bos.write(2)

    def test_invalid_bit_count(self):
        bos = BitOutputStream(BytesIO())
        with self.assertRaises(ValueError):
            bos.write_bits(0, 1)
        with self.assertRaises(ValueError):
            bos.write_bits(33, 1)

    def test_close_is_idempotent(self):
        out = BytesIO()
        bos = BitOutputStream(out, close_underlying=False)
        bos.write(1)
        bos.close()
        bos.close()
        self.assertEqual(out.getvalue(), bytes([0x80]))
        self.assertFalse(out.closed)

    def test_context_manager_closes_underlying(self):
        out = BytesIO()
        with BitOutputStream(out) as bos:
            bos.write(1)
        self.assertTrue(bos.closed)
        self.assertTrue(out.closed)

class TestBitInputStream(unittest.TestCase):
    def test_bit_input_stream(self):
        data = bytes([0b11001010])
        inp = BytesIO(data)
        bis = BitInputStream(inp)
        bits = [bis.read() for _ in range(8)]
        self.assertEqual(bits, [1, 1, 0, 0, 1, 0, 1, 0])
        self.assertEqual(bis.read(), -1)

    def test_read_bits(self):
        bis = BitInputStream(BytesIO(bytes([0xAB, 0xC0])))
        self.assertEqual(bis.read_bits(12), 0xABC)
        self.assertEqual(bis.bits_read, 12)

    def test_read_bits_past_end(self):
        bis = BitInputStream(BytesIO(bytes([0xAB, 0xC0])))
        bis.read_bits(12)
        self.assertEqual(bis.read_bits(8), -1)

    def test_read_full_int(self):
        bis = BitInputStream(BytesIO(bytes([0xFA, 0xCE, 0x82, 0x01])))
        self.assertEqual(bis.read_bits(32), 0xFACE8201)

    def test_invalid_bit_count(self):
        bis = BitInputStream(BytesIO(b"abcdefgh"))
        with self.assertRaises(ValueError):
            bis.read_bits(0)
        with self.assertRaises(ValueError):
            bis.read_bits(33)

    def test_reset(self):
        bis = BitInputStream(BytesIO(b"xy"))
        self.assertEqual(bis.read_bits(3), ord("x") >> 5)
        self.assertEqual(bis.read_bits(8), (((ord("x") << 8) | ord("y")) >> 5) & 0xFF)
        bis.reset()
        self.assertEqual(bis.bits_read, 0)
        self.assertEqual(bis.read_bits(8), ord("x"))
        self.assertEqual(bis.read_bits(8), ord("y"))
        self.assertEqual(bis.read_bits(8), -1)

    def test_context_manager_closes_underlying(self):
        inp = BytesIO(b"a")
        with BitInputStream(inp) as bis:
            bis.read()
        self.assertTrue(inp.closed)

    def test_close_without_underlying(self):
        inp = BytesIO(b"a")
        bis = BitInputStream(inp, close_underlying=False)
        bis.close()
        self.assertFalse(inp.closed)

if __name__ == '__main__':
    unittest.main()
