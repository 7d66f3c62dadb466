import unittest

from huffcodec.codes import make_codings_from_tree
from huffcodec.frequency import count_bytes
from huffcodec.models import HuffmanLeaf, HuffmanInternal, CodeTable
from huffcodec.settings import ALPH_SIZE, PSEUDO_EOF
from huffcodec.tree import make_tree_from_counts

def _codes_for(data):
    return make_codings_from_tree(make_tree_from_counts(count_bytes(data)))

def _is_prefix_free(codes):
    ordered = sorted(codes)
    return all(not b.startswith(a) for a, b in zip(ordered, ordered[1:]))

class TestMakeCodingsFromTree(unittest.TestCase):
    def test_skewed_input(self):
        codes = _codes_for(b"AAAAAAAAB")
        self.assertIsInstance(codes, CodeTable)
        self.assertEqual(dict(codes), {ord("A"): "1", ord("B"): "00", PSEUDO_EOF: "01"})
        self.assertLess(len(codes[ord("A")]), len(codes[ord("B")]))

    def test_single_leaf(self):
        codes = make_codings_from_tree(HuffmanLeaf(PSEUDO_EOF, 1))
        self.assertEqual(dict(codes), {PSEUDO_EOF: "0"})

    def test_paths(self):
        tree = HuffmanInternal(0, HuffmanLeaf(1), HuffmanInternal(0, HuffmanLeaf(2), HuffmanLeaf(3)))
        self.assertEqual(dict(make_codings_from_tree(tree)), {1: "0", 2: "10", 3: "11"})

    def test_all_byte_values_prefix_free(self):
        codes = _codes_for(bytes(range(256)))
        self.assertEqual(len(codes), ALPH_SIZE + 1)
        self.assertEqual(len(set(codes.values())), ALPH_SIZE + 1)
        self.assertTrue(_is_prefix_free(codes.values()))

    def test_text_prefix_free(self):
        codes = _codes_for(b"It was the best of times, it was the worst of times.")
        self.assertTrue(_is_prefix_free(codes.values()))
        self.assertIn(PSEUDO_EOF, codes)

    def test_more_frequent_symbols_are_not_longer(self):
        data = b"a" * 50 + b"b" * 20 + b"c" * 5 + b"d"
        codes = _codes_for(data)
        self.assertLessEqual(len(codes[ord("a")]), len(codes[ord("b")]))
        self.assertLessEqual(len(codes[ord("b")]), len(codes[ord("c")]))
        self.assertLessEqual(len(codes[ord("c")]), len(codes[ord("d")]))

if __name__ == '__main__':
    unittest.main()
