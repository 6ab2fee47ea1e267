import random
import unittest
from multidiff import compare, summarize, DEFAULT_CONFIG, MultiTextComparator
from multidiff.models import CellType, Classification, InvalidInputError
from multidiff.utils import TextProcessor
from multidiff.word_differ import WordDiffer

VOCABULARY = ["alpha", "beta", "gamma", "delta", "epsilon", "zeta"]


def random_document(rng):
    lines = []
    for _ in range(rng.randint(1, 8)):
        lines.append(" ".join(rng.choice(VOCABULARY) for _ in range(rng.randint(0, 3))))
    return "\n".join(lines)


def contents(rows):
    return [[cell.content if cell.exists else None for cell in row.cells] for row in rows]


class TestScenarios(unittest.TestCase):
    def test_insert_and_delete(self):
        rows = compare(["a\nb\nc", "a\nx\nc"])
        self.assertEqual(contents(rows), [["a", "a"], ["b", None], [None, "x"], ["c", "c"]])
        self.assertEqual([r.classification for r in rows], [
            Classification.COMMON, Classification.UNIQUE, Classification.UNIQUE, Classification.COMMON])
        self.assertEqual([c.type for c in rows[1].cells], [CellType.UNIQUE, CellType.EMPTY])

    def test_modified_line(self):
        rows = compare(["hello world", "hello earth"])
        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0].classification, Classification.COMMON)
        self.assertEqual(rows[0].cells[0].different_words, frozenset({"world"}))
        self.assertEqual(rows[0].cells[1].different_words, frozenset({"earth"}))
        self.assertTrue(rows[0].is_change)

    def test_empty_document(self):
        rows = compare(["", "hello"])
        self.assertEqual(contents(rows), [["", None], [None, "hello"]])
        self.assertTrue(all(r.classification is Classification.UNIQUE for r in rows))
        self.assertTrue(rows[0].cells[0].exists)

    def test_empty_document_at_zero_threshold(self):
        rows = compare(["", "hello"], {"SIMILARITY_THRESHOLD": 0.0})
        self.assertEqual(len(rows), 2)
        self.assertEqual(contents(rows), [["", None], [None, "hello"]])

        rows = compare(["a\n \t\nb", "a\nword"], {"SIMILARITY_THRESHOLD": 0.0, "WINDOW_RADIUS": 0})
        self.assertEqual(contents(rows), [["a", "a"], [" \t", None], [None, "word"], ["b", None]])

    def test_partial_classification(self):
        rows = compare(["x", "x", "q"])
        self.assertEqual(rows[0].classification, Classification.PARTIAL)
        self.assertEqual([c.type for c in rows[0].cells], [CellType.MODIFIED, CellType.MODIFIED, CellType.EMPTY])

    def test_line_numbers(self):
        rows = compare(["intro\na b c", "a b c"])
        self.assertEqual([c.line_number for c in rows[0].cells], [1, None])
        self.assertEqual([c.line_number for c in rows[1].cells], [2, 1])

    def test_crlf_input(self):
        rows = compare(["a\r\nb\r\n", "a\nb"])
        self.assertEqual(contents(rows), [["a", "a"], ["b", "b"]])


class TestProperties(unittest.TestCase):
    def test_identity(self):
        document = "first line\nsecond line\nfirst line\n\nlast"
        for copies in (2, 3, 5):
            rows = compare([document] * copies)
            self.assertEqual(len(rows), len(TextProcessor.split_lines(document)))
            for row in rows:
                self.assertEqual(row.classification, Classification.COMMON)
                self.assertFalse(row.is_change)
                self.assertTrue(all(c.different_words is None for c in row.cells))

    def test_single_document(self):
        rows = compare(["one\ntwo\nthree"])
        self.assertEqual(len(rows), 3)
        self.assertTrue(all(r.classification is Classification.COMMON for r in rows))

    def test_total_disjointness(self):
        documents = ["alpha beta\ngamma", "delta\nepsilon zeta\neta"]
        rows = compare(documents)
        self.assertEqual(len(rows), 5)
        self.assertTrue(all(r.classification is Classification.UNIQUE for r in rows))

    def test_random_corpus(self):
        rng = random.Random(1234)
        for _ in range(200):
            documents = [random_document(rng) for _ in range(rng.randint(2, 5))]
            lines = [TextProcessor.split_lines(d) for d in documents]
            rows = compare(documents)

            # Row count bounds
            self.assertGreaterEqual(len(rows), max(len(l) for l in lines))
            self.assertLessEqual(len(rows), sum(len(l) for l in lines))

            # Every line is placed exactly once, with its own content
            for doc_index, doc_lines in enumerate(lines):
                placed = [r.cells[doc_index] for r in rows if r.cells[doc_index].exists]
                self.assertEqual(sorted(c.line_number for c in placed), list(range(1, len(doc_lines) + 1)))
                for cell in placed:
                    self.assertEqual(cell.content, doc_lines[cell.line_number - 1])

            for row in rows:
                self.assertEqual(len(row.cells), len(documents))
                present = [c.content for c in row.cells if c.exists]
                self.assertGreaterEqual(len(present), 1)
                for cell in row.cells:
                    self.assertTrue(cell.different_words is None or len(cell.different_words) > 0)

                if len(set(present)) < 2:
                    self.assertTrue(all(c.different_words is None for c in row.cells))
                    continue

                # Different words plus common words rebuild each line's words
                common = WordDiffer.common_words(present)
                for cell in row.cells:
                    if not cell.exists:
                        self.assertIsNone(cell.different_words)
                        continue
                    rebuilt = (cell.different_words or frozenset()) | common
                    self.assertEqual(rebuilt, TextProcessor.word_set(cell.content))

    def test_deterministic(self):
        documents = ["a b\nc d\ne", "c d\na b x\ne f", "e\nq"]
        first = [r.to_dict() for r in compare(documents)]
        second = [r.to_dict() for r in compare(documents)]
        self.assertEqual(first, second)


class TestInputValidation(unittest.TestCase):
    def test_empty_list(self):
        self.assertEqual(compare([]), [])

    def test_malformed_input(self):
        for documents in (None, "abc", b"abc", 42, ["ok", 1], ["ok", None]):
            with self.assertRaises(InvalidInputError):
                compare(documents)

    def test_tuple_input(self):
        self.assertEqual(len(compare(("a", "a"))), 1)

    def test_config(self):
        comparator = MultiTextComparator({"WINDOW_RADIUS": 0})
        self.assertEqual(comparator.config["SIMILARITY_THRESHOLD"], DEFAULT_CONFIG["SIMILARITY_THRESHOLD"])
        self.assertEqual(list(comparator.aligner.window(5, 10)), [])
        with self.assertRaises(InvalidInputError):
            MultiTextComparator({"THRESHOLD": 0.5})
        with self.assertRaises(InvalidInputError):
            MultiTextComparator({"SIMILARITY_THRESHOLD": 2.0})


class TestSerialization(unittest.TestCase):
    def test_to_dict(self):
        row = compare(["hello big wide world", "hello big earth"])[0].to_dict()
        self.assertEqual(row["row_index"], 0)
        self.assertEqual(row["classification"], "common")
        self.assertTrue(row["is_change"])
        self.assertEqual(row["cells"][0], {
            'content': "hello big wide world",
            'exists': True,
            'type': "common",
            'different_words': ["wide", "world"],
            'line_number': 1
        })

    def test_summarize(self):
        stats = summarize(compare(["a\nb\nc", "a\nx\nc", "a\nb"]))
        self.assertEqual(stats, {
            'total_rows': 4,
            'common': 1,
            'unique': 1,
            'partial': 2,
            'changed_rows': 3,
            'word_changes': 0
        })

    def test_summarize_word_changes(self):
        stats = summarize(compare(["hello world", "hello earth"]))
        self.assertEqual(stats['word_changes'], 2)
        self.assertEqual(stats['changed_rows'], 1)


if __name__ == '__main__':
    unittest.main()
