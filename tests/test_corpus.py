"""
Tests for corpus and lattice file reading.
"""
import unittest
import os
import tempfile

from morphdisambig.corpus import DisambiguatedWord, DisambiguationCorpus, read_lattices

CORPUS_TEXT = (
    "Masa\tmasa+NOUN+A3SG+PNON+NOM\n"
    "var\tvar+ADJ^DB+VERB+ZERO+PRES+A3SG\n"
    ".\t.+PUNC\n"
    "\n"
    "\n"
    "Kitabı\tkitap+NOUN+A3SG+PNON+ACC\n"
    "bozuk satır\n"
    "okudum\toku+VERB+POS+PAST+A1SG\n"
)

LATTICE_TEXT = (
    "Masa\tmasa+NOUN+A3SG+PNON+NOM\n"
    "var\tvar+VERB+POS+IMP+A2SG\tvar+ADJ^DB+VERB+ZERO+PRES+A3SG\n"
    "\n"
    "bilinmeyen\n"
)


class TestDisambiguationCorpus(unittest.TestCase):

    def setUp(self):
        handle, self.path = tempfile.mkstemp(suffix=".txt")
        os.close(handle)

    def tearDown(self):
        if os.path.exists(self.path):
            os.remove(self.path)

    def write(self, text):
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(text)

    def test_from_file(self):
        """Tests that sentences are split on blank lines and malformed lines are skipped."""
        self.write(CORPUS_TEXT)
        corpus = DisambiguationCorpus.from_file(self.path)

        self.assertEqual(corpus.sentence_count(), 2)
        self.assertEqual(corpus.word_count(), 5)
        first = corpus.get_sentence(0)
        self.assertEqual(first[1].surface_form, "var")
        self.assertEqual(first[1].parse.inflectional_groups, ("ADJ", "VERB+ZERO+PRES+A3SG"))
        self.assertEqual([w.surface_form for w in corpus.get_sentence(1)], ["Kitabı", "okudum"])

    def test_iteration_and_add(self):
        corpus = DisambiguationCorpus()
        corpus.add_sentence([DisambiguatedWord.from_parse("ev", "ev+NOUN+A3SG+PNON+NOM")])
        self.assertEqual(len(corpus), 1)
        self.assertEqual([len(s) for s in corpus], [1])

    def test_read_lattices(self):
        """Tests that each word keeps all its candidate parses, in file order."""
        self.write(LATTICE_TEXT)
        lattices = read_lattices(self.path)

        self.assertEqual(len(lattices), 2)
        self.assertEqual(len(lattices[0]), 2)
        self.assertEqual([a.transition_list for a in lattices[0][1]],
                         ["var+VERB+POS+IMP+A2SG", "var+ADJ^DB+VERB+ZERO+PRES+A3SG"])
        # a word without parses becomes an empty candidate set
        self.assertEqual(len(lattices[1][0]), 0)

    def test_missing_file(self):
        os.remove(self.path)
        with self.assertRaises(FileNotFoundError):
            DisambiguationCorpus.from_file(self.path)
