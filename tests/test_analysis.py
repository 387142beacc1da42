"""
Tests for analyses, candidate sets and ambiguity keys.
"""
import unittest

from morphdisambig.analysis import Analysis, CandidateSet, build_lattice


class TestAnalysis(unittest.TestCase):

    def test_simple_noun(self):
        """Tests the derived views of a one-group noun: 'Masa'"""
        a = Analysis("Masa", "masa+NOUN+A3SG+PNON+NOM")
        self.assertEqual(a.root, "masa")
        self.assertEqual(a.inflectional_groups, ("NOUN+A3SG+PNON+NOM",))
        self.assertEqual(a.size(), 1)
        self.assertEqual(a.word_with_pos, "masa+NOUN")
        self.assertEqual(a.pos, "NOUN")
        self.assertEqual(a.final_pos, "NOUN")
        self.assertTrue(a.is_noun)
        self.assertTrue(a.is_capital_word)
        self.assertFalse(a.is_plural)

    def test_derived_word(self):
        """Tests a parse with a derivational boundary: 'var'"""
        a = Analysis("var", "var+ADJ^DB+VERB+ZERO+PRES+A3SG")
        self.assertEqual(a.inflectional_groups, ("ADJ", "VERB+ZERO+PRES+A3SG"))
        self.assertEqual(a.size(), 2)
        self.assertEqual(a.inflectional_group(0), "ADJ")
        self.assertEqual(a.last_inflectional_group, "VERB+ZERO+PRES+A3SG")
        self.assertEqual(a.word_with_pos, "var+ADJ")
        self.assertEqual(a.pos, "VERB")
        self.assertFalse(a.is_capital_word)

    def test_proper_noun_final_pos(self):
        a = Analysis("Ankara", "Ankara+NOUN+PROP+A3SG+PNON+NOM")
        self.assertEqual(a.pos, "NOUN")
        self.assertEqual(a.final_pos, "PROP")

    def test_plural_and_tags(self):
        a = Analysis("kitaplar", "kitap+NOUN+A3PL+PNON+NOM")
        self.assertTrue(a.is_plural)
        self.assertTrue(a.contains_tag("A3PL"))
        self.assertFalse(a.contains_tag("A3"))

    def test_plural_possessor_counts_as_plural(self):
        """Tests that a singular noun with a plural possessor is plural: 'evleri'"""
        a = Analysis("evleri", "ev+NOUN+A3SG+P3PL+NOM")
        self.assertTrue(a.is_plural)
        self.assertFalse(Analysis("evi", "ev+NOUN+A3SG+P3SG+NOM").is_plural)

    def test_plus_root(self):
        """Tests that the '+' punctuation mark is its own root."""
        a = Analysis("+", "++PUNC")
        self.assertEqual(a.root, "+")
        self.assertEqual(a.inflectional_groups, ("PUNC",))

    def test_root_comparisons(self):
        a = Analysis("yüz", "yüz+NOUN+A3SG+PNON+NOM")
        b = Analysis("yüz", "yüz+VERB+POS+IMP+A2SG")
        c = Analysis("yüz", "yüz+NUM+CARD")
        self.assertTrue(a.same_root(b))
        self.assertFalse(a.same_root_and_pos(b))
        self.assertFalse(a.same_root_and_pos(c))

    def test_equality_uses_surface_and_parse(self):
        self.assertEqual(Analysis("ev", "ev+NOUN"), Analysis("ev", "ev+NOUN"))
        self.assertNotEqual(Analysis("ev", "ev+NOUN"), Analysis("Ev", "ev+NOUN"))


class TestCandidateSet(unittest.TestCase):

    def test_surface_forms_must_agree(self):
        with self.assertRaises(ValueError):
            CandidateSet([Analysis("ev", "ev+NOUN"), Analysis("evi", "ev+NOUN+ACC")])

    def test_empty_set(self):
        candidates = CandidateSet([])
        self.assertEqual(len(candidates), 0)
        self.assertIsNone(candidates.surface_form)
        self.assertIsNone(candidates.parse_with_longest_root())
        self.assertEqual(candidates.abbreviated_key(), "")

    def test_reduce_to_same_root(self):
        candidates = CandidateSet.from_parses("kitabın", [
            "kit+NOUN+A3SG+PNON+NOM",
            "kitap+NOUN+A3SG+P2SG+NOM",
            "kitap+NOUN+A3SG+PNON+GEN",
        ])
        candidates.reduce_to_same_root("kitap")
        self.assertEqual(candidates.roots(), ["kitap", "kitap"])

    def test_reduce_to_same_root_and_pos(self):
        candidates = CandidateSet.from_parses("yüz", [
            "yüz+NOUN+A3SG+PNON+NOM",
            "yüz+VERB+POS+IMP+A2SG",
        ])
        candidates.reduce_to_same_root_and_pos("yüz+VERB")
        self.assertEqual([a.transition_list for a in candidates], ["yüz+VERB+POS+IMP+A2SG"])

    def test_longest_root_first_wins_on_ties(self):
        candidates = CandidateSet.from_parses("abc", ["ab+NOUN", "abc+NOUN", "abd+VERB"])
        self.assertEqual(candidates.parse_with_longest_root().transition_list, "abc+NOUN")

    def test_copy_is_independent(self):
        candidates = CandidateSet.from_parses("yüz", ["yüz+NOUN", "yüz+VERB"])
        copy = candidates.copy()
        copy.reduce_to_same_root_and_pos("yüz+VERB")
        self.assertEqual(len(candidates), 2)
        self.assertEqual(len(copy), 1)


class TestAbbreviatedKey(unittest.TestCase):

    def test_shared_prefix_is_trimmed(self):
        candidates = CandidateSet.from_parses("kitabın", [
            "kitap+NOUN+A3SG+PNON+GEN",
            "kitap+NOUN+A3SG+P2SG+NOM",
        ])
        self.assertEqual(candidates.abbreviated_key(), "P2SG+NOM$PNON+GEN")

    def test_shared_suffix_is_trimmed(self):
        candidates = CandidateSet.from_parses("masan", [
            "masa+NOUN+A3SG+P2SG+NOM",
            "masa+NOUN+A3SG+P3SG+NOM",
        ])
        self.assertEqual(candidates.abbreviated_key(), "P2SG$P3SG")

    def test_single_tag_difference(self):
        candidates = CandidateSet.from_parses("ancak", ["ancak+CONJ", "ancak+ADV"])
        self.assertEqual(candidates.abbreviated_key(), "ADV$CONJ")

    def test_single_candidate_drops_root(self):
        candidates = CandidateSet.from_parses("masa", ["masa+NOUN+A3SG+PNON+NOM"])
        self.assertEqual(candidates.abbreviated_key(), "NOUN+A3SG+PNON+NOM")

    def test_key_is_order_independent(self):
        parses = ["bu+DET", "bu+PRON+DEMONSP+A3SG+PNON+NOM"]
        forward = CandidateSet.from_parses("bu", parses).abbreviated_key()
        backward = CandidateSet.from_parses("bu", list(reversed(parses))).abbreviated_key()
        self.assertEqual(forward, backward)
        self.assertEqual(forward, "DET$PRON+DEMONSP+A3SG+PNON+NOM")


def test_build_lattice():
    lattice = build_lattice([
        ("Masa", ["masa+NOUN+A3SG+PNON+NOM"]),
        ("var", ["var+VERB+POS+IMP+A2SG", "var+ADJ^DB+VERB+ZERO+PRES+A3SG"]),
    ])
    assert len(lattice) == 2
    assert lattice[1].surface_form == "var"
    assert lattice[1].size() == 2
