"""
Unit tests for the greedy root-first disambiguator.
"""
import pytest

from morphdisambig.analysis import CandidateSet, build_lattice
from morphdisambig.errors import EmptyLatticeError, UnreachableStateError
from morphdisambig.root_first import GreedyRootDisambiguator


class TestGreedyRootDisambiguator:

    @pytest.fixture(autouse=True)
    def trained(self, training_corpus):
        self.disambiguator = GreedyRootDisambiguator()
        self.disambiguator.train(training_corpus)

    def test_training_counts_every_word(self):
        model = self.disambiguator.model
        assert model.word_unigram.count(".+PUNC") == 6
        assert model.ig_unigram.count("var+ADJ^DB+VERB+ZERO+PRES+A3SG") == 3
        assert model.ig_bigram.count("masa+NOUN+A3SG+PNON+NOM", "var+ADJ^DB+VERB+ZERO+PRES+A3SG") == 3

    def test_prefers_trained_root_and_reading(self, masa_var_lattice):
        result = self.disambiguator.disambiguate(masa_var_lattice)
        assert [a.transition_list for a in result] == [
            "masa+NOUN+A3SG+PNON+NOM",
            "var+ADJ^DB+VERB+ZERO+PRES+A3SG",
            ".+PUNC",
        ]

    def test_lattice_is_not_modified(self, masa_var_lattice):
        self.disambiguator.disambiguate(masa_var_lattice)
        assert len(masa_var_lattice[1]) == 2

    def test_chosen_analysis_comes_from_its_position(self, masa_var_lattice):
        result = self.disambiguator.disambiguate(masa_var_lattice)
        for analysis, candidates in zip(result, masa_var_lattice):
            assert analysis in list(candidates)

    def test_empty_candidate_set_fails_the_sentence(self, masa_var_lattice):
        masa_var_lattice[1] = CandidateSet([])
        with pytest.raises(UnreachableStateError) as excinfo:
            self.disambiguator.disambiguate(masa_var_lattice)
        assert excinfo.value.index == 1

    def test_unseen_words(self):
        lattice = build_lattice([("gel", ["gel+VERB+POS+IMP+A2SG", "gel+NOUN+A3SG+PNON+NOM"])])
        assert len(self.disambiguator.disambiguate(lattice)) == 1

    def test_empty_lattice(self):
        with pytest.raises(EmptyLatticeError):
            self.disambiguator.disambiguate([])


def test_untrained_refuses_to_decode(masa_var_lattice):
    with pytest.raises(RuntimeError):
        GreedyRootDisambiguator().disambiguate(masa_var_lattice)
