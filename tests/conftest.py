"""
Shared fixtures: a tiny disambiguated corpus and lattices built from it.
"""
import pytest

from morphdisambig.analysis import build_lattice
from morphdisambig.corpus import DisambiguatedWord, DisambiguationCorpus

MASA_VAR = [
    ("Masa", "masa+NOUN+A3SG+PNON+NOM"),
    ("var", "var+ADJ^DB+VERB+ZERO+PRES+A3SG"),
    (".", ".+PUNC"),
]

KITAP_OKU = [
    ("Kitabı", "kitap+NOUN+A3SG+PNON+ACC"),
    ("okudum", "oku+VERB+POS+PAST+A1SG"),
    (".", ".+PUNC"),
]


def make_corpus(*sentences, repeat=1):
    corpus = DisambiguationCorpus()
    for _ in range(repeat):
        for sentence in sentences:
            corpus.add_sentence([DisambiguatedWord.from_parse(s, p) for s, p in sentence])
    return corpus


@pytest.fixture
def training_corpus():
    return make_corpus(MASA_VAR, KITAP_OKU, repeat=3)


@pytest.fixture
def masa_var_lattice():
    return build_lattice([
        ("Masa", ["masa+NOUN+A3SG+PNON+NOM"]),
        ("var", ["var+VERB+POS+IMP+A2SG", "var+ADJ^DB+VERB+ZERO+PRES+A3SG"]),
        (".", [".+PUNC"]),
    ])
