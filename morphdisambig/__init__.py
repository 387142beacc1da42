# This file makes the 'morphdisambig' directory a Python package.

from morphdisambig.analysis import Analysis, CandidateSet, ParseLattice, build_lattice
from morphdisambig.base import LanguageModel, MorphologicalDisambiguator, NaiveDisambiguator
from morphdisambig.corpus import DisambiguatedWord, DisambiguationCorpus, read_lattices
from morphdisambig.dummy import RandomDisambiguator
from morphdisambig.errors import (
    DecodingFailureError,
    DisambiguationError,
    EmptyLatticeError,
    MissingRootFileError,
    UnreachableStateError,
)
from morphdisambig.hmm import ViterbiDisambiguator
from morphdisambig.longest_root import RuleEngine
from morphdisambig.ngram import InterpolatedSmoothing, LaplaceSmoothing, NGram
from morphdisambig.root_first import GreedyRootDisambiguator
from morphdisambig.root_table import RootTable

__all__ = [
    'Analysis',
    'CandidateSet',
    'ParseLattice',
    'build_lattice',
    'LanguageModel',
    'MorphologicalDisambiguator',
    'NaiveDisambiguator',
    'DisambiguatedWord',
    'DisambiguationCorpus',
    'read_lattices',
    'RandomDisambiguator',
    'DecodingFailureError',
    'DisambiguationError',
    'EmptyLatticeError',
    'MissingRootFileError',
    'UnreachableStateError',
    'ViterbiDisambiguator',
    'RuleEngine',
    'InterpolatedSmoothing',
    'LaplaceSmoothing',
    'NGram',
    'GreedyRootDisambiguator',
    'RootTable',
]
