"""
Base disambiguator interface.

Every strategy takes a parse lattice (one candidate set per word) and
returns one analysis per word.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from .analysis import Analysis, ParseLattice
from .corpus import DisambiguationCorpus
from .errors import EmptyLatticeError, UnreachableStateError
from .ngram import NGram


class MorphologicalDisambiguator(ABC):
    """
    Base class for all disambiguation strategies.

    Statistical strategies learn their models in train(); rule-based and
    random strategies accept the call and ignore it.
    """

    @abstractmethod
    def train(self, corpus: DisambiguationCorpus) -> None:
        """
        Learn whatever the strategy needs from a disambiguated corpus.

        Args:
            corpus: Sentences of (surface form, gold analysis) pairs
        """
        pass

    @abstractmethod
    def disambiguate(self, lattice: ParseLattice) -> List[Analysis]:
        """
        Choose one analysis per position.

        Args:
            lattice: One candidate set per word of the sentence

        Returns:
            The chosen analyses, in sentence order
        """
        pass

    @staticmethod
    def check_lattice(lattice: Optional[ParseLattice]):
        """Raise if the lattice is absent, empty, or has an empty candidate set."""
        if not lattice:
            raise EmptyLatticeError("Cannot disambiguate an empty sentence")
        for index, candidates in enumerate(lattice):
            if len(candidates) == 0:
                raise UnreachableStateError(index)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


@dataclass(frozen=True)
class LanguageModel:
    """
    The n-gram tables of a statistical disambiguator.

    Built complete (and smoothed) by train() and then swapped in as a
    whole, so a decoder never sees a half-trained model.
    """
    word_unigram: NGram
    ig_unigram: NGram
    word_bigram: NGram
    ig_bigram: NGram

    def __post_init__(self):
        for table in (self.word_unigram, self.ig_unigram, self.word_bigram, self.ig_bigram):
            if not table.is_smoothed:
                raise ValueError("Language model tables must be smoothed before use")


class NaiveDisambiguator(MorphologicalDisambiguator):
    """Common base of the strategies backed by a LanguageModel."""

    def __init__(self):
        self.model: Optional[LanguageModel] = None

    @property
    def is_trained(self) -> bool:
        return self.model is not None

    def _require_model(self) -> LanguageModel:
        if self.model is None:
            raise RuntimeError(f"{self.__class__.__name__} must be trained before disambiguating")
        return self.model
