"""
Greedy root-first disambiguation.

A weaker baseline than Viterbi: every word is decided on its own, left to
right, using the previous decision as its only context.
"""
import logging
from typing import List, Optional

from .analysis import Analysis, CandidateSet, ParseLattice
from .base import LanguageModel, NaiveDisambiguator
from .config import INTERPOLATION_LAMBDA, LAPLACE_DELTA
from .corpus import DisambiguationCorpus
from .logging_config import TrainingProgress
from .ngram import InterpolatedSmoothing, LaplaceSmoothing, NGram

logger = logging.getLogger(__name__)


class GreedyRootDisambiguator(NaiveDisambiguator):
    """
    Picks the most probable root first, then the most probable analysis of it.

    The language model here is over whole transition lists (complete parse
    strings), not over individual inflectional groups.
    """

    def __init__(self, interpolation_lambda: float = INTERPOLATION_LAMBDA, laplace_delta: float = LAPLACE_DELTA):
        super().__init__()
        self.interpolation_lambda = interpolation_lambda
        self.laplace_delta = laplace_delta

    def train(self, corpus: DisambiguationCorpus) -> None:
        """
        Count word-form and transition-list unigrams of every word, and the
        bigrams of every pair of consecutive words.

        Args:
            corpus: Disambiguated training sentences
        """
        word_unigram = NGram(1)
        ig_unigram = NGram(1)
        word_bigram = NGram(2)
        ig_bigram = NGram(2)

        progress = TrainingProgress(corpus.sentence_count(), desc="Training root-first", logger=logger)
        for sentence in corpus:
            for j, word in enumerate(sentence):
                word_unigram.add_ngram([word.parse.word_with_pos])
                ig_unigram.add_ngram([word.parse.transition_list])
                if j + 1 < len(sentence):
                    next_parse = sentence[j + 1].parse
                    word_bigram.add_ngram([word.parse.word_with_pos, next_parse.word_with_pos])
                    ig_bigram.add_ngram([word.parse.transition_list, next_parse.transition_list])
            progress.update(sentence)
        progress.close()

        unigram_smoothing = LaplaceSmoothing(self.laplace_delta)
        bigram_smoothing = InterpolatedSmoothing(self.interpolation_lambda, unigram_smoothing)
        word_unigram.calculate_probabilities(unigram_smoothing)
        ig_unigram.calculate_probabilities(unigram_smoothing)
        word_bigram.calculate_probabilities(bigram_smoothing)
        ig_bigram.calculate_probabilities(bigram_smoothing)

        self.model = LanguageModel(word_unigram, ig_unigram, word_bigram, ig_bigram)
        logger.info(f"Root-first model trained on {corpus.word_count()} words")

    def disambiguate(self, lattice: ParseLattice) -> List[Analysis]:
        """
        Decide each word in turn. The lattice itself is left untouched.

        Raises:
            EmptyLatticeError: The sentence has no words
            UnreachableStateError: A word has no candidate analyses
        """
        self.check_lattice(lattice)
        model = self._require_model()

        correct: List[Analysis] = []
        for index, candidates in enumerate(lattice):
            candidates = candidates.copy()
            candidates.reduce_to_same_root_and_pos(self.best_root_word(candidates, model))
            correct.append(self.parse_with_best_ig_probability(candidates, correct, index, model))
        return correct

    @staticmethod
    def best_root_word(candidates: CandidateSet, model: LanguageModel) -> Optional[str]:
        """
        Word-form token maximising P(word) * P(transition list) under the
        unigram models, or None for an empty set.
        """
        best_probability = float('-inf')
        best_word = None
        for analysis in candidates:
            probability = (model.word_unigram.probability(analysis.word_with_pos)
                           * model.ig_unigram.probability(analysis.transition_list))
            if probability > best_probability:
                best_word = analysis.word_with_pos
                best_probability = probability
        return best_word

    @staticmethod
    def ig_probability(transition_list: str, correct: List[Analysis], index: int, model: LanguageModel) -> float:
        """Bigram probability on the previous decision if it exists, else unigram."""
        if index != 0 and len(correct) == index:
            return model.ig_bigram.probability(correct[index - 1].transition_list, transition_list)
        return model.ig_unigram.probability(transition_list)

    @classmethod
    def parse_with_best_ig_probability(cls, candidates: CandidateSet, correct: List[Analysis], index: int,
                                       model: LanguageModel) -> Optional[Analysis]:
        best_parse = None
        best_probability = float('-inf')
        for analysis in candidates:
            probability = cls.ig_probability(analysis.transition_list, correct, index, model)
            if probability > best_probability:
                best_parse = analysis
                best_probability = probability
        return best_parse
