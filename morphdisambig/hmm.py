"""
Viterbi decoding of the most likely analysis sequence.

The sentence is treated as a first-order Markov chain whose states are the
candidate analyses of each word. A state emits its word-form token and its
inflectional groups:

    score(0, a) = log P(word(a)) + sum_g log P(ig_g(a))
    score(i, a) = max_b [ score(i-1, b)
                          + log P(word(a) | word(b))
                          + sum_g log P(ig_g(a) | last_ig(b)) ]

Only the last inflectional group of the previous word conditions the groups
of the current one, which keeps agreement information (possessive, plural)
at one lookup per group.
"""
import logging
import math
from typing import List

import numpy as np

from .analysis import Analysis, CandidateSet, ParseLattice
from .base import LanguageModel, NaiveDisambiguator
from .config import INTERPOLATION_LAMBDA, LAPLACE_DELTA
from .corpus import DisambiguationCorpus
from .errors import DecodingFailureError
from .logging_config import TrainingProgress, log_with_context
from .ngram import InterpolatedSmoothing, LaplaceSmoothing, NGram

logger = logging.getLogger(__name__)

NO_PREDECESSOR = -1


class ViterbiDisambiguator(NaiveDisambiguator):
    """
    HMM disambiguator over word-form and inflectional-group bigrams.

    Decoding is read-only with respect to both the lattice and the trained
    model, so one trained instance can serve several threads.
    """

    def __init__(self, interpolation_lambda: float = INTERPOLATION_LAMBDA, laplace_delta: float = LAPLACE_DELTA):
        super().__init__()
        self.interpolation_lambda = interpolation_lambda
        self.laplace_delta = laplace_delta

    def train(self, corpus: DisambiguationCorpus) -> None:
        """
        Count word and inflectional-group n-grams over consecutive word pairs.

        For every pair (word, next word) the word-form unigram of the first
        and the word-form bigram are counted; for every inflectional group of
        the next word, the bigram (last group of word, group) and the
        unigram of the group. Unigram tables get Laplace smoothing, bigram
        tables interpolated smoothing.

        Args:
            corpus: Disambiguated training sentences
        """
        word_unigram = NGram(1)
        ig_unigram = NGram(1)
        word_bigram = NGram(2)
        ig_bigram = NGram(2)

        progress = TrainingProgress(corpus.sentence_count(), desc="Training HMM", logger=logger)
        for sentence in corpus:
            for word, next_word in zip(sentence, sentence[1:]):
                w1 = word.parse.word_with_pos
                w2 = next_word.parse.word_with_pos
                word_unigram.add_ngram([w1])
                word_bigram.add_ngram([w1, w2])
                previous_ig = word.parse.last_inflectional_group
                for ig in next_word.parse.inflectional_groups:
                    ig_bigram.add_ngram([previous_ig, ig])
                    ig_unigram.add_ngram([ig])
            progress.update(sentence)
        progress.close()

        unigram_smoothing = LaplaceSmoothing(self.laplace_delta)
        bigram_smoothing = InterpolatedSmoothing(self.interpolation_lambda, unigram_smoothing)
        word_unigram.calculate_probabilities(unigram_smoothing)
        ig_unigram.calculate_probabilities(unigram_smoothing)
        word_bigram.calculate_probabilities(bigram_smoothing)
        ig_bigram.calculate_probabilities(bigram_smoothing)

        self.model = LanguageModel(word_unigram, ig_unigram, word_bigram, ig_bigram)
        logger.info(
            f"HMM trained: {len(word_bigram.counts)} word bigrams, "
            f"{len(ig_bigram.counts)} inflectional group bigrams"
        )

    def disambiguate(self, lattice: ParseLattice) -> List[Analysis]:
        """
        Find the maximum-likelihood analysis sequence.

        Raises:
            EmptyLatticeError: The sentence has no words.
            UnreachableStateError: A word has no candidate analysis.
            DecodingFailureError: No path reaches the last word.
        """
        self.check_lattice(lattice)
        model = self._require_model()

        scores = [self._initial_scores(lattice[0], model)]
        back_pointers = [np.full(len(lattice[0]), NO_PREDECESSOR)]
        for i in range(1, len(lattice)):
            totals = scores[-1][:, np.newaxis] + self._transition_scores(lattice[i - 1], lattice[i], model)
            # argmax keeps the first maximum, i.e. the first predecessor in lattice order
            best = np.argmax(totals, axis=0)
            row = totals[best, np.arange(len(lattice[i]))]
            scores.append(row)
            back_pointers.append(np.where(np.isfinite(row), best, NO_PREDECESSOR))

        final = scores[-1]
        if not np.isfinite(final).any():
            raise DecodingFailureError("No candidate of the last word is reachable")
        best_index = int(np.argmax(final))

        path = [best_index]
        for i in range(len(lattice) - 1, 0, -1):
            best_index = int(back_pointers[i][best_index])
            if best_index == NO_PREDECESSOR:
                raise DecodingFailureError(f"Back-pointer chain broken at position {i}")
            path.append(best_index)
        path.reverse()

        result = [lattice[i][k] for i, k in enumerate(path)]
        log_with_context(
            "Viterbi decoding finished",
            {"words": len(lattice), "log_probability": float(final.max()),
             "analyses": [a.transition_list for a in result]},
            logger=logger,
        )
        return result

    @staticmethod
    def _initial_scores(candidates: CandidateSet, model: LanguageModel) -> np.ndarray:
        scores = np.empty(len(candidates))
        for k, analysis in enumerate(candidates):
            score = math.log(model.word_unigram.probability(analysis.word_with_pos))
            for ig in analysis.inflectional_groups:
                score += math.log(model.ig_unigram.probability(ig))
            scores[k] = score
        return scores

    @staticmethod
    def _transition_scores(previous: CandidateSet, current: CandidateSet, model: LanguageModel) -> np.ndarray:
        """Matrix [previous candidate, current candidate] of transition log-probabilities."""
        scores = np.empty((len(previous), len(current)))
        for j, before in enumerate(previous):
            last_ig = before.last_inflectional_group
            for k, analysis in enumerate(current):
                score = math.log(model.word_bigram.probability(before.word_with_pos, analysis.word_with_pos))
                for ig in analysis.inflectional_groups:
                    score += math.log(model.ig_bigram.probability(last_ig, ig))
                scores[j, k] = score
        return scores
