"""
N-gram tables over word-form and inflectional-group tokens.

A table is filled with add_ngram() and then frozen by
calculate_probabilities(), which fits a smoothing scheme. Smoothed
probabilities are strictly positive for every token sequence, seen or not,
so callers may take logarithms freely.
"""
import logging
from abc import ABC, abstractmethod
from collections import Counter
from typing import Callable, Sequence, Tuple

from .config import INTERPOLATION_LAMBDA, LAPLACE_DELTA

logger = logging.getLogger(__name__)


class NGram:
    """Counts of 1-gram or 2-gram token sequences."""

    def __init__(self, n: int):
        if n not in (1, 2):
            raise ValueError(f"Only unigram and bigram tables are supported, got n={n}")
        self.n = n
        self.counts: Counter = Counter()
        self.history_counts: Counter = Counter()
        self.token_counts: Counter = Counter()
        self._estimator: Callable[[Tuple[str, ...]], float] = None

    def add_ngram(self, tokens: Sequence[str]):
        """Count one occurrence of the token sequence."""
        if self._estimator is not None:
            raise RuntimeError("N-gram table is already smoothed and cannot be extended")
        tokens = tuple(tokens)
        if len(tokens) != self.n:
            raise ValueError(f"Expected {self.n} tokens, got {len(tokens)}: {tokens}")
        self.counts[tokens] += 1
        self.token_counts[tokens[-1]] += 1
        if self.n == 2:
            self.history_counts[tokens[0]] += 1

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def vocabulary_size(self) -> int:
        return len(self.token_counts)

    @property
    def is_smoothed(self) -> bool:
        return self._estimator is not None

    def count(self, *tokens: str) -> int:
        return self.counts[tuple(tokens)]

    def calculate_probabilities(self, smoothing: 'Smoothing'):
        """Fit smoothing to the current counts; the table is frozen afterwards."""
        self._estimator = smoothing.fit(self)
        logger.debug(
            f"{self.n}-gram table smoothed with {smoothing.__class__.__name__}: "
            f"{len(self.counts)} distinct sequences, vocabulary {self.vocabulary_size}"
        )

    def probability(self, *tokens: str) -> float:
        if self._estimator is None:
            raise RuntimeError("N-gram probabilities requested before smoothing")
        if len(tokens) != self.n:
            raise ValueError(f"Expected {self.n} tokens, got {len(tokens)}: {tokens}")
        return self._estimator(tuple(tokens))


class Smoothing(ABC):
    """Turns the counts of an NGram into a probability estimator."""

    @abstractmethod
    def fit(self, ngram: NGram) -> Callable[[Tuple[str, ...]], float]:
        pass


class LaplaceSmoothing(Smoothing):
    """
    Additive smoothing.

    Unigrams: (c(w) + delta) / (N + delta * (V + 1)), one extra vocabulary
    slot being reserved for unseen tokens. Bigrams are conditioned on the
    first token: (c(w1 w2) + delta) / (c(w1) + delta * (V + 1)).
    """

    def __init__(self, delta: float = LAPLACE_DELTA):
        if delta <= 0:
            raise ValueError("Laplace delta must be positive")
        self.delta = delta

    def fit(self, ngram: NGram):
        delta = self.delta
        slots = ngram.vocabulary_size + 1
        counts = dict(ngram.counts)

        if ngram.n == 1:
            denominator = ngram.total + delta * slots
            return lambda tokens: (counts.get(tokens, 0) + delta) / denominator

        histories = dict(ngram.history_counts)

        def estimate(tokens):
            return (counts.get(tokens, 0) + delta) / (histories.get(tokens[0], 0) + delta * slots)
        return estimate


class InterpolatedSmoothing(Smoothing):
    """
    Linear interpolation of the bigram estimate with a Laplace unigram one.

        P(w2 | w1) = lambda * c(w1 w2) / c(w1) + (1 - lambda) * P_laplace(w2)

    An unseen history has no maximum-likelihood term and keeps only the
    weighted unigram part. A seen pair can still score below an unseen one
    when its relative frequency lambda * c(w1 w2) / c(w1) is smaller than the
    weighted unigram gap between the two second tokens.
    """

    def __init__(self, lambda_: float = INTERPOLATION_LAMBDA, unigram_smoothing: LaplaceSmoothing = None):
        if not 0.0 <= lambda_ < 1.0:
            raise ValueError("Interpolation weight must be in [0, 1)")
        self.lambda_ = lambda_
        self.unigram_smoothing = unigram_smoothing or LaplaceSmoothing()

    def fit(self, ngram: NGram):
        if ngram.n != 2:
            raise ValueError("Interpolated smoothing applies to bigram tables")

        unigrams = NGram(1)
        for token, count in ngram.token_counts.items():
            unigrams.counts[(token,)] = count
            unigrams.token_counts[token] = count
        unigram_estimate = self.unigram_smoothing.fit(unigrams)

        counts = dict(ngram.counts)
        histories = dict(ngram.history_counts)
        lambda_ = self.lambda_

        def estimate(tokens):
            lower = (1.0 - lambda_) * unigram_estimate(tokens[1:])
            history = histories.get(tokens[0], 0)
            if history == 0:
                return lower
            return lambda_ * counts.get(tokens, 0) / history + lower
        return estimate
