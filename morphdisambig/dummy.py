"""Random baseline."""
import random
from typing import List, Optional

from .analysis import Analysis, ParseLattice
from .base import MorphologicalDisambiguator
from .corpus import DisambiguationCorpus


class RandomDisambiguator(MorphologicalDisambiguator):
    """Picks a candidate uniformly at random for every word."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def train(self, corpus: DisambiguationCorpus) -> None:
        pass

    def disambiguate(self, lattice: ParseLattice) -> List[Analysis]:
        self.check_lattice(lattice)
        return [self.rng.choice(list(candidates)) for candidates in lattice]
