"""
Rule-based disambiguation: root from a lookup table (or the longest
available root), then the hand-written rules of the rules module.
"""
import logging
from typing import List, Optional

from .analysis import Analysis, CandidateSet, ParseLattice
from .base import MorphologicalDisambiguator
from .config import ROOT_LIST_PATH
from .corpus import DisambiguationCorpus
from .root_table import RootTable
from .rules import case_disambiguator
from .trace import DisambiguationTrace

logger = logging.getLogger(__name__)


class RuleEngine(MorphologicalDisambiguator):
    """
    Longest-root-first disambiguator driven by the rule table.

    Candidate sets of the lattice are narrowed in place, position by
    position, so a lattice should be disambiguated only once.
    """

    def __init__(self, root_table: Optional[RootTable] = None, root_list_path=ROOT_LIST_PATH):
        """
        Args:
            root_table: Preloaded root table; read from root_list_path if omitted
            root_list_path: Root list to load when no table is given

        Raises:
            MissingRootFileError: If the root list cannot be read
        """
        self.root_table = root_table if root_table is not None else RootTable.from_file(root_list_path)

    def train(self, corpus: DisambiguationCorpus) -> None:
        """Rules are hand-written; there is nothing to learn."""
        pass

    def select_root(self, candidates: CandidateSet) -> Optional[str]:
        """
        Root to narrow the candidates to.

        The table root wins when some candidate has it, otherwise the root of
        the first candidate with the longest root.
        """
        best_root = self.root_table.get(candidates.surface_form)
        if best_root is not None and best_root in candidates.roots():
            return best_root
        longest = candidates.parse_with_longest_root()
        return longest.root if longest is not None else None

    def disambiguate(self, lattice: ParseLattice, trace: Optional[DisambiguationTrace] = None) -> List[Analysis]:
        """
        Decide each word left to right.

        Args:
            lattice: One candidate set per word
            trace: Records the decision taken at each position, if given

        Returns:
            One analysis per position

        Raises:
            EmptyLatticeError: The sentence has no words.
            UnreachableStateError: A word has no candidate analysis.
        """
        try:
            self.check_lattice(lattice)
        except ValueError as e:
            if trace is not None:
                trace.set_error(str(e))
            raise

        correct: List[Analysis] = []
        for index, candidates in enumerate(lattice):
            key_before = candidates.abbreviated_key()
            root = self.select_root(candidates)
            candidates.reduce_to_same_root(root)

            chosen = case_disambiguator(index, lattice, correct)
            by_rule = chosen is not None
            if chosen is None:
                chosen = candidates[0]
            correct.append(chosen)

            if trace is not None:
                trace.add_step(
                    "RootAndRule",
                    inputs={"position": index, "surface_form": chosen.surface_form, "ambiguity": key_before},
                    outputs={"root": root, "ambiguity": candidates.abbreviated_key(),
                             "analysis": chosen.transition_list, "by_rule": by_rule},
                )

        if trace is not None:
            trace.set_result([a.transition_list for a in correct])
        logger.debug(f"Rule engine decided {len(correct)} positions")
        return correct
