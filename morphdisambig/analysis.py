"""
Morphological analyses and the per-sentence parse lattice.

An analysis is written in the analyzer's notation: the root, followed by the
tags of each inflectional group, groups being separated by derivational
boundaries.

    "var+ADJ^DB+VERB+ZERO+PRES+A3SG"
      root: var
      inflectional groups: "ADJ", "VERB+ZERO+PRES+A3SG"
"""
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .config import DERIVATIONAL_BOUNDARY, KEY_SEPARATOR

# Plural agreement or plural possessor
PLURAL_TAGS = ("A1PL", "A2PL", "A3PL", "P1PL", "P2PL", "P3PL")


@dataclass(frozen=True)
class Analysis:
    """
    One full morphological reading of a surface form.

    Only the surface form and the parse string are stored; every other view
    (root, inflectional groups, tags) is derived from them.
    """
    surface_form: str
    transition_list: str
    root: str = field(init=False, repr=False, compare=False)
    inflectional_groups: Tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        parse = self.transition_list
        # A '+' root (the punctuation mark itself) is written "++PUNC"
        split_at = parse.find('+', 1) if parse.startswith('+') else parse.find('+')
        if split_at == -1:
            root, rest = parse, ''
        else:
            root, rest = parse[:split_at], parse[split_at + 1:]
        groups = tuple(rest.split(DERIVATIONAL_BOUNDARY)) if rest else ()
        object.__setattr__(self, 'root', root)
        object.__setattr__(self, 'inflectional_groups', groups)

    def __str__(self):
        return self.transition_list

    def size(self) -> int:
        """Number of inflectional groups."""
        return len(self.inflectional_groups)

    def inflectional_group(self, index: int) -> str:
        return self.inflectional_groups[index]

    @property
    def last_inflectional_group(self) -> str:
        return self.inflectional_groups[-1] if self.inflectional_groups else ''

    @property
    def tags(self) -> Tuple[str, ...]:
        return tuple(tag for group in self.inflectional_groups for tag in group.split('+') if tag)

    @property
    def root_pos(self) -> str:
        """First tag of the first inflectional group."""
        if not self.inflectional_groups:
            return ''
        return self.inflectional_groups[0].split('+')[0]

    @property
    def word_with_pos(self) -> str:
        """Word-form token used by the language models, e.g. "masa+NOUN"."""
        if not self.root_pos:
            return self.root
        return f"{self.root}+{self.root_pos}"

    @property
    def pos(self) -> str:
        """Part of speech of the last inflectional group."""
        return self.last_inflectional_group.split('+')[0]

    @property
    def final_pos(self) -> str:
        """Like pos, but proper nouns report "PROP"."""
        if 'PROP' in self.last_inflectional_group.split('+'):
            return 'PROP'
        return self.pos

    @property
    def is_capital_word(self) -> bool:
        return bool(self.surface_form) and self.surface_form[0].isupper()

    @property
    def is_noun(self) -> bool:
        return self.pos == 'NOUN'

    @property
    def is_plural(self) -> bool:
        tags = self.tags
        return any(tag in tags for tag in PLURAL_TAGS)

    def contains_tag(self, tag: str) -> bool:
        return tag in self.tags

    def same_root(self, other: 'Analysis') -> bool:
        return self.root == other.root

    def same_root_and_pos(self, other: 'Analysis') -> bool:
        return self.root == other.root and self.final_pos == other.final_pos


class CandidateSet:
    """
    The ordered candidate analyses of one sentence position.

    All candidates share the surface form. Root selection narrows the set in
    place, so a set must not be shared between two disambiguation passes
    that both narrow it.
    """

    def __init__(self, analyses: Iterable[Analysis]):
        self._analyses: List[Analysis] = list(analyses)
        surface_forms = {a.surface_form for a in self._analyses}
        if len(surface_forms) > 1:
            raise ValueError(f"Candidates disagree on surface form: {sorted(surface_forms)}")

    @classmethod
    def from_parses(cls, surface_form: str, parses: Iterable[str]) -> 'CandidateSet':
        return cls(Analysis(surface_form, parse) for parse in parses)

    def __len__(self):
        return len(self._analyses)

    def __iter__(self) -> Iterator[Analysis]:
        return iter(self._analyses)

    def __getitem__(self, index: int) -> Analysis:
        return self._analyses[index]

    def __repr__(self):
        return f"CandidateSet({[a.transition_list for a in self._analyses]!r})"

    def size(self) -> int:
        return len(self._analyses)

    @property
    def surface_form(self) -> Optional[str]:
        return self._analyses[0].surface_form if self._analyses else None

    def copy(self) -> 'CandidateSet':
        return CandidateSet(self._analyses)

    def roots(self) -> List[str]:
        return [a.root for a in self._analyses]

    def reduce_to_same_root(self, root: str):
        """Keep only the analyses whose root is root."""
        self._analyses = [a for a in self._analyses if a.root == root]

    def reduce_to_same_root_and_pos(self, word_with_pos: str):
        """Keep only the analyses whose root and root tag form word_with_pos."""
        self._analyses = [a for a in self._analyses if a.word_with_pos == word_with_pos]

    def parse_with_longest_root(self) -> Optional[Analysis]:
        """Candidate with the longest root; the first one wins on ties."""
        best = None
        for analysis in self._analyses:
            if best is None or len(analysis.root) > len(best.root):
                best = analysis
        return best

    def abbreviated_key(self) -> str:
        """
        Ambiguity key of the set.

        Tags shared by every candidate at the start or at the end of the
        parse string are trimmed ('+' delimited), the distinct remainders
        are sorted and joined with '$'. A single candidate yields its parse
        without the root.
        """
        analyses = [a.transition_list for a in self._analyses]
        if not analyses:
            return ''
        if len(analyses) == 1:
            return analyses[0][analyses[0].find('+') + 1:]

        while _all_share(analyses, _first_segment):
            analyses = [a[a.find('+') + 1:] for a in analyses]
        while _all_share(analyses, _last_segment):
            analyses = [a[:a.rfind('+')] for a in analyses]

        return KEY_SEPARATOR.join(sorted(set(analyses)))


def _first_segment(parse: str) -> str:
    return parse[:parse.find('+') + 1]


def _last_segment(parse: str) -> str:
    return parse[parse.rfind('+'):]


def _all_share(analyses: Sequence[str], segment) -> bool:
    if any('+' not in a for a in analyses):
        return False
    first = segment(analyses[0])
    return all(segment(a) == first for a in analyses[1:])


# A parse lattice is one candidate set per sentence position.
ParseLattice = List[CandidateSet]


def build_lattice(words: Iterable[Tuple[str, Iterable[str]]]) -> ParseLattice:
    """
    Build a lattice from (surface form, parse strings) pairs.

    Example:
        build_lattice([("masa", ["masa+NOUN"]),
                       ("var", ["var+VERB", "var+ADJ^DB+VERB+ZERO"])])
    """
    return [CandidateSet.from_parses(surface_form, parses) for surface_form, parses in words]
