"""
Disambiguated training corpora and lattice files.

Corpus file (UTF-8), one word per line, a blank line between sentences:

    Masa<TAB>masa+NOUN+A3SG+PNON+NOM
    var<TAB>var+ADJ^DB+VERB+ZERO+PRES+A3SG
    .<TAB>.+PUNC

Lattice file, same layout, every candidate parse of a word on its line:

    var<TAB>var+VERB+POS+IMP+A2SG<TAB>var+ADJ^DB+VERB+ZERO+PRES+A3SG
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Sequence

from .analysis import Analysis, CandidateSet, ParseLattice

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisambiguatedWord:
    """A surface form paired with its gold analysis."""
    surface_form: str
    parse: Analysis

    @classmethod
    def from_parse(cls, surface_form: str, parse: str) -> 'DisambiguatedWord':
        return cls(surface_form, Analysis(surface_form, parse))


class DisambiguationCorpus:
    """An ordered collection of disambiguated sentences."""

    def __init__(self, sentences: Sequence[Sequence[DisambiguatedWord]] = ()):
        self.sentences: List[List[DisambiguatedWord]] = [list(s) for s in sentences]

    def __len__(self):
        return len(self.sentences)

    def __iter__(self) -> Iterator[List[DisambiguatedWord]]:
        return iter(self.sentences)

    def sentence_count(self) -> int:
        return len(self.sentences)

    def get_sentence(self, index: int) -> List[DisambiguatedWord]:
        return self.sentences[index]

    def add_sentence(self, sentence: Sequence[DisambiguatedWord]):
        self.sentences.append(list(sentence))

    def word_count(self) -> int:
        return sum(len(s) for s in self.sentences)

    @classmethod
    def from_file(cls, path) -> 'DisambiguationCorpus':
        """
        Read a corpus file.

        Args:
            path: Path to a tab-separated corpus file

        Returns:
            The corpus; lines that are not exactly "surface<TAB>parse" are
            skipped with a warning.
        """
        corpus = cls()
        for sentence in _read_blocks(path):
            words = []
            for line_num, fields in sentence:
                if len(fields) != 2:
                    logger.warning(f"{path}:{line_num}: expected 2 fields, got {len(fields)}; skipped")
                    continue
                words.append(DisambiguatedWord.from_parse(fields[0], fields[1]))
            if words:
                corpus.add_sentence(words)
        logger.info(f"Loaded {corpus.sentence_count()} sentences ({corpus.word_count()} words) from {path}")
        return corpus


def read_lattices(path) -> List[ParseLattice]:
    """
    Read a lattice file.

    Args:
        path: Path to a tab-separated lattice file

    Returns:
        One lattice per sentence. A word line without any parse yields an
        empty candidate set, which the disambiguators report as unreachable.
    """
    lattices = []
    for sentence in _read_blocks(path):
        lattice = [CandidateSet.from_parses(fields[0], fields[1:]) for _, fields in sentence]
        lattices.append(lattice)
    logger.info(f"Loaded {len(lattices)} lattices from {path}")
    return lattices


def _read_blocks(path):
    """Yield blank-line separated blocks of (line number, tab-split fields)."""
    block = []
    with open(Path(path), 'r', encoding='utf-8') as f:
        for line_num, line in enumerate(f, 1):
            line = line.rstrip('\r\n')
            if not line.strip():
                if block:
                    yield block
                    block = []
                continue
            block.append((line_num, line.split('\t')))
    if block:
        yield block
