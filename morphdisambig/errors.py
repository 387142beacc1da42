"""
Exceptions raised by the disambiguators.

Structural problems with a lattice are errors; an unknown ambiguity key is
not (the rule engine recovers from it by picking the first candidate).
"""


class DisambiguationError(ValueError):
    """Base class for failures that prevent a sentence from being disambiguated."""


class EmptyLatticeError(DisambiguationError):
    """The sentence has no positions, or no lattice was given at all."""


class UnreachableStateError(DisambiguationError):
    """A candidate set is empty: the analyzer produced no reading for a word."""

    def __init__(self, index: int):
        super().__init__(f"Candidate set at position {index} is empty")
        self.index = index


class DecodingFailureError(DisambiguationError):
    """The Viterbi back-pointer chain is broken or no final state is reachable."""


class MissingRootFileError(FileNotFoundError):
    """The root list used by the rule engine could not be read."""

    def __init__(self, path, reason=None):
        message = f"Root list not found or unreadable at {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path
