"""
Surface form to root lookup used by the rule engine.

The root list is a UTF-8 text file with one "surfaceForm root" pair per
line, e.g.

    kitabın kitap
    masalar masa

Lines that do not split into exactly two space-separated fields are ignored.
"""
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .errors import MissingRootFileError

logger = logging.getLogger(__name__)


class RootTable:
    """Read-only mapping from surface form to its most likely root."""

    def __init__(self, roots: Optional[Mapping[str, str]] = None):
        self._roots: Mapping[str, str] = MappingProxyType(dict(roots or {}))

    @classmethod
    def from_file(cls, path) -> 'RootTable':
        """
        Load a root list.

        Args:
            path: Path to the root list

        Returns:
            The loaded table

        Raises:
            MissingRootFileError: If the file cannot be read
        """
        try:
            text = Path(path).read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise MissingRootFileError(path, e) from e

        roots: Dict[str, str] = {}
        skipped = 0
        for line in text.split('\n'):
            fields = line.split(' ')
            if len(fields) == 2:
                roots[fields[0]] = fields[1].rstrip('\r')
            elif line.strip():
                skipped += 1
        if skipped:
            logger.warning(f"Skipped {skipped} malformed lines in root list {path}")
        logger.info(f"Loaded {len(roots)} roots from {path}")
        return cls(roots)

    def get(self, surface_form: str) -> Optional[str]:
        return self._roots.get(surface_form)

    def __contains__(self, surface_form):
        return surface_form in self._roots

    def __len__(self):
        return len(self._roots)
