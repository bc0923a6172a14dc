"""
Header-to-column resolution.

The sheet's column order and header wording are not fixed, so each semantic
field is located by a substring of its header text. Fields whose header
cannot be found fall back to their historical column position.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterable, NamedTuple, Sequence

from .config import FIELD_REGISTRY

logger = logging.getLogger(__name__)


class FieldSpec(NamedTuple):
    key: str
    match: str
    fallback: int


FIELD_SPECS: tuple[FieldSpec, ...] = tuple(
    FieldSpec(key, spec["match"], spec["fallback"])
    for key, spec in FIELD_REGISTRY.items()
)


class ColumnMap(Mapping):
    """Read-only mapping of semantic field key -> 0-based column index."""

    def __init__(self, indices: dict[str, int], fallbacks: Iterable[str] = ()):
        self._indices = MappingProxyType(dict(indices))
        self._fallbacks = frozenset(fallbacks)

    @property
    def fallbacks(self) -> frozenset[str]:
        """Keys whose header was not found and which use the positional index."""
        return self._fallbacks

    def __getitem__(self, key: str) -> int:
        return self._indices[key]

    def __iter__(self):
        return iter(self._indices)

    def __len__(self) -> int:
        return len(self._indices)

    def __repr__(self) -> str:
        return f"ColumnMap({dict(self._indices)!r})"


def normalise_header(header: Sequence[str]) -> list[str]:
    return [str(h).upper().strip() for h in header]


def find_column(header: Sequence[str], candidates: Sequence[str], fallback: int) -> int:
    """Index of the first header cell containing any candidate, else `fallback`.

    `header` is expected to be normalised already.
    """
    wanted = [c.upper() for c in candidates]
    for idx, cell in enumerate(header):
        if any(w in cell for w in wanted):
            return idx
    return fallback


def resolve_columns(
    header: Sequence[str],
    specs: Iterable[FieldSpec] = FIELD_SPECS,
) -> ColumnMap:
    """Map each field spec to a column index using the header row.

    Matching is a case-insensitive substring test against trimmed header
    cells; the first matching cell wins. Two fields may share a column.
    """
    normalised = normalise_header(header)
    indices: dict[str, int] = {}
    fallbacks: list[str] = []

    for spec in specs:
        idx = find_column(normalised, [spec.match], -1)
        if idx == -1:
            idx = spec.fallback
            fallbacks.append(spec.key)
        indices[spec.key] = idx

    if fallbacks:
        logger.warning(
            "Header match failed for %d field(s), using fallback index: %s",
            len(fallbacks), ", ".join(fallbacks),
        )
    return ColumnMap(indices, fallbacks)
