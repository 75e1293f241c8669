from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence, Tuple, Union

from .config import DEFAULT_EXCLUDED_KINDS
from .models import ExclusionRange, StructuralNode

LOGGER = logging.getLogger(__name__)

NodeLike = Union[StructuralNode, Tuple[str, int, int]]


class ExclusionIndex:
    """
    Ranges of text that must never be highlighted (code, comments, links, headings).

    Ranges are closed: a node covering offsets 4..9 excludes any sentence
    that starts at or before 9 and ends after 4.
    """

    def __init__(self, ranges: Iterable[ExclusionRange] = ()) -> None:
        self._ranges: list[ExclusionRange] = list(ranges)

    @classmethod
    def from_nodes(
        cls,
        nodes: Iterable[NodeLike] | None,
        kinds: Sequence[str] = DEFAULT_EXCLUDED_KINDS,
    ) -> "ExclusionIndex":
        """Index every node whose kind label contains one of ``kinds``."""
        index = cls()
        if nodes is None:
            return index
        for node in nodes:
            kind, start, end = _unpack(node)
            if is_excluded_kind(kind, kinds):
                index.add(start, end)
        LOGGER.debug("Indexed %d exclusion ranges", len(index))
        return index

    def add(self, min_offset: int, max_offset: int) -> None:
        self._ranges.append(ExclusionRange(min=min_offset, max=max_offset))

    def overlaps(self, start: int, end: int) -> bool:
        """Return True if the half-open span [start, end) touches any excluded range."""
        return any(start <= rng.max and end > rng.min for rng in self._ranges)

    def __len__(self) -> int:
        return len(self._ranges)

    def __iter__(self) -> Iterator[ExclusionRange]:
        return iter(self._ranges)


def is_excluded_kind(kind: str, kinds: Sequence[str] = DEFAULT_EXCLUDED_KINDS) -> bool:
    """Case-sensitive substring match of the node label against the excluded kinds."""
    return any(marker in kind for marker in kinds)


def _unpack(node: NodeLike) -> tuple[str, int, int]:
    if isinstance(node, StructuralNode):
        return node.kind, node.start, node.end
    kind, start, end = node
    return kind, start, end
