"""The mutable vertex -> color assignment produced by every heuristic."""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Sequence, Set, Tuple

from .graph import Graph, check_vertex

UNCOLORED = -1


class Coloring:
    """Colors of the vertices of one graph, indexed by vertex id.

    Each instance owns its own list of colors, initialised to ``UNCOLORED``.
    It holds a reference to the graph it colors (used for conflict queries)
    but never to the graph's storage, so concurrent runs on a shared graph
    each get an independent Coloring.
    """

    __slots__ = ("graph", "_colors")

    def __init__(self, graph: Graph):
        self.graph = graph
        self._colors: List[int] = [UNCOLORED] * graph.vertex_count()

    @classmethod
    def from_sequence(cls, graph: Graph, colors: Sequence[int]) -> "Coloring":
        if len(colors) != graph.vertex_count():
            raise ValueError(
                f"expected {graph.vertex_count()} colors, got {len(colors)}"
            )
        coloring = cls(graph)
        for v, c in enumerate(colors):
            coloring[v] = int(c)
        return coloring

    @classmethod
    def from_classes(cls, graph: Graph, classes: Iterable[Iterable[int]]) -> "Coloring":
        """Build a coloring where the i-th vertex set gets color i."""
        coloring = cls(graph)
        for color, members in enumerate(classes):
            for v in members:
                coloring[v] = color
        return coloring

    def __len__(self) -> int:
        return len(self._colors)

    def __getitem__(self, v: int) -> int:
        check_vertex(v, len(self._colors))
        return self._colors[v]

    def __setitem__(self, v: int, color: int) -> None:
        check_vertex(v, len(self._colors))
        if color < 0 and color != UNCOLORED:
            raise ValueError(f"color must be non-negative or UNCOLORED, got {color}")
        self._colors[v] = color

    def __iter__(self) -> Iterator[int]:
        return iter(self._colors)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Coloring):
            return NotImplemented
        return self._colors == other._colors

    def __repr__(self) -> str:
        return (
            f"Coloring(n={len(self._colors)}, colors={self.num_colors_used()}, "
            f"conflicts={self.conflict_count()})"
        )

    def as_list(self) -> List[int]:
        return list(self._colors)

    def copy(self) -> "Coloring":
        out = Coloring.__new__(Coloring)
        out.graph = self.graph
        out._colors = list(self._colors)
        return out

    def uncolored_vertices(self) -> List[int]:
        return [v for v, c in enumerate(self._colors) if c == UNCOLORED]

    def is_complete(self) -> bool:
        return UNCOLORED not in self._colors

    def conflicting_edges(self) -> List[Tuple[int, int]]:
        colors = self._colors
        return [
            (u, v) for u, v in self.graph.edges()
            if colors[u] != UNCOLORED and colors[u] == colors[v]
        ]

    def conflict_count(self) -> int:
        """Number of edges whose endpoints share a (non-sentinel) color."""
        colors = self._colors
        return sum(
            1 for u, v in self.graph.edges()
            if colors[u] != UNCOLORED and colors[u] == colors[v]
        )

    def conflicted_vertices(self) -> List[int]:
        bad: Set[int] = set()
        for u, v in self.conflicting_edges():
            bad.add(u)
            bad.add(v)
        return sorted(bad)

    def is_proper(self) -> bool:
        return self.is_complete() and self.conflict_count() == 0

    def num_colors_used(self) -> int:
        return len({c for c in self._colors if c != UNCOLORED})

    def max_color(self) -> int:
        """Largest assigned color, or ``UNCOLORED`` if nothing is colored."""
        return max(self._colors, default=UNCOLORED)

    def color_classes(self) -> List[Set[int]]:
        """Vertex sets sharing a color, ordered by color id. Empty classes are skipped."""
        classes: Dict[int, Set[int]] = {}
        for v, c in enumerate(self._colors):
            if c != UNCOLORED:
                classes.setdefault(c, set()).add(v)
        return [classes[c] for c in sorted(classes)]

    def normalized(self) -> "Coloring":
        """Copy with colors relabelled ``0 .. k-1`` in order of first appearance."""
        relabel: Dict[int, int] = {}
        out = Coloring(self.graph)
        for v, c in enumerate(self._colors):
            if c == UNCOLORED:
                continue
            if c not in relabel:
                relabel[c] = len(relabel)
            out._colors[v] = relabel[c]
        return out

    def validate(self) -> "ValidationResult":
        conflicts = self.conflicting_edges()
        uncolored = self.uncolored_vertices()
        return ValidationResult(
            valid=not conflicts and not uncolored,
            num_colors=self.num_colors_used(),
            num_vertices=len(self._colors),
            uncolored_vertices=uncolored,
            conflicting_edges=conflicts,
        )


@dataclass
class ValidationResult:
    """Detailed coloring validation result."""
    valid: bool
    num_colors: int
    num_vertices: int
    uncolored_vertices: List[int]
    conflicting_edges: List[Tuple[int, int]]


def count_colors(colors: Iterable[int]) -> int:
    """Number of distinct colors in a plain color sequence, ignoring ``UNCOLORED``."""
    return len({c for c in colors if c != UNCOLORED})


def verify_coloring(graph: Graph, colors: Sequence[int]) -> bool:
    """Check that ``colors`` is a proper coloring of ``graph``.

    Returns True iff:
      1. There is one color per vertex and none is ``UNCOLORED``.
      2. No edge joins two vertices of the same color.
    """
    if len(colors) != graph.vertex_count():
        return False
    if any(c == UNCOLORED for c in colors):
        return False
    return all(colors[u] != colors[v] for u, v in graph.edges())
