"""Reader and writer for the DIMACS ``.col`` graph coloring format.

Format (line oriented, whitespace separated)::

    c <comment text>      zero or more, ignored
    p edge <n> <m>        exactly one, before any 'e' line
    e <i> <j>             exactly m lines, 1-based vertex ids

Vertex ids are shifted to 0-based on load and back to 1-based on write.
Some benchmark files list an edge in both orientations; such repeats count
toward ``m`` but the graph keeps a single edge.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .errors import (
    ColoringError,
    EdgeCountMismatch,
    MalformedHeader,
    MalformedLine,
    VertexOutOfRange,
)
from .graph import BackendSpec, Graph, choose_backend, create

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

PROBLEM_FORMATS = ("edge", "col")


def _parse_int(token: str, what: str, error_cls, source, line_number) -> int:
    try:
        return int(token)
    except ValueError:
        raise error_cls(f"{what} is not an integer: {token!r}", path=source,
                        line_number=line_number) from None


def parse_dimacs(
    lines: Iterable[str],
    backend: Optional[BackendSpec] = "adjlist",
    source: Optional[PathLike] = None,
) -> Graph:
    """Build a graph from DIMACS lines.

    Args:
        lines: Any iterable of text lines (an open file works).
        backend: Graph backend. ``None`` picks one from the declared density.
        source: File name used in error messages.

    Raises:
        MalformedHeader: Problem line missing, duplicated or invalid, or an
            edge line appears before it.
        MalformedLine: Unknown line tag, bad edge line, or a self-loop.
        VertexOutOfRange: Edge endpoint outside ``1..n``.
        EdgeCountMismatch: Number of edge lines differs from the declared m.
    """
    graph: Optional[Graph] = None
    n = 0
    declared_edges = 0
    edge_lines = 0

    for line_number, raw in enumerate(lines, start=1):
        parts = raw.split()
        if not parts:
            continue
        tag = parts[0]

        if tag == "c":
            continue

        if tag == "p":
            if graph is not None:
                raise MalformedHeader("duplicate problem line", path=source, line_number=line_number)
            if len(parts) != 4:
                raise MalformedHeader(
                    f"expected 'p edge <n> <m>', got {raw.strip()!r}",
                    path=source, line_number=line_number,
                )
            if parts[1] not in PROBLEM_FORMATS:
                raise MalformedHeader(
                    f"unsupported problem format {parts[1]!r}",
                    path=source, line_number=line_number,
                )
            n = _parse_int(parts[2], "vertex count", MalformedHeader, source, line_number)
            declared_edges = _parse_int(parts[3], "edge count", MalformedHeader, source, line_number)
            if n <= 0:
                raise MalformedHeader(
                    f"vertex count must be positive, got {n}",
                    path=source, line_number=line_number,
                )
            if declared_edges < 0:
                raise MalformedHeader(
                    f"edge count must be non-negative, got {declared_edges}",
                    path=source, line_number=line_number,
                )
            if backend is None:
                chosen = choose_backend(n, declared_edges)
            else:
                chosen = backend
            graph = create(n, chosen)
            continue

        if tag == "e":
            if graph is None:
                raise MalformedHeader("edge line before problem line", path=source,
                                      line_number=line_number)
            if len(parts) != 3:
                raise MalformedLine(
                    f"expected 'e <i> <j>', got {raw.strip()!r}",
                    path=source, line_number=line_number,
                )
            u = _parse_int(parts[1], "vertex id", MalformedLine, source, line_number)
            v = _parse_int(parts[2], "vertex id", MalformedLine, source, line_number)
            for vertex in (u, v):
                if not 1 <= vertex <= n:
                    raise VertexOutOfRange(vertex, n, path=source, line_number=line_number)
            if u == v:
                raise MalformedLine(f"self-loop on vertex {u}", path=source, line_number=line_number)
            graph.add_edge(u - 1, v - 1)
            edge_lines += 1
            continue

        raise MalformedLine(f"unexpected line {raw.strip()!r}", path=source, line_number=line_number)

    if graph is None:
        raise MalformedHeader("missing problem line", path=source)
    if edge_lines != declared_edges:
        raise EdgeCountMismatch(declared_edges, edge_lines, path=source)
    if graph.edge_count() != edge_lines:
        logger.debug(
            "%s: %d edge lines collapsed to %d distinct edges",
            source or "<input>", edge_lines, graph.edge_count(),
        )
    return graph


def loads(text: str, backend: Optional[BackendSpec] = "adjlist") -> Graph:
    return parse_dimacs(text.splitlines(), backend=backend)


def load_graph(path: PathLike, backend: Optional[BackendSpec] = None) -> Graph:
    """Read one ``.col`` file. ``backend=None`` chooses by declared density."""
    path = Path(path)
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return parse_dimacs(f, backend=backend, source=path)


def dumps(graph: Graph, comments: Iterable[str] = ()) -> str:
    lines = [f"c {comment}" for comment in comments]
    lines.append(f"p edge {graph.vertex_count()} {graph.edge_count()}")
    lines.extend(f"e {u + 1} {v + 1}" for u, v in graph.edges())
    return "\n".join(lines) + "\n"


def write_graph(graph: Graph, path: PathLike, comments: Iterable[str] = ()) -> Path:
    path = Path(path)
    path.write_text(dumps(graph, comments), encoding="utf-8")
    return path


@dataclass(frozen=True)
class SkippedFile:
    """A file that could not be loaded, with the reason."""

    path: Path
    reason: str


@dataclass
class DirectoryLoad:
    graphs: Dict[str, Graph] = field(default_factory=dict)
    skipped: List[SkippedFile] = field(default_factory=list)


def load_directory(
    directory: PathLike,
    pattern: str = "*.col",
    backend: Optional[BackendSpec] = None,
) -> DirectoryLoad:
    """Load every matching file in ``directory``, independently.

    A file that fails to parse or read is logged and recorded in
    ``skipped``; it never prevents the remaining files from loading. Graphs
    are keyed by file stem, in sorted file order.
    """
    directory = Path(directory)
    loaded = DirectoryLoad()
    for path in sorted(directory.glob(pattern)):
        if not path.is_file():
            continue
        try:
            loaded.graphs[path.stem] = load_graph(path, backend=backend)
        except (ColoringError, OSError) as e:
            logger.warning("Skipping %s: %s", path.name, e)
            loaded.skipped.append(SkippedFile(path=path, reason=str(e)))
    logger.info("Loaded %d graphs from %s (%d skipped)",
                len(loaded.graphs), directory, len(loaded.skipped))
    return loaded
