"""Exception hierarchy for graph construction and DIMACS parsing."""

from pathlib import Path
from typing import Optional, Union


class ColoringError(Exception):
    """Base class for every error raised by heuristic_coloring."""


class GraphError(ColoringError, ValueError):
    """Invalid graph construction. Always a caller bug."""


class InvalidSize(GraphError):
    pass


class OutOfRange(GraphError, IndexError):
    """A vertex id outside ``0 .. n-1``."""

    def __init__(self, vertex: int, vertex_count: int):
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(f"vertex {vertex} out of range for graph with {vertex_count} vertices")


class SelfLoop(GraphError):
    def __init__(self, vertex: int):
        self.vertex = vertex
        super().__init__(f"self-loop on vertex {vertex} is not allowed")


def _located(message: str, path, line_number) -> str:
    if path is not None:
        where = f"{path}"
        if line_number is not None:
            where += f":{line_number}"
        return f"{where}: {message}"
    if line_number is not None:
        return f"line {line_number}: {message}"
    return message


class DimacsError(ColoringError, ValueError):
    """Base class for DIMACS ``.col`` parse errors.

    Carries the offending source (when known) and the 1-based line number so
    batch loaders can report skips precisely.
    """

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        line_number: Optional[int] = None,
    ):
        self.message = message
        self.path = path
        self.line_number = line_number
        super().__init__(_located(message, path, line_number))


class MalformedHeader(DimacsError):
    pass


class MalformedLine(DimacsError):
    pass


class EdgeCountMismatch(DimacsError):
    def __init__(self, expected: int, found: int, path=None):
        self.expected = expected
        self.found = found
        super().__init__(f"expected {expected} edge lines, found {found}", path=path)


class VertexOutOfRange(DimacsError, OutOfRange):
    def __init__(self, vertex: int, vertex_count: int, path=None, line_number=None):
        # Both bases define __init__ with different signatures; set every field here.
        self.vertex = vertex
        self.vertex_count = vertex_count
        self.message = f"vertex {vertex} outside 1..{vertex_count}"
        self.path = path
        self.line_number = line_number
        Exception.__init__(self, _located(self.message, path, line_number))
