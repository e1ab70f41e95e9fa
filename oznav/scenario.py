"""
Scenario loading for the three plain-text input files.

A run is described by:

- a node file: header ``maxX maxY`` then one ``x y terrain`` line per cell
- an edge file: one undirected edge per line, two ``x-y`` coordinates and a
  cost, written either as ``x1-y1,x2-y2 cost`` or ``x1-y1 x2-y2 cost``
- an objectives file: sight radius (a real number, truncated), the start
  ``x y``, then one ``x y [option ...]`` line per objective

Blank lines are ignored everywhere. Any malformed line raises
:class:`ScenarioFormatError` naming the file and 1-based line number; the loader
never tries to recover from bad input.

Usage:
    loader = ScenarioLoader()
    scenario = loader.load("nodes.txt", "edges.txt", "objectives.txt")
    navigator = Navigator.from_scenario(scenario)
"""

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .schemas import EdgeSpec, NavigationScenario, Objective


class ScenarioFormatError(ValueError):
    """Raised when an input file does not match its expected format."""

    def __init__(self, source: str, line_number: Optional[int], reason: str) -> None:
        self.source = source
        self.line_number = line_number
        self.reason = reason
        where = source if line_number is None else f"{source}:{line_number}"
        super().__init__(f"{where}: {reason}")


def _content_lines(lines: Iterable[str]) -> Iterator[Tuple[int, List[str]]]:
    for number, raw in enumerate(lines, start=1):
        tokens = raw.split()
        if tokens:
            yield number, tokens


def _to_int(token: str, source: str, line_number: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise ScenarioFormatError(source, line_number, f"expected an integer, got '{token}'") from None


def _to_float(token: str, source: str, line_number: int) -> float:
    try:
        return float(token)
    except ValueError:
        raise ScenarioFormatError(source, line_number, f"expected a number, got '{token}'") from None


def _expect(tokens: Sequence[str], count: int, source: str, line_number: int, what: str) -> None:
    if len(tokens) < count:
        raise ScenarioFormatError(source, line_number, f"expected {what}, got '{' '.join(tokens)}'")


def parse_coordinate(token: str, source: str = "<coordinate>", line_number: int = 1) -> Tuple[int, int]:
    """Parse an ``x-y`` token."""
    parts = token.split("-")
    if len(parts) != 2:
        raise ScenarioFormatError(source, line_number, f"expected a coordinate 'x-y', got '{token}'")
    return _to_int(parts[0], source, line_number), _to_int(parts[1], source, line_number)


def parse_node_lines(
    lines: Iterable[str], source: str = "<nodes>"
) -> Tuple[int, int, List[Tuple[int, int, int]]]:
    """Return ``(width, height, cells)`` from node-file lines."""

    rows = _content_lines(lines)
    header = next(rows, None)
    if header is None:
        raise ScenarioFormatError(source, None, "missing 'maxX maxY' header")
    line_number, tokens = header
    _expect(tokens, 2, source, line_number, "'maxX maxY'")
    width = _to_int(tokens[0], source, line_number)
    height = _to_int(tokens[1], source, line_number)
    if width < 0 or height < 0:
        raise ScenarioFormatError(source, line_number, "grid extents must be non-negative")

    cells: List[Tuple[int, int, int]] = []
    for line_number, tokens in rows:
        _expect(tokens, 3, source, line_number, "'x y terrain'")
        x, y, terrain = (_to_int(token, source, line_number) for token in tokens[:3])
        if not (0 <= x < width and 0 <= y < height):
            raise ScenarioFormatError(
                source, line_number, f"cell {x}-{y} lies outside a {width}x{height} grid"
            )
        cells.append((x, y, terrain))
    return width, height, cells


def parse_edge_lines(lines: Iterable[str], source: str = "<edges>") -> List[EdgeSpec]:
    """Return one :class:`EdgeSpec` per edge line."""

    edges: List[EdgeSpec] = []
    for line_number, tokens in _content_lines(lines):
        # "x1-y1,x2-y2 cost" and "x1-y1 x2-y2 cost" both flatten to three tokens
        tokens = " ".join(tokens).replace(",", " ").split()
        _expect(tokens, 3, source, line_number, "two coordinates and a cost")
        a = parse_coordinate(tokens[0], source, line_number)
        b = parse_coordinate(tokens[1], source, line_number)
        cost = _to_float(tokens[2], source, line_number)
        if cost < 0:
            raise ScenarioFormatError(source, line_number, f"edge cost must be non-negative, got {cost}")
        edges.append(EdgeSpec(source=a, target=b, cost=cost))
    return edges


def parse_objective_lines(
    lines: Iterable[str], source: str = "<objectives>"
) -> Tuple[int, Tuple[int, int], List[Objective]]:
    """Return ``(sight_radius, start, objectives)`` from objectives-file lines."""

    rows = _content_lines(lines)

    header = next(rows, None)
    if header is None:
        raise ScenarioFormatError(source, None, "missing sight radius")
    line_number, tokens = header
    sight_radius = int(_to_float(tokens[0], source, line_number))

    start_row = next(rows, None)
    if start_row is None:
        raise ScenarioFormatError(source, None, "missing start coordinate")
    line_number, tokens = start_row
    _expect(tokens, 2, source, line_number, "'startX startY'")
    start = (_to_int(tokens[0], source, line_number), _to_int(tokens[1], source, line_number))

    objectives: List[Objective] = []
    for line_number, tokens in rows:
        _expect(tokens, 2, source, line_number, "'x y [options...]'")
        values = [_to_int(token, source, line_number) for token in tokens]
        objectives.append(Objective(x=values[0], y=values[1], options=values[2:]))
    return sight_radius, start, objectives


class ScenarioLoader:
    """Read the node, edge and objectives files into a NavigationScenario.

    Files are read completely before parsing. ``OSError`` from opening or
    reading a file propagates unchanged; format problems raise
    :class:`ScenarioFormatError`.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def _read_lines(self, path: Path) -> List[str]:
        with path.open("r", encoding=self.encoding) as handle:
            return handle.readlines()

    def load(
        self,
        nodes_path: Path | str,
        edges_path: Path | str,
        objectives_path: Path | str,
    ) -> NavigationScenario:
        nodes_path = Path(nodes_path)
        edges_path = Path(edges_path)
        objectives_path = Path(objectives_path)

        width, height, cells = parse_node_lines(self._read_lines(nodes_path), source=nodes_path.name)
        edges = parse_edge_lines(self._read_lines(edges_path), source=edges_path.name)
        sight_radius, start, objectives = parse_objective_lines(
            self._read_lines(objectives_path), source=objectives_path.name
        )

        return NavigationScenario(
            width=width,
            height=height,
            cells=cells,
            edges=edges,
            sight_radius=sight_radius,
            start=start,
            objectives=objectives,
        )

    def load_directory(self, directory: Path | str) -> NavigationScenario:
        """Load ``nodes.txt``, ``edges.txt`` and ``objectives.txt`` from one folder."""
        directory = Path(directory)
        if not directory.is_dir():
            raise FileNotFoundError(f"Scenario directory not found: {directory}")
        return self.load(
            directory / "nodes.txt",
            directory / "edges.txt",
            directory / "objectives.txt",
        )
