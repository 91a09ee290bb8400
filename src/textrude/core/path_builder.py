"""Incremental outline path construction.

PathBuilder is the curve sink glyph outlines are drawn into. It speaks the
fontTools pen protocol, so any glyph (TrueType quadratic, CFF cubic or
composite) can be drawn straight into it, optionally through a
TransformPen that places the glyph in layout space.
"""

from typing import Any

from fontTools.pens.basePen import BasePen

from textrude.domain import CommandType, Path, PathCommand, Point, Subpath


class PathBuilder(BasePen):
    """Collects drawing commands into an immutable Path.

    The public methods (begin, line_to, quadratic_to, cubic_to, close) form
    the curve sink interface; the underscore methods adapt the fontTools
    pen protocol onto them. A subpath left open when the next one begins,
    or when build() is called, is kept as an open subpath.

    Example:
        builder = PathBuilder()
        builder.begin(Point(0, 0))
        builder.line_to(Point(10, 0))
        builder.line_to(Point(10, 10))
        builder.close()
        path = builder.build()
    """

    def __init__(self, glyph_set: Any = None) -> None:
        """Initialize an empty builder.

        Args:
            glyph_set: fontTools glyph set used to decompose composite
                glyphs (None when only simple outlines are drawn)
        """
        super().__init__(glyphSet=glyph_set)
        self._subpaths: list[Subpath] = []
        self._current: list[PathCommand] | None = None
        self._built = False

    def begin(self, point: Point) -> None:
        """Start a new subpath at point."""
        self._check_open()
        self._finish()
        self._current = [PathCommand(CommandType.BEGIN, (point,))]

    def line_to(self, point: Point) -> None:
        """Add a straight segment to point."""
        self._append(PathCommand(CommandType.LINE, (point,)))

    def quadratic_to(self, ctrl: Point, end: Point) -> None:
        """Add a quadratic Bezier segment."""
        self._append(PathCommand(CommandType.QUADRATIC, (ctrl, end)))

    def cubic_to(self, ctrl1: Point, ctrl2: Point, end: Point) -> None:
        """Add a cubic Bezier segment."""
        self._append(PathCommand(CommandType.CUBIC, (ctrl1, ctrl2, end)))

    def close(self) -> None:
        """Close the current subpath."""
        self._append(PathCommand(CommandType.CLOSE))
        self._finish()

    def build(self) -> Path:
        """Finalize and return the path.

        Returns:
            Immutable Path with every subpath drawn so far

        Raises:
            RuntimeError: If the builder was already finalized
        """
        self._check_open()
        self._finish()
        self._built = True
        return Path(subpaths=tuple(self._subpaths))

    @property
    def subpath_count(self) -> int:
        """Number of subpaths completed so far."""
        return len(self._subpaths)

    # fontTools pen protocol

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self.begin(Point(*pt))

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.line_to(Point(*pt))

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self.quadratic_to(Point(*pt1), Point(*pt2))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.cubic_to(Point(*pt1), Point(*pt2), Point(*pt3))

    def _closePath(self) -> None:
        self.close()

    def _endPath(self) -> None:
        self._finish()

    # internals

    def _append(self, command: PathCommand) -> None:
        self._check_open()
        if self._current is None:
            raise ValueError(f"{command.kind.name} issued before begin")
        self._current.append(command)

    def _finish(self) -> None:
        if self._current:
            self._subpaths.append(Subpath(commands=tuple(self._current)))
        self._current = None

    def _check_open(self) -> None:
        if self._built:
            raise RuntimeError("Path already built")
