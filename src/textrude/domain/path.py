"""Outline path types.

A Path is the combined vector outline of a laid-out string: an ordered
sequence of subpaths, each a sequence of absolute drawing commands in
layout space. Paths are built incrementally by
``textrude.core.path_builder.PathBuilder`` and are immutable afterwards.
"""

from dataclasses import dataclass
from enum import Enum, auto

from textrude.domain.contour import Point


class CommandType(Enum):
    """Drawing command kinds."""

    BEGIN = auto()
    LINE = auto()
    QUADRATIC = auto()
    CUBIC = auto()
    CLOSE = auto()


# Number of points carried by each command kind
COMMAND_ARITY: dict[CommandType, int] = {
    CommandType.BEGIN: 1,
    CommandType.LINE: 1,
    CommandType.QUADRATIC: 2,
    CommandType.CUBIC: 3,
    CommandType.CLOSE: 0,
}


@dataclass(frozen=True, slots=True)
class PathCommand:
    """A single drawing command.

    Attributes:
        kind: Command type
        points: Control points followed by the end point, in absolute
            layout coordinates (empty for CLOSE)
    """

    kind: CommandType
    points: tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        expected = COMMAND_ARITY[self.kind]
        if len(self.points) != expected:
            raise ValueError(
                f"{self.kind.name} takes {expected} point(s), got {len(self.points)}"
            )

    @property
    def end_point(self) -> Point | None:
        """The point the pen rests on after this command."""
        return self.points[-1] if self.points else None


@dataclass(frozen=True)
class Subpath:
    """One contour of the outline.

    The first command is always BEGIN. A subpath whose last command is
    CLOSE is closed; open subpaths are still filled as if closed.

    Attributes:
        commands: Drawing commands of this contour
    """

    commands: tuple[PathCommand, ...]

    @property
    def start(self) -> Point:
        """Starting point of the subpath."""
        return self.commands[0].points[0]

    @property
    def is_closed(self) -> bool:
        """Whether the subpath ends with an explicit close."""
        return self.commands[-1].kind == CommandType.CLOSE

    def __len__(self) -> int:
        return len(self.commands)


@dataclass(frozen=True)
class Path:
    """Immutable combined outline made of subpaths.

    Attributes:
        subpaths: Contours in emission order
    """

    subpaths: tuple[Subpath, ...] = ()

    def is_empty(self) -> bool:
        """Check if the path contains no contours.

        Returns:
            True if there are no subpaths
        """
        return len(self.subpaths) == 0

    def iter_points(self):
        """Yield every point of every command in order."""
        for subpath in self.subpaths:
            for command in subpath.commands:
                yield from command.points

    def __len__(self) -> int:
        return len(self.subpaths)
