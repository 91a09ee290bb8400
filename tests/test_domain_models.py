"""Tests for domain models to verify they work correctly."""

import pytest

from textrude.domain import (
    MAX_VERTEX_COUNT,
    CommandType,
    Contour,
    Mesh2D,
    Orientation,
    Path,
    PathCommand,
    Point,
    Subpath,
    Triangle3D,
    WindingDirection,
)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(100.0, 200.0).to_tuple() == (100.0, 200.0)

    def test_point_translated(self) -> None:
        """Translation returns a new point."""
        p = Point(1.0, 2.0)
        q = p.translated(3.0, -1.0)
        assert q == Point(4.0, 1.0)
        assert p == Point(1.0, 2.0)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Equal points collapse in a set."""
        assert len({Point(1.0, 2.0), Point(1.0, 2.0)}) == 1


class TestContour:
    """Tests for Contour class."""

    def test_signed_area_counterclockwise(self) -> None:
        """Test signed area for counter-clockwise square."""
        contour = Contour(points=[Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)])
        assert contour.signed_area() == pytest.approx(10000.0)
        assert contour.direction == WindingDirection.COUNTER_CLOCKWISE

    def test_signed_area_clockwise(self) -> None:
        """Test signed area for clockwise square."""
        contour = Contour(points=[Point(0, 0), Point(0, 100), Point(100, 100), Point(100, 0)])
        assert contour.signed_area() == pytest.approx(-10000.0)
        assert contour.direction == WindingDirection.CLOCKWISE

    def test_degenerate_contours(self) -> None:
        """Two-point and collinear rings have no area."""
        assert Contour(points=[Point(0, 0), Point(1, 1)]).is_degenerate()
        collinear = Contour(points=[Point(0, 0), Point(1, 1), Point(2, 2)])
        assert collinear.is_degenerate()
        assert collinear.direction is None

    def test_figure_eight_is_not_degenerate(self) -> None:
        """Opposite lobes cancel in area but still enclose a region."""
        bowtie = Contour(points=[Point(0, 0), Point(2, 2), Point(2, 0), Point(0, 2)])
        assert bowtie.signed_area() == pytest.approx(0.0)
        assert not bowtie.is_degenerate()

    def test_bounding_box(self) -> None:
        """Bounding box is (min_x, min_y, max_x, max_y)."""
        contour = Contour(points=[Point(-1, 2), Point(3, -4), Point(0, 5)])
        assert contour.bounding_box() == (-1, -4, 3, 5)

    def test_coords(self) -> None:
        """Coordinates are plain tuples without a closing point."""
        contour = Contour(points=[Point(0, 0), Point(1, 0), Point(0, 1)])
        assert contour.coords() == [(0, 0), (1, 0), (0, 1)]


class TestPath:
    """Tests for path types."""

    def test_command_arity_enforced(self) -> None:
        """Commands reject the wrong number of points."""
        with pytest.raises(ValueError, match="QUADRATIC takes 2"):
            PathCommand(CommandType.QUADRATIC, (Point(0, 0),))
        with pytest.raises(ValueError):
            PathCommand(CommandType.CLOSE, (Point(0, 0),))

    def test_command_end_point(self) -> None:
        """End point is the last point of the command."""
        cubic = PathCommand(CommandType.CUBIC, (Point(0, 1), Point(1, 1), Point(1, 0)))
        assert cubic.end_point == Point(1, 0)
        assert PathCommand(CommandType.CLOSE).end_point is None

    def test_subpath_properties(self) -> None:
        """Subpath exposes its start and closed state."""
        subpath = Subpath(
            commands=(
                PathCommand(CommandType.BEGIN, (Point(1, 2),)),
                PathCommand(CommandType.LINE, (Point(3, 4),)),
                PathCommand(CommandType.CLOSE),
            )
        )
        assert subpath.start == Point(1, 2)
        assert subpath.is_closed
        assert len(subpath) == 3

    def test_empty_path(self) -> None:
        """Default path is empty."""
        path = Path()
        assert path.is_empty()
        assert len(path) == 0
        assert list(path.iter_points()) == []


class TestMesh2D:
    """Tests for Mesh2D and Triangle3D."""

    def test_triangles(self) -> None:
        """Indices are grouped into triples."""
        mesh = Mesh2D(
            vertices=[Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)],
            indices=[0, 1, 2, 0, 2, 3],
        )
        assert mesh.triangle_count == 2
        assert mesh.triangles() == [(0, 1, 2), (0, 2, 3)]
        assert not mesh.is_empty()

    def test_rejects_partial_triangle(self) -> None:
        """Index count must be a multiple of three."""
        with pytest.raises(ValueError, match="multiple of 3"):
            Mesh2D(vertices=[Point(0, 0), Point(1, 0)], indices=[0, 1])

    def test_rejects_out_of_range_index(self) -> None:
        """Every index must address an existing vertex."""
        with pytest.raises(ValueError, match="out of range"):
            Mesh2D(vertices=[Point(0, 0), Point(1, 0), Point(0, 1)], indices=[0, 1, 3])

    def test_empty_mesh(self) -> None:
        """Default mesh is empty."""
        assert Mesh2D().is_empty()

    def test_vertex_limit_is_16_bit(self) -> None:
        """Indices 0..65535 are addressable."""
        assert MAX_VERTEX_COUNT == 65536

    def test_triangle3d_immutable(self) -> None:
        """Triangles are frozen."""
        tri = Triangle3D(normal=(0.0, 0.0, 1.0), vertices=((0, 0, 0), (1, 0, 0), (0, 1, 0)))
        with pytest.raises(AttributeError):
            tri.normal = (1.0, 0.0, 0.0)  # type: ignore

    def test_orientation_values(self) -> None:
        """Orientation parses from its CLI spelling."""
        assert Orientation("flat") is Orientation.FLAT
        assert Orientation("front") is Orientation.FRONT
