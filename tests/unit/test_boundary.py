"""Tests for boundary edge detection."""

from textrude.core.boundary import boundary_edges, edge_census


class TestBoundaryEdges:
    """Tests for boundary_edges and edge_census."""

    def test_filters_shared_edges(self):
        """Edge shared by two triangles is dropped."""
        edges = set(boundary_edges([0, 1, 2, 2, 1, 3]))
        assert edges == {(0, 1), (2, 0), (3, 2), (1, 3)}

    def test_square_split_into_two_triangles(self):
        """A CCW square yields its four sides in CCW order."""
        # 3---2
        # | / |
        # 0---1
        edges = boundary_edges([0, 1, 2, 0, 2, 3])
        assert sorted(edges) == [(0, 1), (1, 2), (2, 3), (3, 0)]

    def test_fan_polygon_outer_contour_once(self):
        """A triangle fan over a hexagon returns each outer edge exactly once."""
        n = 6
        indices = []
        for i in range(1, n - 1):
            indices.extend((0, i, i + 1))

        edges = boundary_edges(indices)
        expected = [(i, (i + 1) % n) for i in range(n)]
        assert sorted(edges) == sorted(expected)
        assert len(edges) == len(set(edges))

    def test_orientation_from_contributing_triangle(self):
        """Edges keep the direction of the triangle that used them."""
        edges = boundary_edges([2, 1, 0])
        assert set(edges) == {(2, 1), (1, 0), (0, 2)}

    def test_ring_with_hole(self):
        """Outer contour and hole are both boundary."""
        # Outer square 0..3, inner square 4..7, annulus triangulated
        # as four trapezoids of two triangles each.
        indices = []
        for k in range(4):
            o0, o1 = k, (k + 1) % 4
            i0, i1 = 4 + k, 4 + (k + 1) % 4
            indices.extend((o0, o1, i1))
            indices.extend((o0, i1, i0))

        edges = set(boundary_edges(indices))
        outer = {(k, (k + 1) % 4) for k in range(4)}
        inner = {(4 + (k + 1) % 4, 4 + k) for k in range(4)}
        assert edges == outer | inner

    def test_empty_index_list(self):
        """No triangles, no edges."""
        assert boundary_edges([]) == []

    def test_census_counts(self):
        """Census classifies interior and non-manifold edges."""
        # Three triangles sharing edge (0, 1)
        census = edge_census([0, 1, 2, 1, 0, 3, 0, 1, 4])
        assert census.non_manifold_count == 1
        assert (0, 1) not in census.boundary
        assert (1, 0) not in census.boundary
        assert len(census.boundary) == 6

        square = edge_census([0, 1, 2, 0, 2, 3])
        assert square.interior_count == 1
        assert square.non_manifold_count == 0
