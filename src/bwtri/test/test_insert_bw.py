import random
import unittest

from bwtri.delaunay import triangulate, validate
from bwtri.delaunay.insert_bw import as_points, super_triangle, \
    cavity_boundary, BowyerWatsonInserter
from bwtri.delaunay.tds import Point, Edge, Triangle, Triangulation
from bwtri.delaunay.check import edge_multiplicity, delaunay_violations
from bwtri.delaunay.helpers import random_circle_vertices, SAMPLE_POINTS
from bwtri.delaunay.errors import InvalidInput, DegenerateInsertion, \
    ResourceExhausted


def as_tuples(dt):
    return [tuple((v.x, v.y) for v in t.vertices) for t in dt.triangles]


def circle_points(n=60, seed=1):
    random.seed(seed)
    return random_circle_vertices(n)


class TestSuperTriangle(unittest.TestCase):

    def test_encloses_points(self):
        pts = as_points([(0, 0), (10, 2), (3, -4), (7, 7)])
        large = super_triangle(pts)
        assert large.is_ccw
        for pt in pts:
            for edge in large.edges():
                u, v = edge.segment
                assert Triangle(u, v, pt).is_ccw

    def test_corners(self):
        large = super_triangle(as_points([(0, 0), (1, 1)]))
        self.assertEqual(large.vertices,
                         (Point(-19.5, -0.5), Point(20.5, -0.5),
                          Point(0.5, 20.5)))

    def test_single_point_not_degenerate(self):
        large = super_triangle(as_points([(3, 3)]))
        assert large.area > 0


class TestCavityBoundary(unittest.TestCase):

    def test_shared_edges_removed(self):
        a, b, c, d = Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)
        edges = list(Triangle(a, b, c).edges()) + list(Triangle(a, c, d).edges())
        boundary = cavity_boundary(edges)
        self.assertEqual(len(boundary), 4)
        assert Edge(a, c) not in boundary
        self.assertEqual(boundary, [Edge(a, b), Edge(b, c),
                                    Edge(c, d), Edge(d, a)])

    def test_single_triangle(self):
        t = Triangle(Point(0, 0), Point(1, 0), Point(0, 1))
        self.assertEqual(cavity_boundary(list(t.edges())), list(t.edges()))


class TestScenarios(unittest.TestCase):

    def test_one_triangle(self):
        pts = [(0, 0), (1, 0), (0, 1)]
        dt = triangulate(pts)
        self.assertEqual(len(dt.triangles), 1)
        self.assertEqual(set(dt.triangles[0].vertices),
                         set(Point(*pt) for pt in pts))
        self.assertEqual(dt.degenerate, [])

    def test_square(self):
        pts = [(0, 0), (1, 0), (1, 1), (0, 1)]
        dt = triangulate(pts)
        self.assertEqual(len(dt.triangles), 2)
        self.assertAlmostEqual(sum(t.area for t in dt.triangles), 1.0)
        counts = edge_multiplicity(dt.triangles)
        shared = [edge for edge, count in counts.items() if count == 2]
        self.assertEqual(len(shared), 1)
        assert shared[0] in (Edge(Point(0, 0), Point(1, 1)),
                             Edge(Point(1, 0), Point(0, 1)))

    def test_collinear(self):
        dt = triangulate([(0, 0), (1, 0), (2, 0)])
        self.assertEqual(dt.triangles, [])

    def test_empty(self):
        self.assertRaises(InvalidInput, triangulate, [])

    def test_single_point(self):
        dt = triangulate([(5, 5)])
        self.assertEqual(dt.triangles, [])
        self.assertEqual(dt.vertices, [Point(5, 5)])


class TestInput(unittest.TestCase):

    def test_non_finite(self):
        self.assertRaises(InvalidInput, triangulate, [(0, 0), (float("nan"), 1)])
        self.assertRaises(InvalidInput, triangulate, [(0, 0), (1, float("inf"))])

    def test_not_a_coordinate_pair(self):
        self.assertRaises(InvalidInput, triangulate, [(0, 0), (1,)])
        self.assertRaises(InvalidInput, triangulate, [(0, 0), ("a", 1)])

    def test_points_accepted(self):
        dt = triangulate([Point(0, 0), Point(1, 0), (0, 1)])
        self.assertEqual(len(dt.triangles), 1)

    def test_max_points(self):
        pts = [(0, 0), (1, 0), (0, 1)]
        self.assertRaises(ResourceExhausted, triangulate, pts, max_points=2)
        self.assertEqual(len(triangulate(pts, max_points=3).triangles), 1)

    def test_duplicate_point_recorded(self):
        dt = triangulate([(0, 0), (1, 0), (0, 1), (0, 0)])
        self.assertEqual(len(dt.triangles), 1)
        self.assertEqual(dt.degenerate, [Point(0, 0)])

    def test_duplicate_point_strict(self):
        with self.assertRaises(DegenerateInsertion) as ctx:
            triangulate([(0, 0), (1, 0), (0, 1), (0, 0)], strict=True)
        self.assertEqual(ctx.exception.point, Point(0, 0))


class TestProperties(unittest.TestCase):

    def test_vertices_are_input_points(self):
        pts = circle_points()
        dt = triangulate(pts)
        inputs = set(Point(*pt) for pt in pts)
        for t in dt.triangles:
            for v in t.vertices:
                assert v in inputs
                assert v not in dt.super_vertices

    def test_delaunay(self):
        pts = circle_points()
        dt = triangulate(pts)
        assert len(dt.triangles) > 0
        self.assertEqual(delaunay_violations(dt.triangles, dt.vertices), [])

    def test_edges_shared_once_or_twice(self):
        dt = triangulate(circle_points())
        for edge, count in edge_multiplicity(dt.triangles).items():
            assert count in (1, 2), (edge, count)

    def test_validate(self):
        dt = triangulate(circle_points(100, seed=7))
        report = validate(dt)
        assert report["valid"], report
        self.assertEqual(report["foreign_vertices"], [])

    def test_triangles_ccw(self):
        dt = triangulate(circle_points())
        for t in dt.triangles:
            assert t.is_ccw

    def test_idempotent(self):
        pts = circle_points()
        self.assertEqual(as_tuples(triangulate(pts)), as_tuples(triangulate(pts)))

    def test_winding_variants_agree(self):
        pts = circle_points(80, seed=3)
        self.assertEqual(as_tuples(triangulate(pts)),
                         as_tuples(triangulate(pts, normalize_winding=True)))

    def test_sample_points(self):
        dt = triangulate(SAMPLE_POINTS)
        assert len(dt.triangles) > 0
        inputs = set(Point(*pt) for pt in SAMPLE_POINTS)
        for t in dt.triangles:
            assert t.area > 0
            assert set(t.vertices) <= inputs
        self.assertEqual(as_tuples(dt), as_tuples(triangulate(SAMPLE_POINTS)))


class TestInserter(unittest.TestCase):

    def test_append_counts_triangles(self):
        pts = as_points([(0, 0), (1, 0), (0, 1)])
        dt = Triangulation()
        inserter = BowyerWatsonInserter(dt)
        inserter.initialize(pts)
        self.assertEqual(len(dt.triangles), 1)
        # first point splits the super triangle in three
        self.assertEqual(inserter.append(pts[0]), 3)
        self.assertEqual(len(dt.triangles), 3)
        self.assertEqual(dt.tests, 1)

    def test_prune_removes_super_vertices(self):
        pts = as_points([(0, 0), (1, 0), (0, 1)])
        dt = Triangulation()
        inserter = BowyerWatsonInserter(dt)
        inserter.insert(pts)
        assert any(t.has_vertex(v) for t in dt.triangles
                   for v in dt.super_vertices)
        inserter.prune()
        self.assertEqual(len(dt.triangles), 1)
        self.assertEqual(dt.pruned_degenerate, 0)

    def test_prune_removes_zero_area(self):
        pts = as_points([(0, 0), (1, 0), (0, 1), (2, 0)])
        dt = Triangulation()
        inserter = BowyerWatsonInserter(dt)
        inserter.insert(pts[:3])
        flat = Triangle(pts[0], pts[1], pts[3])
        dt.triangles.append(flat)
        inserter.prune()
        assert flat not in dt.triangles
        self.assertEqual(dt.pruned_degenerate, 1)
        self.assertEqual(len(dt.triangles), 1)
        self.assertEqual(dt.triangles[0].area, 0.5)


if __name__ == "__main__":
    unittest.main()
