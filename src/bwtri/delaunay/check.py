"""Checks on a finished triangulation.
"""
import logging
from collections import Counter

from bwtri.delaunay.iter import EdgeIterator, VertexIterator
from bwtri.delaunay.preds import EPS, in_circumcircle_ccw


def edge_multiplicity(triangles):
    """Returns for every edge how many triangles use it"""
    return Counter(edge for edge, _ in EdgeIterator(triangles))


def delaunay_violations(triangles, points, eps=EPS):
    """Returns (triangle, point) pairs for which point is not a vertex of
    triangle but lies inside its circumcircle.

    Checks all triangles against all points, so quadratic in size.
    """
    violations = []
    for triangle in triangles:
        for pt in points:
            if triangle.has_vertex(pt):
                continue
            if in_circumcircle_ccw(pt, triangle, eps):
                violations.append((triangle, pt))
    return violations


def validate(triangulation, eps=EPS):
    """Quick check on correctness of a triangulation:

      - all vertices of the triangles are input points;
      - an edge is used by 1 (boundary) or 2 (interior) triangles;
      - no input point lies inside the circumcircle of a triangle.

    Returns a dictionary with the findings.
    """
    inputs = set(triangulation.vertices)
    foreign = [v for v in VertexIterator(triangulation.triangles)
               if v not in inputs]
    bad_edges = [(edge, count) for edge, count in
                 edge_multiplicity(triangulation.triangles).items()
                 if count not in (1, 2)]
    violations = delaunay_violations(triangulation.triangles,
                                     triangulation.vertices, eps)
    report = {
        "foreign_vertices": foreign,
        "bad_edges": bad_edges,
        "violations": violations,
        "degenerate": list(triangulation.degenerate),
        "valid": not (foreign or bad_edges or violations),
    }
    logging.debug("validation: {} foreign vertices, {} bad edges, "
                  "{} violations".format(len(foreign), len(bad_edges),
                                         len(violations)))
    return report
