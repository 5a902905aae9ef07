"""Incremental construction of a Delaunay triangulation
with the Bowyer-Watson algorithm.

    A. Bowyer, Computing Dirichlet tessellations,
    The Computer Journal 24(2), 1981, pp. 162-166.

    D. F. Watson, Computing the n-dimensional Delaunay tessellation
    with application to Voronoi polytopes,
    The Computer Journal 24(2), 1981, pp. 167-172.
"""

import logging
import time
from datetime import datetime
from math import isfinite

from bwtri.delaunay.tds import box, Point, Triangle, Triangulation
from bwtri.delaunay.preds import EPS, in_circumcircle, in_circumcircle_ccw
from bwtri.delaunay.errors import InvalidInput, DegenerateInsertion, \
    ResourceExhausted

# offset of the super triangle corners, in multiples of the largest axis
# of the bounding box of the points
SUPER_FACTOR = 20.0


def as_points(pts):
    """Converts a sequence of 2-tuples (or Points) to a list of Points.

    Raises InvalidInput if there are no points or any of the
    coordinates is not a finite number.
    """
    result = []
    for idx, pt in enumerate(pts):
        try:
            x, y = float(pt[0]), float(pt[1])
        except (TypeError, ValueError, IndexError) as err:
            raise InvalidInput(
                "Point {} is not a coordinate pair: {!r}".format(idx, pt)) \
                from err
        if not (isfinite(x) and isfinite(y)):
            raise InvalidInput(
                "Point {} has non-finite coordinates: {!r}".format(idx, pt))
        result.append(Point(x, y))
    if not result:
        raise InvalidInput("Can not triangulate empty point set")
    return result


def super_triangle(points):
    """Returns a (ccw) triangle that is large enough to have all points
    well inside.
    """
    (xmin, ymin), (xmax, ymax) = box(points)
    width = xmax - xmin
    height = ymax - ymin
    delta = max(width, height)
    if delta == 0:
        delta = 1.
    midx = 0.5 * (xmin + xmax)
    midy = 0.5 * (ymin + ymax)
    return Triangle(Point(midx - SUPER_FACTOR * delta, midy - delta),
                    Point(midx + SUPER_FACTOR * delta, midy - delta),
                    Point(midx, midy + SUPER_FACTOR * delta))


def cavity_boundary(edges):
    """Returns the edges that occur exactly once in the list.

    Every edge is compared with every other edge, so this is quadratic in
    the number of edges. The list only holds the edges of the triangles
    removed for one insertion, so it stays short for well distributed
    points.
    """
    unique = []
    for i, edge in enumerate(edges):
        for j, other in enumerate(edges):
            if i != j and edge == other:
                break
        else:
            unique.append(edge)
    return unique


class BowyerWatsonInserter(object):
    """Class to insert points into a Triangulation.

    Every point that is inserted removes the triangles that have the
    point inside their circumcircle, the hole that is left is
    re-triangulated by connecting its boundary to the new point.
    """

    __slots__ = ('triangulation', 'strict', 'eps', '_incircle')

    def __init__(self, triangulation, normalize_winding=False, strict=False,
                 eps=EPS):
        self.triangulation = triangulation
        self.strict = strict
        self.eps = eps
        if normalize_winding:
            self._incircle = in_circumcircle_ccw
        else:
            self._incircle = in_circumcircle

    def insert(self, points):
        """Insert a list of points into the triangulation.
        """
        self.initialize(points)
        for j, pt in enumerate(points):
            self.append(pt)
            if (j % 10000) == 0:
                logging.debug(" " + str(datetime.now()) + " " + str(j))

    def initialize(self, points):
        """Initialize large triangle around the points
        """
        large = super_triangle(points)
        logging.debug("super triangle {}".format(large))
        self.triangulation.super_vertices = large.vertices
        self.triangulation.triangles.append(large)

    def append(self, pt):
        """Appends one point to the triangulation.

        Returns the number of triangles that were made for this point.
        This method assumes that the triangulation is initialized
        and the point lies inside the super triangle.
        """
        dt = self.triangulation
        dt.vertices.append(pt)
        bad = []
        polygon = []
        for triangle in dt.triangles:
            dt.tests += 1
            if self._incircle(pt, triangle, self.eps):
                bad.append(triangle)
                polygon.extend(triangle.edges())
        if not bad:
            logging.warning("Point {} is not inside any circumcircle, "
                            "no triangles made".format(pt))
            dt.degenerate.append(pt)
            if self.strict:
                raise DegenerateInsertion(pt)
            return 0
        dt.triangles = [t for t in dt.triangles if t not in bad]
        boundary = cavity_boundary(polygon)
        for edge in boundary:
            dt.triangles.append(Triangle(edge.p1, edge.p2, pt))
        return len(boundary)

    def prune(self):
        """Removes the triangles connected to the super triangle, and
        the triangles that have no area.
        """
        dt = self.triangulation
        corners = dt.super_vertices
        keep = []
        for t in dt.triangles:
            if any(t.has_vertex(corner) for corner in corners):
                continue
            if t.orientation == 0:
                dt.pruned_degenerate += 1
                continue
            keep.append(t)
        if dt.pruned_degenerate:
            logging.warning("{} zero area triangles removed".format(
                dt.pruned_degenerate))
        dt.triangles = keep


def triangulate(pts, normalize_winding=False, strict=False, max_points=None,
                eps=EPS):
    """Triangulate a set of points

    Points are inserted in the order given. Returns a Triangulation
    with the Delaunay triangles of the point set.
    """
    points = as_points(pts)
    if max_points is not None and len(points) > max_points:
        raise ResourceExhausted(
            "{} points given, at most {} allowed".format(
                len(points), max_points))

    start = time.perf_counter()
    dt = Triangulation()
    incremental = BowyerWatsonInserter(dt,
                                       normalize_winding=normalize_winding,
                                       strict=strict,
                                       eps=eps)
    incremental.insert(points)
    incremental.prune()
    end = time.perf_counter()

    logging.debug("Triangulating took: " + str(end - start) + " secs")
    logging.debug("{} triangles".format(len(dt.triangles)))
    logging.debug("{} vertices".format(len(dt.vertices)))
    logging.debug("{} circumcircle tests".format(dt.tests))
    logging.debug(str(float(dt.tests) / len(dt.vertices)) +
                  " tests per insert")
    if dt.degenerate:
        logging.debug("{} degenerate insertions".format(len(dt.degenerate)))
    return dt
