"""Triangle data structure: points, edges, triangles and the triangulation
that holds them.
"""
from bwtri.delaunay.preds import orient


# -- helper functions
def box(points):
    """Obtain a tight fitting axis-aligned box around point set"""
    xmin = min(points, key=lambda x: x[0])[0]
    ymin = min(points, key=lambda x: x[1])[1]
    xmax = max(points, key=lambda x: x[0])[0]
    ymax = max(points, key=lambda x: x[1])[1]
    return (xmin, ymin), (xmax, ymax)


class Point(object):
    """A point in the plane.

    Points compare by exact coordinate equality (no tolerance), and are
    ordered lexicographically (first x, then y), so they can be used
    as keys in a dict or be sorted.
    """
    __slots__ = ('x', 'y')

    def __init__(self, x, y):
        self.x = float(x)
        self.y = float(y)

    def __str__(self):
        return "{0} {1}".format(self.x, self.y)

    def __repr__(self):
        return "Point({0!r}, {1!r})".format(self.x, self.y)

    def __getitem__(self, i):
        if i == 0:
            return self.x
        elif i == 1:
            return self.y
        else:
            raise IndexError("No such ordinate: {}".format(i))

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y) < (other.x, other.y)

    def __le__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y) <= (other.x, other.y)

    def __gt__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y) > (other.x, other.y)

    def __ge__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y) >= (other.x, other.y)

    def __hash__(self):
        return hash((self.x, self.y))


class Edge(object):
    """An undirected edge between two points.

    Edge(p, q) and Edge(q, p) are equal.
    """
    __slots__ = ('p1', 'p2')

    def __init__(self, p1, p2):
        self.p1 = p1
        self.p2 = p2

    def __str__(self):
        return "LINESTRING({0}, {1})".format(self.p1, self.p2)

    def __repr__(self):
        return "Edge({0!r}, {1!r})".format(self.p1, self.p2)

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.p1 == other.p1 and self.p2 == other.p2) or \
            (self.p1 == other.p2 and self.p2 == other.p1)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(frozenset((self.p1, self.p2)))

    @property
    def segment(self):
        return (self.p1, self.p2)


class Triangle(object):
    """Triangle with vertices in slots a, b and c.

    Two triangles are only equal when they have the same vertices
    in the same slots, a rotated or mirrored copy of a triangle is a
    different triangle.
    """

    __slots__ = ('a', 'b', 'c')

    def __init__(self, a, b, c):
        self.a = a
        self.b = b
        self.c = c

    def __str__(self):
        """Conversion to WKT string"""
        return "POLYGON(({0}, {1}, {2}, {0}))".format(self.a, self.b, self.c)

    def __repr__(self):
        return "Triangle({0!r}, {1!r}, {2!r})".format(self.a, self.b, self.c)

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented
        return self.a == other.a and self.b == other.b and self.c == other.c

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.a, self.b, self.c))

    @property
    def vertices(self):
        return (self.a, self.b, self.c)

    def edges(self):
        """The three sides of the triangle, as ab, bc, ca"""
        return (Edge(self.a, self.b), Edge(self.b, self.c), Edge(self.c, self.a))

    def has_vertex(self, pt):
        return self.a == pt or self.b == pt or self.c == pt

    @property
    def orientation(self):
        """Twice the signed area (positive when ccw)"""
        return orient(self.a, self.b, self.c)

    @property
    def area(self):
        return abs(self.orientation) * 0.5

    @property
    def is_ccw(self):
        return self.orientation > 0.


class Triangulation(object):
    """Triangulation data structure

    Holds the (input) vertices and the triangles made from them, together
    with some bookkeeping on how the triangulation was built.
    """

    def __init__(self):
        self.vertices = []
        self.triangles = []
        self.super_vertices = ()
        # points for which the insertion did not create new triangles
        self.degenerate = []
        # zero area triangles removed when pruning
        self.pruned_degenerate = 0
        # number of circumcircle tests carried out
        self.tests = 0

    def __len__(self):
        return len(self.triangles)

    def __iter__(self):
        return iter(self.triangles)
