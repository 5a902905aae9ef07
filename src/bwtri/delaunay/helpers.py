"""Point sets for triangulation: generated, read from file or built-in.
"""
from math import sqrt, pi, cos, sin
from random import random

from bwtri.delaunay.errors import InvalidInput
# ------------------------------------------------------------------------------
# Generate randomized point sets (for testing purposes)
#


def random_circle_vertices(n=10, cx=0, cy=0):
    """Returns a list with n random vertices in a circle

    Method according to:

    http://www.anderswallin.net/2009/05/uniform-random-points-in-a-circle-using-polar-coordinates/
    """
    vertices = []
    for _ in range(n):
        r = sqrt(random())
        t = 2 * pi * random()
        x = r * cos(t)
        y = r * sin(t)
        vertices.append((x+cx, y+cy))
    vertices = list(set(vertices))
    vertices.sort()
    return vertices


def read_points(fh):
    """Read points from a text file, one "x y" pair per line.

    Blank lines and lines starting with '#' are skipped, values may also
    be separated by a comma.
    """
    points = []
    for lineno, line in enumerate(fh, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        fields = line.replace(",", " ").split()
        if len(fields) != 2:
            raise InvalidInput(
                "line {}: expected 2 coordinates, found {}".format(
                    lineno, len(fields)))
        try:
            points.append((float(fields[0]), float(fields[1])))
        except ValueError as err:
            raise InvalidInput("line {}: {}".format(lineno, err)) from err
    return points


# Outline and chord line of a symmetric airfoil-like shape (chord 100)
SAMPLE_POINTS = [
    (0.0, 0.0), (0.7, 1.4), (2.7, 2.7), (6.0, 3.8),
    (10.5, 4.8), (16.1, 5.5), (22.7, 5.9), (29.9, 6.0),
    (37.7, 5.9), (45.9, 5.5), (54.1, 5.0), (62.3, 4.4),
    (70.1, 3.6), (77.3, 2.9), (83.9, 2.1), (89.5, 1.4),
    (94.0, 0.8), (97.3, 0.4), (99.3, 0.1), (0.7, -1.4),
    (2.7, -2.7), (6.0, -3.8), (10.5, -4.8), (16.1, -5.5),
    (22.7, -5.9), (29.9, -6.0), (37.7, -5.9), (45.9, -5.5),
    (54.1, -5.0), (62.3, -4.4), (70.1, -3.6), (77.3, -2.9),
    (83.9, -2.1), (89.5, -1.4), (94.0, -0.8), (97.3, -0.4),
    (99.3, -0.1), (0.7, 0.0), (2.7, 0.0), (6.0, 0.0),
    (10.5, 0.0), (16.1, 0.0), (22.7, 0.0), (29.9, 0.0),
    (37.7, 0.0), (45.9, 0.0), (54.1, 0.0), (62.3, 0.0),
    (70.1, 0.0), (77.3, 0.0), (83.9, 0.0), (89.5, 0.0),
    (94.0, 0.0), (97.3, 0.0), (99.3, 0.0), (100.0, 0.0),
]
