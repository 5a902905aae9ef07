"""Geometric predicates.

Orientation and the circumcircle determinant come from the robust
(adaptive precision) orient2d and incircle of the geompreds package.
The circumcircle test compares the determinant with an absolute
tolerance, as used by the insertion loop.
"""

from geompreds import orient2d, incircle

# absolute tolerance for the circumcircle determinant
EPS = 1e-9


def orient(pa, pb, pc):
    """Direction from pa to pc, via pb, where returned value is as follows:

    left:     + [ = ccw ]
    straight: 0.
    right:    - [ = cw ]

    returns twice signed area under triangle pa, pb, pc
    """
    return orient2d((pa[0], pa[1]), (pb[0], pb[1]), (pc[0], pc[1]))


def circumcircle_det(pa, pb, pc, pd):
    """Position of pd relative to the circle through pa, pb and pc.

    Positive when pd lies inside the circle and pa, pb, pc are ccw,
    for a cw triangle the sign flips.
    """
    return incircle((pa[0], pa[1]), (pb[0], pb[1]), (pc[0], pc[1]),
                    (pd[0], pd[1]))


def in_circumcircle(pt, triangle, eps=EPS):
    """Is pt strictly inside the circumcircle of triangle?

    The winding of the triangle is taken as is: the answer is only
    meaningful for ccw triangles.
    """
    return circumcircle_det(triangle.a, triangle.b, triangle.c, pt) > eps


def in_circumcircle_ccw(pt, triangle, eps=EPS):
    """Is pt strictly inside the circumcircle of triangle?

    Same as in_circumcircle, but a cw triangle is tested as if it
    were ccw (its b and c swapped). The triangle itself is not changed.
    """
    a, b, c = triangle.a, triangle.b, triangle.c
    if orient(a, b, c) < 0:
        b, c = c, b
    return circumcircle_det(a, b, c, pt) > eps
