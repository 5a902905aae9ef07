"""Exceptions raised by the triangulation and export code
"""


class TriangulationError(Exception):
    """Base class for all errors of this package"""


class InvalidInput(TriangulationError, ValueError):
    """The point set given can not be triangulated
    (empty, non-finite coordinates or unreadable)
    """


class DegenerateInsertion(TriangulationError):
    """A point was inserted, but no triangle had it inside its circumcircle,
    so no new triangles were made for it.

    Only raised when the inserter runs in strict mode, otherwise
    the point is recorded on the triangulation.
    """

    def __init__(self, point):
        super(DegenerateInsertion, self).__init__(
            "Insertion of {} did not match any circumcircle".format(point))
        self.point = point


class ResourceExhausted(TriangulationError):
    """The input is larger than the configured limit"""


class ExportIOError(TriangulationError, IOError):
    """Mesh could not be written to its destination.

    Filled in like the OSError that caused it (errno, strerror, filename),
    so it can be handled as any other I/O error.
    """

    def __init__(self, filename, reason):
        super(ExportIOError, self).__init__(
            getattr(reason, "errno", None),
            getattr(reason, "strerror", None) or str(reason),
            filename)
