"""Output of triangles and points to text files
"""
import logging
from io import StringIO

from bwtri.delaunay.errors import ExportIOError

# cell type identifier of a linear triangle in VTK
VTK_TRIANGLE = 5


class PointTable(object):
    """Helper class to number the points of a set of triangles.
    De-dups duplicate points, the first time a point is seen decides its
    index.
    """

    def __init__(self):
        self.points = []
        self._points_idx = {}

    def __len__(self):
        return len(self.points)

    def add_point(self, point):
        """Add a point, returns its index.
        """
        if point not in self._points_idx:
            idx = len(self.points)
            self._points_idx[point] = idx
            self.points.append(point)
        else:
            idx = self._points_idx[point]
        return idx


def mesh_tables(triangles):
    """Returns the points and cells (triples of indices into the points)
    for a list of triangles.
    """
    table = PointTable()
    cells = []
    for t in triangles:
        cells.append(tuple(table.add_point(v) for v in t.vertices))
    return table.points, cells


def output_vtk(triangles, fh, title="Delaunay Triangulation"):
    """Output list of triangles as legacy ASCII VTK unstructured grid"""
    points, cells = mesh_tables(triangles)
    fh.write("# vtk DataFile Version 3.0\n")
    fh.write("{}\n".format(title))
    fh.write("ASCII\n")
    fh.write("DATASET UNSTRUCTURED_GRID\n")
    fh.write("POINTS {} float\n".format(len(points)))
    for pt in points:
        fh.write("{0} {1} 0.0\n".format(pt[0], pt[1]))
    fh.write("CELLS {0} {1}\n".format(len(cells), 4 * len(cells)))
    for cell in cells:
        fh.write("3 {0[0]} {0[1]} {0[2]}\n".format(cell))
    fh.write("CELL_TYPES {}\n".format(len(cells)))
    for _ in cells:
        fh.write("{}\n".format(VTK_TRIANGLE))


def write_vtk(triangles, filename, title="Delaunay Triangulation"):
    """Write triangles to a VTK file.

    The file content is prepared before the file is opened, if opening or
    writing fails ExportIOError is raised.
    """
    buf = StringIO()
    output_vtk(triangles, buf, title)
    try:
        with open(filename, "w") as fh:
            fh.write(buf.getvalue())
    except OSError as err:
        raise ExportIOError(filename, err) from err
    logging.debug("{} triangles written to {}".format(len(triangles),
                                                      filename))


def output_vertices(V, fh):
    """Output list of vertices as WKT to text file (for QGIS)"""
    fh.write("id;wkt\n")
    for i, v in enumerate(V):
        fh.write("{0};POINT({1[0]} {1[1]})\n".format(i, v))


def output_triangles(T, fh):
    """Output list of triangles as WKT to text file (for QGIS)"""
    fh.write("id;wkt;area\n")
    for i, t in enumerate(T):
        fh.write("{0};{1};{2}\n".format(i, t, t.area))
