"""bwtri - Delaunay Triangulation of planar point sets (Bowyer-Watson)
"""

from bwtri.delaunay.insert_bw import triangulate, BowyerWatsonInserter
from bwtri.delaunay.tds import Point, Edge, Triangle, Triangulation
from bwtri.delaunay.preds import EPS, in_circumcircle, in_circumcircle_ccw
from bwtri.delaunay.check import validate
from bwtri.delaunay.inout import write_vtk, output_vtk, \
    output_triangles, output_vertices
from bwtri.delaunay.errors import TriangulationError, InvalidInput, \
    DegenerateInsertion, ResourceExhausted, ExportIOError


__version__ = '0.1.0.dev0'
__license__ = 'MIT License'
__all__ = ("triangulate", "BowyerWatsonInserter",
           "Point", "Edge", "Triangle", "Triangulation",
           "EPS", "in_circumcircle", "in_circumcircle_ccw",
           "validate",
           "write_vtk", "output_vtk", "output_triangles", "output_vertices",
           "TriangulationError", "InvalidInput", "DegenerateInsertion",
           "ResourceExhausted", "ExportIOError")

