"""bwtri - Delaunay Triangulation of planar point sets (Bowyer-Watson)
"""

__version__ = '0.1.0.dev0'
__license__ = 'MIT License'

from bwtri.delaunay import triangulate, validate, write_vtk, Point, Triangle

__all__ = ["triangulate", "validate", "write_vtk", "Point", "Triangle"]
