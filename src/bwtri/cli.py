"""Command line interface: triangulate a point set and write it as VTK
"""
import argparse
import logging
import random
import sys
import time

from bwtri.delaunay import triangulate, write_vtk, \
    output_triangles, output_vertices
from bwtri.delaunay.errors import InvalidInput, ResourceExhausted, \
    DegenerateInsertion
from bwtri.delaunay.helpers import read_points, random_circle_vertices, \
    SAMPLE_POINTS


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="bwtri",
        description="Delaunay triangulation of a planar point set "
                    "(Bowyer-Watson), written as legacy VTK file")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("-i", "--input",
                        help="Text file with one 'x y' point per line "
                             "(default: built-in sample points)")
    source.add_argument("--random", type=int, metavar="N",
                        help="Use N random points in the unit circle")
    parser.add_argument("--seed", type=int,
                        help="Seed for --random")
    parser.add_argument("-o", "--output", default="triangulation.vtk",
                        help="VTK file to write (default: triangulation.vtk)")
    parser.add_argument("--wkt", metavar="PREFIX",
                        help="Also write PREFIX_triangles.wkt and "
                             "PREFIX_vertices.wkt")
    parser.add_argument("--normalize-winding", action="store_true",
                        help="Make triangles ccw before the circumcircle test")
    parser.add_argument("--strict", action="store_true",
                        help="Fail when a point can not be inserted")
    parser.add_argument("--max-points", type=int,
                        help="Refuse inputs with more points than this")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Debug logging")
    return parser, parser.parse_args(argv)


def _load_points(parser, args):
    if args.input:
        try:
            with open(args.input) as fh:
                return read_points(fh)
        except OSError as err:
            parser.error("can not read {}: {}".format(args.input, err))
    if args.random is not None:
        if args.seed is not None:
            random.seed(args.seed)
        return random_circle_vertices(args.random)
    return SAMPLE_POINTS


def main(argv=None):
    parser, args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        pts = _load_points(parser, args)
        start = time.perf_counter()
        dt = triangulate(pts,
                         normalize_winding=args.normalize_winding,
                         strict=args.strict,
                         max_points=args.max_points)
        end = time.perf_counter()
    except (InvalidInput, ResourceExhausted, DegenerateInsertion) as err:
        parser.error(str(err))

    print("Time taken for triangulation: {} seconds.".format(end - start))
    print("Generated {} triangles.".format(len(dt.triangles)))
    if dt.degenerate:
        print("{} points did not lead to new triangles.".format(
            len(dt.degenerate)))

    try:
        write_vtk(dt.triangles, args.output)
        if args.wkt:
            with open(args.wkt + "_triangles.wkt", "w") as fh:
                output_triangles(dt.triangles, fh)
            with open(args.wkt + "_vertices.wkt", "w") as fh:
                output_vertices(dt.vertices, fh)
    except OSError as err:
        sys.stderr.write("Error: {}\n".format(err))
        return 1
    print("Exported to {}".format(args.output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
