import io
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout, redirect_stderr

from bwtri.cli import main


class TestCommandLine(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def run_main(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_sample(self):
        filename = os.path.join(self.tmpdir, "sample.vtk")
        code, out, _ = self.run_main(["-o", filename])
        self.assertEqual(code, 0)
        assert "Time taken for triangulation" in out
        assert "Exported to {}".format(filename) in out
        with open(filename) as fh:
            self.assertEqual(fh.readline(), "# vtk DataFile Version 3.0\n")

    def test_input_file_and_wkt(self):
        infile = os.path.join(self.tmpdir, "pts.txt")
        with open(infile, "w") as fh:
            fh.write("0 0\n1 0\n0 1\n")
        prefix = os.path.join(self.tmpdir, "dbg")
        code, out, _ = self.run_main(["-i", infile, "-o",
                                      os.path.join(self.tmpdir, "t.vtk"),
                                      "--wkt", prefix])
        self.assertEqual(code, 0)
        assert "Generated 1 triangles." in out
        assert os.path.exists(prefix + "_triangles.wkt")
        assert os.path.exists(prefix + "_vertices.wkt")

    def test_random(self):
        filename = os.path.join(self.tmpdir, "r.vtk")
        code, _, _ = self.run_main(["--random", "50", "--seed", "2",
                                    "--normalize-winding", "-o", filename])
        self.assertEqual(code, 0)
        assert os.path.exists(filename)

    def test_unwritable_output(self):
        filename = os.path.join(self.tmpdir, "no", "such", "dir.vtk")
        code, _, err = self.run_main(["-o", filename])
        self.assertEqual(code, 1)
        assert "Error" in err

    def test_unwritable_wkt(self):
        prefix = os.path.join(self.tmpdir, "no", "dbg")
        code, _, err = self.run_main(["-o", os.path.join(self.tmpdir, "ok.vtk"),
                                      "--wkt", prefix])
        self.assertEqual(code, 1)
        assert "Error" in err

    def test_empty_input(self):
        infile = os.path.join(self.tmpdir, "empty.txt")
        with open(infile, "w") as fh:
            fh.write("# nothing here\n")
        with self.assertRaises(SystemExit) as ctx:
            self.run_main(["-i", infile])
        self.assertEqual(ctx.exception.code, 2)

    def test_max_points(self):
        with self.assertRaises(SystemExit) as ctx:
            self.run_main(["--max-points", "10",
                           "-o", os.path.join(self.tmpdir, "x.vtk")])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
