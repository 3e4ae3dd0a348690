import os
import tempfile
import unittest
from contextlib import redirect_stderr
from io import StringIO
from unittest import mock

import ls11
import nb3cut
from nb3cut import Job, Cutter, track_filename
from nb3names import NB3_NAMES, name_of
from ls11encode import BitWriter, literals, build_archive

PALETTE_TRACK = bytes(x % 256 for i in range(256) for x in (i, 0, 255 - i))

def figure_stream(value):
    # a 6 byte prefix, then one colour for the whole portrait
    return BitWriter().literal(value).copy(1, 64 * 80 + 5).getvalue()

JOBS = (
    Job("palette.nb3", "palette", None),
    Job("Kao.nb3",     "figure",  NB3_NAMES),
    Job("Kao2.nb3",    "figure",  None),
)


class TestNames(unittest.TestCase):
    def test_table(self):
        self.assertEqual(name_of(0), "上杉謙信")
        self.assertEqual(name_of(2), "武田信玄")
        self.assertEqual(name_of(40), "")

    def test_out_of_range(self):
        self.assertEqual(name_of(len(NB3_NAMES)), "")
        self.assertEqual(name_of(-1), "")

    def test_filenames(self):
        self.assertEqual(track_filename(JOBS[1], 0), "Kao.nb3.000上杉謙信.bmp")
        self.assertEqual(track_filename(JOBS[1], 999, "png"), "Kao.nb3.999.png")
        self.assertEqual(track_filename(JOBS[2], 5), "Kao2.nb3.005.bmp")


class TestCut(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.indir = os.path.join(self.tmp.name, "in")
        self.outdir = os.path.join(self.tmp.name, "out")
        os.mkdir(self.indir)
        os.mkdir(self.outdir)
        self.write("palette.nb3", [(4, literals(b"junk")), (768, literals(PALETTE_TRACK))])
        self.write("Kao.nb3", [(64 * 80 + 6, figure_stream(1)), (64 * 80 + 6, figure_stream(2))])
        self.write("Kao2.nb3", [(64 * 80 + 6, figure_stream(3))])

    def tearDown(self):
        self.tmp.cleanup()

    def write(self, name, tracks):
        with open(os.path.join(self.indir, name), "wb") as fd:
            fd.write(build_archive(tracks))

    def run_main(self, *extra, jobs=JOBS):
        err = StringIO()
        with redirect_stderr(err):
            ret = nb3cut.main(["-i", self.indir, "-o", self.outdir] + list(extra), jobs=jobs)
        return ret, err.getvalue()

    def test_all_jobs(self):
        ret, err = self.run_main()
        self.assertEqual(ret, 0, err)
        self.assertEqual(sorted(os.listdir(self.outdir)), [
            "Kao.nb3.000上杉謙信.bmp",
            "Kao.nb3.001里見義尭.bmp",
            "Kao2.nb3.000.bmp",
        ])
        with open(os.path.join(self.outdir, "Kao2.nb3.000.bmp"), "rb") as fd:
            data = fd.read()
        self.assertEqual(len(data), 6198)
        # entry 0 of the palette track is (0, 0, 255)
        self.assertEqual(data[54:58], b"\x00\xff\x00\x00")
        self.assertEqual(data[1078:], b"\x03" * 5120)

    def test_png(self):
        ret, err = self.run_main("-f", "png", "--palette-out", os.path.join(self.outdir, "pal.png"))
        self.assertEqual(ret, 0, err)
        self.assertIn("Kao2.nb3.000.png", os.listdir(self.outdir))
        self.assertIn("pal.png", os.listdir(self.outdir))

    def test_verbose(self):
        ret, err = self.run_main("-v")
        self.assertEqual(ret, 0)
        self.assertEqual(err.count("extracted "), 3)

    def test_figure_without_palette(self):
        ret, err = self.run_main(jobs=JOBS[1:])
        self.assertEqual(ret, 1)
        self.assertIn("Kao.nb3: ValueError", err)
        self.assertEqual(os.listdir(self.outdir), [])

    def test_missing_archive(self):
        os.remove(os.path.join(self.indir, "Kao2.nb3"))
        ret, err = self.run_main()
        self.assertEqual(ret, 1)
        self.assertIn("Kao2.nb3: FileNotFoundError", err)
        # earlier output stays
        self.assertEqual(len(os.listdir(self.outdir)), 2)

    def test_bad_archive_keeps_earlier_tracks(self):
        tracks = [(64 * 80 + 6, figure_stream(1)), (64 * 80 + 6, BitWriter().literal(1).copy(1, 9000).getvalue())]
        self.write("Kao.nb3", tracks)
        ret, err = self.run_main()
        self.assertEqual(ret, 1)
        self.assertIn("Kao.nb3: Overflow", err)
        self.assertEqual(os.listdir(self.outdir), ["Kao.nb3.000上杉謙信.bmp"])

    def test_out_of_memory(self):
        with mock.patch.object(ls11, "decompress_track", side_effect=MemoryError("cannot allocate")):
            ret, err = self.run_main(jobs=JOBS[:1])
        self.assertEqual(ret, 1)
        self.assertIn("palette.nb3: MemoryError: cannot allocate", err)

    def test_failed_write_leaves_no_image(self):
        def broken(fd, data, palette):
            fd.write(b"BM")
            raise OSError("disk full")

        with mock.patch.dict(nb3cut.WRITERS, {"bmp": broken}):
            ret, err = self.run_main(jobs=JOBS[:2])
        self.assertEqual(ret, 1)
        self.assertIn("Kao.nb3: OSError: disk full", err)
        self.assertEqual(os.listdir(self.outdir), [])

    def test_cutter_keeps_palette(self):
        cutter = Cutter(self.indir, self.outdir)
        cutter.run(JOBS[0])
        self.assertIsNotNone(cutter.palette)
        cutter.run(JOBS[2])
        self.assertEqual(cutter.written, [os.path.join(self.outdir, "Kao2.nb3.000.bmp")])


if __name__ == '__main__':
    unittest.main()
