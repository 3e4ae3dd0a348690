#!/usr/bin/env python3
"""Cut the portraits out of the nb3 archives.

palette.nb3 has to come first, every later archive is drawn with the
palette taken from its track 1.
"""
import sys, os
from collections import namedtuple
from ls11 import FormatError, extract
from nb3 import build_palette, write_bmp, write_png
from nb3names import NB3_NAMES, name_of

Job = namedtuple("Job", "filename role names")

JOBS = (
    Job("palette.nb3", "palette", None),
    Job("Kao.nb3",     "figure",  NB3_NAMES),
    Job("Kao2.nb3",    "figure",  None),
    Job("Kao3.nb3",    "figure",  None),
)

WRITERS = {
    "bmp": write_bmp,
    "png": write_png,
}

def track_filename(job, index, ext="bmp"):
    label = name_of(index, job.names) if job.names else ""
    return "%s.%03d%s.%s" % (job.filename, index, label, ext)

class Cutter:
    """Routes decoded tracks to the palette or to image files."""

    def __init__(self, indir=".", outdir=".", fmt="bmp", verbose=False):
        self.indir = indir
        self.outdir = outdir
        self.fmt = fmt
        self.verbose = verbose
        self.palette = None
        self.written = []

    def read_palette(self, data, index, size, filename):
        palette = build_palette(data, index)
        if palette is not None:
            self.palette = palette

    def figure_output(self, job):
        writer = WRITERS[self.fmt]

        def output(data, index, size, filename):
            path = os.path.join(self.outdir, track_filename(job, index, self.fmt))
            if self.palette is None:
                raise ValueError("no palette loaded before %s" % job.filename)
            try:
                with open(path, "wb") as fd:
                    writer(fd, data, self.palette)
            except Exception:
                # no partial image for the failing track
                if os.path.exists(path):
                    os.remove(path)
                raise
            self.written.append(path)
            if self.verbose:
                sys.stderr.write("extracted %s\n" % path)
        return output

    def run(self, job):
        path = os.path.join(self.indir, job.filename)
        if job.role == "palette":
            return extract(path, self.read_palette)
        elif job.role == "figure":
            return extract(path, self.figure_output(job))
        raise ValueError("unknown role %r" % job.role)


from argparse import ArgumentParser

argparser = ArgumentParser(prog="nb3cut", description=__doc__.splitlines()[0])
argparser.add_argument("-i", "--indir", default=".", help="directory holding the nb3 files")
argparser.add_argument("-o", "--outdir", default=".", help="directory for the images")
argparser.add_argument("-f", "--format", choices=sorted(WRITERS), default="bmp")
argparser.add_argument("--palette-out", help="also save a 16x16 swatch of the palette")
argparser.add_argument("-v", "--verbose", action="store_true")

def main(argv=None, jobs=JOBS):
    args = argparser.parse_args(argv)
    cutter = Cutter(args.indir, args.outdir, args.format, args.verbose)

    for job in jobs:
        try:
            cutter.run(job)
        except (FormatError, OSError, ValueError, MemoryError) as e:
            sys.stderr.write("%s: %s: %s\n" % (job.filename, type(e).__name__, e))
            return 1

        if job.role == "palette" and args.palette_out:
            if cutter.palette is None:
                sys.stderr.write("%s: no palette track\n" % job.filename)
                return 1
            cutter.palette.dump(args.palette_out)

    return 0

if __name__ == "__main__":
    sys.exit(main())
