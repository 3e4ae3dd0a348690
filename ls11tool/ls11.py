#!/usr/bin/env python3
"""KOEI LS11 archive reader.

Layout: 16 byte magic ("LS11" + padding), a 256 byte substitution
dictionary, then a directory of big-endian (length, size, offset) int32
triples ended by a zero length. Each track is a bit stream at `offset`
that expands to `size` bytes.
"""
import sys, os
from collections import namedtuple
from construct import ConstructError
from ls11structs import DICTIONARY_SIZE, Magic, Dictionary, TrackLength, TrackTail

Track = namedtuple("Track", "length size offset")
Header = namedtuple("Header", "dictionary tracks")

class FormatError(Exception):
    pass

class BadMagic(FormatError):
    pass

class Truncated(FormatError):
    pass

class Overflow(FormatError):
    pass

def read_magic(fd):
    try:
        Magic.parse_stream(fd)
    except ConstructError:
        raise BadMagic("not a LS11 file") from None

def read_dictionary(fd):
    try:
        return Dictionary.parse_stream(fd)
    except ConstructError:
        raise Truncated("short dictionary") from None

def read_tracks(fd):
    tracks = []
    while True:
        raw = fd.read(TrackLength.sizeof())
        # end of stream works as a terminator too
        if len(raw) < TrackLength.sizeof():
            break
        length = TrackLength.parse(raw)
        if length == 0:
            break
        try:
            tail = TrackTail.parse_stream(fd)
        except ConstructError:
            raise Truncated("directory entry %d cut short" % len(tracks)) from None
        tracks.append(Track(length, tail.size, tail.offset))
    return tracks

def read_header(fd):
    read_magic(fd)
    dictionary = read_dictionary(fd)
    return Header(dictionary, read_tracks(fd))


class BitReader:
    __slots__ = "fd", "buf", "mask"

    def __init__(self, fd):
        self.fd = fd
        self.buf = 0
        self.mask = 0

    def bit(self):
        if self.mask == 0:
            byte = self.fd.read(1)
            if not byte:
                raise Truncated("bit stream ended")
            self.buf = byte[0]
            self.mask = 0x80
        ret = 1 if self.buf & self.mask else 0
        self.mask >>= 1
        return ret

    def decode(self):
        """Read one variable-length integer.

        The prefix runs up to and including the first 0 bit, the suffix
        is as many bits as the prefix. The value is prefix + suffix.
        """
        length = 0
        val1 = 0
        while True:
            length += 1
            val1 = (val1 << 1) | self.bit()
            if not val1 & 1:
                break
        val2 = 0
        for _ in range(length):
            val2 = (val2 << 1) | self.bit()
        return val1 + val2


def decompress_track(fd, dictionary, track):
    if track.size <= 0 or track.offset < 0:
        raise BadMagic("bad track entry %r" % (track,))

    out = bytearray(track.size)
    fd.seek(track.offset)
    reader = BitReader(fd)
    cur = 0

    while cur < track.size:
        val1 = reader.decode()
        if val1 < DICTIONARY_SIZE:
            out[cur] = dictionary[val1]
            cur += 1
            continue

        distance = val1 - DICTIONARY_SIZE
        length = reader.decode() + 3
        if distance > cur:
            raise Overflow("back-reference %d bytes before start of track" % (distance - cur))
        if cur + length > track.size:
            raise Overflow("copy of %d bytes at %d exceeds %d" % (length, cur, track.size))

        # byte by byte, source and target overlap when distance < length
        for _ in range(length):
            out[cur] = out[cur - distance]
            cur += 1

    return out

def iter_tracks(fd, header):
    for index, track in enumerate(header.tracks):
        yield index, track, decompress_track(fd, header.dictionary, track)

def extract(filename, output):
    """Calls output(data, index, size, filename) for every track."""
    with open(filename, "rb") as fd:
        header = read_header(fd)
        for index, track, data in iter_tracks(fd, header):
            output(data, index, track.size, filename)
    return header


from argparse import ArgumentParser, FileType

argparser = ArgumentParser(prog="ls11", description="List and dump LS11 archive tracks")
argparser.add_argument("file", type=FileType("rb"))
argparser.add_argument("out", nargs="?", help="directory for raw track dumps")

def main(argv=None):
    args = argparser.parse_args(argv)
    filename = args.file.name

    try:
        with args.file as fd:
            header = read_header(fd)

            print("Index", "Offset", "Length", "Size", sep='\t')
            for index, track in enumerate(header.tracks):
                print(index, hex(track.offset), track.length, track.size, sep='\t')
            print("%d data contained." % len(header.tracks))

            if args.out is None:
                return 0

            base = os.path.basename(filename)
            for index, track, data in iter_tracks(fd, header):
                path = os.path.join(args.out, "%s.%03d" % (base, index))
                with open(path, 'wb') as out:
                    out.write(data)
    except (FormatError, OSError, MemoryError) as e:
        sys.stderr.write("%s: %s: %s\n" % (filename, type(e).__name__, e))
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
