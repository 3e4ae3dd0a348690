import numpy as np

from PIL import Image
from bmpstructs import FileHeader, InfoHeader, HEADERSIZE
from ls11 import Truncated

PALETTE_ID  = 1
NCOLOR      = 256

WIDTH       = 64
HEIGHT      = 80
BPP         = 1    # bytes per pixel
PPM         = 2834 # pixels per meter
HEADER_SKIP = 6    # per-track prefix, never drawn

class Palette:
    """256 colour table, kept as the BMP stores it: blue, green, red, 0"""
    __slots__ = "entries",

    def __init__(self, entries):
        self.entries = entries

    @classmethod
    def from_track(cls, data):
        if len(data) < NCOLOR * 3:
            raise Truncated("palette needs %d bytes, got %d" % (NCOLOR * 3, len(data)))
        # stored as blue, red, green; the table goes out as blue, green, red, 0,
        # the byte order nb3cut has always emitted, not the stored order
        src = np.frombuffer(bytes(data[:NCOLOR * 3]), dtype=np.uint8).reshape([NCOLOR, 3])
        entries = np.zeros([NCOLOR, 4], dtype=np.uint8)
        entries[:, 0] = src[:, 0] # b
        entries[:, 1] = src[:, 2] # g
        entries[:, 2] = src[:, 1] # r
        return cls(entries)

    def tobytes(self):
        return self.entries.tobytes()

    def to_rgb(self):
        return self.entries[:, [2, 1, 0]].tobytes()

    def dump(self, outfile):
        img = Image.frombytes('RGB', (16, 16), self.to_rgb())
        img.save(outfile)

def build_palette(data, index):
    if index != PALETTE_ID:
        return None
    return Palette.from_track(data)


def _row_bytes():
    bpl = WIDTH * BPP
    rest = bpl % 4
    if rest:
        bpl += 4 - rest # padding
    return bpl

def figure_pixels(data):
    """Pixel section as written to the BMP, bottom row first.

    The track is emitted back to front, from its last byte down to
    HEADER_SKIP, then fitted to the fixed image size.
    """
    imgsize = _row_bytes() * HEIGHT
    src = np.frombuffer(bytes(data), dtype=np.uint8)[HEADER_SKIP:][::-1][:imgsize]
    out = np.zeros(imgsize, dtype=np.uint8)
    out[:len(src)] = src
    return out

def write_bmp(fd, data, palette):
    if palette is None:
        raise ValueError("no palette loaded")

    imgsize = _row_bytes() * HEIGHT
    offset = HEADERSIZE + NCOLOR * 4

    fd.write(FileHeader.build(dict(size=offset + imgsize, offset=offset)))
    fd.write(InfoHeader.build(dict(
        width=WIDTH,
        height=HEIGHT,
        bitcount=BPP * 8,
        compression=0,
        imgsize=imgsize,
        xppm=PPM,
        yppm=PPM,
        clrused=NCOLOR,
        clrimportant=0,
    )))
    fd.write(palette.tobytes())
    fd.write(figure_pixels(data).tobytes())

def figure_image(data, palette):
    if palette is None:
        raise ValueError("no palette loaded")
    pixels = figure_pixels(data).reshape([HEIGHT, _row_bytes()])[:, :WIDTH]
    img = Image.frombytes('P', (WIDTH, HEIGHT), np.flipud(pixels).tobytes())
    img.putpalette(palette.to_rgb())
    return img

def write_png(fd, data, palette):
    figure_image(data, palette).save(fd, format="PNG")

__all__ = ["Palette", "build_palette", "figure_pixels", "write_bmp", "figure_image", "write_png"]
