from construct import *

FileHeader = Struct(
    Const(b"BM"),
    "size"     / Int32ul,
    Const(0, Int32ul),
    "offset"   / Int32ul,
)

InfoHeader = Struct(
    Const(40, Int32ul),
    "width"    / Int32sl,
    "height"   / Int32sl,
    Const(1, Int16ul),
    "bitcount" / Int16ul,
    "compression" / Int32ul,
    "imgsize"  / Int32ul,
    "xppm"     / Int32sl,
    "yppm"     / Int32sl,
    "clrused"  / Int32ul,
    "clrimportant" / Int32ul,
)

HEADERSIZE = FileHeader.sizeof() + InfoHeader.sizeof() # 54

__all__ = ["FileHeader", "InfoHeader", "HEADERSIZE"]
