from construct import *

DICTIONARY_SIZE = 256

# Only the signature is compared, the remaining 12 bytes are ignored
Magic = Struct(
    Const(b"LS11"),
    Padding(12),
)

Dictionary = Bytes(DICTIONARY_SIZE)

TrackLength = Int32sb

# Directory entry after its length field
TrackTail = Struct(
    "size"   / Int32sb,
    "offset" / Int32sb,
)

__all__ = ["DICTIONARY_SIZE", "Magic", "Dictionary", "TrackLength", "TrackTail"]
