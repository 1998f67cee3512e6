# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Integer and string conversions used by the ID3v2 decoder."""

from id3reader.errors import *

class Syncsafe:
    """Conversion to/from syncsafe integers.
    Syncsafe integers are big-endian 7-bit byte sequences.
    """
    @staticmethod
    def decode(data):
        """Decodes a syncsafe integer.

        The top bit of each byte is ignored; some taggers (notably older
        iTunes releases) set it, and we read such sizes as best we can.
        """
        value = 0
        for b in data:
            value <<= 7
            value += b & 0x7F
        return value

    @staticmethod
    def encode(i, *, width=-1):
        """Encodes a nonnegative integer into syncsafe format

        When width > 0, then len(result) == width
        When width < 0, then len(result) >= abs(width)
        """
        if i < 0:
            raise ValueError("value is negative")
        assert width != 0
        data = bytearray()
        while i:
            data.append(i & 127)
            i >>= 7
        if width > 0 and len(data) > width:
            raise ValueError("Integer too large")
        if len(data) < abs(width):
            data.extend([0] * (abs(width) - len(data)))
        data.reverse()
        return bytes(data)

class Int8:
    """Conversion to/from binary integer values of any length."""

    @staticmethod
    def decode(data):
        "Decodes an 8-bit big-endian integer of any length"
        value = 0
        for b in data:
            value <<= 8
            value += b
        return value

    @staticmethod
    def decode32(data):
        "Decodes a 32-bit frame size; returns 0 if data has fewer than 4 bytes."
        if len(data) < 4:
            return 0
        return Int8.decode(data[:4])

    @staticmethod
    def encode(i, *, width=-1):
        "Encodes a nonnegative integer into a big-endian byte string of given length"
        assert width != 0
        if i < 0: raise ValueError("Nonnegative integer expected")
        data = bytearray()
        while i:
            data.append(i & 255)
            i >>= 8
        if width > 0 and len(data) > width:
            raise ValueError("Integer too large")
        if len(data) < abs(width):
            data.extend([0] * (abs(width) - len(data)))
        return bytes(data[::-1])


# Text encodings, indexed by the encoding byte of ID3v2 frames.
_encodings = (('iso-8859-1', b"\x00"),
              ('utf-16', b"\x00\x00"),
              ('utf-16-be', b"\x00\x00"),
              ('utf-8', b"\x00"))

def encoding_name(encoding):
    return _encodings[_check_encoding(encoding)][0]

def terminator_width(encoding):
    "Return the width of the null terminator for the given encoding."
    return len(_encodings[_check_encoding(encoding)][1])

def _check_encoding(encoding):
    if encoding not in range(len(_encodings)):
        raise FrameError("Invalid encoding 0x{0:X}".format(encoding))
    return encoding

def decode_string(data, encoding, length=None):
    """Decode data as a string in the given ID3 encoding.

    If length is given, only the first length bytes are used.
    Trailing null terminators are dropped.  UnicodeDecodeError
    (a ValueError) is raised on undecodable input.
    """
    enc, term = _encodings[_check_encoding(encoding)]
    data = bytes(data if length is None else data[:length])
    while data.endswith(term) and len(data) % len(term) == 0:
        data = data[:-len(term)]
    return data.decode(enc)

def decode_latin1(data, length=None):
    return decode_string(data, 0, length)

def find_terminator(data, encoding, start=0, end=None):
    """Return the offset of the first null terminator in data[start:end].

    Double-byte encodings look for a null pair aligned to start.
    If there is no terminator, end (or len(data)) is returned.
    """
    if end is None or end > len(data):
        end = len(data)
    if terminator_width(encoding) == 1:
        index = bytes(data).find(b"\x00", start, end)
        return end if index < 0 else index
    for i in range(start, end - 1, 2):
        if data[i] == 0 and data[i + 1] == 0:
            return i
    return end

def skip_nulls(data, offset, width=1):
    "Return the first offset at or after offset that isn't a null unit of the given width."
    null = bytes(width)
    while offset + width <= len(data) and data[offset:offset + width] == null:
        offset += width
    return offset
