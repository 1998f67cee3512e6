# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import abc

from abc import abstractmethod

from id3reader.conversion import *
from id3reader.errors import *

# The idea for the Spec system comes from Mutagen.

class Spec(metaclass=abc.ABCMeta):
    """A single field of a frame payload.

    read(frame, data) returns a (value, rest) pair, where rest is the
    part of data following the field.  Earlier fields are already set
    on frame when read is called, so a field may depend on them (e.g.
    on frame.encoding).
    """
    def __init__(self, name):
        self.name = name

    @abstractmethod
    def read(self, frame, data): pass

    def to_str(self, value):
        return "{0}={1}".format(self.name, repr(value))

class ByteSpec(Spec):
    def read(self, frame, data):
        if len(data) < 1:
            raise EOFError()
        return data[0], data[1:]

class EncodingSpec(ByteSpec):
    "EncodingSpec must be the first spec."
    def read(self, frame, data):
        enc, data = super().read(frame, data)
        if enc & 0xFC:
            raise FrameError("Invalid encoding 0x{0:X}".format(enc))
        return enc, data
    def to_str(self, value):
        return encoding_name(value)

class PictureTypeSpec(ByteSpec):
    "A picture type byte, looked up in the table of picture type names."
    def __init__(self, name, types):
        super().__init__(name)
        self.types = types
    def read(self, frame, data):
        value, data = super().read(frame, data)
        if value < len(self.types):
            return self.types[value], data
        return self.types[0], data

class BinaryDataSpec(Spec):
    def read(self, frame, data):
        return bytes(data), bytes()
    def to_str(self, value):
        return '{0}={1}{2}'.format(self.name, value[0:16], "..." if len(value) > 16 else "")

class SimpleStringSpec(Spec):
    "A fixed-length ISO-8859-1 string."
    def __init__(self, name, length):
        super().__init__(name)
        self.length = length
    def read(self, frame, data):
        if len(data) < self.length:
            raise EOFError()
        return decode_latin1(data, self.length), data[self.length:]

class LanguageSpec(SimpleStringSpec):
    def __init__(self, name):
        super().__init__(name, 3)

class NullTerminatedStringSpec(Spec):
    "An ISO-8859-1 string terminated by a single null byte."
    def read(self, frame, data):
        index = find_terminator(data, 0)
        return decode_latin1(data, index), data[index + 1:]

class URLStringSpec(Spec):
    "An ISO-8859-1 URL spanning the rest of the frame."
    def read(self, frame, data):
        rawstr, sep, rest = bytes(data).partition(b"\x00")
        if len(rawstr) == 0 and len(rest) > 0:
            # iTunes prepends an extra null byte to WFED frames
            rawstr, sep, rest = rest.partition(b"\x00")
        return decode_latin1(rawstr), bytes()

class EncodedStringSpec(Spec):
    """A string in the frame's encoding, terminated by a null
    sequence of matching width.

    If limit is given, the terminator must occur within the first
    limit bytes, otherwise the frame is rejected.  With lenient set, a
    missing terminator yields an empty string and leaves data untouched.
    Without either, an unterminated string runs to the end of data.
    """
    def __init__(self, name, limit=None, lenient=False):
        super().__init__(name)
        self.limit = limit
        self.lenient = lenient

    def read(self, frame, data):
        end = len(data)
        if self.limit is not None:
            end = min(end, self.limit)
        index = find_terminator(data, frame.encoding, 0, end)
        if index == end:
            if self.lenient:
                return "", data
            if self.limit is not None:
                raise FrameError("{0} is not terminated within {1} bytes"
                                 .format(self.name, min(len(data), self.limit)))
        width = terminator_width(frame.encoding)
        return decode_string(data, frame.encoding, index), data[index + width:]

class EncodedFullTextSpec(Spec):
    "A string in the frame's encoding spanning the rest of the frame."
    def read(self, frame, data):
        start = skip_nulls(data, 0, terminator_width(frame.encoding))
        return decode_string(data[start:], frame.encoding), bytes()
