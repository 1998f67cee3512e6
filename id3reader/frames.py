# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Class definitions for ID3v2 frames.

Each frame class knows how to decode one payload format; classify()
picks the class for a given frame id.  The value property of a decoded
frame is what ends up in the tag: a string, one of the record types
below, or None for frames we don't interpret.
"""

import abc
import collections
import re
from types import MappingProxyType

from id3reader.errors import *
from id3reader.specs import *
import id3reader.id3 as id3

# Upper bound on the size of APIC descriptions; a description that is not
# terminated within this many bytes makes the frame unreadable.
MAX_DESCRIPTION_LENGTH = 30 * 1024 * 1024

UserText = collections.namedtuple("UserText", "description value")
Comment = collections.namedtuple("Comment", "language description value")
Picture = collections.namedtuple("Picture", "type mime description data")
Ownership = collections.namedtuple("Ownership", "price_paid date_of_purchase seller")

class Frame(metaclass=abc.ABCMeta):
    _framespec = tuple()

    def __init__(self, frameid=None, flags=0, tag=None, **kwargs):
        self.frameid = frameid if frameid else type(self).__name__
        self.flags = flags
        self.tag = tag
        for spec in self._framespec:
            setattr(self, spec.name, kwargs.get(spec.name, None))

    def __eq__(self, other):
        return (isinstance(other, type(self))
                and self.frameid == other.frameid
                and self.flags == other.flags
                and all(getattr(self, spec.name, None) ==
                        getattr(other, spec.name, None)
                        for spec in self._framespec))

    @classmethod
    def _from_data(cls, frameid, data, flags=0):
        frame = cls(frameid=frameid, flags=flags)
        for spec in frame._framespec:
            val, data = spec.read(frame, data)
            setattr(frame, spec.name, val)
        return frame

    @property
    def value(self):
        return None

    def __repr__(self):
        stype = type(self).__name__
        args = ["frameid={0!r}".format(self.frameid)]
        if self.flags:
            args.append("flags=0x{0:04X}".format(self.flags))
        for spec in self._framespec:
            data = getattr(self, spec.name)
            if isinstance(spec, BinaryDataSpec) and isinstance(data, bytes):
                args.append("{0}=<{1} bytes of binary data {2!r}{3}>".format(
                        spec.name, len(data),
                        data[:20], "..." if len(data) > 20 else ""))
            else:
                args.append("{0}={1!r}".format(spec.name, data))
        return "{0}({1})".format(stype, ", ".join(args))

    def _str_fields(self):
        return ", ".join(spec.to_str(getattr(self, spec.name, None))
                         for spec in self._framespec)

    def __str__(self):
        flag = " "
        if self.tag is None: flag = "?"
        if isinstance(self, ErrorFrame): flag = "!"
        return "{0}{1}({2})".format(flag, self.frameid, self._str_fields())

class UnknownFrame(Frame):
    _framespec = (BinaryDataSpec("data"),)

class ErrorFrame(Frame):
    "A frame whose payload could not be decoded."
    _framespec = (BinaryDataSpec("data"),)

    def __init__(self, frameid, data, exception, flags=0):
        super().__init__(frameid=frameid, flags=flags)
        self.data = bytes(data)
        self.exception = exception

    def _str_fields(self):
        strs = ["ERROR"]
        if self.exception:
            strs.append(str(self.exception))
        strs.append(repr(self.data[:20]))
        return ", ".join(strs)

class TextFrame(Frame):
    _framespec = (EncodingSpec("encoding"), EncodedFullTextSpec("text"))

    @property
    def value(self):
        return self.text

    def _str_fields(self):
        return "{0} {1!r}".format(encoding_name(self.encoding), self.text)

class GenreFrame(TextFrame):
    """Content type (TCON).

    ID3v2.3 refers to ID3v1 genres by number in parentheses, e.g.
    "(17)" or "(4)(17)"; some taggers store the bare number.
    """
    genres = id3.genres
    _reference = re.compile(r"\(([0-9]+)\)")
    _number = re.compile(r"[0-9]+")

    def _genre(self, number):
        index = int(number)
        if index < len(self.genres):
            return self.genres[index]
        return number

    @property
    def value(self):
        text = self.text
        if text.startswith("("):
            refs = self._reference.findall(text)
            if refs:
                return ",".join(self._genre(ref) for ref in refs)
        elif self._number.fullmatch(text):
            return self._genre(text)
        return text

class PeopleListFrame(TextFrame):
    """Involved people list (IPLS).

    The involvement/person pairs are null-separated; the value
    is returned verbatim, without splitting it up.
    """

class UserTextFrame(Frame):
    "User defined text information frame (TXXX)"
    _framespec = (EncodingSpec("encoding"),
                  EncodedStringSpec("description"),
                  EncodedFullTextSpec("text"))

    @property
    def value(self):
        return UserText(self.description, self.text)

class URLFrame(Frame):
    _framespec = (URLStringSpec("url"),)

    @property
    def value(self):
        return self.url

    def _str_fields(self):
        return repr(self.url)

class UserURLFrame(URLFrame):
    "User defined URL link frame (WXXX)"
    _framespec = (EncodingSpec("encoding"),
                  EncodedStringSpec("description", lenient=True),
                  URLStringSpec("url"))

    @classmethod
    def _from_data(cls, frameid, data, flags=0):
        if len(data) > 0 and data[0] & 0xFC:
            # No encoding byte; the whole payload is the URL.
            frame = cls(frameid=frameid, flags=flags, description="")
            frame.url, rest = URLStringSpec("url").read(frame, data)
            return frame
        return super()._from_data(frameid, data, flags)

class CommentFrame(Frame):
    "Comments (COMM) and unsynchronised lyrics (USLT)"
    _framespec = (EncodingSpec("encoding"), LanguageSpec("language"),
                  EncodedStringSpec("description"),
                  EncodedFullTextSpec("text"))

    @property
    def value(self):
        return Comment(self.language, self.description, self.text)

class PictureFrame(Frame):
    "Attached picture (APIC)"
    _framespec = (EncodingSpec("encoding"),
                  NullTerminatedStringSpec("mime"),
                  PictureTypeSpec("type", id3.picture_types),
                  EncodedStringSpec("description", limit=MAX_DESCRIPTION_LENGTH),
                  BinaryDataSpec("data"))

    @property
    def value(self):
        return Picture(self.type, self.mime, self.description or None, self.data)

    def _str_fields(self):
        return "{0}, desc={1!r}, mime={2!r}: {3} bytes of data".format(
            self.type, self.description, self.mime, len(self.data))

class OwnershipFrame(Frame):
    "Ownership frame (OWNE)"
    _framespec = (EncodingSpec("encoding"),
                  NullTerminatedStringSpec("price"),
                  SimpleStringSpec("date", 8),
                  EncodedFullTextSpec("seller"))

    @property
    def value(self):
        return Ownership(self.price, self.date, self.seller)


_frame_classes = MappingProxyType({
    "COMM": CommentFrame,
    "USLT": CommentFrame,
    "APIC": PictureFrame,
    "IPLS": PeopleListFrame,
    "OWNE": OwnershipFrame,
    "TXXX": UserTextFrame,
    "TCON": GenreFrame,
    "WXXX": UserURLFrame,
    })

def classify(frameid):
    "Return the frame class that decodes frames with the given id."
    if frameid in _frame_classes:
        return _frame_classes[frameid]
    if frameid.startswith("T"):
        return TextFrame
    if frameid.startswith("W"):
        return URLFrame
    return UnknownFrame
