# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Reading ID3v2 tags: header validation, frame iteration and the
tag record that collects decoded frame values."""

import collections
import collections.abc
from warnings import warn

from id3reader.errors import *
from id3reader.conversion import *

import id3reader.id3 as id3
import id3reader.frames as Frames
import id3reader.fileutil as fileutil

_TAG_UNSYNCHRONISED = 0x80
_TAG_EXTENDED_HEADER = 0x40
_TAG_EXPERIMENTAL = 0x20
_TAG23_UNKNOWN_MASK = 0x1F
_TAG24_UNKNOWN_MASK = 0x0F     # 0x10 is the ID3v2.4 footer flag

# Second byte of the frame flags: compression, encryption, grouping
# (and in ID3v2.4, unsynchronisation and data length indicators).
_FRAME_FORMAT_MASK = 0x00FF

# Tag header plus one frame header
MIN_TAG_SIZE = 20

TagFlags = collections.namedtuple("TagFlags",
                                  "unsynchronisation extended_header experimental")
TagVersion = collections.namedtuple("TagVersion", "major minor revision flags")

class RawFrame(collections.namedtuple("RawFrame", "frameid size flags data")):
    "An undecoded frame: id, payload size, 16-bit flags and payload."
    __slots__ = ()

    @property
    def typeclass(self):
        return self.frameid[0]

def read_header(data):
    """Decode the ID3v2 tag header at the start of data.

    Returns (version, header_size, tag_size), or None if data doesn't
    start with a well-formed ID3v2 header.  header_size includes the
    extended header; tag_size is the declared size of the tag,
    excluding the 10-byte header.

    Raises UnsupportedFeatureError for tags we can't read correctly.
    """
    if data is None or len(data) < MIN_TAG_SIZE:
        return None
    if bytes(data[0:3]) != b"ID3":
        return None
    (minor, revision, flagval) = data[3:6]
    if minor not in (2, 3, 4):
        return None
    flags = TagFlags(unsynchronisation=bool(flagval & _TAG_UNSYNCHRONISED),
                     extended_header=bool(flagval & _TAG_EXTENDED_HEADER),
                     experimental=bool(flagval & _TAG_EXPERIMENTAL))
    if flags.unsynchronisation:
        raise UnsupportedFeatureError("ID3v2 unsynchronisation is not supported")
    if minor == 2:
        raise UnsupportedFeatureError("ID3v2.2 tags are not supported")
    unknown = flagval & (_TAG23_UNKNOWN_MASK if minor == 3 else _TAG24_UNKNOWN_MASK)
    if unknown:
        warn("Unknown ID3v2.{0} flags: 0x{1:X}".format(minor, unknown), TagWarning)

    tag_size = Syncsafe.decode(data[6:10])
    header_size = 10
    if flags.extended_header:
        header_size += Syncsafe.decode(data[10:14])
        if minor == 3:
            # The ID3v2.3 extended header size excludes itself
            header_size += 4
    return (TagVersion(2, minor, revision, flags), header_size, tag_size)


class Tag(collections.abc.Mapping):
    """A decoded ID3v2 tag.

    Maps semantic tag names (e.g. "title", "comments") to frame values.
    Frames listed in multivalued_frames collect their values into a
    list in file order; for other frames, the last occurrence wins.
    The decoded frames themselves are available in frames.
    """
    known_frames = id3.frame_tags
    multivalued_frames = id3.multivalued_frames

    # Work around iTunes frame size encoding bug.
    # Older versions of iTunes stored ID3v2.4 frame sizes as
    # straight 8bit integers, not syncsafe.
    itunes_workaround = False

    def __init__(self, version=None):
        self.version = version
        self.frames = []
        self._values = dict()

    # Mapping methods
    def __getitem__(self, key):
        return self._values[key]
    def __iter__(self):
        return iter(self._values)
    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return "<{0}: ID3v2.{1} tag{2} with {3} frames>".format(
            type(self).__name__,
            self.version.minor if self.version else "?",
            self._str_flags(),
            len(self.frames))

    def _str_flags(self):
        if self.version is None:
            return ""
        names = [name for name in self.version.flags._fields
                 if getattr(self.version.flags, name)]
        return " ({0})".format(", ".join(names)) if names else ""

    # Reading tags
    @classmethod
    def read(cls, filename):
        """Read a tag from the current position of a file.
        Raises NoTagError if there is no ID3v2 tag there."""
        return cls.decode(fileutil.read_tag_data(filename))

    @classmethod
    def decode(cls, data):
        "Decode a tag from data; raises NoTagError if there is none."
        tag = cls._decode(data)
        if tag is None:
            raise NoTagError("ID3v2 tag not found")
        return tag

    @classmethod
    def _decode(cls, data):
        header = read_header(data)
        if header is None:
            return None
        (version, header_size, tag_size) = header
        tag = cls(version)
        # tag_size counts everything after the 10-byte header, the
        # extended header included, so the frames end at 10 + tag_size
        # rather than header_size + tag_size.
        body = bytes(data[header_size:10 + tag_size])
        for raw in tag._read_frames(body):
            tag._add_frame(tag._frame_from_raw(raw))
        return tag

    def _frame_size(self, data):
        if self.version.minor == 4 and not self.itunes_workaround:
            return Syncsafe.decode(data)
        return Int8.decode32(data)

    def _read_frames(self, body):
        """Generate the raw frames in body, stopping at padding or at a
        truncated frame.  Frames with nonstandard ids are still yielded,
        so the frames after them are not lost."""
        position = 0
        while position < len(body):
            header = body[position:position + 10]
            size = self._frame_size(header[4:8])
            if size == 0:
                break # Padding
            if len(header) < 10:
                break
            frameid = header[0:4].decode("latin-1")
            if position + 10 + size > len(body):
                warn("Truncated frame {0!r}: {1} bytes declared, {2} available"
                     .format(frameid, size, len(body) - position - 10),
                     TagWarning)
                break
            yield RawFrame(frameid,
                           size,
                           Int8.decode(header[8:10]),
                           body[position + 10:position + 10 + size])
            position += 10 + size

    def _frame_from_raw(self, raw):
        tag = self.known_frames.get(raw.frameid)
        if raw.flags & _FRAME_FORMAT_MASK:
            warn("Skipping {0} frame with unsupported format flags: 0x{1:02X}"
                 .format(raw.frameid, raw.flags & _FRAME_FORMAT_MASK),
                 UnsupportedFrameWarning)
            return Frames.UnknownFrame(frameid=raw.frameid, flags=raw.flags,
                                       data=raw.data)
        try:
            frame = Frames.classify(raw.frameid)._from_data(raw.frameid,
                                                           raw.data,
                                                           raw.flags)
        except (FrameError, ValueError, EOFError) as e:
            warn("Can't decode {0} frame: {1}".format(raw.frameid, e),
                 ErrorFrameWarning)
            return Frames.ErrorFrame(raw.frameid, raw.data, e, raw.flags)
        frame.tag = tag
        return frame

    def _add_frame(self, frame):
        self.frames.append(frame)
        if frame.tag is None:
            return
        if frame.frameid in self.multivalued_frames:
            self._values.setdefault(frame.tag, []).append(frame.value)
        else:
            self._values[frame.tag] = frame.value


def parse_v2_tag(data):
    """Decode the ID3v2 tag at the start of data.

    Returns a Tag, or False if data doesn't start with a well-formed
    ID3v2 tag.  Raises UnsupportedFeatureError if the tag uses features
    we can't decode (unsynchronisation, ID3v2.2 frame layout).
    """
    tag = Tag._decode(data)
    if tag is None:
        return False
    return tag

def read_tag(filename):
    return Tag.read(filename)

def decode_tag(data):
    return Tag.decode(data)
