# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""File access utilities."""

import os

from contextlib import contextmanager

from id3reader.errors import *
from id3reader.conversion import Syncsafe

def xread(file, length):
    "Read exactly length bytes from file; raise EOFError if file ends sooner."
    data = file.read(length)
    if len(data) != length:
        raise EOFError
    return data

@contextmanager
def opened(filename, mode):
    "Open filename, or do nothing if filename is already an open file object"
    if isinstance(filename, (str, bytes, os.PathLike)):
        with open(filename, mode) as file:
            yield file
    else:
        yield filename

def read_tag_data(filename):
    """Return the raw ID3v2 tag at the current position of filename,
    including its header.

    Raises NoTagError if there is no ID3v2 header there.  If the file
    ends before the declared end of the tag, the available bytes are
    returned.
    """
    with opened(filename, "rb") as file:
        try:
            header = xread(file, 10)
        except EOFError:
            raise NoTagError("ID3v2 tag not found")
        if header[0:3] != b"ID3":
            raise NoTagError("ID3v2 tag not found")
        return header + file.read(Syncsafe.decode(header[6:10]))
