# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import id3reader.frames
import id3reader.tags
import id3reader.id3

from id3reader.errors import *
from id3reader.frames import UserText, Comment, Picture, Ownership
from id3reader.tags import parse_v2_tag, read_tag, decode_tag, Tag, TagVersion, TagFlags
