# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Print the ID3v2 tags of audio files."""

import optparse
import sys
import warnings
from contextlib import contextmanager

import id3reader
from id3reader.frames import Picture

@contextmanager
def print_warnings(filename, options):
    with warnings.catch_warnings(record=True) as ws:
        warnings.simplefilter("always", id3reader.Warning)
        try:
            yield None
        finally:
            if not options.quiet and len(ws) > 0:
                for w in ws:
                    print(filename + ":warning: " + str(w.message),
                          file=sys.stderr)
            sys.stderr.flush()

def format_value(value):
    if isinstance(value, list):
        return "; ".join(format_value(v) for v in value)
    if isinstance(value, Picture):
        return "{0}, {1}, {2} bytes{3}".format(
            value.type, value.mime, len(value.data),
            ", " + repr(value.description) if value.description else "")
    if isinstance(value, tuple):
        return ", ".join(repr(v) for v in value)
    return repr(value)

def print_tag(filename, tag, options, file=None):
    print("{0}: {1!r}".format(filename, tag), file=file)
    for key in tag:
        print("    {0}: {1}".format(key, format_value(tag[key])), file=file)
    if options.frames:
        for frame in tag.frames:
            print("    " + str(frame), file=file)

def main(argv=None):
    parser = optparse.OptionParser(usage="%prog [options] file...",
                                   description="Print the ID3v2 tags of audio files.")
    parser.add_option("-q", "--quiet", action="store_true", default=False,
                      help="don't print warnings")
    parser.add_option("-f", "--frames", action="store_true", default=False,
                      help="list every frame in the tag")
    (options, args) = parser.parse_args(argv)
    if not args:
        parser.error("no files given")

    status = 0
    for filename in args:
        with print_warnings(filename, options):
            try:
                tag = id3reader.read_tag(filename)
            except id3reader.NoTagError:
                print("{0}: no ID3v2 tag".format(filename))
                continue
            except (id3reader.Error, EnvironmentError) as e:
                print("{0}: error: {1}".format(filename, e), file=sys.stderr)
                status = 1
                continue
        print_tag(filename, tag, options)
    return status

if __name__ == "__main__":
    sys.exit(main())
