#!/usr/bin/env python3

from setuptools import setup

setup(
    name="id3reader",
    version="0.1.0",
    packages=["id3reader"],
    entry_points = {
        'console_scripts': ['id3reader = id3reader.commandline:main']
    },
    license="BSD",
    python_requires=">=3.6",
    description="ID3v2 tag reader in pure Python 3",
    long_description="""
id3reader decodes the ID3v2.3 and ID3v2.4 tags at the start of MP3
files into a mapping of semantic tag names (title, artist, comments,
attached pictures, ...) to their values.  Tag features that can't be
read reliably (unsynchronisation, compressed or encrypted frames) are
detected and reported instead of being misread.
""",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Multimedia :: Sound/Audio"
        ],
    )
