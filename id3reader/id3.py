# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Static tables describing the ID3v2.3/ID3v2.4 frames we understand.

frame_tags maps frame ids to the semantic tag names used as keys of
decoded tags; frames in multivalued_frames may legally appear more than
once in a tag, and their values are collected into lists.
"""

from types import MappingProxyType

frame_tags = MappingProxyType({
    # 4.1. Unique file identifier
    "UFID": "unique-file-identifier",

    # 4.2.1. Identification frames
    "TIT1": "content-group",
    "TIT2": "title",
    "TIT3": "subtitle",
    "TALB": "album",
    "TOAL": "original-album",
    "TRCK": "track",
    "TPOS": "set-part",
    "TSST": "set-subtitle",
    "TSRC": "isrc",

    # 4.2.2. Involved persons frames
    "TPE1": "artist",
    "TPE2": "band",
    "TPE3": "conductor",
    "TPE4": "remixer",
    "TOPE": "original-artist",
    "TEXT": "writer",
    "TOLY": "original-writer",
    "TCOM": "composer",
    "TMCL": "musician-credits",
    "TIPL": "involved-people-list",
    "IPLS": "involved-people",
    "TENC": "encoder",

    # 4.2.3. Derived and subjective properties frames
    "TBPM": "bpm",
    "TLEN": "length",
    "TKEY": "initial-key",
    "TLAN": "language",
    "TCON": "genre",
    "TFLT": "file-type",
    "TMED": "media-type",
    "TMOO": "mood",

    # 4.2.4. Rights and license frames
    "TCOP": "copyright",
    "TPRO": "produced-notice",
    "TPUB": "publisher",
    "TOWN": "file-owner",
    "TRSN": "radio-name",
    "TRSO": "radio-owner",

    # 4.2.5. Other text frames
    "TOFN": "original-filename",
    "TDLY": "playlist-delay",
    "TDEN": "encoding-time",
    "TDOR": "original-release-time",
    "TDRC": "recording-time",
    "TDRL": "release-time",
    "TDTG": "tagging-time",
    "TSSE": "encoder-settings",
    "TSOA": "album-sort-order",
    "TSOP": "performer-sort-order",
    "TSOT": "title-sort-order",

    # ID3v2.3 only
    "TDAT": "date",
    "TIME": "time",
    "TORY": "original-year",
    "TRDA": "recording-dates",
    "TSIZ": "size",
    "TYER": "year",

    # 4.2.6. User defined information frame
    "TXXX": "user-defined-text-information",

    # 4.3. URL link frames
    "WCOM": "commercial-url",
    "WCOP": "copyright-url",
    "WOAF": "file-url",
    "WOAR": "artist-url",
    "WOAS": "source-url",
    "WORS": "radio-station-url",
    "WPAY": "payment-url",
    "WPUB": "publisher-url",
    "WXXX": "user-defined-url",

    # 4.4.-4.20.
    "MCDI": "music-cd-identifier",
    "ETCO": "event-timing-codes",
    "MLLT": "location-lookup-table",
    "SYTC": "synced-tempo-codes",
    "USLT": "lyrics",
    "SYLT": "synced-lyrics",
    "COMM": "comments",
    "RVA2": "relative-volume-adjustment",
    "EQU2": "equalisation",
    "RVRB": "reverb",
    "APIC": "image",
    "GEOB": "object",
    "PCNT": "play-counter",
    "POPM": "popularimeter",
    "RBUF": "recommended-buffer-size",
    "AENC": "audio-encryption",
    "LINK": "linked-information",
    "POSS": "position-synchronisation",
    "USER": "terms-of-use",
    "OWNE": "ownership",
    "COMR": "commercial",
    "ENCR": "encryption-method",
    "GRID": "group-identification",
    "PRIV": "private",
    "SIGN": "signature",
    "SEEK": "seek",
    "ASPI": "audio-seek-point-index",

    # Nonstandard frames
    "TCMP": "compilation",
    "TSO2": "album-artist-sort-order",
    "TSOC": "composer-sort-order",
    "PCST": "podcast",
    "TCAT": "podcast-category",
    "TDES": "podcast-description",
    "TGID": "podcast-identifier",
    "TKWD": "podcast-keywords",
    "WFED": "podcast-url",
    })

multivalued_frames = frozenset((
    "UFID", "TXXX", "WCOM", "WOAR", "WXXX", "USLT", "SYLT", "COMM",
    "RVA2", "EQU2", "APIC", "GEOB", "POPM", "AENC", "LINK", "USER",
    "COMR", "ENCR", "GRID", "PRIV", "SIGN"))

# Attached picture (APIC) types
picture_types = (
    "other", "32x32 pixels 'file icon' (PNG only)", "Other file icon",
    "Cover (front)", "Cover (back)", "Leaflet page",
    "Media (e.g. label side of CD)", "Lead artist/lead performer/soloist",
    "Artist/performer", "Conductor", "Band/Orchestra", "Composer",
    "Lyricist/text writer", "Recording Location", "During recording",
    "During performance", "Movie/video screen capture",
    "A bright coloured fish", "Illustration", "Band/artist logotype",
    "Publisher/Studio logotype")

# ID3v1 genre list
genres = (
    "Blues", "Classic Rock", "Country", "Dance", "Disco", "Funk", "Grunge",
    "Hip-Hop", "Jazz", "Metal", "New Age", "Oldies", "Other", "Pop", "R&B",
    "Rap", "Reggae", "Rock", "Techno", "Industrial", "Alternative", "Ska",
    "Death Metal", "Pranks", "Soundtrack", "Euro-Techno", "Ambient",
    "Trip-Hop", "Vocal", "Jazz+Funk", "Fusion", "Trance", "Classical",
    "Instrumental", "Acid", "House", "Game", "Sound Clip", "Gospel", "Noise",
    "AlternRock", "Bass", "Soul", "Punk", "Space", "Meditative",
    "Instrumental Pop", "Instrumental Rock", "Ethnic", "Gothic", "Darkwave",
    "Techno-Industrial", "Electronic", "Pop-Folk", "Eurodance", "Dream",
    "Southern Rock", "Comedy", "Cult", "Gangsta", "Top 40", "Christian Rap",
    "Pop/Funk", "Jungle", "Native American", "Cabaret", "New Wave",
    "Psychadelic", "Rave", "Showtunes", "Trailer", "Lo-Fi", "Tribal",
    "Acid Punk", "Acid Jazz", "Polka", "Retro", "Musical", "Rock & Roll",
    "Hard Rock",
    # 80-125: Winamp extensions
    "Folk", "Folk-Rock", "National Folk", "Swing", "Fast Fusion", "Bebob",
    "Latin", "Revival", "Celtic", "Bluegrass", "Avantgarde", "Gothic Rock",
    "Progressive Rock", "Psychedelic Rock", "Symphonic Rock", "Slow Rock",
    "Big Band", "Chorus", "Easy Listening", "Acoustic", "Humour", "Speech",
    "Chanson", "Opera", "Chamber Music", "Sonata", "Symphony", "Booty Bass",
    "Primus", "Porn Groove", "Satire", "Slow Jam", "Club", "Tango", "Samba",
    "Folklore", "Ballad", "Power Ballad", "Rhythmic Soul", "Freestyle",
    "Duet", "Punk Rock", "Drum Solo", "A capella", "Euro-House",
    "Dance Hall",
    # 126-147: Even more esoteric Winamp extensions
    "Goa", "Drum & Bass", "Club House", "Hardcore", "Terror", "Indie",
    "BritPop", "Negerpunk", "Polsk Punk", "Beat", "Christian Gangsta Rap",
    "Heavy Metal", "Black Metal", "Crossover", "Contemporary Christian",
    "Christian Rock", "Merengue", "Salsa", "Thrash Metal", "Anime", "JPop",
    "Synthpop",
    # 148-191: Winamp 5.6
    "Abstract", "Art Rock", "Baroque", "Bhangra", "Big Beat", "Breakbeat",
    "Chillout", "Downtempo", "Dub", "EBM", "Eclectic", "Electro",
    "Electroclash", "Emo", "Experimental", "Garage", "Global", "IDM",
    "Illbient", "Industro-Goth", "Jam Band", "Krautrock", "Leftfield",
    "Lounge", "Math Rock", "New Romantic", "Nu-Breakz", "Post-Punk",
    "Post-Rock", "Psytrance", "Shoegaze", "Space Rock", "Trop Rock",
    "World Music", "Neoclassical", "Audiobook", "Audio Theatre",
    "Neue Deutsche Welle", "Podcast", "Indie Rock", "G-Funk", "Dubstep",
    "Garage Rock", "Psybient")
