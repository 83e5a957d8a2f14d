"""
Crawler Store - file-backed storage of structured records
"""

from .codecs import (
    RecordFormat, Codec, YamlCodec, JsonCodec,
    EXTENSION_FORMATS, ALLOWED_EXTENSIONS, FILEMASK,
    format_for, decode, encode,
)
from .record_store import RecordStore, record_stem

__all__ = [
    # Codecs
    "RecordFormat", "Codec", "YamlCodec", "JsonCodec",
    "EXTENSION_FORMATS", "ALLOWED_EXTENSIONS", "FILEMASK",
    "format_for", "decode", "encode",

    # Store
    "RecordStore", "record_stem",
]
