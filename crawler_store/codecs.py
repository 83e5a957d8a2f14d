"""
Record codecs: convert between record file contents and Python values

The serialization format of a record is fully determined by its file
extension. Writes always use YAML.
"""

import json
import re
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import PurePosixPath
from typing import Any, Dict, Tuple, Union

import yaml

from crawler_core.errors import UnsupportedFormatError
from crawler_core.utils import DateTimeEncoder


class RecordFormat(Enum):
    YAML = "yaml"
    JSON = "json"


# Ordered by precedence when several files share a base name
EXTENSION_FORMATS: Dict[str, RecordFormat] = {
    "yml": RecordFormat.YAML,
    "yaml": RecordFormat.YAML,
    "json": RecordFormat.JSON,
}

ALLOWED_EXTENSIONS: Tuple[str, ...] = tuple(EXTENSION_FORMATS)
WRITE_EXTENSION = "yml"
FILEMASK = re.compile(r"[.](" + "|".join(ALLOWED_EXTENSIONS) + r")$")


class Codec(ABC):
    """Decode/encode capability for one record format"""

    @abstractmethod
    def decode(self, contents: Union[str, bytes]) -> Any:
        pass

    @abstractmethod
    def encode(self, value: Any) -> str:
        pass


class YamlCodec(Codec):

    def decode(self, contents: Union[str, bytes]) -> Any:
        return yaml.safe_load(contents)

    def encode(self, value: Any) -> str:
        return yaml.safe_dump(value, default_flow_style=False, allow_unicode=True, sort_keys=False)


class JsonCodec(Codec):

    def decode(self, contents: Union[str, bytes]) -> Any:
        if isinstance(contents, bytes):
            contents = contents.decode("utf-8")
        return json.loads(contents)

    def encode(self, value: Any) -> str:
        return json.dumps(value, indent=2, ensure_ascii=False, cls=DateTimeEncoder)


_CODECS: Dict[RecordFormat, Codec] = {
    RecordFormat.YAML: YamlCodec(),
    RecordFormat.JSON: JsonCodec(),
}


def extension_of(filename: str) -> str:
    """Lowercase extension of a file name without the dot ('' if none)"""
    return PurePosixPath(str(filename)).suffix[1:].lower()


def format_for(filename: str) -> RecordFormat:
    """
    Get the record format for a file name

    Raises:
        UnsupportedFormatError: if the extension has no registered codec
    """
    record_format = EXTENSION_FORMATS.get(extension_of(filename))
    if record_format is None:
        raise UnsupportedFormatError(filename)
    return record_format


def codec_for(record_format: RecordFormat) -> Codec:
    return _CODECS[record_format]


def decode(filename: str, contents: Union[str, bytes]) -> Any:
    """Decode file contents according to the file name's extension"""
    return codec_for(format_for(filename)).decode(contents)


def encode(value: Any) -> str:
    """Encode a value for writing; always YAML"""
    return codec_for(RecordFormat.YAML).encode(value)
