from ..errors import InvalidMetadataPath
from .keys import (
    PACK_METADATA_PATH,
    MetadataPath,
    as_metadata_path,
    format_metadata_path,
    parse_dotted_key,
)
from .paths import PATH_MISSING, TomlScalar, TomlValue, lookup

__all__ = [
    "InvalidMetadataPath",
    "MetadataPath",
    "PACK_METADATA_PATH",
    "PATH_MISSING",
    "TomlScalar",
    "TomlValue",
    "as_metadata_path",
    "format_metadata_path",
    "lookup",
    "parse_dotted_key",
]
