"""Schema-validated JSON files in per-application data directories."""

from .errors import JsonFsError, ParseError, ValidationError
from .filesystem import FileSystem, LocalFileSystem
from .paths import PlatformInfo, resolve_app_data_dir
from .schema import PydanticSchema, Schema, as_schema
from .serialization import JsonOptions
from .store import FileStore, JsonFs, create_jsonfs

__all__ = [
    "FileStore",
    "FileSystem",
    "JsonFs",
    "JsonFsError",
    "JsonOptions",
    "LocalFileSystem",
    "ParseError",
    "PlatformInfo",
    "PydanticSchema",
    "Schema",
    "ValidationError",
    "as_schema",
    "create_jsonfs",
    "resolve_app_data_dir",
]
