"""Schema-validated JSON file stores.

A :class:`FileStore` binds a file inside an application's data directory to
a schema and a set of default values. Reads always yield schema-conformant
data: content that is not valid JSON, or does not satisfy the schema, is
replaced on disk by the defaults, which are then returned. This recovery is
destructive. The previous content is lost unless ``backup_corrupt`` is
enabled, in which case it is copied to ``<file>.corrupt`` first.

Writes and updates validate before touching disk and raise
:class:`~jsonfs.errors.ValidationError` on failure. ``OSError`` is never
caught.

Example
-------
>>> fs = create_jsonfs("my-app")
>>> settings = fs.create_file_store(
...     "settings.json",
...     schema=Settings,
...     default_values=Settings(theme="light"),
... )
>>> await settings.update({"theme": "dark"})
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel
from pydantic_core import to_jsonable_python

from .errors import ParseError, ValidationError
from .filesystem import FileSystem, LocalFileSystem
from .paths import PlatformInfo, resolve_app_data_dir, resolve_file_path
from .schema import Schema, as_schema
from .serialization import JsonOptions, from_json_text, to_json_text
from .utils.deep_merge import deep_merge

logger = logging.getLogger(__name__)

T = TypeVar("T")

CORRUPT_SUFFIX = ".corrupt"


def _patch_tree(patch: Any) -> dict[str, Any]:
    """Return ``patch`` as a plain JSON tree suitable for :func:`deep_merge`."""

    if isinstance(patch, BaseModel):
        return patch.model_dump(mode="json", exclude_unset=True)
    if isinstance(patch, Mapping):
        return to_jsonable_python(dict(patch))
    raise TypeError(f"update() expects a mapping or pydantic model, got {type(patch).__name__}")


@dataclass(frozen=True)
class FileStore(Generic[T]):
    """Handle for one schema-validated JSON file."""

    app_name: str
    file_name: str
    schema: Schema[T]
    default_values: T
    json_options: JsonOptions = field(default_factory=JsonOptions)
    backup_corrupt: bool = False
    platform: PlatformInfo = field(default_factory=PlatformInfo.from_environment)
    fs: FileSystem = field(default_factory=LocalFileSystem, repr=False)
    path: Path = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "schema", as_schema(self.schema))
        object.__setattr__(
            self, "path", resolve_file_path(self.app_name, self.file_name, self.platform)
        )

    async def read(self) -> T:
        """Return the validated file content, recovering to defaults on failure."""

        _, value = await self._load()
        return value

    async def write(self, data: T) -> None:
        """Validate ``data`` and replace the file content with it."""

        validated = self.schema.validate(data)
        tree = self.schema.dump(validated)
        # the stored form must itself read back as valid
        self.schema.validate(tree)
        text = self._encode(tree)
        await self._ensure_file()
        await self._write_text(text)

    async def update(self, patch: Any) -> T:
        """Deep-merge ``patch`` onto the current content and persist the result.

        ``patch`` is a mapping or a pydantic model; for a model only fields
        that were explicitly set take part in the merge. The merge starts
        from the JSON found on disk, so keys the schema does not know about
        are kept. Returns the validated merged value. If it fails validation
        the file keeps the content :meth:`read` left there.
        """

        current, _ = await self._load()
        if not isinstance(current, Mapping):
            raise TypeError(
                f"update() requires object content in {self.path}, got {type(current).__name__}"
            )
        merged = deep_merge(current, _patch_tree(patch))
        validated = self.schema.validate(merged)
        await self._write_text(self._encode(merged))
        return validated

    async def reset(self) -> T:
        """Overwrite the file with the default values and return them."""

        await self.fs.ensure_dir(self.path.parent)
        return await self._restore_defaults()

    async def _load(self) -> tuple[Any, T]:
        """Return the decoded on-disk tree and its validated value."""

        await self._ensure_file()
        text = await self.fs.read_text(self.path)
        try:
            tree = from_json_text(text)
            return tree, self.schema.validate(tree)
        except (ParseError, ValidationError) as exc:
            logger.warning("Restoring defaults for %s: %s", self.path, exc)
            if self.backup_corrupt:
                await self._backup(text)
            value = await self._restore_defaults()
            return self.schema.dump(value), value

    async def _ensure_file(self) -> None:
        if await self.fs.exists(self.path):
            return
        await self.fs.ensure_dir(self.path.parent)
        await self._write_value(self.default_values)
        logger.info("Created %s with default values", self.path)

    async def _restore_defaults(self) -> T:
        await self._write_value(self.default_values)
        return self.default_values

    async def _backup(self, text: str) -> None:
        backup = self.path.with_name(self.path.name + CORRUPT_SUFFIX)
        await self.fs.write_text(backup, text)
        logger.info("Saved unreadable content of %s to %s", self.path, backup)

    def _encode(self, tree: Any) -> str:
        try:
            return to_json_text(tree, self.json_options)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"value cannot be stored as JSON: {exc}") from exc

    async def _write_value(self, value: T) -> None:
        await self._write_text(self._encode(self.schema.dump(value)))

    async def _write_text(self, text: str) -> None:
        await self.fs.write_text(self.path, text)
        logger.debug("Wrote %d characters to %s", len(text), self.path)


@dataclass(frozen=True)
class JsonFs:
    """Factory for :class:`FileStore` handles of a single application."""

    app_name: str
    platform: PlatformInfo = field(default_factory=PlatformInfo.from_environment)
    fs: FileSystem = field(default_factory=LocalFileSystem, repr=False)

    @property
    def app_dir(self) -> Path:
        return resolve_app_data_dir(self.app_name, self.platform)

    def create_file_store(
        self,
        file_name: str,
        schema: Any,
        default_values: T,
        json_options: Optional[JsonOptions] = None,
        backup_corrupt: bool = False,
    ) -> FileStore[T]:
        """Return a store for ``file_name`` validated by ``schema``.

        ``schema`` may be a :class:`~jsonfs.schema.Schema` or any type
        pydantic can validate.
        """

        return FileStore(
            app_name=self.app_name,
            file_name=file_name,
            schema=as_schema(schema),
            default_values=default_values,
            json_options=json_options or JsonOptions(),
            backup_corrupt=backup_corrupt,
            platform=self.platform,
            fs=self.fs,
        )


def create_jsonfs(
    app_name: str,
    platform: Optional[PlatformInfo] = None,
    fs: Optional[FileSystem] = None,
) -> JsonFs:
    """Create a :class:`JsonFs` factory for ``app_name``.

    ``platform`` defaults to the running interpreter's platform and
    environment, captured once here.
    """

    return JsonFs(
        app_name=app_name,
        platform=platform or PlatformInfo.from_environment(),
        fs=fs or LocalFileSystem(),
    )
