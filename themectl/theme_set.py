"""Theme discovery, loading and cataloging.

A ``ThemeSet`` is built from a folder in one pass: every ``.tmTheme`` file
found anywhere below the folder is parsed and validated, and the themes are
keyed by file stem. A single bad file fails the whole load; no partial
catalog is ever returned.
"""

import os
from contextlib import contextmanager
from pathlib import Path
from types import MappingProxyType
from typing import BinaryIO, Dict, Iterator, List, Mapping, Union

from pydantic import BaseModel, field_validator

from .exceptions import (
    BadIdentifierError,
    CatalogError,
    ParseThemeError,
    SettingsError,
    TraversalError,
)
from .log import get_logger
from .models import Theme
from .settings import SettingsTree, read_plist

logger = get_logger(__name__)

THEME_EXTENSION = ".tmTheme"

PathLike = Union[str, os.PathLike]


class ThemeSet(BaseModel):
    """A catalog of validated themes keyed by identifier."""

    themes: Mapping[str, Theme] = {}

    @field_validator("themes", mode="after")
    @classmethod
    def read_only_themes(cls, v: Mapping[str, Theme]) -> Mapping[str, Theme]:
        """Expose the catalog as a read-only view over a private copy."""
        return MappingProxyType(dict(v))

    def __len__(self) -> int:
        return len(self.themes)

    def __contains__(self, name: object) -> bool:
        return name in self.themes

    def __getitem__(self, name: str) -> Theme:
        return self.themes[name]

    def names(self) -> List[str]:
        """Theme identifiers in sorted order."""
        return sorted(self.themes)

    @staticmethod
    def discover_theme_paths(folder: PathLike, extension: str = THEME_EXTENSION) -> List[Path]:
        """Find all theme files in a folder, recursively.

        Good for enumerating themes before loading one with ``get_theme``.
        Paths are returned sorted, so callers get the same list for the same
        tree.

        Args:
            folder: Root of the tree to search; may itself be a theme file
            extension: File suffix to match, case-sensitively

        Returns:
            Paths of every matching file

        Raises:
            TraversalError: If a directory cannot be read, the root does not
                exist, or a broken symbolic link is found
        """
        root = Path(folder)
        logger.debug("discovering_themes", folder=str(root), extension=extension)

        if root.is_file():
            return [root] if root.suffix == extension else []

        def on_error(error: OSError) -> None:
            location = error.filename if error.filename is not None else root
            raise TraversalError(
                f"Cannot read directory {location}: {error.strerror or error}",
                path=location,
                cause=error,
            ) from error

        paths: List[Path] = []
        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
            current = Path(dirpath)
            for name in dirnames + filenames:
                entry = current / name
                if entry.is_symlink() and not entry.exists():
                    raise TraversalError(f"Broken symbolic link: {entry}", path=entry)
            for name in filenames:
                entry = current / name
                if entry.suffix == extension:
                    paths.append(entry)

        paths.sort()
        logger.debug("discovered_themes", folder=str(root), count=len(paths))
        return paths

    @staticmethod
    @contextmanager
    def read_file(path: PathLike) -> Iterator[BinaryIO]:
        """Open a theme file as a buffered binary stream.

        The file is closed when the ``with`` block exits.

        Raises:
            FileAccessError: If the file cannot be opened
        """
        try:
            stream = open(path, "rb")
        except OSError as e:
            raise CatalogError.lift(e, path) from e
        with stream:
            yield stream

    @classmethod
    def read_plist(cls, path: PathLike) -> SettingsTree:
        """Read a theme file into a settings tree.

        Raises:
            FileAccessError: If the file cannot be opened or read
            DocumentParseError: If the file is not a valid property list
        """
        with cls.read_file(path) as stream:
            try:
                return read_plist(stream)
            except (SettingsError, OSError) as e:
                raise CatalogError.lift(e, path) from e

    @classmethod
    def get_theme(cls, path: PathLike) -> Theme:
        """Load a theme given a path to a ``.tmTheme`` file.

        Args:
            path: Theme file to load

        Returns:
            Validated theme

        Raises:
            FileAccessError: If the file cannot be opened or read
            DocumentParseError: If the file is not a valid property list
            ThemeValidationError: If the document is not a usable theme
        """
        settings = cls.read_plist(path)
        try:
            theme = Theme.parse_settings(settings)
        except ParseThemeError as e:
            raise CatalogError.lift(e, path) from e
        logger.debug("loaded_theme", path=str(path), name=theme.name, rules=len(theme.scopes))
        return theme

    @classmethod
    def load_from_folder(cls, folder: PathLike, extension: str = THEME_EXTENSION) -> "ThemeSet":
        """Load all the themes in a folder.

        Themes are keyed by file stem. When two files share a stem the one
        later in path order replaces the earlier one.

        Args:
            folder: Root of the tree to load
            extension: File suffix identifying theme files

        Returns:
            Catalog holding every theme found

        Raises:
            CatalogError: The first failure encountered; nothing is returned
                for the themes that did load
        """
        paths = cls.discover_theme_paths(folder, extension=extension)
        themes: Dict[str, Theme] = {}
        sources: Dict[str, Path] = {}
        for path in paths:
            identifier = theme_identifier(path)
            themes[identifier] = cls.get_theme(path)
            if identifier in sources:
                logger.warning(
                    "duplicate_theme_identifier",
                    identifier=identifier,
                    replaced=str(sources[identifier]),
                    path=str(path),
                )
            sources[identifier] = path

        logger.info("loaded_theme_set", folder=str(folder), themes=len(themes))
        return cls(themes=themes)

    class Config:
        """Pydantic configuration."""
        frozen = True


def theme_identifier(path: PathLike) -> str:
    """Derive a catalog identifier from a theme path's file stem.

    Raises:
        BadIdentifierError: If the stem is empty or is not valid text
    """
    stem = Path(path).stem
    if not stem:
        raise BadIdentifierError(f"Cannot derive a theme name from {path}", path=path)
    try:
        stem.encode("utf-8")
    except UnicodeEncodeError as e:
        raise BadIdentifierError(
            f"Theme file name is not valid text: {os.fsdecode(path)!r}",
            path=path,
            cause=e,
        ) from e
    return stem
