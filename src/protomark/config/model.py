# topmark:header:start
#
#   project      : ProtoMark
#   file         : model.py
#   file_relpath : src/protomark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot consumed by the parser and CLI.
    - `MutableConfig`: a mutable builder used while merging sources; it can be
      frozen into `Config` and thawed back for edits.

Merge order (later wins): runtime defaults, ``[tool.protomark]`` in
``pyproject.toml``, ``protomark.toml``, explicit ``--config`` files, CLI overrides.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from protomark.config.keys import Toml
from protomark.config.loaders import (
    extract_tool_section,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
    unknown_keys,
)
from protomark.config.logging import get_logger
from protomark.constants import (
    DEFAULT_INDENT,
    DEFAULT_MARK_PREFIX,
    PROTOMARK_TOML_NAME,
    PYPROJECT_TOML_NAME,
)

if TYPE_CHECKING:
    from protomark.config.loaders import TomlTable
    from protomark.config.logging import ProtomarkLogger

# Generic mapping accepted for CLI overrides (Click params or plain dicts).
ArgsLike = Mapping[str, Any]

logger: ProtomarkLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for ProtoMark.

    Attributes:
        indent (str): Indentation placed before declaration and selection markers.
        mark_prefix (str): Text emitted before each conformance label.
        extension_separator (bool): Keep the blank separator line for extensions
            instead of trimming it.
        config_files (tuple[Path | str, ...]): Sources merged into this snapshot.
    """

    indent: str = DEFAULT_INDENT
    mark_prefix: str = DEFAULT_MARK_PREFIX
    extension_separator: bool = False
    config_files: tuple[Path | str, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Return the configuration as a TOML-shaped dict."""
        return {
            Toml.SECTION_FORMATTING: {
                Toml.KEY_INDENT: self.indent,
                Toml.KEY_MARK_PREFIX: self.mark_prefix,
                Toml.KEY_EXTENSION_SEPARATOR: self.extension_separator,
            },
        }

    def to_toml(self) -> str:
        """Render the configuration as TOML text."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            indent=self.indent,
            mark_prefix=self.mark_prefix,
            extension_separator=self.extension_separator,
            config_files=list(self.config_files),
        )


DEFAULT_CONFIG: Config = Config()


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used while loading and merging sources.

    Fields left as ``None`` are "unset" and do not override lower layers when
    merged; `freeze` fills them with runtime defaults.
    """

    indent: str | None = None
    mark_prefix: str | None = None
    extension_separator: bool | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    def freeze(self) -> Config:
        """Validate this builder and return an immutable `Config`.

        Raises:
            ValueError: If the indent contains anything but spaces and tabs, or the
                mark prefix is empty.
        """
        indent: str = DEFAULT_INDENT if self.indent is None else self.indent
        mark_prefix: str = DEFAULT_MARK_PREFIX if self.mark_prefix is None else self.mark_prefix

        if indent.strip(" \t"):
            raise ValueError(f"Invalid indent {indent!r}: only spaces and tabs are allowed.")
        if not mark_prefix.strip():
            raise ValueError("Invalid mark_prefix: must not be empty.")

        return Config(
            indent=indent,
            mark_prefix=mark_prefix,
            extension_separator=bool(self.extension_separator),
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        draft: MutableConfig = cls.from_toml_dict(load_defaults_dict())
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableConfig:
        """Build a builder from a TOML-shaped dict.

        Unknown keys and values of the wrong type are logged and ignored.
        """
        for key in unknown_keys(data):
            logger.warning("Ignoring unknown configuration key: %s", key)

        formatting: Any = data.get(Toml.SECTION_FORMATTING, {})
        if not isinstance(formatting, dict):
            logger.warning("Ignoring [%s]: expected a table", Toml.SECTION_FORMATTING)
            formatting = {}

        draft = cls()
        indent: Any = formatting.get(Toml.KEY_INDENT)
        if isinstance(indent, str):
            draft.indent = indent
        elif indent is not None:
            logger.warning("Ignoring %s: expected a string, got %r", Toml.KEY_INDENT, indent)

        mark_prefix: Any = formatting.get(Toml.KEY_MARK_PREFIX)
        if isinstance(mark_prefix, str):
            draft.mark_prefix = mark_prefix
        elif mark_prefix is not None:
            logger.warning(
                "Ignoring %s: expected a string, got %r", Toml.KEY_MARK_PREFIX, mark_prefix
            )

        separator: Any = formatting.get(Toml.KEY_EXTENSION_SEPARATOR)
        if isinstance(separator, bool):
            draft.extension_separator = separator
        elif separator is not None:
            logger.warning(
                "Ignoring %s: expected a boolean, got %r",
                Toml.KEY_EXTENSION_SEPARATOR,
                separator,
            )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from ``protomark.toml`` or ``pyproject.toml``.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The builder, or None when a ``pyproject.toml``
                has no ``[tool.protomark]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            section: TomlTable | None = extract_tool_section(data)
            if section is None:
                logger.debug("No [tool.protomark] section in %s", path)
                return None
            data = section

        draft: MutableConfig = cls.from_toml_dict(data)
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files in ``start``, ``pyproject.toml`` before ``protomark.toml``."""
        found: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, PROTOMARK_TOML_NAME):
            candidate: Path = start / name
            if candidate.is_file():
                found.append(candidate)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        extra_config_files: list[Path] | None = None,
        no_config: bool = False,
        cwd: Path | None = None,
    ) -> MutableConfig:
        """Merge defaults, discovered files and explicit config files.

        Args:
            extra_config_files (list[Path] | None): Files passed with ``--config``.
            no_config (bool): Skip discovery in the working directory.
            cwd (Path | None): Directory to discover config files in (default: CWD).

        Returns:
            MutableConfig: The merged builder (not yet frozen).
        """
        merged: MutableConfig = cls.from_defaults()

        sources: list[Path] = []
        if not no_config:
            sources.extend(cls.discover_local_config_files(cwd or Path.cwd()))
        sources.extend(extra_config_files or [])

        for path in sources:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                merged = merged.merge_with(layer)
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where fields set in ``other`` override this one."""
        return MutableConfig(
            indent=other.indent if other.indent is not None else self.indent,
            mark_prefix=other.mark_prefix if other.mark_prefix is not None else self.mark_prefix,
            extension_separator=(
                other.extension_separator
                if other.extension_separator is not None
                else self.extension_separator
            ),
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI overrides (``indent``, ``mark_prefix``) in place and return self."""
        indent: Any = args.get("indent")
        if indent is not None:
            self.indent = str(indent)
        mark_prefix: Any = args.get("mark_prefix")
        if mark_prefix is not None:
            self.mark_prefix = str(mark_prefix)
        return self
