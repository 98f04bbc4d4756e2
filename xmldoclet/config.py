"""Validated doclet configuration built from the option matrix."""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from . import options as opts
from .filters import ClassFilter
from .logging import get_logger
from .models import ClassDoc
from .options import OptionMatrix
from .reporting import DiagnosticSink
from .taglets import CustomTag, Taglet, TagletRegistry, parse_tag_definition, register_taglets

DEFAULT_ENCODING = "utf-8"
DEFAULT_FILENAME = "xmldoclet.xml"

logger = get_logger("config")


class ConfigError(RuntimeError):
    """Raised by ``Configuration.from_options`` when the options are invalid."""


@dataclass(frozen=True)
class Configuration:
    """Options for the XML doclet, read-only once built."""

    directory: Path
    multiple_files: bool = False
    use_sub_folders: bool = False
    encoding: str = DEFAULT_ENCODING
    filename: str = DEFAULT_FILENAME
    class_filter: ClassFilter = field(default_factory=ClassFilter)
    taglets: TagletRegistry = field(default_factory=TagletRegistry)

    def __post_init__(self) -> None:
        self.taglets.freeze()

    @classmethod
    def from_options(cls, options: OptionMatrix, reporter: DiagnosticSink) -> "Configuration":
        """Build a configuration, raising ``ConfigError`` instead of returning None."""
        config = ConfigurationBuilder(reporter).build(options)
        if config is None:
            raise ConfigError("Invalid doclet options")
        return config

    @property
    def extends_filter(self) -> Optional[str]:
        return self.class_filter.extends

    @property
    def implements_filter(self) -> Optional[str]:
        return self.class_filter.implements

    @property
    def annotation_filter(self) -> Optional[str]:
        return self.class_filter.annotated

    def has_filter(self) -> bool:
        """Return True when classes must extend, implement or carry a given type."""
        return self.class_filter.has_filter()

    def filter(self, doc: ClassDoc) -> bool:
        """Return True when ``doc`` matches every configured filter."""
        return self.class_filter.should_include(doc)

    def taglet_for_name(self, name: str) -> Optional[Taglet]:
        return self.taglets.taglet_for_name(name)

    def describe(self) -> List[str]:
        """Return a human readable summary of the configuration."""
        lines = [
            f"Output directory: {self.directory}",
            f"Output encoding: {self.encoding}",
        ]
        if self.multiple_files:
            layout = "package subfolders" if self.use_sub_folders else "flat"
            lines.append(f"Output mode: multiple files ({layout})")
        else:
            lines.append(f"Output mode: single file {self.filename}")
        for label, value in (
            ("Extends", self.extends_filter),
            ("Implements", self.implements_filter),
            ("Annotated", self.annotation_filter),
        ):
            if value is not None:
                lines.append(f"{label} filter: {value}")
        lines.append(f"Taglets: {len(self.taglets)}")
        return lines


class ConfigurationBuilder:
    """Validates an option matrix and assembles a ``Configuration``.

    Fatal problems (missing output directory, missing value for a required
    option) are reported as errors and make ``build`` return ``None``.
    Anything else is reported and the offending option is skipped.
    """

    def __init__(self, reporter: DiagnosticSink) -> None:
        self.reporter = reporter

    def build(self, options: OptionMatrix) -> Optional[Configuration]:
        reporter = self.reporter

        multiple_files = opts.has(options, "-multiple")
        use_sub_folders = opts.has(options, "-subfolders")

        directory = self._directory(options)
        if directory is None:
            return None

        encoding: Optional[str] = DEFAULT_ENCODING
        if opts.has(options, "-docencoding"):
            encoding = self._encoding(options)
            if encoding is None:
                return None

        filename = DEFAULT_FILENAME
        if opts.has(options, "-filename"):
            name = opts.get(options, "-filename")
            if name and not multiple_files:
                filename = name
                reporter.notice(f"Using file name: {name}")
            else:
                reporter.warning("'-filename' option ignored")

        class_filter = ClassFilter(
            extends=self._filter_value(options, "-extends", "extending", "superclass"),
            annotated=self._filter_value(options, "-annotated", "annotated", "annotation"),
            implements=self._filter_value(options, "-implements", "implementing", "interface"),
        )

        taglets = TagletRegistry()
        self._custom_tags(options, taglets)
        self._taglets(options, taglets)

        return Configuration(
            directory=directory,
            multiple_files=multiple_files,
            use_sub_folders=use_sub_folders,
            encoding=encoding,
            filename=filename,
            class_filter=class_filter,
            taglets=taglets,
        )

    def _directory(self, options: OptionMatrix) -> Optional[Path]:
        if not opts.has(options, "-d"):
            self.reporter.error("Output directory not specified; use -d <directory>")
            return None
        directory = opts.get(options, "-d")
        if not directory:
            self.reporter.error("Missing value for <directory>, usage:")
            self.reporter.error("-d <directory> Destination directory for output files")
            return None
        self.reporter.notice(f"Output directory: {directory}")
        return Path(directory)

    def _encoding(self, options: OptionMatrix) -> Optional[str]:
        encoding = opts.get(options, "-docencoding")
        if not encoding:
            self.reporter.error("Missing value for <name>, usage:")
            self.reporter.error("-docencoding <name> \t Output encoding name")
            return None
        try:
            resolved = codecs.lookup(encoding).name
        except LookupError:
            self.reporter.error(f"Unsupported output encoding: {encoding}")
            return None
        self.reporter.notice(f"Output encoding: {resolved}")
        return resolved

    def _filter_value(
        self, options: OptionMatrix, option: str, verb: str, what: str
    ) -> Optional[str]:
        if not opts.has(options, option):
            return None
        value = opts.get(options, option)
        if value is None:
            self.reporter.warning(f"'{option}' option ignored - {what} not specified")
            return None
        self.reporter.notice(f"Filtering classes {verb}: {value}")
        return value

    def _custom_tags(self, options: OptionMatrix, taglets: TagletRegistry) -> None:
        for text in opts.get_all(options, "-tag"):
            definition = parse_tag_definition(text)
            logger.debug(
                "Parsed tag %s (scope=%s, title=%s)",
                definition.name,
                definition.scope,
                definition.title,
            )
            # registered handlers keep only the tag name
            taglets[definition.name] = CustomTag(definition.name, enabled=True)
            self.reporter.notice(f"Using Tag {definition.name}")

    def _taglets(self, options: OptionMatrix, taglets: TagletRegistry) -> None:
        if not opts.has(options, "-taglet"):
            return
        classes = opts.get(options, "-taglet")
        if classes is None:
            self.reporter.warning("'-taglet' option ignored - classes not specified")
            return
        register_taglets(classes.split(":"), taglets, self.reporter)


def build_configuration(options: OptionMatrix, reporter: DiagnosticSink) -> Optional[Configuration]:
    """Validate ``options`` and return a configuration, or None on a fatal error."""
    return ConfigurationBuilder(reporter).build(options)


__all__ = [
    "ConfigError",
    "Configuration",
    "ConfigurationBuilder",
    "DEFAULT_ENCODING",
    "DEFAULT_FILENAME",
    "build_configuration",
]
