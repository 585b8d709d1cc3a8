"""Formatted text log writer.

Renders each entry through the configured template and appends it to a single
file. The file, its directory, and a descriptive header are created lazily on
the first entry; an existing file is appended to without a new header.
"""

import contextlib
import logging
import os
from dataclasses import replace
from datetime import datetime, timezone

from textlog.config import WriterConfig, get_default_log_directory
from textlog.errors import (
    ConfigurationError,
    DirectoryCreationError,
    EntryWriteError,
    FileOpenError,
    HeaderWriteError,
    InvalidEntryError,
)
from textlog.folders import create_directory_tree
from textlog.priorities import priority_label
from textlog.template import compile_template, fields_line, parse_fields, render

logger = logging.getLogger(__name__)

# Keeps the file inert if a PHP-capable web server is asked to serve it.
GUARD_LINES = ("#", "#<?php die('Forbidden.'); ?>")

# Request signals checked, in order, when an entry has no client address.
CLIENT_ADDRESS_SOURCES = ("remote_addr", "forwarded_for", "client_ip")


def _to_utc(value) -> datetime:
    if isinstance(value, str):
        if value.endswith(("Z", "z")):
            value = value[:-1] + "+00:00"
        value = datetime.fromisoformat(value)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class FormattedTextWriter:
    def __init__(self, config: WriterConfig, priority_labels=None, make_dirs=None,
                 time_func=None):
        if not config.file_path:
            config = replace(config, file_path=get_default_log_directory())
        if not config.file_name:
            raise ConfigurationError("Log file name must not be empty")

        self._config = config
        self._priority_label = priority_labels or priority_label
        self._make_dirs = make_dirs or create_directory_tree
        self._time_func = time_func or (lambda: datetime.now(timezone.utc))
        self._path = config.path
        self._file = None
        self._fields = parse_fields(config.entry_format)
        self._segments = compile_template(config.entry_format)

    @property
    def path(self) -> str:
        return self._path

    @property
    def fields(self) -> tuple[str, ...]:
        return self._fields

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def generate_file_header(self) -> str:
        head = []
        if not self._config.suppress_guard_header:
            head.extend(GUARD_LINES)
        created = _to_utc(self._time_func())
        head.append("#Date: " + created.strftime("%Y-%m-%d %H:%M:%S") + " UTC")
        head.append("")
        head.append("#Fields: " + fields_line(self._config.entry_format))
        head.append("")
        return "\n".join(head)

    def _init_file(self):
        """Open the log file for appending, creating it and its header if missing."""
        if self._file is not None:
            return

        head = None
        if not os.path.isfile(self._path):
            directory = os.path.dirname(self._path)
            if self._make_dirs(directory) is False:
                raise DirectoryCreationError(f"Cannot create log directory {directory}")
            head = self.generate_file_header()

        try:
            self._file = open(self._path, "a", encoding="utf-8")
        except OSError as e:
            raise FileOpenError(f"Cannot open log file {self._path} for writing: {e}") from e

        if head is None:
            logger.debug("Appending to existing log file %s", self._path)
            return

        try:
            self._file.write(head)
            if self._config.auto_flush:
                self._file.flush()
        except (OSError, ValueError) as e:
            with contextlib.suppress(OSError, ValueError):
                self.close()
            raise HeaderWriteError(f"Cannot write header to log file {self._path}: {e}") from e
        logger.info("Created log file %s", self._path)

    def _backfill_client_ip(self, entry, context):
        if getattr(entry, "client_ip", None) or context is None:
            return
        for source in CLIENT_ADDRESS_SOURCES:
            value = getattr(context, source, None)
            if value:
                entry.client_ip = value
                return

    def _normalize_dates(self, entry):
        # A 10-character date plus a time means the entry was already normalised.
        date = entry.date
        if isinstance(date, str) and len(date) == 10 and getattr(entry, "time", None) is not None:
            return
        try:
            ts = _to_utc(date)
        except (TypeError, ValueError, AttributeError) as e:
            raise InvalidEntryError(f"Cannot interpret entry date {date!r}: {e}") from e
        entry.datetime = ts.isoformat(timespec="seconds")
        entry.time = ts.strftime("%H:%M:%S")
        entry.date = ts.strftime("%Y-%m-%d")

    def _field_values(self, entry) -> dict[str, str]:
        values = {
            name.upper(): str(value)
            for name, value in vars(entry).items()
            if value is not None
        }
        label = self._priority_label(getattr(entry, "priority", None))
        if label is None:
            values.pop("PRIORITY", None)
        else:
            values["PRIORITY"] = label
        return values

    def add_entry(self, entry, context=None) -> bool:
        """Render *entry* and append it to the log file.

        The entry is updated in place: ``date``, ``time`` and ``datetime`` are
        normalised to UTC strings and ``client_ip`` may be filled from *context*.
        """
        self._init_file()

        self._backfill_client_ip(entry, context)
        self._normalize_dates(entry)

        line = render(self._segments, self._field_values(entry))

        try:
            self._file.write(line + "\n")
            if self._config.auto_flush:
                self._file.flush()
        except (OSError, ValueError) as e:
            raise EntryWriteError(f"Cannot write to log file {self._path}: {e}") from e
        return True

    def close(self):
        """Release the file handle. Safe to call more than once."""
        if self._file is not None:
            try:
                self._file.close()
            finally:
                self._file = None

    dispose = close
