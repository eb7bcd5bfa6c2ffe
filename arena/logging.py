"""
Arena logging.

Two channels:

- Log lines: ``get_logger(module)`` returns a cached logger that prints
  ``[module] LEVEL: message`` to stdout. Levels can be set globally or per
  module, from the environment or with configure_logging().
- Session records: ``emit_record(module, record)`` hands a JSON-serializable
  dict to whatever sink is registered for that module. FileSink appends
  them to ``<session>_<module>.jsonl``; NullSink drops them.

Environment:
    ARENA_LOG_LEVEL=DEBUG                  default level
    ARENA_LOG_<MODULE>=TRACE               level for one module
    ARENA_LOG_DIR=~/arena-logs             where FileSink writes
    ARENA_LOGGING_<MODULE>_<KEY>=value     sink settings, e.g.
    ARENA_LOGGING_SESSION_ENABLED=true     record play sessions

Usage:
    from arena.logging import get_logger, emit_record

    log = get_logger('game_mode')
    log.info("Level %d loaded", 3)
    emit_record('session', {'type': 'game_over', 'score': 1200})
"""

import json
import os
import sys
import time
import traceback
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100

    @classmethod
    def parse(cls, name: str) -> 'LogLevel':
        """Level from a name such as 'debug' or 'WARN'. Unknown names give INFO."""
        name = name.strip().upper()
        if name == 'WARN':
            return cls.WARNING
        return cls.__members__.get(name, cls.INFO)

    @property
    def label(self) -> str:
        """Name printed in log lines."""
        return {LogLevel.WARNING: 'WARN', LogLevel.CRITICAL: 'CRIT'}.get(self, self.name)


# =============================================================================
# Settings
# =============================================================================

def _coerce(value: str) -> Any:
    """Turn an environment string into a bool, int, float or str."""
    lowered = value.strip().lower()
    if lowered in ('true', 'yes', 'on', '1'):
        return True
    if lowered in ('false', 'no', 'off', '0'):
        return False
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            continue
    return value


@dataclass
class LoggingSettings:
    """Resolved logging configuration."""

    default_level: LogLevel = LogLevel.INFO
    module_levels: Dict[str, LogLevel] = field(default_factory=dict)
    log_dir: Optional[str] = None
    sinks: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> 'LoggingSettings':
        settings = cls()
        for key, value in environ.items():
            if key == 'ARENA_LOG_LEVEL':
                settings.default_level = LogLevel.parse(value)
            elif key == 'ARENA_LOG_DIR':
                settings.log_dir = value
            elif key.startswith('ARENA_LOGGING_'):
                module, _, option = key[len('ARENA_LOGGING_'):].lower().partition('_')
                if module and option:
                    settings.sinks.setdefault(module, {})[option] = _coerce(value)
            elif key.startswith('ARENA_LOG_'):
                settings.module_levels[key[len('ARENA_LOG_'):].lower()] = LogLevel.parse(value)
        return settings

    def level_for(self, module: str) -> LogLevel:
        return self.module_levels.get(module, self.default_level)

    def sink_options(self, module: str) -> Dict[str, Any]:
        return self.sinks.get(module.lower(), {})

    def resolve_log_dir(self) -> Path:
        """Directory for record files.

        Order: configured/ARENA_LOG_DIR, then the per-user data directory
        (~/Library/Application Support on macOS, %APPDATA% on Windows,
        $XDG_DATA_HOME or ~/.local/share elsewhere).
        """
        if self.log_dir:
            return Path(self.log_dir).expanduser()

        home = Path.home()
        if sys.platform == 'darwin':
            base = home / 'Library' / 'Application Support' / 'Arena'
        elif sys.platform == 'win32':
            base = Path(os.environ.get('APPDATA', home)) / 'Arena'
        else:
            base = Path(os.environ.get('XDG_DATA_HOME', home / '.local' / 'share')) / 'arena'
        return base / 'logs'


_settings = LoggingSettings.from_env(os.environ)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """Override levels (and optionally the record directory) at runtime.

    Args:
        level: Default level for every module
        modules: Per-module levels, e.g. {'audio': 'DEBUG'}
        log_dir: Directory for FileSink output
    """
    _settings.default_level = LogLevel.parse(level)
    for module, module_level in (modules or {}).items():
        _settings.module_levels[module.lower()] = LogLevel.parse(module_level)
    if log_dir is not None:
        _settings.log_dir = log_dir


# =============================================================================
# Loggers
# =============================================================================

class ArenaLogger:
    """Prints leveled messages for one module.

    The level is looked up on every call so configure_logging() also
    affects loggers handed out earlier.
    """

    def __init__(self, module: str):
        self.module = module
        self._key = module.lower().replace('.', '_').replace('/', '_')

    @property
    def level(self) -> LogLevel:
        return _settings.level_for(self._key)

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _write(self, level: LogLevel, msg: str, args: tuple) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {level.label}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self._write(LogLevel.TRACE, msg, args)

    def debug(self, msg: str, *args) -> None:
        self._write(LogLevel.DEBUG, msg, args)

    def info(self, msg: str, *args) -> None:
        self._write(LogLevel.INFO, msg, args)

    def warning(self, msg: str, *args) -> None:
        self._write(LogLevel.WARNING, msg, args)

    def error(self, msg: str, *args) -> None:
        self._write(LogLevel.ERROR, msg, args)

    def critical(self, msg: str, *args) -> None:
        self._write(LogLevel.CRITICAL, msg, args)

    def exception(self, msg: str, *args) -> None:
        """ERROR line followed by the active traceback, one line each."""
        self._write(LogLevel.ERROR, msg, args)
        if sys.exc_info()[0] is None:
            return
        for line in traceback.format_exc().rstrip().splitlines():
            self._write(LogLevel.ERROR, line, ())


@lru_cache(maxsize=64)
def get_logger(module: str) -> ArenaLogger:
    """Shared logger for a module name such as 'game_mode' or 'audio'."""
    return ArenaLogger(module)


# =============================================================================
# Session records
# =============================================================================

class LogSink(ABC):
    """Destination for structured records."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass


class NullSink(LogSink):
    """Accepts records and discards them."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def close(self) -> None:
        pass


class FileSink(LogSink):
    """Appends records as JSON Lines, one file per module.

    Each file opens with a ``session_start`` line and is closed with a
    ``session_end`` line. Records without a ``wall_time`` get one.

    Args:
        log_dir: Output directory (default: LoggingSettings.resolve_log_dir())
        session_name: File name prefix (default: start timestamp)
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self._log_dir = Path(log_dir).expanduser() if log_dir else None
        self.session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._streams: Dict[str, TextIO] = {}
        self._paths: Dict[str, Path] = {}

    @property
    def log_paths(self) -> Dict[str, Path]:
        """Files written so far, by module."""
        return dict(self._paths)

    def _stream(self, module: str) -> TextIO:
        stream = self._streams.get(module)
        if stream is None:
            log_dir = self._log_dir or _settings.resolve_log_dir()
            log_dir.mkdir(parents=True, exist_ok=True)
            path = log_dir / f"{self.session_name}_{module}.jsonl"
            stream = open(path, 'a', encoding='utf-8')
            self._streams[module] = stream
            self._paths[module] = path
            self._write_line(stream, {
                'type': 'session_start',
                'module': module,
                'session': self.session_name,
                'wall_time': time.time(),
            })
        return stream

    @staticmethod
    def _write_line(stream: TextIO, record: Dict[str, Any]) -> None:
        stream.write(json.dumps(record) + "\n")

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        record = {'wall_time': time.time(), **record}
        self._write_line(self._stream(module), record)

    def close(self) -> None:
        for module, stream in self._streams.items():
            self._write_line(stream, {
                'type': 'session_end',
                'module': module,
                'wall_time': time.time(),
            })
            stream.close()
        self._streams.clear()


_sinks: Dict[str, LogSink] = {}


def create_sink(module: str, session_name: Optional[str] = None) -> LogSink:
    """FileSink if ARENA_LOGGING_<MODULE>_ENABLED is set, else NullSink.

    ARENA_LOGGING_<MODULE>_DIR overrides the output directory.
    """
    options = _settings.sink_options(module)
    if not options.get('enabled', False):
        return NullSink()
    return FileSink(log_dir=options.get('dir'), session_name=session_name)


def register_sink(module: str, sink: LogSink) -> None:
    _sinks[module] = sink


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """Send a record to the module's sink.

    Returns:
        False if no sink is registered for the module
    """
    sink = _sinks.get(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()
