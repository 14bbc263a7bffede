"""
Stonefall logging.

Console logging with per-module levels, plus structured records (game over,
restarts) that can be routed to JSONL files for later analysis.

Usage:
    from stonefall.logging import get_logger

    log = get_logger('stone_shooter')
    log.debug("Spawned stone at x=%d", x)

    from stonefall.logging import emit_record
    emit_record('session', {'event': 'game_over', 'tick': 1200})

Environment:
    STONEFALL_LOG_LEVEL=DEBUG                 # default level
    STONEFALL_LOG_<MODULE>=TRACE              # per-module level
    STONEFALL_LOG_DIR=/tmp/stonefall          # where record files go
    STONEFALL_LOGGING_<MODULE>_ENABLED=true   # write <module> records to disk
"""

import json
import os
import time
import traceback
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, TextIO


class LogLevel(IntEnum):
    """Console levels; numeric values line up with the stdlib logging module."""
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


_LEVEL_NAMES = {
    'TRACE': LogLevel.TRACE,
    'DEBUG': LogLevel.DEBUG,
    'INFO': LogLevel.INFO,
    'WARN': LogLevel.WARNING,
    'WARNING': LogLevel.WARNING,
    'ERROR': LogLevel.ERROR,
    'CRITICAL': LogLevel.CRITICAL,
    'OFF': LogLevel.OFF,
}


def _level_from_string(name: str) -> LogLevel:
    """Unknown names fall back to INFO."""
    return _LEVEL_NAMES.get(name.strip().upper(), LogLevel.INFO)


_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},   # module key -> LogLevel
    'log_dir': None,       # None = STONEFALL_LOG_DIR or the user data dir
    'modules': {},         # module -> {'enabled': bool, ...} for records
}


# =============================================================================
# Structured records
# =============================================================================

class LogSink(ABC):
    """Destination for structured records."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """Write one JSON-serializable record."""
        pass

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


class NullSink(LogSink):
    """Drops every record."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass


class FileSink(LogSink):
    """One JSONL file per module, bracketed by header and footer lines.

    Files are named `<session>_<module>.jsonl` and opened on first use.

    Args:
        log_dir: Target directory (default: get_log_dir())
        session_name: File prefix (default: start timestamp)
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, TextIO] = {}

    def _path(self, module: str) -> Path:
        if self._log_dir is None:
            self._log_dir = Path(get_log_dir())
        return self._log_dir / f"{self._session_name}_{module}.jsonl"

    def _write(self, module: str, record: Dict[str, Any]) -> None:
        self._files[module].write(json.dumps(record) + "\n")

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        if module not in self._files:
            path = self._path(module)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._files[module] = open(path, 'a')
            self._write(module, {
                'type': 'header',
                'module': module,
                'session_name': self._session_name,
                'start_time': time.time(),
            })
        self._write(module, {'wall_time': time.time(), **record})

    def flush(self) -> None:
        for handle in self._files.values():
            handle.flush()

    def close(self) -> None:
        for module in list(self._files):
            self._write(module, {'type': 'footer', 'module': module, 'end_time': time.time()})
            self._files.pop(module).close()

    @property
    def log_paths(self) -> Dict[str, Path]:
        """Paths of the files opened so far, by module."""
        return {module: self._path(module) for module in self._files}


_sinks: Dict[str, LogSink] = {}


def register_sink(module: str, sink: LogSink) -> None:
    """Route records for `module` to `sink`, replacing any previous sink."""
    previous = _sinks.get(module)
    if previous is not None and previous is not sink:
        previous.close()
    _sinks[module] = sink


def get_sink(module: str) -> Optional[LogSink]:
    return _sinks.get(module)


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """Send a record to the module's sink.

    Returns:
        False when no sink is registered for the module
    """
    sink = _sinks.get(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close and unregister every sink."""
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()


def get_module_config(module: str) -> Dict[str, Any]:
    """Record settings for a module (from STONEFALL_LOGGING_<MODULE>_*)."""
    return _config['modules'].get(module.lower(), {})


def create_sink(module: str, session_name: Optional[str] = None) -> LogSink:
    """FileSink if records are enabled for the module, else NullSink."""
    if get_module_config(module).get('enabled', False):
        return FileSink(session_name=session_name)
    return NullSink()


def get_log_dir() -> str:
    """Directory for record files.

    Uses the configured directory, then STONEFALL_LOG_DIR, then
    $XDG_DATA_HOME/stonefall/logs (~/.local/share by default).
    """
    configured = _config['log_dir'] or os.environ.get('STONEFALL_LOG_DIR')
    if configured:
        return str(Path(configured).expanduser())

    data_home = os.environ.get('XDG_DATA_HOME') or str(Path.home() / '.local' / 'share')
    return str(Path(data_home) / 'stonefall' / 'logs')


# =============================================================================
# Configuration
# =============================================================================

def _parse_env_value(value: str) -> Any:
    """Interpret an env string as bool, int, float or str, in that order."""
    lowered = value.strip().lower()
    if lowered in ('true', '1', 'yes', 'on'):
        return True
    if lowered in ('false', '0', 'no', 'off'):
        return False
    for convert in (int, float):
        try:
            return convert(value)
        except ValueError:
            continue
    return value


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """Set levels programmatically.

    Args:
        level: Default level name
        modules: Module name -> level name overrides
        log_dir: Directory for record files
    """
    _config['default_level'] = _level_from_string(level)
    for module, module_level in (modules or {}).items():
        _config['module_levels'][_module_key(module)] = _level_from_string(module_level)
    if log_dir is not None:
        _config['log_dir'] = log_dir


def _load_env_config() -> None:
    """Apply STONEFALL_LOG_* and STONEFALL_LOGGING_* variables."""
    for key, value in os.environ.items():
        if key == 'STONEFALL_LOG_LEVEL':
            _config['default_level'] = _level_from_string(value)
        elif key == 'STONEFALL_LOG_DIR':
            _config['log_dir'] = value
        elif key.startswith('STONEFALL_LOG_'):
            module = key[len('STONEFALL_LOG_'):]
            _config['module_levels'][_module_key(module)] = _level_from_string(value)
        elif key.startswith('STONEFALL_LOGGING_'):
            # STONEFALL_LOGGING_SESSION_ENABLED -> modules['session']['enabled']
            module, _, setting = key[len('STONEFALL_LOGGING_'):].lower().partition('_')
            if module and setting:
                _config['modules'].setdefault(module, {})[setting] = _parse_env_value(value)


def _module_key(module: str) -> str:
    return module.lower().replace('.', '_').replace('/', '_')


_load_env_config()


# =============================================================================
# Console logger
# =============================================================================

class StonefallLogger:
    """Prints `[module] LEVEL: message` for messages at or above its level."""

    def __init__(self, module: str):
        self.module = module
        self._key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        return _config['module_levels'].get(self._key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _log(self, level: LogLevel, label: str, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {label}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)

    def critical(self, msg: str, *args) -> None:
        self._log(LogLevel.CRITICAL, 'CRIT', msg, *args)

    def exception(self, msg: str, *args) -> None:
        """Log at ERROR, followed by the active traceback one line at a time."""
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)
        tb = traceback.format_exc()
        if tb.strip() == 'NoneType: None':
            return
        for line in tb.rstrip().splitlines():
            self._log(LogLevel.ERROR, 'TRACE', line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> StonefallLogger:
    """Cached logger for a module name."""
    return StonefallLogger(module)
