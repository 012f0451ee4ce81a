"""py-envfile — load ``.env`` files into a store and the process environment.

Re-exports public symbols so callers can write::

    from py_envfile import DotEnv, NumericKind
"""

from py_envfile.env import DotEnv, MissingVariableError
from py_envfile.locator import DEFAULT_FILENAME, find_env_file
from py_envfile.logging import DiagnosticSink, LogEntry, Logger, LogLevel
from py_envfile.numeric import ByteOrder, NumericKind, convert, parse_number, swap_bytes
from py_envfile.parser import LineKind, ParsedLine, parse_line, parse_lines
from py_envfile.providers import EnvironmentProvider, MemoryEnvironment, OsEnvironment

__all__ = [
    "DEFAULT_FILENAME",
    "ByteOrder",
    "DiagnosticSink",
    "DotEnv",
    "EnvironmentProvider",
    "LineKind",
    "LogEntry",
    "LogLevel",
    "Logger",
    "MemoryEnvironment",
    "MissingVariableError",
    "NumericKind",
    "OsEnvironment",
    "ParsedLine",
    "convert",
    "find_env_file",
    "parse_line",
    "parse_lines",
    "parse_number",
    "swap_bytes",
]
