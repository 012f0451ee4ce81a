"""The env store — load a ``.env`` file and read typed values from it.

``DotEnv`` owns a plain ``dict[str, str]`` of everything it has loaded
and a handle on an environment provider (the real process environment
by default).  The control flow is:

    load → locate the file → parse each line → store the pair →
    inject it into the provider (unless already set there)

and later ``get`` / ``require`` / ``get_ne`` / ``get_le`` / ``get_be``,
which consult the store first and the provider second.

Two precedence rules live side by side:
    - **Store: last writer wins.**  A duplicate key, or a second
      ``load``, overwrites the stored value (with a warning).
    - **Provider: first writer wins.**  A variable already set to a
      non-empty value in the environment is left alone, unless
      ``override_system`` is on.

Problems with the file or with individual lines are reported to the
diagnostic sink and absorbed; ``load`` only answers True or False.
``require`` is the one accessor that raises.
"""

from pathlib import Path

from py_envfile.locator import DEFAULT_FILENAME, find_env_file
from py_envfile.logging import DiagnosticSink, Logger, LogLevel
from py_envfile.numeric import ByteOrder, Number, NumericKind, convert, resolve_kind
from py_envfile.parser import LineKind, parse_lines
from py_envfile.providers import EnvironmentProvider, OsEnvironment


def _read_env_file(path: Path) -> str:
    """Return the whole file decoded as UTF-8, or raise before anything is parsed."""
    return path.read_bytes().decode("utf-8")


class MissingVariableError(LookupError):
    """Raise when a required variable is in neither the store nor the environment."""

    def __init__(self, key: str) -> None:
        """Create the error for *key*."""
        super().__init__(f"Required environment variable missing: {key}")
        self.key = key


class DotEnv:
    """Variables loaded from env files, backed by an environment provider.

    Usage::

        env = DotEnv()
        if env.load():
            port = env.get_ne("PORT", "uint16")
        secret = env.require("API_KEY")

    Not thread-safe: concurrent loads race on both the store and the
    process environment and must be serialized by the caller.
    """

    def __init__(
        self,
        *,
        provider: EnvironmentProvider | None = None,
        sink: DiagnosticSink | None = None,
        override_system: bool = False,
    ) -> None:
        """Create an empty store.

        Args:
            provider: Environment to inject into and fall back on;
                the real process environment if None.
            sink: Where diagnostics go; a stderr ``Logger`` if None.
            override_system: Default for whether loaded values replace
                variables already set in the provider.

        """
        self._vars: dict[str, str] = {}
        self._provider: EnvironmentProvider = provider if provider is not None else OsEnvironment()
        self._sink: DiagnosticSink = sink if sink is not None else Logger()
        self._override_system = override_system
        self._loaded_files: list[Path] = []

    @property
    def provider(self) -> EnvironmentProvider:
        """Return the environment provider."""
        return self._provider

    @property
    def sink(self) -> DiagnosticSink:
        """Return the diagnostic sink."""
        return self._sink

    @property
    def loaded_files(self) -> list[Path]:
        """Return the files loaded so far, oldest first."""
        return list(self._loaded_files)

    # -- Loading -------------------------------------------------------------

    def load(
        self,
        filename: str = DEFAULT_FILENAME,
        *,
        directory: Path | None = None,
        override_system: bool | None = None,
    ) -> bool:
        """Load variables from *filename* in *directory*.

        Args:
            filename: Exact name of the file to load.
            directory: Directory to search; the current working
                directory if None.
            override_system: Per-call override of the instance default.

        Returns:
            True if the file was found and read, however many of its
            lines were skipped; False if it was missing or unreadable.

        """
        path = find_env_file(filename, directory)
        if path is None:
            self._sink.log(LogLevel.INFO, f"No env file named {filename!r}", source="locator")
            return False

        try:
            text = _read_env_file(path)
        except (OSError, UnicodeDecodeError) as e:
            self._sink.log(LogLevel.ERROR, f"Failed to open env file: {path} ({e})", source="locator")
            return False

        override = self._override_system if override_system is None else override_system
        self._apply(text, override=override)
        self._loaded_files.append(path)
        return True

    def _apply(self, text: str, *, override: bool) -> None:
        # Only LF ends a line; a CR inside a line is kept.
        for line in parse_lines(text.split("\n")):
            if line.kind is LineKind.NO_SEPARATOR:
                self._sink.log(
                    LogLevel.DEBUG,
                    f"Line {line.lineno} has no '=': {line.text}",
                    source="parser",
                )
            elif line.kind is LineKind.MALFORMED:
                self._sink.log(
                    LogLevel.WARNING,
                    f"Invalid line {line.lineno} in env file: {line.text}",
                    source="parser",
                )
            elif line.kind is LineKind.ASSIGNMENT:
                self._store(line.key, line.value)
                self._inject(line.key, line.value, override=override)

    def _store(self, key: str, value: str) -> None:
        if key in self._vars:
            self._sink.log(LogLevel.WARNING, f"Duplicate env key: {key}, overwriting.", source="parser")
        self._vars[key] = value

    def _inject(self, key: str, value: str, *, override: bool) -> None:
        if override or not self._provider.has_var(key):
            self._provider.set_var(key, value)
        else:
            self._sink.log(LogLevel.DEBUG, f"{key} already set; not overriding", source="injector")

    # -- Lookup --------------------------------------------------------------

    def get(self, key: str) -> str | None:
        """Return the value for *key*, or None if it is not set anywhere.

        The store is consulted first, then the provider.  An empty value
        in the provider counts as not set.
        """
        if key in self._vars:
            return self._vars[key]
        return self._provider.get_var(key) or None

    def require(self, key: str) -> str:
        """Return the value for *key*.

        Raises:
            MissingVariableError: If *key* is not set anywhere.

        """
        value = self.get(key)
        if value is None:
            raise MissingVariableError(key)
        return value

    def get_as(
        self,
        key: str,
        kind: NumericKind | str,
        order: ByteOrder = ByteOrder.NATIVE,
    ) -> Number | None:
        """Return *key* parsed as *kind* in byte *order*.

        Missing and unparsable values both give None.

        Raises:
            ValueError: If *kind* names no supported type.

        """
        resolved = resolve_kind(kind)
        value = self.get(key)
        if value is None:
            return None
        return convert(value, resolved, order)

    def get_ne(self, key: str, kind: NumericKind | str) -> Number | None:
        """Return *key* parsed as *kind*, native byte order."""
        return self.get_as(key, kind, ByteOrder.NATIVE)

    def get_le(self, key: str, kind: NumericKind | str) -> Number | None:
        """Return *key* parsed as *kind*, bytes in little-endian order."""
        return self.get_as(key, kind, ByteOrder.LITTLE)

    def get_be(self, key: str, kind: NumericKind | str) -> Number | None:
        """Return *key* parsed as *kind*, bytes in big-endian order."""
        return self.get_as(key, kind, ByteOrder.BIG)

    # -- Container protocol --------------------------------------------------

    def items(self) -> list[tuple[str, str]]:
        """Return all loaded (key, value) pairs."""
        return list(self._vars.items())

    def __contains__(self, key: object) -> bool:
        """Return True if *key* was loaded from a file."""
        return key in self._vars

    def __len__(self) -> int:
        """Return the number of loaded variables."""
        return len(self._vars)
