"""Environment providers — where loaded variables get injected.

Every process has an environment: a set of ``KEY=VALUE`` string pairs
inherited from its parent.  Loading a ``.env`` file copies its pairs
into that table so child processes and libraries that read
``os.environ`` can see them.

The process environment is global, shared, mutable state.  Rather than
reach for it directly, the loader talks to an **EnvironmentProvider**:

    - ``OsEnvironment`` — the real process environment (``os.environ``).
      Python already hides the POSIX ``setenv`` / Windows ``_putenv_s``
      split behind ``os.environ``, so one class covers every platform.
    - ``MemoryEnvironment`` — a plain dict, for tests and for callers who
      want to load a file without touching the process.

Key design properties:
    - **Strings only** — both keys and values are strings.
    - **Empty means unset** — a variable holding ``""`` is treated as
      absent by the loader, so it is free to be filled in.
"""

import os
from typing import Protocol


class EnvironmentProvider(Protocol):
    """Interface for reading and writing an environment table."""

    def get_var(self, key: str) -> str | None:
        """Return the value for *key*, or None if it is not set."""
        ...  # pragma: no cover

    def set_var(self, key: str, value: str) -> None:
        """Set *key* to *value* (creates or overwrites)."""
        ...  # pragma: no cover

    def has_var(self, key: str) -> bool:
        """Return True if *key* is set to a non-empty value."""
        ...  # pragma: no cover


class OsEnvironment:
    """The real process environment."""

    def get_var(self, key: str) -> str | None:
        """Return ``os.environ[key]``, or None if unset."""
        return os.environ.get(key)

    def set_var(self, key: str, value: str) -> None:
        """Write *key* into ``os.environ`` (and so into ``putenv``)."""
        os.environ[key] = value

    def has_var(self, key: str) -> bool:
        """Return True if the process has a non-empty *key*."""
        return bool(os.environ.get(key))


class MemoryEnvironment:
    """A key-value store standing in for the process environment.

    Each instance is an independent copy: modifying one does not
    affect any other, and none of them touch ``os.environ``.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """Create an environment, optionally pre-populated.

        Args:
            initial: Starting variables (copied, not referenced).

        """
        self._vars: dict[str, str] = dict(initial) if initial else {}

    def get_var(self, key: str) -> str | None:
        """Return the value for *key*, or None if not set."""
        return self._vars.get(key)

    def set_var(self, key: str, value: str) -> None:
        """Set *key* to *value* (creates or overwrites)."""
        self._vars[key] = value

    def has_var(self, key: str) -> bool:
        """Return True if *key* is set to a non-empty value."""
        return bool(self._vars.get(key))

    def items(self) -> list[tuple[str, str]]:
        """Return all (key, value) pairs."""
        return list(self._vars.items())

    def __len__(self) -> int:
        """Return the number of variables."""
        return len(self._vars)
