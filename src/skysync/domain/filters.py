"""Upload filters compiled from the ``[upload]`` config section.

A filter is one of three variants:

- :class:`AcceptAll` — neither ``only`` nor ``except`` configured.
- :class:`Only` — accept exactly the listed relative paths.
- :class:`Except` — accept everything but the listed relative paths.

``only`` and ``except`` are mutually exclusive.  Asking for both is a
:class:`~skysync.domain.errors.ConfigurationError`, never silently resolved.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from skysync.domain.errors import ConfigurationError


@dataclass(frozen=True)
class AcceptAll:
    """Accepts every path."""

    def accepts(self, path: str) -> bool:
        return True


@dataclass(frozen=True)
class Only:
    """Accepts a path iff it is an exact member of *paths*."""

    paths: frozenset[str] = field(default_factory=frozenset)

    def accepts(self, path: str) -> bool:
        return path in self.paths


@dataclass(frozen=True)
class Except:
    """Accepts a path iff it is not a member of *paths*."""

    paths: frozenset[str] = field(default_factory=frozenset)

    def accepts(self, path: str) -> bool:
        return path not in self.paths


LocaleFilter = AcceptAll | Only | Except


def compile_filter(
    only: Iterable[str] | None = None,
    except_: Iterable[str] | None = None,
) -> LocaleFilter:
    """Compile ``only``/``except`` path lists into a single filter.

    Paths are compared verbatim against paths relative to the string root
    (e.g. ``"admin/app.en.yml"``); no globbing or normalisation happens.

    Raises:
        ConfigurationError: If both lists are non-empty.
    """
    only_paths = frozenset(only or ())
    except_paths = frozenset(except_ or ())

    if only_paths and except_paths:
        msg = "Invalid config. Can't use both `only` and `except` options."
        raise ConfigurationError(msg)
    if only_paths:
        return Only(only_paths)
    if except_paths:
        return Except(except_paths)
    return AcceptAll()
