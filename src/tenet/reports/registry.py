"""Reporter lookup for configuration and the CLI.

``[tool.tenet] reporter`` and ``tenet run --reporter`` name a reporter either
by its registry key or by an import string. A project can add its own::

    from tenet.reports import ConsoleReporter, reporter

    @reporter(name="failures-only")
    class FailuresOnly(ConsoleReporter):
        def __init__(self, **options):
            super().__init__(verbosity=-1, **options)

and select it with ``tenet run --reporter failures-only checks:SCENARIOS``
once the module defining it has been imported, or without importing it via
``--reporter myproject.reporting:FailuresOnly``.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any, TypeVar


if TYPE_CHECKING:
    from tenet.reports.base import Reporter


T = TypeVar("T", bound="Reporter")

_reporter_registry: dict[str, type[Reporter]] = {}
# ConsoleReporter and MemoryReporter survive clear_reporter_registry()
_builtin_registry: dict[str, type[Reporter]] = {}


def reporter(
    cls: type[T] | None = None,
    *,
    enabled: bool = True,
    name: str | None = None,
) -> type[T] | Any:
    """Class decorator adding a reporter to the registry.

    Bare ``@reporter`` keys the class by its ``__name__``; ``name=`` overrides
    the key and ``enabled=False`` leaves the class unregistered.
    """

    def register(cls: type[T]) -> type[T]:
        if enabled:
            _reporter_registry[name or cls.__name__] = cls
        return cls

    return register if cls is None else register(cls)


def register_builtin(cls: type[T]) -> type[T]:
    _builtin_registry[cls.__name__] = cls
    _reporter_registry[cls.__name__] = cls
    return cls


def get_reporter_registry() -> dict[str, type[Reporter]]:
    return _reporter_registry


def clear_reporter_registry() -> None:
    """Forget project reporters; the built-in ones stay registered."""
    _reporter_registry.clear()
    _reporter_registry.update(_builtin_registry)


def import_object(import_path: str) -> Any:
    """Resolve ``"package.module:attr"`` (or ``"package.module.attr"``).

    Shared by reporter lookup and by ``tenet run`` targets.

    Raises:
        ValueError: If the path has no module part or the attribute is missing.
        ImportError: If the module cannot be imported.
    """
    separator = ":" if ":" in import_path else "."
    module_path, _, attr = import_path.rpartition(separator)
    if not module_path or not attr:
        raise ValueError(f"Invalid import path: {import_path}")

    module = importlib.import_module(module_path)
    if not hasattr(module, attr):
        raise ValueError(f"Module {module_path!r} has no attribute {attr!r}")
    return getattr(module, attr)


def resolve_reporter(name: str, **options: Any) -> Reporter:
    """Instantiate the reporter called ``name`` with ``options``.

    Registry keys win over import strings, so ``"ConsoleReporter"`` never
    triggers an import.

    Raises:
        ValueError: If ``name`` is neither registered nor an import string.
        TypeError: If an import string names something that is not a reporter class.
    """
    from tenet.reports.base import Reporter

    cls = _reporter_registry.get(name)
    if cls is None:
        if ":" not in name and "." not in name:
            known = ", ".join(sorted(_reporter_registry))
            raise ValueError(f"Unknown reporter: {name}. Available: {known}")
        cls = import_object(name)
        if not isinstance(cls, type) or not issubclass(cls, Reporter):
            raise TypeError(f"{name} is not a Reporter class")
    return cls(**options)


__all__ = [
    "clear_reporter_registry",
    "get_reporter_registry",
    "import_object",
    "register_builtin",
    "reporter",
    "resolve_reporter",
]
