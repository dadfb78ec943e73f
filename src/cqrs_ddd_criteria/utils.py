"""Name qualification helpers."""

from __future__ import annotations

SEPARATOR = "."


def qualify(alias: str, name: str) -> str:
    """
    Prefix *name* with ``alias.`` unless it already starts with *alias*.

    The test is a plain string prefix: with alias ``user`` a property named
    ``username`` is taken as already qualified.
    """
    if name.startswith(alias):
        return name
    return f"{alias}{SEPARATOR}{name}"


def parameter_name(name: str, index: int | None = None) -> str:
    """Bind-parameter name for *name*; dots become underscores."""
    base = name.replace(SEPARATOR, "_")
    return base if index is None else f"{base}{index}"
