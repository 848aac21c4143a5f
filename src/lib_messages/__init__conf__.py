"""Distribution metadata shared by the CLI and :func:`summary_info`."""

from __future__ import annotations

from typing import Callable

name = "lib_messages"
title = "In-memory message collection grouped by verbosity, compatible with structured loggers"
version = "0.1.0"
homepage = "https://pypi.org/project/lib_messages/"
author = "lib_messages maintainers"
shell_command = "lib_messages"


def print_info(writer: Callable[[str], None] = print) -> None:
    """Write the metadata banner through ``writer``.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_messages:\\n'
    """

    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    writer(f"Info for {name}:\n")
    writer("\n")
    for label, value in fields:
        writer(f"    {label:<{pad}} = {value}\n")
