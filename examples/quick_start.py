#!/usr/bin/env python3
# Example usage of line_record_stream: write a few records, then read them back
# with the same and with a different separator.

import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from line_record_stream import LineRecordStream, Mode, RecordFileNotFoundError

_force_tty = os.environ.get("FORCE_TTY", "").lower() in ("1", "true", "yes", "on")
_console = Console(file=sys.stderr, force_terminal=_force_tty or None, color_system="standard")

CONTACTS = [
    ["Shelby Macias", "3027 Lorem St.", "Kokomo", "England"],
    ["Porter Coffey", "Ap #827-9064 Sapien. Rd.", "Palermo", "Italy"],
    ["Noelani Ward", "637-2154 Eros Av.", "Kirkwall", "Scotland"],
    ["Lonely Column"],
]


def show(title, records):
    table = Table(title=title)
    width = max((len(r) for r in records), default=0)
    for i in range(width):
        table.add_column(f"col{i + 1}")
    for r in records:
        table.add_row(*(r + [""] * (width - len(r))))
    _console.print(table)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, handlers=[RichHandler(console=_console)], format="%(message)s")
    path = "contacts_demo.csv"

    # Tab separated on disk
    with LineRecordStream() as stream:
        stream.open(path, Mode.WRITE)
        stream.write_records(CONTACTS)
        stream.close()

        stream.open(path, Mode.READ)
        show("tab separated", list(stream))

    # Legacy two-column access
    with LineRecordStream() as stream:
        stream.open(path, Mode.READ)
        while True:
            found, name, address = stream.read_pair()
            if not found:
                break
            _console.print(f"{name!r:>20} -> {address!r}")

    # Same file, newline as read separator: every line is a single column
    with LineRecordStream("\n") as stream:
        stream.open(path, Mode.READ)
        show("newline separated", list(stream))

    try:
        with LineRecordStream() as stream:
            stream.open("does_not_exist.csv", Mode.READ)
    except RecordFileNotFoundError as exc:
        _console.print(f"[red]not found:[/red] {exc.filename}")

    os.remove(path)


if __name__ == "__main__":
    main()
