"""A growable list of UF codes and siglas kept in two small binary files."""

from __future__ import annotations

import argparse
import os
import struct
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

DEFAULT_COUNT_PATH = "quantidade"
DEFAULT_DATA_PATH = "ufss"

_COUNT = struct.Struct("<i")
_RECORD = struct.Struct("<i3sx")
_ENCODING = "latin-1"
_SIGLA_INPUT = 2


@dataclass
class Entry:
    """One UF code with its sigla."""

    code: int
    sigla: str


def _ensure(path: Path) -> Path:
    if not path.exists():
        path.touch()
    return path


def load(
    count_path: str | os.PathLike[str] = DEFAULT_COUNT_PATH,
    data_path: str | os.PathLike[str] = DEFAULT_DATA_PATH,
) -> list[Entry]:
    """Read the entries, creating empty files when they do not exist yet."""
    count_raw = _ensure(Path(count_path)).read_bytes()[: _COUNT.size]
    data = _ensure(Path(data_path)).read_bytes()
    count = _COUNT.unpack(count_raw)[0] if len(count_raw) == _COUNT.size else 0
    if count < 0:
        raise ValueError(f"invalid entry count {count}")
    if len(data) < count * _RECORD.size:
        raise ValueError(f"data file holds fewer than {count} entries")
    entries = []
    for code, sigla in _RECORD.iter_unpack(data[: count * _RECORD.size]):
        entries.append(Entry(code, sigla.split(b"\0", 1)[0].decode(_ENCODING)))
    return entries


def save(
    entries: Iterable[Entry],
    count_path: str | os.PathLike[str] = DEFAULT_COUNT_PATH,
    data_path: str | os.PathLike[str] = DEFAULT_DATA_PATH,
) -> None:
    """Write the entries to the start of the data file and their number to the count file."""
    records = [
        _RECORD.pack(entry.code, entry.sigla.encode(_ENCODING, errors="replace")[:_SIGLA_INPUT])
        for entry in entries
    ]
    for path, payload in (
        (Path(data_path), b"".join(records)),
        (Path(count_path), _COUNT.pack(len(records))),
    ):
        with path.open("r+b" if path.exists() else "wb") as handle:
            handle.write(payload)


def read_entry(stdin: TextIO, stdout: TextIO) -> Entry:
    """Ask for a code and a sigla."""
    stdout.write("Digite o codigo da UF: ")
    line = stdin.readline()
    if not line:
        raise EOFError
    try:
        code = int(line.split()[0]) if line.split() else int(line)
    except ValueError as exc:
        raise ValueError(f"invalid code: {line.strip()!r}") from exc
    stdout.write("Digite a sigla: ")
    line = stdin.readline()
    if not line:
        raise EOFError
    sigla = line.rstrip("\r\n")[:_SIGLA_INPUT]
    stdout.write("Pessoa adicionada com sucesso\n")
    return Entry(code, sigla)


def format_entries(entries: Iterable[Entry]) -> str:
    """One line per entry: UF[code]: sigla."""
    return "".join(f"UF[{entry.code}]: {entry.sigla}\n" for entry in entries)


def main(argv: list[str] | None = None) -> int:
    """Add one entry to the stored list and show the whole list."""
    parser = argparse.ArgumentParser(description="Lista de UFs.")
    parser.add_argument("--count-file", default=DEFAULT_COUNT_PATH)
    parser.add_argument("--data-file", default=DEFAULT_DATA_PATH)
    args = parser.parse_args(argv)
    out = sys.stdout
    try:
        entries = load(args.count_file, args.data_file)
    except OSError:
        out.write("Erro ao abrir arquivo\n")
        return 1
    out.write(f"{len(entries) + 1}\n")
    try:
        entries.append(read_entry(sys.stdin, out))
    except (ValueError, EOFError) as exc:
        out.write(f"Erro: {exc}\n")
        return 1
    out.write(str(len(entries)))
    out.write(format_entries(entries))
    save(entries, args.count_file, args.data_file)
    return 0