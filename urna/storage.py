"""Fixed-size binary records for the UF table."""

from __future__ import annotations

import os
import struct
from pathlib import Path

from .registry import MAX_SLOTS, UF, Registry, SlotState

_RECORD = struct.Struct("<ii20s3sx")
RECORD_SIZE = _RECORD.size
_ENCODING = "latin-1"


def _encode(text: str, width: int) -> bytes:
    return text.encode(_ENCODING, errors="replace")[: width - 1]


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode(_ENCODING)


def pack_record(uf: UF) -> bytes:
    """Encode one UF as a fixed-size record."""
    try:
        return _RECORD.pack(
            int(uf.state), uf.code, _encode(uf.description, 20), _encode(uf.sigla, 3)
        )
    except struct.error as exc:
        raise ValueError(f"cannot store UF: {exc}") from exc


def unpack_record(data: bytes) -> UF:
    """Decode one fixed-size record."""
    if len(data) != RECORD_SIZE:
        raise ValueError(f"a record is {RECORD_SIZE} bytes, got {len(data)}")
    state, code, description, sigla = _RECORD.unpack(data)
    return UF(code, _decode(description), _decode(sigla), SlotState(state))


def load_registry(path: str | os.PathLike[str]) -> Registry:
    """Read the table from path, creating an empty file if there is none."""
    path = Path(path)
    if not path.exists():
        path.touch()
    data = path.read_bytes()[: MAX_SLOTS * RECORD_SIZE]
    whole = len(data) - len(data) % RECORD_SIZE
    return Registry(
        unpack_record(data[offset : offset + RECORD_SIZE])
        for offset in range(0, whole, RECORD_SIZE)
    )


def save_registry(registry: Registry, path: str | os.PathLike[str]) -> None:
    """Mark changes as saved and write every slot to the start of path."""
    registry.mark_saved()
    payload = b"".join(pack_record(uf) for uf in registry.slots)
    path = Path(path)
    with path.open("r+b" if path.exists() else "wb") as handle:
        handle.write(payload)