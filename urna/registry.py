"""In-memory table of federative units (UFs) held in a fixed number of slots."""

from __future__ import annotations

import itertools
import string
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import IntEnum

MAX_SLOTS = 27
DESCRIPTION_LENGTH = 19
SIGLA_LENGTH = 2


class SlotState(IntEnum):
    """Whether a slot is free, holds saved data, or holds unsaved changes."""

    EMPTY = 0
    SAVED = 1
    CHANGED = 2


@dataclass
class UF:
    """One federative unit record."""

    code: int = 0
    description: str = ""
    sigla: str = ""
    state: SlotState = SlotState.EMPTY

    @property
    def in_use(self) -> bool:
        return self.state is not SlotState.EMPTY


class RegistryError(Exception):
    """Base class for registry failures."""


class RegistryFullError(RegistryError):
    """Every slot is taken."""


class DuplicateCodeError(RegistryError):
    """The code is already used by another UF."""


class DuplicateSiglaError(RegistryError):
    """The sigla is already used by another UF."""


class NotFoundError(RegistryError, LookupError):
    """No UF matches the lookup."""


class ValidationError(RegistryError, ValueError):
    """A text field is empty or holds digits."""


def normalize_sigla(text: str) -> str:
    """Drop line breaks and upper-case the sigla."""
    return text.replace("\n", "").upper()


def validate_text(text: str, field: str) -> str:
    """Return the text without line breaks; reject it if empty or holding digits."""
    if any(ch in string.digits for ch in text):
        raise ValidationError(f"{field}: campo nao aceita numeros")
    cleaned = text.replace("\n", "")
    if not cleaned:
        raise ValidationError(f"{field}: campo obrigatorio")
    return cleaned


class Registry:
    """A fixed table of UF slots."""

    def __init__(self, slots: Iterable[UF] | None = None) -> None:
        self.slots: list[UF] = list(slots) if slots is not None else []
        if len(self.slots) > MAX_SLOTS:
            raise ValueError(f"a registry holds at most {MAX_SLOTS} slots")
        self.slots.extend(UF() for _ in range(MAX_SLOTS - len(self.slots)))

    def free_slot(self) -> int | None:
        """Index of the first empty slot, or None when the table is full."""
        return next((i for i, uf in enumerate(self.slots) if not uf.in_use), None)

    def find_by_code(self, code: int) -> int:
        """Index of the UF in use with this code."""
        for index, uf in self.entries():
            if uf.code == code:
                return index
        raise NotFoundError("Codigo nao cadastrado")

    def find_by_sigla(self, sigla: str) -> int:
        """Index of the UF in use with this sigla."""
        wanted = normalize_sigla(sigla)
        for index, uf in self.entries():
            if uf.sigla == wanted:
                return index
        raise NotFoundError("Sigla nao cadastrada")

    def add(self, code: int, description: str, sigla: str) -> int:
        """Store a new UF in the first free slot and return its index."""
        index = self.free_slot()
        if index is None:
            raise RegistryFullError("Lista cheia")
        if any(uf.code == code for _, uf in self.entries()):
            raise DuplicateCodeError("O codigo ja esta em uso")
        description = validate_text(description[:DESCRIPTION_LENGTH], "descricao")
        sigla = normalize_sigla(validate_text(sigla[:SIGLA_LENGTH], "sigla"))
        # Only siglas already saved to disk are checked for clashes.
        if any(uf.state is SlotState.SAVED and uf.sigla == sigla for uf in self.slots):
            raise DuplicateSiglaError("A sigla ja esta em uso")
        self.slots[index] = UF(code, description, sigla, SlotState.CHANGED)
        return index

    def entries(self) -> Iterator[tuple[int, UF]]:
        """Yield (index, uf) for every slot in use, in slot order."""
        return ((i, uf) for i, uf in enumerate(self.slots) if uf.in_use)

    def remove(self, index: int) -> None:
        """Free the slot at index."""
        self._occupied(index).state = SlotState.EMPTY

    def change_code(self, index: int, code: int) -> bool:
        """Give the UF a new code; False if it already had that code."""
        uf = self._occupied(index)
        if any(i != index and other.code == code for i, other in self._leading()):
            raise DuplicateCodeError("codigo ja usado por outra UF")
        if uf.code == code:
            return False
        uf.code = code
        uf.state = SlotState.CHANGED
        return True

    def change_description(self, index: int, description: str) -> None:
        """Replace the UF's description."""
        uf = self._occupied(index)
        uf.description = description.replace("\n", "")[:DESCRIPTION_LENGTH]
        uf.state = SlotState.CHANGED

    def change_sigla(self, index: int, sigla: str) -> bool:
        """Give the UF a new sigla; False if it already had that sigla."""
        uf = self._occupied(index)
        sigla = normalize_sigla(sigla)[:SIGLA_LENGTH]
        if any(i != index and other.sigla == sigla for i, other in self._leading()):
            raise DuplicateSiglaError("sigla ja usada por outra UF")
        if uf.sigla == sigla:
            return False
        uf.sigla = sigla
        uf.state = SlotState.CHANGED
        return True

    def mark_saved(self) -> None:
        """Turn every changed slot into a saved one."""
        for uf in self.slots:
            if uf.state is SlotState.CHANGED:
                uf.state = SlotState.SAVED

    def _occupied(self, index: int) -> UF:
        if not 0 <= index < len(self.slots) or not self.slots[index].in_use:
            raise NotFoundError(f"no UF in slot {index}")
        return self.slots[index]

    def _leading(self) -> Iterator[tuple[int, UF]]:
        # Uniqueness checks on change stop at the first empty slot.
        return enumerate(itertools.takewhile(lambda uf: uf.in_use, self.slots))