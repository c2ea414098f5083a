"""Interactive text menus for managing the UF table."""

from __future__ import annotations

import argparse
import os
import re
import string
import sys
from typing import TextIO

from .registry import (
    UF,
    DuplicateCodeError,
    DuplicateSiglaError,
    NotFoundError,
    Registry,
    RegistryFullError,
    ValidationError,
    normalize_sigla,
    validate_text,
)
from .storage import load_registry, save_registry

DEFAULT_PATH = "ufs"

_INT = re.compile(r"\s*[+-]?\d+")
_DESCRIPTION_INPUT = 19
_SIGLA_INPUT = 2

_INTRO = (
    "-----------------------------------------[UF]--------------------------------------------\n"
    "O que deseja fazer?\n\n"
    "[1]Adicionar UFs\n"
    "[2]Mostrar UFs\n"
    "[3]Excluir UFs\n"
    "[4]Alterar UF\n"
    "[5]Pesquisar UF\n"
    "[6]Salvar e Voltar\n\n"
)

_MAIN_MENU = (
    "\n-----------------------------------------[URNA]------------------------------------------\n\n"
    "[1]UF\n"
    "[2]ELEICAO\n"
    "[3]CANDIDATO\n"
    "[4]PESSOA\n"
    "[5]VOTOS\n"
    "[6]COMPARECIMENTO\n"
    "[7]Sair\n\n"
    "Escolha a area de informacao:"
)

_FIELD_MENU = "[1]Codigo\n[2]Descricao\n[3]Sigla\n[4]Voltar\n"
_CONFIRM = "Apagar?\n[1]Sim\n[2]Nao\n\n"


def format_uf(uf: UF) -> str:
    """Render one UF the way every menu shows it."""
    return f"\ncodigo: {uf.code:02d}\nDescricao: {uf.description}\nSigla: {uf.sigla}\n\n"


class UFMenu:
    """The UF area: add, show, delete, alter and search entries."""

    def __init__(
        self,
        registry: Registry,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.registry = registry
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def run(self) -> bool:
        """Loop over the area menu; True when the user asks to save and leave."""
        actions = {1: self.add, 2: self.show, 3: self.delete, 4: self.alter, 5: self.search}
        try:
            while True:
                self._write(_INTRO)
                choice = self._read_int()
                if choice == 6:
                    return True
                action = actions.get(choice)
                if action is None:
                    self._write("\nOpcao invalida\n")
                else:
                    action()
        except EOFError:
            return False

    def add(self) -> None:
        """Ask for a new UF and store it in the first free slot."""
        if self.registry.free_slot() is None:
            self._write("Lista Cheia\n")
            return
        self._write("Digite as informacoes.\n")
        code = self._prompt_code("Codigo*:")
        if any(uf.code == code for _, uf in self.registry.entries()):
            self._write("\n\nERRO: O Codigo ja esta em uso\n\n")
            return
        description = self._prompt_text("Descricao*:", "descricao", _DESCRIPTION_INPUT)
        sigla = self._prompt_text("Sigla*:", "sigla", _SIGLA_INPUT)
        try:
            self.registry.add(code, description, sigla)
        except DuplicateSiglaError:
            self._write("\n\nERRO: A sigla ja esta em uso\n\n")
        except DuplicateCodeError:
            self._write("\n\nERRO: O Codigo ja esta em uso\n\n")
        except RegistryFullError:
            self._write("Lista Cheia\n")

    def show(self) -> None:
        """Print every UF in use."""
        self._write("-" * 91)
        shown = False
        for _, uf in self.registry.entries():
            self._write(format_uf(uf))
            shown = True
        if not shown:
            self._write("\n\nNao ha UFs cadastradas\n\n")

    def delete(self) -> None:
        """Find a UF by code or sigla and remove it after confirmation."""
        while True:
            self._write("Quem voce quer excluir?\n\n[1]Achar por Codigo\n[2]Achar por Sigla\n[3]Voltar\n")
            choice = self._read_int()
            if choice == 3:
                return
            if choice == 1:
                index = self._lookup_code("Digite o Codigo: ", "\nCodigo nao cadastrado\n\n")
            elif choice == 2:
                index = self._lookup_sigla("Sigla nao cadastrada\n")
            else:
                self._write("\nOpcao invalida\n")
                continue
            if index is None:
                continue
            self._write(format_uf(self.registry.slots[index]))
            self._write(_CONFIRM)
            if self._read_int() == 1:
                self.registry.remove(index)
                self._write("\n\nAPAGADO COM SUCESSO\n\n")

    def alter(self) -> None:
        """Find a UF by code or sigla and change one of its fields."""
        while True:
            self._write("\nQuem voce quer alterar?\n[1]Achar por Codigo\n[2]Achar por Sigla\n[3]Voltar\n")
            choice = self._read_int()
            if choice == 3:
                return
            if choice == 1:
                index = self._lookup_code("Digite o Codigo:", "Codigo nao cadastrado\n")
                header = "\nO que deseja alterar dessa UF?\n"
            elif choice == 2:
                self._write("\nDigite a SIGLA:")
                sigla = self._read_line().upper()
                index = self._find(self.registry.find_by_sigla, sigla, "Sigla nao cadastrada\n")
                header = "\nO que deseja alterar nessa UF?\n"
            else:
                continue
            if index is None:
                continue
            self._write(format_uf(self.registry.slots[index]))
            self._write(header + _FIELD_MENU)
            self._alter_field(index)

    def search(self) -> None:
        """Find a UF by code or sigla and print it."""
        while True:
            self._write("\nQuem voce quer achar?\n\n[1]Achar por codigo\n[2]Achar por Sigla\n[3]Voltar\n")
            choice = self._read_int()
            if choice == 3:
                return
            if choice == 1:
                index = self._lookup_code("Digite o Codigo: ", "\nCodigo nao cadastrado\n")
            elif choice == 2:
                index = self._lookup_sigla("\nSigla nao cadastrada\n")
            else:
                self._write("Insira um opcao valida")
                continue
            if index is not None:
                self._write(format_uf(self.registry.slots[index]))

    def _alter_field(self, index: int) -> None:
        choice = self._read_int()
        if choice == 1:
            code = self._prompt_code("\nDigite o novo codigo:")
            try:
                changed = self.registry.change_code(index, code)
            except DuplicateCodeError:
                self._write("\nERRO: codigo ja usada por outra UF\n")
                return
            if not changed:
                self._write("\n\nVoce digitou o Codigo que ja estava na UF.\n\n")
                return
        elif choice == 2:
            self._write("\nDigite a nova descricao:")
            self.registry.change_description(index, self._read_line())
        elif choice == 3:
            self._write("\nDigite a nova sigla:")
            try:
                changed = self.registry.change_sigla(index, self._read_line())
            except DuplicateSiglaError:
                self._write("\nERRO: sigla ja usada por outra UF\n")
                return
            if not changed:
                self._write("\n\nVoce digitou a Sigla que ja estava na UF.\n\n")
                return
        elif choice == 4:
            return
        else:
            self._write("\nOpcao invalida\n")
            return
        self._write("\nUF alterada com sucesso\n")

    def _lookup_code(self, prompt: str, missing: str) -> int | None:
        code = self._prompt_code(prompt)
        return self._find(self.registry.find_by_code, code, missing)

    def _lookup_sigla(self, missing: str) -> int | None:
        while True:
            self._write("Digite a Sigla: ")
            text = self._read_line()[:_SIGLA_INPUT]
            if any(ch in string.digits for ch in text):
                self._write("\nCampo nao aceita numeros\n")
                continue
            return self._find(self.registry.find_by_sigla, normalize_sigla(text), missing)

    def _find(self, finder, key, missing: str) -> int | None:
        try:
            return finder(key)
        except NotFoundError:
            self._write(missing)
            return None

    def _prompt_code(self, prompt: str) -> int:
        while True:
            self._write(prompt)
            value = self._read_int()
            if value is not None:
                return value
            self._write("\nInsira um codigo valido.\n\n")

    def _prompt_text(self, prompt: str, field: str, width: int) -> str:
        while True:
            self._write(prompt)
            try:
                return validate_text(self._read_line()[:width], field)
            except ValidationError as exc:
                reason = "Campo nao aceita numeros" if "numeros" in str(exc) else "Campo obrigatorio."
                self._write(f"\n{reason}\n")

    def _read_line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _read_int(self) -> int | None:
        match = _INT.match(self._read_line())
        return int(match.group()) if match else None

    def _write(self, text: str) -> None:
        self._out.write(text)


def uf_area(
    path: str | os.PathLike[str] = DEFAULT_PATH,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> Registry:
    """Load the table, run the UF menu and save when the user asks to."""
    registry = load_registry(path)
    if UFMenu(registry, stdin, stdout).run():
        save_registry(registry, path)
    return registry


def main(argv: list[str] | None = None) -> int:
    """Top-level menu of the ballot-box program."""
    parser = argparse.ArgumentParser(description="Cadastro da urna.")
    parser.add_argument("--file", default=DEFAULT_PATH, help="arquivo das UFs")
    args = parser.parse_args(argv)
    stdin, stdout = sys.stdin, sys.stdout
    while True:
        stdout.write(_MAIN_MENU)
        line = stdin.readline()
        if not line:
            return 0
        match = _INT.match(line)
        choice = int(match.group()) if match else None
        if choice == 1:
            uf_area(args.file, stdin, stdout)
        elif choice == 7:
            return 0
        elif choice not in (2, 3, 4, 5, 6):
            stdout.write("\n\nDIGITE UMA OPCAO VALIDA\n\n")