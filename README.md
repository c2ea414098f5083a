# urna

A small console front-end for keeping a register of federative units (UFs).
Each entry has a numeric code, a description (at most 19 characters) and a
sigla (at most 2 characters). The register holds at most 27 entries and is
kept in a fixed-slot binary file, `ufs` by default, in the current directory.

## Installation

```
pip install .
```

## Usage

Start the main menu:

```
urna
urna --file path/to/ufs
```

Choose `[1]UF` to open the UF area, where you can add, list, delete, alter
and search UFs by code or sigla. Codes must be unique, the description and
sigla may not be empty or contain digits, and siglas are stored in upper
case. A new sigla is checked for clashes only against entries that have
already been saved. Choosing `[6]Salvar e Voltar` writes the register back
to the file; leaving the area at end of input discards the changes. Option
`[7]Sair` leaves the program.

A second, simpler tool keeps a growing list of code/sigla pairs, with the
count in a file named `quantidade` and the entries in `ufss`. Each run asks
for one entry, prints the whole list and saves it:

```
urna-quicklist
urna-quicklist --count-file quantidade --data-file ufss
```

## Library use

The register can also be used directly:

```python
from urna.storage import load_registry, save_registry

registry = load_registry("ufs")
registry.add(35, "Sao Paulo", "sp")
for index, uf in registry.entries():
    print(index, uf.code, uf.description, uf.sigla)
save_registry(registry, "ufs")
```

`Registry` also offers `find_by_code`, `find_by_sigla`, `remove`,
`change_code`, `change_description` and `change_sigla`. Errors such as a
full register, a repeated code or sigla, a missing entry or an invalid field
are raised as subclasses of `urna.registry.RegistryError`.

`urna.quicklist` exposes `load`, `save`, `read_entry` and `format_entries`
for the code/sigla list.

## What it does not do

The main menu lists the areas ELEICAO, CANDIDATO, PESSOA, VOTOS and
COMPARECIMENTO, but choosing them does nothing: only the UF area is
available. There is no storage or management of elections, candidates,
people, votes or attendance.

## Tests

```
pip install .[test]
pytest
```