import pytest

from urna.registry import (
    MAX_SLOTS,
    UF,
    DuplicateCodeError,
    DuplicateSiglaError,
    NotFoundError,
    Registry,
    RegistryFullError,
    SlotState,
    ValidationError,
    normalize_sigla,
    validate_text,
)


def _sigla(n):
    return "A" + chr(ord("A") + n) if n < 26 else "BA"


def test_normalize_sigla_uppercases_and_strips_newline():
    assert normalize_sigla("sp\n") == "SP"


def test_validate_text_rejects_empty():
    with pytest.raises(ValidationError):
        validate_text("\n", "descricao")


def test_validate_text_rejects_digits():
    with pytest.raises(ValidationError):
        validate_text("Sao Paulo 1", "descricao")


def test_validate_text_returns_clean_text():
    assert validate_text("Bahia\n", "descricao") == "Bahia"


def test_new_registry_is_empty():
    registry = Registry()
    assert len(registry.slots) == MAX_SLOTS
    assert list(registry.entries()) == []
    assert registry.free_slot() == 0


def test_add_and_find():
    registry = Registry()
    index = registry.add(35, "Sao Paulo", "sp")
    assert registry.find_by_code(35) == index
    assert registry.find_by_sigla("SP") == index
    uf = registry.slots[index]
    assert (uf.code, uf.description, uf.sigla, uf.state) == (
        35,
        "Sao Paulo",
        "SP",
        SlotState.CHANGED,
    )


def test_add_truncates_fields():
    registry = Registry()
    index = registry.add(1, "Rio Grande do Sul Estado", "rsx")
    uf = registry.slots[index]
    assert uf.sigla == "RS"
    assert uf.description == "Rio Grande do Sul Estado"[:19]


def test_add_uses_first_free_slot():
    registry = Registry()
    registry.add(1, "Acre", "ac")
    registry.add(2, "Alagoas", "al")
    registry.remove(0)
    assert registry.add(3, "Amapa", "ap") == 0


def test_add_duplicate_code():
    registry = Registry()
    registry.add(1, "Acre", "ac")
    with pytest.raises(DuplicateCodeError):
        registry.add(1, "Alagoas", "al")


def test_add_duplicate_sigla_only_against_saved():
    registry = Registry()
    registry.add(1, "Acre", "ac")
    registry.add(2, "Acre Dois", "ac")
    registry.mark_saved()
    with pytest.raises(DuplicateSiglaError):
        registry.add(3, "Acre Tres", "AC")


def test_add_rejects_digit_in_sigla():
    registry = Registry()
    with pytest.raises(ValidationError):
        registry.add(1, "Acre", "a1")
    assert list(registry.entries()) == []


def test_registry_full():
    registry = Registry()
    for n in range(MAX_SLOTS):
        registry.add(n, "Estado", _sigla(n))
    assert registry.free_slot() is None
    with pytest.raises(RegistryFullError):
        registry.add(100, "Outro", "zz")


def test_find_missing():
    registry = Registry()
    with pytest.raises(NotFoundError):
        registry.find_by_code(9)
    with pytest.raises(NotFoundError):
        registry.find_by_sigla("MG")


def test_remove_hides_entry():
    registry = Registry()
    index = registry.add(31, "Minas Gerais", "mg")
    registry.remove(index)
    with pytest.raises(NotFoundError):
        registry.find_by_code(31)
    with pytest.raises(NotFoundError):
        registry.remove(index)


def test_change_code():
    registry = Registry()
    registry.add(1, "Acre", "ac")
    index = registry.add(2, "Alagoas", "al")
    registry.mark_saved()
    with pytest.raises(DuplicateCodeError):
        registry.change_code(index, 1)
    assert registry.change_code(index, 2) is False
    assert registry.slots[index].state is SlotState.SAVED
    assert registry.change_code(index, 27) is True
    assert registry.find_by_code(27) == index
    assert registry.slots[index].state is SlotState.CHANGED


def test_change_code_check_stops_at_first_empty_slot():
    registry = Registry()
    registry.add(1, "Acre", "ac")
    registry.add(2, "Alagoas", "al")
    registry.add(3, "Amapa", "ap")
    registry.remove(1)
    assert registry.change_code(0, 3) is True


def test_change_sigla():
    registry = Registry()
    registry.add(1, "Acre", "ac")
    index = registry.add(2, "Alagoas", "al")
    with pytest.raises(DuplicateSiglaError):
        registry.change_sigla(index, "ac")
    assert registry.change_sigla(index, "al") is False
    assert registry.change_sigla(index, "am") is True
    assert registry.find_by_sigla("AM") == index


def test_change_description():
    registry = Registry()
    index = registry.add(1, "Acre", "ac")
    registry.mark_saved()
    registry.change_description(index, "Estado do Acre")
    assert registry.slots[index].description == "Estado do Acre"
    assert registry.slots[index].state is SlotState.CHANGED


def test_mark_saved_leaves_empty_slots():
    registry = Registry()
    registry.add(1, "Acre", "ac")
    registry.mark_saved()
    states = [uf.state for uf in registry.slots]
    assert states[0] is SlotState.SAVED
    assert all(state is SlotState.EMPTY for state in states[1:])


def test_init_pads_and_rejects_oversize():
    registry = Registry([UF(5, "Acre", "AC", SlotState.SAVED)])
    assert len(registry.slots) == MAX_SLOTS
    assert registry.find_by_code(5) == 0
    with pytest.raises(ValueError):
        Registry([UF() for _ in range(MAX_SLOTS + 1)])