import pytest

from codegen.core.errors import GeneratorNotFound
from codegen.generation.registry import GeneratorRegistry


def _one(ctx):
    return "one"


def _two(ctx):
    return "two"


def test_register_and_get():
    registry = GeneratorRegistry()
    registry.register("gen", _one)
    assert registry.get("gen") is _one
    assert "gen" in registry


def test_reregister_replaces():
    registry = GeneratorRegistry()
    registry.register("gen", _one)
    registry.register("gen", _two)
    assert registry.get("gen") is _two
    assert len(registry) == 1


def test_get_unknown_raises():
    registry = GeneratorRegistry()
    with pytest.raises(GeneratorNotFound) as exc_info:
        registry.get("non_ex_g")
    assert exc_info.value.name == "non_ex_g"
    assert str(exc_info.value) == "Generator with such name not found: 'non_ex_g'"


def test_available_is_sorted():
    registry = GeneratorRegistry()
    registry.register("uf", _one)
    registry.register("ibprop", _two)
    assert registry.available() == ["ibprop", "uf"]
