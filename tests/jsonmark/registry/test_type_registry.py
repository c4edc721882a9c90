import pytest

from jsonmark.codec import is_private_use_marker
from jsonmark.exceptions import (
    DuplicateIdentifierError,
    InvalidIdentifierError,
    RegistryDuplicateError,
    RegistryFrozenError,
    RegistryLookupError,
)
from jsonmark.registry import BaseRegistry, TypeRegistry
from jsonmark.types import JSONType, json_type


def _type(identifier: str, test=lambda value: False) -> JSONType:
    return JSONType(identifier, test=test, decode=lambda payload: payload)


class TestBaseRegistry:
    """Generic registry contract shared by every registry."""

    def test_register_and_lookup(self):
        registry: BaseRegistry[str, int] = BaseRegistry()
        registry.register("a", 1)

        assert registry["a"] == 1
        assert registry.require("a") == 1
        assert registry.get("missing") is None
        assert registry.get("missing", 7) == 7
        assert "a" in registry
        assert len(registry) == 1

    def test_duplicate_key_rejected(self):
        registry: BaseRegistry[str, int] = BaseRegistry()
        registry.register("a", 1)

        with pytest.raises(RegistryDuplicateError):
            registry.register("a", 2)
        assert registry["a"] == 1

    def test_missing_key_is_a_key_error(self):
        registry: BaseRegistry[str, int] = BaseRegistry()

        with pytest.raises(KeyError):
            registry["nope"]
        with pytest.raises(RegistryLookupError):
            registry.require("nope")

    def test_coerce_key(self):
        registry: BaseRegistry[str, int] = BaseRegistry(coerce_key=str.lower)
        registry.register("Key", 1)

        assert registry.require("KEY") == 1

    def test_freeze_blocks_mutation(self):
        registry: BaseRegistry[str, int] = BaseRegistry()
        registry.register("a", 1)
        registry.freeze()

        assert registry.frozen is True
        with pytest.raises(RegistryFrozenError):
            registry.register("b", 2)
        with pytest.raises(RegistryFrozenError):
            registry.unregister("a")
        with pytest.raises(RegistryFrozenError):
            registry.clear()
        assert registry.keys() == ("a",)

    def test_snapshot_is_read_only_and_detached(self):
        registry: BaseRegistry[str, int] = BaseRegistry()
        registry.register("a", 1)
        snap = registry.snapshot()
        registry.register("b", 2)

        assert list(snap) == ["a"]
        with pytest.raises(TypeError):
            snap["c"] = 3  # type: ignore[index]

    def test_unregister_returns_value(self):
        registry: BaseRegistry[str, int] = BaseRegistry()
        registry.register("a", 1)

        assert registry.unregister("a") == 1
        with pytest.raises(RegistryLookupError):
            registry.unregister("a")

    @pytest.mark.asyncio
    async def test_async_wrappers(self):
        registry: BaseRegistry[str, int] = BaseRegistry()
        await registry.aregister("a", 1)

        assert await registry.arequire("a") == 1
        assert await registry.atry_get("b", 0) == 0
        await registry.afreeze()
        assert registry.frozen is True


class TestTypeRegistry:
    def test_preserves_registration_order(self):
        registry = TypeRegistry([_type("b"), _type("a"), _type("c")])

        assert registry.keys() == ("b", "a", "c")
        assert [identifier for identifier, _ in registry.iterate()] == ["b", "a", "c"]

    def test_lookup_is_exact(self):
        point = _type("Point")
        registry = TypeRegistry([point])

        assert registry.lookup("Point") is point
        assert registry.lookup("point") is None
        assert registry.lookup("Poin") is None

    def test_duplicate_leaves_registry_unchanged(self):
        first = _type("Point")
        registry = TypeRegistry([first])

        with pytest.raises(DuplicateIdentifierError):
            registry.register(_type("Point"))
        assert registry.lookup("Point") is first
        assert registry.count() == 1

    @pytest.mark.parametrize("identifier", ["", "has space", "tab\there", "new\nline", "string"])
    def test_rejects_invalid_identifiers(self, identifier):
        registry = TypeRegistry()

        with pytest.raises(InvalidIdentifierError):
            registry.register(_type(identifier))
        assert registry.count() == 0

    def test_rejects_non_definitions(self):
        with pytest.raises(TypeError):
            TypeRegistry().register("Point")  # type: ignore[arg-type]

    def test_forbidden_fragment(self):
        registry = TypeRegistry(forbidden=(":",))

        with pytest.raises(InvalidIdentifierError):
            registry.register(_type("a:b"))

    def test_forbid_checks_existing_entries(self):
        registry = TypeRegistry([_type("a|b")])

        with pytest.raises(InvalidIdentifierError):
            registry.forbid("|")

    @pytest.mark.parametrize("identifier", ["a:", "a::b", "::"])
    def test_multi_character_fragment_cannot_start_inside_identifier(self, identifier):
        registry = TypeRegistry(forbidden=("::",))

        with pytest.raises(InvalidIdentifierError):
            registry.register(_type(identifier))
        assert registry.count() == 0

    def test_multi_character_fragment_allows_clean_boundary(self):
        registry = TypeRegistry(forbidden=("::",))

        registry.register(_type(":a"))
        assert registry.keys() == (":a",)

    def test_forbid_checks_partial_overlap_of_existing_entries(self):
        registry = TypeRegistry([_type("a:")])

        with pytest.raises(InvalidIdentifierError):
            registry.forbid("::")

    def test_identifier_check(self):
        registry = TypeRegistry(identifier_check=is_private_use_marker)

        registry.register(_type("\uE001"))
        with pytest.raises(InvalidIdentifierError):
            registry.register(_type("a"))
        assert registry.keys() == ("\uE001",)

    def test_copy_is_unfrozen_and_independent(self):
        registry = TypeRegistry([_type("a")], forbidden=(":",))
        registry.freeze()
        clone = registry.copy()

        clone.register(_type("b"))
        assert registry.keys() == ("a",)
        assert clone.keys() == ("a", "b")
        with pytest.raises(InvalidIdentifierError):
            clone.register(_type("c:d"))


class TestJsonType:
    def test_cls_derives_isinstance_test(self):
        definition = json_type("int", cls=int, decode=int)

        assert definition.matches(3)
        assert not definition.matches("3")

    def test_requires_exactly_one_predicate(self):
        with pytest.raises(TypeError):
            json_type("x", decode=str)
        with pytest.raises(TypeError):
            json_type("x", decode=str, cls=int, test=lambda v: True)

    def test_payload_must_be_str(self):
        definition = json_type("x", cls=int, decode=int, encode=lambda v: v)

        with pytest.raises(TypeError):
            definition.to_payload(3)
