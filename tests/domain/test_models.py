"""Tests for domain models."""

import pytest

from archquest.domain.models import (
    BlockMethod,
    BlockProperty,
    BlockType,
    CodeBlock,
    Connection,
    FailureKind,
    Layer,
    LayerId,
    Result,
    ValidationResult,
    Violation,
    ViolationType,
)


class TestLayerId:
    """Tests for LayerId enum."""

    def test_layer_values(self):
        """Verify all expected layer values exist."""
        assert LayerId.PRESENTATION.value == "presentation"
        assert LayerId.APPLICATION.value == "application"
        assert LayerId.DOMAIN.value == "domain"
        assert LayerId.INFRASTRUCTURE.value == "infrastructure"

    def test_exactly_four_layers(self):
        assert len(LayerId) == 4

    def test_lookup_by_value(self):
        assert LayerId("domain") is LayerId.DOMAIN


class TestLayer:
    """Tests for Layer."""

    def test_default_name(self):
        layer = Layer(LayerId.DOMAIN)
        assert layer.name == "Domain Layer"

    def test_add_and_has_block(self):
        layer = Layer(LayerId.APPLICATION)
        layer.add_block("b1")
        assert layer.has_block("b1")
        assert not layer.has_block("b2")

    def test_get_blocks_preserves_insertion_order(self):
        layer = Layer(LayerId.APPLICATION)
        for block_id in ("c", "a", "b"):
            layer.add_block(block_id)
        assert layer.get_blocks() == ["c", "a", "b"]

    def test_get_blocks_returns_copy(self):
        layer = Layer(LayerId.APPLICATION)
        layer.add_block("a")
        layer.get_blocks().append("x")
        assert layer.get_blocks() == ["a"]
        assert len(layer) == 1


class TestBlockType:
    """Tests for BlockType enum."""

    def test_closed_set_of_ten(self):
        assert len(BlockType) == 10

    def test_wire_values(self):
        assert BlockType.UI_COMPONENT.value == "ui-component"
        assert BlockType.REPOSITORY_IMPL.value == "repository-impl"
        assert BlockType.USE_CASE.value == "usecase"


class TestCodeBlock:
    """Tests for CodeBlock."""

    def test_generated_id_embeds_type_and_name(self):
        block = CodeBlock("UserService", BlockType.SERVICE)
        assert block.block_id.startswith("service-UserService-")

    def test_generated_ids_are_unique(self):
        a = CodeBlock("User", BlockType.ENTITY)
        b = CodeBlock("User", BlockType.ENTITY)
        assert a.block_id != b.block_id

    def test_explicit_id(self):
        block = CodeBlock("User", BlockType.ENTITY, block_id="user-1")
        assert block.block_id == "user-1"

    def test_id_is_read_only(self):
        block = CodeBlock("User", BlockType.ENTITY)
        with pytest.raises(AttributeError):
            block.block_id = "changed"

    def test_properties_and_methods_default_empty(self):
        block = CodeBlock("UserDto", BlockType.DTO)
        assert block.properties == []
        assert block.methods == []

    def test_properties_can_be_attached(self):
        block = CodeBlock("UserDto", BlockType.DTO)
        block.properties = [BlockProperty("id", "string")]
        assert block.properties[0].name == "id"

    @pytest.mark.parametrize(
        "block_type,expected",
        [
            (BlockType.ENTITY, True),
            (BlockType.VALUE_OBJECT, True),
            (BlockType.DOMAIN_SERVICE, True),
            (BlockType.SERVICE, False),
            (BlockType.REPOSITORY, False),
        ],
    )
    def test_is_domain_model(self, block_type, expected):
        assert CodeBlock("X", block_type).is_domain_model() is expected

    def test_type_predicates(self):
        assert CodeBlock("V", BlockType.UI_COMPONENT).is_ui_component()
        assert CodeBlock("R", BlockType.REPOSITORY_IMPL).is_infrastructure()
        assert not CodeBlock("R", BlockType.REPOSITORY).is_infrastructure()


class TestConnection:
    """Tests for Connection dataclass."""

    def test_structural_equality(self):
        assert Connection("a", "b") == Connection("a", "b")
        assert Connection("a", "b") != Connection("b", "a")

    def test_hashable(self):
        assert len({Connection("a", "b"), Connection("a", "b")}) == 1

    def test_immutable(self):
        connection = Connection("a", "b")
        with pytest.raises(AttributeError):
            connection.source = "c"


class TestBlockMembers:
    def test_property_immutable(self):
        prop = BlockProperty("id", "string")
        with pytest.raises(AttributeError):
            prop.type = "number"

    def test_method_immutable(self):
        method = BlockMethod("save", 12)
        with pytest.raises(AttributeError):
            method.lines = 13


class TestResult:
    """Tests for Result outcome values."""

    def test_ok(self):
        result = Result.ok(42)
        assert result.is_success()
        assert not result.is_failure()
        assert result.value == 42
        assert result.kind is None

    def test_ok_without_value(self):
        assert Result.ok().value is None

    def test_fail(self):
        result = Result.fail(FailureKind.NOT_FOUND, "missing")
        assert result.is_failure()
        assert result.error == "missing"
        assert result.kind is FailureKind.NOT_FOUND

    def test_value_of_failure_raises(self):
        result = Result.fail(FailureKind.NOT_FOUND, "missing")
        with pytest.raises(ValueError, match="failed result"):
            _ = result.value

    def test_error_of_success_raises(self):
        with pytest.raises(ValueError, match="successful result"):
            _ = Result.ok().error

    def test_immutable(self):
        result = Result.ok(1)
        with pytest.raises(AttributeError):
            result.success = False


class TestViolation:
    """Tests for Violation dataclass."""

    def test_default_details_empty(self):
        violation = Violation(type="X", message="m")
        assert dict(violation.details) == {}

    def test_positional_without_details(self):
        violation = Violation("T", "m")
        assert violation.details == {}
        with pytest.raises(TypeError):
            violation.details["a"] = 1

    def test_details_are_read_only(self):
        violation = Violation(type="X", message="m", details={"a": 1})
        with pytest.raises(TypeError):
            violation.details["a"] = 2

    def test_details_copied_from_source(self):
        source = {"a": 1}
        violation = Violation(type="X", message="m", details=source)
        source["a"] = 2
        assert violation.details["a"] == 1

    def test_str_enum_type_compares_to_value(self):
        violation = Violation(type=ViolationType.FAT_SERVICE.value, message="m")
        assert violation.type == ViolationType.FAT_SERVICE


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_from_no_violations_is_valid(self):
        result = ValidationResult.from_violations([])
        assert result.is_valid is True
        assert result.violations == ()
        assert result.score == 100

    def test_from_violations_is_invalid_and_scored(self):
        violation = Violation(type=ViolationType.CYCLIC_DEPENDENCY.value, message="c")
        result = ValidationResult.from_violations([violation])
        assert result.is_valid is False
        assert result.violations == (violation,)
        assert result.score == 70

    def test_violations_of(self):
        result = ValidationResult.from_violations(
            [
                Violation(type="FAT_SERVICE", message="a"),
                Violation(type="CYCLIC_DEPENDENCY", message="b"),
                Violation(type="FAT_SERVICE", message="c"),
            ]
        )
        found = result.violations_of(ViolationType.FAT_SERVICE)
        assert [v.message for v in found] == ["a", "c"]

    def test_immutable(self):
        result = ValidationResult.from_violations([])
        with pytest.raises(AttributeError):
            result.score = 0
