"""Tests for ArchitectureValidator."""

import logging

from archquest.application.validator import ArchitectureValidator
from archquest.domain.layer_structure import LayerStructure
from archquest.domain.models import (
    BlockMethod,
    BlockProperty,
    BlockType,
    LayerId,
    ViolationType,
)
from archquest.domain.rules import (
    DEFAULT_RULE_CONFIGS,
    STANDARD_RULES,
    RuleConfig,
    ValidationRule,
)


def _dirty_structure(block):
    """Cycle among services, a UI-leaking DTO and a fat service."""
    structure = LayerStructure.create()
    s1 = block("S1")
    s1.methods = [BlockMethod("run", 250)]
    dto = block("UserDto", BlockType.DTO)
    dto.properties = [BlockProperty("onClick", "() => void")]
    structure.add_block(LayerId.APPLICATION, s1)
    structure.add_block(LayerId.APPLICATION, block("S2"))
    structure.add_block(LayerId.APPLICATION, dto)
    structure.create_connection("S1", "S2")
    structure.create_connection("S2", "S1")
    return structure


class TestConfiguration:
    def test_default_rules_are_standard(self):
        assert ArchitectureValidator().rules == STANDARD_RULES

    def test_missing_configs_use_defaults(self):
        validator = ArchitectureValidator(
            rule_configs={ValidationRule.NO_UI_IN_DTO: RuleConfig(enabled=False)}
        )
        configs = validator.rule_configs
        assert configs[ValidationRule.NO_UI_IN_DTO].enabled is False
        assert configs[ValidationRule.NO_FAT_SERVICE] == DEFAULT_RULE_CONFIGS[
            ValidationRule.NO_FAT_SERVICE
        ]

    def test_enabled_rules_skip_disabled(self):
        validator = ArchitectureValidator(
            STANDARD_RULES,
            {ValidationRule.NO_CYCLIC_DEPENDENCY: RuleConfig(enabled=False)},
        )
        assert ValidationRule.NO_CYCLIC_DEPENDENCY in validator.rules
        assert ValidationRule.NO_CYCLIC_DEPENDENCY not in validator.enabled_rules

    def test_rule_names_accepted(self):
        validator = ArchitectureValidator(["NO_FAT_SERVICE"])
        assert validator.rules == (ValidationRule.NO_FAT_SERVICE,)


class TestValidate:
    def test_clean_structure(self, validator, layered_structure):
        result = validator.validate(layered_structure)

        assert result.is_valid is True
        assert result.violations == ()
        assert result.score == 100

    def test_empty_structure(self, validator, structure):
        result = validator.validate(structure)
        assert result.is_valid is True
        assert result.score == 100

    def test_two_node_cycle_scores_70(self, validator, block):
        structure = LayerStructure.create()
        structure.add_block(LayerId.APPLICATION, block("S1"))
        structure.add_block(LayerId.APPLICATION, block("S2"))
        structure.create_connection("S1", "S2")
        structure.create_connection("S2", "S1")

        result = validator.validate(structure)

        assert result.is_valid is False
        assert [v.type for v in result.violations] == ["CYCLIC_DEPENDENCY"]
        assert result.score == 70

    def test_violations_follow_rule_order(self, block):
        structure = _dirty_structure(block)

        forward = ArchitectureValidator(STANDARD_RULES).validate(structure)
        backward = ArchitectureValidator(tuple(reversed(STANDARD_RULES))).validate(structure)

        assert [v.type for v in forward.violations] == [
            "CYCLIC_DEPENDENCY",
            "DTO_PURITY_VIOLATION",
            "FAT_SERVICE",
        ]
        assert [v.type for v in backward.violations] == [
            "FAT_SERVICE",
            "DTO_PURITY_VIOLATION",
            "CYCLIC_DEPENDENCY",
        ]
        # 100 - 30 - 15 - 10
        assert forward.score == backward.score == 45

    def test_disabled_rule_contributes_nothing(self, block):
        structure = _dirty_structure(block)
        validator = ArchitectureValidator(
            STANDARD_RULES,
            {ValidationRule.NO_CYCLIC_DEPENDENCY: RuleConfig(enabled=False)},
        )

        result = validator.validate(structure)

        assert not result.violations_of(ViolationType.CYCLIC_DEPENDENCY)
        assert result.score == 75

    def test_only_requested_rules_run(self, block):
        structure = _dirty_structure(block)
        result = ArchitectureValidator([ValidationRule.NO_FAT_SERVICE]).validate(structure)
        assert [v.type for v in result.violations] == ["FAT_SERVICE"]

    def test_custom_thresholds(self, block):
        structure = _dirty_structure(block)
        validator = ArchitectureValidator(
            [ValidationRule.NO_FAT_SERVICE],
            {ValidationRule.NO_FAT_SERVICE: RuleConfig(params={"max_lines": 300})},
        )
        assert validator.validate(structure).is_valid is True

    def test_deterministic(self, validator, block):
        structure = _dirty_structure(block)
        first = validator.validate(structure)
        second = validator.validate(structure)
        assert first == second

    def test_does_not_mutate_structure(self, validator, block):
        structure = _dirty_structure(block)
        blocks_before = [p.block.block_id for p in structure.get_all_blocks()]
        connections_before = structure.get_connections()

        validator.validate(structure)

        assert [p.block.block_id for p in structure.get_all_blocks()] == blocks_before
        assert structure.get_connections() == connections_before

    def test_restored_structure_reports_direction_violations(self, validator, block):
        structure = LayerStructure.restore(
            [
                (LayerId.PRESENTATION, block("UserView", BlockType.UI_COMPONENT)),
                (LayerId.INFRASTRUCTURE, block("UserRepositoryImpl", BlockType.REPOSITORY_IMPL)),
            ],
            [("UserView", "UserRepositoryImpl")],
        )

        result = validator.validate(structure)

        assert [v.type for v in result.violations] == [
            "DEPENDENCY_VIOLATION",
            "PRESENTATION_TO_INFRA",
        ]
        assert result.score == 65

    def test_score_clamped_at_zero(self, validator, block):
        structure = LayerStructure.create()
        names = [f"S{i}" for i in range(4)]
        for name in names:
            structure.add_block(LayerId.APPLICATION, block(name))
        # four self-loops: one cycle each
        for name in names:
            structure.create_connection(name, name)

        result = validator.validate(structure)

        assert len(result.violations) == 4
        assert result.score == 0

    def test_logs_summary(self, validator, layered_structure, caplog):
        with caplog.at_level(logging.INFO, logger="archquest"):
            validator.validate(layered_structure)
        assert "0 violation(s), score 100" in caplog.text
