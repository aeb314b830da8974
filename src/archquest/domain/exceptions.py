"""
Domain exceptions for the architecture validation engine.

These represent business rule violations raised by domain value objects.
Graph mutations do not raise; they report failures as Result values.
"""


class ArchQuestError(Exception):
    """Base class for all engine errors."""


class ScoreOutOfRange(ArchQuestError, ValueError):
    """
    Raised when a score value falls outside [0, 100].

    This is the invariant of the Score value object; bonus application
    that would push a score past the bounds raises it too.
    """

    def __init__(self, message: str, value: float):
        """
        Args:
            message: Human-readable error message
            value: The offending value
        """
        super().__init__(message)
        self.value = value


class MetricOutOfRange(ScoreOutOfRange):
    """Raised when a composite-score input metric falls outside [0, 100]."""

    def __init__(self, metric: str, value: float):
        """
        Args:
            metric: Name of the offending metric (e.g. "accuracy")
            value: The offending value
        """
        super().__init__(
            f"Metric '{metric}' must be between 0 and 100, got {value}", value
        )
        self.metric = metric


class BlockNotFound(ArchQuestError, KeyError):
    """Raised when a block id is not registered in a LayerStructure."""

    def __init__(self, block_id: str):
        super().__init__(f"Block not found: {block_id}")
        self.block_id = block_id

    def __str__(self) -> str:
        return str(self.args[0])


class RuleConfigError(ArchQuestError, ValueError):
    """Raised when a rule configuration document is invalid."""


class StructureFileError(ArchQuestError, ValueError):
    """Raised when a structure document cannot be turned into a LayerStructure."""


class DuplicateBlock(ArchQuestError, ValueError):
    """Raised when one block id is placed more than once."""

    def __init__(self, block_id: str, layer_id: str):
        """
        Args:
            block_id: The repeated block id
            layer_id: Layer the block was first placed in
        """
        super().__init__(f"Block '{block_id}' is already placed in the {layer_id} layer")
        self.block_id = block_id
        self.layer_id = layer_id
