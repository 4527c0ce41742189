"""Exceptions raised by decision diagram runs.

Two fatal conditions end a run. `WidthLimitError` is a configuration defect:
a layer outgrew the width limit and no compaction strategy exists, so the
caller can reconfigure and retry. `InfeasibleError` means the strategies
produced an empty layer before the last variable, so the instance has no
complete configuration.
"""

from __future__ import annotations

from typing import Any, Optional


class DecisionDiagramError(Exception):
    """Base class for fatal decision diagram conditions."""


class WidthLimitError(DecisionDiagramError):
    """A layer exceeds the width limit and no compaction strategy is configured.

    Attributes:
        index: Layer index that overflowed, or None when raised at construction.
        size: Number of states in the layer, or None when raised at construction.
        width_limit: Configured width limit.
    """

    def __init__(
        self,
        width_limit: int,
        index: Optional[int] = None,
        size: Optional[int] = None,
    ) -> None:
        self.width_limit = width_limit
        self.index = index
        self.size = size
        if index is None:
            message = (
                f"Width limit {width_limit} is set but no compaction strategy "
                "is configured"
            )
        else:
            message = (
                f"Layer {index} ({size} states) reached the width limit of "
                f"{width_limit} and no compaction strategy is configured"
            )
        super().__init__(message)


class InfeasibleError(DecisionDiagramError):
    """A layer is empty before the diagram reaches full depth.

    Attributes:
        index: Index of the empty layer.
        variable: Variable labelling the empty layer.
    """

    def __init__(self, index: int, variable: Any = None) -> None:
        self.index = index
        self.variable = variable
        super().__init__(
            f"The instance is infeasible: layer {index} (variable {variable!r}) "
            "has no states"
        )
