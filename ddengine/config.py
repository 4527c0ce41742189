"""Configuration defaults for ddengine front ends."""

from dataclasses import dataclass

from ddengine.exceptions import InfeasibleError, WidthLimitError


@dataclass
class EngineConfig:
    """Defaults shared by the CLI and scenario runner."""

    # Exit status for failures other than the two diagram conditions
    exit_code_error: int = 1

    # Exit status when a layer outgrows the width limit without compaction
    exit_code_width_limit: int = 2

    # Exit status when a layer ends up empty
    exit_code_infeasible: int = 3

    # Suffix appended to the scenario stem for the default results file
    results_suffix: str = ".results.json"

    def exit_code_for(self, exc: BaseException) -> int:
        """Map an exception raised by a run to a process exit status."""
        if isinstance(exc, WidthLimitError):
            return self.exit_code_width_limit
        if isinstance(exc, InfeasibleError):
            return self.exit_code_infeasible
        return self.exit_code_error


# Global configuration instance
ENGINE_CONFIG = EngineConfig()
