"""Paths for files written by the ddengine CLI.

Results files default to ``<scenario_stem><suffix>`` either in the current
working directory or under an explicit output directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ddengine.config import ENGINE_CONFIG


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory exists for a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)


def results_path_for_run(
    scenario_path: Path,
    output_dir: Optional[Path],
    results_override: Optional[Path],
    suffix: Optional[str] = None,
) -> Path:
    """Determine where the ``run`` command writes its JSON results.

    - An absolute ``results_override`` is used as-is.
    - A relative override is resolved under ``output_dir`` when given,
      otherwise left relative to the working directory.
    - Without an override the file is ``<stem><suffix>`` under ``output_dir``
      or the working directory.

    Args:
        scenario_path: The scenario YAML file path.
        output_dir: Optional base output directory.
        results_override: Optional explicit results file path.
        suffix: Filename suffix; defaults to ``ENGINE_CONFIG.results_suffix``.

    Returns:
        The path where results should be written.
    """
    if results_override is not None:
        if results_override.is_absolute() or output_dir is None:
            return results_override
        return (output_dir / results_override).resolve()

    name = f"{scenario_path.stem}{suffix or ENGINE_CONFIG.results_suffix}"
    if output_dir is not None:
        return output_dir / name
    return Path(name)
