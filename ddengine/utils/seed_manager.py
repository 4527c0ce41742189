"""Deterministic seed derivation for randomized strategies."""

from __future__ import annotations

import hashlib
import random
from typing import Any, Optional


class SeedManager:
    """Derives per-component seeds from a scenario master seed.

    Randomized strategies (for example ``keep_random`` compaction) draw from
    a `random.Random` seeded per component and layer, so results do not
    depend on how many other random draws happened earlier in the run.

    Usage:
        seed_mgr = SeedManager(42)
        rng = seed_mgr.create_random_state("compaction", 3)
    """

    def __init__(self, master_seed: Optional[int] = None) -> None:
        self.master_seed = master_seed

    def derive_seed(self, *components: Any) -> Optional[int]:
        """Derive a deterministic seed from the master seed and component ids.

        Args:
            *components: Identifiers (strings, integers, etc.) of the consumer.

        Returns:
            Positive 31-bit seed, or None if no master seed is set.
        """
        if self.master_seed is None:
            return None

        seed_input = f"{self.master_seed}:" + ":".join(str(c) for c in components)
        digest = hashlib.sha256(seed_input.encode()).digest()
        return int.from_bytes(digest[:4], byteorder="big") & 0x7FFFFFFF

    def create_random_state(self, *components: Any) -> random.Random:
        """Return a Random seeded from the derived seed, unseeded without one."""
        rng = random.Random()
        derived = self.derive_seed(*components)
        if derived is not None:
            rng.seed(derived)
        return rng
