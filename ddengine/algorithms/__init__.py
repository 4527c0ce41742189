"""Layer expansion algorithms: insertion, forward step, compaction, orchestration."""
