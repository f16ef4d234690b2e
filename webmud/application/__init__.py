"""Application layer - session orchestration."""
