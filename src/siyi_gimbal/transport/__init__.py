"""Physical link adapters."""
