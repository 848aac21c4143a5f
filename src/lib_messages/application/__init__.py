"""Application layer: ports consumed by the CLI and adapters."""
