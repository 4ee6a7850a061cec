"""Application setup (config, DI, logging, tracing)."""
