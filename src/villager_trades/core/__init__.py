"""Core loading pipeline: registry, context, diagnostics and the catalog walker."""
