"""Educational viewer for the zones of the developing cerebral cortex."""
