"""Backend and field-type providers for shardsplit."""
