"""Tools exposed to the model."""
