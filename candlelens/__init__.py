"""candlelens: normalization of vision-model chart analyses."""

__version__ = "0.1.0"
