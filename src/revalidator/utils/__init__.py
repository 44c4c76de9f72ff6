"""Infrastructure helpers shared across the package."""
