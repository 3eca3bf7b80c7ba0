"""Human-friendly formatting of numbers, byte sizes, SI values, ordinals and relative times."""

__version__ = "1.0.0"