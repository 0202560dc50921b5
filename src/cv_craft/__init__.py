"""CV Craft: two-column CV rendering with overlay PDF export."""

__version__ = "0.1.0"
