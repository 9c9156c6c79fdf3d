"""Static catalog data shipped with the package (JSON files)."""
