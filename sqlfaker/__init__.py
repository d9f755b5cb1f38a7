"""Generate Databricks SQL table definitions and fake INSERT data from YAML schemas."""

__version__ = "0.1.0"
__all__ = ["cli", "fakedata", "insert", "schema"]