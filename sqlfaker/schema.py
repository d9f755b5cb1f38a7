"""Table schema model, YAML loading and CREATE TABLE generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml


class SchemaError(ValueError):
    """Raised when a schema document cannot be understood."""


def build_table_name(catalog: str, schema: str, table_name: str) -> str:
    """Qualify a table name with an optional catalog and schema."""
    if catalog and schema:
        return f"{catalog}.{schema}.{table_name}"
    if schema:
        return f"{schema}.{table_name}"
    return table_name


def _field(data: Mapping, key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if kind is str and isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise SchemaError(f"field '{key}' must be {kind.__name__}, got {value!r}")
    return value


@dataclass
class Column:
    """A single column of a table."""

    name: str
    type: str
    nullable: bool = False
    comment: str = ""
    primary_key: bool = False

    @classmethod
    def from_mapping(cls, data: Any) -> "Column":
        if not isinstance(data, Mapping):
            raise SchemaError(f"column definition must be a mapping, got {data!r}")
        return cls(
            name=_field(data, "name", str, ""),
            type=_field(data, "type", str, ""),
            nullable=_field(data, "nullable", bool, False),
            comment=_field(data, "comment", str, ""),
            primary_key=_field(data, "primary_key", bool, False),
        )


@dataclass
class TableSchema:
    """A table definition together with the number of rows to generate."""

    table_name: str = ""
    catalog: str = ""
    schema: str = ""
    columns: list[Column] = field(default_factory=list)
    row_count: int = 0

    @classmethod
    def from_mapping(cls, data: Any) -> "TableSchema":
        """Build a schema from a decoded YAML document."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise SchemaError("schema document must be a mapping")
        return cls(
            table_name=_field(data, "table_name", str, ""),
            catalog=_field(data, "catalog", str, ""),
            schema=_field(data, "schema", str, ""),
            columns=[Column.from_mapping(c) for c in _field(data, "columns", list, [])],
            row_count=_field(data, "rows", int, 0),
        )

    def qualified_name(self) -> str:
        """The table name with catalog and schema prefixes where given."""
        return build_table_name(self.catalog, self.schema, self.table_name)

    def create_table_sql(self) -> str:
        """Render a CREATE TABLE statement for this schema."""
        lines = []
        primary_keys: list[str] = []
        for index, col in enumerate(self.columns):
            line = f"  {col.name} {col.type}"
            if not col.nullable or col.primary_key:
                line += " NOT NULL"
            if col.comment:
                line += " COMMENT '{}'".format(col.comment.replace("'", "''"))
            if col.primary_key:
                primary_keys.append(col.name)
            if index < len(self.columns) - 1 or primary_keys:
                line += ","
            lines.append(line + "\n")
        if primary_keys:
            lines.append(f"  PRIMARY KEY ({', '.join(primary_keys)})\n")
        return f"CREATE TABLE {self.qualified_name()} (\n" + "".join(lines) + ");"


def parse_schema(text: str | bytes) -> TableSchema:
    """Parse a YAML document into a TableSchema."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaError(str(exc)) from exc
    return TableSchema.from_mapping(data)


def load_schema(path: str | Path) -> TableSchema:
    """Read and parse a YAML schema file."""
    return parse_schema(Path(path).read_text(encoding="utf-8"))