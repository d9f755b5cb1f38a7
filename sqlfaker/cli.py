"""Command line entry point: YAML table schema in, SQL files out."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from .insert import generate_insert_sql
from .schema import SchemaError, parse_schema

OUTPUT_DIR = "output"

_USAGE = """\
Usage: sqlfaker <yaml_file>
Examples:
  sqlfaker examples/example_table.yaml
  sqlfaker config/products_table.yml

The YAML file should include a 'rows' field to specify how many INSERT rows to generate.
Generated SQL files will be saved to the 'output/' directory."""


def _extension(path: str) -> str:
    base = os.path.basename(path)
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def output_filename(input_file: str, suffix: str, output_dir: str = OUTPUT_DIR) -> str:
    """The .sql path in output_dir derived from the input file's name."""
    base = os.path.basename(input_file)
    ext = _extension(base)
    stem = base[: len(base) - len(ext)] if ext else base
    return os.path.join(output_dir, f"{stem}{suffix}.sql")


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(_USAGE)
        return 1
    filename = args[0]

    try:
        os.makedirs(OUTPUT_DIR, exist_ok=True)
    except OSError as exc:
        return _fail(f"Error creating output directory: {exc}")

    ext = _extension(filename).lower()
    if ext not in (".yaml", ".yml"):
        return _fail(f"Unsupported file format: {ext}. Please provide a .yaml or .yml file")

    print(f"Processing YAML file: {filename}")
    try:
        text = Path(filename).read_text(encoding="utf-8")
    except OSError as exc:
        return _fail(f"Error reading YAML file: {exc}")

    try:
        schema = parse_schema(text)
    except SchemaError as exc:
        return _fail(f"Error parsing YAML: {exc}")

    create_file = output_filename(filename, "_create")
    try:
        Path(create_file).write_text(schema.create_table_sql(), encoding="utf-8")
    except OSError as exc:
        return _fail(f"Error writing CREATE SQL file: {exc}")

    print(f"\nGenerated SQL for table: {schema.table_name}")
    print("=" * 50)
    print("\n1. CREATE TABLE SQL:")
    print(f"CREATE TABLE SQL saved to: {create_file}")

    if schema.row_count > 0:
        insert_file = output_filename(filename, "_insert")
        try:
            Path(insert_file).write_text(generate_insert_sql(schema), encoding="utf-8")
        except OSError as exc:
            return _fail(f"Error writing INSERT SQL file: {exc}")
        print(f"\n2. INSERT SQL ({schema.row_count} rows):")
        print("------------------------")
        print(f"INSERT SQL saved to: {insert_file}")
    else:
        print("\n2. INSERT SQL:")
        print("-------------")
        print(
            "No INSERT SQL generated "
            "(add 'rows: N' field to YAML to generate INSERT statements)"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())