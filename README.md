# sqlfaker

sqlfaker reads a YAML description of a table and writes Databricks SQL from it.
It always writes a `CREATE TABLE` statement. It can also write an `INSERT`
statement filled with realistic fake rows.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Describing a table

```yaml
table_name: customers
catalog: main
schema: sales
rows: 5
columns:
  - name: id
    type: BIGINT
    primary_key: true
  - name: email
    type: STRING
    nullable: false
    comment: "Customer's contact address"
  - name: city
    type: STRING
    nullable: true
  - name: signup_date
    type: DATE
    nullable: true
  - name: balance
    type: DECIMAL(10,2)
    nullable: true
```

- `catalog` and `schema` are optional.
  - With both set, the table is named `catalog.schema.table_name`.
  - With only `schema` set, it is named `schema.table_name`.
  - A `catalog` given without a `schema` is ignored.
- A column is declared `NOT NULL` when it is a `primary_key` or when it is not `nullable`. `nullable` defaults to false.
- Primary key columns are also collected into a `PRIMARY KEY (...)` clause.
- Single quotes in a `comment` are doubled, as SQL requires.
- `rows` sets how many rows go into the `INSERT` statement. If it is left out or is zero, no `INSERT` statement is written.

## Running

```
sqlfaker customers.yaml
```

The input file name must end in `.yaml` or `.yml`. The results are written to
an `output/` directory under the current working directory. The command
creates that directory if it does not exist.

- `output/customers_create.sql`
- `output/customers_insert.sql`, written only when `rows` is greater than zero

If the command is run without an argument, it prints a usage message and exits
with status 1. These errors are also reported on standard error, with exit
status 1:

- the file has an unsupported extension
- the file cannot be read
- the file is not valid YAML
- an output file cannot be written

## Generated values

Primary key columns count up from 1.

- Integer keys are written as `1`, `2`, and so on.
- Keys whose type contains `STRING` or `VARCHAR` are written as `'ID_001'`, `'ID_002'`, and so on.

Every other column gets a random value. The value depends on what the column
type contains. The rules are checked in this order:

| Type contains        | Value                                             |
|----------------------|---------------------------------------------------|
| `BIGINT`             | any 64-bit integer                                |
| `INT`                | any 32-bit integer; this includes `SMALLINT` and `TINYINT` |
| `STRING`, `VARCHAR`  | quoted text chosen from the column name (see below) |
| `BOOLEAN`            | `true` or `false`                                 |
| `TIMESTAMP`          | `'YYYY-MM-DD HH:MM:SS'` within the last two years |
| `DATE`               | `'YYYY-MM-DD'` within the last two years          |
| `DECIMAL`            | 0.01 to 9999.99, two decimal places               |
| `DOUBLE`, `FLOAT`    | 0.0001 to 99999.9999, four decimal places         |
| anything else        | a quoted word                                     |

Text columns are filled according to their names, ignoring case. The first
match wins:

1. `email`
2. `phone`
3. `address`
4. `city`
5. `state`
6. `country`
7. `zip` or `postal`
8. `first` together with `name`
9. `last` together with `name`
10. `name`
11. `company`
12. `job` or `title`
13. `description`
14. `url` or `website`
15. `uuid` or `guid`
16. `price` or `cost`
17. `product`
18. `category`
19. `color`
20. `status`

A column that matches none of these gets a value picked from a mix of names,
companies, job titles, cities, products, words and sentences. Generated e-mail
addresses use `example.com`, `example.net` or `example.org`.

A nullable column is `NULL` in about one row in ten.

## Using it from Python

```python
from datetime import datetime

from sqlfaker.fakedata import Faker
from sqlfaker.insert import generate_insert_sql
from sqlfaker.schema import load_schema

schema = load_schema("customers.yaml")
print(schema.create_table_sql())
print(generate_insert_sql(schema, Faker(seed=42), datetime(2024, 6, 1)))
```

**Schemas (`sqlfaker.schema`)**

- `load_schema(path)` reads a YAML file.
- `parse_schema(text)` reads a YAML string.
- `TableSchema.from_mapping(data)` builds a schema from an already loaded dictionary.
- These functions raise `SchemaError` when the YAML is invalid or a field has the wrong type. `SchemaError` is a subclass of `ValueError`.
- `TableSchema.qualified_name()` returns the table name with its catalog and schema prefixes.
- `build_table_name(catalog, schema, table_name)` builds the same name from its parts.

**Inserts (`sqlfaker.insert`)**

- `generate_insert_sql(schema, faker=None, now=None)` returns an empty string when `schema.row_count` is zero or less.
- Without a `Faker`, it uses an unseeded one.
- Without `now`, dates and timestamps are counted back from the current time.
- A seeded `Faker` with a fixed `now` produces the same output every time.
- `primary_key_value`, `random_value` and `contextual_value` produce single values.

**Fake values (`sqlfaker.fakedata`)**

The `Faker` class also has methods for individual values, such as `email()`,
`city()`, `uuid()`, `int_range(low, high)` and
`datetime_between(start, end)`.

## What it does not do

sqlfaker only writes SQL text. It does not connect to a database or run the
statements.

The `sqlfaker` command has no options:

- It always writes to `./output`.
- It always generates unseeded data.

For a fixed seed or a different output location, use the Python functions
directly.