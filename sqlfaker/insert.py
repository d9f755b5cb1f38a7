"""Generation of INSERT statements filled with random data."""

from __future__ import annotations

from datetime import datetime
from itertools import count

from .fakedata import Faker
from .schema import TableSchema

_CATEGORIES = (
    "Electronics", "Clothing", "Books", "Home & Garden", "Sports",
    "Automotive", "Health", "Beauty", "Food", "Toys",
)
_STATUSES = ("active", "inactive", "pending", "completed", "cancelled")
_NULL_PROBABILITY = 0.1


def _is_text(column_type: str) -> bool:
    return "STRING" in column_type or "VARCHAR" in column_type


def _years_before(moment: datetime, years: int) -> datetime:
    try:
        return moment.replace(year=moment.year - years)
    except ValueError:
        # 29 February rolls over to 1 March
        return moment.replace(year=moment.year - years, month=3, day=1)


def primary_key_value(column_type: str, counter: int) -> str:
    """The SQL literal for the counter-th value of a primary key column."""
    if _is_text(column_type):
        return f"'ID_{counter:03d}'"
    return str(counter)


def contextual_value(column_name: str, faker: Faker) -> str:
    """A fake string chosen to suit the column name."""
    name = column_name.lower()
    if "email" in name:
        return faker.email()
    if "phone" in name:
        return faker.phone()
    if "address" in name:
        return faker.street_address()
    if "city" in name:
        return faker.city()
    if "state" in name:
        return faker.state()
    if "country" in name:
        return faker.country()
    if "zip" in name or "postal" in name:
        return faker.zip_code()
    if "first" in name and "name" in name:
        return faker.first_name()
    if "last" in name and "name" in name:
        return faker.last_name()
    if "name" in name:
        return faker.username()
    if "company" in name:
        return faker.company()
    if "job" in name or "title" in name:
        return faker.job_title()
    if "description" in name:
        return faker.sentence(faker.int_range(5, 15))
    if "url" in name or "website" in name:
        return faker.url()
    if "uuid" in name or "guid" in name:
        return faker.uuid()
    if "price" in name or "cost" in name:
        return f"{faker.float_range(1.00, 999.99):.2f}"
    if "product" in name:
        return faker.product_name()
    if "category" in name:
        return faker.choice(_CATEGORIES)
    if "color" in name:
        return faker.color()
    if "status" in name:
        return faker.choice(_STATUSES)
    options = [
        faker.first_name(),
        faker.last_name(),
        faker.company(),
        faker.job_title(),
        faker.city(),
        faker.product_name(),
        faker.word(),
        faker.sentence(faker.int_range(3, 8)),
    ]
    return faker.choice(options)


def random_value(
    column_name: str,
    column_type: str,
    nullable: bool,
    faker: Faker,
    now: datetime | None = None,
) -> str:
    """A random SQL literal for a column of the given type."""
    if nullable and faker.chance(_NULL_PROBABILITY):
        return "NULL"
    if "BIGINT" in column_type:
        return str(faker.int64())
    if "INT" in column_type:
        # Also matches SMALLINT and TINYINT
        return str(faker.int32())
    if _is_text(column_type):
        return f"'{contextual_value(column_name, faker)}'"
    if "BOOLEAN" in column_type:
        return "true" if faker.boolean() else "false"
    if "TIMESTAMP" in column_type or "DATE" in column_type:
        end = now if now is not None else datetime.now()
        moment = faker.datetime_between(_years_before(end, 2), end)
        if "TIMESTAMP" in column_type:
            return f"'{moment:%Y-%m-%d %H:%M:%S}'"
        return f"'{moment:%Y-%m-%d}'"
    if "DECIMAL" in column_type:
        return f"{faker.float_range(0.01, 9999.99):.2f}"
    if "DOUBLE" in column_type or "FLOAT" in column_type:
        return f"{faker.float_range(0.0001, 99999.9999):.4f}"
    return f"'{faker.word()}'"


def generate_insert_sql(
    schema: TableSchema,
    faker: Faker | None = None,
    now: datetime | None = None,
) -> str:
    """An INSERT statement with schema.row_count rows, or "" when none are asked for."""
    if schema.row_count <= 0:
        return ""
    faker = faker if faker is not None else Faker()
    names = ", ".join(col.name for col in schema.columns)
    header = f"INSERT INTO {schema.qualified_name()} ({names}) VALUES\n"
    counters = {col.name: count(1) for col in schema.columns if col.primary_key}

    def row() -> str:
        values = [
            primary_key_value(col.type, next(counters[col.name]))
            if col.primary_key
            else random_value(col.name, col.type, col.nullable, faker, now)
            for col in schema.columns
        ]
        return f"  ({', '.join(values)})"

    rows = [row() for _ in range(schema.row_count)]
    return header + ",\n".join(rows) + "\n;"