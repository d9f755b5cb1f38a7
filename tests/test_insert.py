import re
from datetime import datetime

from sqlfaker.fakedata import Faker
from sqlfaker.insert import (
    contextual_value,
    generate_insert_sql,
    primary_key_value,
    random_value,
)
from sqlfaker.schema import Column, TableSchema

NOW = datetime(2024, 6, 1, 12, 0, 0)


def test_primary_key_values():
    assert primary_key_value("STRING", 1) == "'ID_001'"
    assert primary_key_value("VARCHAR(20)", 12) == "'ID_012'"
    assert primary_key_value("BIGINT", 7) == "7"


def test_integer_types():
    faker = Faker(1)
    for _ in range(50):
        assert -(2**31) <= int(random_value("n", "INT", False, faker, NOW)) <= 2**31 - 1
        assert -(2**31) <= int(random_value("n", "SMALLINT", False, faker, NOW)) <= 2**31 - 1
        big = int(random_value("n", "BIGINT", False, faker, NOW))
        assert -(2**63) <= big <= 2**63 - 1


def test_boolean_and_numeric_formats():
    faker = Faker(2)
    for _ in range(50):
        assert random_value("b", "BOOLEAN", False, faker, NOW) in {"true", "false"}
        dec = random_value("d", "DECIMAL(10,2)", False, faker, NOW)
        assert re.fullmatch(r"\d+\.\d{2}", dec)
        assert 0.01 <= float(dec) <= 9999.99
        dbl = random_value("f", "DOUBLE", False, faker, NOW)
        assert re.fullmatch(r"\d+\.\d{4}", dbl)


def test_dates_within_last_two_years():
    faker = Faker(3)
    for _ in range(50):
        date_text = random_value("d", "DATE", False, faker, NOW)
        parsed = datetime.strptime(date_text.strip("'"), "%Y-%m-%d")
        assert datetime(2022, 6, 1) <= parsed <= NOW
        ts_text = random_value("t", "TIMESTAMP", False, faker, NOW)
        stamp = datetime.strptime(ts_text.strip("'"), "%Y-%m-%d %H:%M:%S")
        assert datetime(2022, 6, 1, 12) <= stamp <= NOW


def test_unknown_type_is_quoted_word():
    value = random_value("x", "BINARY", False, Faker(4), NOW)
    assert value.startswith("'") and value.endswith("'") and len(value) > 2


def test_nullable_columns_sometimes_null():
    faker = Faker(5)
    nullable = [random_value("n", "INT", True, faker, NOW) for _ in range(300)]
    strict = [random_value("n", "INT", False, faker, NOW) for _ in range(300)]
    assert "NULL" in nullable
    assert "NULL" not in strict


def test_contextual_values():
    faker = Faker(6)
    assert "@" in contextual_value("contact_email", faker)
    assert contextual_value("order_status", faker) in {
        "active", "inactive", "pending", "completed", "cancelled",
    }
    assert contextual_value("Category", faker) in {
        "Electronics", "Clothing", "Books", "Home & Garden", "Sports",
        "Automotive", "Health", "Beauty", "Food", "Toys",
    }
    assert re.fullmatch(r"\d+\.\d{2}", contextual_value("unit_price", faker))
    assert len(contextual_value("zip", faker)) == 5


def test_no_rows_gives_empty_string():
    schema = TableSchema(table_name="t", columns=[Column("a", "INT")])
    assert generate_insert_sql(schema, Faker(0), NOW) == ""


def test_insert_statement_structure():
    schema = TableSchema(
        table_name="users",
        catalog="c",
        schema="s",
        row_count=3,
        columns=[
            Column("id", "BIGINT", primary_key=True),
            Column("code", "STRING", primary_key=True),
            Column("active", "BOOLEAN"),
        ],
    )
    sql = generate_insert_sql(schema, Faker(8), NOW)
    lines = sql.split("\n")
    assert lines[0] == "INSERT INTO c.s.users (id, code, active) VALUES"
    assert lines[-1] == ";"
    rows = lines[1:-1]
    assert len(rows) == 3
    assert rows[0].startswith("  (1, 'ID_001', ")
    assert rows[2].startswith("  (3, 'ID_003', ")
    assert all(r.endswith("),") for r in rows[:-1])
    assert rows[-1].endswith(")")


def test_seeded_generation_is_repeatable():
    schema = TableSchema(
        table_name="t",
        row_count=4,
        columns=[Column("name", "STRING", nullable=True), Column("n", "INT")],
    )
    first = generate_insert_sql(schema, Faker(21), NOW)
    second = generate_insert_sql(schema, Faker(21), NOW)
    lines = first.split("\n")
    assert lines[0] == "INSERT INTO t (name, n) VALUES"
    assert lines[-1] == ";"
    assert len(lines[1:-1]) == 4
    assert all(row.startswith("  (") for row in lines[1:-1])
    assert first == second