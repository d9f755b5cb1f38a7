"""A small seeded generator of realistic-looking fake values."""

from __future__ import annotations

import random
import uuid as _uuid
from datetime import datetime, timedelta
from typing import Sequence

_FIRST_NAMES = ("James", "Mary", "John", "Linda", "Robert", "Susan", "David", "Sarah")
_LAST_NAMES = ("Smith", "Johnson", "Brown", "Garcia", "Miller", "Davis", "Wilson", "Lee")
_WORDS = (
    "alpha", "river", "stone", "bright", "quiet", "forest", "signal", "orbit",
    "harbor", "maple", "copper", "summit", "ember", "meadow", "willow", "anchor",
)
_STREET_SUFFIXES = ("Street", "Avenue", "Road", "Lane", "Drive")
_CITIES = ("Springfield", "Riverton", "Lakeside", "Fairview", "Madison", "Salem", "Dayton")
_STATES = ("Alabama", "California", "Florida", "Iowa", "Maine", "Ohio", "Texas", "Utah")
_COUNTRIES = ("Brazil", "Canada", "France", "Germany", "India", "Japan", "Mexico", "Spain")
_COMPANY_PARTS = (
    ("Apex", "Blue", "Cedar", "Delta", "Nova", "Summit"),
    ("Systems", "Labs", "Holdings", "Industries", "Solutions"),
    ("Inc", "LLC", "Corp", "Ltd"),
)
_JOB_PARTS = (
    ("Senior", "Junior", "Lead", "Principal", "Chief"),
    ("Data", "Marketing", "Operations", "Product", "Finance"),
    ("Engineer", "Analyst", "Manager", "Designer", "Consultant"),
)
_PRODUCT_PARTS = (
    ("Smart", "Portable", "Wireless", "Compact", "Premium"),
    ("Steel", "Bamboo", "Leather", "Glass", "Cotton"),
    ("Lamp", "Chair", "Speaker", "Backpack", "Watch", "Kettle"),
)
_COLORS = ("Red", "Blue", "Green", "Yellow", "Orange", "Purple", "Black", "White", "Gray")
_DOMAINS = ("example.com", "example.net", "example.org")
_TLDS = ("com", "net", "org", "io")


class Faker:
    """Produces random values; a seed makes the sequence repeatable."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def _pick(self, *groups: Sequence[str]) -> str:
        return " ".join(self._rng.choice(group) for group in groups)

    def boolean(self) -> bool:
        return self.chance(0.5)

    def chance(self, probability: float) -> bool:
        """True with the given probability."""
        return self._rng.random() < probability

    def int64(self) -> int:
        return self._rng.randint(-(2**63), 2**63 - 1)

    def int32(self) -> int:
        return self._rng.randint(-(2**31), 2**31 - 1)

    def int_range(self, low: int, high: int) -> int:
        """An integer between low and high, both included."""
        if high < low:
            raise ValueError("high must not be less than low")
        return self._rng.randint(low, high)

    def float_range(self, low: float, high: float) -> float:
        if high < low:
            raise ValueError("high must not be less than low")
        return self._rng.uniform(low, high)

    def datetime_between(self, start: datetime, end: datetime) -> datetime:
        """A moment between start and end."""
        if end < start:
            raise ValueError("end must not be before start")
        offset = self._rng.uniform(0, (end - start).total_seconds())
        return min(start + timedelta(seconds=offset), end)

    def choice(self, options: Sequence[str]) -> str:
        """One of the options, or an empty string when there are none."""
        return self._rng.choice(options) if options else ""

    def word(self) -> str:
        return self._rng.choice(_WORDS)

    def sentence(self, word_count: int) -> str:
        if word_count <= 0:
            return ""
        text = " ".join(self.word() for _ in range(word_count))
        return text[0].upper() + text[1:] + "."

    def first_name(self) -> str:
        return self._rng.choice(_FIRST_NAMES)

    def last_name(self) -> str:
        return self._rng.choice(_LAST_NAMES)

    def username(self) -> str:
        return f"{self.last_name()}{self._rng.randint(1000, 9999)}"

    def email(self) -> str:
        local = f"{self.first_name()}{self.last_name()}".lower()
        return f"{local}@{self._rng.choice(_DOMAINS)}"

    def phone(self) -> str:
        return "".join(str(self._rng.randint(0, 9)) for _ in range(10))

    def street_address(self) -> str:
        street = f"{self._rng.randint(1, 9999)} {self.word().capitalize()} {self._rng.choice(_STREET_SUFFIXES)}"
        return f"{street}, {self.city()}, {self.state()} {self.zip_code()}"

    def city(self) -> str:
        return self._rng.choice(_CITIES)

    def state(self) -> str:
        return self._rng.choice(_STATES)

    def country(self) -> str:
        return self._rng.choice(_COUNTRIES)

    def zip_code(self) -> str:
        return f"{self._rng.randint(0, 99999):05d}"

    def company(self) -> str:
        return self._pick(*_COMPANY_PARTS)

    def job_title(self) -> str:
        return self._pick(*_JOB_PARTS)

    def url(self) -> str:
        host = f"{self.word()}{self.word()}.{self._rng.choice(_TLDS)}"
        return f"https://www.{host}/{self.word()}/{self.word()}"

    def uuid(self) -> str:
        return str(_uuid.UUID(int=self._rng.getrandbits(128), version=4))

    def product_name(self) -> str:
        return self._pick(*_PRODUCT_PARTS)

    def color(self) -> str:
        return self._rng.choice(_COLORS)