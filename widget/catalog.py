from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

import yaml

from widget.errors import CatalogError

EUROPEAN_CAPITALS = (
    "Amsterdam", "Athens", "Berlin", "Bern", "Brussels", "Budapest",
    "Copenhagen", "Dublin", "Helsinki", "Kyiv", "Lisbon", "Ljubljana",
    "London", "Madrid", "Minsk", "Monaco", "Moscow", "Nicosia", "Oslo",
    "Paris", "Prague", "Reykjavik", "Riga", "Rome", "Sofia", "Stockholm",
    "Tallinn", "Tirana", "Vienna", "Vilnius", "Warsaw", "Zagreb",
)
DEFAULT_CITY = "London"


class CityCatalog:
    def __init__(
        self,
        cities: Iterable[str] = EUROPEAN_CAPITALS,
        default: str = DEFAULT_CITY,
    ) -> None:
        names = tuple(cities)
        if not names:
            raise CatalogError("City catalog is empty")
        if any(not isinstance(name, str) or not name for name in names):
            raise CatalogError("City names must be non-empty strings")
        if len(set(names)) != len(names):
            raise CatalogError("City catalog contains duplicates")
        if default not in names:
            raise CatalogError(f"Default city {default!r} is not in the catalog")
        self._cities = names
        self._default = default

    @property
    def default(self) -> str:
        return self._default

    @property
    def cities(self) -> tuple[str, ...]:
        return self._cities

    def __contains__(self, city: object) -> bool:
        return city in self._cities

    def __iter__(self) -> Iterator[str]:
        return iter(self._cities)

    def __len__(self) -> int:
        return len(self._cities)


class CatalogFileFactory(ABC):
    @abstractmethod
    def is_correct_format(self, file_path: str) -> bool:
        pass  # pragma: no cover

    @abstractmethod
    def create_parser(self) -> CatalogParser:
        pass  # pragma: no cover


class JSONCatalogFactory(CatalogFileFactory):
    def is_correct_format(self, file_path: str) -> bool:
        return file_path.endswith('.json')

    def create_parser(self) -> JSONCatalogParser:
        return JSONCatalogParser()


class YAMLCatalogFactory(CatalogFileFactory):
    def is_correct_format(self, file_path: str) -> bool:
        return file_path.endswith(('.yaml', '.yml'))

    def create_parser(self) -> YAMLCatalogParser:
        return YAMLCatalogParser()


class CatalogParser(ABC):
    @abstractmethod
    def parse(self, file_path: str) -> dict | None:
        pass  # pragma: no cover


class JSONCatalogParser(CatalogParser):
    def parse(self, file_path: str) -> dict | None:
        try:
            with open(file_path, 'r', encoding='utf-8') as file:
                return json.load(file)
        except json.JSONDecodeError:
            return None


class YAMLCatalogParser(CatalogParser):
    def parse(self, file_path: str) -> dict | None:
        try:
            with open(file_path, 'r', encoding='utf-8') as file:
                return yaml.safe_load(file)
        except yaml.YAMLError:
            return None


DEFAULT_FACTORIES: list[CatalogFileFactory] = [
    JSONCatalogFactory(),
    YAMLCatalogFactory(),
]


def load_catalog(
    file_path: str, factories: list[CatalogFileFactory] | None = None
) -> CityCatalog:
    """Build a catalog from a file holding ``cities`` and optional ``default``."""
    for factory in factories or DEFAULT_FACTORIES:
        if not factory.is_correct_format(file_path):
            continue
        data = factory.create_parser().parse(file_path)
        if not isinstance(data, dict) or not isinstance(
            data.get('cities'), list
        ):
            raise CatalogError(f"{file_path} does not define a cities list")
        return CityCatalog(data['cities'], data.get('default', DEFAULT_CITY))
    raise CatalogError(f"Unsupported catalog format: {file_path}")
