import asyncio

import pytest

from roster_api.app.core.dataset import DatasetLoader
from roster_api.app.core.errors import DatasetLoadError, UnitNotFoundError
from roster_api.app.schemas.unit import SimpleUnit
from roster_api.app.services.unit_service import UnitService


def _service(path):
    return UnitService(DatasetLoader(str(path)))


def test_list_units_preserves_order_and_length(write_dataset):
    data = [
        {"name": "Termagants", "points": [60, 120]},
        {"points": [10]},
        {"name": "X", "points": ["a", 5]},
        7,
    ]
    units = asyncio.run(_service(write_dataset(data)).list_units())
    assert units == [
        SimpleUnit(name="Termagants", points=[60, 120]),
        SimpleUnit(name="", points=[10]),
        SimpleUnit(name="X", points=[5]),
        SimpleUnit(name="", points=[]),
    ]


def test_list_units_empty_dataset(write_dataset):
    assert asyncio.run(_service(write_dataset([])).list_units()) == []


def test_list_units_non_array_is_empty(write_dataset):
    assert asyncio.run(_service(write_dataset({"name": "Hive Tyrant"})).list_units()) == []


def test_list_units_propagates_load_error(tmp_path):
    with pytest.raises(DatasetLoadError):
        asyncio.run(_service(tmp_path / "missing.json").list_units())


def test_find_first_match_wins(write_dataset):
    data = [
        {"name": "Lictor", "points": [60]},
        {"name": "Lictor", "points": [999]},
    ]
    unit = asyncio.run(_service(write_dataset(data)).find_unit_by_name("Lictor"))
    assert unit == SimpleUnit(name="Lictor", points=[60])


def test_find_is_case_sensitive_and_unnormalized(write_dataset):
    service = _service(write_dataset([{"name": "Lictor", "points": [60]}]))
    for query in ("lictor", "LICTOR", " Lictor", "Lictor "):
        with pytest.raises(UnitNotFoundError) as excinfo:
            asyncio.run(service.find_unit_by_name(query))
        assert excinfo.value.name == query


def test_find_in_non_array_dataset_is_not_found(write_dataset):
    service = _service(write_dataset({"name": "Lictor", "points": [60]}))
    with pytest.raises(UnitNotFoundError):
        asyncio.run(service.find_unit_by_name("Lictor"))


def test_empty_query_matches_nameless_entry(write_dataset):
    service = _service(write_dataset([{"name": "Lictor"}, {"name": 3, "points": [5]}]))
    assert asyncio.run(service.find_unit_by_name("")) == SimpleUnit(name="", points=[5])


def test_find_propagates_load_error(tmp_path):
    with pytest.raises(DatasetLoadError):
        asyncio.run(_service(tmp_path / "missing.json").find_unit_by_name("Lictor"))


def test_get_unit_record_returns_full_entry(write_dataset):
    data = [{"name": "Lictor", "points": [60], "equipment": ["Lictor claws and talons"]}]
    record = asyncio.run(_service(write_dataset(data)).get_unit_record("Lictor"))
    assert record.equipment == ["Lictor claws and talons"]
