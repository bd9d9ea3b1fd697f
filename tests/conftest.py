"""Shared fixtures for samplerank tests."""

import pendulum
import pytest

from samplerank.ordering import OrderingConfiguration, parse_criterion

NOW = pendulum.datetime(2024, 6, 30, tz="UTC")


def numeric(
    criterion_id: str = "score",
    data_path: str = "score",
    weight: int = 100,
    direction: str = "desc",
    minimum: float = 0,
    maximum: float = 100,
    default=None,
    active: bool = True,
):
    """Build a numeric criterion."""
    params = {"min": minimum, "max": maximum}
    if default is not None:
        params["defaultValue"] = default
    return parse_criterion(
        {
            "id": criterion_id,
            "name": criterion_id.title(),
            "type": "numeric",
            "weight": weight,
            "direction": direction,
            "isActive": active,
            "dataPath": data_path,
            "normalizationConfig": params,
        }
    )


def enum(
    criterion_id: str = "priority",
    data_path: str = "priority",
    options=("baixa", "media", "alta"),
    weight: int = 100,
    direction: str = "desc",
    default: float = 0,
    active: bool = True,
):
    """Build an enum criterion."""
    return parse_criterion(
        {
            "id": criterion_id,
            "name": criterion_id.title(),
            "type": "enum",
            "weight": weight,
            "direction": direction,
            "isActive": active,
            "dataPath": data_path,
            "options": list(options),
            "normalizationConfig": {"defaultValue": default},
        }
    )


def date_criterion(
    criterion_id: str = "produced",
    data_path: str = "productionDate",
    window: float = 30,
    weight: int = 100,
    direction: str = "desc",
):
    """Build a date criterion."""
    return parse_criterion(
        {
            "id": criterion_id,
            "name": criterion_id.title(),
            "type": "date",
            "weight": weight,
            "direction": direction,
            "dataPath": data_path,
            "normalizationConfig": {"max": window},
        }
    )


def boolean(
    criterion_id: str = "urgent",
    data_path: str = "urgent",
    weight: int = 100,
    direction: str = "desc",
    default: bool = False,
):
    """Build a boolean criterion."""
    return parse_criterion(
        {
            "id": criterion_id,
            "name": criterion_id.title(),
            "type": "boolean",
            "weight": weight,
            "direction": direction,
            "dataPath": data_path,
            "normalizationConfig": {"defaultValue": default},
        }
    )


def configuration(*criteria, name: str = "Test ordering", **fields) -> OrderingConfiguration:
    """Build a configuration around the given criteria."""
    return OrderingConfiguration(id="cfg", name=name, criteria=list(criteria), **fields)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def samples():
    """A small, realistic batch of samples."""
    return [
        {
            "code": "A1",
            "productionDate": "2024-06-27",
            "quality": {"score": 80},
            "priority": "alta",
            "testFrequency": 5,
        },
        {
            "code": "B2",
            "productionDate": "2024-06-01",
            "quality": {"score": 40},
            "priority": "baixa",
            "testFrequency": 20,
        },
        {
            "code": "C3",
            "productionDate": "2024-06-29T12:00:00Z",
            "priority": "media",
        },
    ]
