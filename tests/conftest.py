"""Shared fixtures: small classes that record how they were built."""

from __future__ import annotations

from enum import Enum
from typing import Any

import pytest

from json_converter import JSONConfiguration


class Point:
    """Stores its keyword arguments."""

    instances = 0

    def __init__(self, **props: Any) -> None:
        Point.instances += 1
        self.props = props

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Point) and other.props == self.props

    def __repr__(self) -> str:
        return f"Point({self.props!r})"


class Group:
    def __init__(self, children: list | None = None, **props: Any) -> None:
        self.children = children or []
        self.props = props


class Color(Enum):
    RED = "#f00"
    GREEN = "#0f0"


@pytest.fixture(autouse=True)
def _reset_point_counter() -> None:
    Point.instances = 0


@pytest.fixture()
def configuration() -> JSONConfiguration:
    return JSONConfiguration(
        type_key="type",
        classes={"Point": Point, "Group": Group},
        constants={"PI": 3.14},
        enumerations={"Color": {"RED": "#f00"}, "Palette": Color},
    )
