from __future__ import annotations

from pathlib import Path

import pytest

from umldoc.model import AssociationDependency, Cardinality, Entity, Field, Modifier, Side


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def order() -> Entity:
    return Entity(
        "Order",
        "",
        [
            Field("id", "int", {Modifier.PRIVATE}),
            Field("total", "double", {Modifier.PRIVATE}),
        ],
    )


@pytest.fixture
def customer() -> Entity:
    return Entity(
        "Customer",
        "",
        [
            Field("name", "String", {Modifier.PRIVATE}),
            Field("orders", "List<Order>", {Modifier.PRIVATE}),
            Field("favourite", "Order", {Modifier.PROTECTED}),
        ],
    )


@pytest.fixture
def places(customer: Entity, order: Entity) -> AssociationDependency:
    return AssociationDependency(
        left=Side(customer, Cardinality.ONE, navigability=False),
        right=Side(order, Cardinality.MANY, navigability=True, label="places"),
    )
