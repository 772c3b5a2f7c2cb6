"""Shared test fixtures for the trace symbolicator."""

from collections.abc import Callable
from pathlib import Path

import pytest

from trace_symbolicator.models.catalog import (
    CONSTRUCTOR_NAME,
    STATIC_CONSTRUCTOR_NAME,
    MethodDescriptor,
    ParameterDescriptor,
    TypeCatalog,
    TypeDescriptor,
)

# Get the fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"
TRACES_DIR = FIXTURES_DIR / "traces"
CATALOGS_DIR = FIXTURES_DIR / "catalogs"

MethodFactory = Callable[..., MethodDescriptor]


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def orders_trace() -> str:
    """Load a trace with three capture frames followed by four application frames."""
    # Decoded from bytes so the CRLF line endings survive
    return (TRACES_DIR / "orders.txt").read_bytes().decode("utf-8")


@pytest.fixture
def orders_catalog_path() -> Path:
    """Return the path of the YAML catalog matching the orders trace."""
    return CATALOGS_DIR / "orders.yaml"


@pytest.fixture
def make_method() -> MethodFactory:
    """Return a factory for method descriptors."""

    def factory(
        name: str,
        *parameter_types: str,
        declaring_type: str = "Acme.Orders.OrderService",
        module: str = "Acme.Orders",
        is_static: bool = False,
    ) -> MethodDescriptor:
        return MethodDescriptor(
            name=name,
            declaring_type=declaring_type,
            module=module,
            parameters=tuple(
                ParameterDescriptor(name=f"arg{i}", type_name=type_name)
                for i, type_name in enumerate(parameter_types)
            ),
            is_constructor=name in (CONSTRUCTOR_NAME, STATIC_CONSTRUCTOR_NAME),
            is_static=is_static,
        )

    return factory


@pytest.fixture
def orders_catalog(make_method: MethodFactory) -> TypeCatalog:
    """Return an in-memory catalog with an overloaded service and a nested type."""
    order_service = TypeDescriptor(
        full_name="Acme.Orders.OrderService",
        module="Acme.Orders",
        constructors=(
            make_method(CONSTRUCTOR_NAME, "IOrderRepository"),
            make_method(STATIC_CONSTRUCTOR_NAME, is_static=True),
        ),
        methods=(
            make_method("Submit", "Order", "Boolean"),
            make_method("Submit", "Order"),
            make_method("Cancel", "Int32"),
        ),
    )
    validator = TypeDescriptor(
        full_name="Acme.Orders.OrderService+Validator",
        module="Acme.Orders",
        is_nested=True,
        methods=(
            make_method(
                "Check", "Order", declaring_type="Acme.Orders.OrderService+Validator"
            ),
        ),
    )
    program = TypeDescriptor(
        full_name="Acme.Web.Program",
        module="Acme.Web",
        methods=(
            make_method(
                "Main",
                "String[]",
                declaring_type="Acme.Web.Program",
                module="Acme.Web",
                is_static=True,
            ),
        ),
    )
    return TypeCatalog.from_types([order_service, validator, program])
