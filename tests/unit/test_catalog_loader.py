"""Tests for type catalog loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from trace_symbolicator.catalog.loader import build_catalog, load_catalog
from trace_symbolicator.catalog.schema import ParameterEntry, TypeEntry
from trace_symbolicator.core.frame_parser import parse_frame
from trace_symbolicator.core.method_resolver import MethodResolver
from trace_symbolicator.models.catalog import Visibility
from trace_symbolicator.utils.errors import CatalogLoadError


class TestParameterEntry:
    """Test ParameterEntry validation."""

    def test_short_type_kept(self) -> None:
        """Test a short parameter type."""
        entry = ParameterEntry(name="order", type="Order")

        assert entry.type == "Order"
        assert entry.full_type is None

    def test_qualified_type_split(self) -> None:
        """Test that a qualified type keeps its short name for matching."""
        entry = ParameterEntry(name="order", type="Acme.Orders.Order")

        assert entry.type == "Order"
        assert entry.full_type == "Acme.Orders.Order"

    def test_nested_type_split(self) -> None:
        """Test that a nested parameter type keeps the innermost name."""
        entry = ParameterEntry(name="validator", type="Acme.Orders.OrderService+Validator")

        assert entry.type == "Validator"
        assert entry.full_type == "Acme.Orders.OrderService+Validator"


class TestTypeEntry:
    """Test TypeEntry validation."""

    def test_full_name_top_level(self) -> None:
        """Test the catalog name of a namespaced type."""
        assert TypeEntry(name="OrderService", namespace="Acme.Orders").full_name == (
            "Acme.Orders.OrderService"
        )

    def test_full_name_nested(self) -> None:
        """Test the catalog name of a nested type."""
        entry = TypeEntry(name="Validator", namespace="Acme.Orders", declaring_type="OrderService")

        assert entry.is_nested
        assert entry.full_name == "Acme.Orders.OrderService+Validator"

    def test_full_name_without_namespace(self) -> None:
        """Test a type in the global namespace."""
        assert TypeEntry(name="Program").full_name == "Program"

    def test_dotted_name_rejected(self) -> None:
        """Test that namespaces must not be written into the type name."""
        with pytest.raises(ValidationError, match="Invalid type name"):
            TypeEntry(name="Acme.Program")


class TestBuildCatalog:
    """Test building a catalog from a parsed document."""

    def test_build_types_and_members(self) -> None:
        """Test that constructors and methods become descriptors."""
        catalog = build_catalog(
            {
                "modules": [
                    {
                        "name": "Acme",
                        "types": [
                            {
                                "namespace": "Acme",
                                "name": "Job",
                                "constructors": [{"parameters": []}, {"static": True}],
                                "methods": [
                                    {
                                        "name": "Run",
                                        "static": True,
                                        "visibility": "internal",
                                        "parameters": [{"name": "count", "type": "Int32"}],
                                    }
                                ],
                            }
                        ],
                    }
                ]
            }
        )

        (job,) = catalog.find("Acme.Job")
        assert job.module == "Acme"
        assert [ctor.is_static for ctor in job.constructors] == [False, True]
        assert all(ctor.is_constructor for ctor in job.constructors)
        assert [ctor.name for ctor in job.constructors] == [".ctor", ".cctor"]

        (run,) = job.methods
        assert run.is_static
        assert run.visibility == Visibility.INTERNAL
        assert run.declaring_type == "Acme.Job"
        assert run.parameter_type_names == ("Int32",)

    def test_invalid_module_skipped(self) -> None:
        """Test that one invalid module does not discard the others."""
        catalog = build_catalog(
            {
                "modules": [
                    {"name": "Good", "types": [{"name": "Program"}]},
                    {"types": [{"name": "Orphan"}]},
                    "not a module",
                ]
            }
        )

        assert "Program" in catalog
        assert "Orphan" not in catalog
        assert catalog.modules == frozenset({"Good"})

    def test_no_modules(self) -> None:
        """Test that a document without modules yields an empty catalog."""
        assert len(build_catalog({})) == 0

    def test_modules_not_a_list(self) -> None:
        """Test that a non-list modules entry is rejected."""
        with pytest.raises(CatalogLoadError, match="must be a list"):
            build_catalog({"modules": {"name": "Acme"}})


class TestLoadCatalog:
    """Test loading catalog files."""

    def test_load_fixture(self, orders_catalog_path: Path) -> None:
        """Test loading the orders catalog and skipping its broken module."""
        catalog = load_catalog(orders_catalog_path)

        assert catalog.modules == frozenset({"Acme.Orders", "Acme.Web", "mscorlib"})
        assert "Acme.Orders.OrderService+Validator" in catalog
        assert "Broken" not in catalog

    def test_loaded_catalog_resolves_frames(self, orders_catalog_path: Path) -> None:
        """Test end to end resolution against a loaded catalog."""
        catalog = load_catalog(orders_catalog_path)
        resolver = MethodResolver()

        submit = resolver.resolve(
            parse_frame("at Acme.Orders.OrderService.Submit(Order order, Boolean force)"),
            catalog,
        )
        ctor = resolver.resolve(
            parse_frame("at Acme.Orders.OrderService..ctor(IOrderRepository repository)"),
            catalog,
        )

        assert submit is not None and submit.parameters[1].full_type_name == "System.Boolean"
        assert ctor is not None and ctor.is_constructor

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing catalog raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that unparseable YAML raises CatalogLoadError."""
        path = tmp_path / "catalog.yaml"
        path.write_text("modules: [unclosed")

        with pytest.raises(CatalogLoadError, match="Invalid catalog YAML"):
            load_catalog(path)

    def test_root_not_mapping(self, tmp_path: Path) -> None:
        """Test that a list document raises CatalogLoadError."""
        path = tmp_path / "catalog.yaml"
        path.write_text("- name: Acme\n")

        with pytest.raises(CatalogLoadError, match="mapping"):
            load_catalog(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file yields an empty catalog."""
        path = tmp_path / "catalog.yaml"
        path.write_text("")

        assert len(load_catalog(path)) == 0

    def test_nested_parameter_type_resolves(self) -> None:
        """Test that a frame naming a nested parameter type by its own name resolves."""
        catalog = build_catalog(
            {
                "modules": [
                    {
                        "name": "Acme",
                        "types": [
                            {
                                "namespace": "Acme",
                                "name": "Service",
                                "methods": [
                                    {
                                        "name": "Check",
                                        "parameters": [
                                            {"name": "v", "type": "Acme.Outer+Validator"}
                                        ],
                                    }
                                ],
                            }
                        ],
                    }
                ]
            }
        )

        method = MethodResolver().resolve(parse_frame("at Acme.Service.Check(Validator v)"), catalog)

        assert method is not None
        assert method.parameters[0].full_type_name == "Acme.Outer+Validator"
