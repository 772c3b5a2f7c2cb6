"""Type catalog loading from YAML documents.

Each module of the document is validated on its own; a module that fails
validation is logged and skipped so the rest of the catalog stays usable.
"""

from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError

from ..models.catalog import (
    CONSTRUCTOR_NAME,
    STATIC_CONSTRUCTOR_NAME,
    MethodDescriptor,
    ParameterDescriptor,
    TypeCatalog,
    TypeDescriptor,
)
from ..utils.errors import CatalogLoadError
from ..utils.logging import LogEventNames
from .schema import ConstructorEntry, MethodEntry, ModuleEntry, TypeEntry

log = structlog.get_logger()


def _build_method(
    entry: ConstructorEntry,
    name: str,
    type_entry: TypeEntry,
    module: str,
    is_constructor: bool,
) -> MethodDescriptor:
    return MethodDescriptor(
        name=name,
        declaring_type=type_entry.full_name,
        module=module,
        parameters=tuple(
            ParameterDescriptor(
                name=parameter.name,
                type_name=parameter.type,
                full_type_name=parameter.full_type,
            )
            for parameter in entry.parameters
        ),
        is_constructor=is_constructor,
        is_static=entry.is_static,
        visibility=entry.visibility,
    )


def _build_type(type_entry: TypeEntry, module: str) -> TypeDescriptor:
    constructors = tuple(
        _build_method(
            ctor,
            STATIC_CONSTRUCTOR_NAME if ctor.is_static else CONSTRUCTOR_NAME,
            type_entry,
            module,
            is_constructor=True,
        )
        for ctor in type_entry.constructors
    )
    methods = tuple(
        _build_method(method, method.name, type_entry, module, is_constructor=False)
        for method in type_entry.methods
    )
    return TypeDescriptor(
        full_name=type_entry.full_name,
        module=module,
        is_nested=type_entry.is_nested,
        constructors=constructors,
        methods=methods,
    )


def build_catalog(document: dict[str, Any]) -> TypeCatalog:
    """
    Build a TypeCatalog from a parsed catalog document.

    Args:
        document: Mapping with a ``modules`` list

    Returns:
        TypeCatalog containing the types of every valid module

    Raises:
        CatalogLoadError: If the document has no usable ``modules`` list
    """
    modules = document.get("modules", [])
    if not isinstance(modules, list):
        raise CatalogLoadError("Catalog 'modules' must be a list")

    types: list[TypeDescriptor] = []
    for raw_module in modules:
        try:
            module = ModuleEntry.model_validate(raw_module)
        except ValidationError as e:
            module_name = raw_module.get("name") if isinstance(raw_module, dict) else None
            log.warning(
                LogEventNames.CATALOG_MODULE_SKIPPED,
                module=module_name,
                error_count=e.error_count(),
                error=str(e),
            )
            continue

        types.extend(_build_type(type_entry, module.name) for type_entry in module.types)

    return TypeCatalog.from_types(types)


def load_catalog(path: Path) -> TypeCatalog:
    """
    Load a type catalog from a YAML file.

    Args:
        path: Path to YAML catalog document

    Returns:
        TypeCatalog; empty if the document lists no modules

    Raises:
        FileNotFoundError: If the catalog file doesn't exist
        CatalogLoadError: If the file is not valid YAML or not a mapping
    """
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    log.info(LogEventNames.CATALOG_LOADING, path=str(path))

    with path.open() as f:
        try:
            document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CatalogLoadError(f"Invalid catalog YAML in {path}: {e}") from e

    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise CatalogLoadError(f"Catalog root must be a mapping: {path}")

    catalog = build_catalog(document)

    log.info(
        LogEventNames.CATALOG_LOADED,
        path=str(path),
        type_count=len(catalog),
        module_count=len(catalog.modules),
    )
    return catalog
