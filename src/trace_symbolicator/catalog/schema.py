"""Pydantic models for the YAML catalog document.

Example document::

    modules:
      - name: Acme.Orders
        types:
          - namespace: Acme.Orders
            name: OrderService
            constructors:
              - parameters:
                  - {name: repository, type: IOrderRepository}
            methods:
              - name: Submit
                parameters:
                  - {name: order, type: Acme.Orders.Order}
          - namespace: Acme.Orders
            declaring_type: OrderService
            name: Validator
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..models.catalog import (
    NAMESPACE_SEPARATOR,
    NESTED_TYPE_SEPARATOR,
    Visibility,
)

# Type names in trace text are the innermost segment of either separator
QUALIFIER_PATTERN = re.compile(r"[.+]")


class ParameterEntry(BaseModel):
    """A formal parameter.

    ``type`` may be written short (``Order``) or fully qualified
    (``Acme.Orders.Order``, ``Acme.Orders.OrderService+Validator``); only the
    short name takes part in resolution.
    """

    name: str
    type: str
    full_type: str | None = None

    @model_validator(mode="after")
    def split_qualified_type(self) -> "ParameterEntry":
        """Keep the short name in ``type`` and the qualified one in ``full_type``."""
        if QUALIFIER_PATTERN.search(self.type):
            if self.full_type is None:
                self.full_type = self.type
            self.type = QUALIFIER_PATTERN.split(self.type)[-1]
        return self


class ConstructorEntry(BaseModel):
    """A declared constructor."""

    model_config = ConfigDict(populate_by_name=True)

    parameters: list[ParameterEntry] = []
    is_static: bool = Field(False, alias="static")
    visibility: Visibility = Visibility.PUBLIC


class MethodEntry(ConstructorEntry):
    """A declared method."""

    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject blank method names."""
        if not v.strip():
            raise ValueError("Method name must not be blank")
        return v


class TypeEntry(BaseModel):
    """A declared type."""

    name: str
    namespace: str = ""
    declaring_type: str | None = Field(
        None,
        description="Enclosing type path for nested types, e.g. 'Outer' or 'Outer+Middle'",
    )
    constructors: list[ConstructorEntry] = []
    methods: list[MethodEntry] = []

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Type names are single segments; namespaces go in ``namespace``."""
        if not v or NAMESPACE_SEPARATOR in v or NESTED_TYPE_SEPARATOR in v:
            raise ValueError(f"Invalid type name: {v!r}")
        return v

    @property
    def is_nested(self) -> bool:
        """Whether the type is declared inside another type."""
        return self.declaring_type is not None

    @property
    def full_name(self) -> str:
        """
        Catalog full name.

        Format: 'Namespace.Outer+Inner' for nested types
        """
        local_name = (
            f"{self.declaring_type}{NESTED_TYPE_SEPARATOR}{self.name}"
            if self.declaring_type
            else self.name
        )
        if not self.namespace:
            return local_name
        return f"{self.namespace}{NAMESPACE_SEPARATOR}{local_name}"


class ModuleEntry(BaseModel):
    """A module (assembly) and the types it contributes."""

    name: str
    types: list[TypeEntry] = []
