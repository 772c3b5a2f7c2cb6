"""Data models for the type catalog.

The catalog is built by the host (from reflection, debug symbols or a
catalog document) and is only ever read by the symbolicator.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum

CONSTRUCTOR_NAME = ".ctor"
STATIC_CONSTRUCTOR_NAME = ".cctor"
NAMESPACE_SEPARATOR = "."
NESTED_TYPE_SEPARATOR = "+"


class Visibility(StrEnum):
    """Declared accessibility of a member."""

    PUBLIC = "public"
    PROTECTED = "protected"
    INTERNAL = "internal"
    PRIVATE = "private"


@dataclass(frozen=True)
class ParameterDescriptor:
    """A formal parameter of a method or constructor."""

    name: str
    type_name: str  # short name, e.g. "Options"
    full_type_name: str | None = None  # e.g. "Acme.Config.Options"


@dataclass(frozen=True)
class MethodDescriptor:
    """A method or constructor declared by a catalog type."""

    name: str
    declaring_type: str  # catalog full name of the declaring type
    module: str
    parameters: tuple[ParameterDescriptor, ...] = ()
    is_constructor: bool = False
    is_static: bool = False
    visibility: Visibility = Visibility.PUBLIC

    @property
    def parameter_type_names(self) -> tuple[str, ...]:
        """Short type names of the formal parameters, in declaration order."""
        return tuple(parameter.type_name for parameter in self.parameters)

    @property
    def signature(self) -> str:
        """
        Human-readable signature.

        Format: 'Namespace.Type.Method(Type1, Type2)'
        """
        return f"{self.declaring_type}.{self.name}({', '.join(self.parameter_type_names)})"


@dataclass(frozen=True)
class TypeDescriptor:
    """A type known to the catalog.

    Nested types use the nested-type separator in their full name, so a type
    ``Inner`` declared inside ``Acme.Outer`` is ``Acme.Outer+Inner``.
    """

    full_name: str
    module: str
    is_nested: bool = False
    constructors: tuple[MethodDescriptor, ...] = ()
    methods: tuple[MethodDescriptor, ...] = ()

    @property
    def name(self) -> str:
        """Short name of the type, without namespace or declaring types."""
        tail = self.full_name.rsplit(NESTED_TYPE_SEPARATOR, 1)[-1]
        return tail.rsplit(NAMESPACE_SEPARATOR, 1)[-1]

    @property
    def instance_constructors(self) -> tuple[MethodDescriptor, ...]:
        """Constructors excluding the static type initializer."""
        return tuple(ctor for ctor in self.constructors if not ctor.is_static)

    def methods_named(self, name: str) -> tuple[MethodDescriptor, ...]:
        """All methods (static or instance, any visibility) with the given name."""
        return tuple(method for method in self.methods if method.name == name)


@dataclass(frozen=True)
class TypeCatalog:
    """Read-only index of known types, keyed by full name.

    Duplicate full names are kept rather than rejected: a malformed catalog
    must surface as an unresolved frame, not as a construction error.
    """

    types: tuple[TypeDescriptor, ...] = ()
    _by_name: dict[str, tuple[TypeDescriptor, ...]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        index: dict[str, list[TypeDescriptor]] = {}
        for type_descriptor in self.types:
            index.setdefault(type_descriptor.full_name, []).append(type_descriptor)
        object.__setattr__(
            self, "_by_name", {name: tuple(found) for name, found in index.items()}
        )

    @classmethod
    def from_types(cls, types: Iterable[TypeDescriptor]) -> TypeCatalog:
        """Build a catalog from any iterable of type descriptors."""
        return cls(types=tuple(types))

    def __len__(self) -> int:
        return len(self.types)

    def __contains__(self, full_name: object) -> bool:
        return full_name in self._by_name

    def find(self, full_name: str) -> tuple[TypeDescriptor, ...]:
        """Return every type registered under ``full_name`` (possibly none)."""
        return self._by_name.get(full_name, ())

    @property
    def modules(self) -> frozenset[str]:
        """Names of all modules contributing types."""
        return frozenset(type_descriptor.module for type_descriptor in self.types)
