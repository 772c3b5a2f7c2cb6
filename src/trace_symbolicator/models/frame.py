"""Data model for a single textual stack frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from trace_symbolicator.models.catalog import (
    CONSTRUCTOR_NAME,
    MethodDescriptor,
    TypeCatalog,
)

if TYPE_CHECKING:
    from trace_symbolicator.core.method_resolver import MethodResolver


@dataclass(frozen=True)
class ParsedFrame:
    """One line of raw stack trace text and the fields parsed out of it.

    ``type_name`` and ``method_name`` are either both set (the line matched
    the frame grammar) or both ``None``. An empty ``parameter_type_names``
    on a matched frame means a method without parameters.
    """

    raw_text: str
    type_name: str | None = None
    method_name: str | None = None
    parameter_type_names: tuple[str, ...] = ()
    file_name: str | None = None
    line_number: int | None = None
    # id(catalog) -> (catalog, resolved method); holding the catalog keeps its id stable
    _resolutions: dict[int, tuple[TypeCatalog, MethodDescriptor | None]] = field(
        default_factory=dict, init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        if (self.type_name is None) != (self.method_name is None):
            raise ValueError("type_name and method_name must both be set or both be None")

    def __str__(self) -> str:
        return self.raw_text

    @property
    def is_match(self) -> bool:
        """Whether the raw line matched the frame grammar."""
        return self.type_name is not None

    @property
    def is_constructor(self) -> bool:
        """Whether the frame is inside an object constructor."""
        return self.method_name == CONSTRUCTOR_NAME

    @property
    def column_number(self) -> int | None:
        """Source column; trace text never carries one."""
        return None

    @property
    def qualified_name(self) -> str | None:
        """Declaring type and method joined, e.g. 'Acme.Orders.Submit'."""
        if not self.is_match:
            return None
        return f"{self.type_name}.{self.method_name}"

    def resolve(
        self,
        catalog: TypeCatalog,
        resolver: MethodResolver | None = None,
    ) -> MethodDescriptor | None:
        """Resolve this frame to a unique method of ``catalog``.

        The result is computed on first call and cached for the lifetime of
        the frame, per catalog object. Concurrent first calls may both
        compute; they produce the same value.

        Args:
            catalog: Type catalog to search
            resolver: Resolver to use (defaults to the shared resolver)

        Returns:
            The resolved method, or None if the frame is not a grammar match,
            the declaring type is unknown or ambiguous, or the overload is
            ambiguous.
        """
        cached = self._resolutions.get(id(catalog))
        if cached is not None and cached[0] is catalog:
            return cached[1]

        if resolver is None:
            from trace_symbolicator.core.method_resolver import default_resolver

            resolver = default_resolver()

        method = resolver.resolve(self, catalog)
        self._resolutions[id(catalog)] = (catalog, method)
        return method
