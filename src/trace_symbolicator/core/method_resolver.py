"""Resolution of parsed frames to catalog methods.

Resolution maps a frame's textual signature onto exactly one method of the
type catalog:

1. Find the declaring type. Trace text writes nested types with dots, so
   ``Acme.Outer.Inner`` may be the top-level type ``Acme.Outer.Inner`` or
   the type ``Inner`` nested in ``Acme.Outer`` (catalog name
   ``Acme.Outer+Inner``). A unique nested match is preferred over a
   unique top-level match.
2. Gather constructors (for ``.ctor``) or the methods with the frame's name.
3. Keep candidates whose parameter count and short parameter type names
   match the frame position by position.
4. Exactly one survivor resolves; zero or several resolve to None.

Parameter types are compared by short name only because trace text never
carries namespaces for them. Two overloads taking ``Options`` from
different namespaces are therefore indistinguishable and resolve to None.
"""

from __future__ import annotations

import structlog
from cachetools import LRUCache

from trace_symbolicator.models.catalog import (
    CONSTRUCTOR_NAME,
    NAMESPACE_SEPARATOR,
    NESTED_TYPE_SEPARATOR,
    MethodDescriptor,
    TypeCatalog,
    TypeDescriptor,
)
from trace_symbolicator.models.frame import ParsedFrame
from trace_symbolicator.utils.errors import PreconditionError
from trace_symbolicator.utils.logging import LogEventNames

log = structlog.get_logger()

DEFAULT_TYPE_CACHE_SIZE = 1024


def nested_type_name(type_name: str) -> str | None:
    """Return the nested-type reading of a dotted type name.

    Replaces the last namespace separator with the nested-type separator,
    e.g. 'Acme.Outer.Inner' becomes 'Acme.Outer+Inner'.

    Args:
        type_name: Dotted type name as written in trace text

    Returns:
        Nested-type name, or None if type_name has no dot
    """
    head, separator, tail = type_name.rpartition(NAMESPACE_SEPARATOR)
    if not separator:
        return None
    return f"{head}{NESTED_TYPE_SEPARATOR}{tail}"


class MethodResolver:
    """Resolves parsed frames against a type catalog.

    The resolver never mutates the catalog. It keeps a bounded cache of
    declaring-type lookups; entries remember their catalog so a cache shared
    across catalogs never returns a type from the wrong one.

    Example:
        resolver = MethodResolver()
        method = resolver.resolve(frame, catalog)
        if method is not None:
            print(method.signature)
    """

    def __init__(self, type_cache_size: int = DEFAULT_TYPE_CACHE_SIZE) -> None:
        """Initialize the MethodResolver.

        Args:
            type_cache_size: Maximum number of cached declaring-type lookups
        """
        if type_cache_size < 1:
            raise PreconditionError(f"type_cache_size must be >= 1, got {type_cache_size}")
        self._type_cache: LRUCache[tuple[int, str], tuple[TypeCatalog, TypeDescriptor | None]] = (
            LRUCache(maxsize=type_cache_size)
        )

    def resolve(self, frame: ParsedFrame, catalog: TypeCatalog) -> MethodDescriptor | None:
        """Resolve a frame to a unique method.

        Args:
            frame: Parsed frame to resolve
            catalog: Type catalog to search

        Returns:
            The single matching method, or None

        Raises:
            PreconditionError: If frame or catalog is None
        """
        if frame is None:
            raise PreconditionError("frame must not be None")
        if catalog is None:
            raise PreconditionError("catalog must not be None")

        if frame.type_name is None or frame.method_name is None:
            return None

        declaring_type = self.find_declaring_type(frame.type_name, catalog)
        if declaring_type is None:
            return None

        candidates = [
            method
            for method in self._candidate_methods(declaring_type, frame.method_name)
            if method.parameter_type_names == frame.parameter_type_names
        ]

        if len(candidates) != 1:
            log.debug(
                LogEventNames.OVERLOAD_AMBIGUOUS if candidates else LogEventNames.FRAME_UNRESOLVED,
                type_name=declaring_type.full_name,
                method=frame.method_name,
                parameter_type_names=list(frame.parameter_type_names),
                candidate_count=len(candidates),
            )
            return None

        log.debug(LogEventNames.FRAME_RESOLVED, signature=candidates[0].signature)
        return candidates[0]

    def find_declaring_type(self, type_name: str, catalog: TypeCatalog) -> TypeDescriptor | None:
        """Find the declaring type for a dotted type name.

        Args:
            type_name: Dotted type name as written in trace text
            catalog: Type catalog to search

        Returns:
            The declaring type, or None if unknown or ambiguous
        """
        key = (id(catalog), type_name)
        cached = self._type_cache.get(key)
        if cached is not None and cached[0] is catalog:
            return cached[1]

        declaring_type = self._lookup_declaring_type(type_name, catalog)
        self._type_cache[key] = (catalog, declaring_type)
        return declaring_type

    def _lookup_declaring_type(self, type_name: str, catalog: TypeCatalog) -> TypeDescriptor | None:
        top_level = [t for t in catalog.find(type_name) if not t.is_nested]

        nested_name = nested_type_name(type_name)
        nested = (
            [t for t in catalog.find(nested_name) if t.is_nested]
            if nested_name is not None
            else []
        )

        if len(nested) == 1:
            return nested[0]
        if not nested and len(top_level) == 1:
            return top_level[0]

        if nested or top_level:
            log.debug(
                LogEventNames.DECLARING_TYPE_AMBIGUOUS,
                type_name=type_name,
                nested_matches=len(nested),
                top_level_matches=len(top_level),
            )
        else:
            log.debug(LogEventNames.DECLARING_TYPE_NOT_FOUND, type_name=type_name)
        return None

    def _candidate_methods(
        self, declaring_type: TypeDescriptor, method_name: str
    ) -> tuple[MethodDescriptor, ...]:
        if method_name == CONSTRUCTOR_NAME:
            return declaring_type.instance_constructors
        return declaring_type.methods_named(method_name)

    def clear_cache(self) -> None:
        """Drop all cached declaring-type lookups."""
        self._type_cache.clear()


_default_resolver: MethodResolver | None = None


def default_resolver() -> MethodResolver:
    """Get or create the shared resolver used by ParsedFrame.resolve."""
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = MethodResolver()
    return _default_resolver


def configure_default_resolver(type_cache_size: int = DEFAULT_TYPE_CACHE_SIZE) -> MethodResolver:
    """Replace the shared resolver, e.g. with a cache size from configuration."""
    global _default_resolver
    _default_resolver = MethodResolver(type_cache_size=type_cache_size)
    return _default_resolver
