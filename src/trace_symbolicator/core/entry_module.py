"""Identification of an application's entry module from a stack trace.

When the host cannot report its entry module directly, the module is
inferred from a captured trace: the earliest frame (in program order) whose
method resolves to a module that is not part of the symbolicator itself,
the runtime core library, or a known test runner / hosting process.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import structlog

from trace_symbolicator.models.catalog import TypeCatalog
from trace_symbolicator.models.trace import StackTrace
from trace_symbolicator.utils.errors import EntryModuleNotFoundError, PreconditionError
from trace_symbolicator.utils.logging import LogEventNames

log = structlog.get_logger()

DEFAULT_IGNORED_MODULES: tuple[str, ...] = (
    "trace_symbolicator",
    "mscorlib",
    "System.Private.CoreLib",
    "Microsoft.VisualStudio.HostingProcess.Utilities",
    "nunit.core",
    "JetBrains.ReSharper.UnitTestRunner.nUnit",
    "JetBrains.ReSharper.TaskRunnerFramework",
)


class EntryModuleIdentifier:
    """Determines the application's entry module.

    Example:
        identifier = EntryModuleIdentifier(catalog)
        app_id = identifier.get_application_id(lambda: capture(raw_text))
    """

    def __init__(
        self,
        catalog: TypeCatalog,
        ignored_modules: Iterable[str] = DEFAULT_IGNORED_MODULES,
        entry_module: str | None = None,
    ) -> None:
        """Initialize the EntryModuleIdentifier.

        Args:
            catalog: Type catalog used to resolve frames
            ignored_modules: Modules that never count as the entry module
            entry_module: Entry module reported by the host, if known; takes
                precedence over trace inspection
        """
        if catalog is None:
            raise PreconditionError("catalog must not be None")
        self.catalog = catalog
        self.ignored_modules = frozenset(ignored_modules)
        self.entry_module = entry_module
        self._application_id: str | None = None

    def identify(self, trace: StackTrace) -> str:
        """Identify the entry module from a captured trace.

        Frames are taken innermost first, so the last qualifying frame is
        the one closest to the program's entry point.

        Args:
            trace: Captured stack trace

        Returns:
            Name of the entry module

        Raises:
            EntryModuleNotFoundError: If no frame resolves to a non-ignored module
        """
        if trace is None:
            raise PreconditionError("trace must not be None")

        entry_module: str | None = None
        for frame in trace:
            method = frame.resolve(self.catalog)
            if method is None or method.module in self.ignored_modules:
                continue
            entry_module = method.module

        if entry_module is None:
            log.error(LogEventNames.ENTRY_MODULE_NOT_FOUND, frame_count=trace.frame_count)
            raise EntryModuleNotFoundError("Unable to determine entry module.")

        log.info(LogEventNames.ENTRY_MODULE_IDENTIFIED, module=entry_module)
        return entry_module

    def get_application_id(self, trace_source: Callable[[], StackTrace]) -> str:
        """Return the application ID: the entry module's name.

        The trace is only captured when the host did not report the entry
        module; the answer is cached after the first call.

        Args:
            trace_source: Callable producing the trace to inspect

        Returns:
            Application ID
        """
        if self._application_id is None:
            self._application_id = self.entry_module or self.identify(trace_source())
        return self._application_id
