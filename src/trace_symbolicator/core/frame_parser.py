"""Parser for single lines of .NET-style stack trace text.

A frame line looks like::

    at Acme.Orders.OrderService.Submit(Order order, Boolean force) in C:\\src\\OrderService.cs:line 42

and is parsed into the declaring type name (``Acme.Orders.OrderService``),
the method name (``Submit``, or ``.ctor`` for constructors), the short
parameter type names (``("Order", "Boolean")``) and, when present, the
source file and line number.

Nested types are written with dots in trace text, exactly like namespaces,
so ``Acme.Outer.Inner`` is left as-is here and disambiguated by the
method resolver.
"""

from __future__ import annotations

import re

import structlog

from trace_symbolicator.models.frame import ParsedFrame
from trace_symbolicator.utils.errors import PreconditionError
from trace_symbolicator.utils.logging import LogEventNames

log = structlog.get_logger()


class FrameParser:
    """Parser for stack trace frame lines.

    Parsing never fails: a line that does not fit the frame grammar (a
    header, a blank line, interleaved runtime text) yields a frame with
    only ``raw_text`` set.

    Example:
        parser = FrameParser()
        frame = parser.parse("   at Acme.Program.Main(String[] args)")
        print(frame.type_name, frame.method_name)
    """

    FRAME_PATTERN = re.compile(
        r"""
        \b                                  # start of the method signature
        (?P<type>
            [^.\ ]+                         # left-most segment, usually a namespace
            (?:\.[^.\ ]+)*                  # remaining segments; greedy up to the last dot
        )
        \.
        (?P<method>
            \.?                             # second dot for constructors ('.ctor')
            [^.\ ]+
        )
        \(
        (?P<params>
            (?:                             # first parameter: '<type> <name>'
                [^\ \t\r\n]+
                [\ \t\r\n]+
                [^\ \t\r\n,)]+
            )?
            (?:                             # subsequent parameters: ', <type> <name>'
                [\ \t\r\n]*,[\ \t\r\n]*
                [^\ \t\r\n]+
                [\ \t\r\n]+
                [^\ \t\r\n,)]+
            )*
        )
        \)
        (?:
            [ ]in[ ]
            (?P<file>[^\r\n]+)
            :line[ ]
            (?P<line>\d{1,9})
        )?
        """,
        re.VERBOSE,
    )

    # Splits the validated parameter list; only the type token is captured
    PARAMETER_PATTERN = re.compile(
        r"""
        (?:\A|[\ \t\r\n]*,[\ \t\r\n]*)
        (?P<type>[^\ \t\r\n]+)
        [\ \t\r\n]+
        [^\ \t\r\n,)]+
        """,
        re.VERBOSE,
    )

    def parse(self, line: str) -> ParsedFrame:
        """Parse one line of stack trace text.

        Args:
            line: Raw line of trace text

        Returns:
            ParsedFrame; structured fields are None when the line does not
            match the frame grammar

        Raises:
            PreconditionError: If line is None
        """
        if line is None:
            raise PreconditionError("line must not be None")

        match = self.FRAME_PATTERN.search(line)
        if match is None:
            log.debug(LogEventNames.FRAME_NOT_MATCHED, line=line)
            return ParsedFrame(raw_text=line)

        line_number = match.group("line")

        return ParsedFrame(
            raw_text=line,
            type_name=match.group("type"),
            method_name=match.group("method"),
            parameter_type_names=self._extract_parameter_types(match.group("params")),
            file_name=match.group("file"),
            line_number=int(line_number) if line_number is not None else None,
        )

    def _extract_parameter_types(self, params: str) -> tuple[str, ...]:
        """Extract the parameter type tokens from a matched parameter list.

        Args:
            params: Text between the parentheses, already validated by
                FRAME_PATTERN

        Returns:
            Short parameter type names in declaration order
        """
        return tuple(
            match.group("type") for match in self.PARAMETER_PATTERN.finditer(params)
        )


_default_parser = FrameParser()


def parse_frame(line: str) -> ParsedFrame:
    """Parse one line of stack trace text with the shared parser."""
    return _default_parser.parse(line)
