"""Entry point for running the trace symbolicator.

Reads raw stack trace text from a file (or stdin), resolves each frame
against a YAML type catalog and prints one line per frame. It handles:
- Configuration loading
- Logging setup
- Catalog loading
- Optional entry module identification
"""

import argparse
import json
import sys
from pathlib import Path

import structlog

from trace_symbolicator._version import __version__
from trace_symbolicator.models.catalog import MethodDescriptor
from trace_symbolicator.models.frame import ParsedFrame

log = structlog.get_logger()

UNRESOLVED = "<unresolved>"


def setup_logging(debug: bool = False, log_format: str = "console") -> None:
    """Configure structured logging.

    Args:
        debug: Enable debug logging if True
        log_format: Output format ("json" or "console")
    """
    from trace_symbolicator.utils.logging import LogFormat, LogLevel, configure_logging

    level = LogLevel.DEBUG if debug else LogLevel.WARNING
    configure_logging(level=level, log_format=LogFormat(log_format.lower()))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed argument namespace
    """
    parser = argparse.ArgumentParser(
        prog="trace-symbolicator",
        description="Resolve textual stack trace frames against a type catalog",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--catalog",
        type=Path,
        required=True,
        help="Path to YAML type catalog",
    )

    parser.add_argument(
        "-t",
        "--trace",
        type=Path,
        default=None,
        help="Path to raw stack trace text (default: read stdin)",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: built-in defaults)",
    )

    parser.add_argument(
        "-s",
        "--skip",
        type=int,
        default=None,
        help="Frames to skip after the capture mechanism's own frames (default: from config)",
    )

    parser.add_argument(
        "--entry-module",
        action="store_true",
        help="Also identify the application's entry module",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print frames as JSON lines",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--format",
        choices=["json", "console"],
        default=None,
        help="Log output format (default: logging.format from config, else console)",
    )

    return parser.parse_args(argv)


def format_frame(frame: ParsedFrame, method: MethodDescriptor | None, as_json: bool = False) -> str:
    """Render one frame and its resolution as a single output line.

    Args:
        frame: Parsed frame
        method: Resolved method, or None
        as_json: Render a JSON object instead of text

    Returns:
        Output line without trailing newline
    """
    if as_json:
        return json.dumps(
            {
                "raw": frame.raw_text,
                "type": frame.type_name,
                "method": frame.method_name,
                "parameters": list(frame.parameter_type_names),
                "file": frame.file_name,
                "line": frame.line_number,
                "resolved": method.signature if method is not None else None,
                "module": method.module if method is not None else None,
            }
        )

    location = ""
    if frame.file_name is not None:
        location = f" ({frame.file_name}:{frame.line_number})"

    if not frame.is_match:
        return f"{frame.raw_text.strip()} -> {UNRESOLVED}"
    if method is None:
        return f"{frame.qualified_name}{location} -> {UNRESOLVED}"
    return f"{frame.qualified_name}{location} -> {method.signature} [{method.module}]"


def run(args: argparse.Namespace) -> int:
    """Symbolicate the trace described by parsed arguments.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    from pydantic import ValidationError

    from trace_symbolicator.catalog.loader import load_catalog
    from trace_symbolicator.config.loader import load_config
    from trace_symbolicator.core.entry_module import EntryModuleIdentifier
    from trace_symbolicator.core.method_resolver import configure_default_resolver
    from trace_symbolicator.core.trace_assembler import TraceAssembler
    from trace_symbolicator.utils.errors import SymbolicatorError
    from trace_symbolicator.utils.logging import bind_context

    try:
        config = load_config(args.config)

        if not args.debug:
            from trace_symbolicator.utils.logging import configure_logging

            configure_logging(
                level=config.logging.level,
                log_format=args.format or config.logging.format,
                file_path=config.logging.file.path if config.logging.file.enabled else None,
                file_enabled=config.logging.file.enabled,
            )

        configure_default_resolver(config.resolver.type_cache_size)
        catalog = load_catalog(args.catalog)

        if args.trace is None:
            bind_context(trace_source="stdin")
            raw_text = sys.stdin.read()
        else:
            bind_context(trace_source=str(args.trace))
            raw_text = args.trace.read_text()

        skip_frames = args.skip if args.skip is not None else config.capture.skip_frames
        assembler = TraceAssembler(self_frame_count=config.capture.self_frame_count)
        trace = assembler.capture(raw_text, skip_frames)

        for frame in trace:
            print(format_frame(frame, frame.resolve(catalog), as_json=args.json))

        if args.entry_module:
            identifier = EntryModuleIdentifier(
                catalog,
                ignored_modules=config.entry_module.ignored_modules,
                entry_module=config.entry_module.module,
            )
            print(f"entry module: {identifier.get_application_id(lambda: trace)}")

        return 0

    except FileNotFoundError as e:
        log.error("file_not_found", error=str(e))
        return 1
    except ValidationError as e:
        log.error("configuration_invalid", error=str(e))
        return 1
    except SymbolicatorError as e:
        log.error("symbolication_failed", error_type=type(e).__name__, error=str(e))
        return 1
    except ValueError as e:
        log.error("configuration_invalid", error=str(e))
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    setup_logging(debug=args.debug, log_format=args.format or "console")

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
