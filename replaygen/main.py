"""Main entry point for replaygen."""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .codegen import ErrorMode, OutputFormat, jsonl_to_python
from .config import Settings, get_settings
from .utils.logging import configure_logging, get_logger

CODEGEN_EPILOG = """\
If no FILE argument is given, the recording is read from stdin.

Workflow:
  # 1. Record with Playwright codegen (JSONL target)
  npx playwright codegen --target=jsonl -o recording.jsonl https://example.com

  # 2. Transform to Python
  replaygen codegen recording.jsonl
  replaygen codegen --format=script --output=my_test.py recording.jsonl
"""


class CodegenArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = CodegenArgumentParser(
        prog="replaygen",
        description="Compile Playwright JSONL recordings to Python"
    )
    subparsers = parser.add_subparsers(dest="command")

    codegen = subparsers.add_parser(
        "codegen",
        help="Transform a JSONL recording to Python code",
        description="replaygen codegen - JSONL to Python transformer",
        epilog=CODEGEN_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    codegen.add_argument(
        "file",
        nargs="?",
        help="JSONL recording (default: stdin)"
    )
    codegen.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=settings.default_format.value,
        help=(
            "test: pytest file (default), script: standalone script, "
            "body: only action lines (for pasting)"
        )
    )
    codegen.add_argument(
        "--output", "-o",
        help="Write to file instead of stdout"
    )
    return parser


def run_codegen(args: argparse.Namespace) -> int:
    """Run the codegen sub-command. Exits with status 1 on unsupported input."""
    log = get_logger(command="codegen")

    if args.file:
        try:
            text = Path(args.file).read_text(encoding="utf-8")
        except OSError as e:
            print(f"Cannot read {args.file}: {e}", file=sys.stderr)
            return 1
    else:
        text = sys.stdin.read()

    code = jsonl_to_python(text, args.format, on_error=ErrorMode.EXIT)

    if args.output:
        Path(args.output).write_text(code, encoding="utf-8")
        log.info("Output written", path=args.output, format=args.format)
        print(f"Written to {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(code if code.endswith("\n") else code + "\n")
    return 0


def cli(argv: Optional[Sequence[str]] = None):
    """Command-line interface."""
    settings = get_settings()
    configure_logging(
        level=settings.log_level,
        json_format=settings.log_json,
        stream=sys.stderr,
    )

    parser = build_parser(settings)
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help(sys.stderr)
        sys.exit(1)

    sys.exit(run_codegen(args))


if __name__ == "__main__":
    cli()
