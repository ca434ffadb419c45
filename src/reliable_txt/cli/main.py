"""Main CLI entry point for the reliable-txt command-line tool.

Provides commands to inspect, decode, create and re-encode ReliableTXT files
and to benchmark the codec.
"""

import argparse
import json
import logging
import sys
import time
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

from reliable_txt import __version__
from reliable_txt.api import ReliableTxtDocument, load_file, save_file
from reliable_txt.character.encoding import ReliableTxtEncoding, detect_encoding
from reliable_txt.shared.config import ConfigError, ReliableTxtConfig
from reliable_txt.shared.errors import ReliableTxtError
from reliable_txt.shared.logging import get_logger
from reliable_txt.tools.benchmarks import CodecBenchmark

ENCODING_CHOICES = [encoding.value for encoding in ReliableTxtEncoding]


class CLIConfig:
    """Configuration management for CLI operations."""

    def __init__(self):
        self.config = ReliableTxtConfig()
        self.output_format = "text"

    @classmethod
    def from_file(cls, config_path: Path) -> "CLIConfig":
        """Load CLI configuration from a JSON file.

        Missing files leave the defaults in place; unreadable or invalid
        files are reported on stderr and also leave the defaults in place.
        """
        config = cls()
        if config_path.exists():
            try:
                data = json.loads(config_path.read_text(encoding="utf-8"))
                if not isinstance(data, dict):
                    raise ValueError("configuration file must hold a JSON object")
                if "preset" in data:
                    config.config = preset_config(data["preset"])
                if "config" in data:
                    config.config = ReliableTxtConfig.from_dict(data["config"])
                config.output_format = data.get("output_format", config.output_format)
            except (OSError, ValueError, ConfigError) as e:
                print(f"Warning: Could not load config file: {e}", file=sys.stderr)

        return config


def preset_config(name: str) -> ReliableTxtConfig:
    """Return the named configuration preset."""
    if name == "quick":
        return ReliableTxtConfig.quick()
    if name == "thorough":
        return ReliableTxtConfig.thorough()
    if name == "default":
        return ReliableTxtConfig()
    raise ValueError(f"Unknown preset: {name}")


class ProgressTracker:
    """Progress tracking for multi-file operations."""

    def __init__(self, total: int, description: str = "Processing"):
        self.total = total
        self.completed = 0
        self.description = description
        self.last_update = 0.0

    def update(self, increment: int = 1):
        """Update progress and display if needed."""
        self.completed += increment
        current_time = time.time()

        # Update every second or on completion
        if current_time - self.last_update >= 1.0 or self.completed >= self.total:
            self._display_progress()
            self.last_update = current_time

    def _display_progress(self):
        if self.total == 0:
            return

        percentage = (self.completed / self.total) * 100
        progress_bar = "=" * int(percentage // 2)
        progress_bar += " " * (50 - len(progress_bar))

        print(f"\r{self.description}: [{progress_bar}] "
              f"{percentage:.1f}% ({self.completed}/{self.total})",
              end="", file=sys.stderr)

        if self.completed >= self.total:
            print(file=sys.stderr)


class FileInspector:
    """Per-file inspection logic shared by the detect and info commands."""

    def __init__(self, correlation_id: Optional[str] = None):
        self.logger = get_logger(__name__, correlation_id, "cli_inspector")

    def detect_file(self, file_path: Path) -> Dict[str, Any]:
        """Detect the encoding of one file from its preamble."""
        try:
            with file_path.open("rb") as f:
                leading = f.read(4)
            encoding = detect_encoding(leading)
            return {
                "file": str(file_path),
                "success": True,
                "encoding": encoding.value,
            }
        except (OSError, ReliableTxtError) as e:
            self.logger.debug("Detection failed", extra={"file": str(file_path)})
            return {"file": str(file_path), "success": False, "error": str(e)}

    def inspect_file(self, file_path: Path) -> Dict[str, Any]:
        """Decode one file and summarize it."""
        try:
            document = load_file(file_path)
        except (OSError, ReliableTxtError) as e:
            self.logger.exception("Failed to inspect file", extra={"file": str(file_path)})
            return {"file": str(file_path), "success": False, "error": str(e)}

        result: Dict[str, Any] = {"file": str(file_path), "success": True}
        result.update(document.to_dict())
        return result

    def process_files(
        self,
        paths: List[Path],
        operation: str,
        show_progress: bool = True
    ) -> List[Dict[str, Any]]:
        """Run ``detect`` or ``inspect`` over all given files."""
        handler = self.detect_file if operation == "detect" else self.inspect_file
        results = []
        progress = ProgressTracker(len(paths), "Inspecting files") if (
            show_progress and len(paths) > 1
        ) else None

        for file_path in paths:
            results.append(handler(file_path))
            if progress:
                progress.update()

        return results


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="reliable-txt",
        description="Read, write and inspect ReliableTXT documents"
    )

    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Detect command
    detect_parser = subparsers.add_parser(
        "detect", help="Detect the encoding of ReliableTXT files"
    )
    detect_parser.add_argument(
        "paths", nargs="+", type=Path, help="Files to inspect"
    )
    detect_parser.add_argument(
        "--format", "-f",
        choices=["json", "csv", "text"],
        help="Output format (default: configured output format)"
    )
    detect_parser.add_argument(
        "--config", "-c", type=Path, help="Configuration file path"
    )

    # Info command
    info_parser = subparsers.add_parser(
        "info", help="Summarize ReliableTXT files"
    )
    info_parser.add_argument(
        "paths", nargs="+", type=Path, help="Files to inspect"
    )
    info_parser.add_argument(
        "--format", "-f",
        choices=["json", "csv", "text"],
        help="Output format (default: configured output format)"
    )
    info_parser.add_argument(
        "--config", "-c", type=Path, help="Configuration file path"
    )

    # Decode command
    decode_parser = subparsers.add_parser(
        "decode", help="Write the text of a ReliableTXT file as plain UTF-8"
    )
    decode_parser.add_argument("path", type=Path, help="ReliableTXT file")
    decode_parser.add_argument(
        "--output", "-o", type=Path, help="Output file (default: stdout)"
    )

    # Encode command
    encode_parser = subparsers.add_parser(
        "encode", help="Create a ReliableTXT file from plain UTF-8 text"
    )
    encode_parser.add_argument("path", type=Path, help="Plain UTF-8 text file")
    encode_parser.add_argument(
        "--encoding", "-e",
        choices=ENCODING_CHOICES,
        help="Target encoding (default: configured default encoding)"
    )
    encode_parser.add_argument(
        "--output", "-o", type=Path, help="Output file (default: stdout)"
    )
    encode_parser.add_argument(
        "--config", "-c", type=Path, help="Configuration file path"
    )

    # Convert command
    convert_parser = subparsers.add_parser(
        "convert", help="Re-encode a ReliableTXT file"
    )
    convert_parser.add_argument("path", type=Path, help="ReliableTXT file")
    convert_parser.add_argument(
        "--encoding", "-e",
        choices=ENCODING_CHOICES,
        required=True,
        help="Target encoding"
    )
    convert_parser.add_argument(
        "--output", "-o", type=Path, help="Output file (default: overwrite input)"
    )

    # Bench command
    bench_parser = subparsers.add_parser("bench", help="Benchmark the codec")
    bench_parser.add_argument(
        "--preset",
        choices=["default", "quick", "thorough"],
        help="Benchmark configuration preset"
    )
    bench_parser.add_argument(
        "--config", "-c", type=Path, help="Configuration file path"
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    return parser


def format_results(results: List[Dict[str, Any]], format_type: str) -> str:
    """Format per-file results for output."""
    if format_type == "csv":
        if not results:
            return ""

        lines = ["file,success,encoding,lines,code_points,bytes,error"]
        for result in results:
            error = result.get("error", "").replace(",", ";")
            lines.append(
                f"{result['file']},{result['success']},{result.get('encoding', '')},"
                f"{result.get('line_count', '')},{result.get('code_point_count', '')},"
                f"{result.get('byte_count', '')},{error}"
            )
        return "\n".join(lines)

    if format_type == "text":
        if not results:
            return "No results to display."

        lines = []
        for result in results:
            if not result.get("success", False):
                lines.append(f"✗ {result['file']}: {result.get('error', '')}")
                continue

            line = f"✓ {result['file']}: {result['encoding']}"
            if "line_count" in result:
                line += (
                    f" ({result['line_count']} lines, "
                    f"{result['code_point_count']} code points, "
                    f"{result['byte_count']} bytes)"
                )
            lines.append(line)
        return "\n".join(lines)

    return json.dumps(results, indent=2, ensure_ascii=False)


def _exit_code(results: List[Dict[str, Any]]) -> int:
    if not results:
        return 1
    return 0 if all(r.get("success", False) for r in results) else 1


def _load_cli_config(config_path: Optional[Path]) -> CLIConfig:
    if config_path:
        return CLIConfig.from_file(config_path)
    return CLIConfig()


def _correlation_id(config: ReliableTxtConfig) -> Optional[str]:
    if not config.global_.enable_correlation_tracking:
        return None
    return str(uuid.uuid4())[:8]


def configure_logging(args: argparse.Namespace, config: ReliableTxtConfig) -> None:
    """Set the root logging level from the flags, else from the configuration."""
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = getattr(logging, config.global_.logging_level)
    logging.basicConfig(level=level)


def cmd_detect(args: argparse.Namespace) -> int:
    """Handle detect command."""
    cli_config = args.cli_config
    inspector = FileInspector(args.correlation_id)
    results = inspector.process_files(args.paths, "detect", not args.quiet)
    print(format_results(results, args.format or cli_config.output_format))
    return _exit_code(results)


def cmd_info(args: argparse.Namespace) -> int:
    """Handle info command."""
    cli_config = args.cli_config
    inspector = FileInspector(args.correlation_id)
    results = inspector.process_files(args.paths, "inspect", not args.quiet)
    print(format_results(results, args.format or cli_config.output_format))
    return _exit_code(results)


def cmd_decode(args: argparse.Namespace) -> int:
    """Handle decode command."""
    try:
        document = load_file(args.path, args.correlation_id)
    except (OSError, ReliableTxtError) as e:
        print(f"Failed to decode {args.path}: {e}", file=sys.stderr)
        return 1

    if args.output:
        args.output.write_text(document.text, encoding="utf-8", newline="")
        print(f"Decoded {args.path} ({document.encoding.value}) -> {args.output}",
              file=sys.stderr)
    else:
        sys.stdout.buffer.write(document.text.encode("utf-8"))
        sys.stdout.buffer.flush()
    return 0


def cmd_encode(args: argparse.Namespace) -> int:
    """Handle encode command."""
    cli_config = args.cli_config

    try:
        text = args.path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Failed to read {args.path}: {e}", file=sys.stderr)
        return 1

    if args.encoding:
        document = ReliableTxtDocument(text, ReliableTxtEncoding(args.encoding))
    else:
        document = ReliableTxtDocument.from_config(cli_config.config, text)

    try:
        if args.output:
            byte_count = save_file(document, args.output, args.correlation_id)
            print(f"Encoded {args.path} -> {args.output} "
                  f"({document.encoding.value}, {byte_count} bytes)", file=sys.stderr)
        else:
            sys.stdout.buffer.write(document.get_bytes())
            sys.stdout.buffer.flush()
    except (OSError, ReliableTxtError) as e:
        print(f"Failed to encode {args.path}: {e}", file=sys.stderr)
        return 1
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    """Handle convert command."""
    try:
        document = load_file(args.path, args.correlation_id)
    except (OSError, ReliableTxtError) as e:
        print(f"Failed to read {args.path}: {e}", file=sys.stderr)
        return 1

    source_encoding = document.encoding
    document.encoding = ReliableTxtEncoding(args.encoding)
    output_path = args.output or args.path

    try:
        byte_count = save_file(document, output_path, args.correlation_id)
    except OSError as e:
        print(f"Failed to write {output_path}: {e}", file=sys.stderr)
        return 1

    print(f"Converted {args.path} ({source_encoding.value}) -> {output_path} "
          f"({document.encoding.value}, {byte_count} bytes)", file=sys.stderr)
    return 0


def cmd_bench(args: argparse.Namespace) -> int:
    """Handle bench command."""
    config = args.cli_config.config
    if args.preset:
        config = preset_config(args.preset)

    benchmark = CodecBenchmark(config.benchmark, args.correlation_id)
    suite = benchmark.run()
    report = suite.generate_report()
    print(json.dumps(report, indent=2))
    return 0 if not report["failures"] else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Commands without --config run on the defaults
    args.cli_config = _load_cli_config(getattr(args, "config", None))
    args.correlation_id = _correlation_id(args.cli_config.config)
    configure_logging(args, args.cli_config.config)

    handlers = {
        "detect": cmd_detect,
        "info": cmd_info,
        "decode": cmd_decode,
        "encode": cmd_encode,
        "convert": cmd_convert,
        "bench": cmd_bench,
    }

    try:
        return handlers[args.command](args)
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return 130  # Standard exit code for SIGINT


if __name__ == "__main__":
    sys.exit(main())
