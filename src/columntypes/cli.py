import argparse
import json
import sys
from typing import Dict, List, Optional

from columntypes.execution.config_executor import ConfigExecutor
from columntypes.outputs.yaml_exporter import YAMLTypeExporter
from columntypes.observability.logger import set_log_stream
from columntypes.router import route
from columntypes.utils.exceptions import ColumnTypesError


class C:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"


def cprint(text: str, color: str = C.RESET, bold: bool = False, file=None):
    prefix = (C.BOLD if bold else "") + color
    print(f"{prefix}{text}{C.RESET}", file=file or sys.stdout)


def _load_json(text: str, label: str) -> Dict:
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise ColumnTypesError(f"Invalid JSON for {label}: {e}")
    return value


def _build_render_payload(args: argparse.Namespace) -> Dict:
    return {
        "action": "render",
        "dialect": args.dialect,
        "columns": [{
            "type": args.type,
            "type_name": args.type_name,
            "column_size": args.size,
            "decimal_digits": args.scale,
            "length_semantics": args.length_semantics,
        }],
    }


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Column Type Accelerator CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a column type for a dialect")
    render.add_argument("--dialect", default="default", help="Target dialect")
    render.add_argument("--type", required=True, help="Generic SQL type (name or code)")
    render.add_argument("--type-name", help="Native type name")
    render.add_argument("--size", type=int, default=0, help="Column size / precision")
    render.add_argument("--scale", type=int, default=0, help="Decimal digits")
    render.add_argument(
        "--length-semantics",
        choices=["CHAR", "BYTE"],
        help="Length semantics for textual types",
    )

    diff = sub.add_parser("diff", help="Compare two column descriptors")
    diff.add_argument("--left", required=True, help="JSON column descriptor")
    diff.add_argument("--right", required=True, help="JSON column descriptor")

    run_config = sub.add_parser("run-config", help="Render columns from a YAML config")
    run_config.add_argument("config", help="Path to YAML config file")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    # Results go to stdout, events to stderr
    previous_stream = set_log_stream(sys.stderr)
    try:
        if args.command == "render":
            response = route(_build_render_payload(args))
            print(response["columns"][0]["type"])

        elif args.command == "diff":
            response = route({
                "action": "diff",
                "left": _load_json(args.left, "--left"),
                "right": _load_json(args.right, "--right"),
            })
            verdict = "DIFFERENT" if response["differs"] else "SAME"
            color = C.YELLOW if response["differs"] else C.GREEN
            cprint(verdict, color, bold=True)
            if response["changes"]:
                print("Changed: " + ", ".join(response["changes"]))

        else:
            result = ConfigExecutor(args.config).execute()
            print(YAMLTypeExporter(result).export_to_string(), end="")

    except (ColumnTypesError, FileNotFoundError) as e:
        cprint("[FAILED] " + str(e), C.RED, bold=True, file=sys.stderr)
        return 1
    finally:
        set_log_stream(previous_stream)

    return 0


if __name__ == "__main__":
    sys.exit(main())
