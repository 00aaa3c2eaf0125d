# src/css_color_inventory/cli.py
import argparse
import json
import logging
import sys

PROMPT = "What is the absolute path to DevTools frontend? "


def _ask_for_path() -> str:
    return input(PROMPT).rstrip("\r\n")


def main(argv=None):
    """CLI: inventory the colors used on themable properties across a tree of .css files."""
    from .inventory.general.utils.log import enable_topics
    from .inventory.orchestrator import build_report
    from .inventory.report import print_report, report_to_dict

    parser = argparse.ArgumentParser(
        prog="css-color-inventory",
        description="Count the color values used on themable CSS properties under a directory.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Directory to scan (prompted for when omitted)",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
        enable_topics("all")

    try:
        root = args.path if args.path is not None else _ask_for_path()
        report = build_report(root)
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps(report_to_dict(report), indent=2, ensure_ascii=False))
    else:
        print_report(report)


if __name__ == "__main__":
    main()
