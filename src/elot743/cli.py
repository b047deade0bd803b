"""
elot743 CLI

Command-line interface for ELOT 743 transliteration.

Usage:
    elot743 "Καλημέρα κόσμε"
    echo "Αθήνα" | elot743
    elot743 --json "Θεός"
    elot743 --detailed "μπαμπάς"
"""

import argparse
import json
import logging
import sys

from elot743._transliterator import EncodingError, Transliterator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="elot743",
        description="Transliterate Greek text to Latin following ELOT 743.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            '  elot743 "Καλημέρα κόσμε"\n'
            '  echo "Αθήνα" | elot743\n'
            '  elot743 --json "Θεός"\n'
            '  elot743 --detailed "μπαμπάς"\n'
        ),
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Greek text to transliterate (read from stdin when omitted)",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON object with the original and transliterated text",
    )
    output.add_argument(
        "--detailed",
        action="store_true",
        help="Print each replacement with its rule and context",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.text:
        text = " ".join(args.text)
    else:
        logger.debug("Reading input from stdin")
        text = sys.stdin.read().rstrip("\n")

    engine = Transliterator()
    try:
        if args.detailed:
            result = engine.transliterate_detailed(text)
            print(result.transliterated)
            for change in result.changes:
                print(
                    f"  {change.position:>4}  {change.original} → {change.replacement}"
                    f"  ({change.rule})  {change.context}"
                )
        elif args.json:
            print(json.dumps(
                {"greektext": text, "elot743text": engine.transliterate(text)},
                ensure_ascii=False,
            ))
        else:
            print(engine.transliterate(text))
    except EncodingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
