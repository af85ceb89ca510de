from __future__ import annotations
import argparse, logging, sys
import tnt as _tnt_pkg
from .errors import ParseError, ConfigurationError
from .report import describe


def main(argv=None):
    parser = argparse.ArgumentParser(description=f"TNT formula checker (v{_tnt_pkg.__version__})")
    parser.add_argument("formula", nargs="?", help="Formula to parse, e.g. 'Aa:<a=a^Eb:b=a>'")
    parser.add_argument("--file", help="Read the formula from a text file instead")
    parser.add_argument("--max-depth", type=int, help="Maximum nesting depth (default: $TNT_MAX_DEPTH or 128)")
    parser.add_argument("--strict-fail", action="store_true", help="Exit with status 1 if the formula is not well-formed")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log parser activity to stderr")
    parser.add_argument("-V", "--version", action="store_true", help="Print version and module path and exit")
    args = parser.parse_args(argv)

    if args.version:
        print(f"TNT v{_tnt_pkg.__version__} @ {_tnt_pkg.__file__}")
        return 0

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(levelname)s - %(message)s")

    if args.file and args.formula is not None:
        parser.error("give either a formula or --file, not both")
    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as f:
                text = f.read().strip()
        except OSError as ex:
            print(f"[TNT] cannot read {args.file}: {ex.strerror}", file=sys.stderr)
            return 2
    elif args.formula is not None:
        text = args.formula
    else:
        parser.error("a formula or --file is required")

    try:
        report = describe(text, max_depth=args.max_depth)
    except ParseError as ex:
        print(f"[TNT] parse error: {ex}", file=sys.stderr)
        return 2
    except ConfigurationError as ex:
        print(f"[TNT] invalid settings: {ex}", file=sys.stderr)
        return 2

    print(report.model_dump_json(indent=2))

    if not report.well_formed:
        for issue in report.issues:
            print(f"[TNT] [{issue.code}] {issue.path}: {issue.message}", file=sys.stderr)
        if args.strict_fail:
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
