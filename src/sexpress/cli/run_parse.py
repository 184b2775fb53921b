import sys
import logging
import argparse
from typing import List, Optional

from sexpress.io.config_loader import ConfigError, ParserConfig, load_config
from sexpress.syntax.parser import SExprError, parse
from sexpress.syntax.render import describe, render

logger = logging.getLogger(__name__)

DEFAULT_EXPR = "(first (list 1 (+ 2 3) 9))"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="sexpress")
    parser.add_argument("expr", nargs="?", default=DEFAULT_EXPR,
                        help="S-expression to parse ('-' reads stdin)")
    parser.add_argument("--config", help="YAML parser config")
    parser.add_argument("--tree", action="store_true", help="Print the parsed tree structure instead of text")
    parser.add_argument("--check", action="store_true", help="Fail unless the input is already canonical")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    text = sys.stdin.read().rstrip("\r\n") if args.expr == "-" else args.expr

    try:
        cfg = load_config(args.config) if args.config else ParserConfig()
        expr = parse(text, cfg)
    except (ConfigError, FileNotFoundError) as e:
        logger.debug("config failure", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2
    except SExprError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    out = render(expr)
    print(describe(expr) if args.tree else out)

    if args.check and out != text:
        print(f"error: not canonical, expected {out!r}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
