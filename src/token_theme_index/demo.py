# src/token_theme_index/demo.py
import argparse
import json
import sys


def main(argv=None):
    """CLI demo: build a token index from a theme dataset and query it."""
    from .indexing.color import TokenIndex, build_index_with_report, load_settings
    from .indexing.color import is_themed, name_for_value, resolve_color
    from .indexing.general.formatting import object_to_pretty_json
    from .indexing.general.utils import ConfigParseError, ConfigTypeError

    parser = argparse.ArgumentParser(
        prog="tti-demo",
        description="Index design-token colors per theme and resolve names/values.",
    )
    parser.add_argument("dataset", help="Theme dataset JSON (theme key → {name, overriddenTokens})")
    parser.add_argument("--brand", default=None, help="Brand used for brand-scoped color names")
    parser.add_argument("--name", default=None, help="Canonical color name to resolve")
    parser.add_argument("--theme", default="Dark", help="Theme id used with --name")
    parser.add_argument("--hex", default=None, help="Reverse lookup: color value → name")
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="With --hex, match normalized hex (#FFF == #ffffff) instead of the exact string",
    )
    parser.add_argument(
        "--split",
        action="store_true",
        help="Print the themed / unthemed name split instead of the full map",
    )

    args = parser.parse_args(argv)

    try:
        with open(args.dataset, encoding="utf-8") as f:
            theme_data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"❌ Error: cannot read {args.dataset}: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        settings = load_settings()
    except (ConfigParseError, ConfigTypeError) as e:
        print(f"❌ Error: invalid index settings: {e}", file=sys.stderr)
        sys.exit(1)

    index = TokenIndex(settings)
    report = build_index_with_report(theme_data, args.brand, index=index)

    if args.name is not None:
        result = {"name": args.name, "theme": args.theme,
                  "entry": resolve_color(args.name, args.theme, index)}
    elif args.hex is not None:
        result = {"value": args.hex, "name": name_for_value(args.hex, index, lenient=args.lenient)}
    elif args.split:
        names = index.names()
        result = {
            "themed": [n for n in names if is_themed(n, index)],
            "unthemed": list(index.unthemed()),
        }
    else:
        result = {"report": report, "colors": index.color_map()}

    print(object_to_pretty_json(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
