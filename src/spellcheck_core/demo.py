# src/spellcheck_core/demo.py
import argparse
import json
import logging
import sys


def _span_dicts(text, spans):
    from .splitting import DoubledWord

    out = []
    for item in spans:
        if isinstance(item, DoubledWord):
            out.append(
                {
                    "word": item.word,
                    "start": item.start,
                    "end": item.end,
                    "doubled": True,
                    "delete": [item.delete_span.start, item.delete_span.end],
                }
            )
        else:
            out.append({"word": item.text_of(text), "start": item.start, "end": item.end})
    return out


def _load_configuration(args):
    from .configuration import SplitterConfiguration, load_splitter_configuration

    if args.config:
        return load_splitter_configuration(args.config, allow_comments=True)
    if args.split_mixed_case:
        return SplitterConfiguration(ignore_words_in_mixed_case=False)
    return SplitterConfiguration()


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="spellcheck-demo",
        description="Split text into spell-check candidates and match file globs.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    parser.add_argument(
        "--config",
        default=None,
        help="Name of a splitter settings file in the data directory (without .json)",
    )
    parser.add_argument(
        "--split-mixed-case",
        action="store_true",
        dest="split_mixed_case",
        help="Split camel-case words instead of ignoring them",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_split = sub.add_parser("split", help="Split text into words")
    p_split.add_argument("text", nargs="+")
    p_split.add_argument("--code", action="store_true", help="Treat text as a C-style string literal")

    p_ident = sub.add_parser("identifier", help="Split an identifier into words")
    p_ident.add_argument("identifier")

    p_glob = sub.add_parser("glob", help="Match paths against a glob")
    p_glob.add_argument("pattern")
    p_glob.add_argument("paths", nargs="+")
    p_glob.add_argument("--case-sensitive", action="store_true", dest="case_sensitive")
    p_glob.add_argument(
        "--no-editorconfig",
        action="store_true",
        dest="no_editorconfig",
        help="Plain anchored matching instead of .editorconfig semantics",
    )

    p_check = sub.add_parser("check", help="Spell check text against a word list")
    p_check.add_argument("text", nargs="+")
    p_check.add_argument(
        "--words",
        nargs="*",
        default=[],
        help="Correctly spelled words (everything else is misspelled)",
    )
    return parser


def main(argv=None):
    """CLI demo: split text/identifiers, match globs, or spell check against a word list."""
    from .checking import WordListOracle, check_text
    from .globbing import Glob, GlobOptions, GlobPatternError
    from .splitting import SpanType, WordSplitter, split_identifier, split_words

    args = _build_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = _load_configuration(args)

        if args.command == "split":
            text = " ".join(args.text)
            splitter = WordSplitter(
                config,
                is_c_style_code=args.code,
                span_type=SpanType.STRING_LITERAL | SpanType.NORMAL_STRING
                if args.code
                else SpanType.NONE,
            )
            result = _span_dicts(text, split_words(text, splitter=splitter, debug=args.debug))

        elif args.command == "identifier":
            result = [
                {"word": s.text_of(args.identifier), "start": s.start, "end": s.end}
                for s in split_identifier(args.identifier, config)
            ]

        elif args.command == "glob":
            options = GlobOptions.NONE
            if not args.case_sensitive:
                options |= GlobOptions.CASE_INSENSITIVE
            if not args.no_editorconfig:
                options |= GlobOptions.EDITOR_CONFIG_MATCHING
            glob = Glob.compile(args.pattern, options)
            result = {path: glob.is_match(path) for path in args.paths}

        else:
            text = " ".join(args.text)
            oracle = WordListOracle(args.words)
            issues = check_text(text, oracle, WordSplitter(config), debug=args.debug)
            result = [issue.to_dict() for issue in issues]

    except GlobPatternError as e:
        print(f"❌ Invalid glob {e.pattern!r} at index {e.index}: {e}", file=sys.stderr)
        sys.exit(1)
    except (FileNotFoundError, ValueError, TypeError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
