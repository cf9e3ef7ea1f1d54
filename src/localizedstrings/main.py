# src/localizedstrings/main.py
"""
Command-line entry point for localizedstrings.

Loads a JSON string dictionary (language tag -> string table, first tag is
the default language) and shows what a given locale resolves to.

Examples::

    localizedstrings strings.json --list-languages
    python -m localizedstrings strings.json --lang it
    localizedstrings strings.json --lang it_IT --key greet.morning
    localizedstrings strings.json --lang it --format question bread butter
"""
import argparse
import json
import logging
import sys

from localizedstrings.config import config
from localizedstrings.formatter import render
from localizedstrings.strings import LocalizedStrings


def _load_props(parser, path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            props = json.load(f)
    except FileNotFoundError:
        parser.error(f"String file not found: {path}")
    except json.JSONDecodeError as e:
        parser.error(f"Invalid JSON in {path}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        parser.error(f"Cannot read string file {path}: {e}")

    if not isinstance(props, dict) or not props:
        parser.error(f"{path} must contain a non-empty JSON object of language tables")
    for tag, table in props.items():
        if not isinstance(table, dict):
            parser.error(f"Language {tag!r} in {path} must map to a JSON object")
    return props


def main():
    """
    Main entry point for the localizedstrings CLI.

    Parses command-line arguments, builds a LocalizedStrings instance for the
    requested (or detected) language and prints the requested view.
    """
    parser = argparse.ArgumentParser(
        description="Inspect localized string tables",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=(
            "Language matching:\n"
            "- The requested tag is tried as is, then shortened one subtag at a time\n"
            "  (zh-Hans-CN -> zh-Hans -> zh).\n"
            "- Without a match the first language in the file is used.\n"
            "- Keys missing from the active language are taken from the first language."
        )
    )
    parser.add_argument("file", help="JSON file with the string tables")
    parser.add_argument("--lang", metavar="TAG",
                        help="Language to resolve (default: host interface language)")

    action = parser.add_mutually_exclusive_group()
    action.add_argument("--key", metavar="KEY",
                        help="Print a single string (dotted path for nested groups)")
    action.add_argument("--format", nargs="+", metavar="ITEM",
                        help="KEY followed by the values for its {0}, {1}, ... placeholders")
    action.add_argument("--list-languages", action="store_true",
                        help="Print the available languages, default first")

    parser.add_argument("--log-level", choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        default=None, help="Logging level (default from config.ini)")

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level or config.get('logging', 'log_level', 'WARNING'), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

    props = _load_props(parser, args.file)
    try:
        strings = LocalizedStrings(props, interface_language=args.lang)
    except TypeError as e:
        parser.error(f"Invalid string table in {args.file}: {e}")

    if args.list_languages:
        for tag in strings.get_available_languages():
            print(tag)
        return

    if args.key is not None:
        value = strings.text(args.key)
        if value is None:
            print(f"No string found for key '{args.key}' ({strings.get_language()})")
            sys.exit(1)
        print(value)
        return

    if args.format:
        key, *values = args.format
        template = strings.text(key)
        if template is None:
            print(f"No string found for key '{key}' ({strings.get_language()})")
            sys.exit(1)
        print(render(strings.format_string(template, *values)))
        return

    print(f"Language: {strings.get_language()} (interface: {strings.get_interface_language()})")
    print(json.dumps(strings.as_dict(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
