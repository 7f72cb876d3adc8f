"""
Command line interface for ainconv.

Usage:
    python -m ainconv.cli aynu                 # Latin -> Katakana
    python -m ainconv.cli -t cyrl アイヌ         # Katakana -> Cyrillic
    python -m ainconv.cli -d айну               # detect the script
    python -m ainconv.cli -S eyaykosiramsuypa   # syllabify
    echo aynu | python -m ainconv.cli -j        # JSON output from stdin
"""

import argparse
import logging
import sys
from typing import Optional

from ainconv import (
    UnsupportedScriptError, __version__, convert, detect, get_script, separate,
)
from ainconv import settings
from ainconv.characters import basic_split, is_latin_letter
from ainconv.models import ConversionResult, DetectionResult


def format_syllables(text: str) -> str:
    """Syllabify every word of a Latin text, joining syllables with '-'."""
    parts = []
    for seg_type, seg_text in basic_split(text.lower(), is_letter=is_latin_letter):
        if seg_type == 'word':
            parts.append('-'.join(separate(seg_text)))
        else:
            parts.append(seg_text)
    return ''.join(parts)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Convert Ainu text between Latin, Cyrillic and Katakana',
        prog='ainconv',
        epilog='Scripts: latn (latin), cyrl (cyrillic), kana (katakana)',
    )

    parser.add_argument(
        'text',
        nargs='*',
        help='Text to convert (read from stdin if omitted)',
    )

    parser.add_argument(
        '-t', '--to',
        type=str,
        default=settings.DEFAULT_TARGET,
        metavar='SCRIPT',
        help=f'Target script (default: {settings.DEFAULT_TARGET})',
    )

    parser.add_argument(
        '-s', '--from',
        dest='source',
        type=str,
        default=None,
        metavar='SCRIPT',
        help='Script of the input (default: detected)',
    )

    parser.add_argument(
        '-d', '--detect',
        action='store_true',
        help='Print the detected script instead of converting',
    )

    parser.add_argument(
        '-S', '--syllables',
        action='store_true',
        help='Print the syllables of each word of a Latin text',
    )

    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Print the result as JSON',
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log debugging information to stderr',
    )

    parser.add_argument(
        '--version',
        action='store_true',
        help='Show version information',
    )

    return parser


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    parsed = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose or settings.DEBUG else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if parsed.version:
        print(f'ainconv {__version__}')
        return 0

    # Get input text
    text = ' '.join(parsed.text) if parsed.text else ''
    if not text and not sys.stdin.isatty():
        text = sys.stdin.read().rstrip('\n')

    if not text:
        parser.print_help()
        return 1

    if parsed.detect:
        script = detect(text)
        if parsed.json:
            print(DetectionResult.from_detection(text, script).model_dump_json())
        else:
            print(script.value)
        return 0

    if parsed.syllables:
        print(format_syllables(text))
        return 0

    try:
        target = get_script(parsed.to)
        source = detect(text) if parsed.source is None else get_script(parsed.source)
        result = convert(text, to=target, source=source)
    except UnsupportedScriptError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if parsed.json:
        print(ConversionResult.from_conversion(text, result, source, target).model_dump_json())
    else:
        print(result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
