import argparse
import json
import logging

from dateutil.parser import isoparse

from schedparser import TemporalParser, recommend_slots
from schedparser.conf import SUPPORTED_LANGUAGES


def _parse_command(args):
    settings = {"FALLBACK": not args.no_fallback}
    parser = TemporalParser(settings=settings)
    result = parser.parse(args.text, reference=args.base, language=args.language)
    print(json.dumps({
        "date": result.date.isoformat() if result.date else None,
        "content": result.content,
        "location": result.location,
        "language": result.language.value if result.language else None,
        "source": result.source,
    }, ensure_ascii=False))


def _slots_command(args):
    busy = [{"startTime": start, "endTime": end} for start, end in args.busy or ()]
    slots = recommend_slots(
        args.duration,
        busy=busy,
        day=args.day,
        language=args.language or "zh",
    )
    for slot in slots:
        print(json.dumps(slot.to_dict(), ensure_ascii=False))


def build_parser():
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--verbose",
        "-v",
        help="Log every resolution step",
        action="store_true",
    )

    schedparser_argparse = argparse.ArgumentParser(
        prog="schedparser",
        description="Parse scheduling sentences and recommend free time slots.",
    )
    commands = schedparser_argparse.add_subparsers(dest="command")

    parse_command = commands.add_parser(
        "parse", parents=[common], help="Parse a sentence into date and content"
    )
    parse_command.add_argument("text", type=str, help='e.g. "明天下午三点开会"')
    parse_command.add_argument(
        "--base",
        type=isoparse,
        help="Reference instant as ISO-8601 (defaults to now)",
    )
    parse_command.add_argument(
        "--language",
        choices=SUPPORTED_LANGUAGES,
        help="Skip language detection",
    )
    parse_command.add_argument(
        "--no-fallback",
        help="Do not call dateparser when the patterns fail",
        action="store_true",
    )
    parse_command.set_defaults(func=_parse_command)

    slots_command = commands.add_parser(
        "slots", parents=[common], help="Recommend free slots on one day"
    )
    slots_command.add_argument("--duration", type=int, required=True, help="Task length in minutes")
    slots_command.add_argument(
        "--busy",
        nargs=2,
        action="append",
        metavar=("START", "END"),
        help="Busy interval as two ISO-8601 instants; may be repeated",
    )
    slots_command.add_argument(
        "--day",
        type=lambda value: isoparse(value).date(),
        help="Day to search as YYYY-MM-DD (defaults to today)",
    )
    slots_command.add_argument(
        "--language",
        choices=SUPPORTED_LANGUAGES,
        help="Language of the slot explanations",
    )
    slots_command.set_defaults(func=_slots_command)

    return schedparser_argparse


def entrance(argv=None):
    schedparser_argparse = build_parser()
    args = schedparser_argparse.parse_args(argv)

    if not args.command:
        schedparser_argparse.error(
            "schedparser: You need to specify the command (i.e.: parse or slots)"
        )

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        args.func(args)
    except ValueError as e:
        logging.error(f"schedparser: {e}")
        schedparser_argparse.exit(2)
