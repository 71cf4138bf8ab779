"""Command-line entry point: python -m plaidsh."""

import argparse
import logging

from plaidsh.shell import HISTORY_FILE, PROMPT, Shell
from plaidsh.tokenizer import WORD_LEN

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="plaidsh", description="A small shell.")
    parser.add_argument("--prompt", default=PROMPT, help="prompt string")
    parser.add_argument(
        "--word-len",
        type=int,
        default=WORD_LEN,
        help="maximum word length plus one (default: %(default)s)",
    )
    parser.add_argument("--no-history", action="store_true", help="do not read or write history")
    parser.add_argument("--quiet", action="store_true", help="skip the welcome message")
    parser.add_argument("--debug", action="store_true", help="log parser and executor activity")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

    shell = Shell(
        prompt=args.prompt,
        word_len=args.word_len,
        history_file=None if args.no_history else HISTORY_FILE,
    )
    shell.run(greeting=not args.quiet)


if __name__ == "__main__":
    main()
