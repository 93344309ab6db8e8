import argparse
import logging
import re
import sys
from typing import List, Optional

from mimeheaders import config
from mimeheaders.application.mailbox_header import MailboxHeader
from mimeheaders.domain.mailbox import Mailbox
from mimeheaders.presentation.error_messages import get_error_message

_NAME_ADDR = re.compile(r"(?P<name>.*?)\s*<(?P<address>[^<>]*)>")


def parse_mailbox_argument(value: str) -> Mailbox:
    """`addr` -> Mailbox(addr); `Display Name <addr>` -> Mailbox(addr, "Display Name")"""
    match = _NAME_ADDR.fullmatch(value.strip())
    if not match:
        return Mailbox(value.strip())
    return Mailbox(match.group("address"), match.group("name") or None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mimeheaders-mailbox",
        description="Render a mailbox header such as From or Cc.",
    )
    parser.add_argument("field_name", help="header field name, e.g. From")
    parser.add_argument("mailboxes", nargs="+", help="'address' or 'Display Name <address>'")
    parser.add_argument("--charset", default=None, help="charset for encoded display names")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        mailboxes = [parse_mailbox_argument(value) for value in args.mailboxes]
        header = MailboxHeader(args.field_name, mailboxes, charset=args.charset)
        body = header.get_field_body()
    except Exception as e:
        logging.error(f"Header build error: {type(e).__name__}: {str(e)}")
        print(get_error_message(e), file=sys.stderr)
        return 2

    print(f"{header.field_name}: {body}")
    return 0


def run() -> None:
    logging.basicConfig(level=config.get_log_level(), format=config.LOG_FORMAT)
    sys.exit(main())


if __name__ == "__main__":
    run()
