#!/usr/bin/env python3

import logging
import sys
from argparse import ArgumentParser

from . import (
    BEncodingError,
    DecodeOptions,
    EncodeOptions,
    __version__,
    bdecode,
    bencode,
    bencode_into,
)
from .utils import encode_int_digits

log = logging.getLogger("tinybencode")


def show_bytes(value):
    try:
        text = value.decode()
    except UnicodeDecodeError:
        return repr(value)
    if text.isprintable():
        return repr(text)
    return repr(value)


def render(value):
    """Format a decoded tree without recursing, byte strings as text where printable."""
    out = []
    stack = [value]
    while stack:
        x = stack.pop()
        match x:
            case str():  # literal punctuation queued below
                out.append(x)
            case bytes():
                out.append(show_bytes(x))
            case int():
                out.append(encode_int_digits(x).decode())
            case list():
                stack.append("]")
                for idx in range(len(x) - 1, -1, -1):
                    stack.append(x[idx])
                    if idx:
                        stack.append(", ")
                out.append("[")
            case dict():
                stack.append("}")
                items = list(x.items())
                for idx in range(len(items) - 1, -1, -1):
                    stack.extend((items[idx][1], ": ", items[idx][0]))
                    if idx:
                        stack.append(", ")
                out.append("{")
    return "".join(out)


def open_input(path):
    if path == "-":
        return sys.stdin.buffer
    return open(path, "rb")


def decode_file(path, options):
    handle = open_input(path)
    try:
        return bdecode(handle, options)
    finally:
        if handle is not sys.stdin.buffer:
            handle.close()


def cmd_check(args, options):
    decode_file(args.file, options)
    log.info("%s: valid" % args.file)


def cmd_canon(args, options):
    value = decode_file(args.file, options)
    # decoded nesting never exceeds max_stack_size
    encode_options = EncodeOptions(max_depth=options.max_stack_size)
    if args.output in (None, "-"):
        bencode_into(sys.stdout.buffer, value, encode_options)
        sys.stdout.buffer.flush()
    else:
        # encoded in full before the output file is opened
        data = bencode(value, encode_options)
        with open(args.output, "wb") as handle:
            handle.write(data)
        log.info("wrote canonical form of %s to %s" % (args.file, args.output))


def cmd_dump(args, options):
    print(render(decode_file(args.file, options)))


def build_parser():
    parser = ArgumentParser(
        prog="tinybencode", description="Stack-safe bencode decoder and encoder"
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--max-stack-size", type=int, default=10000)
    parser.add_argument("--allow-unordered-keys", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="validate a bencoded file")
    check.add_argument("file", help="input file, - for stdin")
    check.set_defaults(run=cmd_check)

    canon = sub.add_parser("canon", help="re-encode a file in canonical form")
    canon.add_argument("file", help="input file, - for stdin")
    canon.add_argument("-o", "--output", help="output file (default: stdout)")
    canon.set_defaults(run=cmd_canon)

    dump = sub.add_parser("dump", help="print the decoded value")
    dump.add_argument("file", help="input file, - for stdin")
    dump.set_defaults(run=cmd_dump)
    return parser


def main(command_line=None):
    args = build_parser().parse_args(command_line)

    logging.basicConfig()
    log.setLevel(logging.DEBUG if args.verbose else logging.INFO)

    try:
        options = DecodeOptions(
            max_stack_size=args.max_stack_size,
            allow_unordered_keys=args.allow_unordered_keys,
        )
    except ValueError as e:
        print("tinybencode: %s" % e, file=sys.stderr)
        return 1
    try:
        args.run(args, options)
    except BEncodingError as e:
        print("tinybencode: error [%s]: %s" % (e.code, e), file=sys.stderr)
        return 2
    except OSError as e:
        print("tinybencode: %s" % e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
