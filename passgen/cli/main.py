"""
Command line front end - password, passphrase, check, wordlists, serve
"""

import argparse
import sys

from passgen.cli.clipboard import copy_to_clipboard
from passgen.cli.prompts import CheckPrompts
from passgen.config import get_settings, validate_generator_settings
from passgen.limits import (
    MAX_PASSWORD_LENGTH,
    MAX_SEPARATOR_CHARS,
    MAX_WORD_COUNT,
    MIN_PASSWORD_LENGTH,
    MIN_WORD_COUNT,
)
from passgen.services.credentials import (
    build_generator_context,
    check_password,
    create_passphrase,
    create_password,
)
from passgen.services.generator import InvalidArgument
from passgen.services.strength import build_analysis_report
from passgen.services.wordlists import WordListUnavailable


def fail(message):
    """Print an error and exit with status 1"""
    print(f"[PASSGEN] ERROR: {message}", file=sys.stderr)
    sys.exit(1)


def bounded_int(low, high):
    """argparse type for an int within [low, high]"""
    def parse(text):
        try:
            value = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")
        if not low <= value <= high:
            raise argparse.ArgumentTypeError(f"must be between {low} and {high}")
        return value
    return parse


def build_parser(settings):
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate secure passwords and passphrases and estimate their strength.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("password", help="Generate a random password")
    p.add_argument("-l", "--length", type=bounded_int(MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH),
                   default=settings.DEFAULT_PASSWORD_LENGTH,
                   help=f"Password length (default: {settings.DEFAULT_PASSWORD_LENGTH})")
    p.add_argument("--no-lower", dest="lowercase", action="store_false", help="Exclude lowercase letters")
    p.add_argument("--no-upper", dest="uppercase", action="store_false", help="Exclude uppercase letters")
    p.add_argument("--no-digits", dest="digits", action="store_false", help="Exclude digits")
    p.add_argument("--no-symbols", dest="symbols", action="store_false", help="Exclude symbols")
    _add_output_flags(p)

    pp = sub.add_parser("passphrase", help="Generate a random passphrase")
    pp.add_argument("-w", "--words", type=bounded_int(MIN_WORD_COUNT, MAX_WORD_COUNT),
                    default=settings.DEFAULT_WORD_COUNT,
                    help=f"Number of words (default: {settings.DEFAULT_WORD_COUNT})")
    pp.add_argument("-s", "--sep", default=settings.DEFAULT_SEPARATOR,
                    help=f"Separator between words (default: '{settings.DEFAULT_SEPARATOR}')")
    pp.add_argument("--lang", action="append", dest="languages", metavar="NAME",
                    help="Word list to draw from; repeat to combine (default: english)")
    _add_output_flags(pp)

    c = sub.add_parser("check", help="Estimate the strength of a password")
    c.add_argument("--password", help="Password to check (prompted without echo if omitted)")
    c.add_argument("--details", action="store_true", help="Print the full analysis report")

    sub.add_parser("wordlists", help="Show configured word lists")

    s = sub.add_parser("serve", help="Run the HTTP API")
    s.add_argument("--host", default=settings.HOST)
    s.add_argument("--port", type=int, default=settings.PORT)

    return parser


def _add_output_flags(parser):
    parser.add_argument("--copy", action="store_true", help="Copy the result to the clipboard")
    parser.add_argument("--details", action="store_true", help="Print the full analysis report")
    parser.add_argument("-q", "--quiet", action="store_true", help="Print only the generated value")


def print_generated(result, args):
    print(result.value)
    if not args.quiet:
        print(f"{result.entropy_bits:.1f} bits ({result.band.label})")
        if args.details and result.evaluation is not None:
            print()
            print(build_analysis_report(result.evaluation))
    if args.copy:
        copy_to_clipboard(result.value)


def run_password(ctx, args):
    try:
        result = create_password(
            ctx,
            args.length,
            lowercase=args.lowercase,
            uppercase=args.uppercase,
            digits=args.digits,
            symbols=args.symbols,
        )
    except InvalidArgument as e:
        fail(str(e))
    print_generated(result, args)


def run_passphrase(ctx, args):
    if len(args.sep) > MAX_SEPARATOR_CHARS:
        fail(f"Separator must be at most {MAX_SEPARATOR_CHARS} characters")
    languages = [name.strip().lower() for name in (args.languages or ["english"])]
    try:
        result = create_passphrase(ctx, languages, args.words, args.sep)
    except (InvalidArgument, WordListUnavailable) as e:
        fail(str(e))
    print_generated(result, args)


def run_check(ctx, args, prompts=None):
    password = args.password
    if password is None:
        password = (prompts or CheckPrompts()).prompt_password()
    try:
        result = check_password(ctx, password or "")
    except InvalidArgument as e:
        fail(str(e))

    warning = result.evaluation.warning
    if warning:
        print(f"{result.entropy_bits:.1f} bits")
        print(f"Warning: {warning}")
    else:
        print(f"{result.entropy_bits:.1f} bits - {result.band.label}")

    if args.details:
        print()
        print(build_analysis_report(result.evaluation))


def run_wordlists(ctx):
    for result in ctx.wordlists.results:
        if result.ok:
            print(f"{result.name:<12} {len(result.words):>6} words  {result.source}")
        else:
            print(f"{result.name:<12} {'-':>6}        ERROR: {result.error}")


def run_serve(args):
    import uvicorn
    uvicorn.run("passgen.main:app", host=args.host, port=args.port)


def main(argv=None):
    """Main entry point"""
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)

    try:
        validate_generator_settings(settings)
    except ValueError as e:
        fail(str(e))

    if args.command == "serve":
        run_serve(args)
        return

    ctx = build_generator_context(settings)

    if args.command == "password":
        run_password(ctx, args)
    elif args.command == "passphrase":
        run_passphrase(ctx, args)
    elif args.command == "check":
        run_check(ctx, args)
    elif args.command == "wordlists":
        run_wordlists(ctx)


if __name__ == "__main__":
    main()
