# cli.py
import os
import sys
import argparse
from settings import settings
from errors import UniqrandError
from rng.state import GeneratorState
from services.params import parse_integer, read_params_file
from services.unique import DrawPlan, generate_plan
from sources.os_entropy import seed_from_hex, seed_to_hex

__version__ = "1.2"

USAGE = ("Usage: uniqrand [-vVrh] [-v|--verbose] [-V|--version] [-l|--lower=<number>]\n"
         "        [-u|--upper=<number>] [-c|--count=<number>] [-f|--file=<filename>]\n"
         "        [-r|--random] [--seed=<hex>] [-h|--help] [--usage]\n")


class _UsageAction(argparse.Action):
    def __init__(self, option_strings, dest, **kwargs):
        super().__init__(option_strings, dest, nargs=0, default=argparse.SUPPRESS, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        sys.stdout.write(USAGE)
        parser.exit()


class _Parser(argparse.ArgumentParser):
    # ошибки разбора опций - тот же exit(1), что и прочие ошибки
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="uniqrand",
        description="Generate unique random integers in an arbitrary range, printed in ascending order.",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Be verbose (diagnostics go to stderr).")
    parser.add_argument("-V", "--version", action="version",
                        version=f"%(prog)s version {__version__}",
                        help="Show version information.")
    parser.add_argument("-l", "--lower", metavar="<number>",
                        help=f"Lower bound (inclusive). Default is {settings.DEFAULT_LOW}.")
    parser.add_argument("-u", "--upper", metavar="<number>",
                        help=f"Upper bound (inclusive). Default is {settings.DEFAULT_HIGH}.")
    parser.add_argument("-c", "--count", metavar="<number>",
                        help=f"Generate this many unique numbers. Default is {settings.DEFAULT_COUNT}.")
    parser.add_argument("-f", "--file", metavar="<filename>",
                        help="Read lower and upper bound from this file.")
    parser.add_argument("-r", "--random", action="store_true",
                        help=f"Use '{settings.RANDOM_DEVICE}' instead of '{settings.URANDOM_DEVICE}'.")
    parser.add_argument("--seed", metavar="<hex>",
                        help="Seed the generator with this hex value instead of the entropy device.")
    parser.add_argument("--usage", action=_UsageAction,
                        help="Display brief usage message.")
    return parser


def _silence_stdout():
    """stdout закрыт читателем (| head): дальше пишем в devnull, чтобы не упасть при flush на выходе."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def _log(verbose: bool, msg: str):
    if verbose:
        print(msg, file=sys.stderr)


def resolve_plan(args) -> DrawPlan:
    """Файл задаёт границы первым, явные -l/-u поверх него."""
    low, high = settings.DEFAULT_LOW, settings.DEFAULT_HIGH
    if args.file:
        _log(args.verbose, f"[params] Reading parameters from file '{args.file}'")
        low, high = read_params_file(args.file)
    if args.lower is not None:
        low = parse_integer(args.lower)
    if args.upper is not None:
        high = parse_integer(args.upper)
    count = settings.DEFAULT_COUNT if args.count is None else parse_integer(args.count)
    return DrawPlan(low, high, count)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        plan = resolve_plan(args)
        if args.seed is not None:
            state = GeneratorState(seed_from_hex(args.seed))
        else:
            state = GeneratorState.from_entropy(args.random or settings.USE_STRONG_ENTROPY)
        _log(args.verbose, f"[seed] {seed_to_hex(state.seed)}")

        suffix = "" if plan.count == 1 else "s"
        _log(args.verbose, f"Generating {plan.count} number{suffix} between {plan.low} and {plan.high}...")
        _log(args.verbose, f"[plan] strategy={plan.strategy} size={plan.size} threshold={plan.threshold}")

        values = generate_plan(state, plan)
        out = sys.stdout
        try:
            for value in values:
                out.write(f"{value}\n")
            out.flush()
        except BrokenPipeError:
            _silence_stdout()
            return 0
        _log(args.verbose, f"[plan] done, draws={state.draws} rejected={state.rejected}")
    except UniqrandError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
