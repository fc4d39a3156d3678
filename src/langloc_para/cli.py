"""Console script for langloc_para."""

import sys
from argparse import ArgumentParser, Namespace

from langloc_para.para.create_para import create_para_for_all, create_para_from_tsv
from langloc_para.para.errors import FileWriteError, UnknownConditionError
from langloc_para.static.para.config import (
    DEFAULT_DURATION,
    EVENTS_GLOB,
    LABEL_COL,
    ONSET_COL,
    ParaConfig,
)

_FATAL = (UnknownConditionError, FileWriteError, FileNotFoundError, KeyError)


def _config_from_args(args: Namespace) -> ParaConfig:
    return ParaConfig(
        default_duration=args.default_duration,
        verbose=not args.quiet,
        label_col=args.label_col,
        onset_col=args.onset_col,
    )


def cmd_para(args: Namespace) -> None:
    """
    Write the PARA file for one events.tsv.
    Usage: langloc-para para sub-01_task-langloc_events.tsv -o para.txt
    """
    try:
        result = create_para_from_tsv(args.events_tsv, args.output, config=_config_from_args(args))
    except _FATAL as e:
        print(f"❌ {e}")
        sys.exit(1)

    if args.quiet:
        print(result.output_path)


def cmd_batch(args: Namespace) -> None:
    """
    Write PARA files for every subject under an events folder.
    Usage: langloc-para batch derivatives/events derivatives/para
    """
    try:
        create_para_for_all(
            args.events_root,
            args.out_dir,
            subjects=args.subjects,
            pattern=args.pattern,
            config=_config_from_args(args),
        )
    except _FATAL as e:
        print(f"❌ {e}")
        sys.exit(1)


def _add_common_options(p: ArgumentParser) -> None:
    p.add_argument("--label-col", default=LABEL_COL, help="events column with the condition label.")
    p.add_argument("--onset-col", default=ONSET_COL, help="events column with the onset (sec).")
    p.add_argument(
        "--default-duration",
        type=int,
        default=DEFAULT_DURATION,
        help="duration (sec) for conditions with no observed block transition.",
    )
    p.add_argument("--quiet", action="store_true", help="do not print the PARA summary.")


def main(argv: list[str] | None = None) -> None:
    """
    Entry point for the `langloc-para` CLI.
    """
    parser = ArgumentParser(prog="langloc-para", description="langloc_para command-line tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- `para` subcommand ---
    para_parser = subparsers.add_parser(
        "para",
        help="Create the PARA file for one events.tsv.",
    )
    para_parser.add_argument("events_tsv", help="BIDS-like events.tsv of one run.")
    para_parser.add_argument(
        "-o", "--output",
        default=None,
        help="PARA file to write (default: next to the events file, '_events.tsv' -> '_para.txt').",
    )
    _add_common_options(para_parser)
    para_parser.set_defaults(func=cmd_para)

    # --- `batch` subcommand ---
    batch_parser = subparsers.add_parser(
        "batch",
        help="Create PARA files for all sub-* folders under an events root.",
    )
    batch_parser.add_argument("events_root", help="folder holding sub-* directories.")
    batch_parser.add_argument("out_dir", help="where to write the PARA files.")
    batch_parser.add_argument("--subjects", nargs="+", default=None, help="only these subject IDs.")
    batch_parser.add_argument("--pattern", default=EVENTS_GLOB, help="glob for events files.")
    _add_common_options(batch_parser)
    batch_parser.set_defaults(func=cmd_batch)

    args = parser.parse_args(argv)

    # Dispatch to the chosen subcommand
    func = getattr(args, "func", None)
    if func is None:
        parser.print_help()
        sys.exit(1)

    func(args)


if __name__ == "__main__":
    main()
