r"""
\file cli.py
\brief CLI entrypoint: parse options, build the generator, write items.

This module wires together argument parsing, config file defaults, logging
and the generator. It prints a startup banner, opens the requested
dictionary and writes one generated item per line.
"""

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from ._args import build_argparser, resolve_range
from ._errors import FarsiFakeError
from ._generator import FarsiFake
from ._source import DictionarySource


def load_config(path: Path) -> dict:
    r"""Load CLI defaults from a JSON, TOML or YAML file.

    \param path Config file path; format chosen by suffix.
    \return Mapping of argument destinations to values (empty if unreadable).
    """
    cfg = {}
    try:
        if path.suffix.lower() == ".json":
            import json

            cfg = json.loads(path.read_text(encoding="utf-8"))
        elif path.suffix.lower() == ".toml":
            try:
                import tomllib
            except ImportError:
                import tomli as tomllib  # type: ignore
            cfg = tomllib.loads(path.read_text(encoding="utf-8"))
        elif path.suffix.lower() in (".yaml", ".yml"):
            import yaml  # type: ignore

            cfg = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except Exception as e:
        print(f"[warn] Failed to load config {path}: {e}", file=sys.stderr)
        return {}
    if not isinstance(cfg, dict):
        print(f"[warn] Ignoring config {path}: top level is not a table", file=sys.stderr)
        return {}
    return {str(k).replace("-", "_"): v for k, v in cfg.items()}


def config_defaults(parser: argparse.ArgumentParser, cfg: dict) -> dict:
    r"""Map config keys onto argument destinations.

    Keys may be spelled as the dest ("dict_path") or as the long flag
    ("dict", "jump-from-start"). Unknown keys are reported and dropped.

    \param parser Parser whose actions define the accepted keys.
    \param cfg Mapping from load_config().
    \return Mapping suitable for parser.set_defaults().
    """
    dests = {}
    for action in parser._actions:
        if action.dest == argparse.SUPPRESS:
            continue
        dests[action.dest] = action.dest
        for opt in action.option_strings:
            if opt.startswith("--"):
                dests[opt[2:].replace("-", "_")] = action.dest
    out = {}
    for key, value in cfg.items():
        if key in dests:
            out[dests[key]] = value
        else:
            print(f"[warn] Ignoring unknown config key: {key}", file=sys.stderr)
    return out


def make_item(fake: FarsiFake, mode: str, count: int, bounds: tuple[int, int]) -> str:
    r"""Generate one output item for the selected mode.

    \param fake Open generator.
    \param mode One of word, sentence, paragraph.
    \param count Words per sentence.
    \param bounds (min, max) words per paragraph.
    \return Generated text.
    """
    if mode == "sentence":
        return fake.sentence(count)
    if mode == "paragraph":
        return fake.paragraph(*bounds)
    return fake.generate()


def main(argv: Iterable[str] | None = None) -> int:
    r"""Run the farsifake CLI.

    \param argv Optional list of arguments (defaults to sys.argv[1:]).
    \return Process exit code (0 on success, 2 on generation errors).
    """
    from farsifake import __version__

    raw_argv = list(argv) if argv is not None else None
    # Pre-scan for --config
    config_path = None
    scan = raw_argv if raw_argv is not None else sys.argv[1:]
    for i, tok in enumerate(scan):
        if tok == "--config" and i + 1 < len(scan):
            config_path = scan[i + 1]
            break
    parser = build_argparser()
    if config_path:
        parser.set_defaults(**config_defaults(parser, load_config(Path(config_path))))
    args = parser.parse_args(raw_argv)

    print(f"farsifake v{__version__}", file=sys.stderr)

    logging.basicConfig(
        level=getattr(logging, args.log_level), format="%(asctime)s %(levelname)s %(message)s"
    )
    logger = logging.getLogger("farsifake")
    logger.setLevel(getattr(logging, args.log_level))
    if args.log_file:
        fh = logging.FileHandler(args.log_file)
        fh.setLevel(getattr(logging, args.log_level))
        fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        logger.addHandler(fh)

    if args.version:
        print(__version__)
        return 0

    try:
        bounds = resolve_range(args.word_range)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    if args.times < 0:
        parser.error("--times must be >= 0")
    if not args.dict_path and (args.lines is not None or args.encoding is not None):
        parser.error("--lines and --encoding apply only with --dict")

    try:
        if args.dict_path:
            source = DictionarySource.from_path(args.dict_path, args.lines, args.encoding or "utf-8")
        else:
            source = DictionarySource.bundled()
    except (FarsiFakeError, ValueError, LookupError) as e:
        logger.error("dictionary unavailable: %s", e)
        return 2

    logger.info(
        "start: mode=%s, times=%s, dict=%s, lines=%s, jump_from_start=%s",
        args.mode,
        args.times,
        source.name,
        source.line_count,
        args.jump_from_start,
    )
    to_stdout = args.output == "-"
    out = sys.stdout if to_stdout else open(args.output, "a" if args.append else "w", encoding="utf-8")
    try:
        with FarsiFake(
            source,
            seed=args.seed,
            jump_from_start=args.jump_from_start,
            bypass_error=args.bypass_errors,
        ) as fake:
            for _ in range(args.times):
                out.write(make_item(fake, args.mode, args.count, bounds) + "\n")
    except FarsiFakeError as e:
        logger.error("generation failed: %s", e)
        return 2
    finally:
        if not to_stdout:
            out.close()
    logger.info("done: %s item(s) written to %s", args.times, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
