r"""
\file _args.py
\brief Argument parsing and range resolution utilities.
"""

import argparse


def build_argparser() -> argparse.ArgumentParser:
    r"""Build the CLI argument parser.

    \return Configured ArgumentParser instance.
    """
    epilog = (
        "\nModes:\n"
        "  word       One random dictionary entry per item.\n"
        "  sentence   --count words joined by spaces per item.\n"
        "  paragraph  A random number of words in --range MIN,MAX per item.\n\n"
        "Cursor:\n"
        "  By default each pick continues from where the previous one stopped;\n"
        "  --jump-from-start rewinds to the first entry before every word.\n"
    )
    p = argparse.ArgumentParser(
        prog="farsifake",
        description="Generate fake Farsi words, sentences and paragraphs.",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=epilog,
    )

    work = p.add_argument_group("Workload")
    work.add_argument("--mode", choices=["word", "sentence", "paragraph"], default="word")
    work.add_argument("--times", type=int, default=1, help="Number of items to generate (default 1)")
    work.add_argument("--count", type=int, default=5, help="Words per sentence in sentence mode (default 5)")
    work.add_argument("--range", dest="word_range", default="5,15", help="Words per paragraph as MIN,MAX (default 5,15)")

    source = p.add_argument_group("Source")
    source.add_argument("--dict", dest="dict_path", help="Path to wordlist (newline-separated); bundled list when omitted")
    source.add_argument("--lines", type=int, help="Number of entries in --dict; counted once when omitted")
    source.add_argument("--encoding", default=None, help="Encoding of --dict, or 'auto' to probe (default utf-8)")

    behave = p.add_argument_group("Behavior")
    behave.add_argument("--seed", type=int, help="Random seed for reproducibility")
    behave.add_argument("--jump-from-start", action="store_true", help="Rewind to the first entry before every word")
    behave.add_argument("--bypass-errors", action="store_true", help="Emit empty words instead of failing on read errors (word mode)")

    out = p.add_argument_group("Output")
    out.add_argument("--output", default="-", help="Output file, '-' for stdout (default)")
    out.add_argument("--append", action="store_true", help="Append to --output instead of truncating it")

    info = p.add_argument_group("Info")
    info.add_argument("-V", "--version", action="store_true", help="Show version and exit")

    cfg = p.add_argument_group("Config")
    cfg.add_argument("--config", help="Path to a TOML/JSON/YAML config file with CLI defaults")

    logs = p.add_argument_group("Logging")
    logs.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="Logging level")
    logs.add_argument("--log-file", help="Path to log file (append)")

    return p


def resolve_range(word_range: str) -> tuple[int, int]:
    r"""Split a "MIN,MAX" range into its integer bounds.

    Bounds are not validated here; the generator rejects bad ranges.

    \param word_range Range string "MIN,MAX".
    \return (min, max) tuple.
    \throws argparse.ArgumentTypeError if the string is malformed.
    """
    try:
        mn, mx = str(word_range).split(",", 1)
        return int(mn), int(mx)
    except ValueError:
        raise argparse.ArgumentTypeError(f"--range must be MIN,MAX integers, got {word_range!r}")
