"""Segment domains from the command line, one JSON object per domain"""

import argparse
import itertools
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO

from tqdm import tqdm

from .alphabet import generate_bigrams
from .config import SegmenterConfig
from .domain import DomainAssembler
from .exceptions import DomainRejected, ResourceUnavailable
from .resources import load_resources

logger = logging.getLogger(__name__)


def iter_input_domains(path: Path) -> Iterator[str]:
    """Yield non-empty lines of a domain file"""
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            domain = line.strip()
            if domain and not domain.startswith("#"):
                yield domain


def printable(text: str) -> str:
    """Escape what UTF-8 can't encode, e.g. surrogates from undecodable argv bytes"""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def segment_all(assembler: DomainAssembler, domains: Iterable[str], out: TextIO) -> int:
    """Write one JSON line per domain and return the number of rejected ones"""
    rejected = 0
    for raw in domains:
        try:
            record = assembler.assemble(raw).to_dict()
        except DomainRejected as e:
            logger.warning(f"Skipping {raw!r}: {e.reason}")
            record = {"input": printable(raw), "error": e.reason, "message": printable(str(e))}
            rejected += 1
        out.write(json.dumps(record, ensure_ascii=False) + "\n")
    return rejected


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Split domain names into words, numbers, dashes and symbols",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s mp3shits.com www.example.co.uk
  %(prog)s --input domains.txt --dictionary words.txt --suffixes public_suffix_list.dat
  %(prog)s --list-bigrams
""",
    )
    parser.add_argument("domains", nargs="*", help="Domains to segment")
    parser.add_argument("--input", type=str, help="File with one domain per line")
    parser.add_argument("--config", type=str, help="Segmenter config JSON file or directory")
    parser.add_argument("--dictionary", type=str, help="Word list (.txt, .json, .dat, optionally .gz)")
    parser.add_argument("--suffixes", type=str, help="Public suffix list (.dat, .txt or .json)")
    parser.add_argument(
        "--no-alternates",
        action="store_true",
        help="Do not build alternate segmentations",
    )
    parser.add_argument(
        "--list-bigrams",
        action="store_true",
        help="Print the bigram feature layout and exit",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        datefmt="%m/%d/%Y %H:%M:%S",
        level=getattr(logging, args.log_level),
    )

    if args.list_bigrams:
        print(json.dumps(generate_bigrams()))
        return 0

    try:
        config = SegmenterConfig.from_file(args.config) if args.config else SegmenterConfig()
    except (OSError, ValueError) as e:
        logger.error(f"Could not load config {args.config}: {e}")
        return 1
    if args.dictionary:
        config.dictionary_path = args.dictionary
    if args.suffixes:
        config.suffix_path = args.suffixes
    if args.no_alternates:
        config.track_alternates = False
    logger.info(f"Segmenter config {config.to_dict()}")

    try:
        resources = load_resources(config)
    except ResourceUnavailable as e:
        logger.error(str(e))
        return 1

    assembler = DomainAssembler.from_resources(resources, config)

    domains: Iterable[str] = list(args.domains)
    if args.input:
        if not Path(args.input).is_file():
            logger.error(f"Input file {args.input} does not exist")
            return 1
        domains = itertools.chain(
            domains,
            tqdm(iter_input_domains(Path(args.input)), desc="Segmenting", unit=" domains"),
        )

    rejected = segment_all(assembler, domains, sys.stdout)
    if rejected:
        logger.info(f"Rejected {rejected:,} domains")
    return 0


if __name__ == "__main__":
    sys.exit(main())
