import argparse
import logging
import random

from . import settings
from .corpus import build_chain
from .text_utils import trim_to_sentence

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Generate ribbing text from a Markov chain trained on a corpus directory"
    )
    parser.add_argument("--words", type=int, default=settings.DEFAULT_WORDS,
                        help="maximum number of words to print")
    parser.add_argument("--prefix", type=int, default=settings.DEFAULT_PREFIX_LEN,
                        help="prefix length in words")
    parser.add_argument("--corpus-dir", default=str(settings.CORPUS_DIR),
                        help="directory holding the training texts")
    parser.add_argument("--file", action="append", dest="files",
                        help="corpus file name inside --corpus-dir, in build order (repeatable)")
    parser.add_argument("--seed", type=int, help="random seed for reproducibility")
    parser.add_argument("--no-trim", action="store_true",
                        help="print the raw chain output instead of cutting at the last period")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.prefix < 1:
        parser.error("--prefix must be at least 1")
    if args.words < 0:
        parser.error("--words must not be negative")

    settings.configure_logging("DEBUG" if args.verbose else None)

    seed = args.seed if args.seed is not None else settings.SEED
    rng = random.Random(seed)

    chain = build_chain(
        args.prefix,
        args.corpus_dir,
        names=args.files or settings.CORPUS_FILES,
        rng=rng,
    )
    text = chain.generate(args.words)
    if not args.no_trim:
        text = trim_to_sentence(text)

    print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
