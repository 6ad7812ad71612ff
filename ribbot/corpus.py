import logging
from pathlib import Path

from .markov_model import MarkovChain

logger = logging.getLogger(__name__)

# used when the corpus directory gives us nothing to train on
DEFAULT_CORPUS = [
    "The Count of Monte Cristo is a novel written by Alexandre Dumas.",
    "The chain learns which words follow which and the chain repeats them.",
    "Every file in the corpus is read from the start of the text.",
    "The generator walks the chain until it runs out of words to say.",
]


def list_corpus_files(corpus_dir, names=None):
    """
    names given -> those files, in that order (missing ones are load_corpus's problem).
    otherwise -> every regular, non-hidden file in corpus_dir, sorted by name.

    Sorted order puts the fraga-ribbing-* transcripts ahead of scum.txt. The
    classic ribbot order (scum.txt, then a fixed list of transcripts) has to
    be spelled out through RIBBOT_CORPUS_FILES / --file.
    """
    corpus_dir = Path(corpus_dir)
    if names:
        return [corpus_dir / name for name in names]

    if not corpus_dir.is_dir():
        logger.warning(f"Corpus directory {corpus_dir} not found")
        return []

    return sorted(
        p for p in corpus_dir.iterdir() if p.is_file() and not p.name.startswith(".")
    )


def load_corpus(chain, paths):
    loaded = 0
    for path in paths:
        try:
            with open(path, "r", encoding="utf-8", errors="ignore") as f:
                tokens = chain.build(f)
        except OSError as e:
            logger.warning(f"Skipping corpus file {path}: {e}")
            continue
        logger.info(f"Loaded {tokens} tokens from {path}")
        loaded += 1
    return loaded


def build_chain(prefix_len, corpus_dir, names=None, fallback=DEFAULT_CORPUS, rng=None):
    chain = MarkovChain(prefix_len, rng=rng)
    loaded = load_corpus(chain, list_corpus_files(corpus_dir, names))

    if loaded == 0 and fallback:
        logger.warning(f"No corpus files loaded from {corpus_dir}; using built-in corpus")
        for text in fallback:
            chain.build_text(text)

    logger.info(f"Chain ready: {chain.stats()}")
    return chain
