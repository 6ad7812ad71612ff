import io
import logging
import random

logger = logging.getLogger(__name__)


class Prefix:
    """
    Sliding window over the last prefix_len words.
    Starts as prefix_len empty strings (the start-of-text state).
    """

    def __init__(self, prefix_len):
        self.words = [""] * prefix_len

    def __len__(self):
        return len(self.words)

    def key(self):
        return " ".join(self.words)

    def shift(self, word):
        # in place, length never changes
        self.words[:-1] = self.words[1:]
        self.words[-1] = word


class MarkovChain:
    def __init__(self, prefix_len, rng=None):
        """
        prefix_len: int (words of context per prefix, fixed for the chain's lifetime)
        rng: anything with randrange(n); defaults to a private random.Random
        """
        if isinstance(prefix_len, bool) or not isinstance(prefix_len, int) or prefix_len < 1:
            raise ValueError(f"prefix_len must be a positive integer, got {prefix_len!r}")

        self._prefix_len = prefix_len
        self.chain = {}
        self.rng = rng if rng is not None else random.Random()

    @property
    def prefix_len(self):
        return self._prefix_len

    def __len__(self):
        return len(self.chain)

    def __contains__(self, key):
        return key in self.chain

    def suffixes(self, key):
        return list(self.chain.get(key, ()))

    def stats(self):
        return {
            "prefix_len": self._prefix_len,
            "prefixes": len(self.chain),
            "suffixes": sum(len(v) for v in self.chain.values()),
        }

    def build(self, stream):
        """
        stream: iterable of text lines (open file, StringIO, list[str]) or a plain str

        Every call starts from the empty prefix, so separate documents are
        merged into the table rather than chained end to end. A read error
        (including a stream that is already closed) ends ingestion the same
        way exhaustion does.
        Returns the number of tokens read.
        """
        if isinstance(stream, str):
            # iterating a str would yield characters, not lines
            stream = io.StringIO(stream)

        p = Prefix(self._prefix_len)
        count = 0

        try:
            for line in stream:
                for word in line.split():
                    key = p.key()
                    self.chain.setdefault(key, []).append(word)
                    p.shift(word)
                    count += 1
        except (OSError, UnicodeDecodeError, ValueError) as e:
            logger.warning(f"Stopped reading after {count} tokens: {e}")

        logger.debug(f"Built {count} tokens into chain (prefix_len={self._prefix_len})")
        return count

    def build_text(self, text):
        return self.build(io.StringIO(text))

    def generate(self, max_words):
        """
        max_words: int (upper bound; the walk stops early at an unseen prefix)
        """
        p = Prefix(self._prefix_len)
        words = []

        for _ in range(max_words):
            choices = self.chain.get(p.key())
            if not choices:
                break
            # duplicates in the list carry the frequency weighting
            nxt = choices[self.rng.randrange(len(choices))]
            words.append(nxt)
            p.shift(nxt)

        return " ".join(words)
