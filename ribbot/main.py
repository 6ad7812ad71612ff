import logging
import random
import threading
from typing import List

from fastapi import FastAPI, BackgroundTasks, HTTPException
from pydantic import BaseModel, Field

from . import settings
from .corpus import build_chain, list_corpus_files
from .markov_model import MarkovChain
from .text_utils import normalize_whitespace, trim_to_sentence

settings.configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="ribbot: Markov chain text generator")

# seeded once per process; every cached chain draws from it
_rng = random.Random(settings.SEED)

# -----------------------
# Chain cache (one chain per prefix length)
# -----------------------
_chain_cache = {}
_chain_lock = threading.Lock()


def invalidate_chain_cache():
    with _chain_lock:
        _chain_cache.clear()


def get_chain(prefix_len: int) -> MarkovChain:
    with _chain_lock:
        chain = _chain_cache.get(prefix_len)
    if chain is not None:
        return chain

    # corpus scan runs unlocked; if another request got there first, keep theirs
    chain = build_chain(
        prefix_len,
        settings.CORPUS_DIR,
        names=settings.CORPUS_FILES,
        rng=_rng,
    )
    with _chain_lock:
        return _chain_cache.setdefault(prefix_len, chain)


def rebuild_default_chain():
    """
    Build into a fresh chain first, then swap, so requests never see a half-built table.
    """
    chain = build_chain(
        settings.DEFAULT_PREFIX_LEN,
        settings.CORPUS_DIR,
        names=settings.CORPUS_FILES,
        rng=_rng,
    )
    with _chain_lock:
        _chain_cache.clear()
        _chain_cache[settings.DEFAULT_PREFIX_LEN] = chain
    return chain


def _finish(raw: str, trim: bool) -> str:
    return trim_to_sentence(raw) if trim else raw


# -----------------------
# Request schemas
# -----------------------
class GenerationRequest(BaseModel):
    words: int = Field(settings.DEFAULT_WORDS, ge=0, le=settings.MAX_WORDS_LIMIT)
    prefix: int = Field(settings.DEFAULT_PREFIX_LEN, ge=1, le=settings.MAX_PREFIX_LEN)
    trim: bool = True


class TextGenerationRequest(GenerationRequest):
    # each entry is trained as its own document
    documents: List[str] = Field(..., min_length=1)


# -----------------------
# Root & status
# -----------------------
@app.get("/")
def root():
    return {"status": "ribbot API Active"}


@app.get("/corpus/status")
def corpus_status():
    with _chain_lock:
        chains = {str(n): c.stats() for n, c in sorted(_chain_cache.items())}
    return {
        "corpus_dir": str(settings.CORPUS_DIR),
        "corpus_files": settings.CORPUS_FILES,
        "resolved_files": [
            str(p) for p in list_corpus_files(settings.CORPUS_DIR, settings.CORPUS_FILES)
        ],
        "default_prefix": settings.DEFAULT_PREFIX_LEN,
        "chains": chains,
    }


# -----------------------
# Generation
# -----------------------
@app.post("/generate")
@app.post("/ribbing")
def generate(req: GenerationRequest):
    try:
        chain = get_chain(req.prefix)
        raw = chain.generate(req.words)
    except Exception as e:
        logger.exception("Markov generation failed")
        raise HTTPException(status_code=500, detail=f"Markov generation failed: {e}")

    return {
        "generated_text": _finish(raw, req.trim),
        "raw_text": raw,
        "model": "markov",
        "prefix": req.prefix,
        "words": req.words,
    }


@app.post("/generate_from_text")
def generate_from_text(req: TextGenerationRequest):
    try:
        chain = MarkovChain(req.prefix, rng=_rng)
        for doc in req.documents:
            chain.build_text(normalize_whitespace(doc))
        raw = chain.generate(req.words)
    except Exception as e:
        logger.exception("Markov generation from request text failed")
        raise HTTPException(status_code=500, detail=f"Markov generation failed: {e}")

    return {
        "generated_text": _finish(raw, req.trim),
        "raw_text": raw,
        "model": "markov",
        "prefix": req.prefix,
        "words": req.words,
        "documents": len(req.documents),
    }


# -----------------------
# Corpus reload
# -----------------------
@app.post("/corpus/reload")
def reload_corpus(background_tasks: BackgroundTasks):
    def run():
        try:
            chain = rebuild_default_chain()
            logger.info(f"Corpus reload complete: {chain.stats()}")
        except Exception:
            logger.exception("Corpus reload failed")

    background_tasks.add_task(run)
    return {
        "status": "started",
        "corpus_dir": str(settings.CORPUS_DIR),
        "prefix": settings.DEFAULT_PREFIX_LEN,
    }
