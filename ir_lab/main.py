"""
IR Lab - scoring API behind the information-retrieval visualizers

The browser visualizers (tokenization, bag-of-words, TF-IDF, BM25) post the
text in their input boxes and slider values here and render the returned
vectors and scores. Every endpoint is a pure recomputation: no state survives
between requests.

Configuration (env vars, .env.local or .env):
- LOG_LEVEL: console log level (default INFO)
- IR_LAB_LOG_FILE: base path of the session log (default logs/ir-lab.log)
- PORT: port for `python -m ir_lab.main` (default 8080)
- BM25_DEFAULT_K1 / BM25_DEFAULT_B: slider defaults (1.5 / 0.75)
- BM25_IDF_MODE: smoothed | robertson (default smoothed)
"""

import logging
import os
from contextlib import asynccontextmanager
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

# Load environment variables from .env.local (local dev) or .env
from dotenv import load_dotenv

env_local = Path(__file__).parent.parent / ".env.local"
env_file = Path(__file__).parent.parent / ".env"

if env_local.exists():
    print(f"Loading environment from: {env_local}")
    load_dotenv(env_local, override=True)
elif env_file.exists():
    print(f"Loading environment from: {env_file}")
    load_dotenv(env_file, override=True)

# Configure logging: console (brief) + file (detailed)
from ir_lab.logging_config import setup_logging

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
console_level = getattr(logging, log_level, logging.INFO)
setup_logging(
    log_file=os.getenv("IR_LAB_LOG_FILE", "logs/ir-lab.log"),
    console_level=console_level,
    file_level=logging.DEBUG,
)

logger = logging.getLogger(__name__)


from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ir_lab.scoring import (
    InvalidParameterError,
    VocabularyScope,
    build_vocabulary,
    compute_frequency_table,
    filter_stop_words,
    lemmatize,
    normalize_text,
    score_bag_of_words,
    score_bm25,
    score_tfidf,
    surviving_vocabulary,
    tokenize,
)
from ir_lab.scoring.bm25 import DEFAULT_B, DEFAULT_K1, IdfMode
from ir_lab.scoring.errors import coerce_parameter

# Configuration from environment variables
PORT = int(os.getenv("PORT", "8080"))
BM25_DEFAULT_K1 = coerce_parameter("BM25_DEFAULT_K1", os.getenv("BM25_DEFAULT_K1", str(DEFAULT_K1)))
BM25_DEFAULT_B = coerce_parameter("BM25_DEFAULT_B", os.getenv("BM25_DEFAULT_B", str(DEFAULT_B)))
BM25_IDF_MODE = IdfMode.parse(os.getenv("BM25_IDF_MODE", IdfMode.SMOOTHED.value))

APP_VERSION = "0.1.0"
APP_START_TIME = datetime.now(timezone.utc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log effective configuration on startup"""
    logger.info(
        f"IR Lab API {APP_VERSION} starting "
        f"(bm25 defaults: k1={BM25_DEFAULT_K1}, b={BM25_DEFAULT_B}, idf={BM25_IDF_MODE.value})"
    )
    yield
    logger.info("Shutting down...")


app = FastAPI(
    title="IR Lab API",
    description="Tokenization, bag-of-words, TF-IDF and BM25 scoring for the IR visualizers",
    version=APP_VERSION,
    lifespan=lifespan,
)

# Visualizer pages are served from a different origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class HealthResponse(BaseModel):
    status: str
    version: str
    started_at: str
    uptime_seconds: float


class TextRequest(BaseModel):
    text: str = Field(default="", description="Raw input text")


class TokensRequest(BaseModel):
    tokens: List[str] = Field(default_factory=list, description="Tokens from /v1/tokenize")


class TokensResponse(BaseModel):
    tokens: List[str]


class StopWordToken(BaseModel):
    text: str
    removed: bool


class StopWordResponse(BaseModel):
    tokens: List[StopWordToken]


class NormalizeRequest(BaseModel):
    text: str = Field(default="", description="Raw input text")
    lemmatize: bool = Field(default=False, description="Map known surface forms to their lemma")
    remove_stop_words: bool = Field(default=False, description="Soft-delete stop words")


class NormalizedToken(BaseModel):
    original: str
    text: str
    removed: bool
    lemmatized: bool


class NormalizeResponse(BaseModel):
    tokens: List[NormalizedToken]
    vocabulary: List[str] = Field(..., description="Sorted unique texts of non-removed tokens")


class CorpusRequest(BaseModel):
    query: str = Field(default="", description="Raw query text")
    documents: List[str] = Field(default_factory=list, description="Raw document texts")


class VocabularyRequest(CorpusRequest):
    scope: VocabularyScope = Field(default=VocabularyScope.UNION, description="query-only | union")


class VocabularyResponse(BaseModel):
    vocabulary: List[str]


class FrequencyResponse(BaseModel):
    vocabulary: List[str]
    tf: Dict[str, List[int]] = Field(..., description="Raw count per document, in document order")
    df: Dict[str, int]
    doc_lengths: List[int]
    avg_doc_length: float


class SimilarityItem(BaseModel):
    vector: List[float]
    dot: float
    cosine: float


class BagOfWordsResponse(BaseModel):
    vocabulary: List[str]
    query_vector: List[int]
    documents: List[SimilarityItem]


class TfIdfResponse(BaseModel):
    vocabulary: List[str]
    idf: List[float]
    query_vector: List[float]
    documents: List[SimilarityItem]


class Bm25Request(CorpusRequest):
    # Validated by BM25Scorer, not pydantic: JSON true must not coerce to 1.0
    k1: Any = Field(
        default=BM25_DEFAULT_K1,
        description="Term frequency saturation, number or numeric string (typically 0-3, not enforced)"
    )
    b: Any = Field(
        default=BM25_DEFAULT_B,
        description="Length normalization, number or numeric string (typically 0-1, not enforced)"
    )
    idf_mode: Any = Field(default=BM25_IDF_MODE, description="smoothed | robertson (case-insensitive)")


class Bm25DocumentScore(BaseModel):
    total: float
    per_term: Dict[str, float]


class Bm25Response(BaseModel):
    vocabulary: List[str]
    idf: Dict[str, float]
    k1: float
    b: float
    idf_mode: IdfMode
    avg_doc_length: float
    documents: List[Bm25DocumentScore]


# Routes
@app.get("/", response_model=dict)
async def root():
    """Root endpoint"""
    return {
        "service": "IR Lab API",
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint"""
    uptime = (datetime.now(timezone.utc) - APP_START_TIME).total_seconds()

    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        started_at=APP_START_TIME.isoformat(),
        uptime_seconds=round(uptime, 2),
    )


@app.post("/v1/tokenize", response_model=TokensResponse)
async def tokenize_text(request: TextRequest):
    """Lowercase and split text into tokens"""
    return TokensResponse(tokens=tokenize(request.text))


@app.post("/v1/lemmatize", response_model=TokensResponse)
async def lemmatize_tokens(request: TokensRequest):
    """Replace known surface forms with their lemma"""
    return TokensResponse(tokens=lemmatize(request.tokens))


@app.post("/v1/stopwords", response_model=StopWordResponse)
async def remove_stop_words(request: TokensRequest):
    """Mark stop words as removed, keeping every position"""
    tokens = filter_stop_words(request.tokens)
    return StopWordResponse(
        tokens=[StopWordToken(text=t.text, removed=t.removed) for t in tokens]
    )


@app.post("/v1/normalize", response_model=NormalizeResponse)
async def normalize(request: NormalizeRequest):
    """Tokenization visualizer: tokenize, optionally lemmatize and drop stop words"""
    tokens = normalize_text(
        request.text,
        apply_lemmatization=request.lemmatize,
        remove_stop_words=request.remove_stop_words,
    )
    return NormalizeResponse(
        tokens=[
            NormalizedToken(
                original=t.original,
                text=t.text,
                removed=t.removed,
                lemmatized=t.lemmatized,
            )
            for t in tokens
        ],
        vocabulary=surviving_vocabulary(tokens),
    )


@app.post("/v1/vocabulary", response_model=VocabularyResponse)
async def vocabulary(request: VocabularyRequest):
    """Ordered unique terms of the query (query-only) or of query and documents (union)"""
    sequences = [tokenize(request.query), *(tokenize(doc) for doc in request.documents)]
    return VocabularyResponse(vocabulary=build_vocabulary(sequences, request.scope))


@app.post("/v1/frequencies", response_model=FrequencyResponse)
async def frequencies(request: VocabularyRequest):
    """TF, DF and document lengths over the requested vocabulary"""
    query_tokens = tokenize(request.query)
    doc_tokens = [tokenize(doc) for doc in request.documents]
    terms = build_vocabulary([query_tokens, *doc_tokens], request.scope)
    table = compute_frequency_table(terms, doc_tokens)
    return FrequencyResponse(**asdict(table))


@app.post("/v1/score/bag-of-words", response_model=BagOfWordsResponse)
async def bag_of_words(request: CorpusRequest):
    """Raw count vectors with dot product and cosine similarity"""
    result = score_bag_of_words(request.query, request.documents)
    return BagOfWordsResponse(**asdict(result))


@app.post("/v1/score/tfidf", response_model=TfIdfResponse)
async def tfidf(request: CorpusRequest):
    """TF-IDF weighted vectors with dot product and cosine similarity"""
    result = score_tfidf(request.query, request.documents)
    return TfIdfResponse(**asdict(result))


@app.post("/v1/score/bm25", response_model=Bm25Response)
async def bm25(request: Bm25Request):
    """BM25 totals and per-query-term contributions"""
    result = score_bm25(
        request.query,
        request.documents,
        k1=request.k1,
        b=request.b,
        idf_mode=request.idf_mode,
    )
    return Bm25Response(**asdict(result))


@app.exception_handler(InvalidParameterError)
async def invalid_parameter_handler(request: Request, exc: InvalidParameterError):
    """Scoring parameter rejected before computation"""
    logger.warning(f"{request.url.path}: {exc}")
    return JSONResponse(
        status_code=422,
        content={
            "error": "Invalid parameter",
            "parameter": exc.name,
            "detail": exc.reason,
        },
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc),
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "ir_lab.main:app",
        host="0.0.0.0",
        port=PORT,
        reload=True,  # Development only
    )
