"""Embedding providers for query and document vectors."""

from hybridsearch.embeddings.synthesizer import (
    EMBEDDING_DIMENSION,
    EmbeddingProvider,
    EmbeddingVector,
    VectorSynthesizer,
    l2_norm,
    normalize,
    string_hash,
)

__all__ = [
    "EMBEDDING_DIMENSION",
    "EmbeddingProvider",
    "EmbeddingVector",
    "VectorSynthesizer",
    "l2_norm",
    "normalize",
    "string_hash",
]
