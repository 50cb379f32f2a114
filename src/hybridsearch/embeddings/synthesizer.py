"""Deterministic placeholder embeddings.

Stands in for a real embedding model. Text is hashed with a 32-bit
polynomial rolling hash, and each dimension is drawn from a 48-bit linear
congruential generator reseeded with ``hash + index``. The vector is then
L2-normalized so downstream similarity search sees unit vectors.

Swap in a real model by implementing EmbeddingProvider with the same
output shape.
"""

import math
from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np


EMBEDDING_DIMENSION = 384

EmbeddingVector = Tuple[float, ...]

# rand48 parameters
_LCG_MULTIPLIER = 0x5DEECE66D
_LCG_INCREMENT = 0xB
_LCG_MASK = (1 << 48) - 1


class EmbeddingProvider(ABC):
    """Single-method capability mapping text to an embedding vector."""

    dimensions: int = EMBEDDING_DIMENSION

    @abstractmethod
    def embed(self, text: str) -> EmbeddingVector:
        """Generate an embedding vector for text."""


def string_hash(text: str) -> int:
    """32-bit polynomial rolling hash over UTF-16 code units.

    h = h * 31 + c for each code unit, wrapped to a signed 32-bit int.
    Characters outside the BMP contribute their two surrogate units.
    """
    encoded = text.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(encoded), 2):
        code_unit = encoded[i] | (encoded[i + 1] << 8)
        h = (h * 31 + code_unit) & 0xFFFFFFFF
    return _to_int32(h)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _seeded_unit_draw(seed: int) -> float:
    """First uniform draw in [0, 1) from a rand48 generator seeded with seed.

    The seed is scrambled with the multiplier before the first step, and
    the draw uses the top 24 bits of the 48-bit state.
    """
    state = (seed ^ _LCG_MULTIPLIER) & _LCG_MASK
    state = (state * _LCG_MULTIPLIER + _LCG_INCREMENT) & _LCG_MASK
    return (state >> 24) / float(1 << 24)


class VectorSynthesizer(EmbeddingProvider):
    """Hash-seeded, unit-normalized placeholder embeddings.

    Pure and stateless: identical text always yields a bit-for-bit identical
    vector, independent of process or call order.
    """

    def __init__(self, dimensions: int = EMBEDDING_DIMENSION):
        if dimensions <= 0:
            raise ValueError(f"dimensions must be positive, got {dimensions}")
        self.dimensions = dimensions

    def embed(self, text: str) -> EmbeddingVector:
        return self.synthesize(text)

    def synthesize(self, text: str) -> EmbeddingVector:
        """Map text to a fixed-length embedding.

        Args:
            text: Input text (may be empty)

        Returns:
            Tuple of `dimensions` floats with L2 norm 1.0, or the zero
            vector for empty text
        """
        if not text:
            return (0.0,) * self.dimensions

        h = string_hash(text)
        raw = np.empty(self.dimensions, dtype=np.float32)
        for i in range(self.dimensions):
            draw = _seeded_unit_draw(_to_int32(h + i))
            raw[i] = (draw - 0.5) * 2.0

        return tuple(normalize(raw).tolist())


def normalize(vector: np.ndarray) -> np.ndarray:
    """L2-normalize a float32 vector; an all-zero vector is returned unchanged.

    Squares are taken in float32 and accumulated in order in double
    precision; each component is divided in double and rounded to float32.
    """
    sum_squares = 0.0
    for square in (vector * vector).tolist():
        sum_squares += square
    magnitude = math.sqrt(sum_squares)
    if magnitude == 0:
        return vector
    return (vector.astype(np.float64) / magnitude).astype(np.float32)


def l2_norm(vector) -> float:
    """Euclidean norm of a sequence of floats."""
    return float(np.linalg.norm(np.asarray(vector, dtype=np.float64)))
