"""Document schema for the document feed API.

Field names match the search results decoded from the index, so a
document fed here comes back as a RankedResult with the same id, title,
content and category.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from ..embeddings.synthesizer import EmbeddingProvider


@dataclass
class Document:
    """A document with text fields and its embedding.

    Fields:
        - id: Unique document identifier (also the document API docid)
        - title: Document title
        - content: Body text
        - category: Category label
        - embedding: Vector stored in the index's embedding field
    """
    id: str
    title: str = ""
    content: str = ""
    category: str = ""
    embedding: List[float] = field(default_factory=list)

    @property
    def embedding_text(self) -> str:
        """Text the embedding is synthesized from."""
        return f"{self.title} {self.content}".strip()

    def to_feed_body(self) -> Dict[str, Any]:
        """Convert to the document API JSON body.

        Raises:
            ValueError: If the document has no embedding
        """
        if not self.embedding:
            raise ValueError(f"Document '{self.id}' has no embedding")

        return {
            "fields": {
                "id": self.id,
                "title": self.title,
                "content": self.content,
                "category": self.category,
                "embedding": {"values": [float(v) for v in self.embedding]},
            }
        }


def document_from_dict(data: Mapping[str, Any], embedder: EmbeddingProvider) -> Document:
    """Build a Document from a plain mapping, synthesizing its embedding.

    Args:
        data: Mapping with 'id' and optional 'title', 'content', 'category'
        embedder: Provider used when the mapping carries no 'embedding'

    Raises:
        ValueError: If 'id' is missing or empty, or a provided embedding
            does not have the embedder's dimensions
    """
    doc_id = data.get("id")
    if not doc_id:
        raise ValueError(f"Document is missing 'id': {dict(data)}")

    doc = Document(
        id=str(doc_id),
        title=str(data.get("title", "")),
        content=str(data.get("content", "")),
        category=str(data.get("category", "")),
    )
    embedding = data.get("embedding")
    if embedding:
        if len(embedding) != embedder.dimensions:
            raise ValueError(
                f"Document '{doc.id}' embedding must have {embedder.dimensions} "
                f"dimensions, got {len(embedding)}"
            )
        doc.embedding = list(embedding)
    else:
        doc.embedding = list(embedder.embed(doc.embedding_text))
    return doc
