from openai_embeddings.operations.base import Operation
from openai_embeddings.operations.embeddings import (
    Embedding,
    EmbeddingRequest,
    EmbeddingResponse,
    EncodingFormat,
    Input,
    Model,
    Usage,
)

__all__ = [
    "Embedding",
    "EmbeddingRequest",
    "EmbeddingResponse",
    "EncodingFormat",
    "Input",
    "Model",
    "Operation",
    "Usage",
]
