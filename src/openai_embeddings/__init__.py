from openai_embeddings.transport import Client
from openai_embeddings.config import settings
from openai_embeddings.errors import APIStatusError, ParseError
from openai_embeddings.operations import (
    Embedding,
    EmbeddingRequest,
    EmbeddingResponse,
    EncodingFormat,
    Input,
    Model,
    Operation,
    Usage,
)


def client(token: str | None = None) -> Client:
    """Client for the remote service, authenticated with ``token``.

    Falls back to ``OPENAI_API_KEY`` from the environment (or ``.env``).
    """
    return Client(
        settings.openai_base_url,
        token=token or settings.openai_api_key,
        timeout=settings.request_timeout,
    )


__all__ = [
    "APIStatusError",
    "Client",
    "Embedding",
    "EmbeddingRequest",
    "EmbeddingResponse",
    "EncodingFormat",
    "Input",
    "Model",
    "Operation",
    "ParseError",
    "Usage",
    "client",
]
