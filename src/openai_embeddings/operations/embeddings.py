from collections.abc import Sequence
from enum import Enum
from typing import Annotated, Any, ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, StrictFloat, StrictInt, StrictStr

from openai_embeddings.operations.base import Operation


class Model(str, Enum):
    TEXT_EMBEDDING_3_LARGE = "text-embedding-3-large"
    TEXT_EMBEDDING_3_SMALL = "text-embedding-3-small"
    TEXT_EMBEDDING_ADA_002 = "text-embedding-ada-002"


class EncodingFormat(str, Enum):
    BASE64 = "base64"
    FLOAT = "float"

    @classmethod
    def default(cls) -> "EncodingFormat":
        """Nominal default. Requests never send it unless set explicitly."""
        return cls.FLOAT


class Input(RootModel[Union[str, Annotated[list[str], Field(min_length=1)]]]):
    """Text to embed: one string or a non-empty list of strings.

    Sent as the bare string or bare array, with no tag. Parsing picks the
    variant from the JSON shape.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def one(cls, text: str) -> "Input":
        return cls(text)

    @classmethod
    def many(cls, texts: Sequence[str]) -> "Input":
        return cls(list(texts))

    @property
    def is_many(self) -> bool:
        return isinstance(self.root, list)

    def texts(self) -> list[str]:
        return list(self.root) if self.is_many else [self.root]


class Embedding(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Always "embedding".
    object: StrictStr
    # Length depends on the model (and on `dimensions`, when requested).
    # The service computes float32 components; they are kept as Python floats.
    embedding: list[StrictFloat]
    # Position of the matching input within the request.
    index: StrictInt


class Usage(BaseModel):
    model_config = ConfigDict(frozen=True)

    prompt_tokens: StrictInt
    total_tokens: StrictInt


class EmbeddingResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Always "list".
    object: StrictStr
    data: list[Embedding]
    model: Model
    usage: Usage

    def vectors(self) -> list[list[float]]:
        return [d.embedding for d in sorted(self.data, key=lambda d: d.index)]


class EmbeddingRequest(Operation):
    """Body of ``POST v1/embeddings``.

    Optional fields are only sent when set through one of the ``with_*``
    methods, otherwise the remote service applies its own defaults.

        request = (
            EmbeddingRequest(["first", "second"], Model.TEXT_EMBEDDING_3_SMALL)
            .with_dimensions(256)
            .with_user("user-1234")
        )
    """

    model_config = ConfigDict(frozen=True)

    response_model: ClassVar[type[BaseModel]] = EmbeddingResponse

    input: Input
    model: Model
    encoding_format: EncodingFormat | None = None
    dimensions: StrictInt | None = None
    user: StrictStr | None = None

    def __init__(
        self,
        input: Input | str | Sequence[str] | None = None,
        model: Model | str | None = None,
        /,
        **data: Any,
    ) -> None:
        if input is not None:
            data["input"] = input
        if model is not None:
            data["model"] = model
        super().__init__(**data)

    def endpoint(self) -> str:
        return "v1/embeddings"

    def _with(self, **update: Any) -> "EmbeddingRequest":
        # Revalidate so setters get the same type checks as construction.
        return type(self).model_validate({**self.model_dump(exclude_unset=True), **update})

    def with_encoding_format(self, encoding_format: EncodingFormat | str) -> "EmbeddingRequest":
        return self._with(encoding_format=encoding_format)

    def with_dimensions(self, dimensions: int) -> "EmbeddingRequest":
        return self._with(dimensions=dimensions)

    def with_user(self, user: str) -> "EmbeddingRequest":
        return self._with(user=user)
