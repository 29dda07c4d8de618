from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ValidationError

from openai_embeddings.errors import ParseError


class Operation(BaseModel, ABC):
    """A single remote call: where it goes, how it is sent, what comes back.

    Subclasses are the request bodies themselves. The transport reads
    ``method``, ``endpoint()`` and ``data()`` to issue the call and hands the
    raw body back to ``parse_response``.
    """

    method: ClassVar[str] = "POST"
    response_model: ClassVar[type[BaseModel]]

    @abstractmethod
    def endpoint(self) -> str: ...

    def data(self) -> dict[str, Any]:
        """JSON body with only the explicitly set, non-None fields."""
        return self.model_dump(mode="json", exclude_unset=True, exclude_none=True)

    @classmethod
    def parse_response(cls, body: bytes | str | Mapping[str, Any]) -> BaseModel:
        try:
            if isinstance(body, (bytes, str)):
                return cls.response_model.model_validate_json(body)
            return cls.response_model.model_validate(body)
        except ValidationError as e:
            raise ParseError(
                f"Invalid {cls.response_model.__name__}: "
                f"{e.error_count()} validation error(s)",
                errors=e.errors(include_url=False),
            ) from e
