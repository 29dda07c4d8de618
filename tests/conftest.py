import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from httpx import ASGITransport

from openai_embeddings.transport import Client


SAMPLE_RESPONSE = {
    "object": "list",
    "data": [{"object": "embedding", "embedding": [0.1, 0.2], "index": 0}],
    "model": "text-embedding-3-small",
    "usage": {"prompt_tokens": 5, "total_tokens": 5},
}


class FakeService:
    """Records what reaches the remote service and answers with a canned body."""

    def __init__(self) -> None:
        self.received: list[dict] = []
        self.status_code = 200
        self.body: dict | str = SAMPLE_RESPONSE


def build_app(service: FakeService) -> FastAPI:
    app = FastAPI()

    @app.post("/v1/embeddings")
    async def embeddings(request: Request):
        service.received.append(
            {"headers": dict(request.headers), "json": await request.json()}
        )
        if isinstance(service.body, str):
            return Response(
                content=service.body,
                status_code=service.status_code,
                media_type="application/json",
            )
        return JSONResponse(service.body, status_code=service.status_code)

    return app


@pytest.fixture
def service():
    return FakeService()


@pytest.fixture
def transport(service):
    return ASGITransport(app=build_app(service))


@pytest.fixture
async def client(transport):
    async with Client(
        "https://api.openai.com",
        token="sk-test",
        timeout=5.0,
        transport=transport,
    ) as c:
        yield c
