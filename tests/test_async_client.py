"""Tests for :class:`openai_rest.AsyncClient` driven with ``asyncio.run``."""
from __future__ import annotations

import asyncio
import json

import httpx

from openai_rest import AsyncClient, ErrorKind, Failure
from openai_rest.descriptors import EmbeddingRequest, ImageVariationRequest, TranscriptionRequest

from conftest import BASE_URL


def test_concurrent_calls_keep_their_own_responses():
    async def echo(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        index = int(body["user"].split("-")[1])
        # Finish in reverse order so responses interleave.
        await asyncio.sleep(0.001 * (20 - index))
        return httpx.Response(200, json={"echo": body["user"], "input": body["input"]})

    async def scenario():
        async with AsyncClient("secret", BASE_URL, transport=httpx.MockTransport(echo)) as client:
            calls = [
                client.embeddings.create(EmbeddingRequest("m", [f"text {i}"]).user(f"caller-{i}"))
                for i in range(20)
            ]
            return await asyncio.gather(*calls)

    results = asyncio.run(scenario())

    assert [result.value["echo"] for result in results] == [f"caller-{i}" for i in range(20)]
    assert [result.value["input"] for result in results] == [[f"text {i}"] for i in range(20)]


def test_async_http_failure():
    def reject(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": {"message": "Incorrect API key provided"}})

    async def scenario():
        async with AsyncClient("bad", BASE_URL, transport=httpx.MockTransport(reject)) as client:
            return await client.models.list()

    result = asyncio.run(scenario())

    assert result == Failure(kind=ErrorKind.HTTP, message="Incorrect API key provided", status=401)


def test_async_upload_with_missing_file_makes_no_request(tmp_path):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={})

    async def scenario():
        async with AsyncClient("secret", BASE_URL, transport=httpx.MockTransport(handler)) as client:
            return await client.images.create_variation(ImageVariationRequest(tmp_path / "gone.png"))

    result = asyncio.run(scenario())

    assert result.kind is ErrorKind.IO
    assert calls == []


def test_async_audio_upload(tmp_path):
    audio = tmp_path / "clip.mp3"
    audio.write_bytes(b"ID3")
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"text": "hello"})

    async def scenario():
        async with AsyncClient("secret", BASE_URL, transport=httpx.MockTransport(handler)) as client:
            return await client.audio.transcribe(TranscriptionRequest(audio, "whisper-1").language("en"))

    result = asyncio.run(scenario())

    assert result.value == {"text": "hello"}
    assert str(seen[0].url) == f"{BASE_URL}/audio/transcriptions"
    assert b'name="language"\r\n\r\nen' in seen[0].content
    assert b'filename="clip.mp3"' in seen[0].content


def test_async_transport_failure():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    async def scenario():
        async with AsyncClient("secret", BASE_URL, transport=httpx.MockTransport(refuse)) as client:
            return await client.models.list()

    result = asyncio.run(scenario())

    assert result == Failure(kind=ErrorKind.TRANSPORT, message="timed out")


def test_async_unencodable_api_key_is_a_transport_failure():
    seen = []

    def record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    async def scenario():
        async with AsyncClient("sk-été", BASE_URL, transport=httpx.MockTransport(record)) as client:
            return await client.models.list()

    result = asyncio.run(scenario())

    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.TRANSPORT
    assert seen == []
