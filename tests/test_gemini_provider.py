import json
import unittest

import httpx

from resumegen.ai.providers.gemini_provider import GeminiProvider
from resumegen.ai.types import GenerationConfig, ProviderError


def _provider(handler):
    return GeminiProvider(model="gemini-2.5-flash", api_key="g-test", transport=httpx.MockTransport(handler))


class GeminiProviderTests(unittest.IsolatedAsyncioTestCase):
    async def test_sends_schema_and_joins_parts(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(
                200,
                json={"candidates": [{"content": {"parts": [{"text": '{"score": '}, {"text": "70}"}]}}]},
            )

        schema = {"type": "object", "properties": {"score": {"type": "number"}}}
        text = await _provider(handler).generate("Score this", GenerationConfig(0.3, 800, schema))

        self.assertEqual(text, '{"score": 70}')
        self.assertIn("models/gemini-2.5-flash:generateContent", seen["url"])
        self.assertIn("key=g-test", seen["url"])
        config = seen["body"]["generationConfig"]
        self.assertEqual(config["responseMimeType"], "application/json")
        self.assertEqual(config["maxOutputTokens"], 800)
        self.assertEqual(config["responseSchema"], schema)

    async def test_overload_is_transient(self):
        provider = _provider(lambda request: httpx.Response(503, text="The model is overloaded"))
        with self.assertRaises(ProviderError) as ctx:
            await provider.generate("hi", GenerationConfig())
        self.assertTrue(ctx.exception.transient)
        self.assertEqual(ctx.exception.status_code, 503)

    async def test_bad_request_is_permanent(self):
        provider = _provider(lambda request: httpx.Response(400, json={"error": "bad"}))
        with self.assertRaises(ProviderError) as ctx:
            await provider.generate("hi", GenerationConfig())
        self.assertFalse(ctx.exception.transient)

    async def test_empty_candidates(self):
        provider = _provider(lambda request: httpx.Response(200, json={"candidates": []}))
        with self.assertRaises(ProviderError):
            await provider.generate("hi", GenerationConfig())


if __name__ == "__main__":
    unittest.main()
