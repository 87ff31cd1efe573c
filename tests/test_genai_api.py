import json as _json
import os
import unittest
from unittest.mock import patch

import requests

from hrsuite.genai.api import DEFAULT_MODEL, GenAIClient
from hrsuite.genai.namer import GenAIGroupNamer
from hrsuite.genai.utils import NAMES_RESPONSE_SCHEMA, extract_text


def _candidate(text):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class DummyResponse:
    def __init__(self, json_data=None, content: bytes = b"", status_code: int = 200):
        self._json = json_data
        if json_data is not None and not content:
            content = _json.dumps(json_data).encode()
        self.content = content
        self.status_code = status_code

    def json(self):
        if self._json is None:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class DummySession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def request(self, method, url, headers=None, params=None, json=None, timeout=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": headers,
                "params": params,
                "json": json,
                "timeout": timeout,
            }
        )
        if self.error is not None:
            raise self.error
        return self.response


def _client(session):
    return GenAIClient(
        "test-key",
        base_url="https://genai.example.com/v1beta/",
        model="test-model",
        timeout=5,
        session=session,
    )


@patch("hrsuite.genai.api.load_dotenv")
class TestGenAIClient(unittest.TestCase):
    def test_requires_api_key(self, mock_load_dotenv):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValueError):
                GenAIClient()

    def test_reads_configuration_from_environment(self, mock_load_dotenv):
        env = {"GENAI_API_KEY": "env-key", "GENAI_TIMEOUT": "2.5"}
        with patch.dict(os.environ, env, clear=True):
            client = GenAIClient(session=DummySession())
        self.assertEqual(client.api_key, "env-key")
        self.assertEqual(client.model, DEFAULT_MODEL)
        self.assertEqual(client.timeout, 2.5)
        self.assertTrue(client.base_url.startswith("https://"))

    def test_generate_content_request_shape(self, mock_load_dotenv):
        session = DummySession(DummyResponse(json_data=_candidate('["A"]')))
        client = _client(session)

        text = client.generate_content("hello", response_schema=NAMES_RESPONSE_SCHEMA)

        self.assertEqual(text, '["A"]')
        call = session.calls[0]
        self.assertEqual(call["method"], "POST")
        self.assertEqual(
            call["url"],
            "https://genai.example.com/v1beta/models/test-model:generateContent",
        )
        self.assertEqual(call["headers"]["x-goog-api-key"], "test-key")
        self.assertEqual(call["timeout"], 5)
        self.assertEqual(call["json"]["contents"], [{"parts": [{"text": "hello"}]}])
        self.assertEqual(
            call["json"]["generationConfig"],
            {"responseMimeType": "application/json", "responseSchema": NAMES_RESPONSE_SCHEMA},
        )

    def test_http_error_propagates_from_client(self, mock_load_dotenv):
        client = _client(DummySession(DummyResponse(json_data={}, status_code=503)))
        with self.assertRaises(requests.HTTPError):
            client.generate_content("hello")


@patch("hrsuite.genai.api.load_dotenv")
class TestGenAIGroupNamer(unittest.TestCase):
    def test_returns_names(self, mock_load_dotenv):
        session = DummySession(DummyResponse(json_data=_candidate('["Falcons", "Otters"]')))
        namer = GenAIGroupNamer(_client(session))
        self.assertEqual(namer.generate(2, style="animal"), ["Falcons", "Otters"])
        prompt = session.calls[0]["json"]["contents"][0]["parts"][0]["text"]
        self.assertIn("2 groups", prompt)
        self.assertIn("animal", prompt)

    def test_zero_groups_skip_request(self, mock_load_dotenv):
        session = DummySession()
        self.assertEqual(GenAIGroupNamer(_client(session)).generate(0), [])
        self.assertEqual(session.calls, [])

    def test_failures_map_to_none(self, mock_load_dotenv):
        cases = [
            DummySession(error=requests.ConnectionError("unreachable")),
            DummySession(error=requests.Timeout("slow")),
            DummySession(DummyResponse(json_data={}, status_code=500)),
            DummySession(DummyResponse(content=b"<html>oops</html>")),
            DummySession(DummyResponse(json_data={"candidates": []})),
            DummySession(DummyResponse(json_data=_candidate("not json"))),
            DummySession(DummyResponse(json_data=_candidate('{"names": ["A"]}'))),
        ]
        for session in cases:
            namer = GenAIGroupNamer(_client(session))
            with self.assertLogs("hrsuite.genai.namer", level="WARNING"):
                self.assertIsNone(namer.generate(3))


class TestExtractText(unittest.TestCase):
    def test_joins_parts_of_first_candidate(self):
        response = {
            "candidates": [
                {"content": {"parts": [{"text": '["A",'}, {"text": ' "B"]'}]}},
                {"content": {"parts": [{"text": "ignored"}]}},
            ]
        }
        self.assertEqual(extract_text(response), '["A", "B"]')

    def test_unexpected_shapes(self):
        self.assertIsNone(extract_text(None))
        self.assertIsNone(extract_text({"candidates": "x"}))
        self.assertIsNone(extract_text({"candidates": [{"content": {}}]}))
        self.assertIsNone(extract_text({"candidates": [{"content": {"parts": [{}]}}]}))


if __name__ == "__main__":
    unittest.main()
