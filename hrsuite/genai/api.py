import os
from urllib.parse import urljoin
from dotenv import load_dotenv
from .utils import open_session, extract_text
from typing import Any, Optional, Mapping

import requests

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-3-flash-preview"
DEFAULT_TIMEOUT = 15.0


class GenAIClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        load_dotenv()
        key = api_key or os.getenv("GENAI_API_KEY")
        if not key:
            raise ValueError("Environment variable 'GENAI_API_KEY' is not set")

        self.api_key = key
        self.base_url = (base_url or os.getenv("GENAI_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")
        self.model = model or os.getenv("GENAI_MODEL") or DEFAULT_MODEL
        if timeout is None:
            timeout = float(os.getenv("GENAI_TIMEOUT") or DEFAULT_TIMEOUT)
        self.timeout = timeout
        self.session = session or open_session()

    # -------- headers --------
    @property
    def auth_headers(self) -> Mapping[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }

    # -------- core request --------
    def _request(
        self,
        method: str,
        path: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[dict] = None,
        json: Optional[dict] = None,
    ) -> Any:
        url = urljoin(self.base_url + "/", path.lstrip("/"))
        r = self.session.request(
            method=method.upper(),
            url=url,
            headers=headers or self.auth_headers,
            params=params,
            json=json,
            timeout=self.timeout,
        )
        r.raise_for_status()
        return r.json() if r.content else None

    # -------- API callers --------
    def generate_content(
        self,
        prompt: str,
        *,
        response_schema: Optional[dict] = None,
    ) -> Optional[str]:
        """
        Send ``prompt`` to the model and return the first candidate's text.

        When ``response_schema`` is given, the model is asked for a JSON
        reply matching it.
        """
        generation_config: dict[str, Any] = {"responseMimeType": "application/json"}
        if response_schema is not None:
            generation_config["responseSchema"] = response_schema
        response = self._request(
            "POST",
            f"models/{self.model}:generateContent",
            json={
                "contents": [{"parts": [{"text": prompt}]}],
                "generationConfig": generation_config,
            },
        )
        return extract_text(response)
