import logging
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)

# Gemini-style schema asking for a flat JSON array of strings.
NAMES_RESPONSE_SCHEMA = {"type": "ARRAY", "items": {"type": "STRING"}}


def open_session() -> requests.Session:
    """Open a requests session for the text-generation service.

    Returns
    -------
    requests.Session
        A session with JSON ``Accept``/``Content-Type`` headers preset.
        Authentication headers are added per request by the client.
    """
    session = requests.Session()
    session.headers.update(
        {"Accept": "application/json", "Content-Type": "application/json"}
    )
    logger.debug("Opened text-generation HTTP session")
    return session


def extract_text(response: Any) -> Optional[str]:
    """Return the first candidate text of a ``generateContent`` response.

    Parameters
    ----------
    response : Any
        Decoded JSON body returned by the service.

    Returns
    -------
    Optional[str]
        Concatenated text parts of the first candidate, or ``None`` when the
        response does not have the expected shape.
    """
    if not isinstance(response, dict):
        return None
    candidates = response.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return None
    texts = [part["text"] for part in parts if isinstance(part, dict) and isinstance(part.get("text"), str)]
    if not texts:
        return None
    return "".join(texts)
