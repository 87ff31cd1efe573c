"""Group name generator backed by the text-generation HTTP client."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from ..grouping.naming import (
    DEFAULT_LANGUAGE,
    GroupNameGenerator,
    build_naming_prompt,
    parse_names,
)
from .api import GenAIClient
from .utils import NAMES_RESPONSE_SCHEMA

logger = logging.getLogger(__name__)


class GenAIGroupNamer(GroupNameGenerator):
    """Ask a text-generation model for team names.

    Every transport or decoding problem is logged and reported as ``None``,
    which the grouping engine maps to "keep the current names".
    """

    def __init__(
        self,
        client: Optional[GenAIClient] = None,
        *,
        language: str = DEFAULT_LANGUAGE,
    ) -> None:
        """Create a namer.

        Parameters
        ----------
        client : Optional[GenAIClient]
            Pre-configured client. If not provided, a default one is created
            from the environment, which raises ``ValueError`` when no API
            key is configured.
        language : str, default: "Traditional Chinese"
            Language the names should be written in.
        """
        self._client = client or GenAIClient()
        self._language = language

    def generate(self, count: int, *, style: Optional[str] = None) -> Optional[list[str]]:
        if count <= 0:
            return []
        prompt = build_naming_prompt(count, style, self._language)
        try:
            text = self._client.generate_content(
                prompt, response_schema=NAMES_RESPONSE_SCHEMA
            )
        except requests.Timeout:
            logger.warning(f"Group name request timed out after {self._client.timeout}s")
            return None
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Group name request failed: {e}")
            return None

        if text is None:
            logger.warning("Group name response did not contain any text")
            return None
        names = parse_names(text)
        if names is None:
            logger.warning("Group name response was not a JSON array")
            return None
        logger.debug(f"Received {len(names)} group names for {count} groups")
        return names


__all__ = ["GenAIGroupNamer"]
