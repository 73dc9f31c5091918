"""Vestaboard read/write API output."""

from __future__ import annotations

import json
import logging
from typing import Any

import requests

from schoolboard.display.sink import BoardContent, BoardLayout, DisplayError, is_layout

logger = logging.getLogger(__name__)

READ_WRITE_URL = "https://rw.vestaboard.com/"
COMPOSE_URL = "https://vbml.vestaboard.com/compose"
API_KEY_HEADER = "X-Vestaboard-Read-Write-Key"


def parse_current_layout(payload: Any) -> BoardLayout | None:
    """Pull the character grid out of a read API response."""
    if is_layout(payload):
        return payload
    if not isinstance(payload, dict):
        return None
    message = payload.get("currentMessage")
    if not isinstance(message, dict):
        return None
    layout = message.get("layout")
    if isinstance(layout, str):
        try:
            layout = json.loads(layout)
        except ValueError:
            return None
    return layout if is_layout(layout) else None


class VestaboardBoard:
    """Display sink backed by the Vestaboard Read/Write and VBML compose APIs."""

    def __init__(self, api_key: str, timeout_seconds: float = 10) -> None:
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds

    def read(self) -> BoardLayout | None:
        """Return the grid currently on the board."""
        payload = self._request("GET", READ_WRITE_URL)
        layout = parse_current_layout(payload)
        if layout is None:
            logger.warning("Board read returned no usable layout")
        return layout

    def write(self, content: BoardContent) -> None:
        """Send a grid as-is, or compose formatted text into one first."""
        layout = content if is_layout(content) else self.compose(content)
        self._request("POST", READ_WRITE_URL, body=layout)

    def compose(self, text: str) -> BoardLayout:
        """Centre multi-line text on the board using the VBML compose service."""
        body = {
            "components": [
                {
                    "style": {"justify": "center", "align": "center"},
                    "template": text,
                }
            ]
        }
        layout = self._request("POST", COMPOSE_URL, body=body)
        if not is_layout(layout):
            raise DisplayError("Compose response was not a character grid")
        return layout

    def _request(self, method: str, url: str, body: Any = None) -> Any:
        headers = {API_KEY_HEADER: self._api_key}
        try:
            response = requests.request(
                method, url, headers=headers, json=body, timeout=self._timeout_seconds
            )
        except requests.RequestException as exc:
            raise DisplayError(f"Vestaboard request failed: {exc}") from exc

        if response.status_code != 200:
            body_text = response.text.strip()
            detail = f"Status {response.status_code}"
            if body_text:
                detail = f"{detail}, Body: {body_text}"
            raise DisplayError(f"Vestaboard request failed: {detail}")

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            if method == "POST" and url == READ_WRITE_URL:
                return None
            raise DisplayError("Vestaboard response was not valid JSON") from exc


__all__ = ["VestaboardBoard", "parse_current_layout"]
