"""Conversion of raw chat-model replies into validated pipeline objects."""
import json
import logging
import re
from typing import Any, List, Sequence

from langchain_core.messages import BaseMessage
from pydantic import ValidationError

from src.core.errors import ModelResponseError
from src.core.schemas import LocationCandidate

logger = logging.getLogger(__name__)

_CODE_FENCE_PATTERN = re.compile(r"```(?:json)?")


def message_text(message: Any) -> str:
    """Return the text content of a model reply.

    Raises:
        ModelResponseError: if the reply carries no plain-text content.
    """
    content = message.content if isinstance(message, BaseMessage) else message
    if isinstance(content, list):
        # Multi-part replies: keep only the text chunks
        chunks = [
            chunk.get("text", "") if isinstance(chunk, dict) else chunk
            for chunk in content
            if isinstance(chunk, str) or (isinstance(chunk, dict) and chunk.get("type") == "text")
        ]
        content = "".join(chunks) if chunks else None
    if not isinstance(content, str):
        raise ModelResponseError(f"Received a non-text response from the model: {type(content).__name__}")
    return content


def strip_code_fences(text: str) -> str:
    """Remove Markdown code-fence markers (```json / ```) around a payload."""
    return _CODE_FENCE_PATTERN.sub("", text).strip()


def parse_json_output(text: str) -> Any:
    """Parse model text as JSON once code fences are stripped.

    Raises:
        ModelResponseError: if the remaining text is not valid JSON.
    """
    cleaned = strip_code_fences(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise ModelResponseError(f"Model output is not valid JSON: {exc}") from exc


def build_candidates(json_data: Any, *, limit: int = 5) -> List[LocationCandidate]:
    """Validate a decoded JSON array of location objects.

    Entries that are not objects, lack ``name``/``type``, use an unknown type or
    describe a city without its country are skipped. Order is preserved and at
    most ``limit`` candidates are returned.
    """
    if not isinstance(json_data, list):
        raise ModelResponseError(
            f"Expected a JSON array of locations, got {type(json_data).__name__}"
        )

    candidates: List[LocationCandidate] = []
    for idx, item in enumerate(json_data):
        if not isinstance(item, dict):
            logger.debug(
                "Skipping location at position %s; expected an object, got %s",
                idx,
                type(item).__name__,
            )
            continue
        try:
            candidates.append(LocationCandidate.model_validate(item))
        except ValidationError as exc:
            logger.warning("Skipping location at position %s due to validation error: %s", idx, exc)
            continue
        if len(candidates) >= limit:
            break
    return candidates


def build_attractions(json_data: Any, *, limit: int = 3) -> List[str]:
    """Validate a decoded JSON array of attraction names.

    Raises:
        ModelResponseError: unless the payload is a non-empty list of non-blank strings.
    """
    if not isinstance(json_data, list) or not json_data:
        raise ModelResponseError("Expected a non-empty JSON array of attraction names")
    if not all(isinstance(item, str) and item.strip() for item in json_data):
        raise ModelResponseError("Attraction list contains non-string entries")
    names: Sequence[str] = [item.strip() for item in json_data]
    return list(names[:limit])
