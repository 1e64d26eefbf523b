"""
Doodle quality check.

Sends the exported doodle to a vision-capable chat model and asks whether it
is just scribbles. The reply must be a JSON object of the shape
``{"isScribble": bool, "feedback": str}``; anything else is an error.
"""

from __future__ import annotations

import logging
import re
import time
from typing import Any, Callable, Dict, List, Optional

from openai import OpenAI, OpenAIError
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError, field_validator

from doodle_dash.ai.client import MissingCredentialsError, get_client, get_model

logger = logging.getLogger(__name__)

DATA_URI_RE = re.compile(r"^data:[\w.+-]+/[\w.+-]+;base64,[A-Za-z0-9+/]+={0,2}$")

QUALITY_CHECK_INSTRUCTIONS = """You are an AI assistant that helps determine the quality of a user's doodle.

You will be given a photo of a doodle, and you will determine whether or not it is just scribbles.

If it is just scribbles, you will set the isScribble output field to true, and provide feedback to the user encouraging them to try harder.
If it is not just scribbles, you will set the isScribble output field to false, and provide positive feedback to the user.

Respond with a single JSON object with exactly these keys:
  "isScribble": boolean, whether or not the doodle is just scribbles
  "feedback": string, feedback to the user about their doodle"""


class QualityCheckError(Exception):
    """The quality check could not produce a trustworthy result."""


class DoodleQualityCheckInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    photo_data_uri: str = Field(
        alias="photoDataUri",
        description="A photo of a doodle as a data URI: 'data:<mimetype>;base64,<encoded_data>'.",
    )

    @field_validator("photo_data_uri")
    @classmethod
    def _must_be_data_uri(cls, value: str) -> str:
        if not DATA_URI_RE.match(value):
            raise ValueError("expected 'data:<mimetype>;base64,<encoded_data>'")
        return value


class DoodleQualityCheckOutput(BaseModel):
    # Wire keys only: "is_scribble" in a reply is a schema mismatch.
    model_config = ConfigDict(populate_by_name=False)

    is_scribble: StrictBool = Field(alias="isScribble", description="Whether or not the doodle is just scribbles.")
    feedback: StrictStr = Field(min_length=1, description="Feedback to the user about their doodle.")

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


def build_messages(photo_data_uri: str) -> List[Dict[str, Any]]:
    """System instruction plus one multimodal user message carrying the image."""
    return [
        {"role": "system", "content": QUALITY_CHECK_INSTRUCTIONS},
        {
            "role": "user",
            "content": [
                {"type": "text", "text": "Photo of the doodle:"},
                {"type": "image_url", "image_url": {"url": photo_data_uri}},
            ],
        },
    ]


class DoodleQualityChecker:
    """Thin request/response wrapper around one chat-completions call.

    No retries and no caching: every call goes to the model, and every
    failure surfaces as :class:`QualityCheckError`.
    """

    def __init__(
        self,
        client: Optional[OpenAI] = None,
        model: Optional[str] = None,
        temperature: float = 0.4,
        max_tokens: int = 512,
        client_factory: Callable[[], OpenAI] = get_client,
    ) -> None:
        self._client = client
        self._client_factory = client_factory
        self.model = model or get_model()
        self.temperature = temperature
        self.max_tokens = max_tokens

    def _get_client(self) -> OpenAI:
        # Built on first use so a missing key only fails the call, not startup.
        if self._client is None:
            try:
                self._client = self._client_factory()
            except MissingCredentialsError as exc:
                raise QualityCheckError(str(exc)) from exc
        return self._client

    def check(self, photo_data_uri: str) -> DoodleQualityCheckOutput:
        try:
            request = DoodleQualityCheckInput(photoDataUri=photo_data_uri)
        except ValidationError as exc:
            raise QualityCheckError(f"invalid doodle image: {exc}") from exc

        client = self._get_client()
        started = time.monotonic()
        try:
            resp = client.chat.completions.create(
                model=self.model,
                messages=build_messages(request.photo_data_uri),
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                response_format={"type": "json_object"},
            )
        except OpenAIError as exc:
            raise QualityCheckError(f"quality check request failed: {exc}") from exc

        content = resp.choices[0].message.content if resp.choices else None
        logger.debug(
            "quality check reply model=%s latency=%.2fs raw=%r",
            self.model,
            time.monotonic() - started,
            content,
        )
        if not content:
            raise QualityCheckError("quality check returned an empty reply")

        try:
            return DoodleQualityCheckOutput.model_validate_json(content)
        except ValidationError as exc:
            raise QualityCheckError(f"quality check reply does not match schema: {exc}") from exc


def doodle_quality_check(photo_data_uri: str, checker: Optional[DoodleQualityChecker] = None) -> DoodleQualityCheckOutput:
    """Check one doodle with a default-configured checker."""
    return (checker or DoodleQualityChecker()).check(photo_data_uri)


__all__ = [
    "QualityCheckError",
    "DoodleQualityCheckInput",
    "DoodleQualityCheckOutput",
    "DoodleQualityChecker",
    "build_messages",
    "doodle_quality_check",
]
