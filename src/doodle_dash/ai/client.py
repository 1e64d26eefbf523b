from __future__ import annotations

import os

from openai import OpenAI

from doodle_dash.shared.constants import DEFAULT_MODEL


class MissingCredentialsError(RuntimeError):
    """Raised when OPENAI_API_KEY is not configured."""


def get_model() -> str:
    return (os.getenv("OPENAI_MODEL") or "").strip() or DEFAULT_MODEL


def get_client() -> OpenAI:
    api_key = (os.getenv("OPENAI_API_KEY") or "").strip()
    base_url = (os.getenv("OPENAI_BASE_URL") or "").strip() or None  # usually ends with /v1
    if not api_key:
        raise MissingCredentialsError("OPENAI_API_KEY not set. Put it in .env")
    # HTTPS_PROXY/HTTP_PROXY are picked up by httpx from the environment.
    return OpenAI(api_key=api_key, base_url=base_url)
