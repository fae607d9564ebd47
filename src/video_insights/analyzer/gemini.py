"""Gemini text generation client with fixed safety settings."""

import logging

from google import genai
from google.genai import errors, types

from .exceptions import RemoteError

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Failed to analyze video. Please try again later."

SAFETY_SETTINGS = [
    types.SafetySetting(
        category=category,
        threshold=types.HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
    )
    for category in (
        types.HarmCategory.HARM_CATEGORY_HARASSMENT,
        types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
        types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
        types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
    )
]


def _error_message(exc: Exception) -> str:
    return str(exc).strip() or FALLBACK_ERROR_MESSAGE


class GeminiClient:
    """Single-attempt Gemini client bound to one API key and model."""

    def __init__(self, api_key: str, model: str):
        self.client = genai.Client(api_key=api_key)
        self.model = model

    def generate(self, prompt: str) -> str:
        """Generate text from a prompt.

        Raises:
            RemoteError: On any API or transport failure, or when the reply
                carries no text (e.g. blocked by the safety settings).
        """
        config = types.GenerateContentConfig(safety_settings=SAFETY_SETTINGS)

        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )
        except errors.APIError as e:
            logger.error("Gemini API error (%s): %s", e.code, e.message)
            raise RemoteError(_error_message(e)) from e
        except Exception as e:
            logger.error("Gemini request failed (%s): %s", type(e).__name__, e)
            raise RemoteError(_error_message(e)) from e

        text = response.text
        if text is None:
            feedback = response.prompt_feedback
            reason = feedback.block_reason if feedback and feedback.block_reason else None
            if reason:
                reason = getattr(reason, "value", reason)
                raise RemoteError(f"Text not available. Response was blocked due to {reason}")
            raise RemoteError(FALLBACK_ERROR_MESSAGE)

        return text
