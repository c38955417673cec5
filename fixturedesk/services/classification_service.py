"""
Client for the hosted multimodal model that classifies and describes images.

The public entry point, ClassificationService.analyze_image, never raises for
remote failures: rate limiting, transport errors and unusable responses all
come back as tagged results.
"""
import base64
import json
import logging
from typing import Any, Dict, Optional, Type

import requests
from pydantic import BaseModel, ValidationError

from fixturedesk.core.config import settings
from fixturedesk.models.analysis_model import (
    AnalysisFailed,
    AnalysisSuccess,
    CelebrityReport,
    CookedFoodReport,
    FruitReport,
    GeneralCategory,
    GenericReport,
    ImageCategory,
    InvoiceReport,
    LogoReport,
    NetworkDiagramReport,
    PulseReport,
    RateLimited,
    UnknownCategory,
)
from fixturedesk.services import analysis_prompts as prompts

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "The analysis service is receiving too many requests. Please wait a moment and try again."
UNKNOWN_CATEGORY_MESSAGE = "The image could not be recognised. Try a clearer photo."

# Category -> (prompt, response schema, report model)
_CATEGORY_ANALYSES = {
    ImageCategory.NETWORK_DIAGRAM: (prompts.NETWORK_DIAGRAM_PROMPT, prompts.NETWORK_DIAGRAM_SCHEMA, NetworkDiagramReport),
    ImageCategory.FRUIT: (prompts.FRUIT_PROMPT, prompts.FRUIT_SCHEMA, FruitReport),
    ImageCategory.PULSES: (prompts.PULSES_PROMPT, prompts.PULSES_SCHEMA, PulseReport),
    ImageCategory.INVOICE: (prompts.INVOICE_PROMPT, prompts.INVOICE_SCHEMA, InvoiceReport),
}

_GENERAL_ANALYSES = {
    GeneralCategory.LOGO: (prompts.LOGO_PROMPT, prompts.LOGO_SCHEMA, LogoReport),
    GeneralCategory.CELEBRITY: (prompts.CELEBRITY_PROMPT, prompts.CELEBRITY_SCHEMA, CelebrityReport),
    GeneralCategory.COOKED_FOOD: (prompts.COOKED_FOOD_PROMPT, prompts.COOKED_FOOD_SCHEMA, CookedFoodReport),
}

_GENERIC_SUB_CATEGORIES = {
    GeneralCategory.ELECTRONIC_ITEM,
    GeneralCategory.PLANT,
    GeneralCategory.ANIMAL,
    GeneralCategory.SCENE,
    GeneralCategory.MANMADE_OBJECT,
}

class AnalysisRequestError(Exception):
    """A model call failed or returned something unusable."""

class AnalysisRateLimitError(AnalysisRequestError):
    """The model endpoint refused the call because of quota or rate limits."""

def _normalise_label(text: str) -> str:
    return text.strip().strip("\"'.").strip().upper()

class ClassificationService:
    def __init__(
        self,
        api_key: str = settings.GEMINI_API_KEY,
        model: str = settings.GEMINI_MODEL,
        api_url: str = settings.GEMINI_API_URL,
        timeout: float = settings.GEMINI_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _generate(self, image_b64: str, media_type: str, prompt: str,
                  response_schema: Optional[Dict[str, Any]] = None) -> str:
        """One generateContent call. Returns the text of the first candidate."""
        body: Dict[str, Any] = {
            "contents": [{
                "parts": [
                    {"inline_data": {"mime_type": media_type, "data": image_b64}},
                    {"text": prompt},
                ],
            }],
        }
        if response_schema is not None:
            body["generationConfig"] = {
                "responseMimeType": "application/json",
                "responseSchema": response_schema,
            }

        url = f"{self.api_url}/models/{self.model}:generateContent"
        try:
            response = self.session.post(url, params={"key": self.api_key}, json=body, timeout=self.timeout)
        except requests.RequestException as e:
            raise AnalysisRequestError(f"Could not reach the analysis service: {e}") from e

        if response.status_code == 429:
            raise AnalysisRateLimitError(RATE_LIMIT_MESSAGE)

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not response.ok:
            error = (payload or {}).get("error", {}) if isinstance(payload, dict) else {}
            if error.get("status") == "RESOURCE_EXHAUSTED":
                raise AnalysisRateLimitError(RATE_LIMIT_MESSAGE)
            message = error.get("message") or response.reason or "unknown error"
            raise AnalysisRequestError(f"Analysis service returned HTTP {response.status_code}: {message}")

        try:
            return payload["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            raise AnalysisRequestError("The analysis service returned an empty response.")

    def _structured(self, image_b64: str, media_type: str, prompt: str,
                    schema: Dict[str, Any], report_model: Type[BaseModel],
                    **overrides) -> BaseModel:
        text = self._generate(image_b64, media_type, prompt, schema)
        try:
            parsed = json.loads(text.strip())
            if not isinstance(parsed, dict):
                raise AnalysisRequestError("The analysis service returned an unexpected JSON document.")
            parsed.update(overrides)
            return report_model.model_validate(parsed)
        except json.JSONDecodeError as e:
            raise AnalysisRequestError(f"The analysis response was not valid JSON: {e}") from e
        except ValidationError as e:
            raise AnalysisRequestError(f"The analysis response did not match the expected format: {e}") from e

    def classify(self, image_b64: str, media_type: str) -> ImageCategory:
        label = _normalise_label(self._generate(image_b64, media_type, prompts.CLASSIFY_PROMPT))
        try:
            return ImageCategory(label)
        except ValueError:
            logger.debug("Unrecognised classification %r, treating as OTHER", label)
            return ImageCategory.OTHER

    def _analyze_general(self, image_b64: str, media_type: str) -> BaseModel:
        label = _normalise_label(self._generate(image_b64, media_type, prompts.SUB_CLASSIFY_PROMPT))
        try:
            sub_category = GeneralCategory(label)
        except ValueError:
            sub_category = GeneralCategory.GENERIC
        logger.info("Sub-classified image as %s", sub_category.value)

        if sub_category in _GENERAL_ANALYSES:
            prompt, schema, report_model = _GENERAL_ANALYSES[sub_category]
            return self._structured(image_b64, media_type, prompt, schema, report_model,
                                    category=ImageCategory.OTHER.value, subCategory=sub_category.value)

        if sub_category not in _GENERIC_SUB_CATEGORIES:
            sub_category = GeneralCategory.GENERIC
        return self._structured(image_b64, media_type, prompts.GENERIC_PROMPT, prompts.GENERIC_SCHEMA,
                                GenericReport, category=ImageCategory.OTHER.value, subCategory=sub_category.value)

    def analyze_image(self, image_bytes: bytes, media_type: str):
        """
        Classifies the image, then runs the category-specific analysis.

        Returns AnalysisSuccess, RateLimited, AnalysisFailed or UnknownCategory.
        """
        if not self.api_key:
            logger.error("GEMINI_API_KEY is not configured")
            return AnalysisFailed(message="The analysis service is not configured.")

        image_b64 = base64.b64encode(image_bytes).decode("ascii")
        try:
            category = self.classify(image_b64, media_type)
            logger.info("Classified image as %s", category.value)

            if category == ImageCategory.UNKNOWN:
                return UnknownCategory(message=UNKNOWN_CATEGORY_MESSAGE)

            if category == ImageCategory.OTHER:
                report = self._analyze_general(image_b64, media_type)
            else:
                prompt, schema, report_model = _CATEGORY_ANALYSES[category]
                report = self._structured(image_b64, media_type, prompt, schema, report_model,
                                          category=category.value)
        except AnalysisRateLimitError as e:
            logger.warning("Image analysis rate limited")
            return RateLimited(message=str(e))
        except AnalysisRequestError as e:
            logger.warning("Image analysis failed: %s", e)
            return AnalysisFailed(message=str(e))

        return AnalysisSuccess(category=category, report=report)
