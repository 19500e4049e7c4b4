"""
Generative recommender adapters.

A generative adapter sends one prompt to an inference service, parses the
structured answer into candidates and resolves each candidate against the
catalog. Every inference failure (network, quota, timeout, garbage) ends
up as an empty result list so the orchestrator can fall through to the
next stage.
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union

import httpx
import openai
from openai import AsyncOpenAI

from app.core.catalog import CatalogClient, CatalogError, MediaKind
from app.core.recommendation.models import (
    InferenceServiceFailure,
    Provenance,
    RecommendationCandidate,
    RecommendationResult,
)

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 5
DEFAULT_OPENAI_MODEL = "gpt-4o"
DEFAULT_HUGGINGFACE_MODEL = "mistralai/Mistral-7B-Instruct-v0.3"
HUGGINGFACE_API_URL = "https://api-inference.huggingface.co/models"

PROMPT_TEMPLATE = """As a movie and TV recommendation system, find titles that match this user description:
"{description}"

Rules:
1. REGIONAL CINEMA: if the description names a regional cinema (Bollywood, Korean, French, ...), recommend only actual productions from that region. Never substitute a culturally similar production from a different region.
2. GENRES: if the description names genres, match them precisely.
3. Prefer titles that genuinely match the description over merely popular ones.
4. Recommend at most {limit} titles.

Return ONLY a JSON object in this format:
{{
  "recommendations": [
    {{
      "title": "exact title",
      "description": "brief description of the title",
      "reason": "why it matches the description",
      "mediaType": "movie" or "series"
    }}
  ]
}}
"""


def build_prompt(description: str) -> str:
    return PROMPT_TEMPLATE.format(description=description, limit=MAX_SUGGESTIONS)


@dataclass(frozen=True)
class Parsed:
    """Well-formed service answer (possibly with zero usable candidates)."""

    candidates: Tuple[RecommendationCandidate, ...]


@dataclass(frozen=True)
class Malformed:
    """Service answer that could not be read as a suggestion list."""

    reason: str


ParseResult = Union[Parsed, Malformed]

_NO_JSON = object()


def _decode_json(text: str) -> Any:
    """Decode JSON, or the outermost JSON object/array embedded in prose."""
    text = text.strip()
    if not text:
        return _NO_JSON
    try:
        return json.loads(text)
    except ValueError:
        pass
    for opener, closer in (("{", "}"), ("[", "]")):
        start = text.find(opener)
        end = text.rfind(closer)
        if start != -1 and end > start:
            try:
                return json.loads(text[start:end + 1])
            except ValueError:
                continue
    return _NO_JSON


def _candidate_from_entry(entry: Any) -> Optional[RecommendationCandidate]:
    if not isinstance(entry, dict):
        return None
    title = str(entry.get("title") or entry.get("name") or "").strip()
    if not title:
        return None

    raw_kind = entry.get("mediaType", entry.get("media_type"))
    # Missing kind means movie; an unknown kind drops the entry.
    media_kind = MediaKind.MOVIE if raw_kind is None else MediaKind.parse(raw_kind)
    if media_kind is None:
        return None

    return RecommendationCandidate(
        suggested_title=title,
        suggested_media_kind=media_kind,
        short_description=str(entry.get("description") or ""),
        justification=str(entry.get("reason") or entry.get("justification") or ""),
    )


def parse_suggestions(payload: Any) -> ParseResult:
    """
    Parse an inference service answer into candidates.

    Accepts a JSON object with a 'recommendations' list, a bare list, or
    text containing either. Entries without a title or with an unknown
    media kind are discarded; at most five candidates are kept.

    Args:
        payload: Raw answer (text, decoded object or list)

    Returns:
        Parsed with the usable candidates, or Malformed
    """
    if isinstance(payload, str):
        payload = _decode_json(payload)
        if payload is _NO_JSON:
            return Malformed("no JSON found in response")

    if isinstance(payload, dict):
        entries = payload.get("recommendations")
        if not isinstance(entries, list):
            return Malformed("'recommendations' missing or not a list")
    elif isinstance(payload, list):
        entries = payload
    else:
        return Malformed(f"unexpected payload type {type(payload).__name__}")

    candidates = []
    for entry in entries:
        candidate = _candidate_from_entry(entry)
        if candidate is not None:
            candidates.append(candidate)
        if len(candidates) == MAX_SUGGESTIONS:
            break
    return Parsed(tuple(candidates))


class GenerativeRecommender:
    """
    Base adapter: prompt, parse, resolve.

    Subclasses implement complete(), which returns the raw service answer
    or raises InferenceServiceFailure.
    """

    name = "generative"
    default_provenance = Provenance.PRIMARY_GENERATIVE

    def __init__(
        self,
        catalog: CatalogClient,
        timeout: float = 30.0,
        provenance: Optional[Provenance] = None,
    ):
        self.catalog = catalog
        self.timeout = timeout
        self.provenance = provenance or self.default_provenance

    async def complete(self, prompt: str) -> Any:
        raise NotImplementedError

    async def suggest(self, description: str) -> List[RecommendationResult]:
        """
        Recommendations for a description, resolved against the catalog.

        Returns:
            Resolved results in suggestion order; empty on any service failure
        """
        prompt = build_prompt(description)
        try:
            payload = await asyncio.wait_for(self.complete(prompt), timeout=self.timeout)
        except InferenceServiceFailure as e:
            logger.warning(f"{self.name} inference failed for '{description}': {e}")
            return []
        except asyncio.TimeoutError:
            logger.warning(f"{self.name} inference timed out after {self.timeout}s for '{description}'")
            return []

        parsed = parse_suggestions(payload)
        if isinstance(parsed, Malformed):
            logger.warning(f"{self.name} returned a malformed response: {parsed.reason}")
            return []

        logger.info(f"{self.name} suggested {len(parsed.candidates)} titles for '{description}'")
        if not parsed.candidates:
            return []

        resolved = await asyncio.gather(*(self.resolve(c) for c in parsed.candidates))
        return [result for result in resolved if result is not None]

    async def resolve(self, candidate: RecommendationCandidate) -> Optional[RecommendationResult]:
        """
        Match a candidate to a catalog title.

        The first search hit is the match. A failed detail lookup keeps the
        hit's summary data; no hit (or a failed search) drops the candidate.
        """
        title = candidate.suggested_title
        try:
            hits = await self.catalog.search(title, candidate.suggested_media_kind)
        except CatalogError as e:
            logger.warning(f"{self.name}: catalog search for '{title}' failed: {e}")
            return None
        if not hits:
            logger.info(f"{self.name}: no catalog match for '{title}', dropping it")
            return None

        match = hits[0]
        details = match
        try:
            details = await self.catalog.get_details(match.id, match.media_kind)
        except CatalogError as e:
            logger.warning(f"{self.name}: details for '{match.title}' ({match.id}) unavailable: {e}")

        return RecommendationResult(
            catalog_id=match.id,
            title=match.title,
            overview=details.overview or candidate.short_description,
            media_kind=match.media_kind,
            justification=candidate.justification,
            poster_ref=details.poster_ref or match.poster_ref,
            provenance=self.provenance,
            is_fallback=self.provenance.is_fallback,
        )


class OpenAIRecommender(GenerativeRecommender):
    """Primary adapter backed by the OpenAI chat completions API."""

    name = "openai"
    default_provenance = Provenance.PRIMARY_GENERATIVE

    def __init__(
        self,
        catalog: CatalogClient,
        api_key: Optional[str],
        model: str = DEFAULT_OPENAI_MODEL,
        timeout: float = 30.0,
        client: Optional[AsyncOpenAI] = None,
        provenance: Optional[Provenance] = None,
    ):
        super().__init__(catalog, timeout=timeout, provenance=provenance)
        self.api_key = api_key
        self.model = model
        self._client = client

    @property
    def configured(self) -> bool:
        return self._client is not None or bool(self.api_key)

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.api_key:
                raise InferenceServiceFailure("OPENAI_API_KEY is not configured")
            self._client = AsyncOpenAI(api_key=self.api_key, timeout=self.timeout, max_retries=0)
        return self._client

    async def complete(self, prompt: str) -> Any:
        client = self._get_client()
        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                response_format={"type": "json_object"},
            )
        except openai.OpenAIError as e:
            raise InferenceServiceFailure(f"OpenAI request failed: {type(e).__name__}: {e}") from e

        if not response.choices:
            raise InferenceServiceFailure("OpenAI returned no choices")
        return response.choices[0].message.content or ""


class HuggingFaceRecommender(GenerativeRecommender):
    """Secondary adapter backed by the Hugging Face inference API."""

    name = "huggingface"
    default_provenance = Provenance.SECONDARY_GENERATIVE

    def __init__(
        self,
        catalog: CatalogClient,
        api_key: Optional[str],
        model: str = DEFAULT_HUGGINGFACE_MODEL,
        api_url: str = HUGGINGFACE_API_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        provenance: Optional[Provenance] = None,
    ):
        super().__init__(catalog, timeout=timeout, provenance=provenance)
        self.api_key = api_key
        self.model = model
        self.api_url = api_url.rstrip("/")
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def complete(self, prompt: str) -> Any:
        if not self.api_key:
            raise InferenceServiceFailure("HUGGINGFACE_API_KEY is not configured")

        url = f"{self.api_url}/{self.model}"
        body = {
            "inputs": prompt,
            "parameters": {"max_new_tokens": 800, "return_full_text": False},
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, json=body, headers=headers)
        except httpx.HTTPError as e:
            raise InferenceServiceFailure(f"Hugging Face request failed: {type(e).__name__}") from e

        if response.status_code >= 400:
            raise InferenceServiceFailure(f"Hugging Face error {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise InferenceServiceFailure("Invalid JSON from Hugging Face") from e

        if isinstance(data, list) and data and isinstance(data[0], dict):
            return data[0].get("generated_text") or ""
        if isinstance(data, dict) and "generated_text" in data:
            return data.get("generated_text") or ""
        raise InferenceServiceFailure("Unexpected Hugging Face response shape")
