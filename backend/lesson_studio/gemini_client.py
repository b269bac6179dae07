from __future__ import annotations
import logging
import httpx
from typing import Any, Dict, List, Optional
from .errors import GenerationError, MissingApiKeyError
from .settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

class GeminiClient:
	def __init__(
		self,
		config: Optional[Settings] = None,
		*,
		model: Optional[str] = None,
		base_url: Optional[str] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None,
	) -> None:
		config = config or default_settings
		self.api_key = config.api_key
		# Fail before any request is attempted
		if not self.api_key:
			logger.error("API key is missing; set API_KEY or VITE_API_KEY in the environment")
			raise MissingApiKeyError()
		self.model = model or config.gemini_model
		root = (base_url or config.gemini_base_url).rstrip("/")
		# Google AI Studio (Generative Language API); key goes in a header so it never appears in URLs
		self.base_url = f"{root}/models/{self.model}:generateContent"
		self._client = httpx.AsyncClient(timeout=config.gemini_timeout_seconds, transport=transport)

	async def generate(
		self,
		prompt: str,
		*,
		system_instruction: Optional[str] = None,
		response_mime_type: Optional[str] = None,
		response_schema: Optional[Dict[str, Any]] = None,
	) -> str:
		payload: Dict[str, Any] = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
		if system_instruction:
			payload["systemInstruction"] = {"parts": [{"text": system_instruction}]}
		generation_config: Dict[str, Any] = {}
		if response_mime_type:
			generation_config["responseMimeType"] = response_mime_type
		if response_schema is not None:
			generation_config["responseSchema"] = response_schema
		if generation_config:
			payload["generationConfig"] = generation_config
		return await self._post_payload(payload)

	async def _post_payload(self, payload: Dict[str, Any]) -> str:
		headers = {"x-goog-api-key": self.api_key}
		try:
			r = await self._client.post(self.base_url, headers=headers, json=payload)
			r.raise_for_status()
		except httpx.HTTPStatusError as http_err:
			logger.error("Gemini call to %s failed with status %s", self.model, http_err.response.status_code)
			raise GenerationError(
				f"Gemini API error {http_err.response.status_code}: {http_err.response.text}"
			) from http_err
		except httpx.RequestError as net_err:
			logger.error("Gemini call to %s failed: %s", self.model, net_err)
			raise GenerationError(f"Gemini API request failed: {net_err}") from net_err
		logger.debug("Gemini call to %s returned %s", self.model, r.status_code)
		try:
			data = r.json()
		except ValueError as err:
			raise GenerationError(f"Unexpected Gemini response: {r.text}") from err
		return _extract_text(data)

	async def aclose(self) -> None:
		await self._client.aclose()


def _extract_text(data: Dict[str, Any]) -> str:
	# Blocked or empty candidates come back without parts; callers treat "" as no content
	candidates: List[Dict[str, Any]] = data.get("candidates") or []
	if not candidates:
		return ""
	parts = (candidates[0].get("content") or {}).get("parts") or []
	return "".join(part.get("text", "") for part in parts if isinstance(part, dict))
