"""Turn raw model replies into plain text or validated records.

The model is told not to emit backslashes, but it does not always comply.
Structured replies therefore get one best-effort repair pass before the
reply is rejected.
"""
from __future__ import annotations
import json
import logging
import re
from typing import Any, Iterable, Optional, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import EmptyResponseError, InvalidResponseError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_FENCE_TAGS = ("json",)


def _fence_pattern(tags: Iterable[str]) -> re.Pattern[str]:
	# Longest tag first so "javascript" wins over "js"
	ordered = sorted({t for t in tags if t}, key=len, reverse=True)
	if not ordered:
		return re.compile(r"```")
	return re.compile(r"```(?:" + "|".join(re.escape(t) for t in ordered) + r")?")


def strip_code_fences(text: str, tags: Iterable[str] = DEFAULT_FENCE_TAGS) -> str:
	"""Remove every ``` marker (bare or tagged with one of ``tags``).

	Text without any marker is returned unchanged; otherwise the result is trimmed.
	"""
	pattern = _fence_pattern(tags)
	if not pattern.search(text):
		return text
	return pattern.sub("", text).strip()


def repair_backslashes(text: str) -> str:
	"""Best-effort repair: replace every backslash with a forward slash.

	This is lossy. Legitimate JSON escapes such as ``\\n``, ``\\"`` or
	``\\u00b0`` are rewritten too, so a repaired reply may decode to
	different text than the model intended, or not decode at all.
	"""
	return text.replace("\\", "/")


def ensure_content(text: Optional[str]) -> str:
	if not text or not text.strip():
		raise EmptyResponseError()
	return text


def normalize_text(text: Optional[str], tags: Iterable[str] = DEFAULT_FENCE_TAGS) -> str:
	return strip_code_fences(ensure_content(text), tags)


def _decode(text: str, adapter: TypeAdapter[Any]) -> Any:
	return adapter.validate_python(json.loads(text))


def normalize_structured(text: Optional[str], shape: Type[T] | Any) -> T:
	"""Decode ``text`` as ``shape`` (a pydantic model or a typing form such as ``List[Model]``).

	Only the declared shape is checked; values inside it are not
	cross-validated (a quiz answer index may point past its options).
	"""
	clean = normalize_text(text)
	adapter: TypeAdapter[Any] = TypeAdapter(shape)
	try:
		return _decode(clean, adapter)
	except (json.JSONDecodeError, ValidationError) as err:
		logger.warning("Structured decode failed, retrying with backslashes replaced: %s", err)
	try:
		return _decode(repair_backslashes(clean), adapter)
	except (json.JSONDecodeError, ValidationError) as err:
		logger.error("Repair pass failed (%s). Original reply: %r", err, text)
		raise InvalidResponseError() from err
