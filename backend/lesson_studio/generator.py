"""One coroutine per document type: build the prompt, call Gemini once, normalize."""
from __future__ import annotations
import logging
from typing import List

from .gemini_client import GeminiClient
from .normalizer import normalize_structured, normalize_text
from .prompts import (
	ANIMATION_PERSONA,
	QUIZ_RESPONSE_SCHEMA,
	SYSTEM_PERSONA,
	build_animation_prompt,
	build_lesson_prompt,
	build_quiz_prompt,
	build_scenario_prompt,
	build_worksheet_prompt,
)
from .schemas import GeneratedLesson, GeneratedScenario, QuizQuestion

logger = logging.getLogger(__name__)

JSON_MIME_TYPE = "application/json"
CODE_FENCE_TAGS = ("javascript", "js")


def require_topic(topic: str) -> str:
	topic = (topic or "").strip()
	if not topic:
		raise ValueError("topic is required")
	return topic


async def generate_lesson_content(client: GeminiClient, topic: str, grade: str) -> GeneratedLesson:
	prompt = build_lesson_prompt(require_topic(topic), grade)
	try:
		text = await client.generate(prompt, system_instruction=SYSTEM_PERSONA, response_mime_type=JSON_MIME_TYPE)
		return normalize_structured(text, GeneratedLesson)
	except Exception:
		logger.exception("Lesson generation failed for topic %r", topic)
		raise


async def generate_scenario_content(client: GeminiClient, topic: str, grade: str) -> GeneratedScenario:
	prompt = build_scenario_prompt(require_topic(topic), grade)
	try:
		text = await client.generate(prompt, system_instruction=SYSTEM_PERSONA, response_mime_type=JSON_MIME_TYPE)
		return normalize_structured(text, GeneratedScenario)
	except Exception:
		logger.exception("Scenario generation failed for topic %r", topic)
		raise


async def generate_quiz_questions(client: GeminiClient, topic: str, grade: str) -> List[QuizQuestion]:
	prompt = build_quiz_prompt(require_topic(topic), grade)
	try:
		text = await client.generate(
			prompt,
			system_instruction=SYSTEM_PERSONA,
			response_mime_type=JSON_MIME_TYPE,
			response_schema=QUIZ_RESPONSE_SCHEMA,
		)
		return normalize_structured(text, List[QuizQuestion])
	except Exception:
		logger.exception("Quiz generation failed for topic %r", topic)
		raise


async def generate_worksheet(client: GeminiClient, topic: str, grade: str) -> str:
	prompt = build_worksheet_prompt(require_topic(topic), grade)
	try:
		text = await client.generate(prompt, system_instruction=SYSTEM_PERSONA)
		# Markdown goes straight to the renderer; no further validation
		return normalize_text(text)
	except Exception:
		logger.exception("Worksheet generation failed for topic %r", topic)
		raise


async def generate_canvas_animation(client: GeminiClient, description: str) -> str:
	prompt = build_animation_prompt(require_topic(description))
	try:
		text = await client.generate(prompt, system_instruction=ANIMATION_PERSONA)
		return normalize_text(text, CODE_FENCE_TAGS)
	except Exception:
		logger.exception("Canvas animation generation failed for %r", description)
		raise
