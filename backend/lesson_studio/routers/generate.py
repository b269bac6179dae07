from __future__ import annotations
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException

from ..errors import GenerationError, MissingApiKeyError
from ..gemini_client import GeminiClient
from ..generator import (
	generate_canvas_animation,
	generate_lesson_content,
	generate_quiz_questions,
	generate_scenario_content,
	generate_worksheet,
	require_topic,
)
from ..schemas import (
	AnimationRequest,
	AnimationResponse,
	LessonResponse,
	PrintHeader,
	QuizResponse,
	ScenarioResponse,
	TopicRequest,
	WorksheetResponse,
)
from ..settings import Settings, get_settings

router = APIRouter(prefix="/generate", tags=["generate"])


def _topic_or_422(topic: str) -> str:
	# Checked before a client exists so a blank topic never reaches the API
	try:
		return require_topic(topic)
	except ValueError as e:
		raise HTTPException(status_code=422, detail=str(e))


def _raise_http(err: GenerationError) -> NoReturn:
	status = 503 if isinstance(err, MissingApiKeyError) else 502
	raise HTTPException(status_code=status, detail=str(err)) from err


def _header(req: TopicRequest, config: Settings) -> PrintHeader:
	return PrintHeader(teacher_name=req.teacher_name, school_name=req.school_name, grade=config.grade)


@router.post("/lesson", response_model=LessonResponse)
async def lesson(req: TopicRequest, config: Settings = Depends(get_settings)):
	topic = _topic_or_422(req.topic)
	try:
		client = GeminiClient(config)
	except GenerationError as e:
		_raise_http(e)
	try:
		result = await generate_lesson_content(client, topic, config.grade)
		return LessonResponse(lesson=result, header=_header(req, config))
	except GenerationError as e:
		_raise_http(e)
	finally:
		await client.aclose()


@router.post("/scenario", response_model=ScenarioResponse)
async def scenario(req: TopicRequest, config: Settings = Depends(get_settings)):
	topic = _topic_or_422(req.topic)
	try:
		client = GeminiClient(config)
	except GenerationError as e:
		_raise_http(e)
	try:
		result = await generate_scenario_content(client, topic, config.grade)
		return ScenarioResponse(scenario=result, header=_header(req, config))
	except GenerationError as e:
		_raise_http(e)
	finally:
		await client.aclose()


@router.post("/quiz", response_model=QuizResponse)
async def quiz(req: TopicRequest, config: Settings = Depends(get_settings)):
	topic = _topic_or_422(req.topic)
	try:
		client = GeminiClient(config)
	except GenerationError as e:
		_raise_http(e)
	try:
		questions = await generate_quiz_questions(client, topic, config.grade)
		return QuizResponse(questions=questions)
	except GenerationError as e:
		_raise_http(e)
	finally:
		await client.aclose()


@router.post("/worksheet", response_model=WorksheetResponse)
async def worksheet(req: TopicRequest, config: Settings = Depends(get_settings)):
	topic = _topic_or_422(req.topic)
	try:
		client = GeminiClient(config)
	except GenerationError as e:
		_raise_http(e)
	try:
		content = await generate_worksheet(client, topic, config.grade)
		return WorksheetResponse(content=content, header=_header(req, config))
	except GenerationError as e:
		_raise_http(e)
	finally:
		await client.aclose()


@router.post("/animation", response_model=AnimationResponse)
async def animation(req: AnimationRequest, config: Settings = Depends(get_settings)):
	description = _topic_or_422(req.description)
	try:
		client = GeminiClient(config)
	except GenerationError as e:
		_raise_http(e)
	try:
		code = await generate_canvas_animation(client, description)
		return AnimationResponse(code=code)
	except GenerationError as e:
		_raise_http(e)
	finally:
		await client.aclose()
