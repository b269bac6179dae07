from __future__ import annotations
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
	# Wire format is camelCase; attributes stay snake_case
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Theme(CamelModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

	id: str
	title: str


class CurriculumTopic(CamelModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

	id: str
	theme_id: str
	name: str


class Difficulty(str, Enum):
	EASY = "Лесно"
	MEDIUM = "Средно"
	HARD = "Тешко"


class GeneratedLesson(CamelModel):
	title: str
	# Three by convention; not enforced
	objectives: List[str]
	content: str


class GeneratedScenario(CamelModel):
	topic: str
	standards: str
	content: str
	intro_activity: str
	main_activity: str
	final_activity: str
	resources: str
	assessment: str


class QuizQuestion(CamelModel):
	question: str
	options: List[str]
	# Not checked against options; the generator is trusted
	correct_answer_index: int
	explanation: str
	difficulty: Difficulty


# ---- HTTP request/response bodies ----

class PrintHeader(CamelModel):
	teacher_name: Optional[str] = None
	school_name: Optional[str] = None
	grade: str


class TopicRequest(CamelModel):
	topic: str = Field(min_length=1, description="Curriculum topic name")
	teacher_name: Optional[str] = None
	school_name: Optional[str] = None


class AnimationRequest(CamelModel):
	description: str = Field(min_length=1)


class LessonResponse(CamelModel):
	lesson: GeneratedLesson
	header: PrintHeader


class ScenarioResponse(CamelModel):
	scenario: GeneratedScenario
	header: PrintHeader


class QuizResponse(CamelModel):
	questions: List[QuizQuestion]


class WorksheetResponse(CamelModel):
	content: str
	header: PrintHeader


class AnimationResponse(CamelModel):
	code: str
