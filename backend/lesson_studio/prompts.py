from __future__ import annotations
from typing import Any, Dict

from .schemas import Difficulty


SYSTEM_PERSONA = (
	"Ти си искусен наставник по математика во основно образование во Република Северна Македонија "
	"и методичар кој подготвува наставни материјали за VII одделение според важечката наставна програма.\n"
	"Пишуваш на јасен и стандарден македонски јазик, прилагоден на возраста на учениците.\n"
	"Содржините се точни, методички издржани и подготвени за директна употреба на час."
)

ANIMATION_PERSONA = (
	"You are an expert JavaScript Canvas developer. "
	"Return only valid raw JavaScript code for the function body."
)

# LaTeX backslashes break the JSON wire format, so the model is steered to Unicode
MATH_INSTRUCTION = (
	"ВАЖНО ЗА ФОРМАТИРАЊЕ И JSON (СТРОГИ ПРАВИЛА):\n"
	"1. Враќај ЧИТЛИВ ТЕКСТ.\n"
	"2. ЗАБРАНЕТО Е КОРИСТЕЊЕ НА LATEX СИНТАКСА ($...$, \\frac, \\pi, \\circ) во JSON вредностите.\n"
	"3. ЗАБРАНЕТО Е КОРИСТЕЊЕ НА КОСИ ЦРТИ (BACKSLASHES \\) бидејќи тие го рушат JSON форматот.\n"
	"4. Наместо LaTeX, користи UNICODE симболи и обичен текст:\n"
	"   - π наместо \\pi\n"
	"   - ° наместо ^\\circ\n"
	"   - ² наместо ^2, ³ наместо ^3\n"
	"   - √ наместо \\sqrt\n"
	"   - Δ наместо \\triangle\n"
	"   - α, β, γ за агли.\n"
	"   - P = 2·r·π (обичен запис).\n"
	"5. За болдирање користи **текст**."
)

QUIZ_QUESTION_COUNT = 5
WORKSHEET_TASK_COUNT = 5


def build_lesson_prompt(topic: str, grade: str) -> str:
	return (
		f"Креирај лекција за {grade} одделение на тема: \"{topic}\".\n"
		"Лекцијата треба да биде интерактивна и разбирлива.\n\n"
		"Структура:\n"
		"1. Наслов.\n"
		"2. Што ќе научиме (3 цели).\n"
		"3. Главен дел (Дефиниции, Својства, Примери).\n"
		"4. Задача за вежбање.\n\n"
		f"{MATH_INSTRUCTION}\n\n"
		"Врати JSON:\n"
		"{\n"
		"  \"title\": \"String\",\n"
		"  \"objectives\": [\"String\", \"String\", \"String\"],\n"
		"  \"content\": \"String (Markdown + Unicode Math)\"\n"
		"}"
	)


def build_scenario_prompt(topic: str, grade: str) -> str:
	return (
		f"Креирај детално Сценарио за час по математика за {grade} одделение на тема: \"{topic}\".\n"
		"Пополни ги полињата за да одговараат на официјалниот формат за подготовки.\n\n"
		f"{MATH_INSTRUCTION}\n\n"
		"Биди конкретен, методичен и јасен.\n"
		"Врати JSON формат со следните полиња (сите се string):\n"
		"- topic: Насловот на темата.\n"
		"- standards: Стандарди за оценување (Користи булети).\n"
		"- content: Содржина и нови поими кои се воведуваат.\n"
		"- introActivity: Опис на воведната активност (околу 10 мин).\n"
		"- mainActivity: Опис на главните активности, работа во групи, задачи (околу 20-25 мин). Користи Unicode за формули.\n"
		"- finalActivity: Завршна активност, рефлексија и домашна работа (околу 10 мин).\n"
		"- resources: Потребни средства и материјали.\n"
		"- assessment: Начини на следење на напредокот."
	)


def build_quiz_prompt(topic: str, grade: str) -> str:
	return (
		f"Генерирај {QUIZ_QUESTION_COUNT} прашања по математика, тема: \"{topic}\" ({grade} одделение).\n"
		"Прашањата треба да бидат соодветни за возраста.\n"
		"Секое прашање има 4 понудени одговори и точно еден точен одговор.\n"
		f"{MATH_INSTRUCTION}"
	)


def build_worksheet_prompt(topic: str, grade: str) -> str:
	return (
		f"Креирај Работен Лист (Worksheet) за ученици по математика ({grade} одделение).\n"
		f"Тема: \"{topic}\".\n\n"
		"Содржина:\n"
		f"- {WORKSHEET_TASK_COUNT} текстуални задачи со различно ниво на тежина (од полесни кон потешки).\n"
		"- Задачите треба да се јасни и прецизни.\n"
		"- Не вклучувај решенија, само задачи за вежбање.\n\n"
		"Формат:\n"
		"Врати го текстот директно во Markdown формат. Користи наслови, bold текст и нумерирани листи.\n"
		"Користи Unicode за математички симболи (не LaTeX)."
	)


def build_animation_prompt(description: str) -> str:
	return (
		f"Write a JavaScript function body for an HTML5 Canvas animation about: \"{description}\".\n\n"
		"The function signature must be:\n"
		"function draw(ctx, width, height, frame) { ... }\n\n"
		"Parameters:\n"
		"- ctx: CanvasRenderingContext2D\n"
		"- width: Number (canvas width)\n"
		"- height: Number (canvas height)\n"
		"- frame: Number (incrementing frame counter for animation)\n\n"
		"Requirements:\n"
		"1. Clear the canvas at the start: ctx.clearRect(0, 0, width, height);\n"
		"2. Draw geometry shapes clearly (lines, circles, triangles).\n"
		"3. Use 'frame' to create movement (e.g. rotation, translation).\n"
		"4. Use Math.sin/Math.cos for smooth geometric animations.\n"
		"5. Set stroke styles and fill styles (use bright colors).\n"
		"6. Do NOT include the function declaration wrapper, only the body code.\n"
		"7. Do NOT use external libraries. Use standard Canvas API."
	)


# Gemini responseSchema (OpenAPI subset, upper-case type names)
QUIZ_RESPONSE_SCHEMA: Dict[str, Any] = {
	"type": "ARRAY",
	"items": {
		"type": "OBJECT",
		"properties": {
			"question": {"type": "STRING"},
			"options": {"type": "ARRAY", "items": {"type": "STRING"}},
			"correctAnswerIndex": {"type": "INTEGER"},
			"explanation": {"type": "STRING"},
			"difficulty": {"type": "STRING", "enum": [d.value for d in Difficulty]},
		},
		"required": ["question", "options", "correctAnswerIndex", "explanation", "difficulty"],
	},
}
