"""Grade VII mathematics curriculum: themes and the lessons under them."""
from __future__ import annotations
from typing import List, Optional, Tuple

from .schemas import CurriculumTopic, Theme


THEMES: Tuple[Theme, ...] = (
	Theme(id="t1", title="Тема 1: Броеви"),
	Theme(id="t2", title="Тема 2: Геометрија"),
	Theme(id="t3", title="Тема 3: Мерење"),
	Theme(id="t4", title="Тема 4: Алгебра и работа со податоци"),
)


def _topics(theme_id: str, names: List[str]) -> List[CurriculumTopic]:
	return [
		CurriculumTopic(id=f"{theme_id}-{i}", theme_id=theme_id, name=name)
		for i, name in enumerate(names, start=1)
	]


CURRICULUM: Tuple[CurriculumTopic, ...] = tuple(
	_topics("t1", [
		"Цели броеви и операции со нив",
		"Дропки и децимални броеви",
		"Пропорционалност и правопропорционални величини",
		"Проценти и примена на процентите",
		"Степени со природен показател",
	])
	+ _topics("t2", [
		"Агли и видови агли",
		"Агли на трансверзала со две паралелни прави",
		"Триаголник: збир на внатрешни агли",
		"Складност на триаголници",
		"Четириаголници и нивни својства",
		"Кружница и круг",
	])
	+ _topics("t3", [
		"Периметар и плоштина на многуаголници",
		"Должина на кружница и плоштина на круг",
		"Плоштина и волумен на квадар и коцка",
	])
	+ _topics("t4", [
		"Изрази со променливи",
		"Линеарни равенки со една непозната",
		"Собирање и прикажување на податоци",
		"Аритметичка средина, медијана и мод",
	])
)


def get_theme(theme_id: str) -> Optional[Theme]:
	return next((t for t in THEMES if t.id == theme_id), None)


def topics_for_theme(theme_id: str) -> List[CurriculumTopic]:
	return [t for t in CURRICULUM if t.theme_id == theme_id]


def find_topic(topic_id: str) -> Optional[CurriculumTopic]:
	return next((t for t in CURRICULUM if t.id == topic_id), None)
