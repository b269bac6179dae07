from fastapi import APIRouter, HTTPException
from typing import List

from ..curriculum import THEMES, get_theme, topics_for_theme
from ..schemas import CurriculumTopic, Theme

router = APIRouter(prefix="/curriculum", tags=["curriculum"])


@router.get("/themes", response_model=List[Theme])
def list_themes():
	return list(THEMES)


@router.get("/themes/{theme_id}/topics", response_model=List[CurriculumTopic])
def list_topics(theme_id: str):
	if get_theme(theme_id) is None:
		raise HTTPException(status_code=404, detail=f"unknown theme: {theme_id}")
	return topics_for_theme(theme_id)
