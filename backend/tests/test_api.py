"""
Lesson Studio - HTTP API tests
"""
import pytest
from httpx import AsyncClient

from lesson_studio.curriculum import CURRICULUM, THEMES


LESSON = {"title": "Триаголник", "objectives": ["a", "b", "c"], "content": "α + β + γ = 180°"}


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_list_themes(client: AsyncClient):
    response = await client.get("/curriculum/themes")
    assert response.status_code == 200
    data = response.json()
    assert [t["id"] for t in data] == [t.id for t in THEMES]


@pytest.mark.asyncio
async def test_list_topics_for_theme(client: AsyncClient):
    response = await client.get("/curriculum/themes/t2/topics")
    assert response.status_code == 200
    data = response.json()
    assert data
    assert all(t["themeId"] == "t2" for t in data)
    assert len(data) == len([t for t in CURRICULUM if t.theme_id == "t2"])


@pytest.mark.asyncio
async def test_unknown_theme(client: AsyncClient):
    response = await client.get("/curriculum/themes/nope/topics")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_generate_lesson(client: AsyncClient, gemini):
    gemini.reply_json(LESSON)
    response = await client.post("/generate/lesson", json={
        "topic": "Триаголник: збир на внатрешни агли",
        "teacherName": "Ана Петровска",
        "schoolName": "ООУ Гоце Делчев",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["lesson"] == LESSON
    assert data["header"] == {"teacherName": "Ана Петровска", "schoolName": "ООУ Гоце Делчев", "grade": "VII"}
    assert len(gemini.requests) == 1


@pytest.mark.asyncio
async def test_generate_scenario(client: AsyncClient, gemini):
    gemini.reply_json({
        "topic": "Агли",
        "standards": "s",
        "content": "c",
        "introActivity": "i",
        "mainActivity": "m",
        "finalActivity": "f",
        "resources": "r",
        "assessment": "a",
    })
    response = await client.post("/generate/scenario", json={"topic": "Агли"})
    assert response.status_code == 200
    scenario = response.json()["scenario"]
    assert scenario["introActivity"] == "i"
    assert scenario["finalActivity"] == "f"


@pytest.mark.asyncio
async def test_generate_quiz_keeps_out_of_range_index(client: AsyncClient, gemini):
    gemini.reply_json([{
        "question": "Колку е 2·3?",
        "options": ["5", "6"],
        "correctAnswerIndex": 4,
        "explanation": "2·3 = 6",
        "difficulty": "Тешко",
    }])
    response = await client.post("/generate/quiz", json={"topic": "Цели броеви"})
    assert response.status_code == 200
    questions = response.json()["questions"]
    assert questions[0]["correctAnswerIndex"] == 4
    assert questions[0]["difficulty"] == "Тешко"


@pytest.mark.asyncio
async def test_generate_worksheet(client: AsyncClient, gemini):
    gemini.reply("```\n# Работен лист\n1. Задача\n```")
    response = await client.post("/generate/worksheet", json={"topic": "Проценти"})
    assert response.status_code == 200
    data = response.json()
    assert data["content"] == "# Работен лист\n1. Задача"
    assert data["header"]["teacherName"] is None


@pytest.mark.asyncio
async def test_generate_animation(client: AsyncClient, gemini):
    gemini.reply("```js\nctx.beginPath();\n```")
    response = await client.post("/generate/animation", json={"description": "круг што расте"})
    assert response.status_code == 200
    assert response.json() == {"code": "ctx.beginPath();"}


@pytest.mark.asyncio
async def test_missing_api_key(keyless_client: AsyncClient, gemini):
    response = await keyless_client.post("/generate/lesson", json={"topic": "Агли"})
    assert response.status_code == 503
    assert "VITE_API_KEY" in response.json()["detail"]
    assert gemini.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize("path,body", [
    ("/generate/lesson", {"topic": "Агли"}),
    ("/generate/scenario", {"topic": "Агли"}),
    ("/generate/quiz", {"topic": "Агли"}),
    ("/generate/worksheet", {"topic": "Агли"}),
    ("/generate/animation", {"description": "круг што расте"}),
])
async def test_missing_api_key_on_every_document(keyless_client: AsyncClient, gemini, path, body):
    response = await keyless_client.post(path, json=body)
    assert response.status_code == 503
    assert gemini.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize("topic", ["", "   "])
async def test_blank_topic(client: AsyncClient, gemini, topic):
    response = await client.post("/generate/quiz", json={"topic": topic})
    assert response.status_code == 422
    assert gemini.requests == []


@pytest.mark.asyncio
async def test_invalid_reply(client: AsyncClient, gemini):
    gemini.reply("{\"title\": ")
    response = await client.post("/generate/lesson", json={"topic": "Агли"})
    assert response.status_code == 502
    assert "Invalid JSON" in response.json()["detail"]
    assert len(gemini.requests) == 1


@pytest.mark.asyncio
async def test_empty_reply(client: AsyncClient, gemini):
    gemini.reply("")
    response = await client.post("/generate/worksheet", json={"topic": "Агли"})
    assert response.status_code == 502


@pytest.mark.asyncio
async def test_api_error_message_is_surfaced(client: AsyncClient, gemini):
    gemini.fail(429, "Resource has been exhausted")
    response = await client.post("/generate/scenario", json={"topic": "Агли"})
    assert response.status_code == 502
    assert "Resource has been exhausted" in response.json()["detail"]
