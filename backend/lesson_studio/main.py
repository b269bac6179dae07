import logging

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from .settings import settings
from .routers import curriculum, generate

logging.basicConfig(
	level=settings.log_level.upper(),
	format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
# One INFO line per outgoing request is noise next to our own call logging
logging.getLogger("httpx").setLevel(logging.WARNING)

app = FastAPI(title="Lesson Studio API")
app.include_router(curriculum.router)
app.include_router(generate.router)


@app.get("/", include_in_schema=False)
async def redirect_root_to_docs():
	return RedirectResponse(url="/docs")


@app.get("/health")
def health():
	return {"status": "ok"}


@app.get("/info")
def root():
	return {"status": "ok", "gemini_configured": bool(settings.api_key), "model": settings.gemini_model, "grade": settings.grade}
