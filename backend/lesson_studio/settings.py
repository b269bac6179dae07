from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, model_validator

class Settings(BaseSettings):
	# Accepted under either name so the same .env works for the web build and the API
	api_key: str | None = Field(default=None, validation_alias="API_KEY")
	vite_api_key: str | None = Field(default=None, validation_alias="VITE_API_KEY")
	gemini_model: str = Field(default="gemini-3-flash-preview", validation_alias="GEMINI_MODEL")
	gemini_base_url: str = Field(
		default="https://generativelanguage.googleapis.com/v1beta",
		validation_alias="GEMINI_BASE_URL",
	)
	gemini_timeout_seconds: float = Field(default=60, validation_alias="GEMINI_TIMEOUT_SECONDS")

	# Curriculum is fixed to a single grade
	grade: str = Field(default="VII", validation_alias="GRADE")

	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

	@model_validator(mode="after")
	def _resolve_api_key(self) -> "Settings":
		# A blank API_KEY counts as unset
		if not (self.api_key or "").strip():
			self.api_key = (self.vite_api_key or "").strip() or None
		return self

settings = Settings()


def get_settings() -> Settings:
	return settings
