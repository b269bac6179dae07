from __future__ import annotations


class GenerationError(RuntimeError):
	"""A generation action failed; the message is shown to the teacher as-is."""


class MissingApiKeyError(GenerationError):
	def __init__(self, message: str | None = None) -> None:
		super().__init__(
			message
			or "Не е пронајден API Key. Ве молиме додадете 'API_KEY' или 'VITE_API_KEY' во Environment Variables на хостинг платформата."
		)


class EmptyResponseError(GenerationError):
	def __init__(self, message: str | None = None) -> None:
		super().__init__(message or "AI моделот не врати содржина. Ве молиме обидете се повторно.")


class InvalidResponseError(GenerationError):
	def __init__(self, message: str | None = None) -> None:
		super().__init__(
			message or "Неуспешно читање на одговорот од AI (Invalid JSON). Ве молиме обидете се повторно."
		)
