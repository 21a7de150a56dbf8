from typing import Optional
import google.generativeai as genai
from ...config import settings
from ...application.ports.ai_provider import AIProvider


class GeminiProvider(AIProvider):
    def __init__(self) -> None:
        genai.configure(api_key=settings.GEMINI_API_KEY)
        self.model_name = settings.GEMINI_MODEL

    def generate_text(self, system_prompt: str, user_prompt: str, image_bytes: Optional[bytes] = None, mime_type: Optional[str] = None) -> str:
        # system_instruction is bound at model construction, so one model per call
        model = genai.GenerativeModel(self.model_name, system_instruction=system_prompt)
        parts = [user_prompt]
        if image_bytes is not None:
            parts.append({"mime_type": mime_type or "image/jpeg", "data": image_bytes})
        result = model.generate_content(parts)
        return getattr(result, "text", str(result))
