import base64
from typing import Optional
from openai import OpenAI

from ...config import settings
from ...application.ports.ai_provider import AIProvider


class OpenAIProvider(AIProvider):
    """Chat-completions provider; images travel as base64 data URLs."""

    def __init__(self, client: Optional[OpenAI] = None) -> None:
        self.client = client or OpenAI(api_key=settings.OPENAI_API_KEY)
        self.model = settings.OPENAI_MODEL

    def generate_text(self, system_prompt: str, user_prompt: str, image_bytes: Optional[bytes] = None, mime_type: Optional[str] = None) -> str:
        user_content = user_prompt
        if image_bytes is not None:
            base64_image = base64.b64encode(image_bytes).decode("utf-8")
            user_content = [
                {"type": "text", "text": user_prompt},
                {
                    "type": "image_url",
                    "image_url": {"url": f"data:{mime_type or 'image/jpeg'};base64,{base64_image}"},
                },
            ]

        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_content},
            ],
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
