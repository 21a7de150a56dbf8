from typing import Optional, Protocol


class AIProvider(Protocol):
    def generate_text(self, system_prompt: str, user_prompt: str, image_bytes: Optional[bytes] = None, mime_type: Optional[str] = None) -> str:
        ...
