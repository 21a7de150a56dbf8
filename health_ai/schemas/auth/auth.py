# health_ai/schemas/auth/auth.py
from pydantic import BaseModel, Field
from typing import Optional

class SessionRequest(BaseModel):
    code: Optional[str] = Field(None, description="Authorization code returned by the OAuth redirect")

class RedirectUrlResponse(BaseModel):
    redirectUrl: str
