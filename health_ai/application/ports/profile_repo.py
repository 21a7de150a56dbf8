from typing import Optional, Protocol
from dataclasses import dataclass
from datetime import datetime


@dataclass
class ProfileFields:
    age: Optional[int] = None
    gender: Optional[str] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    family_history: Optional[str] = None
    chronic_conditions: Optional[str] = None
    medications: Optional[str] = None
    lifestyle_info: Optional[str] = None


@dataclass
class ProfileRecord:
    id: int
    user_id: str
    age: Optional[int]
    gender: Optional[str]
    height_cm: Optional[float]
    weight_kg: Optional[float]
    family_history: Optional[str]
    chronic_conditions: Optional[str]
    medications: Optional[str]
    lifestyle_info: Optional[str]
    created_at: datetime
    updated_at: datetime


class HealthProfileRepository(Protocol):
    def get_for_user(self, user_id: str) -> Optional[ProfileRecord]:
        ...

    def upsert(self, user_id: str, fields: ProfileFields) -> ProfileRecord:
        ...
