from dataclasses import dataclass
from typing import Optional
from fastapi import HTTPException

from ..ports.profile_repo import HealthProfileRepository, ProfileFields, ProfileRecord


@dataclass
class ProfileService:
    profile_repo: HealthProfileRepository

    def get_profile(self, user_id: str) -> Optional[ProfileRecord]:
        return self.profile_repo.get_for_user(user_id)

    def save_profile(self, user_id: str, fields: ProfileFields) -> ProfileRecord:
        if fields.age is not None and fields.age < 0:
            raise HTTPException(status_code=400, detail="Invalid age")
        if fields.height_cm is not None and fields.height_cm <= 0:
            raise HTTPException(status_code=400, detail="Invalid height_cm")
        if fields.weight_kg is not None and fields.weight_kg <= 0:
            raise HTTPException(status_code=400, detail="Invalid weight_kg")
        # Replaces every stored field; last write wins
        return self.profile_repo.upsert(user_id, fields)
