from dataclasses import asdict
from datetime import datetime, timezone
from typing import Optional
from sqlmodel import Session, select

from .....db.models import HealthProfile
from .....application.ports.profile_repo import HealthProfileRepository, ProfileFields, ProfileRecord


class SqlHealthProfileRepository(HealthProfileRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_record(self, p: HealthProfile) -> ProfileRecord:
        return ProfileRecord(
            id=p.id,
            user_id=p.user_id,
            age=p.age,
            gender=p.gender,
            height_cm=p.height_cm,
            weight_kg=p.weight_kg,
            family_history=p.family_history,
            chronic_conditions=p.chronic_conditions,
            medications=p.medications,
            lifestyle_info=p.lifestyle_info,
            created_at=p.created_at,
            updated_at=p.updated_at,
        )

    def get_for_user(self, user_id: str) -> Optional[ProfileRecord]:
        profile = self.session.exec(
            select(HealthProfile)
            .where(HealthProfile.user_id == user_id)
            .order_by(HealthProfile.created_at.desc())
        ).first()
        return self._to_record(profile) if profile else None

    def upsert(self, user_id: str, fields: ProfileFields) -> ProfileRecord:
        profile = self.session.exec(select(HealthProfile).where(HealthProfile.user_id == user_id)).first()
        if not profile:
            profile = HealthProfile(user_id=user_id)
        for name, value in asdict(fields).items():
            setattr(profile, name, value)
        profile.updated_at = datetime.now(timezone.utc)
        self.session.add(profile)
        self.session.commit()
        self.session.refresh(profile)
        return self._to_record(profile)
