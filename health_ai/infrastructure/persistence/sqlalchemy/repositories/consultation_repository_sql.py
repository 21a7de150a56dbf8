from typing import List
from sqlmodel import Session, select

from .....db.models import Consultation
from .....application.ports.consultation_repo import ConsultationRepository, ConsultationRecord


class SqlConsultationRepository(ConsultationRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_record(self, c: Consultation) -> ConsultationRecord:
        return ConsultationRecord(
            id=c.id,
            user_id=c.user_id,
            symptoms=c.symptoms,
            consultation_type=c.consultation_type,
            ai_response=c.ai_response,
            risk_level=c.risk_level,
            recommendations=c.recommendations,
            created_at=c.created_at,
            updated_at=c.updated_at,
        )

    def create(self, user_id: str, symptoms: str, consultation_type: str, ai_response: str, risk_level: str) -> ConsultationRecord:
        entry = Consultation(
            user_id=user_id,
            symptoms=symptoms,
            consultation_type=consultation_type,
            ai_response=ai_response,
            risk_level=risk_level,
        )
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return self._to_record(entry)

    def list_for_user(self, user_id: str) -> List[ConsultationRecord]:
        rows = self.session.exec(
            select(Consultation)
            .where(Consultation.user_id == user_id)
            .order_by(Consultation.created_at.desc(), Consultation.id.desc())
        ).all()
        return [self._to_record(r) for r in rows]
