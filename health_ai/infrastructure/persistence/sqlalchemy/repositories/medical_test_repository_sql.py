from typing import List
from sqlmodel import Session, select

from .....db.models import MedicalTest
from .....application.ports.medical_test_repo import MedicalTestRepository, MedicalTestRecord


class SqlMedicalTestRepository(MedicalTestRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_record(self, t: MedicalTest) -> MedicalTestRecord:
        return MedicalTestRecord(
            id=t.id,
            user_id=t.user_id,
            test_type=t.test_type,
            test_date=t.test_date,
            image_url=t.image_url,
            original_filename=t.original_filename,
            ai_analysis=t.ai_analysis,
            key_findings=t.key_findings,
            risk_assessment=t.risk_assessment,
            created_at=t.created_at,
            updated_at=t.updated_at,
        )

    def create(self, user_id: str, test_type: str, test_date: str, image_url: str, original_filename: str, ai_analysis: str) -> MedicalTestRecord:
        entry = MedicalTest(
            user_id=user_id,
            test_type=test_type,
            test_date=test_date,
            image_url=image_url,
            original_filename=original_filename,
            ai_analysis=ai_analysis,
        )
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return self._to_record(entry)

    def list_for_user(self, user_id: str) -> List[MedicalTestRecord]:
        rows = self.session.exec(
            select(MedicalTest)
            .where(MedicalTest.user_id == user_id)
            .order_by(MedicalTest.created_at.desc(), MedicalTest.id.desc())
        ).all()
        return [self._to_record(r) for r in rows]
