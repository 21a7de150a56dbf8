from typing import List
from sqlmodel import Session, select

from .....db.models import PreventivePlan
from .....application.ports.preventive_plan_repo import PreventivePlanRepository, PreventivePlanRecord


class SqlPreventivePlanRepository(PreventivePlanRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_record(self, p: PreventivePlan) -> PreventivePlanRecord:
        return PreventivePlanRecord(
            id=p.id,
            user_id=p.user_id,
            plan_type=p.plan_type,
            diet_recommendations=p.diet_recommendations,
            exercise_recommendations=p.exercise_recommendations,
            lifestyle_recommendations=p.lifestyle_recommendations,
            follow_up_schedule=p.follow_up_schedule,
            created_at=p.created_at,
            updated_at=p.updated_at,
        )

    def create(self, user_id: str, plan_type: str, diet: str, exercise: str, lifestyle: str, follow_up_schedule: str) -> PreventivePlanRecord:
        entry = PreventivePlan(
            user_id=user_id,
            plan_type=plan_type,
            diet_recommendations=diet,
            exercise_recommendations=exercise,
            lifestyle_recommendations=lifestyle,
            follow_up_schedule=follow_up_schedule,
        )
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return self._to_record(entry)

    def list_for_user(self, user_id: str) -> List[PreventivePlanRecord]:
        rows = self.session.exec(
            select(PreventivePlan)
            .where(PreventivePlan.user_id == user_id)
            .order_by(PreventivePlan.created_at.desc(), PreventivePlan.id.desc())
        ).all()
        return [self._to_record(r) for r in rows]
