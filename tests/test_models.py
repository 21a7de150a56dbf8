from datetime import timezone

from sqlmodel import Session, select

from health_ai.db.models import Consultation, HealthProfile


def test_timestamps_are_timezone_aware():
    profile = HealthProfile(user_id="user-1")
    assert profile.created_at.tzinfo == timezone.utc
    assert profile.updated_at.tzinfo == timezone.utc


def test_rows_with_timestamps_insert(engine):
    with Session(engine) as session:
        session.add(Consultation(user_id="user-1", symptoms="صداع"))
        session.commit()
        row = session.exec(select(Consultation)).one()
    assert row.created_at is not None
