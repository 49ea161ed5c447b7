from typing import List, Optional

from sqlalchemy.orm import Session

from humansport.models import SensorEvent


def list_sensor_events(db: Session) -> List[SensorEvent]:
    return db.query(SensorEvent).order_by(SensorEvent.timestamp.desc(), SensorEvent.id.desc()).all()


def get_sensor_event(db: Session, event_id: int) -> Optional[SensorEvent]:
    return db.query(SensorEvent).filter(SensorEvent.id == event_id).first()


def create_sensor_event(db: Session, event: SensorEvent) -> SensorEvent:
    db.add(event)
    return event


def delete_sensor_event(db: Session, event: SensorEvent) -> None:
    db.delete(event)
