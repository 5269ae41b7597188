from sqlalchemy.orm import Session
from sqlalchemy import select, update

from party_membership.db.models.sequence_counter import SequenceCounter


class SequenceRepository:

    # -------------------------
    # CREATE (if missing)
    # -------------------------
    @staticmethod
    def ensure(db: Session, name: str) -> SequenceCounter:
        counter = db.get(SequenceCounter, name)
        if counter is None:
            counter = SequenceCounter(name=name, value=0)
            db.add(counter)
            db.flush()
        return counter

    # -------------------------
    # CURRENT VALUE
    # -------------------------
    @staticmethod
    def current(db: Session, name: str) -> int:
        stmt = select(SequenceCounter.value).where(SequenceCounter.name == name)
        return db.execute(stmt).scalar() or 0

    # -------------------------
    # ATOMIC INCREMENT
    # -------------------------
    @staticmethod
    def next_value(db: Session, name: str) -> int:
        """
        Increment in the database and read back inside the caller's transaction.

        The UPDATE takes the write lock on the counter, so a concurrent
        registration blocks here until this transaction ends. The caller
        commits or rolls back.
        """
        result = db.execute(
            update(SequenceCounter)
            .where(SequenceCounter.name == name)
            .values(value=SequenceCounter.value + 1)
            .execution_options(synchronize_session=False)
        )

        if result.rowcount == 0:
            SequenceRepository.ensure(db, name)
            return SequenceRepository.next_value(db, name)

        return db.execute(
            select(SequenceCounter.value).where(SequenceCounter.name == name)
        ).scalar_one()
