from sqlalchemy import Column, Integer, String
from party_membership.db.base import Base


class SequenceCounter(Base):
    """
    Last number handed out for a named sequence.
    Rows are never reset, so numbers survive deletion of the members using them.
    """
    __tablename__ = "sequence_counters"

    name = Column(String(64), primary_key=True)

    value = Column(Integer, nullable=False, default=0, server_default="0")
