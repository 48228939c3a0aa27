from sqlalchemy import Column, String, Text, Integer, ForeignKey, Index
from models.base import Base, TimestampMixin

class SessionRecord(Base, TimestampMixin):
    __tablename__ = "authorized_sessions"

    session_id = Column(String(36), primary_key=True)
    client_signature = Column(Text, nullable=False, default="")
    account_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False)

Index("idx_authorized_sessions_account_id", SessionRecord.account_id)
