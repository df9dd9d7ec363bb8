"""SQLAlchemy ORM model definitions."""

from sqlalchemy import BigInteger, Column, String

from minibank.repositories.sqlalchemy.database import Base


class AccountORM(Base):
    """SQLAlchemy model for Account."""

    __tablename__ = "accounts"

    # Primary key doubles as the uniqueness backstop for create_account.
    account_number = Column(BigInteger, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    balance = Column(BigInteger, nullable=False, default=0)
