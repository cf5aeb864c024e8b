from datetime import datetime

from sqlalchemy.orm import DeclarativeBase


def utcnow():
    # MySQL DATETIME doesn't store timezone; keep values naive UTC to avoid driver issues
    return datetime.utcnow()


class Base(DeclarativeBase):
    pass
