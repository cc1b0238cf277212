from datetime import datetime
from sqlalchemy.orm import declarative_base

class DictMixin:
    """
    Mixin providing a JSON-ready dictionary serialization for SQLAlchemy models.

    Datetime columns are rendered as ISO-8601 strings.
    """
    def to_dict(self):
        out = {}
        for c in self.__table__.columns:
            value = getattr(self, c.key)
            out[c.key] = value.isoformat() if isinstance(value, datetime) else value
        return out

Base = declarative_base(cls=DictMixin)
