from sqlalchemy import String
from sqlalchemy.types import TypeDecorator


class CaseInsensitiveEnum(TypeDecorator):
    """Store a ``str`` enum by value, accepting incoming strings in any case.

    Values are lower-cased before they reach the database, so only enums
    whose values are lower-case may use this type.
    """

    impl = String
    cache_ok = True

    def __init__(self, enum_cls, name: str | None = None, **kwargs):
        self.enum_cls = enum_cls
        self.name = name
        super().__init__(**kwargs)

    def _coerce(self, value):
        if isinstance(value, self.enum_cls):
            return value
        return self.enum_cls(str(value).strip().lower())

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return self._coerce(value).value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return self._coerce(value)

