"""Custom SQLAlchemy types with cross-DB support."""

import uuid
from datetime import timezone

from sqlalchemy import DateTime, String, TypeDecorator


class GUID(TypeDecorator):
    """
    Platform-independent GUID/UUID type.

    - Uses PostgreSQL UUID type when available
    - Falls back to CHAR(36) storing hex string form on other DBs (e.g., SQLite)
    """

    impl = String(36)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            from sqlalchemy.dialects.postgresql import UUID as PG_UUID

            return dialect.type_descriptor(PG_UUID(as_uuid=True))
        return dialect.type_descriptor(String(36))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, uuid.UUID):
            value = uuid.UUID(str(value))
        # PostgreSQL expects uuid.UUID when as_uuid=True, others expect string
        if dialect.name == "postgresql":
            return value
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, uuid.UUID):
            return value
        # Coerce string back to uuid.UUID for SQLite/others
        return uuid.UUID(str(value))


class UTCDateTime(TypeDecorator):
    """Timezone-aware datetime that always comes back in UTC.

    SQLite drops the offset on storage, so values are normalised to UTC on the
    way in and tagged as UTC on the way out.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            raise ValueError("naive datetime, expected a timezone-aware value")
        return value.astimezone(timezone.utc)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
