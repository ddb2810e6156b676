#!/usr/bin/env python3
"""
Database Setup Module
Creates database tables and the event settings row.

Run with: python -m party_invite.database_setup
"""

from .config import Settings
from .database import Base, Database
from .services.event_settings_service import EventSettingsService


def setup_database(settings: Settings = None):
    settings = settings or Settings()
    database = Database(settings)
    try:
        print("📋 Creating all database tables...")
        database.init_db()
        with database.session_scope() as db:
            EventSettingsService(db).ensure_settings()
        print("✅ Database setup complete!")

        tables = Base.metadata.tables.keys()
        print(f"📊 {len(tables)} tables:")
        for table in sorted(tables):
            print(f"  - {table}")
    finally:
        database.dispose()


if __name__ == "__main__":
    setup_database()
