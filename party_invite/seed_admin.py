"""
Admin Seeder (python -m party_invite.seed_admin)
Creates the admin account from ADMIN_EMAIL / ADMIN_PASSWORD, or resets the
password if the account already exists.
"""

import os
import sys

from .config import Settings
from .database import Database
from .services.auth_service import AuthService


def main() -> int:
    email = os.getenv("ADMIN_EMAIL")
    password = os.getenv("ADMIN_PASSWORD")
    if not email or not password:
        print("❌ Missing ADMIN_EMAIL or ADMIN_PASSWORD", file=sys.stderr)
        return 1

    settings = Settings()
    database = Database(settings)
    try:
        database.init_db()
        with database.session_scope() as db:
            admin = AuthService(db, settings).seed_admin(email, password)
            print(f"✅ Admin seeded for {admin.email}")
    finally:
        database.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
