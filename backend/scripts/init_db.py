"""Initialize the database: create all tables and, when ADMIN_EMAIL/ADMIN_PASSWORD
are set and no admin exists yet, the first admin account (same path as app startup)."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import SessionLocal, init_db
from app.services.auth_service import ensure_bootstrap_admin


def main():
    init_db()
    db = SessionLocal()
    try:
        admin = ensure_bootstrap_admin(db)
    finally:
        db.close()

    print("Content tables ready.")
    if admin:
        print(f"Bootstrap admin created: {admin.email}")


if __name__ == "__main__":
    main()
