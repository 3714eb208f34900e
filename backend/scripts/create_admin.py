"""Create an admin account, or reset the password of an existing one.

Usage:
  python scripts/create_admin.py --email admin@ngo.org --password '...'
"""

import argparse
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import SessionLocal, init_db
from app.services.auth_service import create_admin


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--email", required=True)
    ap.add_argument("--password", required=True)
    args = ap.parse_args()

    if len(args.password) < 6:
        ap.error("password must be at least 6 characters")

    init_db()
    db = SessionLocal()
    try:
        admin = create_admin(db, args.email, args.password)
    finally:
        db.close()

    print(f"Admin ready: {admin.email} (id={admin.id})")


if __name__ == "__main__":
    main()
