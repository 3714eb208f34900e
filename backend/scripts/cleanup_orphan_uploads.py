"""Cleanup upload files that have no media record.

Usage:
  python scripts/cleanup_orphan_uploads.py            # dry-run
  python scripts/cleanup_orphan_uploads.py --apply    # delete orphan files
"""
import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import SessionLocal
from app.services import upload_service


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--apply", action="store_true", help="Actually delete orphan files")
    args = parser.parse_args()

    db = SessionLocal()
    try:
        result = upload_service.cleanup_orphan_files(db, dry_run=not args.apply)
    finally:
        db.close()

    print("Orphan upload cleanup result")
    print(f"  dry_run: {result['dry_run']}")
    print(f"  referenced_count: {result['referenced_count']}")
    print(f"  existing_count: {result['existing_count']}")
    print(f"  orphan_count: {result['orphan_count']}")
    print(f"  deleted_count: {result['deleted_count']}")
    if result["orphan_files"]:
        print("  orphan_files:")
        for name in result["orphan_files"]:
            print(f"    - {name}")


if __name__ == "__main__":
    main()
