"""Seed the database with a default admin, site settings and sample content."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from datetime import datetime
from app.database import SessionLocal, init_db

from app.models.user import AdminUser
from app.models.impact import Milestone, SuccessStory, Testimonial
from app.models.site_settings import SETTINGS_ROW_ID, SiteSettings
from app.services.auth_service import hash_password
from app.utils.html_sanitizer import sanitize_html

DEFAULT_ADMIN_EMAIL = "admin@ngo.org"
DEFAULT_ADMIN_PASSWORD = "ChangeMe123!"


def seed():
    init_db()
    db = SessionLocal()
    try:
        if db.query(AdminUser).count() > 0:
            print("Database already seeded. Skipping.")
            return

        db.add(AdminUser(email=DEFAULT_ADMIN_EMAIL, password_hash=hash_password(DEFAULT_ADMIN_PASSWORD)))

        if not db.query(SiteSettings).filter(SiteSettings.id == SETTINGS_ROW_ID).first():
            db.add(SiteSettings(
                id=SETTINGS_ROW_ID,
                site_name="Our NGO",
                primary_hex="#0038B8",
                vision="Every child in our district finishes school.",
                mission="Free tutoring, scholarships and mentoring for first-generation learners.",
                who_we_are=sanitize_html("<p>A volunteer-run education society.</p>"),
            ))

        stories = [
            SuccessStory(
                title="From village school to university",
                slug="from-village-school-to-university",
                excerpt="How evening tutoring changed one student's path.",
                content=sanitize_html("<p>Evening tutoring and a scholarship opened the way.</p>"),
            ),
        ]
        db.add_all(stories)

        milestones = [
            Milestone(title="First scholarship batch", description="Ten students supported.",
                      achieved_on=datetime(2019, 6, 1)),
            Milestone(title="Learning centre opened", achieved_on=datetime(2021, 1, 15)),
        ]
        db.add_all(milestones)

        testimonials = [
            Testimonial(name="Parent volunteer", role="Parent", rating=5,
                        quote="The mentors treat every child as their own."),
        ]
        db.add_all(testimonials)

        db.commit()
        print("Seed data inserted successfully.")
        print(f"  Stories: {len(stories)}")
        print(f"  Milestones: {len(milestones)}")
        print(f"  Testimonials: {len(testimonials)}")
        print()
        print("Admin login credentials (change after first login):")
        print(f"  email={DEFAULT_ADMIN_EMAIL}  password={DEFAULT_ADMIN_PASSWORD}")

    except Exception as e:
        db.rollback()
        raise e
    finally:
        db.close()


if __name__ == "__main__":
    seed()
