#!/usr/bin/env python3
"""Seed a fresh tracker with sample companies, contacts and applications.

Run with the package installed:
    python scripts/seed_database.py

Or from a checkout with the right DATABASE_URL:
    cd backend && python ../scripts/seed_database.py
"""

import asyncio
import logging
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Add backend to path for imports when running from a checkout
backend_dir = Path(__file__).resolve().parent.parent / "backend"
if backend_dir.exists():
    sys.path.insert(0, str(backend_dir))

from sqlalchemy import func, select

from jobtracker.models import Base
from jobtracker.models.base import AsyncSessionLocal, engine
from jobtracker.models.application import Application
from jobtracker.models.company import Company
from jobtracker.models.contact import Contact
from jobtracker.models.email_template import EmailTemplate
from jobtracker.models.interview import Interview
from jobtracker.models.reminder import Reminder

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)

COMPANIES = [
    {
        "name": "Google",
        "website": "https://google.com",
        "careers_url": "https://careers.google.com",
        "notes": "Great company culture and benefits",
    },
    {
        "name": "Microsoft",
        "website": "https://microsoft.com",
        "careers_url": "https://careers.microsoft.com",
        "notes": "Excellent work-life balance",
    },
    {
        "name": "Meta",
        "website": "https://meta.com",
        "careers_url": "https://careers.meta.com",
    },
]

# Keyed by company name
CONTACTS = [
    {
        "company": "Google",
        "name": "John Smith",
        "linkedin_url": "https://linkedin.com/in/johnsmith",
        "email": "john@google.com",
        "position": "Senior Software Engineer",
        "status": "CONNECTED",
        "can_refer": True,
        "willing_to_refer": True,
        "last_interaction_date": "now",
    },
    {
        "company": "Microsoft",
        "name": "Sarah Johnson",
        "linkedin_url": "https://linkedin.com/in/sarahjohnson",
        "position": "Engineering Manager",
        "status": "MESSAGED",
        "can_refer": True,
        "willing_to_refer": False,
    },
]

APPLICATIONS = [
    {
        "company": "Google",
        "position_title": "Software Engineer",
        "description": "Full-stack development position",
        "job_posting_url": "https://careers.google.com/jobs/123",
        "status": "APPLIED",
        "applied_date": datetime(2024, 1, 15, tzinfo=timezone.utc),
        "salary_min": 150000,
        "salary_max": 200000,
        "referred_by": "John Smith",
        "interviews": [],
        "reminders": [
            {
                "title": "Follow up with Google",
                "description": "Check on application status",
                "due_in_days": 7,
                "type": "FOLLOW_UP",
            },
        ],
    },
    {
        "company": "Microsoft",
        "position_title": "Senior Software Engineer",
        "job_posting_url": "https://careers.microsoft.com/jobs/456",
        "status": "INTERVIEW_SCHEDULED",
        "applied_date": datetime(2024, 1, 20, tzinfo=timezone.utc),
        "salary_min": 160000,
        "salary_max": 210000,
        "interviews": [
            {
                "round": 1,
                "title": "Phone Screen",
                "interview_date": datetime(2024, 2, 1, tzinfo=timezone.utc),
                "duration": 45,
                "location": "Phone",
                "status": "COMPLETED",
                "feedback": "Went well, moving to next round",
            },
            {
                "round": 2,
                "title": "Technical Interview",
                "interview_date": datetime(2024, 2, 10, tzinfo=timezone.utc),
                "duration": 90,
                "location": "Zoom",
                "meeting_link": "https://zoom.us/j/123456",
                "status": "SCHEDULED",
            },
        ],
        "reminders": [
            {
                "title": "Prepare for Microsoft interview",
                "description": "Review system design concepts",
                "due_date": datetime(2024, 2, 9, tzinfo=timezone.utc),
                "type": "INTERVIEW_PREP",
            },
        ],
    },
    {
        "company": "Meta",
        "position_title": "Frontend Engineer",
        "status": "IN_REVIEW",
        "applied_date": datetime(2024, 1, 25, tzinfo=timezone.utc),
        "salary_min": 155000,
        "salary_max": 205000,
        "interviews": [],
        "reminders": [],
    },
]

EMAIL_TEMPLATES = [
    {
        "name": "Connection Request",
        "subject": "Connecting to discuss opportunities at {company}",
        "body": (
            "Hi {name},\n\n"
            "I came across your profile and noticed you work at {company}. "
            "I'm very interested in opportunities there, particularly in {position}.\n\n"
            "Would you be open to a brief chat about your experience at {company}?\n\n"
            "Best regards,\nYour Name"
        ),
        "category": "CONNECTION_REQUEST",
    },
]


async def populate(db):
    now = datetime.now(timezone.utc)

    companies = {}
    for data in COMPANIES:
        company = Company(**data)
        db.add(company)
        companies[company.name] = company
    await db.flush()
    logger.info("Created %d companies", len(companies))

    contacts = {}
    for data in CONTACTS:
        data = dict(data)
        company = companies[data.pop("company")]
        if data.get("last_interaction_date") == "now":
            data["last_interaction_date"] = now
        contact = Contact(company_id=company.id, **data)
        db.add(contact)
        contacts[contact.name] = contact
    await db.flush()
    logger.info("Created %d contacts", len(contacts))

    interview_count = 0
    reminder_count = 0
    for data in APPLICATIONS:
        data = dict(data)
        company = companies[data.pop("company")]
        interviews = data.pop("interviews")
        reminders = data.pop("reminders")
        referrer = contacts.get(data.pop("referred_by", None))

        application = Application(
            company_id=company.id,
            resume_path=f"/uploads/resumes/{company.name.lower()}-resume.pdf",
            is_referred=referrer is not None,
            referred_by_id=referrer.id if referrer else None,
            **data,
        )
        db.add(application)
        await db.flush()

        for interview in interviews:
            db.add(Interview(application_id=application.id, **interview))
            interview_count += 1

        for reminder in reminders:
            reminder = dict(reminder)
            due_in_days = reminder.pop("due_in_days", None)
            if due_in_days is not None:
                reminder["due_date"] = now + timedelta(days=due_in_days)
            db.add(Reminder(application_id=application.id, **reminder))
            reminder_count += 1

    logger.info("Created %d applications", len(APPLICATIONS))
    logger.info("Created %d interviews", interview_count)
    logger.info("Created %d reminders", reminder_count)

    for data in EMAIL_TEMPLATES:
        db.add(EmailTemplate(**data))
    logger.info("Created %d email templates", len(EMAIL_TEMPLATES))

    await db.commit()
    logger.info("Database seeded successfully")


async def seed():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as db:
        existing = await db.scalar(select(func.count(Company.id)))
        if existing:
            logger.info("Database already has %d companies, skipping seed", existing)
        else:
            await populate(db)

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
