#!/usr/bin/env python3
"""
Sample Data Seeder

Wipes the jobs and users collections and fills them with demo data:
a handful of posting owners, their jobs, and a few applications.
Every demo user has the password "password123".

Run: python scripts/seed_data.py
"""
import sys
sys.path.insert(0, '.')

from datetime import timedelta

from app.core.auth import hash_password
from app.db.mongodb import COLLECTIONS, get_mongo_db, init_mongo_indexes, test_mongo_connection
from app.services.application_service import ApplicationService
from app.services.job_repository import JobRepository
from app.services.user_service import UserService
from app.utils.time_utils import utc_now


SAMPLE_USERS = [
    {"name": "John Smith", "email": "john@techcorp.com"},
    {"name": "Sarah Johnson", "email": "sarah@designstudio.com"},
    {"name": "Mike Chen", "email": "mike@dataflow.com"},
]

SAMPLE_JOBS = [
    {
        "title": "Senior Frontend Developer",
        "company": "TechCorp Inc.",
        "location": "San Francisco, CA",
        "type": "full-time",
        "salary": "$120,000 - $150,000",
        "description": "Build and maintain our web applications with React, TypeScript and Next.js, "
                       "working closely with design and backend teams.",
        "requirements": "React, TypeScript, Next.js, Redux, CSS, Responsive Design",
        "contact_email": "hr@techcorp.com",
    },
    {
        "title": "UX/UI Designer",
        "company": "Design Studio",
        "location": "New York, NY",
        "type": "full-time",
        "salary": "$90,000 - $120,000",
        "description": "Design intuitive interfaces from research to final implementation "
                       "alongside product managers and developers.",
        "requirements": "Figma, Adobe Creative Suite, User Research, Design Systems, Accessibility",
        "contact_email": "careers@designstudio.com",
    },
    {
        "title": "Backend Engineer",
        "company": "DataFlow Systems",
        "location": "Remote",
        "type": "contract",
        "salary": "$80 - $100 / hour",
        "description": "Scale our data platform: APIs, pipelines and storage for millions of events per day.",
        "requirements": "Python, PostgreSQL, MongoDB, Docker, AWS",
        "contact_email": "jobs@dataflow.com",
    },
    {
        "title": "Data Science Intern",
        "company": "DataFlow Systems",
        "location": "Austin, TX (Remote friendly)",
        "type": "internship",
        "description": "Help the analytics team build models and dashboards over product usage data.",
        "requirements": "Python, Pandas, SQL, Statistics",
        "contact_email": "jobs@dataflow.com",
    },
]

SAMPLE_APPLICATIONS = [
    (0, {
        "full_name": "Alex Rodriguez",
        "email": "alex.rodriguez@email.com",
        "phone": "+1-555-0123",
        "cover_letter": "Four years of React and TypeScript; I'd love to help build your frontend.",
        "resume": "alex-rodriguez-resume.pdf",
    }, 5),
    (0, {
        "full_name": "Priya Patel",
        "email": "priya.patel@email.com",
        "cover_letter": "Frontend engineer focused on accessibility and design systems.",
        "resume": "priya-patel-resume.pdf",
    }, 1),
    (2, {
        "full_name": "Sarah Johnson",
        "email": "sarah.johnson@email.com",
        "phone": "+1-555-0456",
        "cover_letter": "Backend engineer with 5 years of experience building scalable systems.",
        "resume": "sarah-johnson-resume.pdf",
    }, 2),
]


def seed():
    db = get_mongo_db()
    db[COLLECTIONS["jobs"]].delete_many({})
    db[COLLECTIONS["users"]].delete_many({})
    print("    ✅ Cleared existing data")

    init_mongo_indexes(db)

    users = UserService(db[COLLECTIONS["users"]])
    jobs = JobRepository(db[COLLECTIONS["jobs"]])
    applications = ApplicationService(db[COLLECTIONS["jobs"]])

    password_hash = hash_password("password123")
    owners = [users.create(u["name"], u["email"], password_hash) for u in SAMPLE_USERS]
    print(f"    ✅ Created {len(owners)} users")

    created = []
    for i, job in enumerate(SAMPLE_JOBS):
        owner = owners[i % len(owners)]
        created.append(jobs.create(job, str(owner["_id"])))
        print(f"    ✅ Created job: {job['title']}")

    for job_index, fields, days_ago in SAMPLE_APPLICATIONS:
        applications.apply(
            str(created[job_index]["_id"]),
            fields,
            now=utc_now() - timedelta(days=days_ago)
        )
    print(f"    ✅ Created {len(SAMPLE_APPLICATIONS)} applications")


def main():
    print("=" * 60)
    print("JOB BOARD - SEED SAMPLE DATA")
    print("=" * 60)

    if not test_mongo_connection():
        print("❌ MongoDB connection failed!")
        sys.exit(1)

    seed()

    print("\n" + "=" * 60)
    print("✅ Database seeded successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
