#!/usr/bin/env python3
"""Seed demo positions and a demo candidate.

Usage:
    python scripts/seed_data.py

Safe to run repeatedly: existing rows (matched by title / email) are kept.
"""

import sys
from datetime import date, datetime
from pathlib import Path

# Add parent directory to path so we can import ats_api
sys.path.insert(0, str(Path(__file__).parent.parent))

from ats_api.config.database import SessionLocal, init_db
from ats_api.models import Position
from ats_api.repositories import PositionRepository
from ats_api.schemas.candidates import CandidateCreate
from ats_api.services.candidate_service import CandidateService

DEMO_POSITIONS = [
    {
        "title": "Software Engineer",
        "description": "Develop and maintain software applications.",
        "status": "Open",
        "is_visible": True,
        "location": "Remote",
        "job_description": "Full-stack development on our hiring platform.",
        "requirements": "3+ years of experience with Python and React.",
        "responsibilities": "Design, build and operate product features.",
        "salary_min": 50000,
        "salary_max": 80000,
        "employment_type": "Full-time",
        "benefits": "Health insurance, 401k, flexible hours",
        "contact_info": "hr@example.com",
        "application_deadline": datetime(2027, 12, 31),
    },
    {
        "title": "Data Scientist",
        "description": "Analyze and interpret complex data.",
        "status": "Borrador",
        "is_visible": False,
        "location": "Madrid",
        "employment_type": "Full-time",
        "salary_min": 60000,
        "salary_max": 90000,
        "contact_info": "hr@example.com",
    },
]

DEMO_CANDIDATE = {
    "first_name": "Albert",
    "last_name": "Saelices",
    "email": "albert.saelices@example.com",
    "phone": "656874937",
    "address": "Calle Sol 5, Madrid",
    "educations": [
        {
            "institution": "UC3M",
            "title": "Computer Science",
            "start_date": date(2006, 12, 1),
            "end_date": date(2010, 12, 1),
        },
    ],
    "work_experiences": [
        {
            "company": "Coca Cola",
            "position": "SWE",
            "description": "Backend services for internal tools",
            "start_date": date(2011, 1, 13),
            "end_date": date(2013, 1, 17),
        },
    ],
}


def seed_positions(db) -> None:
    repo = PositionRepository(db)
    for data in DEMO_POSITIONS:
        existing = db.query(Position).filter(Position.title == data["title"]).first()
        if existing:
            print(f"  Position '{data['title']}' already exists (id={existing.id})")
            continue
        position = repo.create(data)
        print(f"  Created position: {position.title} (id={position.id})")
    db.commit()


def seed_candidate(db) -> None:
    service = CandidateService(db)
    existing = service.candidates.get_by_email(DEMO_CANDIDATE["email"])
    if existing:
        print(f"  Candidate {existing.email} already exists (id={existing.id})")
        return

    candidate = service.add_candidate(CandidateCreate(**DEMO_CANDIDATE))
    print(f"  Created candidate: {candidate.email} (id={candidate.id})")


def main():
    print("Creating tables...")
    init_db()

    db = SessionLocal()
    try:
        print("Seeding positions...")
        seed_positions(db)
        print("Seeding candidates...")
        seed_candidate(db)
    finally:
        db.close()

    print("Done.")


if __name__ == "__main__":
    main()
