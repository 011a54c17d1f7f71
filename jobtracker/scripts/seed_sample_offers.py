"""
Attach a handful of sample offers to a user's most recent jobs so the salary
analytics endpoints have something to aggregate.

Usage: python -m jobtracker.scripts.seed_sample_offers --user-id dev-user-1
"""
import argparse
import sys

from jobtracker.database import SessionLocal, ensure_tables_exist
from jobtracker.repos.job_repo import list_for_user
from jobtracker.repos.salary_repo import create_offer

SAMPLE_OFFERS = [
    {"amount": 100000, "notes": "Great benefits package", "benefits": ["Health insurance", "401k", "Stock options"]},
    {"amount": 95000, "notes": "Remote-first company", "benefits": ["Health insurance", "401k"]},
    {"amount": 77500, "notes": "Startup equity", "benefits": ["Stock options"]},
    {"amount": 120000, "notes": "Senior level", "benefits": ["Health insurance", "Bonus"]},
]


def seed(db, user_id: str) -> int:
    jobs = list_for_user(db, user_id)[: len(SAMPLE_OFFERS)]
    for job, sample in zip(jobs, SAMPLE_OFFERS):
        create_offer(db, user_id, {"job_id": job.id, **sample})
        print(f"Offer {sample['amount']} for {job.title} at {job.company}")
    return len(jobs)


def main():
    parser = argparse.ArgumentParser(description="Create sample salary offers for a user's jobs.")
    parser.add_argument("--user-id", required=True, help="Owner id (the x-user-id the UI sends)")
    args = parser.parse_args()

    ensure_tables_exist()
    db = SessionLocal()
    try:
        created = seed(db, args.user_id)
    finally:
        db.close()
    if not created:
        print(f"No jobs found for user {args.user_id}. Create some jobs first.")
        sys.exit(1)
    print(f"Created {created} sample offer(s).")


if __name__ == "__main__":
    main()
