"""
Backfill salary_min / salary_max (cents) from the legacy free-text salary column.
Jobs whose salary string cannot be parsed are left untouched and reported.

Usage: python -m jobtracker.scripts.migrate_salary_data [--dry-run]
"""
import argparse

from jobtracker.database import SessionLocal, ensure_tables_exist
from jobtracker.logging_config import setup_logging
from jobtracker.repos.job_repo import list_unmigrated_salaries
from jobtracker.services.salary_parser import parse_salary_string


def migrate(db, dry_run: bool = False) -> dict:
    migrated = 0
    skipped = 0
    for job in list_unmigrated_salaries(db):
        parsed = parse_salary_string(job.salary)
        if parsed is None:
            print(f"Skipped: {job.title} at {job.company} - could not parse {job.salary!r}")
            skipped += 1
            continue
        job.salary_min = parsed.min
        job.salary_max = parsed.max
        job.salary_currency = parsed.currency
        job.salary_type = parsed.type
        print(f"Migrated: {job.title} at {job.company} - {job.salary} -> {parsed.min / 100:.2f}-{parsed.max / 100:.2f}")
        migrated += 1
    if dry_run:
        db.rollback()
    else:
        db.commit()
    return {"migrated": migrated, "skipped": skipped}


def main():
    parser = argparse.ArgumentParser(description="Parse legacy salary strings into structured cents.")
    parser.add_argument("--dry-run", action="store_true", help="Report what would change without writing")
    args = parser.parse_args()

    setup_logging()
    ensure_tables_exist()
    db = SessionLocal()
    try:
        result = migrate(db, dry_run=args.dry_run)
    finally:
        db.close()
    suffix = " (dry run, nothing written)" if args.dry_run else ""
    print(f"Migration complete{suffix}: migrated={result['migrated']} skipped={result['skipped']}")


if __name__ == "__main__":
    main()
