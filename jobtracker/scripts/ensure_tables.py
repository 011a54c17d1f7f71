"""
Create any missing tables. Existing tables and data are left alone.
Usage: python -m jobtracker.scripts.ensure_tables
"""
from jobtracker.database import ensure_tables_exist
from jobtracker.logging_config import setup_logging


def main():
    setup_logging()
    created = ensure_tables_exist()
    if created:
        print("Created tables:", ", ".join(created))
    print("DB table check complete: created only missing tables.")


if __name__ == "__main__":
    main()
