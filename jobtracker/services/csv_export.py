import pandas as pd

CSV_COLUMNS = [
    "title",
    "company",
    "status",
    "location",
    "url",
    "source",
    "salary_min",
    "salary_max",
    "salary_currency",
    "tags",
    "created_at",
    "last_activity_at",
]


def _units(cents: int | None) -> float | None:
    return cents / 100 if cents is not None else None


def _iso(value) -> str | None:
    return value.isoformat() if value else None


def jobs_to_csv(jobs: list) -> str:
    """Render jobs as CSV text. Salary columns are in currency units, tags ';'-joined."""
    rows = [
        {
            "title": j.title,
            "company": j.company,
            "status": j.status,
            "location": j.location,
            "url": j.url,
            "source": j.source,
            "salary_min": _units(j.salary_min),
            "salary_max": _units(j.salary_max),
            "salary_currency": j.salary_currency,
            "tags": ";".join(j.tags or []),
            "created_at": _iso(j.created_at),
            "last_activity_at": _iso(j.last_activity_at),
        }
        for j in jobs
    ]
    return pd.DataFrame(rows, columns=CSV_COLUMNS).to_csv(index=False)
