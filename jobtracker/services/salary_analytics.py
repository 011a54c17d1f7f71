import logging
from typing import Any, Iterable

import pandas as pd

from jobtracker.models.enums import OfferStatus

logger = logging.getLogger(__name__)


def _empty_group() -> dict[str, Any]:
    return {"count": 0, "avg_salary": 0.0}


def _grouped(df: pd.DataFrame, column: str) -> dict[str, dict[str, Any]]:
    """Count and mean midpoint per distinct value of column (nulls skipped)."""
    out: dict[str, dict[str, Any]] = {}
    if df.empty:
        return out
    grouped = df.dropna(subset=[column]).groupby(column)["midpoint"].agg(["size", "mean"])
    for key, row in grouped.iterrows():
        out[str(key)] = {"count": int(row["size"]), "avg_salary": float(row["mean"])}
    return out


def _jobs_frame(jobs: Iterable) -> pd.DataFrame:
    rows = [
        {
            "company": j.company,
            "location": j.location or None,
            "is_remote": bool(j.is_remote),
            "salary_min": j.salary_min or 0,
            "salary_max": j.salary_max or 0,
        }
        for j in jobs
    ]
    df = pd.DataFrame(rows, columns=["company", "location", "is_remote", "salary_min", "salary_max"])
    df["midpoint"] = (df["salary_min"] + df["salary_max"]) / 2
    return df


def _offer_timeline(offers: list) -> list[dict[str, Any]]:
    rows = []
    for o in offers:
        when = o.offered_at or o.created_at
        if when is None:
            continue
        rows.append({"month": when.strftime("%Y-%m"), "amount": o.amount})
    if not rows:
        return []
    grouped = pd.DataFrame(rows).groupby("month")["amount"].agg(["size", "mean"]).sort_index()
    return [
        {"month": str(month), "avg_salary": float(row["mean"]), "count": int(row["size"])}
        for month, row in grouped.iterrows()
    ]


def build_salary_analytics(jobs: list, offers: list) -> dict[str, Any]:
    """
    Aggregate salary figures (all in cents) for one user's jobs and offers.
    A job's salary is the midpoint of its min and max; missing ends count as 0.
    """
    df = _jobs_frame(jobs)

    positive_min = df.loc[df["salary_min"] > 0, "salary_min"]
    positive_max = df.loc[df["salary_max"] > 0, "salary_max"]

    remote_split = {"remote": _empty_group(), "onsite": _empty_group()}
    for is_remote, group in _grouped(df, "is_remote").items():
        remote_split["remote" if is_remote == "True" else "onsite"] = group

    analytics = {
        "total_jobs_with_salary": int(len(df)),
        "total_offers": len(offers),
        "pending_offers": sum(1 for o in offers if o.status == OfferStatus.PENDING.value),
        "accepted_offers": sum(1 for o in offers if o.status == OfferStatus.ACCEPTED.value),
        "average_salary": float(df["midpoint"].mean()) if not df.empty else 0.0,
        "salary_range": {
            "min": int(positive_min.min()) if not positive_min.empty else 0,
            "max": int(positive_max.max()) if not positive_max.empty else 0,
        },
        "by_location": _grouped(df, "location"),
        "by_company": _grouped(df, "company"),
        "remote_split": remote_split,
        "timeline": _offer_timeline(offers),
    }
    logger.debug(
        "Salary analytics: jobs=%d offers=%d",
        analytics["total_jobs_with_salary"],
        analytics["total_offers"],
    )
    return analytics
