PLACEHOLDERS = ("jobTitle", "company", "skills", "location", "source")


def render_template(body: str, job) -> str:
    """Fill {jobTitle}, {company}, {skills}, {location}, {source} from job."""
    values = {
        "jobTitle": job.title or "",
        "company": job.company or "",
        "skills": ", ".join(job.tags or []),
        "location": job.location or "",
        "source": job.source or "",
    }
    # other braces in the body are left untouched
    for name in PLACEHOLDERS:
        body = body.replace("{" + name + "}", values[name])
    return body
