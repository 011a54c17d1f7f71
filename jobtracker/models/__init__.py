from jobtracker.models.job import Job
from jobtracker.models.application import Application
from jobtracker.models.interview import Interview
from jobtracker.models.resume import Resume
from jobtracker.models.template import Template
from jobtracker.models.company_research import CompanyResearch
from jobtracker.models.salary import SalaryOffer, SalaryHistory

__all__ = [
    "Job",
    "Application",
    "Interview",
    "Resume",
    "Template",
    "CompanyResearch",
    "SalaryOffer",
    "SalaryHistory",
]
