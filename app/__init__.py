"""
Job Board API
Job postings, applicant submissions and an application review workflow.

Architecture:
- MongoDB: jobs (with embedded applicants) and users
- FastAPI: REST layer, JWT auth for posting owners
"""

__version__ = "1.0.0"
