from fastapi import APIRouter

from routers import admin, pages, reference, search, submission, visits

ROUTERS: list[APIRouter] = [
    reference.router,
    search.router,
    submission.router,
    visits.router,
    admin.router,
    pages.router,
]
