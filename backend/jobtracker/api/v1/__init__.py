"""API v1 router aggregation."""

from fastapi import APIRouter

from jobtracker.api.v1.companies import router as companies_router
from jobtracker.api.v1.applications import router as applications_router
from jobtracker.api.v1.contacts import router as contacts_router
from jobtracker.api.v1.interviews import router as interviews_router
from jobtracker.api.v1.events import router as events_router
from jobtracker.api.v1.reminders import router as reminders_router
from jobtracker.api.v1.learning import router as learning_router
from jobtracker.api.v1.resources import router as resources_router
from jobtracker.api.v1.resume_templates import router as resume_templates_router
from jobtracker.api.v1.resume_templates import sections_router as resume_sections_router
from jobtracker.api.v1.resumes import (
    router as resumes_router,
    experiences_router,
    projects_router,
    skills_router,
    education_router,
)
from jobtracker.api.v1.email_templates import router as email_templates_router
from jobtracker.api.v1.tasks import router as tasks_router
from jobtracker.api.v1.analytics import router as analytics_router
from jobtracker.api.v1.data import router as data_router

router = APIRouter(prefix="/api/v1")

router.include_router(companies_router)
router.include_router(applications_router)
router.include_router(contacts_router)
router.include_router(interviews_router)
router.include_router(events_router)
router.include_router(reminders_router)
router.include_router(learning_router)
router.include_router(resources_router)
router.include_router(resume_templates_router)
router.include_router(resume_sections_router)
router.include_router(resumes_router)
router.include_router(experiences_router)
router.include_router(projects_router)
router.include_router(skills_router)
router.include_router(education_router)
router.include_router(email_templates_router)
router.include_router(tasks_router)
router.include_router(analytics_router)
router.include_router(data_router)
