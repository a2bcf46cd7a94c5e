"""ORM models package — import all models so relationship strings resolve."""

from jobtracker.models.base import Base  # noqa: F401
from jobtracker.models.company import Company  # noqa: F401
from jobtracker.models.application import Application  # noqa: F401
from jobtracker.models.contact import Contact, ContactInteraction  # noqa: F401
from jobtracker.models.interview import Interview  # noqa: F401
from jobtracker.models.event import Event  # noqa: F401
from jobtracker.models.reminder import Reminder  # noqa: F401
from jobtracker.models.learning_item import LearningItem  # noqa: F401
from jobtracker.models.resource import Resource  # noqa: F401
from jobtracker.models.resume_template import ResumeTemplate, ResumeSection  # noqa: F401
from jobtracker.models.resume import Resume, Experience, Project, SkillCategory, Education  # noqa: F401
from jobtracker.models.email_template import EmailTemplate  # noqa: F401
from jobtracker.models.task import Task  # noqa: F401
