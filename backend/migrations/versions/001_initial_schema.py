"""Initial schema — companies, applications, contacts, events, study and resume tables.

Revision ID: 001
Revises:
Create Date: 2026-10-18
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def _id() -> sa.Column:
    return sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True)


def _fk(column: str, target: str, ondelete: str, nullable: bool = True) -> sa.Column:
    return sa.Column(
        column,
        sa.Uuid(as_uuid=True),
        sa.ForeignKey(target, ondelete=ondelete),
        nullable=nullable,
        index=True,
    )


def upgrade() -> None:
    # Companies
    op.create_table(
        "companies",
        _id(),
        sa.Column("name", sa.String(255), nullable=False, index=True),
        sa.Column("website", sa.String(500)),
        sa.Column("careers_url", sa.String(500)),
        sa.Column("notes", sa.Text),
        *_timestamps(),
    )

    # Contacts
    op.create_table(
        "contacts",
        _id(),
        _fk("company_id", "companies.id", "CASCADE", nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("position", sa.String(255)),
        sa.Column("linkedin_url", sa.String(500)),
        sa.Column("email", sa.String(255)),
        sa.Column("phone", sa.String(50)),
        sa.Column("status", sa.String(30), nullable=False, server_default="REQUEST_SENT", index=True),
        sa.Column("can_refer", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("willing_to_refer", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("messaged_date", sa.DateTime(timezone=True)),
        sa.Column("last_interaction_date", sa.DateTime(timezone=True)),
        sa.Column("notes", sa.Text),
        sa.Column("conversation_notes", sa.Text),
        *_timestamps(),
    )
    op.create_index("idx_contact_referrals", "contacts", ["can_refer", "willing_to_refer"])

    op.create_table(
        "contact_interactions",
        _id(),
        _fk("contact_id", "contacts.id", "CASCADE", nullable=False),
        sa.Column("interaction_type", sa.String(50), nullable=False, server_default="MESSAGE"),
        sa.Column("interaction_date", sa.DateTime(timezone=True), nullable=False, index=True),
        sa.Column("notes", sa.Text),
        *_timestamps(),
    )

    # Applications
    op.create_table(
        "applications",
        _id(),
        _fk("company_id", "companies.id", "CASCADE", nullable=False),
        sa.Column("position_title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("job_posting_url", sa.String(1000)),
        sa.Column("status", sa.String(30), nullable=False, server_default="NOT_APPLIED", index=True),
        sa.Column("applied_date", sa.DateTime(timezone=True)),
        sa.Column("application_deadline", sa.DateTime(timezone=True)),
        sa.Column("salary_min", sa.Integer),
        sa.Column("salary_max", sa.Integer),
        sa.Column("salary_currency", sa.String(3), nullable=False, server_default="USD"),
        sa.Column("resume_path", sa.String(500)),
        sa.Column("cover_letter_path", sa.String(500)),
        sa.Column("is_referred", sa.Boolean, nullable=False, server_default=sa.text("false")),
        _fk("referred_by_id", "contacts.id", "SET NULL"),
        sa.Column("notes", sa.Text),
        *_timestamps(),
    )
    op.create_index("idx_application_company_status", "applications", ["company_id", "status"])

    # Interviews
    op.create_table(
        "interviews",
        _id(),
        _fk("application_id", "applications.id", "CASCADE", nullable=False),
        sa.Column("round", sa.Integer, nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("interview_date", sa.DateTime(timezone=True), nullable=False, index=True),
        sa.Column("duration", sa.Integer),
        sa.Column("interviewers", sa.Text),
        sa.Column("location", sa.String(255)),
        sa.Column("meeting_link", sa.String(1000)),
        sa.Column("status", sa.String(20), nullable=False, server_default="SCHEDULED"),
        sa.Column("feedback", sa.Text),
        sa.Column("notes", sa.Text),
        *_timestamps(),
    )

    # Events
    op.create_table(
        "events",
        _id(),
        sa.Column("type", sa.String(30), nullable=False, server_default="REMINDER", index=True),
        _fk("application_id", "applications.id", "SET NULL"),
        _fk("contact_id", "contacts.id", "SET NULL"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("scheduled_date", sa.DateTime(timezone=True), nullable=False, index=True),
        sa.Column("duration", sa.Integer),
        sa.Column("round", sa.Integer),
        sa.Column("interviewers", sa.Text),
        sa.Column("location", sa.String(255)),
        sa.Column("meeting_link", sa.String(1000)),
        sa.Column("status", sa.String(20), nullable=False, server_default="PENDING"),
        sa.Column("is_completed", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("completed_at", sa.DateTime(timezone=True)),
        sa.Column("feedback", sa.Text),
        sa.Column("notes", sa.Text),
        sa.Column("outcome", sa.Text),
        sa.Column("next_steps", sa.Text),
        sa.Column("next_steps_due_date", sa.DateTime(timezone=True)),
        *_timestamps(),
    )
    op.create_index("idx_event_completed_date", "events", ["is_completed", "scheduled_date"])

    # Reminders
    op.create_table(
        "reminders",
        _id(),
        _fk("application_id", "applications.id", "CASCADE"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=False, index=True),
        sa.Column("type", sa.String(30), nullable=False, server_default="FOLLOW_UP"),
        sa.Column("is_completed", sa.Boolean, nullable=False, server_default=sa.text("false"), index=True),
        sa.Column("completed_at", sa.DateTime(timezone=True)),
        *_timestamps(),
    )

    # Learning items
    op.create_table(
        "learning_items",
        _id(),
        sa.Column("type", sa.String(20), nullable=False, server_default="CONCEPT", index=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("resource_url", sa.String(1000)),
        sa.Column("additional_links", sa.Text),
        sa.Column("category", sa.String(100), index=True),
        sa.Column("tags", sa.String(500)),
        sa.Column("status", sa.String(20), nullable=False, server_default="TO_LEARN", index=True),
        sa.Column("priority", sa.String(10), nullable=False, server_default="MEDIUM"),
        sa.Column("progress", sa.Integer, nullable=False, server_default=sa.text("0")),
        sa.Column("target_date", sa.DateTime(timezone=True)),
        sa.Column("started_at", sa.DateTime(timezone=True)),
        sa.Column("completed_at", sa.DateTime(timezone=True)),
        sa.Column("notes", sa.Text),
        sa.Column("key_takeaways", sa.Text),
        *_timestamps(),
    )

    # Resources
    op.create_table(
        "resources",
        _id(),
        _fk("parent_id", "resources.id", "CASCADE"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("url", sa.String(1000)),
        sa.Column("type", sa.String(20)),
        sa.Column("category", sa.String(100), index=True),
        sa.Column("tags", sa.String(500)),
        sa.Column("is_completed", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("is_favorite", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("notes", sa.Text),
        *_timestamps(),
    )

    # Resume templates
    op.create_table(
        "resume_templates",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text),
        *_timestamps(),
    )
    op.create_table(
        "resume_sections",
        _id(),
        _fk("template_id", "resume_templates.id", "CASCADE", nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("order", sa.Integer, nullable=False, server_default=sa.text("0")),
        sa.Column("latex_code", sa.Text, nullable=False, server_default=""),
        sa.Column("notes", sa.Text),
        *_timestamps(),
        sa.UniqueConstraint("template_id", "name", name="uq_resume_sections_template_name"),
    )

    # Resume builder
    op.create_table(
        "resumes",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("target_role", sa.String(255)),
        sa.Column("is_default", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("last_used_at", sa.DateTime(timezone=True)),
        *_timestamps(),
    )
    op.create_table(
        "experiences",
        _id(),
        _fk("resume_id", "resumes.id", "CASCADE", nullable=False),
        sa.Column("order", sa.Integer, nullable=False, server_default=sa.text("0")),
        sa.Column("company", sa.String(255), nullable=False),
        sa.Column("position", sa.String(255), nullable=False),
        sa.Column("location", sa.String(255)),
        sa.Column("start_date", sa.String(50)),
        sa.Column("end_date", sa.String(50)),
        sa.Column("bullet_points", sa.Text),
        *_timestamps(),
    )
    op.create_table(
        "projects",
        _id(),
        _fk("resume_id", "resumes.id", "CASCADE", nullable=False),
        sa.Column("order", sa.Integer, nullable=False, server_default=sa.text("0")),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("technologies", sa.String(500)),
        sa.Column("github_url", sa.String(500)),
        sa.Column("live_url", sa.String(500)),
        sa.Column("start_date", sa.String(50)),
        sa.Column("end_date", sa.String(50)),
        sa.Column("bullet_points", sa.Text),
        *_timestamps(),
    )
    op.create_table(
        "skill_categories",
        _id(),
        _fk("resume_id", "resumes.id", "CASCADE", nullable=False),
        sa.Column("order", sa.Integer, nullable=False, server_default=sa.text("0")),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("skills", sa.Text),
        *_timestamps(),
    )
    op.create_table(
        "education",
        _id(),
        _fk("resume_id", "resumes.id", "CASCADE", nullable=False),
        sa.Column("order", sa.Integer, nullable=False, server_default=sa.text("0")),
        sa.Column("school", sa.String(255), nullable=False),
        sa.Column("degree", sa.String(255)),
        sa.Column("field", sa.String(255)),
        sa.Column("location", sa.String(255)),
        sa.Column("start_date", sa.String(50)),
        sa.Column("end_date", sa.String(50)),
        sa.Column("gpa", sa.String(20)),
        sa.Column("achievements", sa.Text),
        *_timestamps(),
    )

    # Email templates
    op.create_table(
        "email_templates",
        _id(),
        sa.Column("name", sa.String(255), nullable=False, index=True),
        sa.Column("subject", sa.String(500), nullable=False),
        sa.Column("body", sa.Text, nullable=False),
        sa.Column("category", sa.String(30), nullable=False, index=True),
        *_timestamps(),
    )

    # Daily tasks
    op.create_table(
        "tasks",
        _id(),
        _fk("parent_task_id", "tasks.id", "CASCADE"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("notes", sa.Text),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=False, index=True),
        sa.Column("is_completed", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("completed_at", sa.DateTime(timezone=True)),
        *_timestamps(),
    )


def downgrade() -> None:
    for table in (
        "tasks",
        "email_templates",
        "education",
        "skill_categories",
        "projects",
        "experiences",
        "resumes",
        "resume_sections",
        "resume_templates",
        "resources",
        "learning_items",
        "reminders",
        "events",
        "interviews",
        "applications",
        "contact_interactions",
        "contacts",
        "companies",
    ):
        op.drop_table(table)
