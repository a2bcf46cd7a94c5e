"""Personal job-application tracker: FastAPI + SQLAlchemy backend."""
