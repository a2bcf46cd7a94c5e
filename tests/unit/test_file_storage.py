"""Unit tests for upload validation and storage."""

import io

import pytest
from starlette.datastructures import UploadFile

from jobtracker.services.file_storage import (
    COVER_LETTER_FOLDER,
    RESUME_FOLDER,
    UploadRejected,
    is_allowed,
    sanitize_filename,
    save_upload,
)


@pytest.mark.unit
def test_sanitize_replaces_unsafe_characters():
    assert sanitize_filename("My Resume (final).pdf") == "My_Resume__final_.pdf"
    assert sanitize_filename("../../etc/passwd") == ".._.._etc_passwd"
    assert sanitize_filename("cover-letter.v2.docx") == "cover-letter.v2.docx"


@pytest.mark.unit
@pytest.mark.parametrize(
    "name, folder, allowed",
    [
        ("resume.pdf", RESUME_FOLDER, True),
        ("resume.DOCX", RESUME_FOLDER, True),
        ("resume.txt", RESUME_FOLDER, False),
        ("letter.txt", COVER_LETTER_FOLDER, True),
        ("letter.exe", COVER_LETTER_FOLDER, False),
        ("no-extension", RESUME_FOLDER, False),
    ],
)
def test_allowed_extensions(name, folder, allowed):
    assert is_allowed(name, folder) is allowed


@pytest.mark.unit
async def test_save_upload_writes_file(tmp_path):
    upload = UploadFile(file=io.BytesIO(b"%PDF-1.4 test"), filename="Jane Doe.pdf")

    path = await save_upload(upload, RESUME_FOLDER, str(tmp_path))

    assert path.startswith("/uploads/resumes/")
    assert path.endswith("-Jane_Doe.pdf")
    stored = tmp_path / RESUME_FOLDER / path.rsplit("/", 1)[1]
    assert stored.read_bytes() == b"%PDF-1.4 test"


@pytest.mark.unit
async def test_save_upload_rejects_wrong_type_and_size(tmp_path):
    with pytest.raises(UploadRejected):
        await save_upload(UploadFile(file=io.BytesIO(b"x"), filename="notes.txt"), RESUME_FOLDER, str(tmp_path))

    big = UploadFile(file=io.BytesIO(b"x" * 20), filename="resume.pdf")
    with pytest.raises(UploadRejected):
        await save_upload(big, RESUME_FOLDER, str(tmp_path), max_bytes=10)

    assert not (tmp_path / RESUME_FOLDER).exists()
