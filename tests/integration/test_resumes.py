"""Integration tests for resume templates, sections and the resume builder."""

import pytest

pytestmark = pytest.mark.integration


async def create_template(client, name="Software Engineer"):
    response = await client.post("/api/v1/resume-templates", json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()


async def create_section(client, template_id, name, order, latex_code=""):
    return await client.post(
        "/api/v1/resume-sections",
        json={"template_id": template_id, "name": name, "order": order, "latex_code": latex_code},
    )


async def create_resume(client, name, **fields):
    response = await client.post("/api/v1/resumes", json={"name": name, **fields})
    assert response.status_code == 201, response.text
    return response.json()


async def test_sections_are_ordered_and_counted(client):
    template = await create_template(client)
    await create_section(client, template["id"], "Experience", 2, r"\section{Experience}")
    await create_section(client, template["id"], "Header", 0, r"\documentclass{article}")
    await create_section(client, template["id"], "Education", 1, r"\section{Education}")

    detail = (await client.get(f"/api/v1/resume-templates/{template['id']}")).json()

    assert [s["name"] for s in detail["sections"]] == ["Header", "Education", "Experience"]
    assert detail["section_count"] == 3


async def test_duplicate_section_name_rejected(client):
    template = await create_template(client)
    assert (await create_section(client, template["id"], "Skills", 0)).status_code == 201

    duplicate = await create_section(client, template["id"], "Skills", 1)

    assert duplicate.status_code == 400
    assert duplicate.json()["detail"] == "A section with this name already exists in this template"

    # same name in another template is fine
    other = await create_template(client, "Data Scientist")
    assert (await create_section(client, other["id"], "Skills", 0)).status_code == 201


async def test_renaming_section_to_existing_name_rejected(client):
    template = await create_template(client)
    await create_section(client, template["id"], "Projects", 0)
    section = (await create_section(client, template["id"], "Awards", 1)).json()

    response = await client.patch(f"/api/v1/resume-sections/{section['id']}", json={"name": "Projects"})
    assert response.status_code == 400

    renamed = await client.patch(f"/api/v1/resume-sections/{section['id']}", json={"name": "Honors"})
    assert renamed.json()["name"] == "Honors"


async def test_latex_document(client):
    template = await create_template(client)
    await create_section(client, template["id"], "Body", 1, r"\begin{document}Hi\end{document}")
    await create_section(client, template["id"], "Preamble", 0, r"\documentclass{article}")

    response = await client.get(f"/api/v1/resume-templates/{template['id']}/latex")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "\\documentclass{article}\n\n\\begin{document}Hi\\end{document}"


async def test_deleting_template_removes_sections(client):
    template = await create_template(client)
    section = (await create_section(client, template["id"], "Header", 0)).json()

    assert (await client.delete(f"/api/v1/resume-templates/{template['id']}")).status_code == 200
    assert (await client.get(f"/api/v1/resume-sections/{section['id']}")).status_code == 404


async def test_only_one_default_resume(client):
    first = await create_resume(client, "General", is_default=True)
    second = await create_resume(client, "Backend focus", is_default=True)

    assert (await client.get(f"/api/v1/resumes/{first['id']}")).json()["is_default"] is False
    assert second["is_default"] is True

    await client.patch(f"/api/v1/resumes/{first['id']}", json={"is_default": True})
    assert (await client.get(f"/api/v1/resumes/{second['id']}")).json()["is_default"] is False


async def test_resume_entries(client):
    resume = await create_resume(client, "Full stack", target_role="Full Stack Engineer")

    for path, payload in (
        ("/api/v1/experiences", {"company": "Acme", "position": "Engineer", "order": 1}),
        ("/api/v1/experiences", {"company": "Initech", "position": "Intern", "order": 0}),
        ("/api/v1/projects", {"name": "Tracker", "technologies": "FastAPI, SQLAlchemy"}),
        ("/api/v1/skills", {"name": "Languages", "skills": "Python, SQL"}),
        ("/api/v1/education", {"school": "State University", "degree": "BSc"}),
    ):
        response = await client.post(path, json={"resume_id": resume["id"], **payload})
        assert response.status_code == 201, response.text

    detail = (await client.get(f"/api/v1/resumes/{resume['id']}")).json()
    assert [e["company"] for e in detail["experiences"]] == ["Initech", "Acme"]
    assert detail["projects"][0]["name"] == "Tracker"
    assert detail["skills"][0]["skills"] == "Python, SQL"
    assert detail["education"][0]["degree"] == "BSc"

    experience_id = detail["experiences"][0]["id"]
    updated = await client.patch(f"/api/v1/experiences/{experience_id}", json={"position": "Junior Engineer"})
    assert updated.json()["position"] == "Junior Engineer"

    listed = (await client.get("/api/v1/experiences", params={"resume_id": resume["id"]})).json()
    assert len(listed) == 2

    await client.delete(f"/api/v1/resumes/{resume['id']}")
    assert (await client.get("/api/v1/projects")).json() == []


async def test_entry_requires_existing_resume(client):
    response = await client.post(
        "/api/v1/skills",
        json={"resume_id": "00000000-0000-0000-0000-000000000000", "name": "Tools"},
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Resume not found"
