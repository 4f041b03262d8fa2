from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

import portfolio_renderer.data.db as app_db


@pytest.fixture(autouse=True)
def tmp_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Point the preference store at a temporary SQLite database."""
    db_path = tmp_path / "preferences.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    app_db.reset_engine()
    yield
    app_db.reset_engine()


@pytest.fixture
def profile_data() -> dict[str, Any]:
    return {
        "name": "Ada Lovelace",
        "avatar": "./assets/avatar.png",
        "socials": [
            {"platform": "GitHub", "url": "https://github.com/ada", "icon": "bxl-github"},
            {"platform": "LinkedIn", "url": "https://linkedin.com/in/ada", "icon": "bxl-linkedin"},
        ],
        "bio": "I write programs for the Analytical Engine.",
        "services": [
            {"icon": "bx-code", "title": "Engineering", "desc": "Building machines that compute."},
            {"icon": "bx-math", "title": "Mathematics", "desc": "Bernoulli numbers on demand."},
        ],
        "roles": ["Mathematician", "Programmer"],
        "contactMessage": "Send a letter by post.",
        "contactDetails": [
            {"label": "Email", "value": "ada@example.com", "icon": "bx-envelope"},
            {"label": "City", "value": "London", "icon": "bx-map"},
        ],
    }


@pytest.fixture
def resume_data() -> dict[str, Any]:
    return {
        "experience": [
            {
                "period": "1842 - 1843",
                "role": "Translator",
                "company": "Taylor's Scientific Memoirs",
                "desc": "Translated and annotated Menabrea's paper.",
            },
            {
                "period": "1833 - 1842",
                "role": "Collaborator",
                "company": "Analytical Engine",
                "desc": "Worked with Charles Babbage.",
            },
        ],
        "education": [
            {"year": 1832, "degree": "Private tutoring", "school": "Mary Somerville"},
        ],
        "skills": ["Mathematics", "Algorithms", "Translation"],
    }


@pytest.fixture
def projects_data() -> list[dict[str, Any]]:
    return [
        {
            "id": "p1",
            "title": "Note G",
            "category": "web",
            "tech": "Punch cards",
            "image": "./img/note-g.png",
            "link": "https://example.com/note-g",
        },
        {
            "id": "p2",
            "title": "Difference Engine",
            "category": "ai",
            "tech": "Brass, steam",
            "image": "./img/engine.png",
            "link": "https://example.com/engine",
        },
        {
            "id": "p3",
            "title": "Loom Patterns",
            "category": "web",
            "tech": "Jacquard",
            "image": "./img/loom.png",
            "link": "https://example.com/loom",
        },
    ]


@pytest.fixture
def blog_data() -> list[dict[str, Any]]:
    return [
        {
            "id": "b1",
            "title": "On Bernoulli Numbers",
            "category": "math",
            "date": "1843-09-01",
            "excerpt": "How to compute them mechanically.",
            "content": " ".join(["word"] * 450),
            "image": "./img/bernoulli.png",
        },
        {
            "id": "b2",
            "title": "Poetical Science",
            "category": "essay",
            "date": "1844-01-15",
            "excerpt": "Imagination meets rigour.",
            "content": "<p>Imagination is the discovering faculty.</p>",
            "image": "./img/poetry.png",
        },
    ]


@pytest.fixture
def data_dir(
    tmp_path: Path,
    profile_data: dict[str, Any],
    resume_data: dict[str, Any],
    projects_data: list[dict[str, Any]],
    blog_data: list[dict[str, Any]],
) -> Path:
    """Write the four content documents into a temporary data directory."""
    root = tmp_path / "data"
    root.mkdir()
    documents = {
        "profile": profile_data,
        "resume": resume_data,
        "projects": projects_data,
        "blog": blog_data,
    }
    for name, payload in documents.items():
        (root / f"{name}.json").write_text(json.dumps(payload), encoding="utf-8")
    return root
