from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError


class Project(BaseModel):
    name: str
    description: str = ""
    url: str = ""


class Experience(BaseModel):
    role: str
    company: str
    period: str = ""
    description: str = ""


_STRING_FIELDS = ("name", "title", "bio", "avatar_url", "email", "phone", "github", "linkedin")


class DeveloperProfile(BaseModel):
    """Profile shown on the About page. Empty fields hide their section."""
    name: str = "Developer"
    title: str = ""
    bio: str = ""
    avatar_url: str = ""
    email: str = ""
    phone: str = ""
    github: str = ""
    linkedin: str = ""
    skills: List[str] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    experience: List[Experience] = Field(default_factory=list)

    @classmethod
    def from_raw(cls, raw: Optional[dict]) -> "DeveloperProfile":
        """Merge a hand-edited config dict with safe defaults.

        Non-string or blank strings fall back to the default, non-list
        collections become empty, and malformed entries are dropped.
        """
        raw = raw if isinstance(raw, dict) else {}
        values: dict[str, Any] = {}
        for field in _STRING_FIELDS:
            value = raw.get(field)
            if isinstance(value, str) and value.strip():
                values[field] = value.strip()

        skills = raw.get("skills")
        if isinstance(skills, list):
            values["skills"] = [s.strip() for s in skills if isinstance(s, str) and s.strip()]

        values["projects"] = _parse_entries(Project, raw.get("projects"))
        values["experience"] = _parse_entries(Experience, raw.get("experience"))
        return cls(**values)

    @property
    def initials(self) -> str:
        return initials(self.name)


def _parse_entries(model, entries) -> list:
    if not isinstance(entries, list):
        return []
    parsed = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        cleaned = {k: v.strip() if isinstance(v, str) else v for k, v in entry.items()}
        try:
            parsed.append(model.model_validate(cleaned))
        except ValidationError:
            continue
    return parsed


def initials(name: Optional[str]) -> str:
    if not name or not name.strip():
        return "?"
    return "".join(word[0] for word in name.split()[:2]).upper()
