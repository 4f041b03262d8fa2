"""Pydantic models for the four content documents.

Field names follow Python conventions; the camelCase keys used by the JSON
documents (``contactMessage``, ``desc`` ...) are accepted through aliases.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "BlogPost",
    "ContactDetail",
    "EducationEntry",
    "ExperienceEntry",
    "Profile",
    "Project",
    "Resume",
    "Service",
    "SocialLink",
    "read_time",
    "word_count",
]

WORDS_PER_MINUTE = 200


class _Content(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class SocialLink(_Content):
    platform: str
    url: str
    icon: str


class Service(_Content):
    icon: str
    title: str
    description: str = Field(alias="desc")


class ContactDetail(_Content):
    label: str
    value: str
    icon: str


class Profile(_Content):
    """Owner profile shown in the sidebar, about and contact panels."""

    name: str
    avatar: str
    socials: list[SocialLink]
    bio: str
    services: list[Service]
    roles: list[str]
    contact_message: str = Field(alias="contactMessage")
    contact_details: list[ContactDetail] = Field(alias="contactDetails")


class ExperienceEntry(_Content):
    period: str
    role: str
    company: str
    description: str = Field(alias="desc")


class EducationEntry(_Content):
    year: str
    degree: str
    school: str


class Resume(_Content):
    """Experience and education timelines plus a flat skill list, in source order."""

    experience: list[ExperienceEntry]
    education: list[EducationEntry]
    skills: list[str]


class Project(_Content):
    id: str
    title: str
    category: str
    tech: str
    image: str
    link: str


class BlogPost(_Content):
    id: str
    title: str
    category: str
    date: str
    excerpt: str
    content: str
    image: str

    @property
    def read_time(self) -> int:
        """Estimated reading time in minutes."""
        return read_time(self.content)


def word_count(text: str) -> int:
    """Count whitespace-separated words in *text*."""
    return len(text.split())


def read_time(text: str) -> int:
    """Return ``ceil(word_count / 200)`` minutes for *text*."""
    return math.ceil(word_count(text) / WORDS_PER_MINUTE)
