"""Content models parsed from the portfolio JSON documents."""

from portfolio_renderer.models.content import (
    BlogPost,
    ContactDetail,
    EducationEntry,
    ExperienceEntry,
    Profile,
    Project,
    Resume,
    Service,
    SocialLink,
    read_time,
    word_count,
)

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
