"""Jinja2 sources for every fragment injected into the page.

Each entry renders the markup for one anchor. Values are autoescaped except
blog post bodies, which are authored as HTML.
"""

from __future__ import annotations

__all__ = ["FRAGMENTS"]

# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------

_SIDEBAR_PROFILE = """\
<div class="profile-header">
  <div class="avatar-container">
    <img src="{{ profile.avatar }}" alt="{{ profile.name }}" class="avatar">
  </div>
  <h1 class="profile-name">{{ profile.name }}</h1>
  <div class="typing-container">
    <span id="typing-text"></span><span class="cursor">|</span>
  </div>
  <div class="profile-socials">
    {% for social in profile.socials %}
    <a href="{{ social.url }}" target="_blank" aria-label="{{ social.platform }}"><i class="bx {{ social.icon }}"></i></a>
    {% endfor %}
  </div>
</div>
"""

_ABOUT = """\
<div class="card full-width">
  <h3>Who I am</h3>
  <p class="bio-text">{{ profile.bio }}</p>
</div>
<div class="card-group-title full-width">Services</div>
{% for service in profile.services %}
<div class="card service-card">
  <div class="icon-box"><i class="bx {{ service.icon }}"></i></div>
  <h3>{{ service.title }}</h3>
  <p class="bio-text">{{ service.description }}</p>
</div>
{% endfor %}
"""

_CONTACT = """\
<h3>Contact Info</h3>
<p class="bio-text contact-message">{{ profile.contact_message }}</p>
{% for detail in profile.contact_details %}
<div class="contact-info-item">
  <i class="bx {{ detail.icon }}"></i>
  <div>
    <span class="contact-label">{{ detail.label }}</span>
    <span class="contact-value">{{ detail.value }}</span>
  </div>
</div>
{% endfor %}
"""

# ---------------------------------------------------------------------------
# Resume
# ---------------------------------------------------------------------------

_RESUME = """\
<div class="resume-column">
  <h3 class="panel-subtitle"><i class="bx bx-briefcase"></i> Experience</h3>
  {% for exp in resume.experience %}
  <div class="timeline-item">
    <span class="timeline-date">{{ exp.period }}</span>
    <h4 class="timeline-role">{{ exp.role }}</h4>
    <span class="timeline-place">{{ exp.company }}</span>
    <p class="bio-text">{{ exp.description }}</p>
  </div>
  {% endfor %}
</div>
<div class="resume-column">
  <h3 class="panel-subtitle"><i class="bx bx-book-reader"></i> Education</h3>
  {% for edu in resume.education %}
  <div class="timeline-item">
    <span class="timeline-date">{{ edu.year }}</span>
    <h4 class="timeline-role">{{ edu.degree }}</h4>
    <span class="timeline-place">{{ edu.school }}</span>
  </div>
  {% endfor %}
  <h3 class="panel-subtitle"><i class="bx bx-code-alt"></i> Tech Stack</h3>
  <div class="card">
    <div class="skill-tags">
      {% for skill in resume.skills %}<span class="skill-tag">{{ skill }}</span>{% endfor %}
    </div>
  </div>
</div>
"""

# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

_FILTERS = """\
{% for category in categories %}<button class="filter-btn{% if category == active %} active{% endif %}" data-filter="{{ category }}">{{ category | capfirst }}</button>{% endfor %}
"""

_PROJECTS_GRID = """\
{% for project in projects %}
<div class="work-item" data-modal-kind="project" data-modal-id="{{ project.id }}">
  <div class="work-image">
    <img src="{{ project.image }}" alt="{{ project.title }}" loading="lazy">
  </div>
  <div class="work-info">
    <h4>{{ project.title }}</h4>
    <span>{{ project.tech }}</span>
  </div>
</div>
{% endfor %}
"""

_PROJECT_DETAIL = """\
<img src="{{ project.image }}" class="modal-img" alt="{{ project.title }}">
<h2 class="modal-title">{{ project.title }}</h2>
<p class="modal-tech">{{ project.tech }}</p>
<div class="modal-body-text">
  <p>Detailed project description goes here. This is loaded dynamically based on ID.</p>
  <p>This architecture allows for unlimited project details without cluttering the main HTML file.</p>
</div>
<a href="{{ project.link }}" target="_blank" class="btn-primary">View Live Project <i class="bx bx-link-external"></i></a>
"""

# ---------------------------------------------------------------------------
# Blog
# ---------------------------------------------------------------------------

_BLOG_GRID = """\
{% for post in posts %}
<article class="card blog-card" data-modal-kind="blog" data-modal-id="{{ post.id }}">
  <div class="blog-meta">
    <span class="blog-category">{{ post.category }}</span>
    <span class="blog-date">{{ post.date }}</span>
  </div>
  <h3>{{ post.title }}</h3>
  <p class="bio-text">{{ post.excerpt }}</p>
  <div class="blog-meta blog-footer">
    <span class="read-time"><i class="bx bx-time"></i> {{ post.read_time }} min read</span>
    <span class="read-more-btn">Read More &rarr;</span>
  </div>
</article>
{% endfor %}
"""

_BLOG_DETAIL = """\
<img src="{{ post.image }}" class="modal-img" alt="{{ post.title }}">
<span class="modal-date">{{ post.date }} &bull; {{ post.category }}</span>
<h2 class="modal-title">{{ post.title }}</h2>
<div class="modal-body-text">{{ post.content | safe }}</div>
<div class="giscus-placeholder">
  <i class="bx bx-comment-detail"></i> Comments (Integrated via Giscus)
</div>
"""

# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

_LOAD_ERROR = """\
<p class="load-error" style="color:red">{{ message }}</p>
"""

FRAGMENTS: dict[str, str] = {
    "sidebar_profile": _SIDEBAR_PROFILE,
    "about": _ABOUT,
    "contact": _CONTACT,
    "resume": _RESUME,
    "filters": _FILTERS,
    "projects_grid": _PROJECTS_GRID,
    "project_detail": _PROJECT_DETAIL,
    "blog_grid": _BLOG_GRID,
    "blog_detail": _BLOG_DETAIL,
    "load_error": _LOAD_ERROR,
}
