"""Default HTML shell containing every anchor the renderer injects into."""

from __future__ import annotations

__all__ = ["DEFAULT_SHELL", "shell_html"]

DEFAULT_SHELL = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Portfolio</title>
  <link rel="stylesheet" href="https://unpkg.com/boxicons@2.1.4/css/boxicons.min.css" />
  <link rel="stylesheet" href="./style.css" />
</head>
<body>
  <div id="preloader"><div class="loader"></div></div>

  <button class="menu-toggle" aria-label="Open menu"><i class='bx bx-menu'></i></button>
  <div class="sidebar-overlay"></div>

  <aside class="sidebar">
    <div id="sidebar-profile-data"></div>
    <nav class="sidebar-nav">
      <a href="#" class="nav-link active" data-page="about"><i class='bx bx-user'></i> About</a>
      <a href="#" class="nav-link" data-page="resume"><i class='bx bx-file'></i> Resume</a>
      <a href="#" class="nav-link" data-page="portfolio"><i class='bx bx-briefcase'></i> Portfolio</a>
      <a href="#" class="nav-link" data-page="blog"><i class='bx bx-book'></i> Blog</a>
      <a href="#" class="nav-link" data-page="contact"><i class='bx bx-envelope'></i> Contact</a>
    </nav>
    <button id="theme-toggle" aria-label="Toggle theme"><i class='bx bx-moon'></i></button>
  </aside>

  <main class="main-content">
    <section id="about" class="content-panel active">
      <h2 class="panel-title">About Me</h2>
      <div id="about-content" class="card-grid"></div>
    </section>

    <section id="resume" class="content-panel">
      <h2 class="panel-title">Resume</h2>
      <div class="cv-actions">
        <a id="download-cv" class="btn-primary" download>Download CV</a>
        <button id="print-cv" class="btn-secondary">Print CV</button>
      </div>
      <div id="resume-content" class="resume-grid"></div>
    </section>

    <section id="portfolio" class="content-panel">
      <h2 class="panel-title">Portfolio</h2>
      <div id="portfolio-filters" class="filter-bar"></div>
      <div id="works-grid" class="works-grid"></div>
    </section>

    <section id="blog" class="content-panel">
      <h2 class="panel-title">Blog</h2>
      <div id="blog-grid" class="blog-grid"></div>
    </section>

    <section id="contact" class="content-panel">
      <h2 class="panel-title">Contact</h2>
      <div id="contact-info" class="card"></div>
    </section>

    <footer class="site-footer">&copy; <span id="year"></span></footer>
  </main>

  <div id="modal-overlay" class="modal-overlay">
    <div class="modal-content">
      <button class="modal-close" aria-label="Close"><i class='bx bx-x'></i></button>
      <div id="modal-body"></div>
    </div>
  </div>
</body>
</html>
"""


def shell_html() -> str:
    """Return the bundled page shell."""
    return DEFAULT_SHELL
