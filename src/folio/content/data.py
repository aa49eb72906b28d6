"""Portfolio content. Source of public/portfolioData.json (see folio.sync)."""

from folio.content.icons import (
    Cloud,
    Code2,
    Cpu,
    Database,
    Layout,
    Rocket,
    Server,
    Sparkles,
    Terminal,
    Wrench,
)

skills = [
    {"name": "Python", "level": 90, "icon": Terminal},
    {"name": "TypeScript", "level": 85, "icon": Code2},
    {"name": "React", "level": 85, "icon": Layout},
    {"name": "PostgreSQL", "level": 75, "icon": Database},
    {"name": "Docker", "level": 70, "icon": Server},
    {"name": "AWS", "level": 65, "icon": Cloud},
]

skill_categories = [
    {
        "title": "Frontend",
        "icon": Layout,
        "skills": ["React", "TypeScript", "Tailwind CSS", "Three.js"],
    },
    {
        "title": "Backend",
        "icon": Server,
        "skills": ["Python", "FastAPI", "Node.js", "PostgreSQL"],
    },
    {
        "title": "Infrastructure",
        "icon": Cloud,
        "skills": ["Docker", "AWS", "GitHub Actions", "Linux"],
    },
]

experiences = [
    {
        "role": "Full-Stack Developer",
        "company": "Freelance",
        "period": "2023 - Present",
        "description": "Web applications and data tooling for small teams.",
        "highlights": [
            "Built dashboards on top of REST and WebSocket APIs",
            "Automated deployments with containerized pipelines",
        ],
    },
    {
        "role": "Software Engineer",
        "company": "Product Studio",
        "period": "2021 - 2023",
        "description": "Frontend and API work on client products.",
        "highlights": [
            "Led migration of a legacy SPA to React + TypeScript",
            "Cut API p95 latency by moving hot queries to materialized views",
        ],
    },
]

projects = [
    {
        "title": "Portfolio Backdrop",
        "description": "Adaptive particle background that scales to device capability.",
        "tags": ["Three.js", "React", "WebGL"],
        "icon": Sparkles,
        "links": {"github": "", "live": ""},
        "featured": True,
    },
    {
        "title": "Metrics Pipeline",
        "description": "Batch ingestion and reporting for sensor data.",
        "tags": ["Python", "PostgreSQL", "Docker"],
        "icon": Database,
        "links": {"github": "", "live": None},
        "featured": False,
    },
    {
        "title": "CLI Toolkit",
        "description": "Developer tooling for scaffolding and release automation.",
        "tags": ["Python", "CLI"],
        "icon": Terminal,
        "links": {"github": "", "live": None},
        "featured": False,
    },
]

about_skills = [
    {"label": "Clean code", "icon": Code2},
    {"label": "Performance", "icon": Cpu},
    {"label": "Shipping", "icon": Rocket},
]

services = [
    {
        "title": "Web Development",
        "description": "Responsive sites and single-page apps.",
        "icon": Layout,
    },
    {
        "title": "Backend & APIs",
        "description": "Services, databases and integrations.",
        "icon": Server,
    },
    {
        "title": "Tooling & Automation",
        "description": "Scripts, CI pipelines and internal tools.",
        "icon": Wrench,
    },
]
