"""Built-in postings returned when no job source contributes anything."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from devmatch.jobs.models import NormalizedJobPosting

_SAMPLE_DATA: tuple[dict, ...] = (
    {
        "id": 1,
        "title": "Full Stack Developer",
        "company": "TechCorp Inc.",
        "location": "San Francisco, CA",
        "description": (
            "Join our team as a Full Stack Developer working with React, Node.js, "
            "and cloud technologies."
        ),
        "required_skills": ["JavaScript", "React", "Node.js", "MongoDB", "Git"],
        "preferred_skills": ["TypeScript", "AWS", "Docker"],
        "experience_level": "Mid",
        "salary_min": 90000,
        "salary_max": 130000,
        "remote_options": "Hybrid",
        "posted_days_ago": 5,
        "expires_in_days": 25,
    },
    {
        "id": 2,
        "title": "Python Data Scientist",
        "company": "DataTech Solutions",
        "location": "Remote",
        "description": (
            "Looking for a Python Data Scientist to work on machine learning projects "
            "and data analysis."
        ),
        "required_skills": ["Python", "Pandas", "NumPy", "Scikit-learn", "SQL"],
        "preferred_skills": ["TensorFlow", "PyTorch", "Docker", "Kubernetes"],
        "experience_level": "Senior",
        "salary_min": 120000,
        "salary_max": 160000,
        "remote_options": "Remote",
        "posted_days_ago": 3,
        "expires_in_days": 27,
    },
    {
        "id": 3,
        "title": "Frontend React Developer",
        "company": "StartupXYZ",
        "location": "Austin, TX",
        "description": (
            "Seeking a Frontend Developer specialized in React to build modern web "
            "applications."
        ),
        "required_skills": ["JavaScript", "React", "HTML5", "CSS3", "REST APIs"],
        "preferred_skills": ["TypeScript", "Redux", "Webpack", "Jest"],
        "experience_level": "Junior",
        "salary_min": 70000,
        "salary_max": 95000,
        "remote_options": "On-site",
        "posted_days_ago": 2,
        "expires_in_days": 28,
    },
    {
        "id": 4,
        "title": "DevOps Engineer",
        "company": "CloudFirst Technologies",
        "location": "Seattle, WA",
        "description": (
            "Join our DevOps team to manage cloud infrastructure and CI/CD pipelines."
        ),
        "required_skills": ["AWS", "Docker", "Kubernetes", "Terraform", "Jenkins"],
        "preferred_skills": ["Python", "Go", "Ansible", "Prometheus"],
        "experience_level": "Mid",
        "salary_min": 110000,
        "salary_max": 145000,
        "remote_options": "Hybrid",
        "posted_days_ago": 1,
        "expires_in_days": 29,
    },
    {
        "id": 5,
        "title": "C# Backend Developer",
        "company": "Enterprise Systems Ltd.",
        "location": "New York, NY",
        "description": (
            "Looking for an experienced C# developer to work on enterprise-grade "
            "backend systems."
        ),
        "required_skills": ["C#", ".NET Core", "ASP.NET", "SQL Server", "Web APIs"],
        "preferred_skills": ["Azure", "Entity Framework", "Microservices", "Redis"],
        "experience_level": "Senior",
        "salary_min": 115000,
        "salary_max": 155000,
        "remote_options": "Hybrid",
        "posted_days_ago": 4,
        "expires_in_days": 26,
    },
)

SAMPLE_TITLES: tuple[str, ...] = tuple(item["title"] for item in _SAMPLE_DATA)


def sample_postings(now: datetime | None = None) -> list[NormalizedJobPosting]:
    """Return the fixed sample set, dated relative to ``now``, in declaration order."""
    current = now or datetime.now(UTC)
    postings: list[NormalizedJobPosting] = []
    for item in _SAMPLE_DATA:
        fields = dict(item)
        posted_days_ago = fields.pop("posted_days_ago")
        expires_in_days = fields.pop("expires_in_days")
        postings.append(
            NormalizedJobPosting(
                **fields,
                posted_at=current - timedelta(days=posted_days_ago),
                expires_at=current + timedelta(days=expires_in_days),
                is_active=True,
            )
        )
    return postings
