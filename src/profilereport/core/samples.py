"""
Built-in sample document.

Used when a caller does not provide a payload with a page list. The sample
has two pages: a project table followed by a work-time chart, and a skills
table.

Functions
---------
get_sample_data()
    Return a fresh copy of the sample payload.
"""


def _time_series(*times: str) -> list[dict]:
    return [{"timeValue": t} for t in times]


def get_sample_data() -> dict:
    """
    Return the sample payload.

    A new dictionary is built on every call, so callers may modify the
    result freely.

    Returns
    -------
    dict
        Payload with ``person`` and two ``pages``.

    Examples
    --------
    >>> data = get_sample_data()
    >>> [s["type"] for s in data["pages"][0]["sections"]]
    ['table', 'chart']
    """
    return {
        "person": {
            "name": "John Smith",
            "email": "john.smith@company.com",
            "phone": "+1 (555) 123-4567",
            "department": "Engineering",
            "position": "Senior Developer",
            "id": "EMP001",
            "startDate": "2022-01-15",
            "manager": "Sarah Johnson",
        },
        "pages": [
            {
                "sections": [
                    {
                        "title": "Project Information",
                        "type": "table",
                        "data": [
                            {"key": "Project Name", "value": "E-commerce Platform"},
                            {"key": "Status", "value": "In Progress"},
                            {
                                "key": "Description",
                                "value": (
                                    "Building a scalable e-commerce platform with "
                                    "microservices architecture. This project involves "
                                    "multiple teams and requires coordination across "
                                    "frontend, backend, and DevOps teams."
                                ),
                            },
                            {
                                "key": "Technologies",
                                "value": "Node.js, React, PostgreSQL, Docker, Kubernetes",
                            },
                            {
                                "key": "Timeline",
                                "value": (
                                    "6 months development cycle with weekly sprints "
                                    "and continuous deployment"
                                ),
                            },
                        ],
                    },
                    {
                        "title": "Performance Chart",
                        "type": "chart",
                        "data": {
                            "title": "Daily Work Time Tracking",
                            "datasets": [
                                {
                                    "label": "Project Alpha",
                                    "data": _time_series(
                                        "09:15", "09:45", "10:30", "11:15",
                                        "12:00", "13:30", "14:15", "15:00",
                                        "15:45", "16:30", "17:15", "18:00",
                                    ),
                                    "color": "#3498db",
                                },
                                {
                                    "label": "Project Beta",
                                    "data": _time_series(
                                        "08:30", "09:00", "09:30", "10:45",
                                        "11:30", "12:45", "13:15", "14:00",
                                        "14:45", "15:30", "16:15", "17:00",
                                    ),
                                    "color": "#e74c3c",
                                },
                                {
                                    "label": "Code Reviews",
                                    "data": _time_series(
                                        "10:00", "10:15", "11:00", "12:15",
                                        "13:00", "14:30", "15:15", "16:00",
                                        "16:45", "17:30", "18:15", "19:00",
                                    ),
                                    "color": "#2ecc71",
                                },
                            ],
                        },
                    },
                ]
            },
            {
                "sections": [
                    {
                        "title": "Skills & Experience",
                        "type": "table",
                        "data": [
                            {"key": "Programming", "value": "JavaScript, Python, Java, C++"},
                            {"key": "Frameworks", "value": "React, Node.js, Express, Django"},
                            {"key": "Databases", "value": "PostgreSQL, MongoDB, Redis"},
                            {"key": "Cloud", "value": "AWS, Docker, Kubernetes"},
                            {
                                "key": "Experience",
                                "value": (
                                    "5+ years in full-stack development with expertise "
                                    "in building scalable web applications"
                                ),
                            },
                        ],
                    }
                ]
            },
        ],
    }
