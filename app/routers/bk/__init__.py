from . import violations, categories, achievements, permits, counseling, students, dashboard

routers = [
    violations.router,
    categories.router,
    achievements.router,
    permits.router,
    counseling.router,
    students.router,
    dashboard.router,
]

__all__ = [
    "violations",
    "categories",
    "achievements",
    "permits",
    "counseling",
    "students",
    "dashboard",
    "routers",
]
