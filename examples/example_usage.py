"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; roster resolution lives in the resolver/services.
"""

import importlib
import sys

from config import get_settings_module

from src.school_attendance.school_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(firebase_config=settings.FIREBASE_CONFIG, fetch_workers=settings.FETCH_WORKERS)

    section_ids = sys.argv[2:] or ["section-7a"]
    subject = sys.argv[1] if len(sys.argv) > 1 else "Homeroom"

    result = container.enrollment_resolver.resolve_enrollment(section_ids, subject)
    for student in result.students:
        print(student.id, student.display_name)
    print(result.diagnostics.message() or f"{len(result.students)} students enrolled in {subject}")


if __name__ == "__main__":
    main()
