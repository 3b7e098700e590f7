from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_attendance.school_attendance.container import build_container


def main() -> None:
    parser = argparse.ArgumentParser(description="Show how each student's enrollment was read for a subject.")
    parser.add_argument("subject")
    parser.add_argument("section_ids", nargs="+")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    container = build_container(firebase_config=settings.FIREBASE_CONFIG, fetch_workers=settings.FETCH_WORKERS)

    diagnostics = container.enrollment_resolver.resolve_enrollment(args.section_ids, args.subject).diagnostics

    for s in diagnostics.students:
        mark = "x" if s.matched else " "
        source = s.source.value if s.source else "(no enrollment data)"
        line = f"[{mark}] {s.display_name:<30} {s.section_id:<16} {source:<20} {', '.join(s.subject_names)}"
        if s.unresolved_ids:
            line += f"  unresolved ids: {', '.join(s.unresolved_ids)}"
        print(line)

    print(
        f"{diagnostics.matched_count}/{diagnostics.total_students} enrolled in {args.subject} "
        f"({diagnostics.with_enrollment_data} with enrollment data)"
    )
    missing = [s.display_name for s in diagnostics.unmatched() if s.source is None]
    if missing:
        print(f"No enrollment data: {', '.join(missing)}")
    if diagnostics.empty_reason:
        print(f"{diagnostics.empty_reason.value}: {diagnostics.message()}")


if __name__ == "__main__":
    main()
