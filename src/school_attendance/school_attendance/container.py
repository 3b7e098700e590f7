from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_FETCH_WORKERS
from .database.connection import FirestoreConfig, FirestoreConnection
from .enrollment.resolver import EnrollmentResolver
from .rosters.service import RosterService
from .sections.firestore_section_repository import FirestoreSectionRepository
from .students.firestore_student_repository import FirestoreStudentRepository
from .subjects.firestore_subject_repository import FirestoreSubjectRepository


@dataclass(frozen=True)
class Container:
    conn: FirestoreConnection

    students_repo: FirestoreStudentRepository
    subjects_repo: FirestoreSubjectRepository
    sections_repo: FirestoreSectionRepository

    enrollment_resolver: EnrollmentResolver
    roster_service: RosterService


def build_container(*, firebase_config: dict, fetch_workers: int = DEFAULT_FETCH_WORKERS) -> Container:
    config = FirestoreConfig(
        project_id=firebase_config.get("project_id") or None,
        credentials_path=firebase_config.get("credentials_path") or None,
        credentials_json=firebase_config.get("credentials_json") or None,
    )
    conn = FirestoreConnection.get_instance(config)

    students_repo = FirestoreStudentRepository(conn)
    subjects_repo = FirestoreSubjectRepository(conn)
    sections_repo = FirestoreSectionRepository(conn)

    enrollment_resolver = EnrollmentResolver(students_repo, subjects_repo, max_workers=int(fetch_workers))
    roster_service = RosterService(enrollment_resolver, sections_repo)

    return Container(
        conn=conn,
        students_repo=students_repo,
        subjects_repo=subjects_repo,
        sections_repo=sections_repo,
        enrollment_resolver=enrollment_resolver,
        roster_service=roster_service,
    )
