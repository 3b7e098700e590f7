"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

HOMEROOM_SUBJECT = "Homeroom"
HOMEROOM_KEY = "homeroom"

STUDENTS_COLLECTION = "students"
SECTIONS_COLLECTION = "sections"
SUBJECTS_COLLECTION = "subjects"

DEFAULT_FETCH_WORKERS = 4
