"""School Attendance package.

Organized by feature modules (students, subjects, sections, enrollment,
rosters) with a thin Flask controller layer over service/repository layers.
The hosted document store is reached only through the repository protocols.
"""
