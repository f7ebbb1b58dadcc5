"""School Portal package.

Organized by feature modules (students, faculty, subjects, attendance, marks,
announcements, ...) over a JSON record store, with role services and a thin
Flask controller layer on top.
"""
