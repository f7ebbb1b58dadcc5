"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

USERS = "users"
STUDENTS = "students"
FACULTY = "faculty"
SUBJECTS = "subjects"
ATTENDANCE = "attendance"
MARKS = "marks"
ANNOUNCEMENTS = "announcements"

COLLECTIONS = (USERS, STUDENTS, FACULTY, SUBJECTS, ATTENDANCE, MARKS, ANNOUNCEMENTS)

CURRENT_USER_SLOT = "currentUser"

DEFAULT_STUDENT_PASSWORD = "student123"
DEFAULT_FACULTY_PASSWORD = "faculty123"

LOW_ATTENDANCE_BELOW = 75
GOOD_ATTENDANCE_FROM = 85

RECENT_ANNOUNCEMENTS_LIMIT = 5
UNASSIGNED_FACULTY = "Not Assigned"
ALL_SUBJECTS = "all"
