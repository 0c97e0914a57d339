from __future__ import annotations

from schoolgate.services.base import RoleGatedService


class StudentService(RoleGatedService):
    """Calls made on behalf of the logged-in student; all scoped to their own id."""
    role = "student"

    def _scope(self, user):
        return [("studentId", user.get("id"))]

    def get_student_profile(self):
        return self._call("getStudentProfile", "Failed to fetch student profile")

    def get_student_permissions(self):
        return self._call("getStudentPermissions", "Failed to fetch student permissions")

    def request_permission(self, permission_data: dict):
        return self._call("requestPermission", "Failed to request permission", permission_data, method="POST")

    def get_student_attendance(self):
        return self._call("getStudentAttendance", "Failed to fetch student attendance")

    def get_student_discipline(self):
        return self._call("getStudentDiscipline", "Failed to fetch student discipline records")
