from __future__ import annotations

from schoolgate.services.base import RoleGatedService


class TeacherService(RoleGatedService):
    role = "teacher"

    def get_student_stats(self):
        return self._call("getStudentStats", "Failed to fetch student statistics")

    def get_students(self):
        return self._call("getStudents", "Failed to fetch students")

    def add_student(self, student_data: dict):
        return self._call("addStudent", "Failed to add student", student_data, method="POST")

    def update_student(self, student_id, student_data: dict):
        return self._call("updateStudent", "Failed to update student",
                          [("studentId", student_id)], student_data, method="POST")

    def delete_student(self, student_id):
        return self._call("deleteStudent", "Failed to delete student",
                          [("studentId", student_id)], method="POST")

    def get_permissions(self):
        return self._call("getPermissions", "Failed to fetch permissions")

    def approve_permission(self, permission_id):
        return self._call("approvePermission", "Failed to approve permission",
                          [("permissionId", permission_id), ("teacherId", self._user_id())], method="POST")

    def reject_permission(self, permission_id, notes: str = ""):
        return self._call("rejectPermission", "Failed to reject permission",
                          [("permissionId", permission_id), ("teacherId", self._user_id()), ("notes", notes)],
                          method="POST")

    def get_violation_types(self):
        return self._call("getViolationTypes", "Failed to fetch violation types")

    def add_discipline_point(self, discipline_data: dict):
        return self._call("addDisciplinePoint", "Failed to add discipline points",
                          [("teacherId", self._user_id())], discipline_data, method="POST")

    def get_discipline_points(self, student_id=None):
        extra = [("studentId", student_id)] if student_id else None
        return self._call("getDisciplinePoints", "Failed to fetch discipline points", extra)
