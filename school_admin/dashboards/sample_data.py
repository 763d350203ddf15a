"""Demonstration data shown by the dashboards when the backend has nothing to offer."""
from datetime import date
from typing import Any, Dict, List

SAMPLE_STATS: Dict[str, Any] = {
    "totalStudents": 1247,
    "totalTeachers": 89,
    "totalClasses": 42,
    "attendanceRate": 94.2,
    "averageGrade": 87.5,
    "upcomingEvents": 8,
}

SAMPLE_STUDENTS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Alice Johnson", "email": "alice@email.com", "grade": "10th Grade", "class": "10-A",
     "status": "Active", "phone": "(555) 123-4567", "enrollmentDate": "2024-01-15"},
    {"id": 2, "name": "Bob Smith", "email": "bob@email.com", "grade": "11th Grade", "class": "11-B",
     "status": "Active", "phone": "(555) 234-5678", "enrollmentDate": "2024-01-20"},
    {"id": 3, "name": "Carol Brown", "email": "carol@email.com", "grade": "9th Grade", "class": "9-C",
     "status": "Inactive", "phone": "(555) 345-6789", "enrollmentDate": "2023-09-10"},
]

SAMPLE_TEACHERS: List[Dict[str, Any]] = [
    {"id": 1, "name": "Dr. Sarah Wilson", "email": "sarah.wilson@school.edu", "subject": "Mathematics",
     "department": "Science", "experience": "10 years", "phone": "(555) 123-4567", "status": "Active",
     "classes": ["10-A Math", "11-B Math", "12-A Advanced Math"]},
    {"id": 2, "name": "Mr. James Anderson", "email": "james.anderson@school.edu", "subject": "English Literature",
     "department": "Language Arts", "experience": "8 years", "phone": "(555) 234-5678", "status": "Active",
     "classes": ["9-A English", "10-B English", "11-C English"]},
    {"id": 3, "name": "Ms. Lisa Chen", "email": "lisa.chen@school.edu", "subject": "Chemistry",
     "department": "Science", "experience": "12 years", "phone": "(555) 345-6789", "status": "On Leave",
     "classes": ["11-A Chemistry", "12-B Chemistry"]},
]

SAMPLE_CLASSES: List[Dict[str, Any]] = [
    {"id": 1, "name": "Advanced Mathematics", "code": "MATH-401", "teacher": "Dr. Sarah Wilson",
     "schedule": "Mon, Wed, Fri - 10:00 AM", "room": "Room 201", "students": 28, "capacity": 30,
     "semester": "Fall 2024", "status": "Active"},
    {"id": 2, "name": "English Literature", "code": "ENG-301", "teacher": "Mr. James Anderson",
     "schedule": "Tue, Thu - 2:00 PM", "room": "Room 105", "students": 25, "capacity": 25,
     "semester": "Fall 2024", "status": "Full"},
    {"id": 3, "name": "Organic Chemistry", "code": "CHEM-302", "teacher": "Ms. Lisa Chen",
     "schedule": "Mon, Wed - 1:00 PM", "room": "Lab 3", "students": 20, "capacity": 24,
     "semester": "Fall 2024", "status": "Active"},
]

SAMPLE_GRADES: List[Dict[str, Any]] = [
    {"id": 1, "studentName": "Alice Johnson", "studentId": "STU001", "class": "10-A", "subject": "Mathematics",
     "assignment": "Midterm Exam", "grade": 92, "maxGrade": 100, "percentage": 92, "letterGrade": "A",
     "date": "2024-01-15", "trend": "up"},
    {"id": 2, "studentName": "Bob Smith", "studentId": "STU002", "class": "10-A", "subject": "Mathematics",
     "assignment": "Midterm Exam", "grade": 78, "maxGrade": 100, "percentage": 78, "letterGrade": "B+",
     "date": "2024-01-15", "trend": "stable"},
    {"id": 3, "studentName": "Carol Brown", "studentId": "STU003", "class": "10-A", "subject": "Mathematics",
     "assignment": "Midterm Exam", "grade": 85, "maxGrade": 100, "percentage": 85, "letterGrade": "B",
     "date": "2024-01-15", "trend": "up"},
]


def sample_attendance(day: date = None) -> List[Dict[str, Any]]:
    day_text = (day or date.today()).isoformat()
    return [
        {"id": 1, "studentName": "Alice Johnson", "studentId": "STU001", "class": "10-A", "subject": "Mathematics",
         "status": "Present", "time": "09:00 AM", "date": day_text},
        {"id": 2, "studentName": "Bob Smith", "studentId": "STU002", "class": "10-A", "subject": "Mathematics",
         "status": "Absent", "time": "09:00 AM", "date": day_text},
        {"id": 3, "studentName": "Carol Brown", "studentId": "STU003", "class": "10-A", "subject": "Mathematics",
         "status": "Late", "time": "09:15 AM", "date": day_text},
    ]


RECENT_ACTIVITY: List[Dict[str, str]] = [
    {"activity": "New student enrollment", "time": "2 hours ago", "type": "enrollment"},
    {"activity": "Math exam results published", "time": "4 hours ago", "type": "grades"},
    {"activity": "Parent-teacher meeting scheduled", "time": "1 day ago", "type": "meeting"},
    {"activity": "New teacher joined Science dept", "time": "2 days ago", "type": "staff"},
]
