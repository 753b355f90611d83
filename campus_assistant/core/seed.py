"""Sample campus rows loaded into an empty store (first run or scripts/seed_campus_db.py)."""

from typing import Any

SEED_ROWS: dict[str, list[dict[str, Any]]] = {
    "schedules": [
        {
            "title": "Intro to AI - Lecture",
            "location": "Room 101",
            "start": "2025-09-15 10:00",
            "end": "2025-09-15 11:30",
            "details": "Prof. Smith, weekly",
        },
        {
            "title": "Student Council Meeting",
            "location": "Student Center",
            "start": "2025-09-16 16:00",
            "end": "2025-09-16 18:00",
            "details": "Open to all students",
        },
    ],
    "facilities": [
        {
            "name": "Swimming Pool",
            "type": "Recreation",
            "location": "Sports Complex",
            "hours": "06:00-21:00",
            "details": "Membership required",
        },
        {
            "name": "Gym",
            "type": "Recreation",
            "location": "Sports Complex",
            "hours": "05:00-23:00",
            "details": "Free for students",
        },
    ],
    "dining": [
        {
            "name": "Campus Cafe",
            "cuisine": "Cafe",
            "hours": "08:00-20:00",
            "location": "Central Plaza",
            "details": "Coffee, sandwiches, vegetarian options",
        },
        {
            "name": "North Mess",
            "cuisine": "Cafeteria",
            "hours": "07:00-22:00",
            "location": "North Wing",
            "details": "Meal plans accepted",
        },
    ],
    "library": [
        {
            "title": "Introduction to Algorithms",
            "author": "Cormen",
            "call_number": "QA76.6 .C66",
            "status": "available",
        },
        {
            "title": "Artificial Intelligence: A Modern Approach",
            "author": "Russell & Norvig",
            "call_number": "Q335 .R87",
            "status": "checked out",
        },
    ],
    "admin": [
        {
            "office": "Registrar",
            "contact": "registrar@campus.edu",
            "hours": "09:00-17:00",
            "details": "Course registration, transcripts",
        },
        {
            "office": "Financial Aid",
            "contact": "finaid@campus.edu",
            "hours": "09:00-17:00",
            "details": "Scholarship and loan assistance",
        },
    ],
}
