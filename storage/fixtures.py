# storage/fixtures.py

"""
Seed data written to the local mock store the first time it is opened.

Gives a fresh install something to look at: one class group with two students, a pending and a
resolved intervention, a favorite resource, an unscheduled quick note and a meeting for today.
"""

from __future__ import annotations

import datetime

from models.quick_note import NOTE_COLORS


def build_seed_data(owner_id: str, now: datetime.datetime | None = None) -> dict:
    now = now or datetime.datetime.now()
    yesterday = now - datetime.timedelta(days=1)

    return {
        "classes": [
            {
                "id": "c1",
                "owner_id": owner_id,
                "name": "3º ESO B",
                "subject": "Matemáticas",
                "created_at": now.isoformat(),
            },
        ],
        "students": [
            {
                "id": "s1",
                "owner_id": owner_id,
                "first_name": "Alex",
                "last_name": "García",
                "contact_info": "madre@test.com",
                "special_needs": ["adhd"],
                "groups": ["c1"],
                "created_at": now.isoformat(),
            },
            {
                "id": "s2",
                "owner_id": owner_id,
                "first_name": "María",
                "last_name": "Lopez",
                "contact_info": "600123456",
                "special_needs": [],
                "groups": ["c1"],
                "created_at": now.isoformat(),
            },
        ],
        "grades": [],
        "interventions": [
            {
                "id": "i1",
                "owner_id": owner_id,
                "student_id": "s1",
                "student_name": "Alex García",
                "type": "behavior",
                "description": "Interrupción constante en clase de Mates.",
                "status": "pending",
                "date": now.isoformat(),
            },
            {
                "id": "i2",
                "owner_id": owner_id,
                "student_id": "s2",
                "student_name": "María Lopez",
                "type": "positive",
                "description": "Gran mejora en el examen de Historia.",
                "status": "resolved",
                "date": yesterday.isoformat(),
            },
        ],
        "follow_ups": [],
        "resources": [
            {
                "id": "r1",
                "owner_id": owner_id,
                "title": "Exámenes Past Years",
                "url": "https://google.com",
                "category": "Matemáticas",
                "tags": ["PDF", "Examen"],
                "is_favorite": True,
            },
        ],
        "quick_notes": [
            {
                "id": "n1",
                "owner_id": owner_id,
                "content": "Reunión evaluación martes 15:00",
                "color": NOTE_COLORS["yellow"],
                "is_archived": False,
                "created_at": now.isoformat(),
            },
        ],
        "events": [
            {
                "id": "e1",
                "owner_id": owner_id,
                "title": "Claustro Profesores",
                "date": now.replace(second=0, microsecond=0).isoformat(),
                "type": "meeting",
            },
        ],
    }
