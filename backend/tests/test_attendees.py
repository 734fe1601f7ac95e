"""Tests for attendee responses (upsert keyed on event + user)."""
from sqlalchemy import func, select

from eventboard.models.attendee import Attendee, AttendeeAnswer
from eventboard.services import attendee_service
from tests.conftest import create_test_user, make_event, make_user


class TestUpsertService:

    def test_insert_then_update_keeps_one_row(self, db):
        organizer = make_user(db, "organizer")
        guest = make_user(db, "guest")
        ev = make_event(db, organizer)

        first = attendee_service.create_or_update(db, ev.id, guest.id, AttendeeAnswer.accepted)
        second = attendee_service.create_or_update(db, ev.id, guest.id, AttendeeAnswer.rejected)

        assert first.id == second.id
        rows = db.scalar(select(func.count(Attendee.id)).where(Attendee.event_id == ev.id))
        assert rows == 1
        assert attendee_service.find_one(db, ev.id, guest.id).answer == AttendeeAnswer.rejected

    def test_find_by_event(self, db):
        organizer = make_user(db, "organizer")
        ev = make_event(db, organizer)
        other = make_event(db, organizer)
        for i in range(3):
            attendee_service.create_or_update(db, ev.id, make_user(db, f"guest{i}").id, AttendeeAnswer.maybe)
        attendee_service.create_or_update(db, other.id, organizer.id, AttendeeAnswer.accepted)

        attendees = attendee_service.find_by_event(db, ev.id)
        assert len(attendees) == 3
        assert {a.answer for a in attendees} == {AttendeeAnswer.maybe}

    def test_find_one_missing(self, db):
        assert attendee_service.find_one(db, 1, 1) is None


class TestAttendanceAPI:

    def _setup(self, client):
        organizer = create_test_user(client, username="organizer")
        guest = create_test_user(client, username="guest")
        event = client.post(f"/api/events/?actor_user_id={organizer['id']}", json={
            "name": "Board games",
            "description": "Monthly board games",
            "address": "Main street 1",
            "when": "2026-10-20T18:00:00",
        }).json()
        return organizer, guest, event

    def test_put_twice_updates_in_place(self, client):
        _, guest, event = self._setup(client)
        url = f"/api/events/{event['id']}/attendees/{guest['id']}"

        first = client.put(url, json={"answer": "accepted"})
        second = client.put(url, json={"answer": "maybe"})
        assert first.status_code == second.status_code == 200
        assert first.json()["id"] == second.json()["id"]

        listing = client.get(f"/api/events/{event['id']}/attendees").json()
        assert len(listing) == 1
        assert listing[0]["answer"] == "maybe"
        assert client.get(url).json()["answer"] == "maybe"

    def test_invalid_answer(self, client):
        _, guest, event = self._setup(client)
        resp = client.put(f"/api/events/{event['id']}/attendees/{guest['id']}", json={"answer": "perhaps"})
        assert resp.status_code == 422

    def test_unknown_event(self, client):
        _, guest, _ = self._setup(client)
        resp = client.put(f"/api/events/9999/attendees/{guest['id']}", json={"answer": "accepted"})
        assert resp.status_code == 404

    def test_unknown_user(self, client):
        _, _, event = self._setup(client)
        resp = client.put(f"/api/events/{event['id']}/attendees/9999", json={"answer": "accepted"})
        assert resp.status_code == 404

    def test_get_attendance_not_found(self, client):
        _, guest, event = self._setup(client)
        resp = client.get(f"/api/events/{event['id']}/attendees/{guest['id']}")
        assert resp.status_code == 404
