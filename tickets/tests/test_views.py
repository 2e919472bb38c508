from django.test import TestCase

from core.tests.helpers import DeskClientMixin, make_user
from tickets.models import Ticket


class TicketViewTests(DeskClientMixin, TestCase):

    def setUp(self):
        self.admin = make_user("Ada Admin", "ada@example.com", role="ADMIN")
        self.alice = make_user("Alice Smith", "alice@example.com")
        self.bob = make_user("Bob Jones", "bob@example.com")
        self.first = Ticket.objects.create(
            creator=self.alice, title="Printer jammed", description="Paper stuck in tray 2",
            category="Hardware", priority="HIGH",
        )
        self.second = Ticket.objects.create(
            creator=self.bob, title="VPN drops", description="Disconnects every hour",
            category="Network", status="CLOSED",
        )

    def test_list_requires_login(self):
        r = self.client.get("/tickets/list/")
        self.assertEqual(r.status_code, 401)
        self.assertEqual(r.json()["gate"], "login_required")

    def test_end_user_sees_own_tickets_without_controls(self):
        self.login(self.alice)
        data = self.client.get("/tickets/list/").json()
        self.assertEqual(data["state"], "loaded")
        self.assertEqual([t["id"] for t in data["items"]], [self.first.id])
        self.assertNotIn("controls", data)
        row = data["items"][0]
        self.assertEqual(row["creator"]["name"], "Alice Smith")
        self.assertEqual(row["priority_badge"]["label"], "High")
        self.assertIsNone(row["assignee"])

    def test_admin_sees_all_tickets_with_controls(self):
        self.login(self.admin)
        data = self.client.get("/tickets/list/").json()
        self.assertEqual(sorted(t["id"] for t in data["items"]), sorted([self.first.id, self.second.id]))
        assignees = data["controls"]["assignees"]
        self.assertEqual(assignees[0]["value"], "")
        self.assertEqual(assignees[1], {"value": str(self.admin.id), "label": "Ada Admin"})

    def test_user_without_tickets_gets_empty_state(self):
        carol = make_user("Carol", "carol@example.com")
        self.login(carol)
        data = self.client.get("/tickets/list/", {"q": "printer"}).json()
        self.assertEqual(data["state"], "empty")
        self.assertEqual(data["message"], "No tickets found. Create your first ticket to get started.")

    def test_query_without_matches(self):
        self.login(self.admin)
        data = self.client.get("/tickets/list/", {"q": "zzz"}).json()
        self.assertEqual(data["state"], "no_match")
        self.assertEqual(data["query"], "zzz")
        self.assertEqual(data["items"], [])

    def test_query_matches_creator_name(self):
        self.login(self.admin)
        data = self.client.get("/tickets/list/", {"q": "bob"}).json()
        self.assertEqual([t["id"] for t in data["items"]], [self.second.id])

    def test_admin_changes_status(self):
        self.login(self.admin)
        r = self.put_json("/tickets/update-status/", {"ticket_id": self.first.id, "status": "IN_PROGRESS"})
        self.assertEqual(r.status_code, 200)
        data = r.json()
        self.assertTrue(data["updated"])
        statuses = {t["id"]: t["status"] for t in data["items"]}
        self.assertEqual(statuses, {self.first.id: "IN_PROGRESS", self.second.id: "CLOSED"})
        self.first.refresh_from_db()
        self.assertEqual(self.first.status, "IN_PROGRESS")

    def test_invalid_status_keeps_list(self):
        self.login(self.admin)
        r = self.put_json("/tickets/update-status/", {"ticket_id": self.first.id, "status": "DONE"})
        self.assertEqual(r.status_code, 400)
        data = r.json()
        self.assertFalse(data["updated"])
        self.assertEqual(len(data["items"]), 2)
        self.assertEqual([n["severity"] for n in data["notifications"]], ["error"])

    def test_unknown_ticket(self):
        self.login(self.admin)
        r = self.put_json("/tickets/update-status/", {"ticket_id": 9999, "status": "OPEN"})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["notifications"][0]["detail"], "Ticket not found")

    def test_end_user_cannot_change_status(self):
        self.login(self.alice)
        r = self.put_json("/tickets/update-status/", {"ticket_id": self.first.id, "status": "CLOSED"})
        self.assertEqual(r.status_code, 403)
        self.first.refresh_from_db()
        self.assertEqual(self.first.status, "OPEN")

    def test_status_fields_required(self):
        self.login(self.admin)
        r = self.put_json("/tickets/update-status/", {"ticket_id": self.first.id})
        self.assertEqual(r.status_code, 400)

    def test_assign_and_unassign(self):
        self.login(self.admin)
        r = self.put_json("/tickets/assign/", {"ticket_id": self.first.id, "assignee_id": str(self.admin.id)})
        self.assertEqual(r.status_code, 200)
        row = next(t for t in r.json()["items"] if t["id"] == self.first.id)
        self.assertEqual(row["assignee"]["name"], "Ada Admin")
        self.assertEqual(row["assignee_value"], str(self.admin.id))

        r = self.put_json("/tickets/assign/", {"ticket_id": self.first.id, "assignee_id": ""})
        self.assertEqual(r.status_code, 200)
        self.first.refresh_from_db()
        self.assertIsNone(self.first.assignee)

    def test_assign_requires_sentinel_not_null(self):
        self.login(self.admin)
        r = self.put_json("/tickets/assign/", {"ticket_id": self.first.id, "assignee_id": None})
        self.assertEqual(r.status_code, 400)
        self.assertFalse(r.json()["updated"])

    def test_assign_missing_field(self):
        self.login(self.admin)
        r = self.put_json("/tickets/assign/", {"ticket_id": self.first.id})
        self.assertEqual(r.status_code, 400)

    def test_create_ticket(self):
        self.login(self.alice)
        r = self.post_json("/tickets/create/", {
            "title": "Need Photoshop", "description": "Licence for design work",
            "priority": "LOW", "category": "Software",
        })
        self.assertEqual(r.status_code, 201)
        ticket = Ticket.objects.get(id=r.json()["ticket_id"])
        self.assertEqual(ticket.creator, self.alice)
        self.assertEqual(ticket.status, "OPEN")

    def test_create_ticket_validates_priority(self):
        self.login(self.alice)
        r = self.post_json("/tickets/create/", {"title": "x", "description": "y", "priority": "ASAP"})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["notifications"][0]["message"], "Failed to update ticket")

    def test_create_ticket_rejects_non_object_body(self):
        self.login(self.alice)
        r = self.post_json("/tickets/create/", [])
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json(), {"error": "Invalid JSON"})

    def test_create_ticket_rejects_wrongly_typed_fields(self):
        self.login(self.alice)
        r = self.post_json("/tickets/create/", {"title": 5, "description": "x"})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(r.json()["error"], "title must be a string")

        r = self.post_json("/tickets/create/", {"title": "x", "description": "y", "priority": ["LOW"]})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(Ticket.objects.filter(creator=self.alice).count(), 1)

    def test_update_status_rejects_non_object_body(self):
        self.login(self.admin)
        r = self.put_json("/tickets/update-status/", ["OPEN"])
        self.assertEqual(r.status_code, 400)

    def test_update_status_with_list_status_keeps_ticket(self):
        self.login(self.admin)
        r = self.put_json("/tickets/update-status/", {"ticket_id": self.first.id, "status": ["CLOSED"]})
        self.assertEqual(r.status_code, 400)
        self.assertFalse(r.json()["updated"])
        self.first.refresh_from_db()
        self.assertEqual(self.first.status, "OPEN")

    def test_search_endpoint(self):
        self.login(self.admin)
        self.assertEqual(self.client.get("/tickets/search/", {"q": ""}).json()["tickets"], [])
        data = self.client.get("/tickets/search/", {"q": "tray"}).json()
        self.assertEqual([t["id"] for t in data["tickets"]], [self.first.id])

    def test_search_is_admin_only(self):
        self.login(self.alice)
        self.assertEqual(self.client.get("/tickets/search/", {"q": "vpn"}).status_code, 403)
