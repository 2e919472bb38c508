from django.test import SimpleTestCase

from core.listing import AssetListView, TicketListView, UserListView
from core.mutations import MutationFlow
from core.notifications import Notifier

from .fakes import ADMIN, ALICE, FakeBackend, ticket


class TicketMutationTests(SimpleTestCase):

    def setUp(self):
        self.notifier = Notifier()
        self.backend = FakeBackend(tickets=[ticket(1, status="OPEN"), ticket(2, status="CLOSED")])

    async def test_status_change_refetches_whole_list(self):
        async with TicketListView(self.backend, self.notifier, ADMIN) as view:
            updated = await MutationFlow(view, self.notifier).change_ticket_status(1, "IN_PROGRESS")
            statuses = [(t["id"], t["status"]) for t in view.render()["items"]]

        self.assertTrue(updated)
        self.assertEqual(statuses, [(1, "IN_PROGRESS"), (2, "CLOSED")])
        self.assertEqual(
            [c for c in self.backend.call_names() if c != "fetch_assignees"],
            ["fetch_tickets", "update_ticket_status", "fetch_tickets"],
        )
        self.assertEqual([n.message for n in self.notifier.items], ["Ticket updated successfully"])

    async def test_same_status_twice_matches_once(self):
        async with TicketListView(self.backend, self.notifier, ADMIN) as view:
            flow = MutationFlow(view, self.notifier)
            await flow.change_ticket_status(1, "RESOLVED")
            once = view.render()["items"]
            await flow.change_ticket_status(1, "RESOLVED")
            twice = view.render()["items"]

        self.assertEqual(
            [(t["id"], t["status"]) for t in once],
            [(t["id"], t["status"]) for t in twice],
        )

    async def test_failed_mutation_keeps_prior_state_and_notifies_once(self):
        async with TicketListView(self.backend, self.notifier, ADMIN) as view:
            before = view.items
            with self.assertLogs("core.mutations", level="ERROR"):
                updated = await MutationFlow(view, self.notifier).change_ticket_status(1, "BOGUS")
            after = view.items

        self.assertFalse(updated)
        self.assertEqual(before, after)
        self.assertEqual(self.backend.call_names().count("fetch_tickets"), 1)
        self.assertEqual(len(self.notifier), 1)
        note = self.notifier.items[0]
        self.assertEqual(note.severity.value, "error")
        self.assertEqual(note.message, "Failed to update ticket")
        self.assertIn("BOGUS", note.detail)

    async def test_unassign_passes_empty_string_sentinel(self):
        self.backend.tickets[0]["assignee"] = {"id": ADMIN.id, "name": ADMIN.name, "email": ADMIN.email}
        async with TicketListView(self.backend, self.notifier, ADMIN) as view:
            await MutationFlow(view, self.notifier).assign_ticket(1, "")
            row = view.render()["items"][0]

        self.assertIn(("assign_ticket", 1, ""), self.backend.calls)
        self.assertIsNone(row["assignee"])
        self.assertEqual(row["assignee_value"], "")

    async def test_end_user_cannot_mutate(self):
        async with TicketListView(self.backend, self.notifier, ALICE) as view:
            with self.assertLogs("core.mutations", level="ERROR"):
                updated = await MutationFlow(view, self.notifier).change_ticket_status(1, "CLOSED")

        self.assertFalse(updated)
        self.assertNotIn("update_ticket_status", self.backend.call_names())
        self.assertEqual(self.backend.tickets[0]["status"], "OPEN")
        self.assertEqual(self.notifier.items[0].detail, "Administrator role required")


class UserAndAssetMutationTests(SimpleTestCase):

    def setUp(self):
        self.notifier = Notifier()
        self.backend = FakeBackend(
            users=[{"id": 2, "name": "Alice Smith", "email": "alice@example.com", "role": "END_USER",
                    "created_at": None, "ticket_count": 0, "asset_count": 0}],
            assets=[{"id": 5, "name": "Laptop", "asset_type": "Computer", "serial_number": "SN-5",
                     "status": "AVAILABLE", "created_at": None, "assignee": None}],
        )

    async def test_role_change_refreshes_user_list(self):
        async with UserListView(self.backend, self.notifier, ADMIN) as view:
            updated = await MutationFlow(view, self.notifier).change_user_role(2, "ADMIN")
            row = view.render()["items"][0]

        self.assertTrue(updated)
        self.assertEqual(row["role"], "ADMIN")
        self.assertEqual(self.backend.call_names(), ["fetch_users", "update_user_role", "fetch_users"])

    async def test_end_user_never_reaches_update_user_role(self):
        async with UserListView(self.backend, self.notifier, ALICE) as view:
            with self.assertLogs("core.mutations", level="ERROR"):
                updated = await MutationFlow(view, self.notifier).change_user_role(2, "ADMIN")

        self.assertFalse(updated)
        self.assertNotIn("update_user_role", self.backend.call_names())
        self.assertEqual(self.notifier.items[0].message, "Failed to update user")

    async def test_assign_asset(self):
        async with AssetListView(self.backend, self.notifier, ADMIN) as view:
            await MutationFlow(view, self.notifier).assign_asset(5, "2")
            row = view.render()["items"][0]

        self.assertEqual(row["status"], "ASSIGNED")
        self.assertEqual(row["status_badge"]["label"], "Assigned")
        self.assertEqual(self.notifier.items[-1].message, "Asset assigned successfully")
