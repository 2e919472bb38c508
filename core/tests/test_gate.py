from django.test import SimpleTestCase

from core import gate
from core.gate import GateDecision
from core.roles import Role

from .fakes import ADMIN, ALICE, session


class GateTests(SimpleTestCase):

    def setUp(self):
        self.rendered = []

    def children(self):
        self.rendered.append(True)
        return {"page": "protected"}

    def test_pending_session_shows_loading_even_with_fallback(self):
        result = gate.render(session(is_loading=True), self.children, fallback={"page": "fallback"})
        self.assertEqual(result, {"gate": "loading", "message": "Loading..."})
        self.assertEqual(self.rendered, [])

    def test_no_principal_needs_login(self):
        self.assertEqual(gate.evaluate(session()), GateDecision.LOGIN_REQUIRED)
        result = gate.render(session(), self.children)
        self.assertEqual(result["message"], "Please log in to continue")
        self.assertEqual(self.rendered, [])

    def test_wrong_role_is_denied(self):
        self.assertEqual(gate.evaluate(session(ALICE), Role.ADMIN), GateDecision.ACCESS_DENIED)
        result = gate.render(session(ALICE), self.children, required_role=Role.ADMIN)
        self.assertEqual(result["message"], "Access denied. Insufficient permissions.")
        self.assertEqual(self.rendered, [])

    def test_unauthenticated_admin_view_renders_fallback(self):
        denied = {"page": "access denied"}
        result = gate.render(session(), self.children, required_role="ADMIN", fallback=denied)
        self.assertIs(result, denied)
        self.assertEqual(self.rendered, [])

    def test_matching_role_renders_children(self):
        result = gate.render(session(ADMIN), self.children, required_role=Role.ADMIN)
        self.assertEqual(result, {"page": "protected"})
        self.assertEqual(self.rendered, [True])

    def test_any_principal_passes_without_required_role(self):
        self.assertEqual(gate.evaluate(session(ALICE)), GateDecision.ALLOWED)
        self.assertEqual(gate.render(session(ALICE), "plain"), "plain")

    def test_unknown_required_role_raises(self):
        with self.assertRaises(ValueError):
            gate.evaluate(session(ADMIN), "SUPERUSER")
