import json

from users.models import User


def make_user(name, email, role="END_USER", password="secret"):
    user = User(name=name, email=email, role=role)
    user.set_password(password)
    user.save()
    return user


class DeskClientMixin:
    """JSON helpers for the test client."""

    def login(self, user, password="secret"):
        r = self.post_json("/users/login/", {"email": user.email, "password": password})
        self.assertEqual(r.status_code, 200, r.content)
        return r

    def post_json(self, url, body):
        return self.client.post(url, data=json.dumps(body), content_type="application/json")

    def put_json(self, url, body):
        return self.client.put(url, data=json.dumps(body), content_type="application/json")
