"""
The service calls the list pages, the mutation flow and the dashboard depend on.

``Backend`` is the seam view-models receive; this implementation delegates to
the ORM-backed service functions of each app. Tests substitute their own.
"""
from assets import services as asset_services
from tickets import services as ticket_services
from users import services as user_services


class Backend:

    async def fetch_tickets(self, caller_id, caller_role):
        return await ticket_services.fetch_tickets(caller_id, caller_role)

    async def update_ticket_status(self, ticket_id, status):
        await ticket_services.update_ticket_status(ticket_id, status)

    async def assign_ticket(self, ticket_id, assignee_id):
        await ticket_services.assign_ticket(ticket_id, assignee_id)

    async def search_tickets(self, query):
        return await ticket_services.search_tickets(query)

    async def create_ticket(self, creator_id, **fields):
        return await ticket_services.create_ticket(creator_id, **fields)

    async def fetch_assets(self):
        return await asset_services.fetch_assets()

    async def create_asset(self, **fields):
        return await asset_services.create_asset(**fields)

    async def assign_asset(self, asset_id, assignee_id):
        await asset_services.assign_asset(asset_id, assignee_id)

    async def fetch_users(self):
        return await user_services.fetch_users()

    async def fetch_assignees(self, role=None):
        return await user_services.fetch_assignees(role=role)

    async def update_user_role(self, user_id, role):
        await user_services.update_user_role(user_id, role)

    async def create_user(self, **fields):
        return await user_services.create_user(**fields)
