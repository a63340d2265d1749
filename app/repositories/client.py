from app.db.models.client import Client as ClientModel
from app.repositories.base import Repository


class ClientRepository(Repository[ClientModel]):
    model = ClientModel
    entity = "Client"

    def delete(self, client: ClientModel) -> None:
        """Delete a client together with its policies and their claims, in one transaction."""
        for policy in client.policies:
            for claim in policy.claims:
                self.db.delete(claim)
            self.db.delete(policy)
        self.db.delete(client)
        self._commit()
