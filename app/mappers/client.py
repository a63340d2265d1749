from app.db.models.client import Client as ClientModel
from app.domain.lookup import Found, LookupResult
from app.schemas.client import Client


class ClientMapper:
    def to_domain(self, client: Client) -> LookupResult[ClientModel]:
        """Build an unsaved client. Clients have no parent, so this always resolves."""
        return Found(
            ClientModel(
                name=client.name,
                date_of_birth=client.date_of_birth,
                address=client.address,
                contact_information=client.contact_information,
            )
        )

    def to_transfer(self, client: ClientModel) -> Client:
        return Client(
            id=client.id,
            name=client.name,
            date_of_birth=client.date_of_birth,
            address=client.address,
            contact_information=client.contact_information,
        )

    def apply(self, client: ClientModel, data: Client) -> ClientModel:
        """Copy the editable fields of ``data`` onto an existing client."""
        client.name = data.name
        client.date_of_birth = data.date_of_birth
        client.address = data.address
        client.contact_information = data.contact_information
        return client
