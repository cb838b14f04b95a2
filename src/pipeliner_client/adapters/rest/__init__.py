"""REST adapter – repositories and server info over the Pipeliner REST API."""
from pipeliner_client.adapters.rest.repository import RestRepository
from pipeliner_client.adapters.rest.factory import RestRepositoryFactory
from pipeliner_client.adapters.rest.info import RestInfoMethods

__all__ = ["RestInfoMethods", "RestRepository", "RestRepositoryFactory"]
