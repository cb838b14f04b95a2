"""PipelinerClient – entry point wiring repositories, server info and transport."""
from __future__ import annotations

from collections.abc import Mapping

from pipeliner_client.adapters.http import HttpxHttpClient, RetryingHttpClient
from pipeliner_client.adapters.rest import RestInfoMethods, RestRepositoryFactory
from pipeliner_client.config.settings import ClientSettings
from pipeliner_client.kernel.errors import UnsupportedVersionError
from pipeliner_client.kernel.model import EARLIEST_VERSION, LATEST_VERSION, Entity, get_entity_types
from pipeliner_client.kernel.ports import InfoMethods, Repository, RepositoryFactory
from pipeliner_client.observability.logging import get_logger

_log = get_logger(__name__)


class PipelinerClient:
    """Access point to the repositories of one team pipeline.

    For the usual configuration use :meth:`create` or :meth:`from_settings`,
    which fetch the pipeline version from the server and pick the entity
    types that version supports::

        client = PipelinerClient.create("https://eu.pipelinersales.com", "eu_myPipeline", token, password)
        accounts = client.get_repository("Account").get(Criteria.limit(10))
    """

    def __init__(
        self,
        entity_types: Mapping[str, str],
        repository_factory: RepositoryFactory,
        info_methods: InfoMethods,
        pipeline_version: int | None = None,
    ) -> None:
        self._entities_to_collections: dict[str, str] = dict(entity_types)
        self._repository_factory = repository_factory
        self._info_methods = info_methods
        self._repositories: dict[str, Repository] = {}
        self._pipeline_version = pipeline_version

    @classmethod
    def create(cls, url: str, pipeline_id: str, api_token: str, password: str) -> "PipelinerClient":
        """Create a client with the default transport.

        Performs a HTTP request to fetch the pipeline version.

        Raises:
            UnsupportedVersionError: the pipeline version is below the supported range.
            PipelinerHttpError: fetching the pipeline version failed.
        """
        return cls.from_settings(
            ClientSettings(url=url, pipeline_id=pipeline_id, api_token=api_token, password=password)
        )

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "PipelinerClient":
        if settings.max_attempts > 1:
            http_client: HttpxHttpClient = RetryingHttpClient(
                user_agent=settings.user_agent,
                timeout=settings.timeout,
                max_attempts=settings.max_attempts,
            )
        else:
            http_client = HttpxHttpClient(user_agent=settings.user_agent, timeout=settings.timeout)
        http_client.set_user_credentials(settings.api_token, settings.password)

        base_url = settings.base_url
        info_methods = RestInfoMethods(base_url, http_client)
        return cls.connect(
            RestRepositoryFactory(base_url, http_client, settings.date_format, settings.default_limit),
            info_methods,
        )

    @classmethod
    def connect(cls, repository_factory: RepositoryFactory, info_methods: InfoMethods) -> "PipelinerClient":
        """Fetch the pipeline version through *info_methods* and build the client."""
        version = info_methods.fetch_team_pipeline_version()
        if version < EARLIEST_VERSION:
            raise UnsupportedVersionError(version, EARLIEST_VERSION, LATEST_VERSION)

        _log.info("pipeliner_client_created", pipeline_version=version)
        return cls(get_entity_types(version), repository_factory, info_methods, pipeline_version=version)

    @property
    def pipeline_version(self) -> int | None:
        return self._pipeline_version

    def get_entity_types(self) -> dict[str, str]:
        """Return the recognised entity names mapped to their collection names."""
        return dict(self._entities_to_collections)

    def get_server_info(self) -> InfoMethods:
        return self._info_methods

    def register_entity_type(self, entity_name: str, collection_name: str) -> None:
        self._entities_to_collections[entity_name] = collection_name

    def get_repository(self, entity: Entity | str) -> Repository:
        """Return the (cached) repository for an entity type.

        *entity* may be an :class:`Entity`, a singular name (``Account``) or a
        collection name (``Accounts``).

        Raises:
            KeyError: the entity type is not known to this pipeline version.
        """
        entity_name = entity.type if isinstance(entity, Entity) else entity
        if entity_name not in self._entities_to_collections:
            entity_name = self._entity_for_collection(entity_name)

        if entity_name not in self._repositories:
            self._repositories[entity_name] = self._repository_factory.create_repository(
                entity_name,
                self._entities_to_collections[entity_name],
            )
        return self._repositories[entity_name]

    def repository_for_collection(self, name: str) -> Repository:
        """Return a repository by camel-case collection name, e.g. ``activityTypes``."""
        return self.get_repository(self._entity_for_collection(name[:1].upper() + name[1:]))

    def _entity_for_collection(self, collection_name: str) -> str:
        for entity_name, plural in self._entities_to_collections.items():
            if plural == collection_name:
                return entity_name
        raise KeyError(f"Unknown entity type or collection: {collection_name}")


__all__ = ["PipelinerClient"]
