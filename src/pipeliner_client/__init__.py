"""
pipeliner_client – Python client for the Pipeliner CRM REST API.

Import path convention::

    from pipeliner_client import PipelinerClient
    from pipeliner_client.application.query import Criteria, Filter, Sort
    from pipeliner_client.application.pagination import EntityCollection, EntityCollectionIterator
    from pipeliner_client.kernel.errors import PipelinerClientError
"""

from pipeliner_client.client import PipelinerClient

__version__ = "0.1.0"
__all__ = ["PipelinerClient", "__version__"]
