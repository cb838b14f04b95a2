"""Application pagination – page ranges, immutable pages and the range iterator."""
from pipeliner_client.application.pagination.page_range import EMPTY_END_INDEX, PageRange
from pipeliner_client.application.pagination.collection import EntityCollection
from pipeliner_client.application.pagination.iterator import EntityCollectionIterator

__all__ = ["EMPTY_END_INDEX", "EntityCollection", "EntityCollectionIterator", "PageRange"]
