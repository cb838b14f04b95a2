"""Kernel ports – interfaces implemented by adapters."""
from pipeliner_client.kernel.ports.http import HttpClient
from pipeliner_client.kernel.ports.info import InfoMethods
from pipeliner_client.kernel.ports.repository import PageFetcher, Repository, RepositoryFactory

__all__ = ["HttpClient", "InfoMethods", "PageFetcher", "Repository", "RepositoryFactory"]
