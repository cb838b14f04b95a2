"""HTTP adapter – synchronous httpx transport and response wrappers."""
from pipeliner_client.adapters.http.response import CreatedResponse, Response
from pipeliner_client.adapters.http.client import HttpClient, HttpxHttpClient
from pipeliner_client.adapters.http.retry_client import RetryingHttpClient

__all__ = ["CreatedResponse", "HttpClient", "HttpxHttpClient", "Response", "RetryingHttpClient"]
