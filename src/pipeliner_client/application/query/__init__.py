"""Application query – Criteria, Filter and Sort builders."""
from pipeliner_client.application.query.criteria import PARAMETERS, Criteria
from pipeliner_client.application.query.filter import OPERATORS, Filter
from pipeliner_client.application.query.sort import Sort

__all__ = ["OPERATORS", "PARAMETERS", "Criteria", "Filter", "Sort"]
