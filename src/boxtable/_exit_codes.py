"""Semantic exit codes and HTTP status constants."""

SUCCESS = 0
ERROR = 1
NOT_FOUND = 2
INVALID_INPUT = 4
NO_VISIBLE_COLUMNS = 5

# HTTP status codes
HTTP_NOT_FOUND = 404
