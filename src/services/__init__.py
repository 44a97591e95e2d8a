"""Business logic services used by handlers.

Services are imported lazily by handlers so that no boto3 resource is
created at import time.
"""

# Do NOT import services here - use lazy loading in handlers instead
