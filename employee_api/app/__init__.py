"""
Application package for the Employee Directory API.

Layers, outermost first:

* ``api``: FastAPI routers mapping HTTP requests to service calls
* ``services``: transactional facade over the repository
* ``repositories``: data access against the SQLite record store
* ``schemas``: Pydantic models shared by every layer
* ``core``: configuration, logging, database and exceptions
"""
