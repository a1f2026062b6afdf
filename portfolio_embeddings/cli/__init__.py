"""Command-line tools for portfolio-embeddings.

- ``create-embeddings build`` - rebuild ``vector-database.json``
- ``create-embeddings stats`` - inspect an existing vector database
- ``create-embeddings chunks`` - list the knowledge chunks

Heavy imports (httpx provider, pipeline) are deferred inside the handlers
so ``--help`` and ``chunks`` start instantly.
"""
