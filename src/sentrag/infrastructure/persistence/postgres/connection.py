"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool

POOL_NAME = "sentrag"


def create_pool(conninfo: str, min_size: int = 1, max_size: int = 10) -> AsyncConnectionPool:
    """Create the pool closed; PoolLifespanMiddleware opens it on ASGI startup.

    Connections are checked before being handed out, so a database restart
    does not surface as errors on the first requests afterwards.
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        name=POOL_NAME,
        check=AsyncConnectionPool.check_connection,
        open=False,
    )
