"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from room_reservation.platform.database.orm_db_setting import Database
from room_reservation.platform.database.unit_of_work import SERIALIZABLE, SqlAlchemyUnitOfWork


class Container(containers.DeclarativeContainer):
    # Database (event-loop-aware engine behind a session context manager)
    database = providers.Singleton(Database)

    # Units of work are per request: a fresh session every resolution
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork,
        session_factory=database.provided.session,
    )

    # Read-check-write sequences (approve, cancel) run serializable
    serializable_unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork,
        session_factory=database.provided.session,
        isolation_level=SERIALIZABLE,
    )


container = Container()
