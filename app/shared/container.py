# app/shared/container.py
from dependency_injector import containers, providers

from app.shared.config import settings
from app.core.use_cases.inflect_word import InflectWord


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.
    Connects settings to the use cases the API depends on.
    Wiring happens in `app.main.create_app`.
    """

    # The engine is stateless, so one use-case instance serves every request.
    inflect_word_use_case = providers.Singleton(
        InflectWord,
        max_workers=settings.BULK_MAX_WORKERS,
        max_bulk_words=settings.BULK_MAX_WORDS,
    )


# Global Container Instance
container = Container()
