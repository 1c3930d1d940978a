from dishka import AsyncContainer, from_context, make_async_container

from seodex.config import Config
from seodex.domain.indexable.util.di import IndexableProvider
from seodex.domain.taxonomy.util.di import TaxonomyProvider
from seodex.infrastructure.persistence.di import PersistenceProvider
from seodex.util.di.base import Provider
from seodex.util.di.scope import Scope


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()

    return make_async_container(
        ConfigProvider(),
        PersistenceProvider(),
        IndexableProvider(),
        TaxonomyProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
