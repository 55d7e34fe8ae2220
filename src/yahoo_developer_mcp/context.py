"""Application context: the process-wide services, wired once at startup."""

from dataclasses import dataclass

from .config import AppConfig
from .core.pagination import PaginationStore
from .core.repository import YahooMapRepository
from .core.yahoo import YahooMapClient
from .protocol.dispatcher import MethodDispatcher, create_dispatcher
from .tools.geocoding import GeocodeTool, ReverseGeocodeTool
from .tools.registry import ToolRegistry
from .tools.search import LocalSearchTool


@dataclass
class AppContext:
    """Shared services handed to both transports."""

    config: AppConfig
    store: PaginationStore
    repository: YahooMapRepository
    local_search: LocalSearchTool
    geocode: GeocodeTool
    reverse_geocode: ReverseGeocodeTool
    registry: ToolRegistry
    dispatcher: MethodDispatcher

    @classmethod
    def create(
        cls,
        config: AppConfig | None = None,
        repository: YahooMapRepository | None = None,
        store: PaginationStore | None = None,
    ) -> "AppContext":
        """Factory to create the context with all services wired together.

        Args:
            config: Runtime configuration (defaults to AppConfig.from_env())
            repository: Optional repository override (e.g. a mock in tests)
            store: Optional pagination store override (e.g. with a fake clock)
        """
        # An empty PaginationStore is falsy
        if config is None:
            config = AppConfig.from_env()
        if store is None:
            store = PaginationStore(ttl_seconds=config.paging_ttl_seconds)
        if repository is None:
            repository = YahooMapRepository(YahooMapClient(config.yahoo_base_url))

        local_search = LocalSearchTool(repository, store)
        geocode = GeocodeTool(repository)
        reverse_geocode = ReverseGeocodeTool(repository)
        registry = ToolRegistry([local_search, geocode, reverse_geocode])

        return cls(
            config=config,
            store=store,
            repository=repository,
            local_search=local_search,
            geocode=geocode,
            reverse_geocode=reverse_geocode,
            registry=registry,
            dispatcher=create_dispatcher(registry),
        )

    async def aclose(self) -> None:
        await self.repository.close()
