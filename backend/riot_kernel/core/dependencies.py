"""Core dependencies for FastAPI application."""

from typing import Annotated

from fastapi import Depends, Request

from .config import get_global_settings
from .exceptions import PipelineUnavailableError
from .platforms import PlatformRegistry, PlatformResolver
from .riot_api.pipeline import DataPipeline


def get_platform_registry() -> PlatformRegistry:
    """Get the platform registry for the configured default platform."""
    return PlatformRegistry.from_settings(get_global_settings())


def get_platform_resolver(
    registry: Annotated[PlatformRegistry, Depends(get_platform_registry)],
) -> PlatformResolver:
    """Get platform resolver instance."""
    return PlatformResolver(registry)


def get_data_pipeline(request: Request) -> DataPipeline:
    """Get the retrieval pipeline opened by the application lifespan."""
    pipeline = getattr(request.app.state, "pipeline", None)
    if pipeline is None:
        raise PipelineUnavailableError()
    return pipeline


# Type aliases for cleaner dependency injection
PlatformResolverDep = Annotated[PlatformResolver, Depends(get_platform_resolver)]
DataPipelineDep = Annotated[DataPipeline, Depends(get_data_pipeline)]

__all__ = [
    "get_platform_registry",
    "get_platform_resolver",
    "get_data_pipeline",
    "PlatformResolverDep",
    "DataPipelineDep",
]
