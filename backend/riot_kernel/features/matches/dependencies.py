"""Dependencies for the matches feature."""

from typing import Annotated

from fastapi import Depends

from riot_kernel.core.dependencies import DataPipelineDep, PlatformResolverDep

from .gateway import MatchGateway


async def get_match_gateway(
    resolver: PlatformResolverDep,
    pipeline: DataPipelineDep,
) -> MatchGateway:
    """Get match gateway instance.

    :param resolver: Platform resolver
    :param pipeline: Retrieval pipeline
    :returns: Match gateway
    """
    return MatchGateway(resolver, pipeline)


# Type aliases for cleaner dependency injection
MatchGatewayDep = Annotated[MatchGateway, Depends(get_match_gateway)]

__all__ = ["get_match_gateway", "MatchGatewayDep"]
