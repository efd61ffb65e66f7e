"""FastAPI dependency injection for estimation services."""

from typing import Annotated

from fastapi import Depends

from paintquote.application.factory import ServiceFactory


def get_service_factory() -> ServiceFactory:
    """Get a ServiceFactory, and with it a calculation cache, for one request."""
    return ServiceFactory()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
