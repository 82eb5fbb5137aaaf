"""Application services."""

from beanwire.application.services.bean_resolution import BeanResolutionService

__all__ = [
    "BeanResolutionService",
]
