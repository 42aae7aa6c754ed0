"""AI provider abstraction and the translation gateway."""
from .base import AIProvider
from .gateway import AIGateway, build_provider

__all__ = ["AIProvider", "AIGateway", "build_provider"]
