from .stack import FrontendServiceStack

__all__ = ["FrontendServiceStack"]
