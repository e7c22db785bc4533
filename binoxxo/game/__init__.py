from .session import GameSession

__all__ = ["GameSession"]
