from .core.env import Env, get_env, pick

CURRENT_ENVIRONMENT: Env = get_env()

__all__ = ["Env", "get_env", "pick", "CURRENT_ENVIRONMENT"]
