from .config import ReadinessConfig as ReadinessConfig
from .env import Env as Env
from .load_env import load_env as load_env
