import reflex as rx

from globpath.config import get_globpath_config

settings = get_globpath_config()


class GlobPathConfig(rx.Config):
    pass


config = GlobPathConfig(
    app_name="globpath",
    env=rx.Env.DEV,
    frontend_port=settings.FRONTEND_PORT,  # Reflex frontend port
    backend_port=settings.BACKEND_PORT,  # Reflex backend port
)
