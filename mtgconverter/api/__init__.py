from mtgconverter.api.files import router as files_router
from mtgconverter.api.health import router as health_router
from mtgconverter.api.options import router as options_router
from mtgconverter.api.output import router as output_router
from mtgconverter.api.session import router as session_router

__all__ = [
    "files_router",
    "health_router",
    "options_router",
    "output_router",
    "session_router",
]
