# Routers package
from .add_property import router as add_property_router
