"""
Backend API - Agregar Propiedades
Formulario que envía la propiedad al servicio REST y redirige a la raíz
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import configure_logging, load_client_config
from routers import add_property_router
from services.time_service import get_local_now

configure_logging()

# Crear aplicación FastAPI
app = FastAPI(title="Add Property API", version="1.0.0")

# Configurar CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Registrar routers
app.include_router(add_property_router)

print(f"✅ Properties service: {load_client_config().properties_url}")


@app.get("/")
async def root():
    """Endpoint raíz, destino de la redirección tras crear una propiedad"""
    return {"message": "Add Property API is running", "timestamp": get_local_now(), "version": "1.0.0"}


@app.get("/health")
async def health():
    """Endpoint de healthcheck para Docker"""
    return {"status": "healthy", "timestamp": get_local_now()}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
