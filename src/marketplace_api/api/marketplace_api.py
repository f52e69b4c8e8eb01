# ==========================================================
# 📦 src/marketplace_api/api/marketplace_api.py
# ==========================================================

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from catalog_search.api.routes import router as catalog_router
from config.settings import API_HOST, API_PORT
from courier_dispatch.api.routes import router as dispatch_router
from geo_matching.api.routes import router as geo_router
from order_pricing.api.routes import router as pricing_router

app = FastAPI(
    title="Chegoou Marketplace Engine API",
    description="Busca, frete/totais e despacho de pedidos (cálculo puro, sem estado)",
    version="1.0.0",
    openapi_url="/openapi.json",
    docs_url="/docs",
)

# ==========================================================
# 🌍 CORS
# ==========================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ==========================================================
# 🔀 Rotas principais
# ==========================================================
app.include_router(catalog_router, prefix="/catalog", tags=["Catálogo"])
app.include_router(pricing_router, prefix="/pricing", tags=["Precificação"])
app.include_router(dispatch_router, prefix="/dispatch", tags=["Despacho"])
app.include_router(geo_router, prefix="/geo", tags=["Geolocalização"])


# ==========================================================
# 🩺 Health check
# ==========================================================
@app.get("/", tags=["Status"])
def root():
    return {"status": "Chegoou Marketplace Engine API online 🚀"}


# ==========================================================
# 🚀 Execução standalone (dev)
# ==========================================================
if __name__ == "__main__":
    uvicorn.run("marketplace_api.api.marketplace_api:app", host=API_HOST, port=API_PORT)
