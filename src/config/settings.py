# ============================================================
# 📦 src/config/settings.py
# ============================================================

import os
from dotenv import load_dotenv

load_dotenv()


# =====================================================
# 🌍 Geografia
# =====================================================
EARTH_RADIUS_KM = 6371.0  # raio médio da Terra em km

# Raio operacional do entregador (pedidos fora dele não aparecem)
COURIER_OPERATIONAL_RADIUS_KM = float(os.getenv("COURIER_OPERATIONAL_RADIUS_KM", "15"))

# Filtro "entrega rápida" do catálogo
FAST_DELIVERY_MAX_KM = float(os.getenv("FAST_DELIVERY_MAX_KM", "5"))


# =====================================================
# 💰 Taxas padrão da plataforma
# =====================================================
PLATFORM_BASE_FEE = float(os.getenv("PLATFORM_BASE_FEE", "5.00"))
PLATFORM_PER_KM_FEE = float(os.getenv("PLATFORM_PER_KM_FEE", "1.50"))
OWN_DELIVERY_DEFAULT_FEE = 0.0


# =====================================================
# 🔎 Busca
# =====================================================
ALL_CATEGORIES = "Tudo"


# =====================================================
# 🚀 API
# =====================================================
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
