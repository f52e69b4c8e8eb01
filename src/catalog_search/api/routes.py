#chegoou_engine/src/catalog_search/api/routes.py

# ============================================================
# 📦 catalog_search/api/routes.py: vitrine e busca
# ============================================================

from fastapi import APIRouter, HTTPException
from loguru import logger

from catalog_search.application.catalog_use_case import CatalogUseCase
from catalog_search.domain.fuzzy_matcher import is_match
from marketplace_api.api.json_sanitizer import clean
from marketplace_api.api.schemas import CatalogRequest, MatchRequest

router = APIRouter()


# ============================================================
# 🏪 POST /catalog/restaurants
# ============================================================
@router.post("/restaurants")
def listar_restaurantes(payload: CatalogRequest):
    use_case = CatalogUseCase(
        restaurants=[r.to_domain() for r in payload.restaurants],
        products=[p.to_domain() for p in payload.products],
    )

    try:
        listings = use_case.executar(
            customer=payload.customer.to_domain() if payload.customer else None,
            search_term=payload.search_term,
            category=payload.category,
            special_filter=payload.special_filter,
        )
    except ValueError as e:
        logger.warning(f"⚠️ Requisição de vitrine inválida: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return clean([
        {
            "id": l.restaurant.id,
            "name": l.restaurant.name,
            "category": l.restaurant.category,
            "distance_km": l.distance_km,
            "delivery_fee": l.delivery_fee,
            "orderable": l.orderable,
        }
        for l in listings
    ])


# ============================================================
# 🔎 POST /catalog/match
# ============================================================
@router.post("/match")
def testar_busca(payload: MatchRequest):
    return {"match": is_match(payload.source_text, payload.query)}
