#chegoou_engine/src/geo_matching/api/routes.py

# ============================================================
# 📦 geo_matching/api/routes.py: CEP e geocodificação
# ============================================================

from fastapi import APIRouter, HTTPException

from geo_matching.domain.geocoding_payloads import limpar_cep, resolve_address_coordinate
from marketplace_api.api.schemas import AddressFromCepRequest, ResolveCoordinateRequest

router = APIRouter()


# ============================================================
# 📮 POST /geo/address-from-cep
# ============================================================
@router.post("/address-from-cep")
def endereco_por_cep(payload: AddressFromCepRequest):
    if limpar_cep(payload.viacep.cep) is None and not payload.viacep.erro:
        raise HTTPException(status_code=422, detail="CEP inválido.")

    address = payload.viacep.to_address(number=payload.number)
    if address is None:
        raise HTTPException(status_code=404, detail="CEP não encontrado.")

    return {
        "address": address.model_dump(),
        "geocoding_query": address.geocoding_query(),
    }


# ============================================================
# 🗺️ POST /geo/coordinate
# ============================================================
@router.post("/coordinate")
def resolver_coordenada(payload: ResolveCoordinateRequest):
    coord = resolve_address_coordinate(payload.address, payload.geocoder)
    return {
        "coordinate": (
            {"latitude": coord.latitude, "longitude": coord.longitude} if coord else None
        ),
        "geocoding_query": payload.address.geocoding_query(),
    }
