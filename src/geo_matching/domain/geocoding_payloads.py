#chegoou_engine/src/geo_matching/domain/geocoding_payloads.py

# ============================================================
# 🌐 Payloads externos (ViaCEP, Google Geocoder, linhas do banco)
# ============================================================
# - tudo que vem de fora é validado aqui
# - convertido IMEDIATAMENTE para Coordinate
# - a lógica de domínio nunca vê dict sem tipo
# ============================================================

import re
from typing import List, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from geo_matching.domain.entities import Coordinate


def limpar_cep(cep: Optional[str]) -> Optional[str]:
    """Remove caracteres não numéricos. Retorna None se não tiver 8 dígitos."""
    if not cep:
        return None
    cep = re.sub(r"[^0-9]", "", str(cep))
    if len(cep) != 8 or cep == "00000000":
        return None
    return cep


# ============================================================
# 🏠 Endereço (linha do banco / cadastro do usuário)
# ============================================================
class AddressPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    street: str = ""
    number: str = ""
    neighborhood: str = ""
    city: str = ""
    zip_code: str = Field(default="", alias="zipCode")
    lat: Optional[float] = None
    lng: Optional[float] = None
    name: Optional[str] = None

    def to_coordinate(self) -> Optional[Coordinate]:
        if self.lat is None or self.lng is None:
            return None
        return Coordinate(latitude=self.lat, longitude=self.lng)

    def geocoding_query(self) -> str:
        """Texto enviado ao geocoder quando não há lat/lng."""
        partes = [p for p in (self.street, self.number, self.neighborhood, self.city) if p]
        return ", ".join(partes + ["Brasil"])


# ============================================================
# 📮 ViaCEP
# ============================================================
class ViaCepResponse(BaseModel):
    cep: Optional[str] = None
    logradouro: str = ""
    bairro: str = ""
    localidade: str = ""
    uf: str = ""
    erro: bool = False

    def to_address(self, number: str = "") -> Optional[AddressPayload]:
        if self.erro:
            logger.warning(f"⚠️ CEP não encontrado no ViaCEP: {self.cep}")
            return None
        return AddressPayload(
            street=self.logradouro,
            number=number,
            neighborhood=self.bairro,
            city=self.localidade,
            zip_code=limpar_cep(self.cep) or "",
        )


# ============================================================
# 🗺️ Google Geocoder
# ============================================================
class GeocoderLocation(BaseModel):
    lat: float
    lng: float


class GeocoderGeometry(BaseModel):
    location: GeocoderLocation


class GeocoderResult(BaseModel):
    formatted_address: str = ""
    geometry: GeocoderGeometry


class GeocoderResponse(BaseModel):
    status: str
    results: List[GeocoderResult] = []

    def first_coordinate(self) -> Optional[Coordinate]:
        if self.status != "OK" or not self.results:
            logger.warning(f"⚠️ Geocoder sem resultado (status={self.status})")
            return None
        loc = self.results[0].geometry.location
        return Coordinate(latitude=loc.lat, longitude=loc.lng)


# ============================================================
# 📍 Endereço → coordenada
# ============================================================
def resolve_address_coordinate(
    address: AddressPayload,
    geocoded: Optional[GeocoderResponse] = None,
) -> Optional[Coordinate]:
    """
    lat/lng gravados no endereço têm prioridade; sem eles, usa o primeiro
    resultado do geocoder. None quando nenhum dos dois resolve.
    """
    coord = address.to_coordinate()
    if coord is not None:
        return coord
    if geocoded is None:
        logger.debug(f"🔍 Endereço sem coordenadas: {address.geocoding_query()}")
        return None
    return geocoded.first_coordinate()
