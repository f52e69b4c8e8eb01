# ============================================================
# 📦 src/catalog_search/application/catalog_use_case.py
# ============================================================

import math
from collections import defaultdict
from typing import Iterable, List, Optional

from loguru import logger

from catalog_search.domain.entities import Restaurant, RestaurantListing, SearchableEntity
from catalog_search.domain.fuzzy_matcher import is_match
from config.settings import ALL_CATEGORIES, FAST_DELIVERY_MAX_KM
from geo_matching.domain.entities import Coordinate
from geo_matching.domain.haversine_utils import distance_km, within_radius
from order_pricing.domain.delivery_fee import resolve_delivery_fee
from order_pricing.domain.entities import Product

SPECIAL_FILTERS = {"free", "fast"}


def entity_matches(entity: SearchableEntity, query: str) -> bool:
    return is_match(entity.display_name, query) or is_match(entity.category, query)


def build_listing(restaurant: Restaurant, customer: Optional[Coordinate]) -> RestaurantListing:
    dist = distance_km(customer, restaurant.coordinate)
    fee = None if math.isinf(dist) else resolve_delivery_fee(restaurant.pricing, dist)
    return RestaurantListing(restaurant=restaurant, distance_km=dist, delivery_fee=fee)


class CatalogUseCase:
    """
    Vitrine do cliente:
    - anota distância e frete de cada restaurante
    - mantém só abertos, não suspensos e dentro do raio de entrega
    - filtros especiais (grátis / rápido), categoria e busca fuzzy
    - ordena do mais próximo para o mais distante
    Recalculado por completo a cada mudança de entrada.
    """

    def __init__(self, restaurants: Iterable[Restaurant], products: Iterable[Product] = ()):
        self.restaurants = list(restaurants)
        self.products_by_company = defaultdict(list)
        for p in products:
            self.products_by_company[p.company_id].append(p)

    def _search_hit(self, restaurant: Restaurant, search_term: str) -> bool:
        if entity_matches(restaurant.searchable, search_term):
            return True
        return any(is_match(p.name, search_term) for p in self.products_by_company[restaurant.id])

    def executar(
        self,
        customer: Optional[Coordinate],
        search_term: str = "",
        category: str = ALL_CATEGORIES,
        special_filter: Optional[str] = None,
    ) -> List[RestaurantListing]:

        if customer is None:
            logger.warning("⚠️ Cliente sem endereço selecionado, vitrine vazia.")
            return []

        if special_filter is not None and special_filter not in SPECIAL_FILTERS:
            raise ValueError(f"❌ Filtro especial inválido: {special_filter}")

        resultado = []
        for restaurant in self.restaurants:
            listing = build_listing(restaurant, customer)

            if restaurant.status != "open" or restaurant.is_suspended:
                continue
            # sem localização conhecida → nunca pedível, mesmo com raio infinito
            if not listing.orderable:
                continue
            if not within_radius(listing.distance_km, restaurant.delivery_radius_km):
                continue
            if special_filter == "free" and listing.delivery_fee > 0:
                continue
            if special_filter == "fast" and listing.distance_km > FAST_DELIVERY_MAX_KM:
                continue
            if category and category != ALL_CATEGORIES and restaurant.category != category:
                continue
            if search_term and not self._search_hit(restaurant, search_term):
                continue

            resultado.append(listing)

        resultado.sort(key=lambda l: l.distance_km)

        logger.info(
            f"🏪 Vitrine: {len(resultado)}/{len(self.restaurants)} restaurante(s) "
            f"(busca='{search_term}', categoria='{category}', filtro={special_filter})"
        )
        return resultado
