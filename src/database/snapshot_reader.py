#chegoou_engine/src/database/snapshot_reader.py

# ============================================================
# 📥 Leitura de snapshot exportado do banco externo (JSON)
# ============================================================
# Formato:
# {
#   "restaurants": [...RestaurantSchema],
#   "products":    [...ProductSchema],
#   "orders":      [...DispatchOrderSchema]
# }
# ============================================================

import json
from pathlib import Path
from typing import List

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from catalog_search.domain.entities import Restaurant
from courier_dispatch.domain.entities import DispatchableOrder
from marketplace_api.api.schemas import DispatchOrderSchema, ProductSchema, RestaurantSchema
from order_pricing.domain.entities import Product


class SnapshotReader:

    def __init__(self, path: str):
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"❌ Snapshot não encontrado: {self.path}")

        with open(self.path, "r", encoding="utf-8") as f:
            self.raw = json.load(f)

        logger.debug(f"📂 Snapshot carregado: {self.path}")

    def _carregar(self, chave: str, schema):
        itens = self.raw.get(chave, [])
        try:
            validados = TypeAdapter(List[schema]).validate_python(itens)
        except ValidationError as e:
            logger.error(f"❌ Snapshot inválido em '{chave}': {e}")
            raise
        logger.info(f"📦 {len(validados)} registro(s) em '{chave}'")
        return [v.to_domain() for v in validados]

    def restaurants(self) -> List[Restaurant]:
        return self._carregar("restaurants", RestaurantSchema)

    def products(self) -> List[Product]:
        return self._carregar("products", ProductSchema)

    def orders(self) -> List[DispatchableOrder]:
        return self._carregar("orders", DispatchOrderSchema)
