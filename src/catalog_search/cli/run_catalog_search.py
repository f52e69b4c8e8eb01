# ============================================================
# 📦 src/catalog_search/cli/run_catalog_search.py
# ============================================================

import argparse
import sys

from loguru import logger

from catalog_search.application.catalog_use_case import CatalogUseCase
from config.settings import ALL_CATEGORIES
from database.snapshot_reader import SnapshotReader
from geo_matching.domain.entities import Coordinate


def main(argv=None):
    parser = argparse.ArgumentParser(description="Vitrine de restaurantes para um endereço de cliente")

    parser.add_argument("--snapshot", type=str, required=True, help="JSON exportado do banco (restaurants/products)")
    parser.add_argument("--lat", type=float, required=True, help="Latitude do endereço de entrega")
    parser.add_argument("--lon", type=float, required=True, help="Longitude do endereço de entrega")
    parser.add_argument("--busca", type=str, default="", help="Texto livre (tolerante a erros de digitação)")
    parser.add_argument("--categoria", type=str, default=ALL_CATEGORIES, help="Categoria (padrão: Tudo)")
    parser.add_argument("--filtro", type=str, default=None, choices=["free", "fast"],
                        help="free = entrega grátis | fast = até 5 km")

    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stdout, colorize=True, format="<green>{time:HH:mm:ss}</green> | <level>{message}</level>")

    try:
        reader = SnapshotReader(args.snapshot)
        use_case = CatalogUseCase(reader.restaurants(), reader.products())
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"❌ Falha ao ler snapshot: {e}")
        sys.exit(1)

    listings = use_case.executar(
        customer=Coordinate(args.lat, args.lon),
        search_term=args.busca,
        category=args.categoria,
        special_filter=args.filtro,
    )

    for l in listings:
        frete = "Entrega Grátis" if l.delivery_fee == 0 else f"R$ {l.delivery_fee:.2f}"
        logger.info(f"🏪 {l.restaurant.name} | {l.restaurant.category} | {l.distance_km:.1f} km | {frete}")

    if not listings:
        logger.warning("⚠️ Nenhum restaurante encontrado.")

    return listings


if __name__ == "__main__":
    main()
