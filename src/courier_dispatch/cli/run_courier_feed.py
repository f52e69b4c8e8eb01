# ============================================================
# 📦 src/courier_dispatch/cli/run_courier_feed.py
# ============================================================

import argparse
import sys

from loguru import logger

from config.settings import COURIER_OPERATIONAL_RADIUS_KM
from courier_dispatch.domain.dispatch_filter import eligible_for_courier
from courier_dispatch.reporting.csv_exporter import candidates_to_dataframe, export_courier_feed
from database.snapshot_reader import SnapshotReader
from geo_matching.domain.entities import Coordinate


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Lista pedidos disponíveis para um entregador (mais próximo primeiro)"
    )

    parser.add_argument("--snapshot", type=str, required=True, help="JSON exportado do banco (orders)")
    parser.add_argument("--lat", type=float, required=True, help="Latitude atual do entregador")
    parser.add_argument("--lon", type=float, required=True, help="Longitude atual do entregador")
    parser.add_argument("--raio", type=float, default=COURIER_OPERATIONAL_RADIUS_KM,
                        help="Raio operacional em km")
    parser.add_argument("--csv", type=str, default=None, help="Arquivo/diretório para exportar CSV")

    args = parser.parse_args(argv)

    # ======================================================
    # 🔧 Configuração de log
    # ======================================================
    logger.remove()
    logger.add(sys.stdout, colorize=True, format="<green>{time:HH:mm:ss}</green> | <level>{message}</level>")
    logger.info(f"🚀 Buscando pedidos em um raio de {args.raio} km...")

    try:
        orders = SnapshotReader(args.snapshot).orders()
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"❌ Falha ao ler snapshot: {e}")
        sys.exit(1)

    candidatos = eligible_for_courier(orders, Coordinate(args.lat, args.lon), args.raio)

    df = candidates_to_dataframe(candidatos)
    if df.empty:
        logger.warning("⚠️ Nenhum pedido disponível na sua região.")
    else:
        logger.info("\n" + df.to_string(index=False, float_format=lambda v: f"{v:.2f}"))

    if args.csv:
        export_courier_feed(candidatos, args.csv)

    return candidatos


if __name__ == "__main__":
    main()
