#chegoou_engine/src/courier_dispatch/reporting/csv_exporter.py

# ============================================================
# 📤 Exportação da lista do entregador (CSV para Excel pt-BR)
# ============================================================

from datetime import datetime
from pathlib import Path
from typing import List, Optional

import pandas as pd
from loguru import logger

from courier_dispatch.domain.entities import DispatchCandidate

FEED_COLUMNS = ["order_id", "company_name", "status", "pickup_distance_km", "delivery_fee"]


def candidates_to_dataframe(candidatos: List[DispatchCandidate]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "order_id": c.order.id,
                "company_name": c.order.company_name,
                "status": c.order.status,
                "pickup_distance_km": c.pickup_distance_km,
                "delivery_fee": c.order.delivery_fee,
            }
            for c in candidatos
        ],
        columns=FEED_COLUMNS,
    )


def feed_output_path(destino: str, agora: Optional[datetime] = None) -> Path:
    """Arquivo .csv explícito ou diretório, onde o nome leva data/hora."""
    destino = Path(destino)
    if destino.suffix.lower() == ".csv":
        return destino
    agora = agora or datetime.now()
    return destino / f"pedidos_entregador_{agora:%Y%m%d_%H%M%S}.csv"


def export_courier_feed(
    candidatos: List[DispatchCandidate],
    destino: str = "output/reports",
) -> Optional[Path]:
    df = candidates_to_dataframe(candidatos)
    if df.empty:
        logger.warning("⚠️ Nenhum pedido na lista, CSV não gerado.")
        return None

    output_path = feed_output_path(destino)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # separador ';' e vírgula decimal: abre direto no Excel pt-BR
    df.round({"pickup_distance_km": 2, "delivery_fee": 2}).to_csv(
        output_path,
        index=False,
        sep=";",
        decimal=",",
        encoding="utf-8-sig",
        float_format="%.2f",
    )

    logger.success(f"✅ {len(df)} pedido(s) exportado(s) para {output_path}")
    return output_path
