#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd


# =============================================================================
# 配置
# =============================================================================
OUT_PATH = Path("data/synthetic_opinions.csv")

N_DOCUMENTS = 400
RANDOM_SEED = 42

# 每个词对年份的贡献（其余词为噪声）
SIGNAL = {
    "railroad": -8.0,
    "commerce": -3.0,
    "liberty": 2.0,
    "privacy": 6.0,
    "internet": 12.0,
}
NOISE = [
    "court", "statute", "contract", "equity", "tariff",
    "appeal", "petitioner", "respondent", "judgment", "jury",
]
FILLER = "the court of appeals and the district court"


# =============================================================================
# 工具函数
# =============================================================================
def make_document(rng: np.random.Generator, i: int) -> dict:
    vocab = list(SIGNAL) + NOISE
    counts = rng.poisson(1.0, size=len(vocab))

    tokens = [w for w, c in zip(vocab, counts) for _ in range(int(c))]
    rng.shuffle(tokens)

    year = 1950.0 + sum(SIGNAL[w] * c for w, c in zip(vocab, counts) if w in SIGNAL)
    year += rng.normal(0.0, 2.0)

    return {
        "id": f"op-{i:05d}",
        "text": f"{FILLER} {' '.join(tokens)}.",
        "year": round(float(year), 1),
    }


# =============================================================================
# 主流程
# =============================================================================
def main() -> None:
    rng = np.random.default_rng(RANDOM_SEED)
    rows = [make_document(rng, i) for i in range(N_DOCUMENTS)]

    OUT_PATH.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(rows).to_csv(OUT_PATH, index=False)

    print(f"[OK] wrote {len(rows)} documents -> {OUT_PATH}")


if __name__ == "__main__":
    main()
