# textreg/data/corpus.py
from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

import numpy as np
import pandas as pd

from textreg.data.document import Document
from textreg.utils.errors import InsufficientDataError, InvalidInputError, UserInputError
from textreg.utils.logger import logs


def documents_from_frame(
    df: pd.DataFrame,
    *,
    id_col: str = "id",
    text_col: str = "text",
    label_col: str = "year",
) -> List[Document]:
    """
    DataFrame → Document 列表

    Rows with missing text or label are rejected, not dropped:
    a silently shrunk corpus would change the folds.
    """
    missing = [c for c in (id_col, text_col, label_col) if c not in df.columns]
    if missing:
        raise UserInputError(
            f"[Corpus] missing columns {missing}; available={list(df.columns)}"
        )

    bad = df[text_col].isna() | df[label_col].isna()
    if bad.any():
        ids = df.loc[bad, id_col].astype(str).tolist()[:5]
        raise InvalidInputError(
            f"[Corpus] {int(bad.sum())} rows with missing text/label, e.g. {ids}"
        )

    dup = df[id_col].astype(str).duplicated()
    if dup.any():
        raise InvalidInputError(
            f"[Corpus] duplicate ids: {df.loc[dup, id_col].astype(str).tolist()[:5]}"
        )

    return [
        Document(doc_id=str(i), text=t, label=y)
        for i, t, y in zip(df[id_col], df[text_col], df[label_col])
    ]


def load_corpus(
    path: str | Path,
    *,
    id_col: str = "id",
    text_col: str = "text",
    label_col: str = "year",
) -> List[Document]:
    """
    Load a corpus from .csv / .jsonl / .json / .parquet.
    """
    path = Path(path)
    if not path.exists():
        raise UserInputError(f"[Corpus] file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(path)
    elif suffix in (".jsonl", ".ndjson"):
        df = pd.read_json(path, lines=True)
    elif suffix == ".json":
        df = pd.read_json(path)
    elif suffix == ".parquet":
        df = pd.read_parquet(path)
    else:
        raise UserInputError(f"[Corpus] unsupported file type: {suffix}")

    docs = documents_from_frame(df, id_col=id_col, text_col=text_col, label_col=label_col)
    logs.info(f"[Corpus] loaded {len(docs)} documents from {path.name}")
    return docs


def initial_split(
    documents: Sequence[Document],
    *,
    prop: float = 0.75,
    seed: int = 1234,
) -> Tuple[List[Document], List[Document]]:
    """
    Seeded random train/test split.

    Returns (train, test); relative order of documents is preserved
    on both sides. Same seed → same split.
    """
    if not 0.0 < prop < 1.0:
        raise InvalidInputError(f"[Split] prop must be in (0, 1), got {prop}")

    n = len(documents)
    n_train = int(np.floor(n * prop))
    if n_train < 1 or n_train >= n:
        raise InsufficientDataError(
            f"[Split] cannot split {n} documents with prop={prop}"
        )

    rng = np.random.default_rng(seed)
    train_idx = np.sort(rng.permutation(n)[:n_train])
    mask = np.zeros(n, dtype=bool)
    mask[train_idx] = True

    train = [d for d, m in zip(documents, mask) if m]
    test = [d for d, m in zip(documents, mask) if not m]

    logs.info(f"[Split] train={len(train)} test={len(test)} seed={seed}")
    return train, test
