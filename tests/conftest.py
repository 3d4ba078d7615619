# tests/conftest.py
from __future__ import annotations

import numpy as np
import pytest
from loguru import logger

from textreg.data.document import Document

WORDS = [
    "court", "statute", "commerce", "liberty", "railroad",
    "internet", "privacy", "contract", "tariff", "equity",
]


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


def make_corpus(n: int = 80, seed: int = 0) -> list[Document]:
    """
    Synthetic opinions: label is an exact linear function of word counts.

    year = 1900 + 6·court − 4·statute + 3·commerce
    """
    rng = np.random.default_rng(seed)
    docs = []
    for i in range(n):
        counts = rng.integers(0, 4, size=len(WORDS))
        tokens = [w for w, c in zip(WORDS, counts) for _ in range(int(c))]
        tokens += ["the", "of", "and"]
        rng.shuffle(tokens)
        label = 1900 + 6 * counts[0] - 4 * counts[1] + 3 * counts[2]
        docs.append(Document(doc_id=f"d{i}", text=" ".join(tokens) + ".", label=float(label)))
    return docs


@pytest.fixture
def corpus() -> list[Document]:
    return make_corpus()


@pytest.fixture
def opinions() -> list[Document]:
    return [
        Document("a", "The Court held that the statute was void.", 1950),
        Document("b", "The statute regulates interstate commerce; the Court agreed.", 1960),
        Document("c", "Commerce, commerce and more commerce!", 1970),
        Document("d", "Privacy is a liberty interest.", 1990),
    ]


@pytest.fixture
def corpus_factory():
    return make_corpus
