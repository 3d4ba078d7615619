import pandas as pd
import pytest

from textreg.data.corpus import documents_from_frame, initial_split, load_corpus
from textreg.data.document import Document
from textreg.utils.errors import InsufficientDataError, InvalidInputError, UserInputError


@pytest.fixture
def frame():
    return pd.DataFrame(
        {
            "id": ["1", "2", "3", "4"],
            "text": ["The Court held", "Commerce clause", "Due process", "Equal protection"],
            "year": [1901, 1937, 1955, 1968],
        }
    )


def test_document_rejects_non_text():
    with pytest.raises(InvalidInputError):
        Document("x", None, 1999)


def test_document_rejects_non_finite_label():
    with pytest.raises(InvalidInputError):
        Document("x", "text", float("nan"))


def test_documents_from_frame(frame):
    docs = documents_from_frame(frame)
    assert [d.doc_id for d in docs] == ["1", "2", "3", "4"]
    assert docs[1].label == 1937.0


def test_missing_column(frame):
    with pytest.raises(UserInputError):
        documents_from_frame(frame, label_col="decade")


def test_missing_text_rejected(frame):
    frame.loc[2, "text"] = None
    with pytest.raises(InvalidInputError):
        documents_from_frame(frame)


def test_duplicate_ids_rejected(frame):
    frame.loc[3, "id"] = "1"
    with pytest.raises(InvalidInputError):
        documents_from_frame(frame)


@pytest.mark.parametrize("suffix", [".csv", ".jsonl"])
def test_load_corpus(tmp_path, frame, suffix):
    path = tmp_path / f"opinions{suffix}"
    if suffix == ".csv":
        frame.to_csv(path, index=False)
    else:
        frame.to_json(path, orient="records", lines=True)

    docs = load_corpus(path)
    assert len(docs) == 4
    assert docs[0].text == "The Court held"


def test_load_corpus_unsupported(tmp_path):
    path = tmp_path / "opinions.xlsx"
    path.write_text("x")
    with pytest.raises(UserInputError):
        load_corpus(path)


def test_initial_split_is_seeded_and_disjoint(corpus):
    train, test = initial_split(corpus, prop=0.75, seed=1)
    again, _ = initial_split(corpus, prop=0.75, seed=1)

    assert len(train) == 60 and len(test) == 20
    assert train == again
    assert not {d.doc_id for d in train} & {d.doc_id for d in test}


def test_initial_split_too_small():
    with pytest.raises(InsufficientDataError):
        initial_split([Document("a", "x", 1.0)], prop=0.5)
